#EPIDEMIC TRANSITIONS (SEIRD)
"""
Advances the compartments by one day.

The model is written with continuous rates:

    dS/dt = -beta * S * I / N
    dE/dt =  beta * S * I / N - sigma * E
    dI/dt =  sigma * E - gamma * I
    dR/dt =  gamma * I * (1 - mortality)
    dD/dt =  gamma * I * mortality

Each daily expectation is turned into a whole number of people with
stochastic rounding: floor(e) plus one more person with probability
e - floor(e). Plain truncation would lose every fractional person and a
small outbreak could never start.
"""

import math
import random


#Source of uniform draws in [0, 1). Tests replace it with a fixed sequence.
class RandomSource:
    def __init__(self, seed=None):
        self._random = random.Random(seed)

    def next(self) -> float:
        return self._random.random()


_shared_source = RandomSource()


def default_random_source():
    return _shared_source


def stochastic_round(expected, rng) -> int:
    if expected <= 0:
        return 0
    whole = math.floor(expected)
    fraction = expected - whole
    if fraction > 0 and rng.next() < fraction:
        whole += 1
    return int(whole)


class DiseaseTransitions:
    def __init__(self, detected_exposed=0, new_exposed=0, new_infectious=0,
                 new_recovered=0, new_deceased=0):
        self.detected_exposed = detected_exposed
        self.new_exposed = new_exposed
        self.new_infectious = new_infectious
        self.new_recovered = new_recovered
        self.new_deceased = new_deceased

    @property
    def total_exits(self) -> int:
        return self.new_recovered + self.new_deceased


def effective_reproduction_number(beta, gamma, susceptible, population) -> float:
    if gamma <= 0 or population <= 0:
        return 0.0
    return max(0.0, (beta * susceptible) / (population * gamma))


def calculate_transitions(state, effective_beta, mortality_rate, exposed_detection_rate, rng) -> DiseaseTransitions:
    population = state.population

    #Step 1: Detected exposed cases are isolated, they stay in the exposed
    #compartment but do not progress this tick
    detected_exposed = math.floor(state.exposed * exposed_detection_rate)
    adjusted_exposed = state.exposed - detected_exposed

    #Step 2: New exposures
    if population > 0 and state.susceptible > 0:
        expected = effective_beta * state.susceptible * state.infected / population
        new_exposed = min(stochastic_round(expected, rng), state.susceptible)
    else:
        new_exposed = 0

    #Step 3: Exposed become infectious
    expected = state.sigma * adjusted_exposed
    new_infectious = min(stochastic_round(expected, rng), adjusted_exposed)

    #Step 4: Infectious leave the compartment, split in deaths and recoveries
    expected = state.gamma * state.infected
    total_exits = min(stochastic_round(expected, rng), state.infected)
    new_deceased = min(stochastic_round(mortality_rate * total_exits, rng), total_exits)
    new_recovered = total_exits - new_deceased

    return DiseaseTransitions(
        detected_exposed=detected_exposed,
        new_exposed=new_exposed,
        new_infectious=new_infectious,
        new_recovered=new_recovered,
        new_deceased=new_deceased,
    )


#Returns a new state with the compartments of the next day
def calculate_disease(state, config, effects, rng=None):
    rng = rng or default_random_source()

    effective_contacts = config.contacts_per_day * (1 - effects.contact_reduction)
    effective_transmission_rate = config.transmission_probability * (1 - effects.transmission_reduction)
    effective_beta = effective_contacts * effective_transmission_rate

    t = calculate_transitions(
        state,
        effective_beta,
        config.mortality_rate,
        effects.exposed_detection_rate,
        rng,
    )

    new = state.copy()
    new.susceptible = max(0, state.susceptible - t.new_exposed)
    new.exposed = max(0, state.exposed + t.new_exposed - t.new_infectious)
    new.infected = max(0, state.infected + t.new_infectious - t.total_exits)
    new.recovered = state.recovered + t.new_recovered
    new.deceased = state.deceased + t.new_deceased
    new.total_cases = state.total_cases + t.new_exposed

    new.re = effective_reproduction_number(effective_beta, state.gamma, new.susceptible, state.population)
    new.effective_contacts = effective_contacts
    new.effective_transmission_rate = effective_transmission_rate
    return new
