#PARAMETER DERIVATION AND INITIAL STATE
"""
Converts the human facing configuration (periods in days, probabilities)
into the rate constants used by the model:

    gamma = 1 / infectious period
    sigma = 1 / latent period
    beta  = contacts per day * transmission probability
    r0    = beta / gamma

Invalid values are never raised as errors. They are replaced with safe
defaults so the simulation always stays in a displayable state.
"""

from .config import (
    POPULATION,
    INITIAL_INFECTED,
    DAYS_PER_SECOND,
    DEFAULT_INFECTIOUS_PERIOD,
    DEFAULT_LATENT_PERIOD,
)
from .models import SimulationState, TimeSeriesPoint


class DiseaseRates:
    def __init__(self, beta, gamma, sigma, r0, herd_immunity_threshold):
        self.beta = beta
        self.gamma = gamma
        self.sigma = sigma
        self.r0 = r0
        self.herd_immunity_threshold = herd_immunity_threshold


def _clamp_probability(value) -> float:
    return min(1.0, max(0.0, value))


#Returns a config where every field can be used safely in the formulas
def sanitize_config(config):
    changes = {}

    if not config.infectious_period or config.infectious_period <= 0:
        changes["infectious_period"] = DEFAULT_INFECTIOUS_PERIOD
    if not config.latent_period or config.latent_period <= 0:
        changes["latent_period"] = DEFAULT_LATENT_PERIOD

    #There must be someone left to infect besides the initial cases
    if not config.population or config.population <= INITIAL_INFECTED:
        changes["population"] = POPULATION
    elif config.population != int(config.population):
        changes["population"] = int(config.population)

    for name in ("mortality_rate", "transmission_probability"):
        value = getattr(config, name)
        if _clamp_probability(value) != value:
            changes[name] = _clamp_probability(value)

    for name in ("contacts_per_day", "economic_cost_per_death"):
        if getattr(config, name) < 0:
            changes[name] = 0

    if not config.days_per_second or config.days_per_second <= 0:
        changes["days_per_second"] = DAYS_PER_SECOND

    if not changes:
        return config
    return config.replace(**changes)


def derive_rates(config) -> DiseaseRates:
    config = sanitize_config(config)

    gamma = 1 / config.infectious_period
    sigma = 1 / config.latent_period
    beta = config.contacts_per_day * config.transmission_probability
    r0 = beta / gamma
    herd_immunity_threshold = max(0.0, 1 - 1 / r0) if r0 > 1 else 0.0

    return DiseaseRates(beta, gamma, sigma, r0, herd_immunity_threshold)


#Builds the day 0 state: everybody susceptible except the initial cases
def derive_state(config) -> SimulationState:
    config = sanitize_config(config)
    rates = derive_rates(config)

    state = SimulationState(config.population)
    state.susceptible = config.population - INITIAL_INFECTED
    state.infected = INITIAL_INFECTED
    state.total_cases = INITIAL_INFECTED

    state.beta = rates.beta
    state.gamma = rates.gamma
    state.sigma = rates.sigma
    state.r0 = rates.r0
    state.re = rates.r0
    state.herd_immunity_threshold = rates.herd_immunity_threshold

    state.effective_contacts = config.contacts_per_day
    state.effective_transmission_rate = config.transmission_probability

    state.time_series = [TimeSeriesPoint.from_state(state)]
    return state
