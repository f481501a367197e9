#VACCINATION PROGRAMME

"""
Two states only: not started and started. The programme is launched once
by a one-time policy; after the implementation delay a fixed share of the
population is vaccinated every day, taken from the susceptible pool.
Vaccinated people are counted as recovered (immune without having been
sick) so the five compartments keep adding up to the population.
"""

import math

from .policies import DEFAULT_CATALOG


#Launch the programme. The research cost is paid on the launch day.
def start_vaccination(state, policy):
    if state.is_vaccination_started:
        return state

    new = state.copy()
    new.is_vaccination_started = True
    new.vaccination_start_day = state.day
    new.vaccination_policy_id = policy.id
    new.vaccine_costs = state.vaccine_costs + policy.initial_cost
    new.total_costs = state.total_costs + policy.initial_cost
    return new


def is_vaccination_active(state, day, policy) -> bool:
    if not state.is_vaccination_started or state.vaccination_start_day is None or policy is None:
        return False
    return day > state.vaccination_start_day + policy.implementation_delay


def calculate_vaccination(state, day, catalog=None):
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    policy = catalog.get(state.vaccination_policy_id) if state.vaccination_policy_id else None

    new = state.copy()
    new.daily_vaccinated = 0

    if not is_vaccination_active(state, day, policy):
        return new

    daily_capacity = math.floor(state.population * policy.vaccination_rate)
    daily_vaccinated = max(0, min(daily_capacity, state.susceptible))

    new.daily_vaccinated = daily_vaccinated
    new.total_vaccinated = state.total_vaccinated + daily_vaccinated
    new.susceptible = state.susceptible - daily_vaccinated
    new.recovered = state.recovered + daily_vaccinated
    return new
