#ECONOMIC COST OF THE OUTBREAK

from .models import PolicyCost
from .policies import DEFAULT_CATALOG


#Folds today's costs into the running totals.
#previous is the state before the tick, updated the state after disease
#and vaccination.
def calculate_economic_impact(previous, updated, config, effects, catalog=None):
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    new = updated.copy()

    #Cost of the new deaths
    new_deaths = max(0, updated.deceased - previous.deceased)
    new_death_costs = new_deaths * config.economic_cost_per_death

    #Delivery cost of today's doses
    new_vaccine_costs = 0.0
    if updated.daily_vaccinated > 0:
        policy = catalog.get(updated.vaccination_policy_id)
        unit_cost = policy.cost_per_vaccination if policy is not None else 0.0
        new_vaccine_costs = updated.daily_vaccinated * unit_cost

    #Ongoing policies, one entry per policy id
    new_policy_costs = 0.0
    for policy_id, daily_cost in effects.costs_by_policy.items():
        entry = new.policy_cost(policy_id)
        if entry is None:
            entry = PolicyCost(policy_id)
            new.policy_costs.append(entry)
        entry.days_active += 1
        entry.total_cost += daily_cost
        new_policy_costs += daily_cost

    new.death_costs = updated.death_costs + new_death_costs
    new.vaccine_costs = updated.vaccine_costs + new_vaccine_costs
    new.total_costs = updated.total_costs + new_death_costs + new_vaccine_costs + new_policy_costs
    return new
