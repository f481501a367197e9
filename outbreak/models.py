#CONFIGURATION, STATE AND RECORD CLASSES

import copy
from datetime import timedelta

from .config import (
    POPULATION,
    MORTALITY_RATE,
    INFECTIOUS_PERIOD,
    LATENT_PERIOD,
    CONTACTS_PER_DAY,
    TRANSMISSION_PROBABILITY,
    ECONOMIC_COST_PER_DEATH,
    DAYS_PER_SECOND,
    ENABLE_WIN_LOSE,
    MAX_DEATH_PERCENTAGE,
    MAX_ECONOMIC_COST,
)

"""
The simulation works on a single well-mixed population split in five
compartments (Susceptible, Exposed, Infected, Recovered, Deceased).

SimulationConfig is what the user can tune. It is never changed in place:
every change goes through replace(), which returns a new config, so the
orchestrator can compare the old and the new one and decide if the running
state has to be rebuilt.

SimulationState is the full picture of one day. The tick pipeline copies
the previous state and fills the copy, nobody else writes into it.
"""

#Fields that only change how days are displayed
DISPLAY_FIELDS = ("use_dates", "start_date")

#Fields that only change the wall-clock cadence
TIMING_FIELDS = ("days_per_second",)


class SimulationConfig:
    FIELDS = (
        "population",
        "mortality_rate",
        "infectious_period",
        "latent_period",
        "contacts_per_day",
        "transmission_probability",
        "economic_cost_per_death",
        "days_per_second",
        "enable_win_lose",
        "max_death_percentage",
        "max_economic_cost",
        "use_dates",
        "start_date",
    )

    def __init__(self,
                 population=POPULATION,
                 mortality_rate=MORTALITY_RATE,
                 infectious_period=INFECTIOUS_PERIOD,
                 latent_period=LATENT_PERIOD,
                 contacts_per_day=CONTACTS_PER_DAY,
                 transmission_probability=TRANSMISSION_PROBABILITY,
                 economic_cost_per_death=ECONOMIC_COST_PER_DEATH,
                 days_per_second=DAYS_PER_SECOND,
                 enable_win_lose=ENABLE_WIN_LOSE,
                 max_death_percentage=MAX_DEATH_PERCENTAGE,
                 max_economic_cost=MAX_ECONOMIC_COST,
                 use_dates=False,
                 start_date=None):
        self.population = population
        self.mortality_rate = mortality_rate
        self.infectious_period = infectious_period
        self.latent_period = latent_period
        self.contacts_per_day = contacts_per_day
        self.transmission_probability = transmission_probability
        self.economic_cost_per_death = economic_cost_per_death
        self.days_per_second = days_per_second

        #Win/lose surface
        self.enable_win_lose = enable_win_lose
        self.max_death_percentage = max_death_percentage
        self.max_economic_cost = max_economic_cost

        #Display only
        self.use_dates = use_dates
        self.start_date = start_date

    #Derived rates are properties so they always follow the periods
    @property
    def gamma(self) -> float:
        return 1 / self.infectious_period

    @property
    def sigma(self) -> float:
        return 1 / self.latent_period

    @property
    def beta(self) -> float:
        return self.contacts_per_day * self.transmission_probability

    def as_dict(self):
        return {name: getattr(self, name) for name in self.FIELDS}

    def replace(self, **changes):
        unknown = set(changes) - set(self.FIELDS)
        if unknown:
            raise TypeError(f"Unknown config fields: {sorted(unknown)}")
        values = self.as_dict()
        values.update(changes)
        return SimulationConfig(**values)

    def changed_fields(self, other):
        return {name for name in self.FIELDS if getattr(self, name) != getattr(other, name)}

    #Calendar date of a simulation day, or None when dates are not displayed
    def date_for_day(self, day: int):
        if not self.use_dates or self.start_date is None:
            return None
        return self.start_date + timedelta(days=day)

    def __eq__(self, other):
        if not isinstance(other, SimulationConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"SimulationConfig({args})"


#One sample of the time series read by the charts
class TimeSeriesPoint:
    __slots__ = (
        "day", "susceptible", "exposed", "infected", "recovered",
        "deceased", "total_cases", "r0", "re", "economic_cost",
    )

    def __init__(self, day, susceptible, exposed, infected, recovered,
                 deceased, total_cases, r0, re, economic_cost):
        self.day = day
        self.susceptible = susceptible
        self.exposed = exposed
        self.infected = infected
        self.recovered = recovered
        self.deceased = deceased
        self.total_cases = total_cases
        self.r0 = r0
        self.re = re
        self.economic_cost = economic_cost

    @classmethod
    def from_state(cls, state):
        return cls(
            day=state.day,
            susceptible=state.susceptible,
            exposed=state.exposed,
            infected=state.infected,
            recovered=state.recovered,
            deceased=state.deceased,
            total_cases=state.total_cases,
            r0=state.r0,
            re=state.re,
            economic_cost=state.total_costs,
        )

    def as_dict(self):
        return {name: getattr(self, name) for name in self.__slots__}


#Running cost of one ongoing policy
class PolicyCost:
    def __init__(self, policy_id, days_active=0, total_cost=0.0):
        self.id = policy_id
        self.days_active = days_active
        self.total_cost = total_cost

    def __repr__(self):
        return f"PolicyCost({self.id!r}, days_active={self.days_active}, total_cost={self.total_cost})"


#When a policy was switched on and off
class PolicyHistoryEntry:
    def __init__(self, policy_id, name, start_day, end_day=None):
        self.id = policy_id
        self.name = name
        self.start_day = start_day
        self.end_day = end_day

    @property
    def is_active(self) -> bool:
        return self.end_day is None


class SimulationState:
    def __init__(self, population):
        self.day = 0
        self.population = population

        #Compartments
        self.susceptible = population
        self.exposed = 0
        self.infected = 0
        self.recovered = 0
        self.deceased = 0
        self.total_cases = 0

        #Epidemiological parameters
        self.beta = 0.0
        self.gamma = 0.0
        self.sigma = 0.0
        self.r0 = 0.0
        self.re = 0.0
        self.herd_immunity_threshold = 0.0

        #Last tick values, for display
        self.effective_contacts = 0.0
        self.effective_transmission_rate = 0.0

        #Vaccination
        self.is_vaccination_started = False
        self.vaccination_start_day = None
        self.vaccination_policy_id = None
        self.daily_vaccinated = 0
        self.total_vaccinated = 0

        #Economic model
        self.total_costs = 0.0
        self.death_costs = 0.0
        self.vaccine_costs = 0.0
        self.policy_costs = []

        #Lifecycle flags
        self.is_running = False
        self.has_started = False
        self.is_game_over = False
        self.has_won = False

        self.time_series = []

    @property
    def compartment_total(self) -> int:
        return self.susceptible + self.exposed + self.infected + self.recovered + self.deceased

    def policy_cost(self, policy_id):
        return next((c for c in self.policy_costs if c.id == policy_id), None)

    #New state for the next tick. Policy costs are copied so the previous
    #state stays untouched. The time series is shared: it is never appended
    #in place, tick() swaps in a new list.
    def copy(self):
        new = copy.copy(self)
        new.policy_costs = [copy.copy(c) for c in self.policy_costs]
        return new
