#CORE SIMULATION ENGINE
"""
This module coordinates the following processes:
- the daily evolution of the outbreak (exposure, infection, recovery, death),
- the policies switched on and off by the user and their combined effect,
- the vaccination programme and the economic cost of the whole response,
- the timer that advances one day per tick and the win/lose conditions.

tick() is a pure function of (state, config, active policies). The
Simulation class is the only object holding mutable state: the current
config and state, the policy sets, the policy history and the timer.
"""

import threading

from .config import INITIAL_INFECTED
from .disease import calculate_disease, default_random_source
from .economics import calculate_economic_impact
from .events import EventBus
from .models import (
    SimulationConfig,
    TimeSeriesPoint,
    PolicyHistoryEntry,
    DISPLAY_FIELDS,
    TIMING_FIELDS,
)
from .parameters import derive_state, sanitize_config
from .policies import DEFAULT_CATALOG, PolicyOption, calculate_policy_effects
from .scheduler import TickScheduler, interval_for
from .vaccination import calculate_vaccination, start_vaccination

#Orchestrator status
STOPPED = "stopped"
RUNNING = "running"
GAME_OVER = "game_over"

#Kinds of config change
DISPLAY_ONLY = "display_only"
TIMING = "timing"
STRUCTURAL = "structural"


#This is a simple iterator for simulation days.
#Helps keep the daily loop explicit.
class SimulationDays:
    def __init__(self, start=1, end=30):
        self.current = start
        self.end = end

    def __iter__(self):
        return self

    def __next__(self):
        if self.current > self.end:
            raise StopIteration
        d = self.current
        self.current += 1
        return d


def classify_config_change(old, new) -> str:
    changed = old.changed_fields(new)
    if changed <= set(DISPLAY_FIELDS):
        return DISPLAY_ONLY
    if changed <= set(DISPLAY_FIELDS + TIMING_FIELDS):
        return TIMING
    return STRUCTURAL


#Returns (is_game_over, has_won)
#Both thresholds are optional, None disables that loss condition
def evaluate_outcome(state, config):
    if not config.enable_win_lose:
        return False, False

    death_fraction = state.deceased / state.population if state.population > 0 else 0.0
    if config.max_death_percentage is not None and death_fraction >= config.max_death_percentage:
        return True, False
    if config.max_economic_cost is not None and state.total_costs >= config.max_economic_cost:
        return True, False

    if state.has_started and state.exposed == 0 and state.infected == 0:
        return True, True
    return False, False


def tick(state, config, active_policies, rng=None, catalog=None):
    config = sanitize_config(config)
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    rng = rng or default_random_source()
    day = state.day + 1

    effects = calculate_policy_effects(
        active_policies,
        state.exposed,
        state.infected,
        state.population,
        catalog,
    )
    updated = calculate_disease(state, config, effects, rng)
    updated = calculate_vaccination(updated, day, catalog)
    updated = calculate_economic_impact(state, updated, config, effects, catalog)

    updated.day = day
    updated.has_started = True
    #The stages above share the previous series, the new list is built once here
    updated.time_series = state.time_series + [TimeSeriesPoint.from_state(updated)]

    is_game_over, has_won = evaluate_outcome(updated, config)
    if is_game_over:
        updated.is_game_over = True
        updated.has_won = has_won
        updated.is_running = False
    return updated


#Owns config, state, policies and the timer
class Simulation:
    def __init__(self, config=None, catalog=None, rng=None, bus=None, scheduler_factory=TickScheduler):
        self.config = sanitize_config(config or SimulationConfig())
        self.catalog = DEFAULT_CATALOG if catalog is None else catalog
        self.rng = rng or default_random_source()
        self.bus = bus or EventBus()

        """
        Reentrant Lock: tick() may end the game and cancel the timer, and
        update_config() calls reset helpers that take the same lock.
        """
        self._lock = threading.RLock()
        self.scheduler = scheduler_factory(self._on_timer)

        self.status = STOPPED
        self.state = derive_state(self.config)
        self.active_policies = set()
        self.used_policies = set()
        self._policy_history = []

    @property
    def is_running(self) -> bool:
        return self.status == RUNNING

    @property
    def policy_history(self):
        return list(self._policy_history)

    def active_policy_ids(self):
        return sorted(self.active_policies)

    def _set_status(self, status):
        self.status = status
        new = self.state.copy()
        new.is_running = status == RUNNING
        if status == RUNNING:
            new.has_started = True
        self.state = new

    def _reinitialize(self):
        self.state = derive_state(self.config)
        self.status = STOPPED
        self.active_policies = set()
        self.used_policies = set()
        self._policy_history = []

    #Start or resume
    def start(self):
        with self._lock:
            if self.status != STOPPED:
                return False
            self._set_status(RUNNING)
            self.scheduler.start(interval_for(self.config.days_per_second))
            return True

    resume = start

    #State values are kept, start() continues from here
    def pause(self):
        with self._lock:
            self.scheduler.cancel()
            if self.status == RUNNING:
                self._set_status(STOPPED)
                return True
            return False

    def toggle(self):
        with self._lock:
            if self.status == RUNNING:
                return self.pause()
            return self.start()

    def reset(self):
        with self._lock:
            self.scheduler.cancel()
            self._reinitialize()
            self.bus.publish("simulation_reset", state=self.state)
            return self.state

    #Dismissing the game over screen starts a fresh run
    def acknowledge_game_over(self):
        with self._lock:
            if self.status != GAME_OVER:
                return False
            self.reset()
            return True

    #Timer callback. The generation is checked again under our lock, a
    #reset and a new start() may have happened since the timer fired.
    def _on_timer(self, generation):
        with self._lock:
            if not self.scheduler.is_current(generation):
                return self.state
            return self.tick()

    def tick(self):
        with self._lock:
            #A timer that fired after pause/reset finds nothing to do
            if self.status != RUNNING:
                return self.state

            new = tick(self.state, self.config, self.active_policies, self.rng, self.catalog)
            if new.is_game_over:
                self.status = GAME_OVER
                self.scheduler.cancel()
            else:
                new.is_running = True
            self.state = new

            self.bus.publish("day_completed", state=new)
            if new.is_game_over:
                self.bus.publish("game_over", state=new)
            return new

    def is_policy_available(self, policy) -> bool:
        policy_id = policy.id if isinstance(policy, PolicyOption) else policy
        policy = self.catalog.get(policy_id)
        if policy is None:
            return False
        return not (policy.one_time and policy.id in self.used_policies)

    def implement_policy(self, policy):
        policy_id = policy.id if isinstance(policy, PolicyOption) else policy

        with self._lock:
            policy = self.catalog.get(policy_id)
            if policy is None:
                return False
            day = self.state.day

            #One-time programmes: only the first call counts
            if policy.one_time:
                if policy.id in self.used_policies:
                    return False
                self.used_policies.add(policy.id)
                self._policy_history.append(PolicyHistoryEntry(policy.id, policy.name, day))

                if policy.is_vaccination and not self.state.is_vaccination_started:
                    self.state = start_vaccination(self.state, policy)
                    self.bus.publish("vaccination_started", policy=policy, day=day, cost=policy.initial_cost)
                return True

            #Ongoing measures toggle
            if policy.id in self.active_policies:
                self.active_policies.discard(policy.id)
                for entry in reversed(self._policy_history):
                    if entry.id == policy.id and entry.is_active:
                        entry.end_day = day
                        break
                active = False
            else:
                self.active_policies.add(policy.id)
                self._policy_history.append(PolicyHistoryEntry(policy.id, policy.name, day))
                active = True

            self.used_policies.add(policy.id)
            self.bus.publish("policy_change", policy=policy, day=day, active=active)
            return True

    def update_config(self, new_config):
        with self._lock:
            new_config = sanitize_config(new_config)
            change = classify_config_change(self.config, new_config)

            if change == DISPLAY_ONLY:
                self.config = new_config
                return change

            if change == TIMING:
                self.config = new_config
                if self.status == RUNNING:
                    self.scheduler.start(interval_for(new_config.days_per_second))
                return change

            #Structural: stop the timer first, then rebuild everything
            was_running = self.status == RUNNING
            self.scheduler.cancel()
            self.config = new_config
            self._reinitialize()
            if was_running:
                self._set_status(RUNNING)
                self.scheduler.start(interval_for(new_config.days_per_second))
            return change

    def set_days_per_second(self, days_per_second):
        return self.update_config(self.config.replace(days_per_second=days_per_second))

    def date_for_day(self, day=None):
        return self.config.date_for_day(self.state.day if day is None else day)

    #Headless loop, advances up to max_days without the timer
    def run(self, max_days=365):
        with self._lock:
            self.scheduler.cancel()
            if self.status == GAME_OVER:
                return self.state
            self._set_status(RUNNING)

        for _ in SimulationDays(1, max_days):
            self.tick()
            if self.status != RUNNING:
                break

        with self._lock:
            if self.status == RUNNING:
                self._set_status(STOPPED)
        return self.state

    #Final Summary
    def final_summary(self):
        s = self.state
        print("\n=========== FINAL RESULT ===========")
        print(f"Day:             {s.day}")
        print(f"Initial cases:   {INITIAL_INFECTED}")
        print(f"Total cases:     {s.total_cases}")
        print(f"Susceptible:     {s.susceptible}")
        print(f"Exposed:         {s.exposed}")
        print(f"Infected:        {s.infected}")
        print(f"Recovered:       {s.recovered}")
        print(f"Deceased:        {s.deceased}")
        print(f"Vaccinated:      {s.total_vaccinated}")
        print(f"R0 / Re:         {s.r0:.2f} / {s.re:.2f}")
        print(f"Total costs:     ${s.total_costs:,.0f}")
        print(f"  deaths:        ${s.death_costs:,.0f}")
        print(f"  vaccination:   ${s.vaccine_costs:,.0f}")
        for cost in s.policy_costs:
            print(f"  {cost.id:13}: ${cost.total_cost:,.0f} ({cost.days_active} days)")
        if s.is_game_over:
            print("Outcome:         " + ("WON" if s.has_won else "LOST"))
        print("=======================================")
