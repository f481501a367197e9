"""
Shared fixtures for the outbreak tests.

Randomness and the timer are the two things that make the simulation hard
to test, so both can be swapped:
- FixedRandom always returns the same draw,
- FakeScheduler records start/cancel calls and fires ticks on demand.
"""

import pytest

from outbreak.disease import RandomSource
from outbreak.models import SimulationConfig
from outbreak.simulation import Simulation


class FixedRandom:
    def __init__(self, value):
        self.value = value
        self.draws = 0

    def next(self):
        self.draws += 1
        return self.value


class FakeScheduler:
    def __init__(self, callback):
        self.callback = callback
        self.calls = []
        self.active = False
        self.interval = None
        self.generation = 0

    def start(self, interval):
        self.calls.append("cancel")
        self.calls.append(("start", interval))
        self.generation += 1
        self.active = True
        self.interval = interval

    def cancel(self):
        self.calls.append("cancel")
        self.generation += 1
        self.active = False

    def is_current(self, generation):
        return self.active and generation == self.generation

    def fire(self, times=1):
        for _ in range(times):
            if self.active:
                self.callback(self.generation)


@pytest.fixture
def small_config():
    return SimulationConfig(
        population=1000,
        contacts_per_day=10,
        transmission_probability=0.02,
        infectious_period=14,
        latent_period=5,
        mortality_rate=0.05,
        economic_cost_per_death=1_000_000,
        days_per_second=10,
    )


@pytest.fixture
def make_simulation(small_config):
    def _make(config=None, seed=0, **kwargs):
        return Simulation(
            config or small_config,
            rng=RandomSource(seed),
            scheduler_factory=FakeScheduler,
            **kwargs,
        )
    return _make
