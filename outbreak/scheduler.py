#TIMER THAT DRIVES THE TICKS
"""
One logical timer calls the tick callback at a fixed wall-clock cadence.

The next tick is only armed after the current one has finished, so two
ticks never run at the same time. Every start() or cancel() bumps a
generation counter; a timer that belongs to an older generation does
nothing when it fires, so a stale tick can never sneak in after a pause or
a reset.

The callback receives the generation of the timer that fired. The check in
_fire() runs before the callback, so a callback that takes its own lock
must ask is_current() again once it holds it: a reset and a new start()
can happen in between.
"""

import threading


def interval_for(days_per_second) -> float:
    #Seconds between two ticks
    return 1.0 / days_per_second


class TickScheduler:
    def __init__(self, callback):
        self._callback = callback
        self._lock = threading.RLock()
        self._timer = None
        self._interval = None
        self._generation = 0

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._timer is not None

    @property
    def interval(self):
        return self._interval

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def is_current(self, generation) -> bool:
        with self._lock:
            return generation == self._generation and self._timer is not None

    #Always cancel-then-create, an old interval never coexists with a new one
    def start(self, interval):
        with self._lock:
            self._cancel_locked()
            self._interval = interval
            self._arm(self._generation)

    def cancel(self):
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self):
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _arm(self, generation):
        timer = threading.Timer(self._interval, self._fire, args=(generation,))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _fire(self, generation):
        with self._lock:
            if generation != self._generation:
                return

        #The callback runs without the scheduler lock, it may cancel us
        self._callback(generation)

        with self._lock:
            if generation == self._generation:
                self._arm(generation)
