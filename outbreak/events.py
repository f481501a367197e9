#EVENTBUS AND OBSERVERS

import threading


class EventBus:
    def __init__(self):
        self._lock = threading.Lock()

        #List of all observers that are listening for events
        self._observers = []

    def subscribe(self, observer):
        #When the observer subscribes, we add it safely under the lock
        with self._lock:
            self._observers.append(observer)

    def unsubscribe(self, observer):
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def publish(self, event: str, **data):
        #When an important event happens, announce it
        with self._lock:
            observers = list(self._observers)
        for obs in observers:

            #Look for a function that matches the event
            handler = getattr(obs, f"on_{event}", None)

            #If the observer has that function run it
            if callable(handler):
                handler(**data)


#Prints every policy switched on or off and the vaccination launch
class PolicyReporterObserver:
    def __init__(self):
        self.lines = []

    def _report(self, line):
        self.lines.append(line)
        print(line)

    def on_policy_change(self, policy, day, active: bool):
        status = "ON" if active else "OFF"
        self._report(f"   • Day {day}: {policy.name} → {status}")

    def on_vaccination_started(self, policy, day, cost):
        self._report(
            f"   • Day {day}: {policy.name} launched "
            f"(effective after day {day + policy.implementation_delay}, cost ${cost:,.0f})"
        )


#Prints a daily line every `every` days and the final outcome
class OutbreakReporterObserver:
    def __init__(self, every=10):
        self.every = every
        self.lines = []

    def _report(self, line):
        self.lines.append(line)
        print(line)

    def on_day_completed(self, state):
        if self.every <= 0 or state.day % self.every != 0:
            return
        self._report(
            f"   - Day {state.day:4} | S: {state.susceptible:8} | E: {state.exposed:6} | "
            f"I: {state.infected:6} | R: {state.recovered:8} | D: {state.deceased:6} | "
            f"Re: {state.re:5.2f}"
        )

    def on_game_over(self, state):
        result = "OUTBREAK CONTAINED" if state.has_won else "GAME OVER"
        self._report(f"\n{result} on day {state.day}")

    def on_simulation_reset(self, state):
        self._report(f"\nSimulation reset. R0 = {state.r0:.2f}")
