from outbreak.events import EventBus, OutbreakReporterObserver, PolicyReporterObserver


class Recorder:
    def __init__(self):
        self.events = []

    def on_policy_change(self, policy, day, active):
        self.events.append(("policy_change", policy.id, day, active))

    def on_vaccination_started(self, policy, day, cost):
        self.events.append(("vaccination_started", policy.id, day, cost))

    def on_game_over(self, state):
        self.events.append(("game_over", state.has_won))


def test_publish_calls_matching_handlers_only():
    bus = EventBus()
    recorder = Recorder()
    bus.subscribe(recorder)

    bus.publish("something_else", value=1)
    bus.publish("game_over", state=type("S", (), {"has_won": True})())

    assert recorder.events == [("game_over", True)]


def test_unsubscribe():
    bus = EventBus()
    recorder = Recorder()
    bus.subscribe(recorder)
    bus.unsubscribe(recorder)

    bus.publish("game_over", state=None)

    assert recorder.events == []


def test_simulation_publishes_policy_events(make_simulation):
    sim = make_simulation()
    recorder = Recorder()
    sim.bus.subscribe(recorder)

    sim.implement_policy("masks")
    sim.implement_policy("masks")
    sim.implement_policy("vaccination")
    sim.implement_policy("vaccination")

    assert recorder.events == [
        ("policy_change", "masks", 0, True),
        ("policy_change", "masks", 0, False),
        ("vaccination_started", "vaccination", 0, 10_000_000_000),
    ]


def test_reporters_print(make_simulation, capsys):
    sim = make_simulation()
    policies = PolicyReporterObserver()
    outbreak = OutbreakReporterObserver(every=2)
    sim.bus.subscribe(policies)
    sim.bus.subscribe(outbreak)

    sim.implement_policy("lockdown")
    sim.run(max_days=4)

    out = capsys.readouterr().out
    assert "Full Lockdown → ON" in out
    assert len(outbreak.lines) == 2
    assert "Day    2" in outbreak.lines[0]
    assert len(policies.lines) == 1


def test_final_summary(make_simulation, capsys):
    sim = make_simulation()
    sim.implement_policy("masks")
    sim.run(max_days=3)

    sim.final_summary()

    out = capsys.readouterr().out
    assert "FINAL RESULT" in out
    assert "masks" in out
