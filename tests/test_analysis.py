import matplotlib

matplotlib.use("Agg")

from analysis.analysis_plots import plot_all
from analysis.interactive_chart import build_long_df, make_interactive_chart


def test_plot_all_writes_files(make_simulation, tmp_path):
    sim = make_simulation()
    sim.implement_policy("masks")
    sim.run(max_days=15)

    paths = plot_all(sim.state, tmp_path)

    assert {p.name for p in paths} >= {"plot_01_compartments.png", "plot_02_reproduction_number.png"}
    assert all(p.exists() for p in paths)
    assert (tmp_path / "table_time_series.csv").exists()


def test_interactive_chart(make_simulation, tmp_path):
    sim = make_simulation()
    sim.run(max_days=5)

    long_df = build_long_df(sim.state)
    make_interactive_chart(sim.state, tmp_path / "chart.html")

    assert len(long_df) == 6 * 5
    assert (tmp_path / "chart.html").exists()
