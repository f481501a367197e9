from pathlib import Path

import plotly.express as px

from outbreak.history import time_series_frame
from outbreak.simulation import Simulation


def build_long_df(state):
    df = time_series_frame(state).reset_index()
    long_df = df.melt(
        id_vars=["day"],
        value_vars=["susceptible", "exposed", "infected", "recovered", "deceased"],
        var_name="compartment",
        value_name="people",
    )
    long_df["share_pct"] = (long_df["people"] / state.population * 100).round(2)
    return long_df


def make_interactive_chart(state, output_path="interactive_chart.html"):
    long_df = build_long_df(state)

    fig = px.line(
        long_df,
        x="day",
        y="people",
        color="compartment",
        hover_data={"share_pct": True},
        labels={"people": "People", "day": "Day", "share_pct": "% of population"},
        title="Outbreak progression",
    )

    # Layout más limpio
    fig.update_layout(
        template="plotly_white",
        title={
            "text": "Outbreak progression<br>"
                    f"<span style='font-size:12px;'>R0 = {state.r0:.2f}, "
                    f"total cost = ${state.total_costs / 1e9:.2f} billion</span>",
            "x": 0.5,
            "xanchor": "center",
        },
        hovermode="x unified",
        margin=dict(l=20, r=20, t=80, b=20),
    )

    fig.write_html(str(output_path))
    print(f"[OK] Gráfico interactivo guardado en '{Path(output_path).name}'")
    return fig


def main():
    sim = Simulation()
    sim.run(max_days=365)
    make_interactive_chart(sim.state)

if __name__ == "__main__":
    main()
