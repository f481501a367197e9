from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt

from outbreak.history import time_series_frame, cost_breakdown_frame, daily_new_cases
from outbreak.simulation import Simulation


COMPARTMENTS = ["susceptible", "exposed", "infected", "recovered", "deceased"]


def _save(output_dir, filename):
    path = Path(output_dir) / filename
    plt.tight_layout()
    plt.savefig(path)
    plt.close()
    print(f"[OK] {filename}")
    return path


# ============================================================
# 1. Evolución de los compartimentos
#    (How does each compartment evolve over time?)
# ============================================================
def plot_compartments(df, output_dir="."):
    if df.empty:
        print("[SEIRD] No hay datos en la serie temporal.")
        return None

    plt.figure()
    for column in COMPARTMENTS:
        plt.plot(df.index, df[column], label=column.capitalize())
    plt.xlabel("Day")
    plt.ylabel("People")
    plt.title("Compartments over time")
    plt.legend()
    return _save(output_dir, "plot_01_compartments.png")


# ============================================================
# 2. Número reproductivo efectivo
#    (Is the outbreak growing or shrinking?)
# ============================================================
def plot_reproduction_number(df, output_dir="."):
    if df.empty:
        print("[RE] No hay datos en la serie temporal.")
        return None

    plt.figure()
    plt.plot(df.index, df["re"], label="Re")
    plt.axhline(df["r0"].iloc[0], linestyle="--", label="R0")
    plt.axhline(1.0, color="grey", linewidth=0.8)
    plt.xlabel("Day")
    plt.ylabel("Reproduction number")
    plt.title("Effective reproduction number")
    plt.legend()
    return _save(output_dir, "plot_02_reproduction_number.png")


# ============================================================
# 3. Casos nuevos por día
#    (How many new cases appear every day?)
# ============================================================
def plot_daily_new_cases(new_cases, output_dir="."):
    if new_cases.empty:
        print("[CASES] No hay casos nuevos.")
        return None

    plt.figure()
    plt.bar(new_cases.index, new_cases.values)
    plt.xlabel("Day")
    plt.ylabel("New cases")
    plt.title("Daily new cases")
    return _save(output_dir, "plot_03_daily_new_cases.png")


# ============================================================
# 4. Coste económico
#    (Where did the money go?)
# ============================================================
def plot_cost_breakdown(costs, output_dir="."):
    costs = costs[costs["total_cost"] > 0]
    if costs.empty:
        print("[COSTS] No hay costes todavía.")
        return None

    plt.figure()
    plt.bar(costs["category"], costs["total_cost"] / 1e9)
    plt.ylabel("Cost (billion $)")
    plt.title("Economic cost by category")
    return _save(output_dir, "plot_04_cost_breakdown.png")


def plot_all(state, output_dir="."):
    df = time_series_frame(state)
    paths = [
        plot_compartments(df, output_dir),
        plot_reproduction_number(df, output_dir),
        plot_daily_new_cases(daily_new_cases(state), output_dir),
        plot_cost_breakdown(cost_breakdown_frame(state), output_dir),
    ]

    #Exportamos la serie temporal a CSV
    df.to_csv(Path(output_dir) / "table_time_series.csv")
    print("[OK] table_time_series.csv generado.")
    return [p for p in paths if p is not None]


# ============================================================
# MAIN
# ============================================================
def main():
    sim = Simulation()
    sim.implement_policy("masks")
    sim.run(max_days=365)
    plot_all(sim.state)
    print(pd.Series({"total_cases": sim.state.total_cases, "deceased": sim.state.deceased}))


if __name__ == "__main__":
    main()
