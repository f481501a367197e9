#TIME SERIES AS DATAFRAMES

import pandas as pd

from .models import TimeSeriesPoint

SAMPLE_COLUMNS = list(TimeSeriesPoint.__slots__)


#One row per simulated day, indexed by day
def time_series_frame(state, config=None) -> pd.DataFrame:
    rows = [point.as_dict() for point in state.time_series]
    df = pd.DataFrame(rows, columns=SAMPLE_COLUMNS).set_index("day")

    #Calendar dates only when the config asks for them
    if config is not None and config.use_dates and config.start_date is not None:
        df["date"] = [config.date_for_day(day) for day in df.index]
    return df


def daily_new_cases(state) -> pd.Series:
    df = time_series_frame(state)
    return df["total_cases"].diff().fillna(0).astype(int).rename("new_cases")


#Where the money went: deaths, vaccination and every ongoing policy
def cost_breakdown_frame(state) -> pd.DataFrame:
    rows = [
        {"category": "deaths", "days_active": None, "total_cost": state.death_costs},
        {"category": "vaccination", "days_active": None, "total_cost": state.vaccine_costs},
    ]
    for cost in state.policy_costs:
        rows.append({"category": cost.id, "days_active": cost.days_active, "total_cost": cost.total_cost})
    return pd.DataFrame(rows, columns=["category", "days_active", "total_cost"])


def policy_history_frame(entries) -> pd.DataFrame:
    rows = [
        {"policy_id": e.id, "name": e.name, "start_day": e.start_day, "end_day": e.end_day}
        for e in entries
    ]
    return pd.DataFrame(rows, columns=["policy_id", "name", "start_day", "end_day"])
