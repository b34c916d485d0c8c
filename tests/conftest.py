"""Shared test fixtures."""

from datetime import date, timedelta

import pandas as pd
import pytest

from snowfall_tracker.compute.season_calendar import day_of_season
from snowfall_tracker.compute.seasons import calculate_cumulative
from snowfall_tracker.models import DailyRecord, Season


def build_season(start_year: int, daily: list[float], first_day: int = 60) -> Season:
    """Season with one record per day starting `first_day` days after Aug 1."""
    cumulative = calculate_cumulative(daily)
    start = date(start_year, 8, 1) + timedelta(days=first_day)
    records = []
    for i, (d, c) in enumerate(zip(daily, cumulative)):
        obs_date = start + timedelta(days=i)
        records.append(DailyRecord(
            date=obs_date,
            day_of_season=day_of_season(obs_date),
            snow_depth=None,
            daily_snowfall=d,
            cumulative_snowfall=c,
        ))
    return Season(
        start_year=start_year,
        total_snowfall=cumulative[-1] if cumulative else 0.0,
        daily_data=records,
    )


@pytest.fixture
def make_season():
    return build_season


@pytest.fixture
def three_seasons() -> list[Season]:
    """Seasons 2021-22 through 2023-24, oldest first."""
    return [
        build_season(2021, [0, 2, 0, 4, 1]),
        build_season(2022, [0, 0, 6, 0, 3], first_day=70),
        build_season(2023, [1, 0, 5, 0, 7], first_day=50),
    ]


@pytest.fixture
def many_seasons() -> list[Season]:
    """One season per start year 1990-2024; older seasons get more snow."""
    seasons = []
    for year in range(1990, 2025):
        bump = float(2025 - year)
        seasons.append(build_season(year, [0, bump, 0, 2, 1], first_day=year % 40))
    return seasons


@pytest.fixture
def sample_observations() -> pd.DataFrame:
    """Raw GHCN-style rows across two seasons (Aug 2022 - Jan 2024)."""
    dates = pd.date_range("2022-10-01", periods=40, freq="D").append(
        pd.date_range("2023-11-01", periods=40, freq="D")
    )
    snow = ["0", "1.5", "", "T", "3.0"] * 16
    depth = ["0", "2", "1", "5", "4"] * 16
    return pd.DataFrame({
        "obs_date": dates.strftime("%Y-%m-%d"),
        "snow": snow,
        "snow_depth": depth,
    })
