"""Season aggregation.

Turns a station's raw daily observations into per-season series of daily
and cumulative snowfall. Two derivation modes are supported:

    direct:  daily snowfall is the measured SNOW value.
    depth:   daily snowfall is the positive day-over-day change in snow
             depth. Day 0 of every season is 0; drops in depth (melt,
             settling) count as no new snow.

In both modes cumulative[i] = cumulative[i-1] + daily[i], starting at 0
on the first recorded day of each season.
"""

from __future__ import annotations

from enum import Enum
import logging
import math
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from snowfall_tracker.compute.colors import format_season_label
from snowfall_tracker.compute.season_calendar import (
    day_of_season,
    season_start,
    season_start_year,
)
from snowfall_tracker.config import (
    MIN_SEASON_DAYS,
    SEASON_START_MONTH,
    SNOWFALL_DECIMALS,
    TRACE_SENTINEL,
)
from snowfall_tracker.models import DailyRecord, Season

logger = logging.getLogger(__name__)

__all__ = [
    "SnowfallMode",
    "aggregate_seasons",
    "calculate_cumulative",
    "calculate_daily_snowfall",
    "day_of_season",
    "parse_measurement",
    "season_start",
    "season_start_year",
]


class SnowfallMode(str, Enum):
    DIRECT = "direct"
    DEPTH_DELTA = "depth"


def parse_measurement(value: object) -> float:
    """Parse a raw measurement cell into a non-negative float.

    Missing, blank, non-numeric, non-finite and trace ("T") values are 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value or value.upper() == TRACE_SENTINEL:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return max(0.0, number)


def calculate_daily_snowfall(depths: Sequence[float]) -> list[float]:
    """Daily snowfall from a season's ordered snow depths.

    daily[0] = 0 and daily[i] = max(0, depth[i] - depth[i-1]).
    """
    if len(depths) == 0:
        return []

    values = np.array([parse_measurement(d) for d in depths], dtype=float)
    daily = np.zeros(len(values))
    daily[1:] = np.maximum(0.0, np.diff(values))
    return daily.tolist()


def calculate_cumulative(daily: Iterable[float]) -> list[float]:
    """Running total of daily snowfall."""
    values = np.array([parse_measurement(v) for v in daily], dtype=float)
    if values.size == 0:
        return []
    return np.cumsum(values).tolist()


def aggregate_seasons(
    observations: pd.DataFrame,
    mode: SnowfallMode | str = SnowfallMode.DIRECT,
    min_days: int = MIN_SEASON_DAYS,
) -> list[Season]:
    """Group daily observations into Seasons.

    Args:
        observations: DataFrame with an ``obs_date`` column (YYYY-MM-DD
            strings or dates) and raw ``snow`` and/or ``snow_depth`` columns.
        mode: Which derivation to use (see module docstring).
        min_days: Seasons with fewer recorded days are excluded and logged.

    Returns:
        Seasons ordered by start year, each with records ordered by date.
        Empty list if there are no valid observations.
    """
    mode = SnowfallMode(mode)

    if observations.empty or "obs_date" not in observations.columns:
        logger.info("No observations to aggregate")
        return []

    df = _clean_observations(observations)
    if df.empty:
        logger.info("No valid observations to aggregate")
        return []

    value_column = "snow" if mode is SnowfallMode.DIRECT else "snow_depth"
    if value_column not in observations.columns:
        logger.warning("Column %r missing; treating all %s values as 0", value_column, mode.value)

    seasons: list[Season] = []
    excluded = 0
    for start_year, group in df.groupby("season_year", sort=True):
        label = format_season_label(int(start_year))
        if len(group) < min_days:
            logger.warning(
                "Excluding season %s: %d days of data (minimum %d)",
                label, len(group), min_days,
            )
            excluded += 1
            continue

        seasons.append(_build_season(int(start_year), label, group, mode))

    logger.info(
        "Aggregated %d seasons from %d records (%s mode, %d excluded)",
        len(seasons), len(df), mode.value, excluded,
    )
    return seasons


def _clean_observations(observations: pd.DataFrame) -> pd.DataFrame:
    """Parse dates, drop malformed rows, sort, de-duplicate, tag seasons."""
    df = observations.copy()

    raw_dates = df["obs_date"].astype(str).str.strip().str[:10]
    parsed = pd.to_datetime(raw_dates, format="%Y-%m-%d", errors="coerce")
    df["obs_date"] = parsed.where(raw_dates.str.len() == 10)

    malformed = int(df["obs_date"].isna().sum())
    if malformed:
        logger.info("Skipped %d records with malformed dates", malformed)
    df = df.dropna(subset=["obs_date"])

    duplicates = int(df["obs_date"].duplicated().sum())
    if duplicates:
        logger.info("Dropped %d duplicate dates (kept last)", duplicates)
    df = (
        df.sort_values("obs_date", kind="stable")
        .drop_duplicates(subset="obs_date", keep="last")
        .reset_index(drop=True)
    )

    if "snow" in df.columns:
        df["snow"] = df["snow"].map(parse_measurement).astype(float)
    else:
        df["snow"] = np.nan
    # Unreported depth stays NaN so the record keeps snowDepth=None
    if "snow_depth" in df.columns:
        df["snow_depth"] = df["snow_depth"].map(_parse_depth).astype(float)
    else:
        df["snow_depth"] = np.nan

    years = df["obs_date"].dt.year
    df["season_year"] = np.where(df["obs_date"].dt.month >= SEASON_START_MONTH, years, years - 1)
    df["obs_date"] = df["obs_date"].dt.date
    return df


def _parse_depth(value: object) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        return np.nan
    if isinstance(value, float) and math.isnan(value):
        return np.nan
    return parse_measurement(value)


def _build_season(
    start_year: int,
    label: str,
    group: pd.DataFrame,
    mode: SnowfallMode,
) -> Season:
    if mode is SnowfallMode.DEPTH_DELTA:
        daily = calculate_daily_snowfall(group["snow_depth"].fillna(0.0).tolist())
    else:
        daily = group["snow"].fillna(0.0).tolist()

    daily = [round(v, SNOWFALL_DECIMALS) for v in daily]
    cumulative = [round(v, SNOWFALL_DECIMALS) for v in calculate_cumulative(daily)]

    records = []
    for obs_date, depth, day_snow, total in zip(
        group["obs_date"], group["snow_depth"], daily, cumulative,
    ):
        records.append(DailyRecord(
            date=obs_date,
            day_of_season=day_of_season(obs_date),
            snow_depth=None if pd.isna(depth) else float(depth),
            daily_snowfall=day_snow,
            cumulative_snowfall=total,
        ))

    return Season(
        label=label,
        start_year=start_year,
        total_snowfall=cumulative[-1],
        daily_data=records,
    )
