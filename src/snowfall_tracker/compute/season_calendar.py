"""Ski-season calendar arithmetic.

A season starts on Aug 1 and ends on Jul 31 of the following year. Dates
from August through December belong to the season starting that year;
January through July belong to the season that started the year before.
"""

from __future__ import annotations

from datetime import date

from snowfall_tracker.config import SEASON_START_DAY, SEASON_START_MONTH


def season_start_year(obs_date: date) -> int:
    """Return the year in which the season containing obs_date began."""
    if obs_date.month >= SEASON_START_MONTH:
        return obs_date.year
    return obs_date.year - 1


def season_start(obs_date: date) -> date:
    """Return Aug 1 of the season containing obs_date."""
    return date(season_start_year(obs_date), SEASON_START_MONTH, SEASON_START_DAY)


def day_of_season(obs_date: date) -> int:
    """Whole days since the season start (Aug 1 = 0, at most 365)."""
    return (obs_date - season_start(obs_date)).days
