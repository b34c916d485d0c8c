"""Snowfall Tracker - cumulative seasonal snowfall for a single station."""

__version__ = "0.1.0"

from snowfall_tracker.compute.bounds import AxisBounds, get_axis_bounds
from snowfall_tracker.compute.colors import format_season_label, get_season_color
from snowfall_tracker.compute.filtering import filter_seasons_by_range
from snowfall_tracker.compute.seasons import SnowfallMode, aggregate_seasons
from snowfall_tracker.models import DailyRecord, Season, SnowfallBundle

__all__ = [
    "AxisBounds",
    "DailyRecord",
    "Season",
    "SnowfallBundle",
    "SnowfallMode",
    "aggregate_seasons",
    "filter_seasons_by_range",
    "format_season_label",
    "get_axis_bounds",
    "get_season_color",
]
