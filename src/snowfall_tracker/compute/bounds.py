"""Axis bounds for a set of season series."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence

from snowfall_tracker.config import (
    MAX_DAY_OF_SEASON,
    X_AXIS_PADDING_DAYS,
    Y_AXIS_HEADROOM,
)
from snowfall_tracker.models import Season


@dataclass(frozen=True)
class AxisBounds:
    min_day_of_season: int = 0
    max_day_of_season: int = MAX_DAY_OF_SEASON
    max_cumulative: float = 0.0


def get_axis_bounds(seasons: Sequence[Season]) -> AxisBounds:
    """Compute the data extents of the given seasons.

    The day range spans the first and last days with new snow across all
    seasons (0..365 when no season has any). max_cumulative is the largest
    cumulative total of any record, 0 for an empty set.
    """
    min_day: int | None = None
    max_day: int | None = None
    max_cumulative = 0.0

    for season in seasons:
        for record in season.daily_data:
            if record.daily_snowfall > 0:
                if min_day is None or record.day_of_season < min_day:
                    min_day = record.day_of_season
                if max_day is None or record.day_of_season > max_day:
                    max_day = record.day_of_season
            if record.cumulative_snowfall > max_cumulative:
                max_cumulative = record.cumulative_snowfall

    if min_day is None or max_day is None:
        return AxisBounds(max_cumulative=max_cumulative)

    return AxisBounds(
        min_day_of_season=min_day,
        max_day_of_season=max_day,
        max_cumulative=max_cumulative,
    )


def padded_axis_range(
    bounds: AxisBounds,
    day_padding: int = X_AXIS_PADDING_DAYS,
    headroom: float = Y_AXIS_HEADROOM,
) -> tuple[int, int, int]:
    """Return (x_min, x_max, y_max) with display padding applied.

    The x range is widened by day_padding on each side, clamped to the
    season. The y axis gets `headroom` extra and is rounded up to a whole
    inch, never below 1.
    """
    x_min = max(0, bounds.min_day_of_season - day_padding)
    x_max = min(MAX_DAY_OF_SEASON, bounds.max_day_of_season + day_padding)
    # round() first so 100 * 1.1 gives 110, not 111
    y_max = max(1, math.ceil(round(bounds.max_cumulative * (1 + headroom), 6)))
    return x_min, x_max, y_max
