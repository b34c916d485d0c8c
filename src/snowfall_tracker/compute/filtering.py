"""Season selection by start-year range."""

from __future__ import annotations

import logging
from typing import Sequence

from snowfall_tracker.compute._coerce import as_int
from snowfall_tracker.models import Season

logger = logging.getLogger(__name__)


def filter_seasons_by_range(
    seasons: Sequence[Season],
    start_year: int,
    end_year: int,
) -> list[Season]:
    """Seasons whose start year lies in [start_year, end_year], inclusive.

    An inverted range (start_year > end_year) is swapped rather than
    treated as empty. Non-integer bounds select nothing. The returned list
    holds the same Season objects, in input order.
    """
    low = as_int(start_year)
    high = as_int(end_year)
    if low is None or high is None:
        logger.debug("Ignoring non-integer year range %r-%r", start_year, end_year)
        return []

    if low > high:
        logger.debug("Swapping inverted year range %d-%d", low, high)
        low, high = high, low

    return [s for s in seasons if low <= s.start_year <= high]


def get_year_bounds(seasons: Sequence[Season]) -> tuple[int, int] | None:
    """(min, max) start year across seasons, or None if there are none."""
    if not seasons:
        return None
    years = [s.start_year for s in seasons]
    return min(years), max(years)
