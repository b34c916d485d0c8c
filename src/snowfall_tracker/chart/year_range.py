"""Year range control contract.

The range-input widget is configured from `bounds` and reports changes
through `set_range`. Subscribers receive (start_year, end_year) after each
accepted change.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

RangeCallback = Callable[[int, int], None]


class YearRangeControl:
    def __init__(self, min_year: int, max_year: int) -> None:
        if min_year > max_year:
            raise ValueError(f"min_year {min_year} > max_year {max_year}")
        self.min_year = min_year
        self.max_year = max_year
        self.current_start = min_year
        self.current_end = max_year
        self._subscribers: list[RangeCallback] = []

    @property
    def bounds(self) -> dict[str, int]:
        return {"minYear": self.min_year, "maxYear": self.max_year}

    @property
    def current(self) -> tuple[int, int]:
        return self.current_start, self.current_end

    def subscribe(self, callback: RangeCallback) -> Callable[[], None]:
        """Register a change callback. Returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set_range(self, start: int, end: int) -> bool:
        """Apply a new range and notify subscribers.

        Ranges outside [min_year, max_year] or with start > end are
        rejected: nothing changes and no callback fires.
        """
        if not self._is_valid(start, end):
            logger.warning("Invalid year range %s-%s (bounds %d-%d)", start, end, self.min_year, self.max_year)
            return False

        self.current_start = start
        self.current_end = end
        for callback in list(self._subscribers):
            callback(start, end)
        return True

    def reset(self) -> bool:
        return self.set_range(self.min_year, self.max_year)

    def _is_valid(self, start: int, end: int) -> bool:
        if not isinstance(start, int) or not isinstance(end, int):
            return False
        if isinstance(start, bool) or isinstance(end, bool):
            return False
        return self.min_year <= start <= end <= self.max_year
