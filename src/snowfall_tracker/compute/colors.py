"""Season colors and display labels.

Seasons are displayed newest first. Index 0 gets the darkest blue and the
oldest season the lightest, so recent winters stand out against the
historical spread. Colors stay structured (HslColor) until the renderer
boundary, where to_css() produces the string the chart widget expects.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from snowfall_tracker.compute._coerce import as_int
from snowfall_tracker.config import (
    INVALID_LABEL,
    MAX_LABEL_YEAR,
    MAX_LIGHTNESS,
    MIN_LABEL_YEAR,
    MIN_LIGHTNESS,
    SEASON_HUE,
    SEASON_SATURATION,
)


@dataclass(frozen=True)
class HslColor:
    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0

    def with_alpha(self, alpha: float) -> HslColor:
        return replace(self, alpha=alpha)

    def to_css(self) -> str:
        """Serialize as a CSS hsl()/hsla() string."""
        h = _fmt(self.hue)
        s = _fmt(self.saturation)
        l = _fmt(self.lightness)
        if self.alpha >= 1.0:
            return f"hsl({h}, {s}%, {l}%)"
        return f"hsla({h}, {s}%, {l}%, {_fmt(self.alpha)})"


DARKEST = HslColor(SEASON_HUE, SEASON_SATURATION, MIN_LIGHTNESS)


def get_season_color(index: int, total: int) -> HslColor:
    """Color for the season at `index` out of `total` (0 = newest = darkest).

    Lightness is spread linearly from MIN_LIGHTNESS to MAX_LIGHTNESS.
    A single season (or a nonsensical total) gets the darkest color; an
    out-of-range index is clamped to the nearest end of the gradient.
    """
    total = as_int(total)
    if total is None or total <= 1:
        return DARKEST

    index = as_int(index)
    if index is None:
        index = 0
    index = min(max(index, 0), total - 1)

    lightness = MIN_LIGHTNESS + index * (MAX_LIGHTNESS - MIN_LIGHTNESS) / (total - 1)
    return HslColor(SEASON_HUE, SEASON_SATURATION, lightness)


def format_season_label(start_year: int) -> str:
    """Format a season label, e.g. 2023 -> "2023-24", 1999 -> "1999-00".

    Returns INVALID_LABEL for anything that is not an integer year in
    [MIN_LABEL_YEAR, MAX_LABEL_YEAR].
    """
    year = as_int(start_year)
    if year is None or year < MIN_LABEL_YEAR or year > MAX_LABEL_YEAR:
        return INVALID_LABEL

    return f"{year}-{(year + 1) % 100:02d}"


def _fmt(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    # repr round-trips exactly: distinct floats give distinct strings
    return repr(float(value))
