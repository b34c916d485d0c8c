"""Series highlight state.

Two input modes can emphasize a series:

    hover: transient, follows the pointer (desktop).
    tap:   persistent toggle (touch). Tapping the locked series again
           clears it; tapping another series moves the lock.

They are tracked as separate layers. While a series is tap-locked it stays
emphasized regardless of where the pointer is; hover only shows through
when nothing is locked.

Transitions are pure functions returning a new HighlightState. Indexes
outside [0, series_count) leave the state unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from snowfall_tracker.compute._coerce import as_int
from snowfall_tracker.compute.colors import HslColor
from snowfall_tracker.config import (
    DEFAULT_BORDER_WIDTH,
    DIMMED_ALPHA,
    HIGHLIGHT_BORDER_WIDTH,
)


class HighlightMode(str, Enum):
    NORMAL = "normal"
    HOVER = "hover"
    LOCKED = "locked"


@dataclass(frozen=True)
class HighlightState:
    hover_index: int | None = None
    locked_index: int | None = None

    @property
    def highlighted_index(self) -> int | None:
        if self.locked_index is not None:
            return self.locked_index
        return self.hover_index

    @property
    def is_persistent(self) -> bool:
        return self.locked_index is not None

    @property
    def mode(self) -> HighlightMode:
        if self.locked_index is not None:
            return HighlightMode.LOCKED
        if self.hover_index is not None:
            return HighlightMode.HOVER
        return HighlightMode.NORMAL


NORMAL = HighlightState()


@dataclass(frozen=True)
class SeriesStyle:
    color: HslColor
    border_width: int
    emphasized: bool = False


def reset() -> HighlightState:
    return NORMAL


def pointer_enter(state: HighlightState, index: int, series_count: int) -> HighlightState:
    index = _valid_index(index, series_count)
    if index is None:
        return state
    return HighlightState(hover_index=index, locked_index=state.locked_index)


def pointer_leave(state: HighlightState) -> HighlightState:
    return HighlightState(hover_index=None, locked_index=state.locked_index)


def tap(state: HighlightState, index: int, series_count: int) -> HighlightState:
    index = _valid_index(index, series_count)
    if index is None:
        return state
    if state.locked_index == index:
        return NORMAL
    return HighlightState(hover_index=state.hover_index, locked_index=index)


def series_styles(state: HighlightState, colors: Sequence[HslColor]) -> list[SeriesStyle]:
    """Per-series emphasis directives for the renderer.

    The active series is drawn thicker at full opacity and every other
    series is dimmed. With nothing active all series use default styling.
    """
    active = state.highlighted_index
    if active is None or active >= len(colors):
        return [SeriesStyle(color=c.with_alpha(1.0), border_width=DEFAULT_BORDER_WIDTH) for c in colors]

    styles = []
    for i, color in enumerate(colors):
        if i == active:
            styles.append(SeriesStyle(
                color=color.with_alpha(1.0),
                border_width=HIGHLIGHT_BORDER_WIDTH,
                emphasized=True,
            ))
        else:
            styles.append(SeriesStyle(
                color=color.with_alpha(DIMMED_ALPHA),
                border_width=DEFAULT_BORDER_WIDTH,
            ))
    return styles


def _valid_index(index: object, series_count: int) -> int | None:
    index = as_int(index)
    if index is None or not 0 <= index < series_count:
        return None
    return index
