"""Chart controller.

Owns the state of one rendered chart: the full season list, the currently
displayed subset, its axis bounds and the highlight state. Every range
change recomputes the subset and bounds from scratch and resets the
highlight, so the last change always wins.
"""

from __future__ import annotations

import logging
from typing import Sequence

from snowfall_tracker.chart.schemas import (
    AxisConfig,
    ChartData,
    ChartSeries,
    HighlightInfo,
    RangeInfo,
    SeriesPoint,
)
from snowfall_tracker.chart.year_range import YearRangeControl
from snowfall_tracker.compute._coerce import as_int
from snowfall_tracker.compute import highlight
from snowfall_tracker.compute.bounds import AxisBounds, get_axis_bounds, padded_axis_range
from snowfall_tracker.compute.colors import HslColor, format_season_label, get_season_color
from snowfall_tracker.compute.filtering import filter_seasons_by_range, get_year_bounds
from snowfall_tracker.compute.highlight import HighlightState, SeriesStyle
from snowfall_tracker.models import Season

logger = logging.getLogger(__name__)


class ChartController:
    def __init__(self, seasons: Sequence[Season]) -> None:
        # Newest first: index 0 is drawn darkest
        self.seasons: list[Season] = sorted(seasons, key=lambda s: s.start_year, reverse=True)
        self.displayed: list[Season] = list(self.seasons)
        self.bounds: AxisBounds = get_axis_bounds(self.displayed)
        self.state: HighlightState = highlight.reset()

        self.current_range: tuple[int, int] | None = get_year_bounds(self.seasons)

        self.year_range: YearRangeControl | None = None
        if self.current_range is not None:
            self.year_range = YearRangeControl(*self.current_range)
            self.year_range.subscribe(self._on_range_change)

        logger.info("Chart initialized with %d seasons", len(self.seasons))

    @property
    def colors(self) -> list[HslColor]:
        total = len(self.displayed)
        return [get_season_color(i, total) for i in range(total)]

    def apply_range(self, start_year: int, end_year: int) -> ChartData:
        """Show only seasons starting in [start_year, end_year].

        An inverted range is swapped. A range reaching past the data years
        is clamped to them and goes through the year control, so its
        subscribers and RangeInfo match what is displayed. A range holding
        no data years empties the chart and leaves the control alone.
        Non-integer years are ignored.
        """
        low, high = as_int(start_year), as_int(end_year)
        if low is None or high is None:
            logger.warning("Ignoring non-integer year range %r-%r", start_year, end_year)
            return self.chart_data()
        if low > high:
            low, high = high, low

        if self.year_range is not None:
            clamped_low = max(low, self.year_range.min_year)
            clamped_high = min(high, self.year_range.max_year)
            if clamped_low <= clamped_high:
                self.year_range.set_range(clamped_low, clamped_high)
                return self.chart_data()

        self._apply(low, high)
        return self.chart_data()

    def _apply(self, start_year: int, end_year: int) -> None:
        self.displayed = filter_seasons_by_range(self.seasons, start_year, end_year)
        self.bounds = get_axis_bounds(self.displayed)
        self.state = highlight.reset()
        self.current_range = (start_year, end_year)
        logger.debug(
            "Range %s-%s: %d seasons displayed", start_year, end_year, len(self.displayed),
        )

    def pointer_enter(self, index: int) -> list[SeriesStyle]:
        self.state = highlight.pointer_enter(self.state, index, len(self.displayed))
        return self.styles()

    def pointer_leave(self) -> list[SeriesStyle]:
        self.state = highlight.pointer_leave(self.state)
        return self.styles()

    def tap(self, index: int) -> list[SeriesStyle]:
        self.state = highlight.tap(self.state, index, len(self.displayed))
        return self.styles()

    def clear_highlight(self) -> list[SeriesStyle]:
        self.state = highlight.reset()
        return self.styles()

    def styles(self) -> list[SeriesStyle]:
        return highlight.series_styles(self.state, self.colors)

    def chart_data(self) -> ChartData:
        x_min, x_max, y_max = padded_axis_range(self.bounds)

        series = [
            _to_chart_series(season, style)
            for season, style in zip(self.displayed, self.styles())
        ]

        range_info = None
        if self.year_range is not None:
            start, end = self.current_range
            range_info = RangeInfo(
                min_year=self.year_range.min_year,
                max_year=self.year_range.max_year,
                start_year=start,
                end_year=end,
            )

        return ChartData(
            series=series,
            axis=AxisConfig(x_min=x_min, x_max=x_max, y_max=y_max),
            highlight=HighlightInfo(
                highlighted_index=self.state.highlighted_index,
                is_persistent=self.state.is_persistent,
            ),
            range=range_info,
        )

    def _on_range_change(self, start_year: int, end_year: int) -> None:
        self._apply(start_year, end_year)


def _to_chart_series(season: Season, style: SeriesStyle) -> ChartSeries:
    # Skip the flat zero run before the first snow
    points = [
        SeriesPoint(x=r.day_of_season, y=r.cumulative_snowfall)
        for r in season.daily_data
        if r.cumulative_snowfall > 0 or r.daily_snowfall > 0
    ]
    return ChartSeries(
        label=season.label or format_season_label(season.start_year),
        start_year=season.start_year,
        color=style.color.to_css(),
        border_width=style.border_width,
        opacity=style.color.alpha,
        emphasized=style.emphasized,
        points=points,
    )
