"""Pydantic models for the chart renderer contract."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _ChartModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SeriesPoint(_ChartModel):
    x: int
    y: float


class ChartSeries(_ChartModel):
    label: str
    start_year: int
    color: str
    border_width: int
    opacity: float
    emphasized: bool = False
    points: list[SeriesPoint]


class AxisConfig(_ChartModel):
    x_min: int
    x_max: int
    y_max: int


class HighlightInfo(_ChartModel):
    highlighted_index: int | None = None
    is_persistent: bool = False


class RangeInfo(_ChartModel):
    min_year: int
    max_year: int
    start_year: int
    end_year: int


class ChartData(_ChartModel):
    series: list[ChartSeries]
    axis: AxisConfig
    highlight: HighlightInfo
    range: RangeInfo | None = None
