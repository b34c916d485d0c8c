"""Validated value types for the snowfall bundle.

These mirror the JSON bundle (camelCase keys) and are checked once, at the
load boundary, so the compute modules can rely on the season invariants:
labels derived from startYear, records ordered by date and belonging to
their season, non-negative daily snowfall, and cumulative totals that are
the running sum of daily values.
"""

from __future__ import annotations

import datetime as dt

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from snowfall_tracker.compute.colors import format_season_label
from snowfall_tracker.compute.season_calendar import day_of_season, season_start_year
from snowfall_tracker.config import MAX_DAY_OF_SEASON, UNITS

# Cumulative values are stored rounded to 0.1 inch
CUMULATIVE_TOLERANCE = 0.051


class _BundleModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class DailyRecord(_BundleModel):
    date: dt.date
    day_of_season: int = Field(ge=0, le=MAX_DAY_OF_SEASON)
    snow_depth: float | None = Field(default=None, ge=0)
    daily_snowfall: float = Field(ge=0)
    cumulative_snowfall: float = Field(ge=0)

    @model_validator(mode="after")
    def _check_day_of_season(self) -> DailyRecord:
        expected = day_of_season(self.date)
        if self.day_of_season != expected:
            raise ValueError(
                f"dayOfSeason {self.day_of_season} does not match {self.date} "
                f"(expected {expected})"
            )
        return self


class Season(_BundleModel):
    label: str = Field(
        default="",
        validation_alias=AliasChoices("label", "season"),
    )
    start_year: int
    total_snowfall: float = Field(ge=0)
    daily_data: list[DailyRecord] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _derive_label(cls, data):
        if isinstance(data, dict) and not (data.get("label") or data.get("season")):
            year = data.get("startYear", data.get("start_year"))
            data = {**data, "label": format_season_label(year)}
        return data

    @model_validator(mode="after")
    def _check_records(self) -> Season:
        expected_label = format_season_label(self.start_year)
        if self.label != expected_label:
            raise ValueError(
                f"label {self.label!r} does not match startYear {self.start_year} "
                f"(expected {expected_label!r})"
            )

        previous: DailyRecord | None = None
        for record in self.daily_data:
            if season_start_year(record.date) != self.start_year:
                raise ValueError(
                    f"{record.date} does not belong to season {self.label}"
                )

            prior_total = 0.0
            if previous is not None:
                if record.date <= previous.date:
                    raise ValueError(
                        f"Season {self.label} records out of order at {record.date}"
                    )
                prior_total = previous.cumulative_snowfall

            expected = prior_total + record.daily_snowfall
            if abs(record.cumulative_snowfall - expected) > CUMULATIVE_TOLERANCE:
                raise ValueError(
                    f"Season {self.label} cumulative snowfall on {record.date} is "
                    f"{record.cumulative_snowfall}, expected {expected:.1f}"
                )
            previous = record

        last_total = previous.cumulative_snowfall if previous is not None else 0.0
        if abs(self.total_snowfall - last_total) > CUMULATIVE_TOLERANCE:
            raise ValueError(
                f"Season {self.label} totalSnowfall {self.total_snowfall} does not "
                f"match final cumulative value {last_total}"
            )
        return self


class SnowfallBundle(_BundleModel):
    source: str
    units: str = UNITS
    data_range: str = ""
    elevation: float | None = None
    last_updated: dt.date | None = None
    note: str | None = None
    seasons: list[Season] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_seasons(self) -> SnowfallBundle:
        years = [s.start_year for s in self.seasons]
        if len(set(years)) != len(years):
            raise ValueError("Duplicate season startYear in bundle")
        if years != sorted(years):
            raise ValueError("Seasons must be ordered by startYear")
        return self
