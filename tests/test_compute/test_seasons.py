"""Tests for season aggregation."""

from datetime import date
import logging
import random

import pandas as pd
import pytest

from snowfall_tracker.compute.seasons import (
    SnowfallMode,
    aggregate_seasons,
    calculate_cumulative,
    calculate_daily_snowfall,
    day_of_season,
    parse_measurement,
    season_start_year,
)


class TestSeasonCalendar:
    def test_august_starts_new_season(self):
        assert season_start_year(date(2023, 8, 1)) == 2023
        assert day_of_season(date(2023, 8, 1)) == 0

    def test_july_belongs_to_previous_season(self):
        assert season_start_year(date(2024, 7, 31)) == 2023
        # 2024 is a leap year: Aug 1 2023 -> Jul 31 2024 spans 366 days
        assert day_of_season(date(2024, 7, 31)) == 365

    def test_december_and_january(self):
        assert season_start_year(date(2023, 12, 31)) == 2023
        assert season_start_year(date(2024, 1, 1)) == 2023
        assert day_of_season(date(2024, 1, 1)) == 153

    def test_non_leap_season_end(self):
        assert day_of_season(date(2023, 7, 31)) == 364


class TestParseMeasurement:
    def test_numbers_and_numeric_strings(self):
        assert parse_measurement("3.5") == 3.5
        assert parse_measurement(" 2 ") == 2.0
        assert parse_measurement(4) == 4.0

    def test_missing_and_trace_are_zero(self):
        assert parse_measurement(None) == 0.0
        assert parse_measurement("") == 0.0
        assert parse_measurement("T") == 0.0
        assert parse_measurement(float("nan")) == 0.0

    def test_garbage_is_zero(self):
        assert parse_measurement("abc") == 0.0
        assert parse_measurement(float("inf")) == 0.0

    def test_negative_clamped(self):
        assert parse_measurement("-1.2") == 0.0


class TestCalculateDailySnowfall:
    def test_example_sequence(self):
        assert calculate_daily_snowfall([0, 5, 3, 10]) == [0, 5, 0, 7]

    def test_first_day_is_zero(self):
        assert calculate_daily_snowfall([12, 14]) == [0, 2]

    def test_empty_and_single(self):
        assert calculate_daily_snowfall([]) == []
        assert calculate_daily_snowfall([8]) == [0]

    def test_melt_never_negative(self):
        rng = random.Random(42)
        for _ in range(100):
            depths = [rng.uniform(0, 60) for _ in range(rng.randint(2, 50))]
            daily = calculate_daily_snowfall(depths)
            assert len(daily) == len(depths)
            assert daily[0] == 0
            for i in range(1, len(depths)):
                assert daily[i] == max(0.0, depths[i] - depths[i - 1])
                assert daily[i] >= 0


class TestCalculateCumulative:
    def test_running_sum(self):
        assert calculate_cumulative([0, 5, 0, 7]) == [0, 5, 5, 12]

    def test_empty(self):
        assert calculate_cumulative([]) == []

    def test_matches_prefix_sums_and_non_decreasing(self):
        rng = random.Random(7)
        for _ in range(100):
            daily = [rng.choice([0.0, 0.0, rng.uniform(0, 12)]) for _ in range(rng.randint(1, 60))]
            cumulative = calculate_cumulative(daily)
            assert cumulative[-1] == pytest.approx(sum(daily))
            running = 0.0
            for d, c in zip(daily, cumulative):
                running += d
                assert c == pytest.approx(running)
            assert all(b >= a for a, b in zip(cumulative, cumulative[1:]))

    def test_depth_pipeline_example(self):
        daily = calculate_daily_snowfall([0, 5, 3, 10])
        assert calculate_cumulative(daily) == [0, 5, 5, 12]


class TestAggregateSeasons:
    def test_direct_mode(self, sample_observations):
        seasons = aggregate_seasons(sample_observations, SnowfallMode.DIRECT)

        assert [s.start_year for s in seasons] == [2022, 2023]
        assert [s.label for s in seasons] == ["2022-23", "2023-24"]
        first = seasons[0]
        assert len(first.daily_data) == 40
        assert first.total_snowfall == pytest.approx(36.0)
        # "", "T" -> 0
        assert [r.daily_snowfall for r in first.daily_data[:5]] == [0, 1.5, 0, 0, 3.0]
        assert first.daily_data[0].date == date(2022, 10, 1)
        assert first.daily_data[0].day_of_season == 61

    def test_depth_mode(self, sample_observations):
        seasons = aggregate_seasons(sample_observations, "depth")

        first = seasons[0]
        assert [r.daily_snowfall for r in first.daily_data[:6]] == [0, 2, 0, 4, 0, 0]
        assert first.total_snowfall == pytest.approx(48.0)
        assert first.daily_data[1].snow_depth == 2.0

    def test_cumulative_invariant(self, sample_observations):
        for mode in SnowfallMode:
            for season in aggregate_seasons(sample_observations, mode):
                previous = 0.0
                for record in season.daily_data:
                    assert record.daily_snowfall >= 0
                    assert record.cumulative_snowfall == pytest.approx(previous + record.daily_snowfall)
                    previous = record.cumulative_snowfall
                assert season.total_snowfall == pytest.approx(previous)

    def test_depth_delta_restarts_each_season(self):
        dates = pd.date_range("2023-07-01", periods=62, freq="D")
        # Deep snow in July would carry into August without the per-season reset
        depth = [50.0] * 31 + [0.0] * 31
        obs = pd.DataFrame({"obs_date": dates.strftime("%Y-%m-%d"), "snow_depth": depth})

        seasons = aggregate_seasons(obs, SnowfallMode.DEPTH_DELTA, min_days=30)

        assert [s.start_year for s in seasons] == [2022, 2023]
        assert seasons[1].daily_data[0].daily_snowfall == 0
        assert seasons[1].total_snowfall == 0

    def test_unsorted_input_is_ordered(self, sample_observations):
        shuffled = sample_observations.sample(frac=1.0, random_state=3)

        seasons = aggregate_seasons(shuffled)

        dates = [r.date for r in seasons[0].daily_data]
        assert dates == sorted(dates)
        assert seasons[0].total_snowfall == pytest.approx(36.0)

    def test_malformed_dates_skipped(self, sample_observations, caplog):
        bad = pd.DataFrame({
            "obs_date": ["not-a-date", "2023-13-45", "2023", ""],
            "snow": ["5", "5", "5", "5"],
            "snow_depth": ["", "", "", ""],
        })
        obs = pd.concat([sample_observations, bad], ignore_index=True)

        with caplog.at_level(logging.INFO, logger="snowfall_tracker.compute.seasons"):
            seasons = aggregate_seasons(obs)

        assert sum(len(s.daily_data) for s in seasons) == 80
        assert "malformed" in caplog.text

    def test_short_season_excluded_and_logged(self, sample_observations, caplog):
        short = pd.DataFrame({
            "obs_date": ["2024-09-01", "2024-09-02"],
            "snow": ["1", "2"],
        })
        obs = pd.concat([sample_observations, short], ignore_index=True)

        with caplog.at_level(logging.WARNING, logger="snowfall_tracker.compute.seasons"):
            seasons = aggregate_seasons(obs)

        assert [s.start_year for s in seasons] == [2022, 2023]
        assert "2024-25" in caplog.text

    def test_min_days_override_keeps_short_season(self):
        obs = pd.DataFrame({"obs_date": ["2024-09-01", "2024-09-02"], "snow": ["1", "2"]})

        seasons = aggregate_seasons(obs, min_days=1)

        assert len(seasons) == 1
        assert seasons[0].total_snowfall == 3.0

    def test_duplicate_dates_keep_last(self):
        obs = pd.DataFrame({
            "obs_date": ["2024-09-01", "2024-09-01", "2024-09-02"],
            "snow": ["1", "4", "2"],
        })

        seasons = aggregate_seasons(obs, min_days=1)

        assert [r.daily_snowfall for r in seasons[0].daily_data] == [4, 2]

    def test_empty_input(self):
        assert aggregate_seasons(pd.DataFrame()) == []
        assert aggregate_seasons(pd.DataFrame(columns=["obs_date", "snow"])) == []

    def test_all_rows_invalid(self):
        obs = pd.DataFrame({"obs_date": ["bad", "worse"], "snow": ["1", "2"]})
        assert aggregate_seasons(obs) == []

    def test_missing_value_column_yields_zero_snowfall(self, sample_observations):
        obs = sample_observations.drop(columns=["snow"])

        seasons = aggregate_seasons(obs, SnowfallMode.DIRECT)

        assert all(s.total_snowfall == 0 for s in seasons)

    def test_date_objects_accepted(self):
        obs = pd.DataFrame({
            "obs_date": [date(2024, 9, 1), date(2024, 9, 2)],
            "snow": [1.0, 2.5],
        })

        seasons = aggregate_seasons(obs, min_days=1)

        assert seasons[0].daily_data[1].date == date(2024, 9, 2)
        assert seasons[0].total_snowfall == 3.5

    def test_unreported_depth_kept_as_none(self):
        obs = pd.DataFrame({
            "obs_date": ["2023-10-01", "2023-10-02", "2023-10-03", "2023-10-04"],
            "snow_depth": ["2", "", "T", "5"],
        })

        seasons = aggregate_seasons(obs, SnowfallMode.DEPTH_DELTA, min_days=1)

        records = seasons[0].daily_data
        assert [r.snow_depth for r in records] == [2.0, None, 0.0, 5.0]
        # the gap still counts as 0 depth for the delta chain
        assert [r.daily_snowfall for r in records] == [0, 0, 0, 5]

    def test_missing_depth_column_gives_none(self):
        obs = pd.DataFrame({"obs_date": ["2024-09-01", "2024-09-02"], "snow": ["1", "2"]})

        seasons = aggregate_seasons(obs, min_days=1)

        assert all(r.snow_depth is None for r in seasons[0].daily_data)
