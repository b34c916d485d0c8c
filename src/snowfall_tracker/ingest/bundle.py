"""Snowfall bundle: the static JSON document the chart loads.

Top-level keys: source, units, dataRange, elevation, lastUpdated, note,
seasons. Each season carries label, startYear, totalSnowfall and dailyData.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
import logging

from pydantic import ValidationError

from snowfall_tracker.config import (
    DEFAULT_ELEVATION_FT,
    DEFAULT_SOURCE,
    GHCN_DEPTH_COLUMN,
    GHCN_SNOW_COLUMN,
    UNITS,
)
from snowfall_tracker.compute.seasons import SnowfallMode
from snowfall_tracker.models import Season, SnowfallBundle

logger = logging.getLogger(__name__)


class BundleError(Exception):
    """The bundle could not be read or failed validation."""


def build_bundle(
    seasons: list[Season],
    source: str = DEFAULT_SOURCE,
    mode: SnowfallMode | str = SnowfallMode.DIRECT,
    elevation: float | None = DEFAULT_ELEVATION_FT,
    last_updated: date | None = None,
) -> SnowfallBundle:
    mode = SnowfallMode(mode)
    if seasons:
        data_range = f"{seasons[0].start_year}-{seasons[-1].start_year + 1}"
    else:
        data_range = ""

    if mode is SnowfallMode.DIRECT:
        note = f"Daily snowfall from the {GHCN_SNOW_COLUMN} column, snow depth from {GHCN_DEPTH_COLUMN}."
    else:
        note = f"Daily snowfall derived from positive day-over-day changes in {GHCN_DEPTH_COLUMN}."

    return SnowfallBundle(
        source=source,
        units=UNITS,
        data_range=data_range,
        elevation=elevation,
        last_updated=last_updated or date.today(),
        note=note,
        seasons=seasons,
    )


def write_bundle(bundle: SnowfallBundle, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(bundle.model_dump_json(by_alias=True, indent=2), encoding="utf-8")

    n_records = sum(len(s.daily_data) for s in bundle.seasons)
    logger.info(
        "Wrote %d seasons (%d records) to %s",
        len(bundle.seasons), n_records, path,
    )
    return path


def load_bundle(path: str | Path) -> SnowfallBundle:
    """Read and validate a bundle.

    Raises:
        BundleError: if the file is unreadable, not JSON, or violates the
            season invariants.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise BundleError(f"Could not read {path}: {e}") from e

    try:
        bundle = SnowfallBundle.model_validate_json(raw)
    except ValidationError as e:
        raise BundleError(f"Invalid bundle {path}: {e}") from e

    if bundle.units != UNITS:
        logger.warning("Bundle %s reports units %r, expected %r", path, bundle.units, UNITS)

    logger.info("Loaded %d seasons from %s", len(bundle.seasons), path)
    return bundle
