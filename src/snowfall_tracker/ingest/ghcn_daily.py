"""GHCN Daily CSV reader.

Reads a station export from NOAA (the CSV produced by the Climate Data
Online "Daily Summaries" download) and returns the raw snow columns.
Values are passed through as strings; parsing and trace handling happen in
the season aggregator.
"""

from __future__ import annotations

from pathlib import Path
import logging

import pandas as pd

from snowfall_tracker.config import (
    GHCN_DATE_COLUMN,
    GHCN_DEPTH_COLUMN,
    GHCN_SNOW_COLUMN,
)

logger = logging.getLogger(__name__)

COLUMNS = ["obs_date", "snow", "snow_depth"]


def read_ghcn_daily(path: str | Path) -> pd.DataFrame:
    """Read snowfall (SNOW) and snow depth (SNWD) from a GHCN Daily CSV.

    Args:
        path: Local path (or URL) of the CSV export.

    Returns:
        DataFrame with columns: obs_date, snow, snow_depth (raw strings;
        snow/snow_depth only when the export has SNOW/SNWD). Rows missing any of the columns present in the header (truncated
        lines) are dropped. Empty DataFrame if the file can't be read or
        has no DATE column.
    """
    logger.info("Reading GHCN Daily export: %s", path)

    try:
        df = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            na_values=[],
            on_bad_lines="skip",
        )
    except (OSError, ValueError):
        logger.exception("Failed to read %s", path)
        return _empty_df()

    if df.empty or GHCN_DATE_COLUMN not in df.columns:
        logger.warning("No %s column in %s", GHCN_DATE_COLUMN, path)
        return _empty_df()

    # Short rows are padded with NaN; blank cells stay as ""
    truncated = df.isna().any(axis=1)
    if truncated.any():
        logger.info("Skipped %d truncated rows", int(truncated.sum()))
        df = df[~truncated]

    columns = {"obs_date": df[GHCN_DATE_COLUMN].astype(str).str.strip()}
    for name, source in (("snow", GHCN_SNOW_COLUMN), ("snow_depth", GHCN_DEPTH_COLUMN)):
        if source in df.columns:
            columns[name] = df[source]
        else:
            logger.warning("No %s column in %s", source, path)
    result = pd.DataFrame(columns).reset_index(drop=True)

    logger.info("Read %d GHCN Daily rows from %s", len(result), path)
    return result


def _empty_df() -> pd.DataFrame:
    return pd.DataFrame(columns=COLUMNS)
