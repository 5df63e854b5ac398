"""
Geographic filtering of accident records (Functional Core).

Pure functions only. No I/O, no plotting.

Package Location: src/fars/analysis/geo.py

Sentinel Rule:
    The source data records an unknown position as an out-of-range
    coordinate rather than leaving the field blank.  LONGITUD values above
    900 and LATITUDE values above 90 are converted to NaN when a point set
    is built.  The record itself is kept: it still counts as an accident in
    the state, it just has no drawable position.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from ..config import LATITUDE_SENTINEL, LONGITUDE_SENTINEL, REQUIRED_MAP_COLUMNS
from .schema import validate_columns

Range = Tuple[float, float]

_POINT_COLUMNS: List[str] = ["LONGITUD", "LATITUDE"]


class UnknownStateError(ValueError):
    """Raised when a state code does not occur in the loaded year's data."""
    pass


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_state(df: pd.DataFrame, state: int) -> pd.DataFrame:
    """
    Return the records belonging to one state.

    Args:
        df: Full year table with at least ``STATE``, ``LATITUDE`` and
            ``LONGITUD`` columns.
        state: Integer state code.

    Returns:
        Copy of the matching rows, original column set and order.

    Raises:
        ValueError: If required columns are missing.
        UnknownStateError: If *state* does not appear in ``df['STATE']``.
    """
    validate_columns(df, REQUIRED_MAP_COLUMNS)

    mask = df["STATE"] == state
    if not mask.any():
        raise UnknownStateError(f"invalid STATE number: {state}")

    return df.loc[mask].copy()


def to_point_set(df: pd.DataFrame) -> pd.DataFrame:
    """
    Build the ``(LONGITUD, LATITUDE)`` point set with sentinels nulled.

    Args:
        df: State subset as returned by ``select_state``.

    Returns:
        DataFrame with float columns ``[LONGITUD, LATITUDE]`` and the same
        number of rows (and order) as *df*.  Sentinel coordinates are NaN.
    """
    if df.empty:
        return empty_point_set()

    points = df.loc[:, _POINT_COLUMNS].astype(float).reset_index(drop=True)
    points["LONGITUD"] = points["LONGITUD"].mask(
        points["LONGITUD"] > LONGITUDE_SENTINEL
    )
    points["LATITUDE"] = points["LATITUDE"].mask(
        points["LATITUDE"] > LATITUDE_SENTINEL
    )
    return points


def empty_point_set() -> pd.DataFrame:
    """Return a point set with the correct schema and no rows."""
    return pd.DataFrame(
        {col: pd.Series([], dtype=float) for col in _POINT_COLUMNS}
    )


def coordinate_extent(
    points: pd.DataFrame,
) -> Tuple[Optional[Range], Optional[Range]]:
    """
    Compute the bounding box of the non-missing coordinates.

    Args:
        points: Point set as returned by ``to_point_set``.

    Returns:
        ``(lat_range, lon_range)`` where each range is ``(min, max)``, or
        ``None`` when the axis has no valid value.
    """
    return (
        _range(points["LATITUDE"]),
        _range(points["LONGITUD"]),
    )


def point_pairs(
    points: pd.DataFrame,
) -> List[Tuple[Optional[float], Optional[float]]]:
    """Convert a point set to ``(lon, lat)`` tuples, ``None`` for missing."""
    return [
        (_none_if_nan(lon), _none_if_nan(lat))
        for lon, lat in zip(points["LONGITUD"], points["LATITUDE"])
    ]


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _range(values: pd.Series) -> Optional[Range]:
    valid = values.dropna()
    if valid.empty:
        return None
    return float(np.min(valid)), float(np.max(valid))


def _none_if_nan(value: float) -> Optional[float]:
    if value is None or math.isnan(value):
        return None
    return float(value)
