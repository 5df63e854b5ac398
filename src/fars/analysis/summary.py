"""
Monthly accident counts per year (Functional Core).

Pure functions only. No I/O, no side effects.
Input/output is DataFrames and Series.

Package Location: src/fars/analysis/summary.py

Missing vs. zero:
    Counting is group-based, so a (year, MONTH) combination with no
    accidents never appears in the sparse counts produced by
    ``count_by_month``.  ``pivot_counts`` keeps such cells as ``<NA>``
    rather than ``0`` unless the caller asks for a fill value explicitly:
    a missing cell means "no data present", not "zero accidents".
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

from ..config import REQUIRED_SUMMARY_COLUMNS
from .schema import validate_columns

_REDUCED_COLUMNS: List[str] = ["MONTH", "year"]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def reduce_year_table(df: pd.DataFrame, year: int) -> pd.DataFrame:
    """
    Tag every record with its year and keep only ``MONTH`` and ``year``.

    Args:
        df: One year's accident table; must contain a ``MONTH`` column.
        year: Normalized integer year the table was loaded for.

    Returns:
        New DataFrame with columns ``[MONTH, year]``, one row per record.

    Raises:
        ValueError: If ``MONTH`` is missing from *df*.
    """
    validate_columns(df, REQUIRED_SUMMARY_COLUMNS)

    reduced = df.loc[:, ["MONTH"]].copy()
    reduced["year"] = int(year)
    return reduced.reset_index(drop=True)


def count_by_month(tables: Sequence[Optional[pd.DataFrame]]) -> pd.Series:
    """
    Count records per ``(year, MONTH)`` across reduced tables.

    ``None`` entries (years that failed to load) are skipped.  The result is
    sparse: only combinations that occur in the data are present.

    Args:
        tables: Reduced tables as produced by ``reduce_year_table``.

    Returns:
        Integer Series named ``n`` with a ``(year, MONTH)`` MultiIndex,
        sorted by year then month.  Empty if no table holds any rows.
    """
    present = [t for t in tables if t is not None]

    if not present:
        return _empty_counts()

    combined = pd.concat(present, ignore_index=True)
    validate_columns(combined, _REDUCED_COLUMNS)

    if combined.empty:
        return _empty_counts()

    counts = combined.groupby(["year", "MONTH"], sort=True).size()
    counts.name = "n"
    return counts


def pivot_counts(
    counts: pd.Series,
    fill_value: Optional[int] = None,
) -> pd.DataFrame:
    """
    Spread sparse ``(year, MONTH)`` counts into a month-by-year table.

    Args:
        counts: Series indexed by ``(year, MONTH)`` as returned by
            ``count_by_month``.
        fill_value: Value used for combinations absent from *counts*.
            ``None`` (default) leaves them as ``<NA>``.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending) with one ``Int64`` column
        per year (ascending).  Empty (no rows, no columns) when *counts* is
        empty.
    """
    if counts.empty:
        empty = pd.DataFrame(index=pd.Index([], name="MONTH"))
        empty.columns.name = "year"
        return empty

    table = counts.unstack("year")
    table = table.sort_index().reindex(columns=sorted(table.columns))
    table = table.astype("Int64")

    if fill_value is not None:
        table = table.fillna(fill_value)

    table.index.name = "MONTH"
    table.columns.name = "year"
    return table


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _empty_counts() -> pd.Series:
    index = pd.MultiIndex.from_arrays([[], []], names=["year", "MONTH"])
    return pd.Series([], index=index, dtype="int64", name="n")

