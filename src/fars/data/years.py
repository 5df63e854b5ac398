"""
Multi-Year Reader and Summary (Imperative Shell)

Loads one file per requested year and delegates all counting to the
Functional Core in ``src/fars/analysis/summary.py``.

Package Location: src/fars/data/years.py

Per-year isolation:
    ``read_year_results`` is the only place in the package where a failure
    is converted instead of propagated.  Each year is processed on its own;
    an invalid year, a missing file or a malformed table marks that one
    slot as failed and the remaining years are still read.
"""

from __future__ import annotations

import logging
import sys
import warnings
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

import pandas as pd

from .loader import PathLike, load_year_table
from ..analysis.filenames import build_filename
from ..analysis.coercion import coerce_year
from ..analysis.summary import count_by_month, pivot_counts, reduce_year_table

logger = logging.getLogger(__name__)


class InvalidYearWarning(UserWarning):
    """Issued once per requested year that could not be read."""
    pass


@dataclass
class YearResult:
    """Outcome of reading one requested year.

    Attributes:
        year:  The year exactly as requested by the caller.
        table: Reduced ``[MONTH, year]`` table, or ``None`` on failure.
        error: The exception that caused the failure, if any.
    """

    year: Any
    table: Optional[pd.DataFrame] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read_year_results(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> List[YearResult]:
    """
    Load and reduce each requested year independently.

    Args:
        years: Years as ints, floats or numeric strings.
        data_dir: Optional override of the data directory.

    Returns:
        One ``YearResult`` per input year, in input order.
    """
    return [_read_one(year, data_dir) for year in years]


def read_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Load each requested year as a reduced ``[MONTH, year]`` table.

    Failed years keep their slot as ``None``, so the output always has the
    same length and order as *years*.  Every failed slot issues its own
    ``InvalidYearWarning`` (``"invalid year: <year>"``), including repeats
    of the same year within one call or across calls.

    Args:
        years: Years as ints, floats or numeric strings.
        data_dir: Optional override of the data directory.

    Returns:
        List of reduced DataFrames or ``None``.

    Example:
        >>> tables = read_years([2013, 2014])
        >>> tables[0].columns.tolist()
        ['MONTH', 'year']
    """
    tables: List[Optional[pd.DataFrame]] = []
    for result in read_year_results(years, data_dir):
        if not result.ok:
            logger.warning(
                f"invalid year: {result.year}",
                extra={"year": str(result.year), "reason": str(result.error)},
            )
            _warn_invalid_year(result.year)
        tables.append(result.table)
    return tables


def summarize(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Args:
        years: Years as ints, floats or numeric strings.
        data_dir: Optional override of the data directory.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending) with one nullable-integer
        column per successfully read year.  A month with no accidents in a
        given year is ``<NA>``, not ``0``.  If no year could be read, an
        empty DataFrame is returned and a warning is logged.
    """
    years = list(years)
    tables = read_years(years, data_dir)

    if all(t is None for t in tables):
        logger.warning(
            "No data available for any requested year",
            extra={"years": [str(y) for y in years]},
        )

    return pivot_counts(count_by_month(tables))


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _warn_invalid_year(year: Any) -> None:
    """
    Issue ``InvalidYearWarning`` attributed to the caller of ``read_years``.

    A fresh registry is passed on every call so the ``"default"`` and
    ``"module"`` filter actions do not collapse repeated failures of the
    same year into one warning.
    """
    frame = sys._getframe(2)
    warnings.warn_explicit(
        f"invalid year: {year}",
        InvalidYearWarning,
        filename=frame.f_code.co_filename,
        lineno=frame.f_lineno,
        module=frame.f_globals.get("__name__"),
        registry=None,
        module_globals=frame.f_globals,
    )


def _read_one(year: Any, data_dir: Optional[PathLike]) -> YearResult:
    try:
        filename = build_filename(year)
        df = load_year_table(filename, data_dir)
        table = reduce_year_table(df, coerce_year(year))
    except Exception as exc:
        return YearResult(year=year, error=exc)
    return YearResult(year=year, table=table)
