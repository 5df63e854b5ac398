"""
Canonical yearly data filenames (Functional Core).

Package Location: src/fars/analysis/filenames.py
"""

import re
from typing import Any, Optional

from ..config import FILENAME_PATTERN, FILENAME_TEMPLATE
from .coercion import coerce_year

_FILENAME_RE = re.compile(FILENAME_PATTERN)


def build_filename(year: Any) -> str:
    """
    Build the data filename for one year.

    Args:
        year: Year as ``int``, ``float`` or numeric string.  Decimals are
            truncated.

    Returns:
        Filename of the form ``accident_<year>.csv.bz2``.

    Raises:
        InvalidYearError: If *year* cannot be coerced to an integer.

    Example:
        >>> build_filename("2013")
        'accident_2013.csv.bz2'
    """
    return FILENAME_TEMPLATE.format(year=coerce_year(year))


def year_from_filename(filename: str) -> Optional[int]:
    """Return the year encoded in a canonical filename, or ``None``."""
    match = _FILENAME_RE.match(filename)
    if match is None:
        return None
    return int(match.group(1))
