"""
Integer coercion for year and state arguments (Functional Core).

Years and state codes arrive either as numbers or as text.  Both are
normalized to ``int`` at the boundary of every public operation; decimals
are truncated toward zero, so ``2013.9`` and ``"2013.9"`` become ``2013``.

Package Location: src/fars/analysis/coercion.py
"""

import math
import numbers
from typing import Any


class InvalidYearError(ValueError):
    """Raised when a year argument cannot be coerced to an integer."""
    pass


class InvalidStateError(ValueError):
    """Raised when a state code argument cannot be coerced to an integer."""
    pass


def coerce_year(value: Any) -> int:
    """
    Normalize a year given as a number or string to ``int``.

    Args:
        value: Year as ``int``, ``float`` or numeric string.

    Returns:
        The year as an integer.

    Raises:
        InvalidYearError: If *value* is not integer-coercible.
    """
    try:
        return _coerce_int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidYearError(f"invalid year: {value!r}")


def coerce_state(value: Any) -> int:
    """
    Normalize a state code given as a number or string to ``int``.

    Raises:
        InvalidStateError: If *value* is not integer-coercible.
    """
    try:
        return _coerce_int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidStateError(f"invalid STATE number: {value!r}")


def _coerce_int(value: Any) -> int:
    # bool is an Integral subclass but never a meaningful year or state
    if isinstance(value, bool) or value is None:
        raise TypeError(f"cannot coerce {type(value).__name__} to int")

    if isinstance(value, numbers.Integral):
        return int(value)

    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            raise ValueError(f"non-finite value: {value}")
        return int(value)

    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            number = float(text)
            if not math.isfinite(number):
                raise ValueError(f"non-finite value: {value}")
            return int(number)

    raise TypeError(f"cannot coerce {type(value).__name__} to int")
