"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept plain values or DataFrames and return
transformed data.

Modules:
- coercion:  Year / state-code normalization to integers
- filenames: Canonical yearly filename construction
- summary:   Month-by-year accident counting and pivoting
- geo:       State filtering, coordinate sentinels, map extent
- schema:    Required-column checks shared by the modules above
"""

from .schema import validate_columns

from .coercion import (
    InvalidYearError,
    InvalidStateError,
    coerce_year,
    coerce_state,
)

from .filenames import (
    build_filename,
    year_from_filename,
)

from .summary import (
    reduce_year_table,
    count_by_month,
    pivot_counts,
)

from .geo import (
    UnknownStateError,
    select_state,
    to_point_set,
    empty_point_set,
    coordinate_extent,
    point_pairs,
)

__all__ = [
    # Schema
    'validate_columns',
    # Coercion
    'InvalidYearError',
    'InvalidStateError',
    'coerce_year',
    'coerce_state',
    # Filenames
    'build_filename',
    'year_from_filename',
    # Summary
    'reduce_year_table',
    'count_by_month',
    'pivot_counts',
    # Geo
    'UnknownStateError',
    'select_state',
    'to_point_set',
    'empty_point_set',
    'coordinate_extent',
    'point_pairs',
]
