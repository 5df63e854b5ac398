"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS pipeline and orchestrates
the functional core.

Modules:
- loader: Data directory resolution and yearly file loading
- years:  Multi-year reading with per-year isolation, monthly summary
- states: Per-state accident map
"""

from .loader import (
    resolve_data_dir,
    load_year_table,
    available_years,
)

from .years import (
    InvalidYearWarning,
    YearResult,
    read_year_results,
    read_years,
    summarize,
)

from .states import (
    map_state,
)

__all__ = [
    # Loader
    'resolve_data_dir',
    'load_year_table',
    'available_years',
    # Years
    'InvalidYearWarning',
    'YearResult',
    'read_year_results',
    'read_years',
    'summarize',
    # States
    'map_state',
]
