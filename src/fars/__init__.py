"""
FARS - Fatality Analysis Reporting System accident summaries

A small Python package for yearly traffic-accident files using the
Functional Core, Imperative Shell architecture.

Structure:
- analysis/ : Functional Core (coercion, filenames, counting, geo filtering)
- data/     : Imperative Shell (file loading, multi-year reads, state maps)
- plotting/ : Map rendering with plotly
- utils/    : Logging helpers
"""

from .analysis import (
    InvalidYearError,
    InvalidStateError,
    UnknownStateError,
    build_filename,
)
from .data import (
    InvalidYearWarning,
    YearResult,
    available_years,
    load_year_table,
    map_state,
    read_year_results,
    read_years,
    summarize,
)
from .plotting import PlotlyStateMap

__version__ = "0.1.0"

__all__ = [
    'InvalidYearError',
    'InvalidStateError',
    'UnknownStateError',
    'build_filename',
    'InvalidYearWarning',
    'YearResult',
    'available_years',
    'load_year_table',
    'map_state',
    'read_year_results',
    'read_years',
    'summarize',
    'PlotlyStateMap',
]
