"""
State Accident Map (Imperative Shell)

Loads one year of records, narrows them to one state and hands the
resulting point set to a map renderer.  All filtering and sentinel handling
is delegated to ``src/fars/analysis/geo.py``; drawing is delegated to the
renderer (``PlotlyStateMap`` by default).

Package Location: src/fars/data/states.py

Usage::

    from fars.data.states import map_state

    map_state(1, 2013)          # builds and shows a PlotlyStateMap

    # or keep the figure for later use
    from fars.plotting import PlotlyStateMap

    renderer = PlotlyStateMap()
    points = map_state(1, 2013, renderer=renderer)
    renderer.show()
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import pandas as pd

from .loader import PathLike, load_year_table
from .. import config
from ..analysis.coercion import coerce_state
from ..analysis.filenames import build_filename
from ..analysis.geo import (
    coordinate_extent,
    empty_point_set,
    point_pairs,
    select_state,
    to_point_set,
)
from ..plotting.state_map import MapRenderer, PlotlyStateMap

logger = logging.getLogger(__name__)


def map_state(
    state_code: Any,
    year: Any,
    renderer: Optional[MapRenderer] = None,
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Plot the accident locations of one state for one year.

    Args:
        state_code: State code as ``int`` or numeric string.
        year: Year as ``int``, ``float`` or numeric string.
        renderer: Object implementing ``render_base_map`` and
            ``overlay_points``.  ``None`` creates a ``PlotlyStateMap`` and
            shows the finished figure; an explicit renderer is left for the
            caller to display.
        data_dir: Optional override of the data directory.

    Returns:
        Point set with float columns ``[LONGITUD, LATITUDE]``, sentinel
        coordinates as NaN.  Empty when the state has no accidents, in which
        case nothing is rendered.

    Raises:
        InvalidYearError: If *year* is not integer-coercible.
        FileNotFoundError: If the year's data file does not exist.
        InvalidStateError: If *state_code* is not integer-coercible.
        UnknownStateError: If the state code does not occur in the data.
    """
    filename = build_filename(year)
    data = load_year_table(filename, data_dir)
    state = coerce_state(state_code)

    subset = select_state(data, state)
    if subset.empty:
        logger.info(
            "no accidents to plot",
            extra={"state": state, "source": filename},
        )
        return empty_point_set()

    points = to_point_set(subset)
    lat_range, lon_range = coordinate_extent(points)

    if lat_range is None or lon_range is None:
        logger.warning(
            f"No valid coordinates for STATE {state}; using default map extent",
            extra={"state": state, "source": filename},
        )

    show = renderer is None
    if show:
        renderer = PlotlyStateMap()

    renderer.render_base_map(config.BASE_MAP, lat_range, lon_range)
    renderer.overlay_points(point_pairs(points), dict(config.MARKER_STYLE))

    if show:
        renderer.show()

    logger.debug(
        f"Rendered {len(points)} accidents for STATE {state}",
        extra={"state": state, "source": filename, "points": len(points)},
    )
    return points
