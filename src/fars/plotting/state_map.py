"""
FARS State Accident Map (Rendering Collaborator)

No file reads, no filtering.  Accepts an already-sanitized sequence of
``(lon, lat)`` pairs and draws it over a base map of US state boundaries.

Package Location: src/fars/plotting/state_map.py

Renderer protocol:
    ``map_state`` calls ``render_base_map(region_name, lat_range, lon_range)``
    once, then ``overlay_points(points, marker_style)`` once.  Any object
    with those two methods can stand in for ``PlotlyStateMap``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Sequence, Tuple, Union

import plotly.graph_objects as go

Range = Tuple[float, float]
Point = Tuple[Optional[float], Optional[float]]

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Base maps keyed by region name, expressed as plotly ``layout.geo`` settings.
_BASE_MAPS: Dict[str, Dict[str, Any]] = {
    'state': {
        'scope': 'north america',
        'projection': dict(type='mercator'),
        'showland': True,
        'landcolor': 'white',
        'showlakes': False,
        'showcountries': True,
        'countrycolor': 'black',
        'showsubunits': True,
        'subunitcolor': 'black',
        'subunitwidth': 0.8,
    },
}

# Degenerate extents (a single point) are widened by this many degrees.
_MIN_SPAN_DEG: float = 0.5


class MapRenderer(Protocol):
    """Interface consumed by ``map_state``."""

    def render_base_map(
        self,
        region_name: str,
        lat_range: Optional[Range],
        lon_range: Optional[Range],
    ) -> None:
        ...

    def overlay_points(
        self,
        points: Sequence[Point],
        marker_style: Dict[str, Any],
    ) -> None:
        ...


class PlotlyStateMap:
    """
    Draws accident points over US state boundaries with plotly.

    The figure is built in two steps matching the renderer protocol and is
    available afterwards as ``figure``.

    Args:
        title: Optional figure title.
    """

    def __init__(self, title: Optional[str] = None) -> None:
        self.title = title
        self.figure: Optional[go.Figure] = None

    # ------------------------------------------------------------------
    # Renderer protocol
    # ------------------------------------------------------------------

    def render_base_map(
        self,
        region_name: str,
        lat_range: Optional[Range],
        lon_range: Optional[Range],
    ) -> None:
        """
        Start a new figure showing the base map at the given extent.

        Args:
            region_name: Base map identifier; only ``'state'`` is known.
            lat_range: ``(min, max)`` latitude, or ``None`` for the default
                extent.
            lon_range: ``(min, max)`` longitude, or ``None`` for the default
                extent.

        Raises:
            ValueError: If *region_name* is not a known base map.
        """
        if region_name not in _BASE_MAPS:
            raise ValueError(
                f"Unknown base map '{region_name}'. "
                f"Expected one of: {sorted(_BASE_MAPS)}"
            )

        geo = dict(_BASE_MAPS[region_name])
        if lat_range is not None:
            geo['lataxis'] = dict(range=list(_widen(lat_range)))
        if lon_range is not None:
            geo['lonaxis'] = dict(range=list(_widen(lon_range)))

        fig = go.Figure()
        fig.update_layout(
            geo=geo,
            title=self.title,
            showlegend=False,
            margin=dict(l=10, r=10, t=40 if self.title else 10, b=10),
            template='plotly_white',
        )
        self.figure = fig

    def overlay_points(
        self,
        points: Sequence[Point],
        marker_style: Dict[str, Any],
    ) -> None:
        """
        Add the accident locations as small markers.

        Pairs with a missing coordinate are passed through as gaps and are
        not drawn.

        Args:
            points: ``(lon, lat)`` pairs; ``None`` marks a missing value.
            marker_style: plotly marker properties (size, color, ...).

        Raises:
            RuntimeError: If called before ``render_base_map``.
        """
        if self.figure is None:
            raise RuntimeError("render_base_map must be called before overlay_points")

        lons = [lon for lon, _ in points]
        lats = [lat for _, lat in points]

        self.figure.add_trace(go.Scattergeo(
            lon=lons,
            lat=lats,
            mode='markers',
            marker=dict(marker_style),
            name='Accidents',
            hovertemplate=(
                "Lat: %{lat:.4f}<br>"
                "Lon: %{lon:.4f}<extra></extra>"
            ),
        ))

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def show(self) -> None:
        """Display the figure (browser or notebook, per plotly's renderer)."""
        self._require_figure().show()

    def write_html(self, path: Union[str, Path]) -> None:
        """Save the figure as a standalone HTML file."""
        self._require_figure().write_html(str(path))

    def _require_figure(self) -> go.Figure:
        if self.figure is None:
            raise RuntimeError("No map has been rendered yet")
        return self.figure


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _widen(bounds: Range) -> Range:
    lo, hi = float(bounds[0]), float(bounds[1])
    if hi - lo < _MIN_SPAN_DEG:
        mid = (lo + hi) / 2.0
        return mid - _MIN_SPAN_DEG / 2.0, mid + _MIN_SPAN_DEG / 2.0
    return lo, hi
