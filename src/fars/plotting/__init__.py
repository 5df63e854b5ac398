"""
FARS Plotting Package

Rendering only – no file reads, no filtering.  Accepts sanitized point
sequences and builds ``plotly.graph_objects.Figure`` objects.

Modules:
    state_map: Accident locations over US state boundaries, implementing
               the ``render_base_map`` / ``overlay_points`` renderer
               protocol used by ``fars.data.states.map_state``.
"""

from .state_map import MapRenderer, PlotlyStateMap

__all__ = [
    'MapRenderer',
    'PlotlyStateMap',
]
