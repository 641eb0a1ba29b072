"""Geometry for workflow canvases: handle layout and edge routing.

Public API:
- compute_handle_layout: Handle rectangles for one side of a node
- node_handles: Handle rectangles for all four sides
- route_edge: Orthogonal staircase path between two anchors
- RoutedPath: Routed path dataclass
"""

from payflow.layout.handles import compute_handle_layout, node_handles
from payflow.layout.routing import RoutedPath, route_edge

__all__ = [
    "RoutedPath",
    "compute_handle_layout",
    "node_handles",
    "route_edge",
]
