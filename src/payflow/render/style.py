"""Theme and style constants for workflow rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a workflow canvas."""

    name: str
    background_color: str
    node_fill: str
    node_stroke: str
    node_stroke_width: float
    node_radius: float
    node_text_color: str
    font_family: str
    node_font_size: float
    edge_color: str
    edge_width: float
    label_fill: str
    label_stroke: str
    label_text_color: str
    delete_color: str = "#e53e3e"
    # Handle overlay (debugging aid)
    target_handle_color: str = "rgba(255, 0, 0, 0.8)"
    source_handle_color: str = "rgba(0, 255, 0, 0.8)"
