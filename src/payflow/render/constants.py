"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 60.0
"""Default padding around the entire SVG canvas."""

# ---------------------------------------------------------------------------
# Node cards
# ---------------------------------------------------------------------------
CARD_INSET: float = 3.0
"""Gap between a node's box and its visible card."""

CARD_HEIGHT: float = 40.0
"""Height of the visible card inside the node box."""

CARD_TEXT_X: float = 16.0
"""Left offset of the node name inside its card."""

# ---------------------------------------------------------------------------
# Edges
# ---------------------------------------------------------------------------
ARROW_LENGTH: float = 10.0
"""Length of an arrowhead along the edge direction."""

ARROW_HALF_WIDTH: float = 3.5
"""Half the width of an arrowhead."""

LABEL_CORNER_RADIUS: float = 12.0
"""Corner radius of the label pill."""

LABEL_STROKE_WIDTH: float = 1.0
"""Stroke width of the label pill border."""

DELETE_STROKE_WIDTH: float = 1.5
"""Stroke width of the delete glyph."""
