"""Layout constants used across layout modules.

Centralizes magic numbers from handles.py and routing.py.
"""

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------
BASE_OFFSET: float = 30.0
"""Perpendicular run every path makes before its first turn."""

EDGE_EXTENSION: float = 3.0
"""Extra length added to the stand-off at both ends of an edge."""

STAND_OFF: float = BASE_OFFSET + EDGE_EXTENSION
"""Total distance from an anchor to the first/last routed waypoint."""

MIN_STEPS: int = 4
"""Fewest interior staircase waypoints on a routed path."""

MAX_STEPS: int = 8
"""Most interior staircase waypoints on a routed path."""

DEFAULT_STEPS: int = 4
"""Interior waypoints used when the caller does not ask for a count."""

# ---------------------------------------------------------------------------
# Edge labels
# ---------------------------------------------------------------------------
LABEL_MAX_CHARS: int = 8
"""Characters shown before a non-hovered label is truncated."""

LABEL_ELLIPSIS: str = "..."
"""Suffix appended to truncated labels."""

FALLBACK_LABEL: str = "Edge"
"""Text drawn for an edge that has no label at all."""

LABEL_FONT_SIZE: float = 8.0
"""Font size of the label pill text."""

LABEL_CHAR_WIDTH_RATIO: float = 0.6
"""Character width as a fraction of font size for label sizing."""

LABEL_PAD_X: float = 6.0
"""Horizontal padding inside the label pill."""

LABEL_PAD_Y: float = 2.0
"""Vertical padding inside the label pill."""

DELETE_ICON_SIZE: float = 12.0
"""Width and height of the delete glyph next to the label."""

DELETE_ICON_GAP: float = 4.0
"""Gap between label text and delete glyph."""

# ---------------------------------------------------------------------------
# Handles
# ---------------------------------------------------------------------------
HANDLE_SIZE: float = 10.0
"""Base handle dimension; rectangles are derived from it."""

VERTICAL_BAND: float = 50.0
"""Height of the band that holds left/right handles, centered on the node."""

VERTICAL_NUDGE: float = 5.0
"""Upward shift applied to each staggered left/right handle."""

VERTICAL_EDGE_INSET: float = 10.0
"""Inset of right-side handles from the node's right edge."""

LEFT_HANDLE_X: float = -1.0
"""Left coordinate of left-side handles."""

TOP_HANDLE_Y: float = -3.0
"""Top coordinate of top-side handles (bottom side mirrors it)."""

HORIZONTAL_EDGE_MARGIN: float = 10.0
"""Inward shift of the last top/bottom handle segment."""

TARGET_Z_INDEX: int = 100
"""Stacking order of target handles."""

SOURCE_Z_INDEX: int = 101
"""Stacking order of source handles; always above targets."""

MIN_VERTICAL_COUNT: int = 1
"""Fewest handle pairs accepted for a left/right side."""

MIN_HORIZONTAL_COUNT: int = 2
"""Fewest segments accepted for a top/bottom side (segment 0 is skipped)."""

# ---------------------------------------------------------------------------
# Visibility
# ---------------------------------------------------------------------------
REVEALED_OPACITY: float = 0.8
"""Opacity of handles drawn by the debug overlay."""
