"""Offset and anchor math shared by handle layout and edge routing."""

from __future__ import annotations

from payflow.canvas.model import Side

Point = tuple[float, float]

_OPPOSITE = {
    Side.TOP: Side.BOTTOM,
    Side.BOTTOM: Side.TOP,
    Side.LEFT: Side.RIGHT,
    Side.RIGHT: Side.LEFT,
}


def offset_point(x: float, y: float, side: Side | str | None, distance: float) -> Point:
    """Displace (x, y) by *distance* along the outward normal of *side*.

    Top moves toward -y, bottom toward +y, left toward -x and right
    toward +x. An unrecognized side returns the point unchanged so that
    callers always get something renderable.
    """
    parsed = Side.parse(side)
    if parsed == Side.TOP:
        return (x, y - distance)
    if parsed == Side.BOTTOM:
        return (x, y + distance)
    if parsed == Side.LEFT:
        return (x - distance, y)
    if parsed == Side.RIGHT:
        return (x + distance, y)
    return (x, y)


def opposite_side(side: Side | str | None) -> Side | None:
    """Return the side facing *side* (top/bottom, left/right)."""
    parsed = Side.parse(side)
    if parsed is None:
        return None
    return _OPPOSITE[parsed]
