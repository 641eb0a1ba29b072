"""Orthogonal edge routing between two handle anchors.

Every path first leaves its node perpendicular to the boundary by a
fixed stand-off, then walks along the dominant axis in a staircase of
evenly spaced waypoints before a single turn onto the target's
stand-off point. The small steps make parallel edges easy to tell apart.
This is a deterministic geometric function; it does not avoid nodes.
"""

from __future__ import annotations

from dataclasses import dataclass

from payflow.canvas.model import Edge, Handle, Side, Workflow
from payflow.layout.constants import (
    DEFAULT_STEPS,
    DELETE_ICON_GAP,
    DELETE_ICON_SIZE,
    FALLBACK_LABEL,
    LABEL_CHAR_WIDTH_RATIO,
    LABEL_ELLIPSIS,
    LABEL_FONT_SIZE,
    LABEL_MAX_CHARS,
    LABEL_PAD_X,
    LABEL_PAD_Y,
    MAX_STEPS,
    MIN_STEPS,
    STAND_OFF,
)
from payflow.layout.geometry import Point, offset_point, opposite_side
from payflow.layout.handles import find_handle


@dataclass
class RoutedPath:
    """A routed edge: (x, y) waypoints plus label and arrowhead placement."""

    points: list[Point]
    label_point: Point
    arrow: Side
    steps: int
    label: str = FALLBACK_LABEL

    def path_data(self) -> str:
        """Return the SVG path string (one move-to, then line-tos)."""
        return path_data(self.points)


@dataclass(frozen=True)
class LabelBox:
    """Label pill and delete-glyph rectangles, centered on a label point."""

    x: float
    y: float
    width: float
    height: float
    delete_x: float
    delete_y: float
    delete_size: float

    def delete_hit(self, px: float, py: float) -> bool:
        """Check whether a canvas point lands on the delete glyph."""
        return (
            self.delete_x <= px <= self.delete_x + self.delete_size
            and self.delete_y <= py <= self.delete_y + self.delete_size
        )


def clamp_steps(steps: int | None) -> int:
    """Clamp a requested step count into [MIN_STEPS, MAX_STEPS]."""
    if steps is None:
        steps = DEFAULT_STEPS
    return max(MIN_STEPS, min(MAX_STEPS, steps))


def arrow_orientation(target_side: Side | str | None) -> Side:
    """Arrowheads point into the target, i.e. away from its side."""
    return opposite_side(target_side) or Side.RIGHT


def display_label(text: str | None, hovered: bool = False) -> str:
    """Return the label as drawn: truncated unless hovered."""
    name = text or FALLBACK_LABEL
    if hovered or len(name) <= LABEL_MAX_CHARS:
        return name
    return name[:LABEL_MAX_CHARS] + LABEL_ELLIPSIS


def label_box(label_point: Point, text: str | None, hovered: bool = False) -> LabelBox:
    """Size the label pill and its delete glyph from the drawn text."""
    shown = display_label(text, hovered)
    text_w = len(shown) * LABEL_FONT_SIZE * LABEL_CHAR_WIDTH_RATIO
    width = LABEL_PAD_X * 2 + text_w + DELETE_ICON_GAP + DELETE_ICON_SIZE
    height = LABEL_PAD_Y * 2 + max(LABEL_FONT_SIZE, DELETE_ICON_SIZE)
    x = label_point[0] - width / 2
    y = label_point[1] - height / 2
    return LabelBox(
        x=x,
        y=y,
        width=width,
        height=height,
        delete_x=x + width - LABEL_PAD_X - DELETE_ICON_SIZE,
        delete_y=label_point[1] - DELETE_ICON_SIZE / 2,
        delete_size=DELETE_ICON_SIZE,
    )


def _fmt(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.3f}".rstrip("0").rstrip(".")


def path_data(points: list[Point]) -> str:
    """Format waypoints as ``M x,y L x,y ...``."""
    return " ".join(
        f"{'M' if i == 0 else 'L'} {_fmt(x)},{_fmt(y)}"
        for i, (x, y) in enumerate(points)
    )


def route_edge(
    source_anchor: Point,
    source_side: Side | str | None,
    target_anchor: Point,
    target_side: Side | str | None,
    label: str | None = "",
    steps: int | None = None,
    hovered: bool = False,
) -> RoutedPath:
    """Route an edge as an orthogonal staircase.

    The path is ``[source_anchor, start, *steps, corner, end,
    target_anchor]`` where start/end are the anchors pushed out by the
    stand-off. The dominant axis between start and end is split into
    ``steps + 1`` parts while the cross axis stays at start; the corner
    then turns onto end. Ties between |dx| and |dy| go horizontal.
    """
    sx, sy = source_anchor
    tx, ty = target_anchor
    start = offset_point(sx, sy, source_side, STAND_OFF)
    end = offset_point(tx, ty, target_side, STAND_OFF)
    n = clamp_steps(steps)

    dx = end[0] - start[0]
    dy = end[1] - start[1]
    horizontal = abs(dx) >= abs(dy)

    interior: list[Point] = []
    if horizontal:
        step_x = dx / (n + 1)
        for i in range(1, n + 1):
            interior.append((start[0] + i * step_x, start[1]))
        interior.append((end[0], start[1]))
    else:
        step_y = dy / (n + 1)
        for i in range(1, n + 1):
            interior.append((start[0], start[1] + i * step_y))
        interior.append((start[0], end[1]))

    points = [(sx, sy), start, *interior, end, (tx, ty)]

    return RoutedPath(
        points=points,
        label_point=points[len(points) // 2],
        arrow=arrow_orientation(target_side),
        steps=n,
        label=display_label(label, hovered),
    )


def route_workflow_edge(
    workflow: Workflow,
    edge: Edge,
    handles_by_node: dict[str, list[Handle]],
    steps: int | None = None,
    hovered: bool = False,
) -> RoutedPath:
    """Route a committed edge using its endpoints' handles.

    When a handle id is missing or unknown, the edge attaches to the
    midpoint of the node's right side (source) or left side (target).
    """
    src = workflow.nodes[edge.source]
    tgt = workflow.nodes[edge.target]

    src_handle = find_handle(handles_by_node.get(src.id, []), edge.source_handle)
    if src_handle is not None:
        src_anchor, src_side = src_handle.anchor(src), src_handle.side
    else:
        src_anchor, src_side = src.side_midpoint(Side.RIGHT), Side.RIGHT

    tgt_handle = find_handle(handles_by_node.get(tgt.id, []), edge.target_handle)
    if tgt_handle is not None:
        tgt_anchor, tgt_side = tgt_handle.anchor(tgt), tgt_handle.side
    else:
        tgt_anchor, tgt_side = tgt.side_midpoint(Side.LEFT), Side.LEFT

    return route_edge(
        src_anchor,
        src_side,
        tgt_anchor,
        tgt_side,
        label=edge.label,
        steps=steps,
        hovered=hovered,
    )
