"""Handle layout: where the attachment hotspots sit on each node side.

Left and right sides use a staggered layout. A band of fixed height is
centered on the node and cut into ``2 * count`` slots; even slots hold
targets and odd slots hold sources, so each pair is offset by half a
slot. A single pair collapses into one enlarged source and one enlarged
target stacked on the same rectangle.

Top and bottom sides pair source and target on the same rectangle. The
node width is cut into ``count`` segments and segment 0 is skipped
because it collides with the rounded corner of the card. The last
segment is narrowed and pulled inward so it stays inside the node.

Sources always stack above targets, so a drag can start from a spot
that a target handle also covers.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from payflow.canvas.model import Handle, HandleRole, Side
from payflow.layout.constants import (
    HANDLE_SIZE,
    HORIZONTAL_EDGE_MARGIN,
    LEFT_HANDLE_X,
    MIN_HORIZONTAL_COUNT,
    MIN_VERTICAL_COUNT,
    SOURCE_Z_INDEX,
    TARGET_Z_INDEX,
    TOP_HANDLE_Y,
    VERTICAL_BAND,
    VERTICAL_EDGE_INSET,
    VERTICAL_NUDGE,
)

DEFAULT_HANDLE_COUNTS: dict[Side, int] = {
    Side.LEFT: 3,
    Side.RIGHT: 3,
    Side.TOP: 10,
    Side.BOTTOM: 10,
}


@dataclass(frozen=True)
class HandleLayoutConfig:
    """Tunable sizes for handle layout."""

    handle_size: float = HANDLE_SIZE
    vertical_band: float = VERTICAL_BAND
    edge_margin: float = HORIZONTAL_EDGE_MARGIN


DEFAULT_LAYOUT = HandleLayoutConfig()


def handle_id(side: Side, role: HandleRole, index: int) -> str:
    """Build the stable id of a handle, e.g. ``right-source-1``."""
    return f"{side.value}-{role.value}-{index}"


def _make(
    side: Side,
    role: HandleRole,
    index: int,
    top: float,
    left: float,
    width: float,
    height: float,
) -> Handle:
    return Handle(
        id=handle_id(side, role, index),
        side=side,
        role=role,
        index=index,
        top=top,
        left=left,
        width=width,
        height=height,
        z_index=SOURCE_Z_INDEX if role == HandleRole.SOURCE else TARGET_Z_INDEX,
    )


def _check_count(side: Side, count: int) -> None:
    minimum = MIN_VERTICAL_COUNT if side.is_vertical else MIN_HORIZONTAL_COUNT
    if count < minimum:
        raise ValueError(
            f"{side.value} side needs a handle count of at least {minimum}, "
            f"got {count}"
        )


def _vertical_handles(
    side: Side,
    count: int,
    node_width: float,
    node_height: float,
    config: HandleLayoutConfig,
) -> list[Handle]:
    size = config.handle_size
    band_top = (node_height - config.vertical_band) / 2
    width = size + VERTICAL_EDGE_INSET
    if side == Side.LEFT:
        left = LEFT_HANDLE_X
    else:
        left = node_width - size - VERTICAL_EDGE_INSET

    if count == 1:
        # One large hotspot: both roles share the whole band.
        wide = size * 2 + VERTICAL_EDGE_INSET
        if side == Side.RIGHT:
            left = node_width - wide
        return [
            _make(side, HandleRole.TARGET, 1, band_top, left, wide, config.vertical_band),
            _make(side, HandleRole.SOURCE, 1, band_top, left, wide, config.vertical_band),
        ]

    slot = config.vertical_band / (count * 2)
    handles = []
    for i in range(count * 2):
        role = HandleRole.TARGET if i % 2 == 0 else HandleRole.SOURCE
        top = band_top + slot * i - VERTICAL_NUDGE
        handles.append(_make(side, role, i // 2 + 1, top, left, width, size * 2))
    return handles


def _horizontal_handles(
    side: Side,
    count: int,
    node_width: float,
    node_height: float,
    config: HandleLayoutConfig,
) -> list[Handle]:
    size = config.handle_size
    segment = node_width / count
    height = size + VERTICAL_EDGE_INSET
    if side == Side.TOP:
        top = TOP_HANDLE_Y
    else:
        top = node_height - height - TOP_HANDLE_Y

    handles = []
    for k in range(1, count):
        left = segment * k
        width = size * 2
        if k == count - 1:
            width = size
            left -= config.edge_margin
        left = min(left, node_width - width)
        for role in (HandleRole.TARGET, HandleRole.SOURCE):
            handles.append(_make(side, role, k, top, left, width, height))
    return handles


def compute_handle_layout(
    side: Side | str,
    count: int,
    node_width: float,
    node_height: float,
    config: HandleLayoutConfig | None = None,
) -> list[Handle]:
    """Compute the ordered handle rectangles for one side of a node.

    Raises ValueError for an unknown side or a count below the side's
    minimum (1 pair for left/right, 2 segments for top/bottom).
    """
    parsed = Side.parse(side)
    if parsed is None:
        raise ValueError(f"Unknown side: {side!r}")
    _check_count(parsed, count)
    config = config or DEFAULT_LAYOUT
    if parsed.is_vertical:
        return _vertical_handles(parsed, count, node_width, node_height, config)
    return _horizontal_handles(parsed, count, node_width, node_height, config)


def node_handles(
    node_width: float,
    node_height: float,
    counts: Mapping[Side, int] | None = None,
    config: HandleLayoutConfig | None = None,
) -> list[Handle]:
    """Compute handles for all four sides (left, right, top, bottom)."""
    counts = counts if counts is not None else DEFAULT_HANDLE_COUNTS
    handles: list[Handle] = []
    for side in (Side.LEFT, Side.RIGHT, Side.TOP, Side.BOTTOM):
        count = counts.get(side)
        if count is None:
            continue
        handles.extend(
            compute_handle_layout(side, count, node_width, node_height, config)
        )
    return handles


def find_handle(handles: Iterable[Handle], wanted: str | None) -> Handle | None:
    """Look up a handle by id."""
    if not wanted:
        return None
    for handle in handles:
        if handle.id == wanted:
            return handle
    return None


def hit_test(handles: Iterable[Handle], x: float, y: float) -> Handle | None:
    """Return the topmost handle under a node-local point, if any."""
    hits = [h for h in handles if h.contains(x, y)]
    if not hits:
        return None
    return max(hits, key=lambda h: h.z_index)
