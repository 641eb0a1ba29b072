"""SVG generation for workflow canvases using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from payflow.canvas.model import HandleRole, Side
from payflow.canvas.session import EditorSession
from payflow.layout.constants import LABEL_FONT_SIZE, LABEL_PAD_X
from payflow.layout.routing import RoutedPath, label_box
from payflow.render.constants import (
    ARROW_HALF_WIDTH,
    ARROW_LENGTH,
    CANVAS_PADDING,
    CARD_HEIGHT,
    CARD_INSET,
    CARD_TEXT_X,
    DELETE_STROKE_WIDTH,
    LABEL_CORNER_RADIUS,
    LABEL_STROKE_WIDTH,
)
from payflow.render.style import Theme


def render_svg(
    session: EditorSession,
    theme: Theme,
    width: int | None = None,
    height: int | None = None,
    padding: float = CANVAS_PADDING,
    show_handles: bool = False,
    hovered_edges: set[str] | None = None,
) -> str:
    """Render a workflow canvas to an SVG string."""
    workflow = session.workflow
    if not workflow.nodes:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    hovered_edges = hovered_edges or set()
    routes = [
        (edge.id, session.route(edge, hovered=edge.id in hovered_edges))
        for edge in workflow.edges
        if edge.source in workflow.nodes and edge.target in workflow.nodes
    ]

    xs: list[float] = []
    ys: list[float] = []
    for node in workflow.nodes.values():
        xs += [node.x, node.x + node.width]
        ys += [node.y, node.y + node.height]
    for _edge_id, route in routes:
        xs += [x for x, _ in route.points]
        ys += [y for _, y in route.points]

    min_x, min_y = min(xs) - padding, min(ys) - padding
    svg_width = width or int(max(xs) + padding - min_x)
    svg_height = height or int(max(ys) + padding - min_y)

    d = draw.Drawing(svg_width, svg_height, origin=(min_x, min_y))
    d.append(draw.Rectangle(
        min_x, min_y, svg_width, svg_height, fill=theme.background_color,
    ))

    markers = _arrow_markers(theme)
    for _edge_id, route in routes:
        _render_edge(d, route, theme, markers)

    _render_nodes(d, session, theme)

    if show_handles:
        _render_handles(d, session, theme)

    for edge_id, route in routes:
        _render_label(d, route, theme, hovered=edge_id in hovered_edges)

    return d.as_svg()


def _arrow_markers(theme: Theme) -> dict[Side, draw.Marker]:
    """One marker per arrow direction, tip at the marker origin."""
    length, half = ARROW_LENGTH, ARROW_HALF_WIDTH
    shapes = {
        Side.RIGHT: ((-length, -half, 0, half), [-length, -half, 0, 0, -length, half]),
        Side.LEFT: ((0, -half, length, half), [length, -half, 0, 0, length, half]),
        Side.TOP: ((-half, 0, half, length), [-half, length, 0, 0, half, length]),
        Side.BOTTOM: ((-half, -length, half, 0), [-half, -length, 0, 0, half, -length]),
    }
    markers = {}
    for side, (bounds, pts) in shapes.items():
        marker = draw.Marker(*bounds, orient="0", id=f"arrowhead-{side.value}")
        marker.append(draw.Lines(*pts, close=True, fill=theme.edge_color))
        markers[side] = marker
    return markers


def _render_edge(
    d: draw.Drawing,
    route: RoutedPath,
    theme: Theme,
    markers: dict[Side, draw.Marker],
) -> None:
    """Render an edge as straight segments ending in an arrowhead."""
    path = draw.Path(
        stroke=theme.edge_color,
        stroke_width=theme.edge_width,
        fill="none",
        marker_end=markers[route.arrow],
    )
    path.M(*route.points[0])
    for point in route.points[1:]:
        path.L(*point)
    d.append(path)


def _render_nodes(d: draw.Drawing, session: EditorSession, theme: Theme) -> None:
    """Render node cards vertically centered in their boxes."""
    for node in session.workflow.nodes.values():
        card_w = node.width - CARD_INSET * 2
        card_y = node.y + (node.height - CARD_HEIGHT) / 2
        d.append(draw.Rectangle(
            node.x + CARD_INSET, card_y,
            card_w, CARD_HEIGHT,
            rx=theme.node_radius, ry=theme.node_radius,
            fill=theme.node_fill,
            stroke=theme.node_stroke,
            stroke_width=theme.node_stroke_width,
        ))
        d.append(draw.Text(
            node.name or node.id,
            theme.node_font_size,
            node.x + CARD_TEXT_X, card_y + CARD_HEIGHT / 2,
            fill=theme.node_text_color,
            font_family=theme.font_family,
            dominant_baseline="central",
        ))


def _render_handles(d: draw.Drawing, session: EditorSession, theme: Theme) -> None:
    """Overlay every handle rectangle, colored by role."""
    for node in session.workflow.nodes.values():
        handles = sorted(session.handles(node.id), key=lambda h: h.z_index)
        for handle in handles:
            color = (
                theme.source_handle_color
                if handle.role == HandleRole.SOURCE
                else theme.target_handle_color
            )
            d.append(draw.Rectangle(
                node.x + handle.left, node.y + handle.top,
                handle.width, handle.height,
                fill="none",
                stroke=color,
                stroke_width=0.5,
            ))


def _render_label(
    d: draw.Drawing,
    route: RoutedPath,
    theme: Theme,
    hovered: bool = False,
) -> None:
    """Render the label pill with its delete glyph."""
    box = label_box(route.label_point, route.label, hovered)
    d.append(draw.Rectangle(
        box.x, box.y, box.width, box.height,
        rx=LABEL_CORNER_RADIUS, ry=LABEL_CORNER_RADIUS,
        fill=theme.label_fill,
        stroke=theme.label_stroke,
        stroke_width=LABEL_STROKE_WIDTH,
    ))
    d.append(draw.Text(
        route.label,
        LABEL_FONT_SIZE,
        box.x + LABEL_PAD_X, route.label_point[1],
        fill=theme.label_text_color,
        font_family=theme.font_family,
        dominant_baseline="central",
    ))
    inset = box.delete_size / 4
    x0, y0 = box.delete_x + inset, box.delete_y + inset
    x1, y1 = box.delete_x + box.delete_size - inset, box.delete_y + box.delete_size - inset
    for ax, ay, bx, by in ((x0, y0, x1, y1), (x0, y1, x1, y0)):
        d.append(draw.Line(
            ax, ay, bx, by,
            stroke=theme.delete_color,
            stroke_width=DELETE_STROKE_WIDTH,
        ))
