"""CLI for payflow."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from payflow import __version__
from payflow.canvas.analysis import validate_workflow
from payflow.canvas.defaults import PROVIDER_HEIGHT, PROVIDER_WIDTH, demo_workflow
from payflow.canvas.model import ConnectionRequest, Side
from payflow.canvas.session import EditorSession
from payflow.layout.handles import DEFAULT_HANDLE_COUNTS, compute_handle_layout
from payflow.layout.routing import route_edge
from payflow.render import render_svg
from payflow.themes import THEMES

SIDES = [s.value for s in Side]


def _parse_connection(text: str) -> tuple[ConnectionRequest, str]:
    """Parse ``SRC:SRC_HANDLE:TGT:TGT_HANDLE[:LABEL]``."""
    parts = text.split(":", 4)
    if len(parts) < 4:
        raise click.BadParameter(
            f"'{text}' should look like SRC:SRC_HANDLE:TGT:TGT_HANDLE[:LABEL]",
            param_hint="--connect",
        )
    label = parts[4] if len(parts) == 5 else ""
    request = ConnectionRequest(
        source=parts[0] or None,
        source_handle=parts[1] or None,
        target=parts[2] or None,
        target_handle=parts[3] or None,
    )
    return request, label


def _build_session(connections: tuple[str, ...]) -> EditorSession:
    """Replay --connect gestures onto the demo workflow."""
    session = EditorSession(demo_workflow())
    for text in connections:
        request, label = _parse_connection(text)
        session.connect_start(request.source, request.source_handle)
        edge = session.connect(request)
        session.connect_end()
        if edge is None:
            click.echo(f"Skipped connection '{text}'", err=True)
            continue
        session.confirm_label(label)
    return session


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """payflow: Route and render payment workflow canvases."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument("source_x", type=float)
@click.argument("source_y", type=float)
@click.argument("source_side", type=click.Choice(SIDES))
@click.argument("target_x", type=float)
@click.argument("target_y", type=float)
@click.argument("target_side", type=click.Choice(SIDES))
@click.option("--label", default="", help="Edge label")
@click.option("--steps", type=int, default=None, help="Interior staircase steps (clamped to 4-8)")
@click.option("--hovered", is_flag=True, help="Show the label untruncated")
def route(
    source_x: float,
    source_y: float,
    source_side: str,
    target_x: float,
    target_y: float,
    target_side: str,
    label: str,
    steps: int | None,
    hovered: bool,
) -> None:
    """Route one edge between two anchors and print its geometry."""
    path = route_edge(
        (source_x, source_y), source_side,
        (target_x, target_y), target_side,
        label=label, steps=steps, hovered=hovered,
    )
    click.echo(f"Points: {len(path.points)} ({path.steps} steps)")
    for x, y in path.points:
        click.echo(f"  {x:g}, {y:g}")
    click.echo(f"Label: {path.label} at {path.label_point[0]:g}, {path.label_point[1]:g}")
    click.echo(f"Arrow: {path.arrow.value}")
    click.echo(f"Path: {path.path_data()}")


@cli.command()
@click.option("--width", type=float, default=PROVIDER_WIDTH, help="Node width in pixels")
@click.option("--height", type=float, default=PROVIDER_HEIGHT, help="Node height in pixels")
@click.option("--side", type=click.Choice(SIDES), multiple=True,
              help="Side(s) to lay out (default: all)")
@click.option("--count", type=int, default=None,
              help="Handle count per side (default: 3 left/right, 10 top/bottom)")
def handles(width: float, height: float, side: tuple[str, ...], count: int | None) -> None:
    """Print the handle layout for a node size."""
    sides = [Side(s) for s in side] or list(DEFAULT_HANDLE_COUNTS)
    for s in sides:
        n = count if count is not None else DEFAULT_HANDLE_COUNTS[s]
        try:
            layout = compute_handle_layout(s, n, width, height)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)
        click.echo(f"{s.value}: {len(layout)} handles")
        for h in layout:
            click.echo(f"  {h.id:<16} top={h.top:g} left={h.left:g} "
                       f"{h.width:g}x{h.height:g} z={h.z_index}")


@cli.command()
@click.option("-o", "--output", type=click.Path(path_type=Path), default=Path("workflow.svg"),
              help="Output SVG file path (default: workflow.svg)")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Visual theme (default: light)")
@click.option("--connect", "connections", multiple=True,
              help="Connection SRC:SRC_HANDLE:TGT:TGT_HANDLE[:LABEL]; repeatable")
@click.option("--show-handles", is_flag=True, help="Overlay handle rectangles")
@click.option("--width", type=int, default=None, help="SVG width in pixels")
@click.option("--height", type=int, default=None, help="SVG height in pixels")
def render(
    output: Path,
    theme: str,
    connections: tuple[str, ...],
    show_handles: bool,
    width: int | None,
    height: int | None,
) -> None:
    """Render the demo workflow, plus any connections, to SVG."""
    session = _build_session(connections)
    svg = render_svg(session, THEMES[theme], width=width, height=height,
                     show_handles=show_handles)
    if not svg.endswith("\n"):
        svg += "\n"
    output.write_text(svg)
    click.echo(f"Rendered {len(session.workflow.nodes)} nodes, "
               f"{len(session.workflow.edges)} edges -> {output}")


@cli.command()
@click.option("--connect", "connections", multiple=True,
              help="Connection SRC:SRC_HANDLE:TGT:TGT_HANDLE[:LABEL]; repeatable")
@click.option("--strict", is_flag=True, help="Treat warnings as errors")
def validate(connections: tuple[str, ...], strict: bool) -> None:
    """Check the demo workflow, plus any connections, for routing problems."""
    session = _build_session(connections)
    errors, warnings = validate_workflow(session.workflow)
    for warning in warnings:
        click.echo(f"Warning: {warning}", err=True)
    if strict:
        errors = errors + warnings
    if errors:
        click.echo("Validation errors:", err=True)
        for err in errors:
            click.echo(f"  - {err}", err=True)
        raise SystemExit(1)
    click.echo(f"Valid: {len(session.workflow.nodes)} nodes, "
               f"{len(session.workflow.edges)} edges")
