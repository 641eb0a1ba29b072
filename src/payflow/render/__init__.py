"""SVG preview rendering for workflow canvases."""

from payflow.render.svg import render_svg

__all__ = ["render_svg"]
