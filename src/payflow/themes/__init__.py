"""Theme definitions for workflow canvases."""

from payflow.themes.light import LIGHT_THEME
from payflow.themes.slate import SLATE_THEME

THEMES = {
    "light": LIGHT_THEME,
    "slate": SLATE_THEME,
}

__all__ = ["THEMES", "LIGHT_THEME", "SLATE_THEME"]
