"""Light theme (matches the editor's white cards on a plain canvas)."""

from payflow.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    node_fill="#ffffff",
    node_stroke="#5e5eff",
    node_stroke_width=2.0,
    node_radius=24.0,
    node_text_color="#1a202c",
    font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    node_font_size=13.0,
    edge_color="#4A5568",
    edge_width=1.5,
    label_fill="#ffffff",
    label_stroke="#CBD5E0",
    label_text_color="#2D3748",
)
