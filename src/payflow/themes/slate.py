"""Dark slate theme."""

from payflow.render.style import Theme

SLATE_THEME = Theme(
    name="slate",
    background_color="#1f2430",
    node_fill="#2b3242",
    node_stroke="#8f8fff",
    node_stroke_width=2.0,
    node_radius=24.0,
    node_text_color="#e2e8f0",
    font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    node_font_size=13.0,
    edge_color="#a0aec0",
    edge_width=1.5,
    label_fill="#2d3748",
    label_stroke="#4a5568",
    label_text_color="#e2e8f0",
    delete_color="#fc8181",
)
