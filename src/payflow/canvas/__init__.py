"""Host canvas model and editor session."""

from payflow.canvas.model import (
    ConnectionRequest,
    Edge,
    Handle,
    HandleRole,
    Node,
    Side,
    Workflow,
)

__all__ = [
    "ConnectionRequest",
    "Edge",
    "Handle",
    "HandleRole",
    "Node",
    "Side",
    "Workflow",
]
