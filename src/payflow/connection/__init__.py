"""Connection gesture state and per-handle visibility.

Public API:
- ConnectionStore: Owner of the single active gesture
- ConnectionState: Immutable snapshot of the store
- resolve_visibility: Interactable/visible flags for one handle
- VisibilityPolicy: Configuration for idle source handles and overlays
"""

from payflow.connection.state import REST, ConnectionState, ConnectionStore
from payflow.connection.visibility import (
    DEFAULT_POLICY,
    HandleVisibility,
    VisibilityPolicy,
    resolve,
    resolve_node_handles,
    resolve_visibility,
)

__all__ = [
    "DEFAULT_POLICY",
    "REST",
    "ConnectionState",
    "ConnectionStore",
    "HandleVisibility",
    "VisibilityPolicy",
    "resolve",
    "resolve_node_handles",
    "resolve_visibility",
]
