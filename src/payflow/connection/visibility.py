"""Per-handle interactability and visibility during connection gestures.

Handles are never removed from the canvas: a drag that started on a
handle must keep its hit target while the state changes under it. Only
two flags toggle, computed independently of each other:

- ``interactable``: whether the handle accepts pointer events.
- ``visible``/``opacity``: whether the handle is drawn. The editor keeps
  handles transparent; the debug overlay reveals them.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from payflow.canvas.model import Handle, HandleRole
from payflow.connection.state import ConnectionState, ConnectionStore
from payflow.layout.constants import REVEALED_OPACITY


@dataclass(frozen=True)
class VisibilityPolicy:
    """Configuration for handle visibility.

    idle_sources_interactable
        When no gesture is active, source handles of a node that is not
        hovered stay interactable (True) or wait for hover (False).
    reveal_handles
        Draw handles instead of keeping them transparent.
    """

    idle_sources_interactable: bool = True
    reveal_handles: bool = False
    revealed_opacity: float = REVEALED_OPACITY


DEFAULT_POLICY = VisibilityPolicy()
HOVER_GATED_POLICY = VisibilityPolicy(idle_sources_interactable=False)


@dataclass(frozen=True)
class HandleVisibility:
    """Resolved interaction and display state of one handle."""

    interactable: bool
    visible: bool
    opacity: float


def _source_interactable(
    is_source_node: bool,
    is_connection_started: bool,
    is_node_hovered: bool,
    policy: VisibilityPolicy,
) -> bool:
    if is_connection_started:
        return is_source_node
    if is_node_hovered:
        return True
    return policy.idle_sources_interactable


def _source_visible(
    is_source_node: bool,
    is_connection_started: bool,
    is_node_hovered: bool,
) -> bool:
    if is_connection_started:
        return is_source_node
    return is_node_hovered


def resolve(
    role: HandleRole,
    is_source_node: bool,
    is_connection_started: bool,
    is_node_hovered: bool,
    policy: VisibilityPolicy = DEFAULT_POLICY,
) -> HandleVisibility:
    """Decide whether one handle is interactable and whether it is drawn."""
    if role == HandleRole.SOURCE:
        interactable = _source_interactable(
            is_source_node, is_connection_started, is_node_hovered, policy
        )
        shown = _source_visible(is_source_node, is_connection_started, is_node_hovered)
    else:
        interactable = is_connection_started and not is_source_node
        shown = is_connection_started and not is_source_node

    visible = policy.reveal_handles and shown
    return HandleVisibility(
        interactable=interactable,
        visible=visible,
        opacity=policy.revealed_opacity if visible else 0.0,
    )


def resolve_visibility(
    role: HandleRole,
    is_source_node: bool,
    state: ConnectionState,
    hovered: bool,
    policy: VisibilityPolicy = DEFAULT_POLICY,
) -> HandleVisibility:
    """Same as :func:`resolve`, reading the started flag from a state."""
    return resolve(role, is_source_node, state.is_connection_started, hovered, policy)


def resolve_node_handles(
    store: ConnectionStore,
    node_id: str,
    handles: Iterable[Handle],
    hovered: bool = False,
    policy: VisibilityPolicy = DEFAULT_POLICY,
) -> dict[str, HandleVisibility]:
    """Resolve every handle of one node against the store's current state."""
    state = store.state
    is_source_node = store.is_source(node_id)
    return {
        h.id: resolve_visibility(h.role, is_source_node, state, hovered, policy)
        for h in handles
    }
