"""Editor session: turns host pointer callbacks into core calls.

The host reports three drag callbacks (start, connect, end) and two
dialog outcomes (confirm, cancel). The session walks each gesture
through its phases::

    IDLE -> DRAFT -> PENDING_LABEL -> IDLE (edge committed or dialog dismissed)
    IDLE -> DRAFT -> IDLE (dropped on empty canvas)

Connection state is reset at every drag end, so no node stays flagged
as the active source whatever happens to the gesture.
"""

from __future__ import annotations

import logging
import random
import string
import time
from collections.abc import Callable, Mapping
from enum import Enum

from payflow.canvas.model import ConnectionRequest, Edge, Handle, Side, Workflow
from payflow.connection.state import ConnectionStore
from payflow.connection.visibility import (
    DEFAULT_POLICY,
    HandleVisibility,
    VisibilityPolicy,
    resolve_node_handles,
)
from payflow.layout.handles import HandleLayoutConfig, node_handles
from payflow.layout.routing import RoutedPath, route_workflow_edge

logger = logging.getLogger(__name__)

DEFAULT_EDGE_LABEL = "Connection"
"""Label given to an edge confirmed with a blank name."""

_ID_ALPHABET = string.ascii_lowercase + string.digits


class GesturePhase(Enum):
    """Where the current drag-to-connect gesture stands."""

    IDLE = "idle"
    DRAFT = "draft"
    PENDING_LABEL = "pending_label"


def new_edge_id() -> str:
    """Return an id like ``edge-1700000000000-k3j9x0a1b``."""
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"edge-{millis}-{suffix}"


class EditorSession:
    """One editing session over a workflow canvas."""

    def __init__(
        self,
        workflow: Workflow,
        store: ConnectionStore | None = None,
        policy: VisibilityPolicy = DEFAULT_POLICY,
        handle_counts: Mapping[Side, int] | None = None,
        layout: HandleLayoutConfig | None = None,
        id_factory: Callable[[], str] = new_edge_id,
    ) -> None:
        self.workflow = workflow
        self.store = store or ConnectionStore()
        self.policy = policy
        self.handle_counts = handle_counts
        self.layout = layout
        self.phase = GesturePhase.IDLE
        self.pending_edge: Edge | None = None
        self._id_factory = id_factory

    # -- drag gesture -----------------------------------------------------

    def connect_start(self, node_id: str | None, handle_id: str | None = None) -> None:
        """A drag began on a handle of *node_id*."""
        if not node_id:
            return
        self.store.begin_connection(node_id)
        self.phase = GesturePhase.DRAFT
        logger.debug("Drag started on %s (%s)", node_id, handle_id)

    def connect(self, request: ConnectionRequest) -> Edge | None:
        """A drag was released on a target handle.

        Requests missing an endpoint, looping back to the same node, or
        naming a node that is not on the canvas are dropped and return
        None. Otherwise the edge waits for its label.
        """
        if not request.source or not request.target:
            logger.debug("Dropping connection request without both ends: %s", request)
            return None
        if request.source == request.target:
            logger.debug("Dropping self connection on %s", request.source)
            return None
        for end in (request.source, request.target):
            if end not in self.workflow.nodes:
                logger.debug("Dropping connection to unknown node %s", end)
                return None

        if self.pending_edge is not None:
            logger.warning(
                "Pending edge %s replaced before its label was confirmed",
                self.pending_edge.id,
            )
        self.pending_edge = Edge(
            id=self._id_factory(),
            source=request.source,
            target=request.target,
            source_handle=request.source_handle or None,
            target_handle=request.target_handle or None,
        )
        self.phase = GesturePhase.PENDING_LABEL
        return self.pending_edge

    def connect_end(self) -> None:
        """The drag ended, on a handle or not."""
        self.store.end_connection()
        if self.phase == GesturePhase.DRAFT:
            logger.debug("Drag ended without a target")
            self.phase = GesturePhase.IDLE

    # -- label dialog -----------------------------------------------------

    def confirm_label(self, text: str | None) -> Edge | None:
        """Commit the pending edge with *text* (blank means the default).

        An edge whose endpoint left the canvas while the dialog was open
        is dropped and None is returned.
        """
        if self.pending_edge is None:
            return None
        edge = self.pending_edge
        try:
            for end in (edge.source, edge.target):
                if end not in self.workflow.nodes:
                    logger.debug("Dropping pending edge %s: node %s is gone", edge.id, end)
                    return None
            edge.label = (text or "").strip() or DEFAULT_EDGE_LABEL
            self.workflow.add_edge(edge)
            logger.debug(
                "Committed %s: %s -> %s '%s'", edge.id, edge.source, edge.target, edge.label
            )
            return edge
        finally:
            self._finish()

    def cancel_label(self) -> None:
        """The dialog was dismissed; no edge is created."""
        if self.pending_edge is not None:
            logger.debug("Discarded pending edge %s", self.pending_edge.id)
        self._finish()

    def _finish(self) -> None:
        self.pending_edge = None
        self.phase = GesturePhase.IDLE
        self.store.end_connection()

    # -- canvas edits -----------------------------------------------------

    def delete_edge(self, edge_id: str) -> bool:
        removed = self.workflow.remove_edge(edge_id)
        if removed:
            logger.debug("Deleted edge %s", edge_id)
        return removed

    def delete_node(self, node_id: str) -> bool:
        return self.workflow.remove_node(node_id) is not None

    # -- derived geometry -------------------------------------------------

    def handles(self, node_id: str) -> list[Handle]:
        node = self.workflow.nodes[node_id]
        return node_handles(node.width, node.height, self.handle_counts, self.layout)

    def handle_visibility(
        self, node_id: str, hovered: bool = False
    ) -> dict[str, HandleVisibility]:
        return resolve_node_handles(
            self.store, node_id, self.handles(node_id), hovered, self.policy
        )

    def route(self, edge: Edge, hovered: bool = False) -> RoutedPath:
        handles_by_node = {
            edge.source: self.handles(edge.source),
            edge.target: self.handles(edge.target),
        }
        return route_workflow_edge(self.workflow, edge, handles_by_node, hovered=hovered)
