"""Data model for workflow canvases."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


class Side(Enum):
    """Side of a node boundary where a handle is located."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Side | str | None) -> Side | None:
        """Return the matching side, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None

    @property
    def is_vertical(self) -> bool:
        """True for left/right, whose handles stack vertically."""
        return self in (Side.LEFT, Side.RIGHT)


class HandleRole(Enum):
    """Whether a handle starts or accepts a connection."""

    SOURCE = "source"
    TARGET = "target"


@dataclass
class Node:
    """A node on the canvas (payment provider, selector, ...)."""

    id: str
    x: float = 0.0
    y: float = 0.0
    width: float = 186.0
    height: float = 70.0
    kind: str = "paymentProvider"
    name: str = ""
    code: str = ""

    def side_midpoint(self, side: Side) -> tuple[float, float]:
        """Return the midpoint of one side of the node in canvas space."""
        cx = self.x + self.width / 2
        cy = self.y + self.height / 2
        if side == Side.TOP:
            return (cx, self.y)
        if side == Side.BOTTOM:
            return (cx, self.y + self.height)
        if side == Side.LEFT:
            return (self.x, cy)
        return (self.x + self.width, cy)


@dataclass(frozen=True)
class Handle:
    """An attachment hotspot on a node boundary.

    Rectangles are in the node's local coordinate space. Handles are
    derived from node size on every layout pass and never persisted.
    """

    id: str
    side: Side
    role: HandleRole
    index: int
    top: float
    left: float
    width: float
    height: float
    z_index: int

    def contains(self, x: float, y: float) -> bool:
        """Check whether a node-local point falls inside the rectangle."""
        return (
            self.left <= x <= self.left + self.width
            and self.top <= y <= self.top + self.height
        )

    def anchor(self, node: Node) -> tuple[float, float]:
        """Return the boundary point, in canvas space, where edges attach.

        The anchor is the midpoint of the rectangle's outward-facing edge.
        """
        x = node.x + self.left
        y = node.y + self.top
        if self.side == Side.TOP:
            return (x + self.width / 2, y)
        if self.side == Side.BOTTOM:
            return (x + self.width / 2, y + self.height)
        if self.side == Side.LEFT:
            return (x, y + self.height / 2)
        return (x + self.width, y + self.height / 2)


@dataclass
class Edge:
    """A directed, labelled connection between two nodes."""

    id: str
    source: str
    target: str
    source_handle: str | None = None
    target_handle: str | None = None
    label: str = ""
    kind: str = "routed"
    animated: bool = True


@dataclass(frozen=True)
class ConnectionRequest:
    """What the host reports when a drag ends on a handle.

    Any field may be missing; the session decides whether the request
    can become an edge.
    """

    source: str | None = None
    target: str | None = None
    source_handle: str | None = None
    target_handle: str | None = None


@dataclass
class Workflow:
    """The host canvas: an ordered node table and an edge list."""

    nodes: dict[str, Node] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)

    def add_node(self, node: Node) -> None:
        self.nodes[node.id] = node

    def remove_node(self, node_id: str) -> Node | None:
        """Remove a node and every edge attached to it."""
        node = self.nodes.pop(node_id, None)
        if node is None:
            return None
        before = len(self.edges)
        self.edges = [
            e for e in self.edges if e.source != node_id and e.target != node_id
        ]
        dropped = before - len(self.edges)
        if dropped:
            logger.debug("Removed %d edge(s) attached to node %s", dropped, node_id)
        return node

    def add_edge(self, edge: Edge) -> None:
        """Append an edge, ignoring one whose id is already present."""
        if edge.source == edge.target:
            raise ValueError(f"Edge {edge.id} connects node '{edge.source}' to itself")
        for end in (edge.source, edge.target):
            if end not in self.nodes:
                raise ValueError(f"Edge {edge.id} references unknown node '{end}'")
        if self.get_edge(edge.id) is not None:
            return
        self.edges.append(edge)

    def remove_edge(self, edge_id: str) -> bool:
        before = len(self.edges)
        self.edges = [e for e in self.edges if e.id != edge_id]
        return len(self.edges) != before

    def get_edge(self, edge_id: str) -> Edge | None:
        for edge in self.edges:
            if edge.id == edge_id:
                return edge
        return None

    def edges_for(self, node_id: str) -> list[Edge]:
        """Return edges that start or end at a node."""
        return [e for e in self.edges if e.source == node_id or e.target == node_id]

    def dangling_edges(self) -> list[Edge]:
        """Return edges whose source or target is no longer on the canvas."""
        return [
            e
            for e in self.edges
            if e.source not in self.nodes or e.target not in self.nodes
        ]
