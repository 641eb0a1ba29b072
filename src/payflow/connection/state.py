"""Connection gesture state shared by every node's handles.

Only one pointer drag can happen at a time, so one store owns the
gesture for a whole editor session. The drag handler is its only
writer; every node's visibility resolver reads it. Subscribers are
called synchronously on each change so no handle can act on a stale
state before the next pointer event.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectionState:
    """Which node started the active gesture, if any."""

    source_node_id: str | None = None
    is_connection_started: bool = False

    @property
    def at_rest(self) -> bool:
        return self.source_node_id is None and not self.is_connection_started


REST = ConnectionState()

Listener = Callable[[ConnectionState], None]


class ConnectionStore:
    """Holds the connection state and notifies listeners on change."""

    def __init__(self) -> None:
        self._state = REST
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ConnectionState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def begin_connection(self, node_id: str | None) -> None:
        """Mark *node_id* as the source of a new gesture.

        Drags that start on empty canvas have no node and are ignored.
        A gesture begun while another is active replaces it.
        """
        if not node_id:
            logger.debug("Ignoring connection start without a node")
            return
        if self._state.is_connection_started:
            logger.warning(
                "Connection from %s replaced by a new one from %s",
                self._state.source_node_id,
                node_id,
            )
        self._set(ConnectionState(source_node_id=node_id, is_connection_started=True))

    def end_connection(self) -> None:
        """Return to rest, whatever the gesture's outcome."""
        self._set(REST)

    def is_source(self, node_id: str | None) -> bool:
        return node_id is not None and node_id == self._state.source_node_id

    def _set(self, state: ConnectionState) -> None:
        logger.debug("Connection state %s -> %s", self._state, state)
        self._state = state
        for listener in list(self._listeners):
            listener(state)
