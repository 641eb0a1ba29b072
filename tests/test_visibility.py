"""Tests for the handle visibility resolver."""

from __future__ import annotations

import pytest

from payflow.canvas.model import HandleRole
from payflow.connection.state import REST, ConnectionState, ConnectionStore
from payflow.connection.visibility import (
    DEFAULT_POLICY,
    HOVER_GATED_POLICY,
    VisibilityPolicy,
    resolve,
    resolve_node_handles,
    resolve_visibility,
)
from payflow.layout.handles import node_handles

SOURCE = HandleRole.SOURCE
TARGET = HandleRole.TARGET


class TestSourceTruthTable:
    @pytest.mark.parametrize("is_source_node", [True, False])
    def test_idle_hovered(self, is_source_node: bool):
        assert resolve(SOURCE, is_source_node, False, True).interactable

    def test_idle_not_hovered_default_shown(self):
        assert resolve(SOURCE, False, False, False, DEFAULT_POLICY).interactable

    def test_idle_not_hovered_hover_gated(self):
        assert not resolve(SOURCE, False, False, False, HOVER_GATED_POLICY).interactable
        assert resolve(SOURCE, False, False, True, HOVER_GATED_POLICY).interactable

    @pytest.mark.parametrize("hovered", [True, False])
    def test_connecting_source_node(self, hovered: bool):
        assert resolve(SOURCE, True, True, hovered).interactable

    @pytest.mark.parametrize("hovered", [True, False])
    @pytest.mark.parametrize("policy", [DEFAULT_POLICY, HOVER_GATED_POLICY])
    def test_connecting_other_node(self, hovered: bool, policy: VisibilityPolicy):
        assert not resolve(SOURCE, False, True, hovered, policy).interactable


class TestTargetTruthTable:
    @pytest.mark.parametrize("is_source_node", [True, False])
    @pytest.mark.parametrize("hovered", [True, False])
    def test_idle_targets_dormant(self, is_source_node: bool, hovered: bool):
        assert not resolve(TARGET, is_source_node, False, hovered).interactable

    @pytest.mark.parametrize("hovered", [True, False])
    def test_other_node_targets_open(self, hovered: bool):
        assert resolve(TARGET, False, True, hovered).interactable

    @pytest.mark.parametrize("hovered", [True, False])
    def test_source_node_targets_closed(self, hovered: bool):
        assert not resolve(TARGET, True, True, hovered).interactable


class TestVisibleIsIndependent:
    def test_default_policy_keeps_handles_transparent(self):
        for role in HandleRole:
            for flags in [(False, False, True), (True, True, False), (False, True, False)]:
                v = resolve(role, *flags)
                assert v.visible is False
                assert v.opacity == 0.0

    def test_interactable_but_not_visible(self):
        """Idle sources accept drags without being drawn."""
        policy = VisibilityPolicy(reveal_handles=True)
        v = resolve(SOURCE, False, False, False, policy)
        assert v.interactable is True
        assert v.visible is False

    def test_revealed_overlay(self):
        policy = VisibilityPolicy(reveal_handles=True, revealed_opacity=0.5)
        hovered_source = resolve(SOURCE, False, False, True, policy)
        assert hovered_source.visible and hovered_source.opacity == 0.5
        open_target = resolve(TARGET, False, True, False, policy)
        assert open_target.visible and open_target.interactable
        closed_source = resolve(SOURCE, False, True, True, policy)
        assert not closed_source.visible and closed_source.opacity == 0.0


def test_resolve_visibility_reads_state():
    started = ConnectionState("A", True)
    assert resolve_visibility(TARGET, False, started, False).interactable
    assert not resolve_visibility(TARGET, False, REST, False).interactable


class TestNodeHandles:
    def setup_method(self):
        self.store = ConnectionStore()
        self.handles = node_handles(186.0, 70.0)

    def _split(self, node_id: str, hovered: bool = False):
        resolved = resolve_node_handles(self.store, node_id, self.handles, hovered)
        sources = [resolved[h.id] for h in self.handles if h.role == SOURCE]
        targets = [resolved[h.id] for h in self.handles if h.role == TARGET]
        return sources, targets

    def test_every_handle_resolved(self):
        resolved = resolve_node_handles(self.store, "A", self.handles)
        assert set(resolved) == {h.id for h in self.handles}

    def test_at_rest(self):
        sources, targets = self._split("A")
        assert all(v.interactable for v in sources)
        assert not any(v.interactable for v in targets)

    def test_during_connection(self):
        self.store.begin_connection("A")
        a_sources, a_targets = self._split("A")
        b_sources, b_targets = self._split("B", hovered=True)
        assert all(v.interactable for v in a_sources)
        assert not any(v.interactable for v in a_targets)
        assert not any(v.interactable for v in b_sources)
        assert all(v.interactable for v in b_targets)

    def test_no_stale_targets_after_end(self):
        self.store.begin_connection("A")
        self.store.end_connection()
        _, b_targets = self._split("B")
        assert not any(v.interactable for v in b_targets)
