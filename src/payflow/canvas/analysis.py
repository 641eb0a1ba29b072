"""Consistency checks for a workflow's routing graph."""

from __future__ import annotations

__all__ = ["find_cycles", "isolated_nodes", "to_digraph", "validate_workflow"]

import networkx as nx

from payflow.canvas.model import Workflow


def to_digraph(workflow: Workflow) -> nx.DiGraph:
    """Build a directed graph of nodes and committed edges.

    Edges pointing at nodes that are no longer on the canvas are skipped.
    """
    G = nx.DiGraph()
    for node_id in workflow.nodes:
        G.add_node(node_id)
    for edge in workflow.edges:
        if edge.source in workflow.nodes and edge.target in workflow.nodes:
            G.add_edge(edge.source, edge.target)
    return G


def find_cycles(workflow: Workflow) -> list[list[str]]:
    """Return every simple cycle as node ids in edge order."""
    return [list(c) for c in nx.simple_cycles(to_digraph(workflow))]


def isolated_nodes(workflow: Workflow) -> list[str]:
    """Return nodes with no connection at all."""
    G = to_digraph(workflow)
    return [n for n in workflow.nodes if G.degree(n) == 0]


def validate_workflow(workflow: Workflow) -> tuple[list[str], list[str]]:
    """Check a workflow; returns (errors, warnings) as messages."""
    errors: list[str] = []
    warnings: list[str] = []

    for edge in workflow.dangling_edges():
        errors.append(
            f"Edge {edge.id} ({edge.source} -> {edge.target}) references a "
            f"node that is not on the canvas"
        )

    for cycle in find_cycles(workflow):
        errors.append(f"Routing cycle through nodes {', '.join(cycle)}")

    for node_id in isolated_nodes(workflow):
        node = workflow.nodes[node_id]
        warnings.append(f"Node {node_id} ({node.name or node.kind}) has no connections")

    return errors, warnings
