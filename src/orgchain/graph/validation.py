"""Dependency graph checks: cycle detection and edge comparisons."""

from __future__ import annotations

import networkx as nx

from orgchain.core.exceptions import DependencyCycleError
from orgchain.core.types import DependencyGraph


def to_digraph(graph: DependencyGraph) -> nx.DiGraph:
    """Build a DiGraph with an edge ``node -> target`` per ``depends_on`` entry.

    Edges to ids absent from ``graph`` are ignored.
    """
    digraph = nx.DiGraph()
    digraph.add_nodes_from(graph)
    for node_id, targets in graph.items():
        digraph.add_edges_from((node_id, target) for target in targets if target in graph)
    return digraph


def find_cycle(graph: DependencyGraph) -> list[str] | None:
    """Return one cycle as a closed path of node ids, or None if acyclic."""
    digraph = to_digraph(graph)
    if nx.is_directed_acyclic_graph(digraph):
        return None
    try:
        edges = nx.find_cycle(digraph)
    except nx.NetworkXNoCycle:
        return None
    return [source for source, _ in edges] + [edges[-1][1]]


def assert_acyclic(graph: DependencyGraph) -> None:
    cycle = find_cycle(graph)
    if cycle is not None:
        raise DependencyCycleError(cycle)


def added_edges(before: DependencyGraph, after: DependencyGraph) -> dict[str, list[str]]:
    """Edges present in ``after`` but not in ``before``, per source node."""
    out: dict[str, list[str]] = {}
    for node_id, targets in after.items():
        previous = set(before.get(node_id, ()))
        new = [t for t in targets if t not in previous]
        if new:
            out[node_id] = new
    return out


def removed_edges(before: DependencyGraph, after: DependencyGraph) -> dict[str, list[str]]:
    """Edges present in ``before`` but missing from ``after``, per source node."""
    return added_edges(after, before)
