# src/flowlint/core/validation/cycles.py
"""Cycle detection for workflow graphs.

LOOP is the only operator allowed to close a cycle: it exists to re-enter
earlier nodes. Every other back-edge is rejected.

Uses NetworkX for traversal.
"""

from __future__ import annotations

from collections.abc import Iterable

import networkx as nx

from flowlint.contracts.enums import OperatorKind
from flowlint.contracts.graph import GraphSnapshot, WorkflowEdge, WorkflowNode
from flowlint.contracts.types import NodeID


def would_create_cycle(source: WorkflowNode, target: WorkflowNode, edges: Iterable[WorkflowEdge]) -> bool:
    """Check whether adding source -> target would close a cycle.

    Breadth-first search from ``target`` along existing edges; if
    ``source`` is reachable the new edge would complete a loop. Skipped
    entirely when the source is a LOOP operator.
    """
    if source.is_kind(OperatorKind.LOOP):
        return False
    if source.id == target.id:
        return True

    graph: nx.DiGraph[str] = nx.DiGraph()
    graph.add_edges_from((edge.source, edge.target) for edge in edges)
    if not graph.has_node(target.id):
        return False
    return any(reached == source.id for _, reached in nx.bfs_edges(graph, target.id))


def find_cycle(snapshot: GraphSnapshot) -> list[NodeID] | None:
    """Find a cycle that does not pass through a LOOP operator.

    Edges leaving LOOP nodes are removed before the search, so any cycle
    still present never re-enters through a LOOP.

    Returns:
        Node ids along the cycle in traversal order, or None if there is none.
    """
    graph: nx.DiGraph[str] = nx.DiGraph()
    graph.add_nodes_from(node.id for node in snapshot.nodes)
    for edge in snapshot.edges:
        source = snapshot.get_node(edge.source)
        if source is not None and source.is_kind(OperatorKind.LOOP):
            continue
        graph.add_edge(edge.source, edge.target)

    try:
        cycle = nx.find_cycle(graph)
    except nx.NetworkXNoCycle:
        return None
    return [NodeID(u) for u, _v in cycle]
