# src/flowlint/core/validation/connections.py
"""Per-edge legality: does the policy allow source -> target?

A connection is legal only when both sides agree: the target's kind must
be among the source's allowed successors AND the source's kind must be
among the target's allowed predecessors. The relation is not symmetric,
so both lookups always run.
"""

from __future__ import annotations

from collections.abc import Sequence

from flowlint.contracts.enums import RuntimeVariant
from flowlint.contracts.graph import GraphSnapshot, WorkflowEdge, WorkflowNode
from flowlint.contracts.results import ConnectionVerdict
from flowlint.core.logging import get_logger
from flowlint.core.policy import ExpansionContext, expand_terms, get_policy_entry
from flowlint.core.validation.cycles import would_create_cycle

logger = get_logger(__name__)

_EMPTY_GRAPH = GraphSnapshot()


def validate_connection(
    source: WorkflowNode,
    target: WorkflowNode,
    runtime: RuntimeVariant = RuntimeVariant.LANGGRAPH,
    graph: GraphSnapshot | None = None,
) -> ConnectionVerdict:
    """Check one edge against the policy table.

    Args:
        source: Node the edge leaves
        target: Node the edge enters
        runtime: Runtime whose variant of runtime-dependent rules applies
        graph: Snapshot the edge lives in (context for token expansion)

    Returns:
        ConnectionVerdict; rejections name both kinds and carry the
        allowed set that failed.
    """
    # Non-operator nodes (agents, tools, memories) are wired by the editor itself
    if not source.is_operator or not target.is_operator:
        return ConnectionVerdict.accept()

    source_kind = source.operator_kind
    target_kind = target.operator_kind
    if source_kind is None or target_kind is None:
        return ConnectionVerdict.reject("Missing operator type")

    source_entry = get_policy_entry(source_kind)
    if source_entry is None:
        return ConnectionVerdict.reject(f"No rules defined for source operator type: {source_kind}")
    target_entry = get_policy_entry(target_kind)
    if target_entry is None:
        return ConnectionVerdict.reject(f"No rules defined for target operator type: {target_kind}")

    context = ExpansionContext(graph=graph if graph is not None else _EMPTY_GRAPH, source_id=source.id, target_id=target.id)

    allowed_successors = expand_terms(source_entry.allowed_successors(runtime), context)
    if target_kind not in allowed_successors:
        return ConnectionVerdict.reject(f"{source_kind} cannot connect to {target_kind}", allowed_successors)

    allowed_predecessors = expand_terms(target_entry.allowed_predecessors(runtime), context)
    if source_kind not in allowed_predecessors:
        return ConnectionVerdict.reject(f"{target_kind} cannot accept input from {source_kind}", allowed_predecessors)

    return ConnectionVerdict.accept()


def can_connect(
    source: WorkflowNode,
    target: WorkflowNode,
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
    runtime: RuntimeVariant = RuntimeVariant.LANGGRAPH,
) -> ConnectionVerdict:
    """Gate for a proposed edge, called by the editor on every connect gesture.

    Rejects self-connections and duplicates, then applies the policy
    check, then the cycle guard.
    """
    if source.id == target.id:
        verdict = ConnectionVerdict.reject("Cannot connect a node to itself")
    else:
        graph = GraphSnapshot.of(nodes, edges)
        if graph.has_edge(source.id, target.id):
            verdict = ConnectionVerdict.reject("Connection already exists")
        else:
            verdict = validate_connection(source, target, runtime, graph)
            if verdict.ok and would_create_cycle(source, target, graph.edges):
                verdict = ConnectionVerdict.reject(f"Connection from {source.label} to {target.label} would create a cycle")

    logger.debug(
        "connection_checked",
        source=source.id,
        target=target.id,
        runtime=runtime.value,
        ok=verdict.ok,
        reason=verdict.reason,
    )
    return verdict
