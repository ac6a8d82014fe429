# src/flowlint/core/validation/graph.py
"""Whole-graph validation.

Runs every structural check over a node/edge set and collects ALL
problems instead of failing fast, so the editor can show the complete
list at once. Never raises.

Checks:
1. Edges reference known nodes
2. START cardinality (exactly one, unless every START uses the multi
   trigger; autogen never allows more than one)
3. Each START through the entry-node validator
4. At least one STOP, and no STOP with outgoing edges
5. Every non-entry operator has an incoming edge, and every incoming
   edge passes the connection validator
6. Every non-exit operator has an outgoing edge and meets its branch minimum
7. No cycle except through a LOOP
8. Advisory: more PARALLEL_FORK than PARALLEL_JOIN nodes

START outgoing edges are governed by the trigger type (an event START has
none), so START is exempt from check 6. With an event START the scheduler
enters the graph at operators that have no incoming edge, so check 5 does
not require one there. A STOP is never a scheduler entry and still needs one.
"""

from __future__ import annotations

from collections.abc import Sequence

from flowlint.contracts.enums import OperatorKind, RuntimeVariant, TriggerType
from flowlint.contracts.graph import GraphSnapshot, WorkflowEdge, WorkflowNode
from flowlint.contracts.results import GraphReport
from flowlint.core.config import RuntimeSettings
from flowlint.core.logging import get_logger
from flowlint.core.policy import min_branches_for
from flowlint.core.validation.connections import validate_connection
from flowlint.core.validation.cycles import find_cycle
from flowlint.core.validation.entry import check_entry

logger = get_logger(__name__)


def validate_graph(
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
    runtime: RuntimeVariant = RuntimeVariant.LANGGRAPH,
    runtime_settings: RuntimeSettings | None = None,
) -> GraphReport:
    """Validate a whole workflow graph for a runtime.

    Used on explicit "validate workflow" requests and before export or deploy.
    """
    graph = GraphSnapshot.of(nodes, edges)
    settings = runtime_settings or RuntimeSettings()
    errors: list[str] = []
    warnings: list[str] = []

    _check_edge_endpoints(graph, errors)

    starts = graph.operators_of_kind(OperatorKind.START)
    _check_start_cardinality(starts, runtime, errors)
    for start in starts:
        verdict = check_entry(start, graph, runtime, settings)
        if verdict.reason is not None:
            errors.append(verdict.reason)
        for warning in verdict.warnings:
            if warning not in warnings:
                warnings.append(warning)

    _check_exits(graph, errors)

    # An event START has no edges; the scheduler enters at non-STOP nodes with no incoming edge
    scheduler_entry = any(start.trigger_type == TriggerType.EVENT for start in starts)

    for node in graph.nodes:
        if not node.is_operator:
            continue
        kind = node.operator_kind
        if kind is None:
            errors.append(f"{node.reference} has no operator type")
            continue
        if kind != OperatorKind.START:
            _check_incoming(node, graph, runtime, errors, allow_unfed=scheduler_entry and kind != OperatorKind.STOP)
        if kind not in (OperatorKind.START, OperatorKind.STOP):
            _check_outgoing(node, kind, graph, errors)

    _check_cycles(graph, errors)
    _check_fork_join_balance(graph, warnings)

    report = GraphReport(
        errors=tuple(errors),
        warnings=tuple(warnings),
        node_count=len(graph.nodes),
        edge_count=len(graph.edges),
    )
    logger.debug(
        "graph_validated",
        runtime=runtime.value,
        ok=report.ok,
        nodes=report.node_count,
        edges=report.edge_count,
        errors=len(report.errors),
        warnings=len(report.warnings),
    )
    return report


def _check_edge_endpoints(graph: GraphSnapshot, errors: list[str]) -> None:
    for edge in graph.edges:
        for endpoint in (edge.source, edge.target):
            if graph.get_node(endpoint) is None:
                edge_name = edge.id or f"{edge.source} -> {edge.target}"
                errors.append(f"Edge '{edge_name}' references unknown node '{endpoint}'")


def _check_start_cardinality(starts: list[WorkflowNode], runtime: RuntimeVariant, errors: list[str]) -> None:
    if not starts:
        errors.append("Workflow must have exactly one START node")
        return
    if len(starts) == 1:
        return
    if runtime == RuntimeVariant.AUTOGEN:
        errors.append(f"Workflow has {len(starts)} START nodes, but autogen supports exactly one")
    elif any(start.trigger_type != TriggerType.MULTI for start in starts):
        errors.append(
            f"Workflow has {len(starts)} START nodes, but must have exactly one unless every START uses the multi trigger"
        )


def _check_exits(graph: GraphSnapshot, errors: list[str]) -> None:
    stops = graph.operators_of_kind(OperatorKind.STOP)
    if not stops:
        errors.append("Workflow must have at least one STOP node")
    for stop in stops:
        if graph.outgoing(stop.id):
            errors.append(f"{stop.reference} cannot have outgoing edges")


def _check_incoming(
    node: WorkflowNode,
    graph: GraphSnapshot,
    runtime: RuntimeVariant,
    errors: list[str],
    *,
    allow_unfed: bool = False,
) -> None:
    incoming = graph.incoming(node.id)
    if not incoming:
        if allow_unfed:
            return
        errors.append(f"{node.reference} has no incoming connection")
        return
    for edge in incoming:
        source = graph.get_node(edge.source)
        if source is None:
            continue  # reported by _check_edge_endpoints
        verdict = validate_connection(source, node, runtime, graph)
        if not verdict.ok:
            errors.append(f"Invalid connection from {source.reference} to {node.reference}: {verdict.reason}")


def _check_outgoing(node: WorkflowNode, kind: OperatorKind, graph: GraphSnapshot, errors: list[str]) -> None:
    outgoing = graph.outgoing(node.id)
    if not outgoing:
        errors.append(f"{node.reference} has no outgoing connection")
        return
    minimum = min_branches_for(kind)
    if minimum is not None and len(outgoing) < minimum:
        errors.append(f"{node.reference} must have at least {minimum} outgoing edges, found {len(outgoing)}")


def _check_cycles(graph: GraphSnapshot, errors: list[str]) -> None:
    cycle = find_cycle(graph)
    if cycle is None:
        return
    names = []
    for node_id in [*cycle, cycle[0]]:
        node = graph.get_node(node_id)
        names.append(node.label if node is not None else node_id)
    errors.append(f"Workflow contains a cycle that does not pass through a LOOP node: {' -> '.join(names)}")


def _check_fork_join_balance(graph: GraphSnapshot, warnings: list[str]) -> None:
    forks = len(graph.operators_of_kind(OperatorKind.PARALLEL_FORK))
    joins = len(graph.operators_of_kind(OperatorKind.PARALLEL_JOIN))
    if forks > joins:
        warnings.append(f"Workflow has {forks} PARALLEL_FORK node(s) but only {joins} PARALLEL_JOIN node(s)")
