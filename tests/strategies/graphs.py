# tests/strategies/graphs.py
"""Strategies for workflow graphs."""

from __future__ import annotations

from typing import TypeAlias

from hypothesis import strategies as st

from flowlint.contracts import (
    NodeCategory,
    OperatorKind,
    RuntimeVariant,
    TriggerType,
    WorkflowEdge,
    WorkflowNode,
)
from flowlint.core.validation import validate_connection
from tests.fixtures.graphs import make_edge, make_operator, make_start

Graph: TypeAlias = tuple[list[WorkflowNode], list[WorkflowEdge]]

operator_kinds = st.sampled_from(list(OperatorKind))
runtimes = st.sampled_from(list(RuntimeVariant))
trigger_types = st.sampled_from(list(TriggerType))

# Single-exit kinds a linear chain can pass through (no branch minimum)
_CHAIN_KINDS: tuple[OperatorKind, ...] = (
    OperatorKind.AGENT_CALL,
    OperatorKind.TOOL_CALL,
    OperatorKind.MEMORY_READ,
    OperatorKind.MEMORY_WRITE,
    OperatorKind.LOOP,
    OperatorKind.ERROR_RETRY,
    OperatorKind.TIMEOUT,
    OperatorKind.HUMAN_PAUSE,
    OperatorKind.SUB_GRAPH,
)


def _legal(source_kind: OperatorKind, target_kind: OperatorKind, runtime: RuntimeVariant) -> bool:
    source = make_operator("s", source_kind)
    target = make_operator("t", target_kind)
    return validate_connection(source, target, runtime).ok


@st.composite
def legal_chains(draw: st.DrawFn, runtime: RuntimeVariant) -> Graph:
    """START -> k1 -> ... -> kn -> STOP where every hop is policy-legal.

    The START uses a human or system trigger (a human START always feeds
    an AGENT_CALL first). A HUMAN_PAUSE tail, which cannot reach STOP
    directly, is closed through an AGENT_CALL.
    """
    trigger = draw(st.sampled_from([TriggerType.HUMAN, TriggerType.SYSTEM]))
    length = draw(st.integers(min_value=1, max_value=8))

    kinds: list[OperatorKind] = [OperatorKind.START]
    for position in range(length):
        if position == 0 and trigger == TriggerType.HUMAN:
            kinds.append(OperatorKind.AGENT_CALL)
            continue
        candidates = [kind for kind in _CHAIN_KINDS if _legal(kinds[-1], kind, runtime)]
        kinds.append(draw(st.sampled_from(candidates)))

    if not _legal(kinds[-1], OperatorKind.STOP, runtime):
        kinds.append(OperatorKind.AGENT_CALL)
    kinds.append(OperatorKind.STOP)

    nodes: list[WorkflowNode] = [make_start("n0", trigger)]
    nodes.extend(make_operator(f"n{index}", kind) for index, kind in enumerate(kinds) if index > 0)
    edges = [make_edge(f"n{index}", f"n{index + 1}") for index in range(len(nodes) - 1)]
    return nodes, edges


@st.composite
def arbitrary_graphs(draw: st.DrawFn, max_nodes: int = 8) -> Graph:
    """Random nodes and edges with no legality guarantees at all.

    Includes untyped operators, palette nodes, self-edges, parallel edges
    and edges to unknown ids.
    """
    count = draw(st.integers(min_value=0, max_value=max_nodes))
    nodes: list[WorkflowNode] = []
    for index in range(count):
        category = draw(st.sampled_from(list(NodeCategory)))
        if category != NodeCategory.OPERATOR:
            nodes.append(WorkflowNode(id=f"n{index}", category=category))  # type: ignore[arg-type]
            continue
        nodes.append(
            make_operator(
                f"n{index}",
                draw(st.none() | operator_kinds),
                trigger=draw(st.none() | trigger_types),
                resume_capable=draw(st.booleans()),
            )
        )

    ids = [f"n{index}" for index in range(count)] + ["ghost"]
    edges = draw(
        st.lists(
            st.tuples(st.sampled_from(ids), st.sampled_from(ids)).map(lambda pair: make_edge(*pair)),
            max_size=max_nodes * 2,
        )
    )
    return nodes, edges
