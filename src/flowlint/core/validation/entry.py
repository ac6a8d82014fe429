# src/flowlint/core/validation/entry.py
"""Validation of START (entry) nodes.

Checks run in a fixed order and stop at the first hard failure:

1. A trigger type is set
2. No incoming edges
3. Trigger-specific edge shape:
   - human: >=1 outgoing, first outgoing edge targets AGENT_CALL
   - system: >=1 outgoing
   - event: no outgoing (an external scheduler selects the first real node)
   - multi: >=2 outgoing
4. A resume-capable START needs a checkpoint store
5. AutoGen supports only human and system triggers, and cannot resume
   a system-triggered run

Human and event triggers also produce runtime-specific advisory warnings.
Warnings never turn a pass into a failure.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

from flowlint.contracts.enums import OperatorKind, RuntimeVariant, TriggerType
from flowlint.contracts.graph import GraphSnapshot, WorkflowEdge, WorkflowNode
from flowlint.contracts.results import EntryVerdict
from flowlint.core.config import RuntimeSettings
from flowlint.core.logging import get_logger

logger = get_logger(__name__)

AUTOGEN_TRIGGER_TYPES: frozenset[TriggerType] = frozenset({TriggerType.HUMAN, TriggerType.SYSTEM})

MIN_MULTI_TRIGGER_EDGES = 2

_HUMAN_TRIGGER_ADVICE: MappingProxyType[RuntimeVariant, str] = MappingProxyType(
    {
        RuntimeVariant.AUTOGEN: (
            "autogen: a human-triggered workflow needs a UserProxyAgent in front of the first agent "
            "so the user's message can start the group chat"
        ),
        RuntimeVariant.LANGGRAPH: (
            "langgraph: a human-triggered workflow needs an explicit interrupt point so the run "
            "suspends until the user's message is added to state"
        ),
    }
)

_EVENT_TRIGGER_ADVICE: MappingProxyType[RuntimeVariant, str] = MappingProxyType(
    {
        RuntimeVariant.AUTOGEN: (
            "autogen has no native scheduler; an external wrapper must receive the event and start the workflow"
        ),
    }
)


def validate_entry(
    node: WorkflowNode,
    nodes: Sequence[WorkflowNode],
    edges: Sequence[WorkflowEdge],
    runtime: RuntimeVariant = RuntimeVariant.LANGGRAPH,
    runtime_settings: RuntimeSettings | None = None,
) -> EntryVerdict:
    """Validate a START node; any other node passes trivially.

    Called by the editor whenever the START node's configuration changes.
    """
    return check_entry(node, GraphSnapshot.of(nodes, edges), runtime, runtime_settings or RuntimeSettings())


def check_entry(
    node: WorkflowNode,
    graph: GraphSnapshot,
    runtime: RuntimeVariant,
    runtime_settings: RuntimeSettings,
) -> EntryVerdict:
    """validate_entry() over a prebuilt snapshot (used by the graph validator)."""
    if not node.is_kind(OperatorKind.START):
        return EntryVerdict(ok=True)

    warnings: list[str] = []
    reason = _first_failure(node, graph, runtime, runtime_settings, warnings)
    verdict = EntryVerdict(ok=reason is None, reason=reason, warnings=tuple(warnings))
    logger.debug(
        "entry_checked",
        node=node.id,
        trigger=node.trigger_type,
        runtime=runtime.value,
        ok=verdict.ok,
        reason=reason,
    )
    return verdict


def _first_failure(
    node: WorkflowNode,
    graph: GraphSnapshot,
    runtime: RuntimeVariant,
    runtime_settings: RuntimeSettings,
    warnings: list[str],
) -> str | None:
    trigger = node.trigger_type
    if trigger is None:
        return f"{node.reference} must have a trigger type"

    if graph.incoming(node.id):
        return f"{node.reference} cannot have incoming edges"

    outgoing = graph.outgoing(node.id)
    match trigger:
        case TriggerType.HUMAN:
            warnings.append(_HUMAN_TRIGGER_ADVICE[runtime])
            if not outgoing:
                return f"Human-triggered {node.reference} must have at least one outgoing edge"
            first_target = graph.get_node(outgoing[0].target)
            if first_target is None or not first_target.is_kind(OperatorKind.AGENT_CALL):
                found = first_target.kind_label if first_target is not None else f"unknown node '{outgoing[0].target}'"
                return f"Human-triggered {node.reference} must connect first to an {OperatorKind.AGENT_CALL} node, not {found}"
        case TriggerType.SYSTEM:
            if not outgoing:
                return f"System-triggered {node.reference} must have at least one outgoing edge"
        case TriggerType.EVENT:
            if runtime in _EVENT_TRIGGER_ADVICE:
                warnings.append(_EVENT_TRIGGER_ADVICE[runtime])
            if outgoing:
                return (
                    f"Event-triggered {node.reference} must not have outgoing edges "
                    f"(found {len(outgoing)}); the scheduler selects the first node"
                )
        case TriggerType.MULTI:
            if len(outgoing) < MIN_MULTI_TRIGGER_EDGES:
                return (
                    f"Multi-triggered {node.reference} requires at least {MIN_MULTI_TRIGGER_EDGES} "
                    f"outgoing edges, found {len(outgoing)}"
                )

    if node.resume_capable and not runtime_settings.has_checkpoint_store:
        return f"{node.reference} is resume-capable but no checkpoint store is configured"

    if runtime == RuntimeVariant.AUTOGEN:
        if trigger not in AUTOGEN_TRIGGER_TYPES:
            supported = ", ".join(sorted(AUTOGEN_TRIGGER_TYPES))
            return f"Trigger type '{trigger}' is not supported by autogen (supported: {supported})"
        if trigger == TriggerType.SYSTEM and node.resume_capable:
            return f"System-triggered {node.reference} cannot be resume-capable on autogen"

    return None
