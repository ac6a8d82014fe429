# src/flowlint/core/policy/table.py
"""The connectivity policy: which operator kinds may follow which.

This is data, not code. Each entry lists the kinds an operator accepts
input from and the kinds it may feed, as concrete kinds or symbolic
tokens (expanded by flowlint.core.policy.expander). A connection is legal
only when BOTH sides agree.

SEQUENCE deliberately has no entry; callers treat a missing entry as
"reject all connections".
"""

from __future__ import annotations

from types import MappingProxyType

from flowlint.contracts.enums import OperatorKind as K
from flowlint.contracts.enums import RuleToken as T
from flowlint.core.policy.models import PolicyEntry, per_runtime, shared

POLICY_TABLE: MappingProxyType[K, PolicyEntry] = MappingProxyType(
    {
        K.START: PolicyEntry(
            predecessors=shared(),
            successors=shared(T.ANY_NON_TERMINAL),
        ),
        K.STOP: PolicyEntry(
            predecessors=shared(T.ANY),
            successors=shared(),
        ),
        K.AGENT_CALL: PolicyEntry(
            predecessors=shared(T.ANY_NON_TERMINAL, K.START),
            successors=shared(
                K.TOOL_CALL,
                K.DECISION,
                K.MEMORY_READ,
                K.MEMORY_WRITE,
                K.PARALLEL_FORK,
                K.HUMAN_PAUSE,
                K.ERROR_RETRY,
                K.TIMEOUT,
                K.AGENT_CALL,
                K.LOOP,
                K.STOP,
            ),
        ),
        # AutoGen only lets an agent invoke tools; LangGraph tool nodes are plain graph nodes.
        K.TOOL_CALL: PolicyEntry(
            predecessors=per_runtime(
                autogen=(K.AGENT_CALL,),
                langgraph=(T.ANY_NON_TERMINAL,),
            ),
            successors=shared(
                K.AGENT_CALL,
                K.MEMORY_WRITE,
                K.DECISION,
                K.PARALLEL_FORK,
                K.ERROR_RETRY,
                K.TIMEOUT,
                K.STOP,
            ),
        ),
        K.MEMORY_READ: PolicyEntry(
            predecessors=shared(K.AGENT_CALL, K.TOOL_CALL, K.PARALLEL_JOIN, K.SUB_GRAPH),
            successors=shared(K.AGENT_CALL, K.TOOL_CALL, K.DECISION, K.PARALLEL_FORK, K.STOP),
        ),
        K.MEMORY_WRITE: PolicyEntry(
            predecessors=shared(K.AGENT_CALL, K.TOOL_CALL),
            successors=shared(K.AGENT_CALL, K.DECISION, K.PARALLEL_FORK, K.STOP),
        ),
        K.DECISION: PolicyEntry(
            predecessors=shared(T.ANY_NON_TERMINAL),
            successors=shared(T.ANY_NON_TERMINAL_OR_END),
            min_branches=2,
        ),
        K.PARALLEL_FORK: PolicyEntry(
            predecessors=shared(T.ANY_NON_TERMINAL),
            successors=shared(T.ANY_NON_TERMINAL),
            min_branches=2,
        ),
        K.PARALLEL_JOIN: PolicyEntry(
            predecessors=shared(T.BRANCH),
            successors=shared(K.AGENT_CALL, K.TOOL_CALL, K.DECISION, K.MEMORY_WRITE, K.STOP),
        ),
        K.LOOP: PolicyEntry(
            predecessors=shared(T.ANY_NON_TERMINAL),
            successors=shared(T.EARLIER_NODE, K.DECISION, K.STOP),
        ),
        K.ERROR_RETRY: PolicyEntry(
            predecessors=shared(T.ANY_NON_TERMINAL),
            successors=shared(T.ORIGIN, K.DECISION, K.STOP),
        ),
        K.TIMEOUT: PolicyEntry(
            predecessors=shared(T.ANY_NON_TERMINAL),
            successors=shared(K.ERROR_RETRY, K.DECISION, K.STOP),
        ),
        K.HUMAN_PAUSE: PolicyEntry(
            predecessors=shared(K.AGENT_CALL, K.TOOL_CALL),
            successors=shared(K.AGENT_CALL, K.DECISION),
        ),
        K.SUB_GRAPH: PolicyEntry(
            predecessors=shared(T.ANY_NON_TERMINAL),
            successors=shared(K.AGENT_CALL, K.TOOL_CALL, K.DECISION, K.MEMORY_WRITE, K.PARALLEL_FORK, K.STOP),
        ),
    }
)


def get_policy_entry(kind: K) -> PolicyEntry | None:
    """Return the policy entry for a kind, or None if the kind has no rules."""
    return POLICY_TABLE.get(kind)


def min_branches_for(kind: K) -> int | None:
    """Minimum outgoing edge count for a kind (None when unrestricted)."""
    entry = POLICY_TABLE.get(kind)
    return entry.min_branches if entry is not None else None
