# src/flowlint/core/policy/expander.py
"""Expansion of symbolic policy tokens into concrete operator kinds.

Expansion is a pure function of the term and an explicit context; it never
looks anything up globally and never fails.

Known gap: BRANCH, EARLIER_NODE and ORIGIN are graph-structural (branch
membership, path history, error origin) but are approximated here as
ANY_NON_TERMINAL. This accepts some graphs that are topologically wrong,
e.g. a PARALLEL_JOIN fed by a node outside its fork's branches. The
context already carries the graph and the edge under test so a precise
expansion can replace the approximation without changing callers.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from flowlint.contracts.enums import OperatorKind, RuleToken
from flowlint.contracts.graph import GraphSnapshot
from flowlint.contracts.types import NodeID
from flowlint.core.policy.models import RuleTerm

ALL_KINDS: frozenset[OperatorKind] = frozenset(OperatorKind)
NON_TERMINAL_KINDS: frozenset[OperatorKind] = frozenset(kind for kind in OperatorKind if not kind.is_terminal)
NON_TERMINAL_OR_END_KINDS: frozenset[OperatorKind] = ALL_KINDS - {OperatorKind.START}

# Tokens whose expansion is an approximation rather than a structural computation.
APPROXIMATED_TOKENS: frozenset[RuleToken] = frozenset({RuleToken.BRANCH, RuleToken.EARLIER_NODE, RuleToken.ORIGIN})


@dataclass(frozen=True, slots=True)
class ExpansionContext:
    """The graph and edge a rule is being expanded for."""

    graph: GraphSnapshot
    source_id: NodeID | None = None
    target_id: NodeID | None = None


def expand(term: RuleTerm, context: ExpansionContext) -> frozenset[OperatorKind]:
    """Resolve one policy term to the set of kinds it stands for."""
    match term:
        case OperatorKind():
            return frozenset({term})
        case RuleToken.ANY:
            return ALL_KINDS
        case RuleToken.ANY_NON_TERMINAL:
            return NON_TERMINAL_KINDS
        case RuleToken.ANY_NON_TERMINAL_OR_END:
            return NON_TERMINAL_OR_END_KINDS
        case RuleToken.BRANCH | RuleToken.EARLIER_NODE | RuleToken.ORIGIN:
            return NON_TERMINAL_KINDS


def expand_terms(terms: Iterable[RuleTerm], context: ExpansionContext) -> frozenset[OperatorKind]:
    """Union of the expansions of several terms."""
    expanded: set[OperatorKind] = set()
    for term in terms:
        expanded |= expand(term, context)
    return frozenset(expanded)
