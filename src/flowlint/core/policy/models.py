# src/flowlint/core/policy/models.py
"""Types for the declarative connectivity policy.

Leaf module: no intra-package imports beyond contracts.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from flowlint.contracts.enums import OperatorKind, RuleToken, RuntimeVariant

# A policy term is either a concrete kind or a symbolic token.
# Both are StrEnums, so `match` on the class keeps expansion exhaustive.
RuleTerm: TypeAlias = OperatorKind | RuleToken


@dataclass(frozen=True, slots=True)
class SharedRule:
    """Allowed-kind terms that apply to every runtime."""

    terms: frozenset[RuleTerm]


@dataclass(frozen=True, slots=True)
class PerRuntimeRule:
    """Allowed-kind terms that differ per runtime.

    Every RuntimeVariant must have an entry; a missing runtime would make
    the entry silently reject everything on that runtime.
    """

    by_runtime: Mapping[RuntimeVariant, frozenset[RuleTerm]]

    def __post_init__(self) -> None:
        missing = set(RuntimeVariant) - set(self.by_runtime)
        if missing:
            raise ValueError(f"PerRuntimeRule is missing runtimes: {sorted(missing)}")


RuleSpec: TypeAlias = SharedRule | PerRuntimeRule


def resolve_terms(spec: RuleSpec, runtime: RuntimeVariant) -> frozenset[RuleTerm]:
    """Select the terms of a rule spec that apply to a runtime."""
    match spec:
        case SharedRule(terms=terms):
            return terms
        case PerRuntimeRule(by_runtime=by_runtime):
            return by_runtime[runtime]


def shared(*terms: RuleTerm) -> SharedRule:
    return SharedRule(frozenset(terms))


def per_runtime(**by_runtime: tuple[RuleTerm, ...]) -> PerRuntimeRule:
    return PerRuntimeRule({RuntimeVariant(name): frozenset(terms) for name, terms in by_runtime.items()})


@dataclass(frozen=True, slots=True)
class PolicyEntry:
    """Connectivity rule for one operator kind.

    Attributes:
        predecessors: Kinds allowed to feed into this kind
        successors: Kinds this kind may feed into
        min_branches: Minimum outgoing edges for fan-out kinds (None = no minimum)
    """

    predecessors: RuleSpec
    successors: RuleSpec
    min_branches: int | None = None

    def allowed_predecessors(self, runtime: RuntimeVariant) -> frozenset[RuleTerm]:
        return resolve_terms(self.predecessors, runtime)

    def allowed_successors(self, runtime: RuntimeVariant) -> frozenset[RuleTerm]:
        return resolve_terms(self.successors, runtime)

    @property
    def is_runtime_dependent(self) -> bool:
        """Whether any side of this entry varies by runtime."""
        return isinstance(self.predecessors, PerRuntimeRule) or isinstance(self.successors, PerRuntimeRule)
