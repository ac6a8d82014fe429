# src/flowlint/contracts/results.py
"""Validation outcomes.

These types answer: "Is this edge, entry node, or graph legal?"

IMPORTANT:
- Validation never raises for expected conditions; every outcome is one of these
- Warnings are advisory and never turn an ok verdict into a failure
- Messages are written for direct display in the editor
"""

from __future__ import annotations

from dataclasses import dataclass, field

from flowlint.contracts.enums import OperatorKind


class GraphValidationError(ValueError):
    """Raised by GraphReport.raise_for_errors() when a graph is invalid.

    The engine itself never raises this; it exists for export and deploy
    callers that prefer an exception over inspecting a report.
    """

    def __init__(self, errors: tuple[str, ...]) -> None:
        self.errors = errors
        lines = "\n".join(f"  - {error}" for error in errors)
        super().__init__(f"Workflow graph has {len(errors)} error(s):\n{lines}")


@dataclass(frozen=True, slots=True)
class ConnectionVerdict:
    """Result of checking one proposed or existing edge.

    ``allowed`` carries the expanded kind set that rejected the edge
    (successors of the source, or predecessors of the target) so the
    editor can offer legal alternatives. Empty when ok.
    """

    ok: bool
    reason: str | None = None
    allowed: frozenset[OperatorKind] = frozenset()

    @classmethod
    def accept(cls) -> ConnectionVerdict:
        return cls(ok=True)

    @classmethod
    def reject(cls, reason: str, allowed: frozenset[OperatorKind] = frozenset()) -> ConnectionVerdict:
        return cls(ok=False, reason=reason, allowed=allowed)


@dataclass(frozen=True, slots=True)
class EntryVerdict:
    """Result of checking a START node.

    Checks are fail-fast: ``reason`` names the first hard failure.
    Warnings collected before that failure are still reported.
    """

    ok: bool
    reason: str | None = None
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class GraphReport:
    """Result of validating a whole graph.

    Collects every problem rather than stopping at the first one, so a
    single call yields the complete list for display.
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    node_count: int = 0
    edge_count: int = 0
    ok: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ok", not self.errors)

    def raise_for_errors(self) -> None:
        """Raise GraphValidationError if the report contains errors."""
        if self.errors:
            raise GraphValidationError(self.errors)

    def to_dict(self) -> dict[str, object]:
        """JSON-ready representation for machine consumers."""
        return {
            "ok": self.ok,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "node_count": self.node_count,
            "edge_count": self.edge_count,
        }
