"""Shared contracts for cross-boundary data types.

All dataclasses and enums that cross subsystem boundaries are defined
here. This package is a LEAF MODULE with no outbound dependencies to
core, so the editor integration can import it cheaply.

Import patterns:
    # Contracts (lightweight, no heavy dependencies)
    from flowlint.contracts import OperatorKind, WorkflowNode, GraphReport

    # Settings classes (from core, pulls in pydantic)
    from flowlint.core.config import RuntimeSettings
"""

from flowlint.contracts.enums import (
    NodeCategory,
    OperatorKind,
    RuleToken,
    RuntimeVariant,
    TriggerType,
)
from flowlint.contracts.graph import GraphSnapshot, WorkflowEdge, WorkflowNode
from flowlint.contracts.results import (
    ConnectionVerdict,
    EntryVerdict,
    GraphReport,
    GraphValidationError,
)
from flowlint.contracts.types import EdgeID, NodeID

__all__ = [
    "ConnectionVerdict",
    "EdgeID",
    "EntryVerdict",
    "GraphReport",
    "GraphSnapshot",
    "GraphValidationError",
    "NodeCategory",
    "NodeID",
    "OperatorKind",
    "RuleToken",
    "RuntimeVariant",
    "TriggerType",
    "WorkflowEdge",
    "WorkflowNode",
]
