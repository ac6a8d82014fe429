"""
flowlint: Connectivity validation for agent workflow graphs.

Decides whether a graph of operator nodes is structurally legal for the
LangGraph or AutoGen runtime, edge by edge and as a whole.
"""

__version__ = "0.1.0"

from flowlint.contracts import (
    ConnectionVerdict,
    EntryVerdict,
    GraphReport,
    GraphValidationError,
    OperatorKind,
    RuntimeVariant,
    TriggerType,
    WorkflowEdge,
    WorkflowNode,
)
from flowlint.core.validation import (
    can_connect,
    validate_connection,
    validate_entry,
    validate_graph,
)

__all__ = [
    "ConnectionVerdict",
    "EntryVerdict",
    "GraphReport",
    "GraphValidationError",
    "OperatorKind",
    "RuntimeVariant",
    "TriggerType",
    "WorkflowEdge",
    "WorkflowNode",
    "__version__",
    "can_connect",
    "validate_connection",
    "validate_entry",
    "validate_graph",
]
