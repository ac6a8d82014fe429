# src/flowlint/core/__init__.py
"""Core infrastructure: Policy, Validation, Configuration, Documents, Logging."""

from flowlint.core.config import FlowlintSettings, RuntimeSettings, load_settings
from flowlint.core.document import WorkflowDocumentError, load_workflow, parse_workflow
from flowlint.core.logging import configure_logging, get_logger
from flowlint.core.policy import POLICY_TABLE, PolicyEntry, get_policy_entry
from flowlint.core.validation import (
    can_connect,
    validate_connection,
    validate_entry,
    validate_graph,
    would_create_cycle,
)

__all__ = [
    "POLICY_TABLE",
    "FlowlintSettings",
    "PolicyEntry",
    "RuntimeSettings",
    "WorkflowDocumentError",
    "can_connect",
    "configure_logging",
    "get_logger",
    "get_policy_entry",
    "load_settings",
    "load_workflow",
    "parse_workflow",
    "validate_connection",
    "validate_entry",
    "validate_graph",
    "would_create_cycle",
]
