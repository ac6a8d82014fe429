# src/flowlint/core/validation/__init__.py
"""Connectivity validation: per-edge, entry-node, cycle, and whole-graph checks.

These are the functions the graph editor calls:

- can_connect(): on every connect gesture, before committing the edge
- validate_connection(): policy check for one edge
- validate_entry(): when the START node's configuration changes
- validate_graph(): on "validate workflow" and before export/deploy
"""

from flowlint.core.validation.connections import can_connect, validate_connection
from flowlint.core.validation.cycles import find_cycle, would_create_cycle
from flowlint.core.validation.entry import AUTOGEN_TRIGGER_TYPES, check_entry, validate_entry
from flowlint.core.validation.graph import validate_graph

__all__ = [
    "AUTOGEN_TRIGGER_TYPES",
    "can_connect",
    "check_entry",
    "find_cycle",
    "validate_connection",
    "validate_entry",
    "validate_graph",
    "would_create_cycle",
]
