"""Semantic type aliases for compile-time type safety.

NewType creates distinct types that mypy treats as incompatible,
preventing accidental misuse of semantically different string values.
"""

from typing import NewType

NodeID = NewType("NodeID", str)
"""Editor-assigned node identifier, unique within one graph (e.g., 'node_3f2a')"""

EdgeID = NewType("EdgeID", str)
"""Editor-assigned edge identifier (e.g., 'edge_start_agent')"""
