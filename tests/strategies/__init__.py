# tests/strategies/__init__.py
"""Hypothesis strategies for property-based tests.

Re-exports commonly used strategies for convenience:
    from tests.strategies import legal_chains, arbitrary_graphs
"""

from tests.strategies.graphs import arbitrary_graphs, legal_chains, operator_kinds, runtimes

__all__ = [
    "arbitrary_graphs",
    "legal_chains",
    "operator_kinds",
    "runtimes",
]
