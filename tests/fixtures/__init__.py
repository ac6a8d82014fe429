# tests/fixtures/__init__.py
"""Shared builders for flowlint tests.

Usage:
    from tests.fixtures.graphs import make_operator, make_edge, chain
"""
