# src/flowlint/core/policy/__init__.py
"""Connectivity policy: the rule table and symbolic-token expansion."""

from flowlint.core.policy.expander import (
    ALL_KINDS,
    APPROXIMATED_TOKENS,
    NON_TERMINAL_KINDS,
    NON_TERMINAL_OR_END_KINDS,
    ExpansionContext,
    expand,
    expand_terms,
)
from flowlint.core.policy.models import (
    PerRuntimeRule,
    PolicyEntry,
    RuleSpec,
    RuleTerm,
    SharedRule,
    resolve_terms,
)
from flowlint.core.policy.table import POLICY_TABLE, get_policy_entry, min_branches_for

__all__ = [
    "ALL_KINDS",
    "APPROXIMATED_TOKENS",
    "NON_TERMINAL_KINDS",
    "NON_TERMINAL_OR_END_KINDS",
    "POLICY_TABLE",
    "ExpansionContext",
    "PerRuntimeRule",
    "PolicyEntry",
    "RuleSpec",
    "RuleTerm",
    "SharedRule",
    "expand",
    "expand_terms",
    "get_policy_entry",
    "min_branches_for",
    "resolve_terms",
]
