# tests/core/test_policy_table.py
"""Tests for the connectivity policy table and rule models."""

import pytest

from flowlint.contracts import OperatorKind, RuleToken, RuntimeVariant
from flowlint.core.policy import (
    POLICY_TABLE,
    PerRuntimeRule,
    PolicyEntry,
    SharedRule,
    get_policy_entry,
    min_branches_for,
    resolve_terms,
)


class TestPolicyTable:
    """Tests for the table contents."""

    def test_every_kind_but_sequence_has_entry(self) -> None:
        assert set(POLICY_TABLE) == set(OperatorKind) - {OperatorKind.SEQUENCE}

    def test_sequence_has_no_entry(self) -> None:
        assert get_policy_entry(OperatorKind.SEQUENCE) is None

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            POLICY_TABLE[OperatorKind.SEQUENCE] = POLICY_TABLE[OperatorKind.STOP]  # type: ignore[index]

    def test_start_accepts_nothing(self) -> None:
        entry = POLICY_TABLE[OperatorKind.START]

        for runtime in RuntimeVariant:
            assert entry.allowed_predecessors(runtime) == frozenset()
            assert entry.allowed_successors(runtime) == {RuleToken.ANY_NON_TERMINAL}

    def test_stop_feeds_nothing(self) -> None:
        entry = POLICY_TABLE[OperatorKind.STOP]

        for runtime in RuntimeVariant:
            assert entry.allowed_predecessors(runtime) == {RuleToken.ANY}
            assert entry.allowed_successors(runtime) == frozenset()

    def test_branch_minimums(self) -> None:
        assert min_branches_for(OperatorKind.DECISION) == 2
        assert min_branches_for(OperatorKind.PARALLEL_FORK) == 2
        assert min_branches_for(OperatorKind.AGENT_CALL) is None
        assert min_branches_for(OperatorKind.SEQUENCE) is None

    def test_tool_call_predecessors_depend_on_runtime(self) -> None:
        entry = POLICY_TABLE[OperatorKind.TOOL_CALL]

        assert entry.is_runtime_dependent
        assert entry.allowed_predecessors(RuntimeVariant.AUTOGEN) == {OperatorKind.AGENT_CALL}
        assert entry.allowed_predecessors(RuntimeVariant.LANGGRAPH) == {RuleToken.ANY_NON_TERMINAL}

    def test_only_tool_call_is_runtime_dependent(self) -> None:
        dependent = {kind for kind, entry in POLICY_TABLE.items() if entry.is_runtime_dependent}

        assert dependent == {OperatorKind.TOOL_CALL}

    def test_structural_tokens_placement(self) -> None:
        langgraph = RuntimeVariant.LANGGRAPH

        assert POLICY_TABLE[OperatorKind.PARALLEL_JOIN].allowed_predecessors(langgraph) == {RuleToken.BRANCH}
        assert RuleToken.EARLIER_NODE in POLICY_TABLE[OperatorKind.LOOP].allowed_successors(langgraph)
        assert RuleToken.ORIGIN in POLICY_TABLE[OperatorKind.ERROR_RETRY].allowed_successors(langgraph)

    def test_human_pause_successors(self) -> None:
        successors = POLICY_TABLE[OperatorKind.HUMAN_PAUSE].allowed_successors(RuntimeVariant.AUTOGEN)

        assert successors == {OperatorKind.AGENT_CALL, OperatorKind.DECISION}


class TestRuleModels:
    """Tests for SharedRule / PerRuntimeRule resolution."""

    def test_shared_rule_ignores_runtime(self) -> None:
        rule = SharedRule(frozenset({OperatorKind.STOP}))

        assert resolve_terms(rule, RuntimeVariant.AUTOGEN) == resolve_terms(rule, RuntimeVariant.LANGGRAPH)

    def test_per_runtime_rule_selects_runtime(self) -> None:
        rule = PerRuntimeRule(
            {
                RuntimeVariant.AUTOGEN: frozenset({OperatorKind.AGENT_CALL}),
                RuntimeVariant.LANGGRAPH: frozenset({RuleToken.ANY}),
            }
        )

        assert resolve_terms(rule, RuntimeVariant.AUTOGEN) == {OperatorKind.AGENT_CALL}
        assert resolve_terms(rule, RuntimeVariant.LANGGRAPH) == {RuleToken.ANY}

    def test_per_runtime_rule_requires_every_runtime(self) -> None:
        with pytest.raises(ValueError, match="missing runtimes"):
            PerRuntimeRule({RuntimeVariant.AUTOGEN: frozenset()})

    def test_policy_entry_defaults(self) -> None:
        entry = PolicyEntry(predecessors=SharedRule(frozenset()), successors=SharedRule(frozenset()))

        assert entry.min_branches is None
        assert not entry.is_runtime_dependent
