# tests/cli/test_policy_command.py
"""Tests for flowlint policy command and its table rendering."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from flowlint.cli import app
from flowlint.cli_formatters import policy_rows
from flowlint.contracts import OperatorKind, RuntimeVariant

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(isolated_env: Path) -> None:
    """Keep .env files and FLOWLINT_* variables out of CLI runs."""


class TestPolicyRows:
    """Tests for the expanded policy rows."""

    def test_one_row_per_kind_in_palette_order(self) -> None:
        rows = policy_rows(RuntimeVariant.LANGGRAPH)

        assert [row[0] for row in rows] == [str(kind) for kind in OperatorKind]

    def test_sequence_has_no_rules(self) -> None:
        rows = {row[0]: row for row in policy_rows(RuntimeVariant.LANGGRAPH)}

        assert rows["SEQUENCE"][1:3] == ("no rules", "no rules")

    def test_tool_call_row_depends_on_runtime(self) -> None:
        autogen = {row[0]: row for row in policy_rows(RuntimeVariant.AUTOGEN)}
        langgraph = {row[0]: row for row in policy_rows(RuntimeVariant.LANGGRAPH)}

        assert autogen["TOOL_CALL"][1] == "AGENT_CALL"
        assert "DECISION" in langgraph["TOOL_CALL"][1]
        assert "START" not in langgraph["TOOL_CALL"][1].split(", ")

    def test_terminal_sides_are_empty(self) -> None:
        rows = {row[0]: row for row in policy_rows(RuntimeVariant.LANGGRAPH)}

        assert rows["START"][1] == "-"
        assert rows["STOP"][2] == "-"

    def test_approximated_tokens_are_marked(self) -> None:
        rows = {row[0]: row for row in policy_rows(RuntimeVariant.LANGGRAPH)}

        assert rows["PARALLEL_JOIN"][1].endswith(" *")
        assert rows["LOOP"][2].endswith(" *")
        assert not rows["AGENT_CALL"][2].endswith(" *")

    def test_branch_minimums(self) -> None:
        rows = {row[0]: row for row in policy_rows(RuntimeVariant.LANGGRAPH)}

        assert rows["DECISION"][3] == "2"
        assert rows["PARALLEL_FORK"][3] == "2"
        assert rows["AGENT_CALL"][3] == ""


class TestPolicyCommand:
    """Tests for policy command."""

    @pytest.mark.parametrize("runtime", ["langgraph", "autogen"])
    def test_prints_table(self, runtime: str) -> None:
        result = runner.invoke(app, ["policy", "--runtime", runtime])

        assert result.exit_code == 0, result.output
        assert f"Connectivity policy ({runtime})" in result.output
        assert "PARALLEL_JOIN" in result.output
