# tests/contracts/test_results.py
"""Tests for validation result contracts."""

import pytest

from flowlint.contracts import (
    ConnectionVerdict,
    EntryVerdict,
    GraphReport,
    GraphValidationError,
    OperatorKind,
)


class TestConnectionVerdict:
    """Tests for ConnectionVerdict constructors."""

    def test_accept(self) -> None:
        verdict = ConnectionVerdict.accept()

        assert verdict.ok
        assert verdict.reason is None
        assert verdict.allowed == frozenset()

    def test_reject_carries_allowed_set(self) -> None:
        verdict = ConnectionVerdict.reject("nope", frozenset({OperatorKind.STOP}))

        assert not verdict.ok
        assert verdict.reason == "nope"
        assert verdict.allowed == {OperatorKind.STOP}


class TestEntryVerdict:
    """Tests for EntryVerdict defaults."""

    def test_defaults(self) -> None:
        verdict = EntryVerdict(ok=True)

        assert verdict.reason is None
        assert verdict.warnings == ()


class TestGraphReport:
    """Tests for GraphReport."""

    def test_ok_derived_from_errors(self) -> None:
        assert GraphReport().ok
        assert GraphReport(warnings=("advice",)).ok
        assert not GraphReport(errors=("broken",)).ok

    def test_ok_cannot_be_passed(self) -> None:
        with pytest.raises(TypeError):
            GraphReport(ok=True)  # type: ignore[call-arg]

    def test_raise_for_errors_lists_every_error(self) -> None:
        report = GraphReport(errors=("first", "second"))

        with pytest.raises(GraphValidationError, match="2 error") as exc_info:
            report.raise_for_errors()

        assert exc_info.value.errors == ("first", "second")
        assert "  - first" in str(exc_info.value)
        assert "  - second" in str(exc_info.value)

    def test_raise_for_errors_is_noop_when_ok(self) -> None:
        GraphReport(warnings=("advice",)).raise_for_errors()

    def test_graph_validation_error_is_value_error(self) -> None:
        assert issubclass(GraphValidationError, ValueError)

    def test_to_dict(self) -> None:
        report = GraphReport(errors=("e",), warnings=("w",), node_count=3, edge_count=2)

        assert report.to_dict() == {
            "ok": False,
            "errors": ["e"],
            "warnings": ["w"],
            "node_count": 3,
            "edge_count": 2,
        }
