# src/flowlint/cli_formatters.py
"""CLI output formatters for validation results.

Console formatters write human-readable lines; JSON formatters write one
JSON object to stdout so the output can be piped to other tools. Logs
never go to stdout, so JSON output stays parseable.
"""

from __future__ import annotations

import json

import typer
from rich.table import Table

from flowlint.contracts.enums import OperatorKind, RuntimeVariant
from flowlint.contracts.graph import GraphSnapshot, WorkflowNode
from flowlint.contracts.results import ConnectionVerdict, GraphReport
from flowlint.core.policy import (
    APPROXIMATED_TOKENS,
    POLICY_TABLE,
    ExpansionContext,
    RuleTerm,
    expand_terms,
)


def _kinds_in_palette_order(kinds: frozenset[OperatorKind]) -> list[OperatorKind]:
    return [kind for kind in OperatorKind if kind in kinds]


def format_report_console(report: GraphReport, runtime: RuntimeVariant, graph_name: str) -> None:
    """Print a graph report for humans."""
    if report.ok:
        typer.echo(f"✅ {graph_name} is valid for {runtime}")
    else:
        typer.echo(f"❌ {graph_name} is invalid for {runtime} ({len(report.errors)} error(s))")
    typer.echo(f"  Graph: {report.node_count} nodes, {report.edge_count} edges")

    for error in report.errors:
        typer.echo(f"  ✗ {error}")
    for warning in report.warnings:
        typer.echo(f"  ⚠ {warning}")


def format_report_json(report: GraphReport, runtime: RuntimeVariant) -> None:
    """Print a graph report as a single JSON object."""
    typer.echo(json.dumps({"runtime": runtime.value, **report.to_dict()}))


def format_verdict_console(verdict: ConnectionVerdict, source: WorkflowNode, target: WorkflowNode) -> None:
    """Print a connection verdict for humans."""
    if verdict.ok:
        typer.echo(f"✅ {source.label} → {target.label} is allowed")
        return
    typer.echo(f"❌ {source.label} → {target.label} is not allowed: {verdict.reason}")
    if verdict.allowed:
        allowed = ", ".join(_kinds_in_palette_order(verdict.allowed))
        typer.echo(f"  Allowed: {allowed}")


def format_verdict_json(verdict: ConnectionVerdict, source: WorkflowNode, target: WorkflowNode) -> None:
    """Print a connection verdict as a single JSON object."""
    typer.echo(
        json.dumps(
            {
                "source": source.id,
                "target": target.id,
                "ok": verdict.ok,
                "reason": verdict.reason,
                "allowed": [str(kind) for kind in _kinds_in_palette_order(verdict.allowed)],
            }
        )
    )


def _describe_terms(terms: frozenset[RuleTerm], context: ExpansionContext) -> str:
    if not terms:
        return "-"
    text = ", ".join(_kinds_in_palette_order(expand_terms(terms, context)))
    if terms & APPROXIMATED_TOKENS:
        text += " *"
    return text


def policy_rows(runtime: RuntimeVariant) -> list[tuple[str, str, str, str]]:
    """Policy table rows with tokens expanded for a runtime.

    Returns (kind, predecessors, successors, min branches) per kind, in
    palette order. Kinds without an entry are listed with "no rules".
    """
    context = ExpansionContext(graph=GraphSnapshot())
    rows: list[tuple[str, str, str, str]] = []
    for kind in OperatorKind:
        entry = POLICY_TABLE.get(kind)
        if entry is None:
            rows.append((str(kind), "no rules", "no rules", ""))
            continue
        rows.append(
            (
                str(kind),
                _describe_terms(entry.allowed_predecessors(runtime), context),
                _describe_terms(entry.allowed_successors(runtime), context),
                str(entry.min_branches) if entry.min_branches is not None else "",
            )
        )
    return rows


def build_policy_table(runtime: RuntimeVariant) -> Table:
    """Rich table of the connectivity policy for a runtime."""
    table = Table(
        title=f"Connectivity policy ({runtime})",
        caption="* includes BRANCH, EARLIER_NODE or ORIGIN, approximated as any non-terminal kind",
        show_lines=True,
    )
    table.add_column("Kind", style="bold")
    table.add_column("Accepts input from")
    table.add_column("May connect to")
    table.add_column("Min branches", justify="right")
    for row in policy_rows(runtime):
        table.add_row(*row)
    return table
