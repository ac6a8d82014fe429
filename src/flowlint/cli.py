# src/flowlint/cli.py
"""flowlint Command Line Interface.

Entry point for the flowlint CLI tool.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import typer
from dynaconf.vendor.ruamel.yaml.parser import ParserError as YamlParserError
from dynaconf.vendor.ruamel.yaml.scanner import ScannerError as YamlScannerError
from pydantic import ValidationError

from flowlint import __version__
from flowlint.cli_formatters import (
    build_policy_table,
    format_report_console,
    format_report_json,
    format_verdict_console,
    format_verdict_json,
)
from flowlint.contracts import GraphSnapshot, RuntimeVariant
from flowlint.core.config import FlowlintSettings, RuntimeSettings, load_settings
from flowlint.core.document import WorkflowDocumentError, load_workflow
from flowlint.core.validation import can_connect, validate_graph

__all__ = [
    "app",
]

app = typer.Typer(
    name="flowlint",
    help="flowlint: Connectivity validation for agent workflow graphs.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"flowlint version {__version__}")
        raise typer.Exit()


def _load_dotenv(env_file: Path | None = None) -> bool:
    """Load ``.env`` so FLOWLINT_* overrides apply; existing variables win.

    An explicit ``--env-file`` must exist; otherwise ``.env`` is searched
    for from the working directory upwards and may be absent.
    """
    from dotenv import load_dotenv

    if env_file is None:
        return load_dotenv(override=False)
    if not env_file.exists():
        typer.secho(f"Error: .env file not found: {env_file}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    return load_dotenv(env_file, override=False)


@app.callback()
def main(
    version: bool | None = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    no_dotenv: bool = typer.Option(False, "--no-dotenv", help="Do not read a .env file."),
    env_file: Path | None = typer.Option(None, "--env-file", help="Read FLOWLINT_* variables from this .env file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine DEBUG events to stderr."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Write logs to stderr as JSON lines."),
) -> None:
    """flowlint: Connectivity validation for agent workflow graphs."""
    from flowlint.core.logging import configure_logging

    configure_logging(json_output=json_logs, level="DEBUG" if verbose else "INFO")

    if no_dotenv:
        if env_file is not None:
            typer.secho("Warning: --env-file ignored because --no-dotenv is set.", fg=typer.colors.YELLOW, err=True)
        return
    _load_dotenv(env_file)


def _format_validation_error(
    title: str,
    message: str,
    hint: str | None = None,
    details: list[str] | None = None,
) -> None:
    """Print a red error panel to stderr."""
    from rich.console import Console
    from rich.panel import Panel
    from rich.text import Text

    body = Text(message)
    if details:
        body.append("\n\n" + "".join(f"  • {detail}\n" for detail in details), style="dim")
    if hint:
        body.append("\nHint: ", style="yellow bold")
        body.append(hint, style="yellow")

    Console(stderr=True).print(Panel(body, title=f"[red bold]❌ {title}[/]", border_style="red", padding=(0, 1)))


def _load_graph_or_exit(graph_path: Path) -> GraphSnapshot:
    """Load a workflow document, rendering an error panel on failure."""
    try:
        return load_workflow(graph_path)
    except FileNotFoundError:
        _format_validation_error(
            title="File Not Found",
            message=f"Workflow file does not exist: {graph_path}",
            hint="Check the path and ensure the file exists.",
        )
        raise typer.Exit(1) from None
    except WorkflowDocumentError as e:
        _format_validation_error(
            title="Invalid Workflow Document",
            message=str(e),
            details=e.details or None,
            hint="The document needs top-level 'nodes' and 'edges' lists as exported by the editor.",
        )
        raise typer.Exit(1) from None


def _load_settings_or_exit(settings_path: Path | None) -> FlowlintSettings:
    """Load settings if a path was given, rendering an error panel on failure."""
    if settings_path is None:
        return FlowlintSettings()

    try:
        return load_settings(settings_path)
    except (YamlParserError, YamlScannerError) as e:
        _format_validation_error(
            title="YAML Syntax Error",
            message=f"Failed to parse {settings_path.name}",
            details=[str(e.problem)] if hasattr(e, "problem") else None,
            hint="Check for unclosed brackets, incorrect indentation, or invalid characters.",
        )
        raise typer.Exit(1) from None
    except FileNotFoundError:
        _format_validation_error(
            title="File Not Found",
            message=f"Settings file does not exist: {settings_path}",
            hint="Check the path and ensure the file exists.",
        )
        raise typer.Exit(1) from None
    except ValidationError as e:
        details = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            details.append(f"{loc}: {error['msg']}")
        _format_validation_error(
            title="Configuration Validation Failed",
            message=f"Invalid settings in {settings_path.name}",
            details=details,
            hint="Check field names, types, and required values.",
        )
        raise typer.Exit(1) from None


@app.command()
def validate(
    graph: Path = typer.Argument(
        ...,
        help="Path to the workflow graph (YAML or JSON export).",
    ),
    runtime: RuntimeVariant | None = typer.Option(
        None,
        "--runtime",
        "-r",
        help="Runtime to validate against (overrides the settings file; default: langgraph).",
    ),
    settings: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to settings YAML file.",
    ),
    checkpoint_store: str | None = typer.Option(
        None,
        "--checkpoint-store",
        help="Checkpoint store backing resumable runs (overrides the settings file).",
    ),
    output_format: Literal["console", "json"] = typer.Option(
        "console",
        "--format",
        "-f",
        help="Output format: 'console' (human-readable) or 'json' (structured JSON).",
    ),
) -> None:
    """Validate a whole workflow graph.

    Exits with status 1 when the graph has errors. Warnings never fail
    validation.
    """
    config = _load_settings_or_exit(settings.expanduser() if settings is not None else None)
    target_runtime = runtime or config.runtime
    runtime_settings = config.runtime_settings
    if checkpoint_store is not None:
        runtime_settings = RuntimeSettings(checkpoint_store=checkpoint_store)

    graph_path = graph.expanduser()
    snapshot = _load_graph_or_exit(graph_path)
    report = validate_graph(snapshot.nodes, snapshot.edges, target_runtime, runtime_settings)

    if output_format == "json":
        format_report_json(report, target_runtime)
    else:
        format_report_console(report, target_runtime, graph_path.name)

    if not report.ok:
        raise typer.Exit(1)


@app.command("check-edge")
def check_edge(
    graph: Path = typer.Argument(
        ...,
        help="Path to the workflow graph (YAML or JSON export).",
    ),
    source_id: str = typer.Argument(..., help="Id of the node the new edge leaves."),
    target_id: str = typer.Argument(..., help="Id of the node the new edge enters."),
    runtime: RuntimeVariant = typer.Option(
        RuntimeVariant.LANGGRAPH,
        "--runtime",
        "-r",
        help="Runtime to check the connection against.",
    ),
    output_format: Literal["console", "json"] = typer.Option(
        "console",
        "--format",
        "-f",
        help="Output format: 'console' (human-readable) or 'json' (structured JSON).",
    ),
) -> None:
    """Check whether a new edge SOURCE_ID -> TARGET_ID may be added to a graph.

    Applies the same checks as the editor's connect gesture: no self-edges,
    no duplicates, policy, and the cycle guard.
    """
    snapshot = _load_graph_or_exit(graph.expanduser())

    source = snapshot.get_node(source_id)
    target = snapshot.get_node(target_id)
    if source is None or target is None:
        missing = [node_id for node_id in (source_id, target_id) if snapshot.get_node(node_id) is None]
        _format_validation_error(
            title="Unknown Node",
            message=f"Node id(s) not found in {graph.name}: {', '.join(missing)}",
            details=[node.id for node in snapshot.nodes],
            hint="Use one of the node ids listed above.",
        )
        raise typer.Exit(1)

    verdict = can_connect(source, target, snapshot.nodes, snapshot.edges, runtime)

    if output_format == "json":
        format_verdict_json(verdict, source, target)
    else:
        format_verdict_console(verdict, source, target)

    if not verdict.ok:
        raise typer.Exit(1)


@app.command()
def policy(
    runtime: RuntimeVariant = typer.Option(
        RuntimeVariant.LANGGRAPH,
        "--runtime",
        "-r",
        help="Runtime whose variant of runtime-dependent rules to show.",
    ),
) -> None:
    """Show the connectivity policy with symbolic tokens expanded."""
    from rich.console import Console

    Console().print(build_policy_table(runtime))


if __name__ == "__main__":
    app()
