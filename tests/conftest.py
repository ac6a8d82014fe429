# tests/conftest.py
"""Shared test configuration.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/

Graph builders live in tests.fixtures.graphs; this module only holds
fixtures that need pytest machinery.
"""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from flowlint.contracts import WorkflowEdge, WorkflowNode
from tests.fixtures.graphs import make_graph_linear, write_workflow

# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Load profile from environment, default to "ci"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def linear_graph() -> tuple[list[WorkflowNode], list[WorkflowEdge]]:
    """START(system) -> AGENT_CALL -> STOP."""
    return make_graph_linear()


@pytest.fixture
def valid_workflow_file(tmp_path: Path) -> Path:
    """The linear graph exported as JSON."""
    nodes, edges = make_graph_linear()
    return write_workflow(tmp_path / "workflow.json", nodes, edges)


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Run in an empty directory with no FLOWLINT_* variables set.

    Keeps a developer's .env or exported overrides out of CLI and
    settings tests.
    """
    for key in list(os.environ):
        if key.startswith("FLOWLINT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
