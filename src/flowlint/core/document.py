# src/flowlint/core/document.py
"""Loading workflow graphs exported by the graph editor.

The editor exports ``{"nodes": [...], "edges": [...]}`` as JSON; YAML is
accepted too since it is a superset. Field names follow the editor's
camelCase export. Only topology-relevant fields are read; everything
else on a node (prompts, positions, model settings) is ignored.

Loading never writes anything back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from flowlint.contracts.enums import NodeCategory, OperatorKind, TriggerType
from flowlint.contracts.graph import GraphSnapshot, WorkflowEdge, WorkflowNode
from flowlint.contracts.types import EdgeID, NodeID
from flowlint.core.logging import get_logger

logger = get_logger(__name__)


class WorkflowDocumentError(ValueError):
    """Raised when a workflow document cannot be read or is malformed.

    ``details`` holds one line per problem (e.g. per pydantic error).
    """

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        self.details = details or []
        super().__init__(message)


class NodeDocument(BaseModel):
    """One node as exported by the editor."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str = Field(min_length=1)
    type: NodeCategory = NodeCategory.OPERATOR
    name: str = ""
    operator_type: OperatorKind | None = Field(default=None, alias="operatorType")
    trigger_type: TriggerType | None = Field(default=None, alias="triggerType")
    resume_capable: bool = Field(default=False, alias="resumeCapable")
    operator_config: dict[str, Any] | None = Field(default=None, alias="operatorConfig")

    @model_validator(mode="before")
    @classmethod
    def lift_start_config(cls, data: Any) -> Any:
        """Read START settings from the details form's ``operatorConfig``.

        The form saves ``{trigger_type, resume_capable}`` there instead of on
        the node itself. Top-level keys win when both are present.
        """
        if not isinstance(data, dict):
            return data
        config = data.get("operatorConfig", data.get("operator_config"))
        if not isinstance(config, dict):
            return data
        lifted = dict(data)
        for key, alias in (("trigger_type", "triggerType"), ("resume_capable", "resumeCapable")):
            if key in config and key not in data and alias not in data:
                lifted[alias] = config[key]
        return lifted

    def to_node(self) -> WorkflowNode:
        return WorkflowNode(
            id=NodeID(self.id),
            category=self.type,
            operator_kind=self.operator_type,
            name=self.name,
            trigger_type=self.trigger_type,
            resume_capable=self.resume_capable,
        )


class EdgeDocument(BaseModel):
    """One edge as exported by the editor."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str | None = None
    source: str = Field(min_length=1)
    target: str = Field(min_length=1)
    source_handle: str | None = Field(default=None, alias="sourceHandle")
    target_handle: str | None = Field(default=None, alias="targetHandle")

    def to_edge(self) -> WorkflowEdge:
        return WorkflowEdge(
            source=NodeID(self.source),
            target=NodeID(self.target),
            id=EdgeID(self.id) if self.id is not None else None,
            source_handle=self.source_handle,
            target_handle=self.target_handle,
        )


class WorkflowDocument(BaseModel):
    """A whole exported workflow."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    nodes: list[NodeDocument] = Field(default_factory=list)
    edges: list[EdgeDocument] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_node_ids(self) -> WorkflowDocument:
        """Node ids must be unique; edges address nodes by id."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for node in self.nodes:
            if node.id in seen:
                duplicates.append(node.id)
            seen.add(node.id)
        if duplicates:
            raise ValueError(f"Duplicate node id(s): {sorted(set(duplicates))}")
        return self

    def to_snapshot(self) -> GraphSnapshot:
        return GraphSnapshot.of(
            (node.to_node() for node in self.nodes),
            (edge.to_edge() for edge in self.edges),
        )


def parse_workflow(data: Any) -> GraphSnapshot:
    """Validate an already-decoded document and build a snapshot.

    Raises:
        WorkflowDocumentError: If the document shape is invalid
    """
    if not isinstance(data, dict):
        raise WorkflowDocumentError("Workflow document must be a mapping with 'nodes' and 'edges'")
    try:
        document = WorkflowDocument.model_validate(data)
    except ValidationError as e:
        details = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"]) or "document"
            details.append(f"{loc}: {error['msg']}")
        raise WorkflowDocumentError("Invalid workflow document", details=details) from e
    return document.to_snapshot()


def load_workflow(path: Path) -> GraphSnapshot:
    """Read a YAML or JSON workflow export from disk.

    Raises:
        FileNotFoundError: If the file doesn't exist
        WorkflowDocumentError: If the file can't be parsed or is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Workflow file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        problem = getattr(e, "problem", None) or str(e)
        raise WorkflowDocumentError(f"Failed to parse {path.name}", details=[str(problem)]) from e

    snapshot = parse_workflow(data)
    logger.debug("workflow_loaded", path=str(path), nodes=len(snapshot.nodes), edges=len(snapshot.edges))
    return snapshot
