# src/flowlint/contracts/graph.py
"""Read-only node and edge snapshots handed to the validation engine.

The graph editor owns the real nodes and edges. On every call it passes
an immutable snapshot; nothing in flowlint ever mutates one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from flowlint.contracts.enums import NodeCategory, OperatorKind, TriggerType
from flowlint.contracts.types import EdgeID, NodeID


@dataclass(frozen=True, slots=True)
class WorkflowNode:
    """A node on the editor canvas.

    trigger_type and resume_capable are only meaningful on START operators.
    Everything else the editor stores on a node (prompts, model names,
    canvas position) is irrelevant to topology and not carried here.
    """

    id: NodeID
    category: NodeCategory = NodeCategory.OPERATOR
    operator_kind: OperatorKind | None = None
    name: str = ""
    trigger_type: TriggerType | None = None
    resume_capable: bool = False

    @property
    def is_operator(self) -> bool:
        """Whether this node takes part in connectivity validation."""
        return self.category == NodeCategory.OPERATOR

    def is_kind(self, kind: OperatorKind) -> bool:
        """Check if this is an operator node of the given kind."""
        return self.is_operator and self.operator_kind == kind

    @property
    def kind_label(self) -> str:
        """Operator kind, or the category for non-operator and untyped nodes."""
        if self.is_operator and self.operator_kind is not None:
            return str(self.operator_kind)
        return str(self.category)

    @property
    def label(self) -> str:
        """Display name, falling back to kind and id."""
        if self.name.strip():
            return self.name.strip()
        return f"{self.kind_label} ({self.id})"

    @property
    def reference(self) -> str:
        """Kind-qualified name used at the start of validation messages.

        ``DECISION 'Route by intent'`` for named nodes, ``DECISION (node_7)`` otherwise.
        """
        if self.name.strip():
            return f"{self.kind_label} '{self.name.strip()}'"
        return f"{self.kind_label} ({self.id})"


@dataclass(frozen=True, slots=True)
class WorkflowEdge:
    """A directed connection between two nodes.

    Handle ids name the connector slots the edge was drawn between;
    they are carried for round-tripping only and never validated.
    """

    source: NodeID
    target: NodeID
    id: EdgeID | None = None
    source_handle: str | None = None
    target_handle: str | None = None


@dataclass(frozen=True, slots=True)
class GraphSnapshot:
    """Immutable view of a whole graph with adjacency indexes.

    Indexes are built once at construction so per-node lookups stay O(1)
    and whole-graph passes stay O(V+E). Edges whose endpoints are unknown
    are kept in ``edges`` (the validator reports them) but do not appear
    in the adjacency indexes of the missing side.
    """

    nodes: tuple[WorkflowNode, ...] = ()
    edges: tuple[WorkflowEdge, ...] = ()
    _by_id: dict[NodeID, WorkflowNode] = field(init=False, repr=False, compare=False)
    _outgoing: dict[NodeID, tuple[WorkflowEdge, ...]] = field(init=False, repr=False, compare=False)
    _incoming: dict[NodeID, tuple[WorkflowEdge, ...]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        outgoing: dict[NodeID, list[WorkflowEdge]] = {}
        incoming: dict[NodeID, list[WorkflowEdge]] = {}
        for edge in self.edges:
            outgoing.setdefault(edge.source, []).append(edge)
            incoming.setdefault(edge.target, []).append(edge)
        object.__setattr__(self, "_by_id", {node.id: node for node in self.nodes})
        object.__setattr__(self, "_outgoing", {k: tuple(v) for k, v in outgoing.items()})
        object.__setattr__(self, "_incoming", {k: tuple(v) for k, v in incoming.items()})

    @classmethod
    def of(cls, nodes: Iterable[WorkflowNode], edges: Iterable[WorkflowEdge]) -> GraphSnapshot:
        """Build a snapshot from any node and edge iterables."""
        return cls(nodes=tuple(nodes), edges=tuple(edges))

    def get_node(self, node_id: str) -> WorkflowNode | None:
        """Look up a node by id; None when the id is unknown."""
        return self._by_id.get(NodeID(node_id))

    def outgoing(self, node_id: str) -> tuple[WorkflowEdge, ...]:
        """Edges leaving the node, in document order."""
        return self._outgoing.get(NodeID(node_id), ())

    def incoming(self, node_id: str) -> tuple[WorkflowEdge, ...]:
        """Edges entering the node, in document order."""
        return self._incoming.get(NodeID(node_id), ())

    def operators_of_kind(self, kind: OperatorKind) -> list[WorkflowNode]:
        """All operator nodes of one kind, in document order."""
        return [node for node in self.nodes if node.is_kind(kind)]

    def has_edge(self, source: str, target: str) -> bool:
        """Check if at least one edge already joins source to target."""
        return any(edge.target == target for edge in self.outgoing(source))
