# src/flowlint/contracts/enums.py
"""All kinds, modes, and rule tokens used across subsystem boundaries.

Values are the strings the graph editor exports, so documents and
settings files can be parsed straight into these enums.
"""

from enum import StrEnum


class NodeCategory(StrEnum):
    """Top-level role of a node on the editor canvas.

    Only OPERATOR nodes take part in connectivity validation. Agent, tool
    and memory nodes are palette items the editor wires up on its own.
    """

    OPERATOR = "operator"
    AGENT = "agent"
    TOOL = "tool"
    MEMORY = "memory"


class OperatorKind(StrEnum):
    """Kind of an operator node in a workflow graph.

    START and STOP are the two terminal kinds (graph entry and exit).
    SEQUENCE is offered by the editor palette but has no connectivity
    rules, so every connection touching it is rejected.
    """

    START = "START"
    STOP = "STOP"
    SEQUENCE = "SEQUENCE"
    TOOL_CALL = "TOOL_CALL"
    AGENT_CALL = "AGENT_CALL"
    MEMORY_READ = "MEMORY_READ"
    MEMORY_WRITE = "MEMORY_WRITE"
    DECISION = "DECISION"
    PARALLEL_FORK = "PARALLEL_FORK"
    PARALLEL_JOIN = "PARALLEL_JOIN"
    LOOP = "LOOP"
    ERROR_RETRY = "ERROR_RETRY"
    TIMEOUT = "TIMEOUT"
    HUMAN_PAUSE = "HUMAN_PAUSE"
    SUB_GRAPH = "SUB_GRAPH"

    @property
    def is_terminal(self) -> bool:
        """Check if this kind is a graph entry or exit."""
        return self in (OperatorKind.START, OperatorKind.STOP)


class RuleToken(StrEnum):
    """Symbolic placeholders used in policy entries.

    Expanded into concrete OperatorKind sets by the rule expander.

    Values:
        ANY: Every operator kind
        ANY_NON_TERMINAL: Every kind except START and STOP
        ANY_NON_TERMINAL_OR_END: Every kind except START
        BRANCH: A member of a parallel branch
        EARLIER_NODE: A node earlier on the current path
        ORIGIN: The node that originated the current error
    """

    ANY = "ANY"
    ANY_NON_TERMINAL = "ANY_NON_TERMINAL"
    ANY_NON_TERMINAL_OR_END = "ANY_NON_TERMINAL_OR_END"
    BRANCH = "BRANCH"
    EARLIER_NODE = "EARLIER_NODE"
    ORIGIN = "ORIGIN"


class TriggerType(StrEnum):
    """How a START node is triggered.

    Values:
        HUMAN: A user message starts the run
        SYSTEM: Invoked programmatically with initial arguments
        EVENT: An external scheduler or webhook picks the first node
        MULTI: Several cooperating entry points (fan-out)
    """

    HUMAN = "human"
    SYSTEM = "system"
    EVENT = "event"
    MULTI = "multi"


class RuntimeVariant(StrEnum):
    """Target execution runtime a graph is validated against."""

    LANGGRAPH = "langgraph"
    AUTOGEN = "autogen"
