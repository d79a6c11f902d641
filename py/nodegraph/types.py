"""Type definitions for the nodegraph library."""
from dataclasses import dataclass, field
from typing import Any, Callable, List, Protocol, Union, runtime_checkable


@runtime_checkable
class NodeVisitor(Protocol):
    """Receives each node the first time a traversal reaches it."""

    def visit(self, node: Any) -> None:
        ...


# A traversal accepts either a NodeVisitor or a plain callable.
VisitorLike = Union[NodeVisitor, Callable[[Any], Any]]


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge as reported by Graph.get_edges()."""
    source: str
    target: str
    weight: int

    def to_dict(self) -> dict:
        return {"from": self.source, "to": self.target, "weight": self.weight}


@dataclass
class Path:
    """A path through the graph, listed by node name, with its total cost."""
    nodes: List[str] = field(default_factory=list)
    cost: int = 0

    def __len__(self) -> int:
        return len(self.nodes)

    def to_dict(self) -> dict:
        return {"path": list(self.nodes), "cost": self.cost}


# Errors
class GraphError(Exception):
    """Base error for graph operations."""
    pass


class EdgeNotFoundError(GraphError):
    """No edge exists between the given pair of nodes."""

    def __init__(self, source: str, target: str):
        super().__init__(f"Edge not found: {source} -> {target}")
        self.source = source
        self.target = target


class NodeNotFoundError(GraphError):
    """No node with the given name exists."""

    def __init__(self, name: str):
        super().__init__(f"Node not found: {name}")
        self.name = name


class DuplicateNodeError(GraphError):
    """A node with the given name already exists."""

    def __init__(self, name: str):
        super().__init__(f"Node already exists: {name}")
        self.name = name


class EmptyGraphError(GraphError):
    """The operation needs at least one node."""
    pass
