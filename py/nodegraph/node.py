"""Graph vertex with weighted outgoing edges."""
from typing import Dict, Iterator, KeysView, Tuple

from .types import EdgeNotFoundError


class Node:
    """A single vertex of a graph.

    A node can be used for directed or undirected graphs, weighted or not.
    For unweighted graphs use a constant weight such as 1; an undirected edge
    is a directed edge in each direction with the same weight.

    Nodes compare and hash by identity, so two nodes with the same name in
    different graphs are distinct.
    """

    def __init__(self, name: str):
        """Create a node with the given name and no edges."""
        self._name = name
        self._edges: Dict["Node", int] = {}

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        """Return the name of the node."""
        return self._name

    def get_neighbors(self) -> KeysView["Node"]:
        """Return the nodes reachable by one outgoing edge.

        The result is a live view; do not add or remove edges on this node
        while iterating it.
        """
        return self._edges.keys()

    def get_edges(self) -> Iterator[Tuple["Node", int]]:
        """Yield (neighbor, weight) for each outgoing edge."""
        return iter(self._edges.items())

    def out_degree(self) -> int:
        return len(self._edges)

    def add_directed_edge_to_node(self, n: "Node", weight: int) -> None:
        """Add an edge to n, replacing the weight of any existing one."""
        self._edges[n] = weight

    def add_undirected_edge_to_node(self, n: "Node", weight: int) -> None:
        """Add an edge to n and an edge from n back to this node."""
        self.add_directed_edge_to_node(n, weight)
        n.add_directed_edge_to_node(self, weight)

    def remove_directed_edge_to_node(self, n: "Node") -> None:
        """Remove the edge to n.

        Raises:
            EdgeNotFoundError: if there is no edge to n
        """
        if n not in self._edges:
            raise EdgeNotFoundError(self._name, n.get_name())
        del self._edges[n]

    def remove_undirected_edge_to_node(self, n: "Node") -> None:
        """Remove the edge to n and the edge from n back to this node.

        Both edges must exist; otherwise nothing is removed.

        Raises:
            EdgeNotFoundError: if either direction is missing
        """
        if not self.has_edge(n):
            raise EdgeNotFoundError(self._name, n.get_name())
        if not n.has_edge(self):
            raise EdgeNotFoundError(n.get_name(), self._name)
        self.remove_directed_edge_to_node(n)
        if n is not self:
            n.remove_directed_edge_to_node(self)

    def has_edge(self, other: "Node") -> bool:
        """Return True if there is an edge from this node to other."""
        return other in self._edges

    def get_weight(self, n: "Node") -> int:
        """Return the weight of the edge to n.

        Raises:
            EdgeNotFoundError: if there is no edge to n
        """
        try:
            return self._edges[n]
        except KeyError:
            raise EdgeNotFoundError(self._name, n.get_name()) from None

    def __repr__(self) -> str:
        return f"Node({self._name!r})"
