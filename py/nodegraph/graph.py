"""Graph container: node creation, lookup, and algorithm entry points."""
import logging
from random import Random
from typing import Dict, Iterator, List, Optional, ValuesView

from . import paths, spanning, traversal
from .config import default_rng
from .node import Node
from .types import (
    DuplicateNodeError, Edge, EmptyGraphError, NodeNotFoundError, Path, VisitorLike
)

logger = logging.getLogger(__name__)


class Graph:
    """An in-memory graph that can run BFS, DFS, Dijkstra, and Prim-Jarnik.

    Nodes are created by name and owned by the graph. Edges are wired on the
    nodes themselves (see Node); undirected graphs use an edge in each
    direction.
    """

    def __init__(self, rng: Optional[Random] = None):
        """Create an empty graph.

        Args:
            rng: Source of randomness for random(); defaults to a Random
                seeded from NODEGRAPH_SEED, or unseeded if that is unset
        """
        self._nodes: Dict[str, Node] = {}
        self._rng = rng if rng is not None else default_rng()

    @property
    def rng(self) -> Random:
        return self._rng

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def get_or_create_node(self, name: str) -> Node:
        """Return the node with the given name, creating it if needed.

        Repeated calls with the same name return the same node.
        """
        node = self._nodes.get(name)
        if node is None:
            node = self._nodes[name] = Node(name)
            logger.debug(f"Created node {name!r}")
        return node

    def get_node(self, name: str) -> Node:
        """Return the node with the given name.

        Raises:
            NodeNotFoundError: if no such node exists
        """
        try:
            return self._nodes[name]
        except KeyError:
            raise NodeNotFoundError(name) from None

    def add_node(self, name: str) -> Node:
        """Create a node with the given name.

        Raises:
            DuplicateNodeError: if the name is already taken
        """
        if name in self._nodes:
            raise DuplicateNodeError(name)
        return self.get_or_create_node(name)

    def contains_node(self, name: str) -> bool:
        return name in self._nodes

    def get_all_nodes(self) -> ValuesView[Node]:
        """Return all nodes in the graph, in no particular order."""
        return self._nodes.values()

    def random(self) -> Node:
        """Return a node chosen uniformly at random.

        Raises:
            EmptyGraphError: if the graph has no nodes
        """
        if not self._nodes:
            raise EmptyGraphError("Cannot choose a random node from an empty graph")
        return self._rng.choice(list(self._nodes.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    # -----------------
    # EDGE QUERIES
    # -----------------

    def get_edges(self, directed: bool = True) -> List[Edge]:
        """List the edges of the graph.

        With directed=False, an edge whose reverse has the same weight is
        reported once, from the endpoint whose name sorts first.
        """
        edges = []
        for node in self._nodes.values():
            for neighbor, weight in node.get_edges():
                if not directed and neighbor.get_name() < node.get_name():
                    if neighbor.has_edge(node) and neighbor.get_weight(node) == weight:
                        continue
                edges.append(Edge(node.get_name(), neighbor.get_name(), weight))
        return edges

    def total_weight(self, directed: bool = False) -> int:
        """Sum of the weights of get_edges(directed)."""
        return sum(edge.weight for edge in self.get_edges(directed))

    # -----------------
    # ALGORITHMS
    # -----------------

    def breadth_first_search(self, start_node_name: str, visitor: VisitorLike) -> List[Node]:
        """Call visitor on each node reachable from the start, level by level."""
        return traversal.breadth_first_search(self, start_node_name, visitor)

    def depth_first_search(self, start_node_name: str, visitor: VisitorLike) -> List[Node]:
        """Call visitor on each node reachable from the start, depth first."""
        return traversal.depth_first_search(self, start_node_name, visitor)

    def dijkstra(self, start_name: str) -> Dict[Node, int]:
        """Map every node reachable from the start to its minimum path cost."""
        return paths.dijkstra(self, start_name)

    def shortest_path(self, start_name: str, end_name: str) -> Optional[Path]:
        """Return the cheapest path between two existing nodes, or None."""
        return paths.shortest_path(self, start_name, end_name)

    def prim_jarnik(self, start_name: Optional[str] = None) -> "Graph":
        """Return a minimum spanning tree of the start node's component."""
        return spanning.prim_jarnik(self, start_name)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)})"
