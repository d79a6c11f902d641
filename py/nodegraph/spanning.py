"""Minimum spanning tree construction (Prim-Jarnik)."""
import heapq
import logging
from typing import TYPE_CHECKING, Optional, Set

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)


def prim_jarnik(graph: "Graph", start_name: Optional[str] = None) -> "Graph":
    """Compute a minimum spanning tree with Prim-Jarnik's algorithm.

    The tree grows from start_name (created if missing) or, when omitted,
    from a random node. Only the connected component reachable from the
    start is spanned; nodes outside it appear in the result without edges.

    Returns:
        A new graph holding every node name of this graph and the tree
        edges, each as an undirected edge with its original weight
    """
    tree = type(graph)(rng=graph.rng)

    if start_name is None:
        if not len(graph):
            return tree
        start = graph.random()
    else:
        start = graph.get_or_create_node(start_name)

    for node in graph.get_all_nodes():
        tree.get_or_create_node(node.get_name())

    in_tree: Set[str] = set()
    # (weight, candidate, tree-side node); the start has no tree-side node
    frontier = [(0, start.get_name(), None)]

    while frontier:
        weight, name, parent_name = heapq.heappop(frontier)
        if name in in_tree:
            continue
        in_tree.add(name)

        if parent_name is not None:
            tree.get_node(parent_name).add_undirected_edge_to_node(
                tree.get_node(name), weight)

        for neighbor, edge_weight in graph.get_node(name).get_edges():
            if neighbor.get_name() not in in_tree:
                heapq.heappush(frontier, (edge_weight, neighbor.get_name(), name))

    if len(in_tree) < len(graph):
        logger.info(
            f"Spanning tree from {start.get_name()!r} covers {len(in_tree)} "
            f"of {len(graph)} nodes; graph is not connected"
        )
    return tree
