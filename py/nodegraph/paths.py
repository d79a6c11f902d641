"""Pathfinding algorithms: Dijkstra and single-pair shortest path."""
import heapq
import itertools
import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .config import INFINITY
from .node import Node
from .types import Path

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)


def _relax_all(start: Node) -> Tuple[Dict[Node, int], Dict[Node, Node]]:
    """Run Dijkstra from start; return (costs, parent)."""
    costs: Dict[Node, int] = {start: 0}
    parent: Dict[Node, Node] = {}
    finalized = set()
    # Ties break by name, then by push order; Node itself is never compared.
    counter = itertools.count()
    pq = [(0, start.get_name(), next(counter), start)]

    while pq:
        cost, _, _, node = heapq.heappop(pq)

        if node in finalized:
            continue
        finalized.add(node)

        for neighbor, weight in node.get_edges():
            if neighbor in finalized:
                continue
            if weight < 0:
                raise ValueError(
                    f"Negative edge weight {weight} on "
                    f"{node.get_name()} -> {neighbor.get_name()}"
                )
            new_cost = cost + weight
            if new_cost < costs.get(neighbor, INFINITY):
                costs[neighbor] = new_cost
                parent[neighbor] = node
                heapq.heappush(pq, (new_cost, neighbor.get_name(), next(counter), neighbor))

    return costs, parent


def dijkstra(graph: "Graph", start_name: str) -> Dict[Node, int]:
    """Cost of the cheapest path from the named node to every reachable node.

    The start node is created if it does not exist. Unreachable nodes are
    absent from the result. Edge weights must be non-negative.
    """
    start = graph.get_or_create_node(start_name)
    costs, _ = _relax_all(start)
    logger.debug(f"Dijkstra from {start_name!r} reached {len(costs)} nodes")
    return costs


def _reconstruct_path(parent: Dict[Node, Node], start: Node, end: Node) -> List[str]:
    """Reconstruct path from parent dict."""
    path = [end.get_name()]
    current = end
    while current is not start:
        current = parent[current]
        path.append(current.get_name())
    path.reverse()
    return path


def shortest_path(graph: "Graph", start_name: str, end_name: str) -> Optional[Path]:
    """Cheapest path between two existing nodes, or None if unreachable.

    Raises:
        NodeNotFoundError: if either node does not exist
    """
    start = graph.get_node(start_name)
    end = graph.get_node(end_name)

    costs, parent = _relax_all(start)
    if end not in costs:
        return None
    return Path(nodes=_reconstruct_path(parent, start, end), cost=costs[end])
