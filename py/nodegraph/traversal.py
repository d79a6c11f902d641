"""BFS and DFS traversal implementations."""
import logging
from collections import deque
from typing import TYPE_CHECKING, Callable, List, Set

from .node import Node
from .types import VisitorLike

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)


def _visit_callback(visitor: VisitorLike) -> Callable[[Node], object]:
    """Accept a NodeVisitor or a plain function."""
    visit = getattr(visitor, "visit", None)
    if callable(visit):
        return visit
    if callable(visitor):
        return visitor
    raise TypeError(f"Expected a NodeVisitor or callable, got {type(visitor).__name__}")


def breadth_first_search(graph: "Graph", start_node_name: str,
                         visitor: VisitorLike) -> List[Node]:
    """Breadth-first search from the named node, creating it if needed.

    The visitor is called once per reachable node, level by level, so nodes
    are visited in non-decreasing edge distance from the start.

    Returns:
        The visited nodes in visit order
    """
    visit = _visit_callback(visitor)
    start = graph.get_or_create_node(start_node_name)

    order = [start]
    visited: Set[Node] = {start}
    visit(start)
    queue = deque([start])

    while queue:
        for _ in range(len(queue)):
            node = queue.popleft()
            for neighbor in list(node.get_neighbors()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    visit(neighbor)
                    queue.append(neighbor)

    logger.debug(f"BFS from {start_node_name!r} visited {len(order)} nodes")
    return order


def depth_first_search(graph: "Graph", start_node_name: str,
                       visitor: VisitorLike) -> List[Node]:
    """Depth-first search from the named node, creating it if needed.

    Iterative: a node is marked seen when pushed and visited when popped, so
    no node is pushed twice.

    Returns:
        The visited nodes in visit order
    """
    visit = _visit_callback(visitor)
    start = graph.get_or_create_node(start_node_name)

    order = []
    seen: Set[Node] = {start}
    stack = [start]

    while stack:
        node = stack.pop()
        order.append(node)
        visit(node)
        for neighbor in list(node.get_neighbors()):
            if neighbor not in seen:
                seen.add(neighbor)
                stack.append(neighbor)

    logger.debug(f"DFS from {start_node_name!r} visited {len(order)} nodes")
    return order
