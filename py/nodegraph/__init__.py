"""In-memory graph library - public API."""
from .node import Node
from .graph import Graph
from .traversal import breadth_first_search, depth_first_search
from .paths import dijkstra, shortest_path
from .spanning import prim_jarnik
from .config import configure_logging
from .types import (
    NodeVisitor, Edge, Path,
    GraphError, EdgeNotFoundError, NodeNotFoundError, DuplicateNodeError, EmptyGraphError
)

__version__ = "0.1.0"

__all__ = [
    'Node', 'Graph', 'NodeVisitor', 'Edge', 'Path',
    'breadth_first_search', 'depth_first_search', 'dijkstra', 'shortest_path',
    'prim_jarnik', 'configure_logging',
    'GraphError', 'EdgeNotFoundError', 'NodeNotFoundError', 'DuplicateNodeError',
    'EmptyGraphError'
]
