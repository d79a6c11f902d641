"""
Pytest configuration and shared fixtures for the nodegraph tests.

Puts the py/ source directory on sys.path so the tests run against the
working tree without an install.
"""
import os
import sys
from random import Random

import pytest

base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(base_dir, "py"))

from nodegraph import Graph, configure_logging  # noqa: E402

configure_logging()


class Recorder:
    """NodeVisitor that records visit order by name."""

    def __init__(self):
        self.names = []

    def visit(self, node):
        self.names.append(node.get_name())


@pytest.fixture
def graph():
    """Empty graph with a seeded rng."""
    return Graph(rng=Random(1234))


@pytest.fixture
def triangle(graph):
    """Undirected triangle A-B=1, B-C=2, A-C=3."""
    a = graph.get_or_create_node("A")
    b = graph.get_or_create_node("B")
    c = graph.get_or_create_node("C")
    a.add_undirected_edge_to_node(b, 1)
    b.add_undirected_edge_to_node(c, 2)
    a.add_undirected_edge_to_node(c, 3)
    return graph


@pytest.fixture
def recorder():
    return Recorder()


def connect(graph, edges, directed=False):
    """Add (from, to, weight) edges by name."""
    for src, dst, weight in edges:
        a = graph.get_or_create_node(src)
        b = graph.get_or_create_node(dst)
        if directed:
            a.add_directed_edge_to_node(b, weight)
        else:
            a.add_undirected_edge_to_node(b, weight)
    return graph


@pytest.fixture
def build():
    """Return the connect() helper as a fixture."""
    return connect
