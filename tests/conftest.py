import logging

import pytest

from friends.graph import Graph


@pytest.fixture
def make_graph():
    """
    Return a function that builds a graph from an edge list.

    Edges are given as strings of two one-letter names ("AB") or as pairs of
    names. All names that appear in edges are added in order of appearance,
    after those in the optional list of isolated names.
    """

    def make(edges, names=(), schools=None):
        graph = Graph()
        schools = schools or {}
        pairs = [tuple(edge) for edge in edges]
        for name in list(names) + [name for pair in pairs for name in pair]:
            if name not in graph:
                graph.add_person(name, schools.get(name))
        for name1, name2 in pairs:
            graph.add_friendship(name1, name2)
        return graph

    return make


@pytest.fixture(autouse=True)
def restore_logging():
    """Remove handlers that the command line functions add to the root logger"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
