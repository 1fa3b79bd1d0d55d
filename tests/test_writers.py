import io

from friends.reader import read_graph
from friends.writers import (
    graph_to_dot,
    write_chain,
    write_cliques,
    write_connectors,
    write_graph,
)

import pytest


@pytest.fixture
def graph():
    return read_graph("tests/data/friends.txt")


def test_write_graph(graph, tmp_path):
    path = tmp_path / "graph.txt"
    write_graph(path, graph)
    lines = path.read_text().splitlines()
    assert lines[0] == "10"
    assert lines[1] == "sam|y|rutgers"
    assert lines[7] == "samir|n"
    assert len(lines) == 1 + 10 + 9

    reread = read_graph(path)
    assert reread.names() == graph.names()
    assert sorted(reread.edges()) == sorted(graph.edges())


def test_write_chain():
    f = io.StringIO()
    write_chain(f, ["sam", "jane", "kaitlin"])
    assert f.getvalue() == "sam\njane\nkaitlin\n"


def test_write_cliques():
    f = io.StringIO()
    write_cliques(f, [{"b", "a"}, {"c"}])
    assert f.getvalue() == "clique_nr\tname\n1\ta\n1\tb\n2\tc\n"


def test_write_connectors():
    f = io.StringIO()
    write_connectors(f, {"ming", "jane"})
    assert f.getvalue() == "#name\njane\nming\n"


def test_graph_to_dot(graph):
    dot = graph_to_dot(graph, highlight=["jane"])
    lines = dot.splitlines()
    assert lines[0] == "graph g {"
    assert lines[-1] == "}"
    assert '  "jane" [label="jane\\nrutgers",fillcolor=orange];' in lines
    assert '  "samir" [label="samir"];' in lines
    assert '  "kaitlin" -- "samir";' in lines
    assert sum(" -- " in line for line in lines) == 9
