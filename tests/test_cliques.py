import random

from friends.cliques import cliques
from friends.graph import Graph

import pytest


@pytest.fixture
def graph(make_graph):
    #
    # (A) -- (B) -- (C) -- (D)        (F) -- (G)
    #                \
    #                (E)
    #
    # A, B, D, E, F attend "north", C and G attend "south"
    schools = {"A": "north", "B": "north", "C": "south", "D": "north", "E": "north",
               "F": "north", "G": "south"}
    return make_graph(["AB", "BC", "CD", "CE", "FG"], schools=schools)


def test_cliques(graph):
    # C does not attend north, so D and E are not connected to A and B
    assert cliques(graph, "north") == [{"A", "B"}, {"D"}, {"E"}, {"F"}]


def test_cliques_other_school(graph):
    assert cliques(graph, "south") == [{"C"}, {"G"}]


def test_no_students(graph):
    assert cliques(graph, "east") is None


def test_empty_graph():
    assert cliques(Graph(), "north") is None


def test_people_without_school_never_match(make_graph):
    graph = make_graph(["AB", "BC"], schools={"A": "north", "C": "north"})
    assert cliques(graph, "north") == [{"A"}, {"C"}]


def test_one_clique(make_graph):
    graph = make_graph(["AB", "BC", "CA"], schools=dict.fromkeys("ABC", "north"))
    assert cliques(graph, "north") == [{"A", "B", "C"}]


def test_idempotent(graph):
    assert cliques(graph, "north") == cliques(graph, "north")


def test_random_graphs_partition_students(make_graph):
    rng = random.Random(5)
    names = [f"p{i}" for i in range(30)]
    for _ in range(20):
        schools = {name: rng.choice(["x", "y", None]) for name in names}
        edges = [tuple(rng.sample(names, 2)) for _ in range(35)]
        graph = make_graph(edges, names=names, schools=schools)
        groups = cliques(graph, "x")
        students = {name for name, school in schools.items() if school == "x"}
        if not students:
            assert groups is None
            continue
        # disjoint and covering exactly the students
        assert sum(len(group) for group in groups) == len(students)
        assert set().union(*groups) == students
        # connected using only friendships among students
        for group in groups:
            start = next(iter(group))
            reached = {start}
            to_visit = [start]
            while to_visit:
                current = to_visit.pop()
                for neighbor in graph.neighbors(graph.index(current)):
                    name = graph.person(neighbor).name
                    if name in group and name not in reached:
                        reached.add(name)
                        to_visit.append(name)
            assert reached == group
