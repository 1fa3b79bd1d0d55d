from friends.graph import Graph
from friends.reader import read_graph
from friends.stats import degree_histogram, people_table

import pandas as pd
import pytest


@pytest.fixture
def graph():
    return read_graph("tests/data/friends.txt")


def test_degree_histogram(graph):
    assert list(degree_histogram(graph)) == [0, 3, 6, 1]


def test_degree_histogram_empty():
    assert len(degree_histogram(Graph())) == 0


def test_people_table(graph):
    table = people_table(graph, connector_names={"jane", "kaitlin", "ming"})
    assert list(table.columns) == ["name", "school", "friends", "component", "connector"]
    assert list(table["name"]) == graph.names()
    jane = table[table["name"] == "jane"].iloc[0]
    assert jane.school == "rutgers"
    assert jane.friends == 3
    assert jane.component == 1
    assert jane.connector
    assert list(table.component) == [1] * 7 + [2] * 3
    assert table.connector.sum() == 3
    assert pd.isna(table.loc[table["name"] == "samir", "school"].iloc[0])


def test_people_table_without_connectors(graph):
    table = people_table(graph)
    assert not table.connector.any()
