"""
Summary statistics of a friendship graph
"""
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from .graph import Graph


def degree_histogram(graph: Graph) -> np.ndarray:
    """
    Return an array in which entry k is the number of people with k friends.

    Friends are counted per friendship edge, so parallel friendships count
    multiple times.
    """
    degrees = np.array([len(person.friends) for person in graph.people()], dtype=int)
    return np.bincount(degrees)


def people_table(
    graph: Graph, connector_names: Optional[Iterable[str]] = None
) -> pd.DataFrame:
    """
    Return a DataFrame with one row per person and columns name, school,
    friends (number of friendships), component (1-based number of the
    connected component) and connector.
    """
    connector_names = set(connector_names) if connector_names is not None else set()
    component_numbers = {}
    for number, component in enumerate(graph.connected_components(), start=1):
        for name in component:
            component_numbers[name] = number

    people = graph.people()
    return pd.DataFrame(
        {
            "name": [p.name for p in people],
            "school": [p.school for p in people],
            "friends": [len(p.friends) for p in people],
            "component": [component_numbers[p.name] for p in people],
            "connector": [p.name in connector_names for p in people],
        },
        columns=["name", "school", "friends", "component", "connector"],
    )
