from io import StringIO
from pathlib import Path
from typing import Iterable, List, Optional, Set, Union

from .graph import Graph


def write_graph(path: Union[str, Path], graph: Graph) -> None:
    """Write graph in the format understood by reader.read_graph"""
    with open(path, "w") as f:
        print(len(graph), file=f)
        for person in graph.people():
            if person.school is None:
                print(person.name, "n", sep="|", file=f)
            else:
                print(person.name, "y", person.school, sep="|", file=f)
        for name1, name2 in graph.edges():
            print(name1, name2, sep="|", file=f)


def write_chain(file, chain: List[str]) -> None:
    for name in chain:
        print(name, file=file)


def write_cliques(file, groups: List[Set[str]]) -> None:
    print("clique_nr", "name", sep="\t", file=file)
    for index, group in enumerate(groups, start=1):
        for name in sorted(group):
            print(index, name, sep="\t", file=file)


def write_connectors(file, names: Iterable[str]) -> None:
    print("#name", file=file)
    for name in sorted(names):
        print(name, file=file)


def graph_to_dot(graph: Graph, highlight: Optional[Iterable[str]] = None) -> str:
    """
    Return a GraphViz representation of the graph. People in highlight
    (typically the connectors) are filled in orange.
    """
    highlight = set(highlight) if highlight is not None else set()
    s = StringIO()
    print("graph g {", file=s)
    print("  edge [color=blue];", file=s)
    print('  node [style=filled, fillcolor=white, fontname="Roboto"];', file=s)
    for person in graph.people():
        hl = ",fillcolor=orange" if person.name in highlight else ""
        if person.school is not None:
            label = f"{person.name}\\n{person.school}"
        else:
            label = person.name
        print(f'  "{person.name}" [label="{label}"{hl}];', file=s)
    for name1, name2 in graph.edges():
        print(f'  "{name1}" -- "{name2}";', file=s)
    print("}", file=s)

    return s.getvalue()
