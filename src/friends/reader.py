"""
Read friendship graphs from text files.

The expected format is:

    4
    sam|y|rutgers
    jane|y|rutgers
    michele|y|cornell
    sergei|n
    sam|jane
    jane|michele

The first line is the number of people, followed by one line per person
(name, whether the person attends a school, and the school) and then one
line per friendship.
"""
import logging
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

from xopen import xopen

from .error import GraphFormatError
from .graph import Graph

logger = logging.getLogger(__name__)


def read_graph(path: Union[str, Path]) -> Graph:
    """Read a graph from a possibly compressed file"""
    with xopen(path) as f:
        graph = parse_graph(f)
    logger.info(
        "Read %d people and %d friendships from %s",
        len(graph),
        graph.count_edges(),
        path,
    )
    return graph


def parse_graph(lines: Iterable[str]) -> Graph:
    rows = _nonblank(lines)
    try:
        line_number, line = next(rows)
    except StopIteration:
        raise GraphFormatError("Number of people missing", 1) from None
    try:
        n = int(line)
    except ValueError:
        raise GraphFormatError(f"Expected number of people, found {line!r}", line_number) from None
    if n < 0:
        raise GraphFormatError("Number of people must not be negative", line_number)

    graph = Graph()
    for _ in range(n):
        try:
            line_number, line = next(rows)
        except StopIteration:
            raise GraphFormatError(
                f"Expected {n} people, but found only {len(graph)}", line_number + 1
            ) from None
        name, school = _parse_person(line, line_number)
        if name in graph:
            raise GraphFormatError(f"Duplicate person {name!r}", line_number)
        graph.add_person(name, school)

    for line_number, line in rows:
        fields = [field.strip() for field in line.split("|")]
        if len(fields) != 2 or not all(fields):
            raise GraphFormatError(f"Expected 'name1|name2', found {line!r}", line_number)
        for name in fields:
            if name not in graph:
                raise GraphFormatError(f"Unknown person {name!r} in friendship", line_number)
        graph.add_friendship(fields[0], fields[1])

    return graph


def _nonblank(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, stripped line) for all non-blank lines"""
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if line:
            yield line_number, line


def _parse_person(line: str, line_number: int):
    fields = [field.strip() for field in line.split("|")]
    if not fields[0]:
        raise GraphFormatError("Empty name", line_number)
    if len(fields) == 3 and fields[1] == "y":
        if not fields[2]:
            raise GraphFormatError("Empty school", line_number)
        return fields[0], fields[2]
    if len(fields) == 2 and fields[1] == "n":
        return fields[0], None
    raise GraphFormatError(
        f"Expected 'name|y|school' or 'name|n', found {line!r}", line_number
    )
