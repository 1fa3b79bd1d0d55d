"""
Cliques of students: groups of people at the same school that are connected
through friendships among students of that school only.
"""
import logging
from collections import deque
from typing import List, Optional, Set

from .graph import Graph

logger = logging.getLogger(__name__)


def cliques(graph: Graph, school: str) -> Optional[List[Set[str]]]:
    """
    Return the cliques of the given school as a list of sets of names.

    A clique here is a connected component of the subgraph induced by the
    students of the school, not a complete subgraph. Return None if nobody
    in the graph attends the school.
    """
    visited = set()
    groups = []
    for start, person in enumerate(graph.people()):
        if start in visited or person.school != school:
            continue
        # Start a new clique
        visited.add(start)
        group = {person.name}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in graph.neighbors(current):
                if neighbor in visited:
                    continue
                friend = graph.person(neighbor)
                if friend.school != school:
                    continue
                visited.add(neighbor)
                group.add(friend.name)
                queue.append(neighbor)
        groups.append(group)

    if not groups:
        return None
    logger.debug("Found %d cliques at school %r", len(groups), school)
    return groups
