"""
Connectors: people whose removal would disconnect some of their friends from
each other (the articulation points or cut vertices of the graph).
"""
import logging
from itertools import count
from typing import List, Optional, Set

from .graph import Graph

logger = logging.getLogger(__name__)


class _Frame:
    """One entry of the explicit depth-first search stack"""

    __slots__ = ("node", "parent", "cursor", "parent_edge_consumed")

    def __init__(self, node: int, parent: Optional[int]):
        self.node = node
        self.parent = parent
        # position of the next edge to look at in the adjacency list of node
        self.cursor = 0
        # whether the edge leading back to parent has been seen
        self.parent_edge_consumed = False


def connectors(graph: Graph) -> Set[str]:
    """
    Return the names of all connectors in the graph.

    The graph may consist of multiple connected components; the depth-first
    search is restarted from every person not yet visited. An empty set is
    returned if there are no connectors.
    """
    # Discovery numbers and low-link values, indexed like the person list
    disc: List[Optional[int]] = [None] * len(graph)
    low: List[int] = [0] * len(graph)
    numbers = count()
    result: Set[int] = set()

    for root in range(len(graph)):
        if disc[root] is not None:
            continue
        disc[root] = low[root] = next(numbers)
        root_children = 0
        stack = [_Frame(root, None)]
        while stack:
            frame = stack[-1]
            node = frame.node
            neighbors = graph.neighbors(node)
            if frame.cursor < len(neighbors):
                neighbor = neighbors[frame.cursor]
                frame.cursor += 1
                if neighbor == frame.parent and not frame.parent_edge_consumed:
                    # The tree edge we came along; any further edge to the
                    # parent is a parallel edge and counts as a back edge.
                    frame.parent_edge_consumed = True
                    continue
                neighbor_disc = disc[neighbor]
                if neighbor_disc is not None:
                    low[node] = min(low[node], neighbor_disc)
                else:
                    disc[neighbor] = low[neighbor] = next(numbers)
                    stack.append(_Frame(neighbor, node))
                continue

            # All edges of node are done, backtrack to the parent
            stack.pop()
            parent = frame.parent
            if parent is None:
                continue
            _backtrack(parent, node, root, disc, low, result)
            if parent == root:
                root_children += 1

        if root_children > 1:
            result.add(root)

    logger.debug("Found %d connectors among %d people", len(result), len(graph))
    return {graph.person(index).name for index in result}


def _backtrack(parent, child, root, disc, low, result) -> None:
    """
    Propagate the low-link value of child to parent and record parent as a
    connector if the subtree of child cannot reach above parent.
    """
    low[parent] = min(low[parent], low[child])
    if parent != root and low[child] >= disc[parent]:
        result.add(parent)
