"""
Shortest chain of acquaintances between two people
"""
import logging
from collections import deque
from typing import Dict, List, Optional

from .graph import Graph

logger = logging.getLogger(__name__)


def shortest_chain(graph: Graph, p1: str, p2: str) -> Optional[List[str]]:
    """
    Return the shortest chain of names starting with p1 and ending with p2.
    Each pair of consecutive names in the chain is a friendship in the graph.

    Return None if p1 and p2 are the same person, if either of them is not in
    the graph or if there is no chain between them.
    """
    if p1 == p2:
        return None
    source = graph.index(p1)
    target = graph.index(p2)
    if source is None or target is None:
        return None

    # Search backwards from p2 so that following the predecessors from p1
    # yields the chain in the right order. Maps index to predecessor index.
    predecessors: Dict[int, Optional[int]] = {target: None}
    queue = deque([target])
    while queue:
        current = queue.popleft()
        for neighbor in graph.neighbors(current):
            if neighbor in predecessors:
                continue
            predecessors[neighbor] = current
            if neighbor == source:
                chain = _follow(graph, predecessors, source)
                logger.debug("Found chain of length %d", len(chain) - 1)
                return chain
            queue.append(neighbor)

    logger.debug("No chain between %r and %r", p1, p2)
    return None


def _follow(graph: Graph, predecessors: Dict[int, Optional[int]], start: int) -> List[str]:
    chain = []
    index: Optional[int] = start
    while index is not None:
        chain.append(graph.person(index).name)
        index = predecessors[index]
    return chain
