"""
Find the shortest chain of friends between two people

The chain is printed one name per line, starting with the first person.
"""
import logging
import sys

from . import add_graph_argument, load_graph
from ..chain import shortest_chain
from ..writers import write_chain

logger = logging.getLogger(__name__)


def add_arguments(parser):
    add_graph_argument(parser)
    parser.add_argument("first", metavar="PERSON1", help="Person the chain starts with")
    parser.add_argument("last", metavar="PERSON2", help="Person the chain ends with")


def main(args):
    graph = load_graph(args.graph)
    for name in (args.first, args.last):
        if graph.lookup(name) is None:
            logger.warning("%r is not in the graph", name)
    chain = shortest_chain(graph, args.first, args.last)
    if chain is None:
        logger.warning("No chain between %r and %r", args.first, args.last)
        return
    logger.info("Chain of length %d found", len(chain) - 1)
    write_chain(sys.stdout, chain)
