"""
List the connectors of the graph

A connector is a person whose removal would leave some of their friends
without any chain between them.
"""
import logging
import sys

from . import add_graph_argument, load_graph
from ..connectors import connectors
from ..writers import write_connectors, graph_to_dot

logger = logging.getLogger(__name__)


def add_arguments(parser):
    add_graph_argument(parser)
    parser.add_argument(
        "--dot",
        metavar="FILE",
        help="Write the graph in GraphViz format to FILE, connectors highlighted",
        default=None,
    )


def main(args):
    graph = load_graph(args.graph)
    names = connectors(graph)
    logger.info("Found %d connectors", len(names))
    write_connectors(sys.stdout, names)
    if args.dot is not None:
        with open(args.dot, "w") as f:
            print(graph_to_dot(graph, highlight=names), file=f, end="")
