"""
List the cliques of students of a school

A clique is a group of students of the same school that are connected through
friendships among students of that school.
"""
import logging
import sys

from . import add_graph_argument, load_graph
from ..cliques import cliques
from ..writers import write_cliques

logger = logging.getLogger(__name__)


def add_arguments(parser):
    add_graph_argument(parser)
    parser.add_argument("school", metavar="SCHOOL", help="Name of the school")
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write the clique table to FILE. Default: standard output",
        default=None,
    )


def main(args):
    graph = load_graph(args.graph)
    groups = cliques(graph, args.school)
    if groups is None:
        logger.warning("Nobody attends school %r", args.school)
        return
    logger.info(
        "%d cliques with %d students in total",
        len(groups),
        sum(len(group) for group in groups),
    )
    if args.output is None:
        write_cliques(sys.stdout, groups)
    else:
        with open(args.output, "w") as f:
            write_cliques(f, groups)
