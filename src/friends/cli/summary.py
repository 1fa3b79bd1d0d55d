"""
Analyze the whole graph and write the results to a run directory

The run directory contains a table of all people (people.tsv), the list of
connectors (connectors.txt), the cliques of every school (cliques.txt) and
the graph in GraphViz format (graph.gv).
"""
import sys
import logging
import subprocess
from pathlib import Path
from typing import Optional

from . import (
    CommandLineError,
    add_file_logging,
    add_graph_argument,
    load_graph,
    make_output_dir,
)
from .. import __version__
from ..cliques import cliques
from ..connectors import connectors
from ..graph import Graph
from ..stats import degree_histogram, people_table
from ..writers import graph_to_dot, write_cliques, write_connectors

logger = logging.getLogger(__name__)


def add_arguments(parser):
    add_graph_argument(parser)
    parser.add_argument(
        "--output",
        "-o",
        metavar="DIRECTORY",
        type=Path,
        help="Name of the run directory to be created by the program. Default: %(default)s",
        default=Path("friends_run"),
    )
    parser.add_argument(
        "--delete",
        action="store_true",
        help="Delete the run directory if it already exists",
    )
    parser.add_argument(
        "--plot",
        default=False,
        action="store_true",
        help="Plot the graph. This requires GraphViz to be installed.",
    )


def main(args):
    output_dir = args.output
    try:
        make_output_dir(output_dir, args.delete)
    except FileExistsError:
        raise CommandLineError(
            f'Output directory "{output_dir}" already exists '
            "(use --delete to force deleting an existing output directory)"
        )

    add_file_logging(output_dir / "log.txt")
    logger.info(f"friends {__version__}")
    logger.info("Command line arguments: %s", " ".join(sys.argv[1:]))

    graph = load_graph(args.graph)
    run_summary(output_dir, graph, should_plot=args.plot)


def run_summary(output_dir: Path, graph: Graph, *, should_plot: bool = False) -> Optional[Path]:
    """
    Write the analysis of graph into output_dir, which must exist.

    Return the path to the PDF if should_plot is set, None otherwise.
    """
    components = graph.connected_components()
    logger.info(
        f"{len(graph)} people, {graph.count_edges()} friendships, "
        f"{len(components)} connected components"
    )
    histogram = degree_histogram(graph)
    logger.info(
        "Friend count histogram\nfriends people\n%s",
        "\n".join(f"{k:7d} {n:6d}" for k, n in enumerate(histogram) if n > 0),
    )

    connector_names = connectors(graph)
    logger.info(f"Found {len(connector_names)} connectors")
    with open(output_dir / "connectors.txt", "w") as f:
        write_connectors(f, connector_names)

    table = people_table(graph, connector_names)
    table.to_csv(output_dir / "people.tsv", sep="\t", index=False, na_rep="-")

    with open(output_dir / "cliques.txt", "w") as f:
        for school in graph.schools():
            groups = cliques(graph, school)
            # every school in graph.schools() has at least one student
            assert groups is not None
            logger.info(f"School {school}: {len(groups)} cliques")
            print(f"# {school}", file=f)
            write_cliques(f, groups)

    graphviz_path = output_dir / "graph.gv"
    with open(graphviz_path, "w") as f:
        print(graph_to_dot(graph, highlight=connector_names), file=f, end="")

    if not should_plot:
        return None
    logger.info("Plotting graph")
    pdf_path = output_dir / "graph.pdf"
    try:
        subprocess.run(["sfdp", "-Tpdf", "-o", str(pdf_path), str(graphviz_path)], check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        raise CommandLineError(f"Plotting with GraphViz failed: {e}") from e
    return pdf_path
