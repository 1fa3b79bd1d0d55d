import logging
from pathlib import Path
import shutil

from ..error import FriendsError
from ..graph import Graph
from ..reader import read_graph

logger = logging.getLogger(__name__)


class CommandLineError(Exception):
    pass


class NiceFormatter(logging.Formatter):
    """
    Do not prefix "INFO:" to info-level log messages (but do it for all other
    levels).

    Based on http://stackoverflow.com/a/9218261/715090 .
    """

    def format(self, record):
        if record.levelno != logging.INFO:
            record.msg = "{}: {}".format(record.levelname, record.msg)
        return super().format(record)


def setup_logging(debug: bool) -> None:
    """
    Set up logging. If debug is True, then DEBUG level messages are printed.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(NiceFormatter())

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)


def add_file_logging(path: Path) -> None:
    file_handler = logging.FileHandler(path)
    root = logging.getLogger()
    root.addHandler(file_handler)


def make_output_dir(path, delete_if_exists):
    try:
        path.mkdir()
    except FileExistsError:
        if delete_if_exists:
            logger.debug(f'Re-creating folder "{path}"')
            shutil.rmtree(path)
            path.mkdir()
        else:
            raise


def add_graph_argument(parser):
    parser.add_argument(
        "graph",
        type=Path,
        metavar="GRAPH",
        help="Friendship graph file (may be compressed with gzip, bzip2 or xz). "
        "Expected format: see documentation",
    )


def load_graph(path: Path) -> Graph:
    """Read the graph file, turning format errors into command line errors"""
    try:
        return read_graph(path)
    except FileNotFoundError:
        raise CommandLineError(f'Graph file "{path}" not found') from None
    except FriendsError as e:
        raise CommandLineError(f"{path}: {e}") from e
