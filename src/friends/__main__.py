"""
Shortest chains, school cliques and connectors in a friendship graph
"""

import sys
import logging
import pkgutil
import importlib
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from . import cli as cli_package
from .cli import CommandLineError, setup_logging

from . import __version__

logger = logging.getLogger(__name__)


class HelpfulArgumentParser(ArgumentParser):
    """An ArgumentParser that prints full help on errors."""

    def __init__(self, *args, **kwargs):
        if "formatter_class" not in kwargs:
            kwargs["formatter_class"] = RawDescriptionHelpFormatter
        super().__init__(*args, **kwargs)

    def error(self, message):
        self.print_help(sys.stderr)
        args = {"prog": self.prog, "message": message}
        self.exit(2, "%(prog)s: error: %(message)s\n" % args)


def main(arguments=None):
    parser = HelpfulArgumentParser(description=__doc__, prog="friends")
    parser.add_argument(
        "--version", action="version", version="%(prog)s " + __version__
    )
    parser.add_argument(
        "--debug",
        default=False,
        action="store_true",
        help="Print some extra debugging messages",
    )

    subparsers = parser.add_subparsers()
    for module_name, module in cli_modules(cli_package):
        subparser = subparsers.add_parser(
            module_name,
            help=module.__doc__.strip().split("\n", maxsplit=1)[0].replace("%", "%%"),
            description=module.__doc__,
        )
        module.add_arguments(subparser)
        subparser.set_defaults(module=module)
    args = parser.parse_args(arguments)
    module = getattr(args, "module", None)
    if module is None:
        parser.error("Please provide the name of a subcommand to run")
    setup_logging(args.debug)

    del args.debug
    del args.module
    try:
        module.main(args)
    except CommandLineError as e:
        logger.error("friends error: %s", str(e))
        logger.debug("Command line error. Traceback:", exc_info=True)
        sys.exit(1)


def cli_modules(package):
    """
    Yield (module_name, module) tuples for all subcommand modules in the given
    package, sorted by name.
    """
    names = sorted(module.name for module in pkgutil.iter_modules(package.__path__))
    for name in names:
        yield name, importlib.import_module("." + name, package.__name__)


if __name__ == "__main__":
    main()
