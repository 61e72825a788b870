"""
said CLI.
"""

import argparse
import logging
import os

from said.cli.commands import debug, grammar, interpret, lexicon, patterns, remote


def main(argv=None):
    parser = argparse.ArgumentParser(prog="said", description="Text adventure command interpreter")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    parser.add_argument(
        "-g", "--grammar",
        default=os.environ.get("SAID_GRAMMAR"),
        help="Path to a .grammar file (default: built-in grammar, or $SAID_GRAMMAR)",
    )
    subparsers = parser.add_subparsers(dest="command")

    interpret.add_subparser(subparsers)
    debug.add_subparser(subparsers)
    patterns.add_subparser(subparsers)
    lexicon.add_subparser(subparsers)
    grammar.add_subparser(subparsers)
    remote.add_subparser(subparsers)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
