"""
Go examples CLI.
"""

import argparse

from goexamples import __version__
from goexamples.cli.commands import hover, index, token
from goexamples.logging_setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="goexamples", description="Go example hovers")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--settings", help="JSON settings file (provider.go.* keys)")
    parser.add_argument("--protocol", help="Example server protocol")
    parser.add_argument("--host", help="Example server host")
    parser.add_argument("--port", help="Example server port")
    parser.add_argument("--timeout", help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    token.add_subparser(subparsers)
    hover.add_subparser(subparsers)
    index.add_subparser(subparsers)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
