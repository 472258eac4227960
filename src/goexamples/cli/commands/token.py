"""
Token and symbol commands.
"""

import sys

import httpx

from goexamples.cli.host import add_position_arguments, position_from_args, read_document, settings_from_args
from goexamples.core.fetch import example_url
from goexamples.core.index import default_index, resolve_package
from goexamples.core.token import extract_token, split_lines, token_span


def add_subparser(subparsers):
    # token
    token_p = subparsers.add_parser("token", help="Show the token under a position")
    add_position_arguments(token_p)
    token_p.set_defaults(func=token_show)

    # resolve
    resolve_p = subparsers.add_parser("resolve", help="Resolve a symbol to its package path")
    resolve_p.add_argument("symbol", help="Go symbol, e.g. MultiReader")
    resolve_p.set_defaults(func=resolve_show)

    # url
    url_p = subparsers.add_parser("url", help="Show the example URL for a position")
    add_position_arguments(url_p)
    url_p.set_defaults(func=url_show)


def token_show(args):
    try:
        text = read_document(args.file)
        pos = position_from_args(args)
        symbol = extract_token(text, pos)
        if symbol is None:
            print("No token at that position.")
            sys.exit(1)

        start, end = token_span(text, pos)
        line = split_lines(text)[pos.line]
        print(line)
        print(" " * start + "^" * (end - start))
        print(symbol)
    except (OSError, IndexError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def resolve_show(args):
    package = resolve_package(args.symbol, default_index())
    if not package:
        print(f"✗ Unknown symbol: {args.symbol}")
        sys.exit(1)
    print(package)


def url_show(args):
    try:
        text = read_document(args.file)
        symbol = extract_token(text, position_from_args(args))
        if symbol is None:
            print("No token at that position.")
            sys.exit(1)

        package = resolve_package(symbol, default_index())
        print(example_url(settings_from_args(args), symbol, package))
    except (OSError, IndexError, ValueError, httpx.InvalidURL) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
