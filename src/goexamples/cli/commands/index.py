"""
Symbol index commands.
"""

import sys

from rich.console import Console
from rich.table import Table

from goexamples.core.index import default_index, resolve_package


def add_subparser(subparsers):
    parser = subparsers.add_parser("index", help="Inspect the symbol index")
    index_sub = parser.add_subparsers(dest="index_command", required=True)

    # list
    list_p = index_sub.add_parser("list", help="List indexed symbols")
    list_p.add_argument("--prefix", default="", help="Only symbols starting with this")
    list_p.set_defaults(func=index_list)

    # show
    show_p = index_sub.add_parser("show", help="Show one symbol")
    show_p.add_argument("symbol", help="Go symbol")
    show_p.set_defaults(func=index_show)


def index_list(args):
    index = default_index()
    symbols = sorted(s for s in index if s.startswith(args.prefix))
    if not symbols:
        print("No symbols.")
        return

    table = Table("Symbol", "Qualified name", "Package")
    for symbol in symbols:
        table.add_row(symbol, index[symbol], resolve_package(symbol, index))
    Console().print(table)


def index_show(args):
    index = default_index()
    qualified = index.lookup(args.symbol)
    if qualified is None:
        print(f"✗ Unknown symbol: {args.symbol}")
        sys.exit(1)

    print(f"Symbol: {args.symbol}")
    print(f"Qualified: {qualified}")
    print(f"Package: {resolve_package(args.symbol, index)}")
