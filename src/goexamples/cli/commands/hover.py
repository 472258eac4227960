"""
Hover command: fetch and render the example for a position.
"""

import asyncio
import sys

from rich.console import Console
from rich.markdown import Markdown

from goexamples.cli.host import add_position_arguments, position_from_args, read_document, start_provider


def add_subparser(subparsers):
    hover_p = subparsers.add_parser("hover", help="Fetch the example for a position")
    add_position_arguments(hover_p)
    hover_p.add_argument("--raw", action="store_true", help="Print the markup instead of rendering it")
    hover_p.set_defaults(func=hover_show)


async def _hover(args):
    provider = await start_provider(args)
    text = read_document(args.file)
    return await provider.provide_hover(text, position_from_args(args))


def hover_show(args):
    try:
        result = asyncio.run(_hover(args))
    except (OSError, IndexError, ValueError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if result is None:
        print("No example available.")
        sys.exit(1)

    if args.raw:
        print(result.contents.value)
    else:
        Console().print(Markdown(result.contents.value))
