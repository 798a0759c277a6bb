"""Command line interface for ordinal-menu.

Asks the user to pick choices in order and prints the result, one value
per line or as a JSON array.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from rich.console import Console

from . import __version__
from .config import get_env_page_size, load_prompt_config
from .errors import ConfigError, MissingChoicesError, PromptAborted
from .menu import DEFAULT_MESSAGE, OrdinalPrompt

err_console = Console(stderr=True, highlight=False)


def positive_int(raw: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="ordinal-menu",
        description="Pick choices in order from an interactive list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Keys: ↑↓/jk move • space toggle • 1-9 pick • r reset • enter submit",
    )
    parser.add_argument("--version", action="version", version=f"ordinal-menu {__version__}")
    parser.add_argument("choices", nargs="*", help="Choices to pick from")
    parser.add_argument("-c", "--config", help="YAML or JSON prompt definition")
    parser.add_argument("-m", "--message", help="Question to display")
    parser.add_argument(
        "-d", "--default", action="append", metavar="VALUE", help="Pre-select VALUE (repeatable)"
    )
    parser.add_argument("--page-size", type=positive_int, help="Number of visible choices")
    parser.add_argument("--json", action="store_true", help="Print the result as a JSON array")
    parser.add_argument("--debug", action="store_true", help="Log debug output to stderr")
    return parser


def resolve_options(args: argparse.Namespace) -> dict:
    """Merge config file values with command line overrides."""
    options: dict = {}
    if args.config:
        options = load_prompt_config(args.config)
    if args.choices:
        options["choices"] = list(args.choices)
    if args.message:
        options["message"] = args.message
    if args.default:
        options["default"] = list(args.default)
    if args.page_size:
        options["page_size"] = args.page_size
    elif "page_size" not in options:
        env_size = get_env_page_size()
        if env_size is not None:
            options["page_size"] = env_size
    options.setdefault("message", DEFAULT_MESSAGE)
    return options


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        options = resolve_options(args)
        prompt = OrdinalPrompt(options.pop("choices", None), **options)
    except (ConfigError, MissingChoicesError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        return 2

    try:
        result = prompt.show()
    except PromptAborted:
        err_console.print()
        return 130

    if args.json:
        print(json.dumps(result))
    else:
        for value in result:
            print(value)
    return 0


def run():
    sys.exit(main())
