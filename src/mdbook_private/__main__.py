"""CLI entry point for mdbook-private.

Usage:
    mdbook-private                      process [context, book] from stdin
    mdbook-private supports <renderer>  exit 0 if the renderer is supported
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from mdbook_private import __version__
from mdbook_private.exceptions import MdbookPrivateError
from mdbook_private.preprocessor import PrivatePreprocessor
from mdbook_private.protocol import check_mdbook_version, dump_book, parse_input
from mdbook_private.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="mdbook-private",
        description="mdbook preprocessor that marks or removes private content",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")
    supports_parser = subparsers.add_parser(
        "supports", help="Check whether a renderer is supported"
    )
    supports_parser.add_argument("renderer", help="Renderer name, e.g. html")
    return parser


def handle_supports(preprocessor: PrivatePreprocessor, renderer: str) -> int:
    return 0 if preprocessor.supports_renderer(renderer) else 1


def handle_preprocessing(
    preprocessor: PrivatePreprocessor,
    stdin: TextIO,
    stdout: TextIO,
) -> int:
    """Run the preprocessor over mdbook's stdin payload.

    Output is only written once the whole book has been processed.
    """
    try:
        context, book = parse_input(stdin.read())
        check_mdbook_version(context)
        processed = preprocessor.run(context, book)
    except MdbookPrivateError as exc:
        logger.error("%s", exc)
        return 1

    stdout.write(dump_book(processed))
    stdout.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = create_parser().parse_args(argv)
    preprocessor = PrivatePreprocessor()

    if args.command == "supports":
        return handle_supports(preprocessor, args.renderer)
    return handle_preprocessing(preprocessor, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
