"""Command line interface for flipdoc."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from ..config import read_log_level
from ..exceptions import FlipDocError
from ..utils import configure_logging
from .commands import image, text, word

COMMAND_MODULES = [text, image, word]

LOGGER = logging.getLogger(__name__)


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flipdoc", description="Convert text, images and Word documents to PDF")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    for module in COMMAND_MODULES:
        module.configure_parser(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _create_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(logging.DEBUG if args.verbose else read_log_level())
    except ValueError as exc:
        print(f"error: invalid FLIPDOC_LOG_LEVEL: {exc}", file=sys.stderr)
        return 1

    try:
        destination = args.handler(args)
    except FlipDocError as exc:
        LOGGER.debug("Conversion rejected by rule %s", exc.rule)
        print(f"error [{exc.rule}]: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(destination)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
