"""CLI command converting a text file to PDF."""

from __future__ import annotations

import sys
from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path

from ...converter import convert_text
from . import add_geometry_arguments, add_io_arguments, build_geometry, write_result


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("text", help="Convert a UTF-8 text file into a PDF")
    add_io_arguments(parser, "Input text file, or '-' to read standard input")
    add_geometry_arguments(parser)
    parser.set_defaults(handler=run)


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def run(args: Namespace) -> Path:
    result = convert_text(_read_text(args.input), build_geometry(args))
    return write_result(args, result)
