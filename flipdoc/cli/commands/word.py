"""CLI command converting a Word document to PDF."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path

from ...converter import convert_word
from . import add_geometry_arguments, add_io_arguments, build_geometry, write_result


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("word", help="Convert the text of a .docx document into a PDF")
    add_io_arguments(parser, "Input Word document")
    add_geometry_arguments(parser)
    parser.set_defaults(handler=run)


def run(args: Namespace) -> Path:
    source = Path(args.input)
    result = convert_word(source.read_bytes(), source.name, build_geometry(args))
    return write_result(args, result)
