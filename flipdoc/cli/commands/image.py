"""CLI command converting a JPEG or PNG image to PDF."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path

from ...converter import convert_image
from . import add_io_arguments, write_result


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("image", help="Convert a JPG or PNG image into a single-page PDF")
    add_io_arguments(parser, "Input image file")
    parser.set_defaults(handler=run)


def run(args: Namespace) -> Path:
    result = convert_image(Path(args.input).read_bytes())
    return write_result(args, result)
