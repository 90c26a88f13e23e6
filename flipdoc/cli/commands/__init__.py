"""Shared helpers for CLI subcommands."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
from pathlib import Path

from ...converter import ConversionResult
from ...layout import DEFAULT_GEOMETRY, PageGeometry
from ...utils import ensure_output_directory, to_path


def add_io_arguments(parser: ArgumentParser, input_help: str) -> None:
    parser.add_argument("input", help=input_help)
    parser.add_argument("output", nargs="?", help="Destination PDF path (defaults to INPUT with .pdf)")


def add_geometry_arguments(parser: ArgumentParser) -> None:
    parser.add_argument("--margin", type=float, default=DEFAULT_GEOMETRY.margin, help="Page margin in points")
    parser.add_argument("--font-size", type=float, default=DEFAULT_GEOMETRY.font_size, help="Font size in points")
    parser.add_argument(
        "--line-height-factor",
        type=float,
        default=DEFAULT_GEOMETRY.line_height_factor,
        help="Line height as a multiple of the font size",
    )


def build_geometry(args: Namespace) -> PageGeometry:
    return PageGeometry(
        margin=args.margin,
        font_size=args.font_size,
        line_height_factor=args.line_height_factor,
    )


def resolve_output(args: Namespace, result: ConversionResult) -> Path:
    if args.output:
        return to_path(args.output)
    if args.input == "-":
        return to_path(result.filename)
    return to_path(args.input).with_suffix(".pdf")


def write_result(args: Namespace, result: ConversionResult) -> Path:
    destination = resolve_output(args, result)
    ensure_output_directory(destination)
    destination.write_bytes(result.content)
    return destination
