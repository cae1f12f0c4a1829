# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for PpmForge.

Handles command-line argument definition, parsing and output file naming.
"""

from __future__ import annotations

import argparse
import os
from importlib import metadata

DEVICES = ["ppm", "png"]

# Input extensions decoded by the plain pixmap codec; anything else goes through Pillow
PPM_EXTENSIONS = (".ppm", ".pnm")


def get_output_name(outputfile: str | None, inputfile: str, device: str) -> str:
    """
    Derive the output file name from command-line arguments.

    Args:
        outputfile: The -o argument value (or None)
        inputfile: Input file name ("-" for stdin)
        device: Output device name

    Returns:
        Output file name. ``Data.ppm`` becomes ``Data.Reforged.ppm``.
    """
    if outputfile:
        return outputfile
    if inputfile == "-":
        base = "stdin"
    else:
        base = os.path.splitext(inputfile)[0]
    return f"{base}.Reforged.{device}"


def _get_version() -> str:
    try:
        return metadata.version("ppmforge")
    except metadata.PackageNotFoundError:
        return "unknown"


def _columns(value: str) -> int:
    try:
        num = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid column count: '{value}'")
    if num < 1:
        raise argparse.ArgumentTypeError(f"column count must be positive: '{value}'")
    return num


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the PpmForge argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="ppmforge",
        description="PpmForge - load a plain portable pixmap, parse it and save it back",
        epilog="Use '-' as input to read from stdin and '-o -' to write to stdout.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"PpmForge {_get_version()}"
    )
    parser.add_argument("inputfile", help="Input image (.ppm, or any format Pillow can read)")
    parser.add_argument(
        "-o", "--output", dest="outputfile",
        help="Specify output filename (default: <input>.Reforged.<device>)"
    )
    parser.add_argument(
        "-d", "--device", choices=DEVICES, default="ppm",
        help=f'Specify output device ({", ".join(DEVICES)}; default: ppm)',
    )
    parser.add_argument(
        "--columns", type=_columns, default=4,
        help="Number of pixels per output line (default: 4)"
    )
    parser.add_argument(
        "--separator", default="  ",
        help="Spaces or tabs between pixels on a line (default: two spaces)"
    )
    parser.add_argument(
        "--row-separator", default="",
        help="Blank or '#' comment line written after the header and after every pixel row (default: empty line)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    return parser
