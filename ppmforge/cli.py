#!/usr/bin/env python3
# PpmForge - A Plain Portable Pixmap Codec
# Copyright (c) 2025-2026 Scott Bowman
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PpmForge - Plain Portable Pixmap Codec

Entry point of the ``ppmforge`` command. Loads an image, parses it and saves it
back in canonical plain pixmap layout (or renders it to PNG).

Usage:
    ppmforge Data.ppm                      # writes Data.Reforged.ppm
    ppmforge Data.ppm -o out.ppm --columns 8
    ppmforge photo.jpg -o photo.ppm        # any Pillow-readable input
    ppmforge Data.ppm -d png               # writes Data.Reforged.png
    cat Data.ppm | ppmforge - -o -

Author: Scott Bowman
License: AGPL-3.0-or-later
"""

from __future__ import annotations

import logging
import os
import sys

from . import cli_args
from . import ppm as ppm_codec
from .core import types as ppm
from .core.error import PpmError

logger = logging.getLogger(__name__)


def _load_image(inputfile: str) -> ppm.Pixmap:
    if inputfile == "-":
        return ppm_codec.load(ppm.FileSource(sys.stdin, name="<stdin>"))

    if inputfile.lower().endswith(cli_args.PPM_EXTENSIONS):
        return ppm_codec.load_file(inputfile)

    # Late import: Pillow is only needed for non-pixmap input
    from PIL import Image, UnidentifiedImageError

    from .core.raster import from_pil_image

    try:
        with Image.open(inputfile) as image:
            return from_pil_image(image)
    except UnidentifiedImageError:
        # not a Pillow format; may still be a plain pixmap with an odd extension
        return ppm_codec.load_file(inputfile)


def _save_image(image: ppm.Pixmap, outputfile: str, device: str, options: ppm.FormatOptions) -> None:
    if device == "png":
        from .devices.png.png import write_png

        write_png(image, outputfile)
    elif outputfile == "-":
        with ppm.FileSink(sys.stdout, name="<stdout>") as sink:
            ppm_codec.save(image, sink, options)
    else:
        ppm_codec.save_file(image, outputfile, options)


def main(argv: list[str] | None = None) -> int:
    parser = cli_args.build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.device == "png" and args.outputfile == "-":
        parser.error("the png device cannot write to stdout")

    inputfile = args.inputfile
    outputfile = cli_args.get_output_name(args.outputfile, inputfile, args.device)
    # status messages go to stderr when the image itself goes to stdout
    out = sys.stderr if outputfile == "-" else sys.stdout

    if inputfile != "-" and not os.path.isfile(inputfile):
        print(f"PpmForge Error: Input file '{inputfile}' not found.", file=sys.stderr)
        return 1

    try:
        options = ppm.FormatOptions(
            num_columns=args.columns,
            columns_delimiter=args.separator,
            lines_delimiter=args.row_separator,
        )

        print(f'Loading image from "{inputfile}".', file=out)
        image = _load_image(inputfile)
        logger.debug("Loaded %dx%d image", image.width, image.height)

        print(f'Saving image to "{outputfile}".', file=out)
        _save_image(image, outputfile, args.device, options)
    except PpmError as e:
        print(f"PpmForge Error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"PpmForge Error: {e}", file=sys.stderr)
        return 1

    print("Done.", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
