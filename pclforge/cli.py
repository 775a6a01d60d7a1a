#!/usr/bin/env python3
# PCLForge - A PCL Raster Page Extractor
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
PCLForge - PCL Raster Page Extractor

Recovers the raster page images from a PCL print file (as produced by
printer drivers that send pre-rendered pages compressed with raster
format 1030) and writes one bitmap per page.

Key Components:
    - Page Scanner: finds raster escape sequences and page breaks
    - Block Reader / Row Decompressor: decode format 1030 raster blocks
    - Devices: pluggable output formats (PBM, PNG, TIFF, PDF)

Usage:
    pclforge job.prn                 writes job.prn-1.pbm, job.prn-2.pbm, ...
    pclforge job.prn scan            writes scan-1.pbm, ...
    pclforge -d png < job.prn        writes page-1.png, ...

License: AGPL-3.0-or-later
"""

import logging
import os
import sys

from .cli_args import (MAX_RESOLUTION, MIN_RESOLUTION, _parse_page_ranges,
                       build_argument_parser, get_output_base_name)
from .cli_runner import run
from .core.params import init_system_params
from .devices.registry import AVAILABLE_DEVICES


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def main(argv=None) -> int:
    """
    Main entry point for PCLForge.

    Returns:
        Exit code: 0 for success, 1 for error
    """
    parser = build_argument_parser(AVAILABLE_DEVICES)
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    if args.resolution is not None:
        if args.resolution < MIN_RESOLUTION or args.resolution > MAX_RESOLUTION:
            print(f"PCLForge Error: Resolution must be between {MIN_RESOLUTION} "
                  f"and {MAX_RESOLUTION} DPI.", file=sys.stderr)
            return 1

    page_filter = None
    if args.pages:
        try:
            page_filter = _parse_page_ranges(args.pages)
        except ValueError as e:
            print(f"PCLForge Error: {e}", file=sys.stderr)
            print("Expected format: 1-5, 3, 1-3,7,10-12", file=sys.stderr)
            return 1

    if args.multipage and args.device != "tiff":
        print("PCLForge Error: --multipage requires the tiff device.", file=sys.stderr)
        return 1

    params = init_system_params()
    params["Device"] = args.device
    params["OutputBaseName"] = get_output_base_name(args.output_prefix, args.inputfile)
    params["OutputDirectory"] = args.output_dir
    params["PageFilter"] = page_filter
    params["MultiPageTiff"] = args.multipage
    if args.resolution is not None:
        params["Resolution"] = args.resolution

    try:
        os.makedirs(args.output_dir, exist_ok=True)
    except OSError as e:
        print(f"PCLForge Error: Can't create output directory \"{args.output_dir}\": "
              f"{e.strerror}", file=sys.stderr)
        return 1

    if args.inputfile and args.inputfile != "-":
        try:
            in_file = open(args.inputfile, "rb")
        except OSError:
            print(f"PCLForge Error: Can't open file \"{args.inputfile}\"", file=sys.stderr)
            return 1
        with in_file:
            return run(in_file, params, quiet=args.quiet)

    if sys.stdin.isatty():
        print("PCLForge Error: No filename given and no input on stdin", file=sys.stderr)
        return 1
    return run(sys.stdin.buffer, params, quiet=args.quiet)


if __name__ == "__main__":
    sys.exit(main())
