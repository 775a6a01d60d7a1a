# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for PCLForge.

Handles command-line argument definition, parsing, page range specifications,
and output file naming.
"""

from __future__ import annotations

import argparse
from importlib import metadata

MIN_RESOLUTION = 36
MAX_RESOLUTION = 9600


def _parse_page_ranges(spec: str) -> set[int]:
    """Parse a page range specification into a set of page numbers.

    Supports single pages (``3``), ranges (``1-5``), and comma-separated
    combinations (``1-3,7,10-12``).  Page numbers are 1-based.

    Raises:
        ValueError: If the specification is malformed.
    """
    pages: set[int] = set()
    for part in spec.split(","):
        part = part.strip()
        if not part:
            continue
        first, sep, last = part.partition("-")
        try:
            start = int(first)
            end = int(last) if sep else start
        except ValueError:
            raise ValueError(f"Invalid page range: '{part}'")
        if start < 1 or end < 1:
            raise ValueError(f"Page numbers must be positive: '{part}'")
        if start > end:
            raise ValueError(f"Invalid page range (start > end): '{part}'")
        pages.update(range(start, end + 1))
    if not pages:
        raise ValueError("Empty page range specification")
    return pages


def get_output_base_name(output_prefix: str | None, inputfile: str | None) -> str:
    """
    Derive the output filename prefix from command-line arguments.

    An explicit prefix wins; otherwise the input filename is used exactly as
    given (so ``job.prn`` produces ``job.prn-1.pbm``), and ``page`` when
    reading standard input.
    """
    if output_prefix:
        return output_prefix
    if inputfile and inputfile != "-":
        return inputfile
    return "page"


def _get_version() -> str:
    try:
        return metadata.version("pclforge")
    except metadata.PackageNotFoundError:
        return "unknown"


def build_argument_parser(available_devices: list[str]) -> argparse.ArgumentParser:
    """
    Create and configure the PCLForge argument parser.

    Args:
        available_devices: List of available output device names.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="pclforge",
        description="PCLForge - recover raster page images from PCL print files",
        epilog="If no input file is given, the print stream is read from standard input.",
    )

    parser.add_argument(
        "-V", "--version", action="version",
        version=f"PCLForge {_get_version()}"
    )
    parser.add_argument(
        "inputfile", nargs="?",
        help="PCL print file to decode ('-' or omitted for standard input)"
    )
    parser.add_argument(
        "output_prefix", nargs="?",
        help="Output filename prefix (default: the input filename, or 'page')"
    )
    parser.add_argument(
        "-d",
        "--device",
        choices=available_devices,
        default="pbm",
        help=f'Specify output device ({", ".join(available_devices)}; default: pbm)',
    )
    parser.add_argument(
        "--output-dir", dest="output_dir", default=".",
        help="Specify output directory (default: current directory)"
    )
    parser.add_argument(
        "-r", "--resolution", type=int,
        help="Device resolution in DPI recorded in PNG/TIFF/PDF output (default: 300)"
    )
    parser.add_argument(
        "--pages",
        help="Page range to output (e.g., 1-5, 3, 1-3,7,10-12)"
    )
    parser.add_argument(
        "--multipage", action="store_true",
        help="Write all pages into a single TIFF file (tiff device only)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Do not list the output files as they are written"
    )

    return parser
