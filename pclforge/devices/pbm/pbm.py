# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

"""
PBM Output Device

Writes each page as a binary portable bitmap (P4). The decoded rows are
already in P4 bit order (MSB = leftmost pixel, 1 = black), so the raster
is written out unchanged apart from padding every row to the page width.
"""

from typing import BinaryIO

from ...core.page import Page
from ..common.output_path import page_output_path


def write_pbm(f: BinaryIO, page: Page) -> None:
    f.write(f"P4\n{page.width} {page.height}\n".encode("ascii"))
    f.write(page.packed())


def showpage(page: Page, params: dict) -> str:
    """Write page to ``<base>-<n>.pbm`` and return the path."""
    output_file = page_output_path(params, page.number, "pbm")
    with open(output_file, "wb") as f:
        write_pbm(f, page)
    return output_file


def finalize(params: dict) -> None:
    return None
