# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

"""
PNG Output Device

Writes each page as a PNG image using Cairo.
"""

from ...core.page import Page
from ..common.cairo_page import page_to_surface
from ..common.output_path import page_output_path


def showpage(page: Page, params: dict) -> str:
    """
    Write the page to a PNG file.

    Args:
        page: Decoded page
        params: Run parameters containing OutputBaseName and OutputDirectory

    Returns:
        Path of the file written
    """
    surface = page_to_surface(page)
    output_file = page_output_path(params, page.number, "png")
    surface.write_to_png(output_file)
    surface.finish()
    return output_file


def finalize(params: dict) -> None:
    return None
