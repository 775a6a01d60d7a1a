# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

"""
TIFF Output Device

Writes pages as bilevel TIFF images using Pillow, CCITT Group 4
compressed. Supports single-page (one .tif per page) and multi-page (all
pages in one .tif) modes.
"""

from typing import Any

import numpy as np
from PIL import Image

from ...core.page import Page
from ..common.output_path import document_output_path, page_output_path

# Module-level state for multi-page accumulation
_accumulated_pages: list[Image.Image] = []
_multipage_dpi: tuple[float, float] | None = None


def page_to_image(page: Page) -> Image.Image:
    """Convert a page to a Pillow mode '1' image.

    Pillow packs mode '1' with 1 = white, the opposite of the decoded
    raster, so all bits are inverted on the way in.
    """
    arr = np.invert(page.to_array(min_width_bytes=1))
    height, width_bytes = arr.shape
    return Image.frombytes("1", (width_bytes * 8, height), arr.tobytes())


def _save_kwargs(dpi: tuple[float, float]) -> dict[str, Any]:
    return {
        'format': 'TIFF',
        'compression': 'group4',
        'dpi': dpi,
    }


def showpage(page: Page, params: dict) -> str | None:
    """Write the page to a TIFF file, or hold it for the multi-page file.

    Returns:
        Path of the file written, or None when the page was accumulated.
    """
    global _multipage_dpi

    img = page_to_image(page)
    resolution = float(params.get("Resolution") or 300)
    dpi = (resolution, resolution)

    if params.get("MultiPageTiff"):
        _accumulated_pages.append(img)
        _multipage_dpi = dpi
        return None

    output_file = page_output_path(params, page.number, "tiff")
    img.save(output_file, **_save_kwargs(dpi))
    return output_file


def finalize(params: dict) -> str | None:
    """Save accumulated pages as one multi-page TIFF.

    Returns:
        Path of the file written, or None if nothing was accumulated.
    """
    global _multipage_dpi

    if not _accumulated_pages:
        return None

    output_file = document_output_path(params, "tiff")
    save_kwargs = _save_kwargs(_multipage_dpi or (300.0, 300.0))
    save_kwargs['save_all'] = True
    save_kwargs['append_images'] = _accumulated_pages[1:]
    _accumulated_pages[0].save(output_file, **save_kwargs)

    _accumulated_pages.clear()
    _multipage_dpi = None
    return output_file
