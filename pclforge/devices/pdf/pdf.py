# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PDF Output Device

Collects all pages of a run into a single PDF file using Cairo's
PDFSurface. Each page is sized from its pixel dimensions and the device
resolution, and painted as an unsmoothed image so that printer pixels
stay sharp at any zoom level.

Multi-Page Support:
    The PDFDocumentState instance is created by the first showpage call
    and persists until finalize() closes the surface.
"""

import cairo

from ..common.cairo_page import page_to_surface
from ..common.output_path import document_output_path

POINTS_PER_INCH = 72.0


class PDFDocumentState:
    """
    Maintains state for a multi-page PDF document.
    """

    def __init__(self, file_path, width_pdf, height_pdf):
        """
        Initialize PDF document state.

        Args:
            file_path: Output file path
            width_pdf: First page width in PDF points
            height_pdf: First page height in PDF points
        """
        self.file_path = file_path
        self.surface = cairo.PDFSurface(file_path, width_pdf, height_pdf)
        self.context = cairo.Context(self.surface)
        self.pages_written = 0

    def start_new_page(self, width_pdf, height_pdf):
        """
        Start a new page in the document.

        For pages after the first, this calls show_page() on the surface
        to advance to a new page and resizes it.
        """
        if self.pages_written > 0:
            self.surface.show_page()
            self.surface.set_size(width_pdf, height_pdf)
        self.context.identity_matrix()

    def draw_page(self, page, dpi):
        scale = POINTS_PER_INCH / dpi
        image = page_to_surface(page)

        self.context.save()
        self.context.scale(scale, scale)
        pattern = cairo.SurfacePattern(image)
        pattern.set_filter(cairo.FILTER_NEAREST)
        self.context.set_source(pattern)
        self.context.paint()
        self.context.restore()
        self.pages_written += 1

    def finalize(self):
        # The last page has no successor to call show_page() for it
        if self.pages_written > 0:
            self.surface.show_page()
        self.surface.finish()


_document = None


def _page_size_points(page, dpi):
    # Zero-width pages are widened to one byte by page_to_surface
    width = max(page.width, 8)
    return width * POINTS_PER_INCH / dpi, page.height * POINTS_PER_INCH / dpi


def showpage(page, params):
    """
    Add the page to the run's PDF document.

    Args:
        page: Decoded page
        params: Run parameters containing Resolution, OutputBaseName and
            OutputDirectory

    Returns:
        None; the document is written by finalize()
    """
    global _document

    dpi = float(params.get("Resolution") or 300)
    width_pdf, height_pdf = _page_size_points(page, dpi)

    if _document is None:
        _document = PDFDocumentState(
            document_output_path(params, "pdf"), width_pdf, height_pdf
        )
    _document.start_new_page(width_pdf, height_pdf)
    _document.draw_page(page, dpi)
    return None


def finalize(params):
    """Close the PDF document and return its path, or None if no pages were drawn."""
    global _document

    if _document is None:
        return None
    _document.finalize()
    file_path = _document.file_path
    _document = None
    return file_path
