# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Conversion of decoded pages to Cairo image surfaces."""

import cairo
import numpy as np

from ...core.page import Page

# Cairo FORMAT_RGB24 pixels are native-endian 32-bit words, 0x00RRGGBB
_WHITE = 0x00FFFFFF
_BLACK = 0x00000000


def page_to_surface(page: Page) -> cairo.ImageSurface:
    """Render a page into an RGB24 image surface, one device pixel per bit.

    Zero-width pages are widened to 8 white pixels; Cairo cannot create
    an empty surface.
    """
    bits = np.unpackbits(page.to_array(min_width_bytes=1), axis=1)
    height, width = bits.shape

    stride = cairo.ImageSurface.format_stride_for_width(cairo.FORMAT_RGB24, width)
    pixels = np.full((height, stride // 4), _WHITE, dtype=np.uint32)
    pixels[:, :width][bits == 1] = _BLACK

    return cairo.ImageSurface.create_for_data(
        pixels, cairo.FORMAT_RGB24, width, height, stride
    )
