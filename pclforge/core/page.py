# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

"""
Decoded page representation.

A page is the ordered list of rows decoded between two page breaks. Rows
are kept at the length the stream left them; padding to the widest row
only happens when a device asks for a rectangular bitmap.
"""

import numpy as np


class Page:
    """Ordered rows of packed 1-bit pixels, MSB = leftmost, 1 = black."""

    def __init__(self, rows: list[bytes] | None = None, number: int = 0) -> None:
        self.rows = rows if rows is not None else []
        self.number = number

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return f"Page(number={self.number}, width={self.width}, height={self.height})"

    @property
    def width_bytes(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @property
    def width(self) -> int:
        """Page width in pixels."""
        return self.width_bytes * 8

    @property
    def height(self) -> int:
        return len(self.rows)

    def to_array(self, min_width_bytes: int = 0) -> np.ndarray:
        """Return the page as a (height, width_bytes) uint8 array.

        Rows shorter than the widest row are padded on the right with zero
        (white) bytes.

        Args:
            min_width_bytes: Lower bound on the array width, for devices
                that cannot represent a zero-width image.
        """
        width = max(self.width_bytes, min_width_bytes)
        arr = np.zeros((self.height, width), dtype=np.uint8)
        for y, row in enumerate(self.rows):
            if row:
                arr[y, :len(row)] = np.frombuffer(row, dtype=np.uint8)
        return arr

    def packed(self) -> bytes:
        """Padded rows concatenated top to bottom (PBM raster order)."""
        return self.to_array().tobytes()
