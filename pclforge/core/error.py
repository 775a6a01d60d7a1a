# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

"""
Fatal decode errors.

Every error raised while scanning a print stream derives from PCLError.
None of them are recoverable: the byte position of the following pages
cannot be trusted once a raster block has been misread, so the errors
propagate untouched to the CLI runner, which reports them and exits.
"""


class PCLError(Exception):
    """Base class for fatal raster decode errors."""

    error_name = "pclerror"
    message = "PCL decode error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        # Byte offset in the input stream, filled in by the scanner when known
        self.offset: int | None = None


class UnsupportedCompression(PCLError):
    """A raster block was declared with a format code other than 1030."""

    error_name = "unsupportedcompression"

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"Unsupported raster compression type {code}")


class ReadPastBlockEnd(PCLError):
    error_name = "readpastblockend"
    message = "Attempt to read data past end of block"


class UnexpectedEndOfStream(PCLError):
    error_name = "unexpectedeof"
    message = "Unexpected EOF"


class LineOverflow(PCLError):
    """A row grew past the configured ceiling."""

    error_name = "lineoverflow"
    message = "Unreasonable long line, aborting"
