# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

"""
Sequential byte reader over the input print stream.

The stream is never seeked; bytes are handed out one at a time in stream
order. Reads are buffered internally so that pulling single bytes from a
pipe or a large spool file stays cheap.
"""

import io
from typing import BinaryIO

from .error import UnexpectedEndOfStream

READ_CHUNK = 65536


class ByteSource:
    """Next-byte-or-end-of-stream reader with offset tracking."""

    def __init__(self, stream: BinaryIO, chunk_size: int = READ_CHUNK) -> None:
        self.stream = stream
        self.chunk_size = chunk_size
        self.buffer = b''
        self.buf_pos = 0
        self.offset = 0
        self.exhausted = False

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> ByteSource:
        return cls(io.BytesIO(bytes(data)))

    def _fill(self) -> bool:
        if self.exhausted:
            return False
        data = self.stream.read(self.chunk_size)
        if not data:
            self.exhausted = True
            return False
        self.buffer = data
        self.buf_pos = 0
        return True

    def read(self) -> int | None:
        """Return the next byte as an int, or None at end of stream."""
        if self.buf_pos >= len(self.buffer) and not self._fill():
            return None
        b = self.buffer[self.buf_pos]
        self.buf_pos += 1
        self.offset += 1
        return b

    def read_required(self) -> int:
        """Return the next byte, raising UnexpectedEndOfStream at end of stream."""
        b = self.read()
        if b is None:
            err = UnexpectedEndOfStream()
            err.offset = self.offset
            raise err
        return b
