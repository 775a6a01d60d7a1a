# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

"""
Raster block reader.

A raster data block (the payload of an ``<ESC>*b<n>W`` command) holds a
big-endian 16-bit row count followed by that many row records. Every byte
is taken through a BlockCursor so that nothing is read beyond the length
declared in the escape sequence.
"""

from .byte_source import ByteSource
from .delta_row import decode_row
from .error import ReadPastBlockEnd
from .params import MAX_LINE_SIZE

# Edit count value marking a blank (zero length) row
BLANK_ROW = 255


class BlockCursor:
    """Byte reader bounded by the remaining length of the current block."""

    __slots__ = ('source', 'remaining')

    def __init__(self, source: ByteSource, remaining: int) -> None:
        self.source = source
        self.remaining = remaining

    def next_byte(self) -> int:
        if self.remaining <= 0:
            err = ReadPastBlockEnd()
            err.offset = self.source.offset
            raise err
        self.remaining -= 1
        return self.source.read_required()

    def drain(self) -> int:
        """Discard the unread remainder of the block; return how many bytes that was."""
        leftover = self.remaining
        while self.remaining > 0:
            self.remaining -= 1
            self.source.read_required()
        return leftover


def read_row(cursor: BlockCursor, row: bytearray,
             max_line_size: int = MAX_LINE_SIZE) -> None:
    """Decode one row record into the seed row."""
    num_edits = cursor.next_byte()
    if num_edits == BLANK_ROW:
        del row[:]
    else:
        decode_row(cursor, row, num_edits, max_line_size)


def read_block(cursor: BlockCursor, row: bytearray, rows: list[bytes],
               max_line_size: int = MAX_LINE_SIZE) -> int:
    """Decode a raster block, appending a snapshot of each decoded row to rows.

    Args:
        cursor: Cursor bounded to the declared block length.
        row: Seed row; edited in place and left holding the last row.
        rows: Page row list receiving one bytes copy per record.
        max_line_size: Row ceiling in bytes.

    Returns:
        Number of row records decoded.
    """
    count = cursor.next_byte()
    count = count * 256 + cursor.next_byte()
    for _ in range(count):
        read_row(cursor, row, max_line_size)
        rows.append(bytes(row))
    return count
