# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

"""
Raster Format 1030 Row Decompressor

A compressed row record is a list of edits applied to the seed row, the
row left behind by the previous record. Each edit moves a row cursor
forward by an offset and then either fills a run with one byte value
(repeat edit) or copies literal bytes from the stream (substitute edit).

Command byte layout:

    repeat      1 oo ccccc   offset 0-3, count 0-31, run length = count + 2
    substitute  0 oooo ccc   offset 0-15, count 0-7, run length = count + 1

A saturated offset or count field (all ones) is extended by an overflow
value: a sum of following bytes, where 255 means "add and keep reading".
For repeat edits the fill byte follows the overflow bytes.
"""

from typing import TYPE_CHECKING

from .error import LineOverflow
from .params import MAX_LINE_SIZE

if TYPE_CHECKING:
    from .block_reader import BlockCursor


def read_overflow(cursor: BlockCursor) -> int:
    """Sum bytes from the cursor until one of them is not 255."""
    total = 0
    while True:
        b = cursor.next_byte()
        total += b
        if b != 255:
            return total


def _reserve(row: bytearray, start: int, count: int, max_line_size: int) -> None:
    """Grow row with zero bytes so that row[start:start + count] exists."""
    end = start + count
    if end > len(row):
        if end > max_line_size:
            raise LineOverflow()
        row.extend(bytes(end - len(row)))


def read_repeat(cmd: int, cursor: BlockCursor, row: bytearray, pos: int,
                max_line_size: int = MAX_LINE_SIZE) -> int:
    """Apply a repeat edit at row cursor pos and return the new cursor."""
    offset = (cmd >> 5) & 3
    if offset == 3:
        offset += read_overflow(cursor)
    count = cmd & 31
    if count == 31:
        count += read_overflow(cursor)
    count += 2
    value = cursor.next_byte()

    pos += offset
    _reserve(row, pos, count, max_line_size)
    row[pos:pos + count] = bytes((value,)) * count
    return pos + count


def read_substitute(cmd: int, cursor: BlockCursor, row: bytearray, pos: int,
                    max_line_size: int = MAX_LINE_SIZE) -> int:
    """Apply a substitute edit at row cursor pos and return the new cursor."""
    offset = (cmd >> 3) & 15
    if offset == 15:
        offset += read_overflow(cursor)
    count = cmd & 7
    if count == 7:
        count += read_overflow(cursor)
    count += 1

    pos += offset
    _reserve(row, pos, count, max_line_size)
    for i in range(pos, pos + count):
        row[i] = cursor.next_byte()
    return pos + count


def read_edit(cursor: BlockCursor, row: bytearray, pos: int,
              max_line_size: int = MAX_LINE_SIZE) -> int:
    cmd = cursor.next_byte()
    if cmd & 0x80:
        return read_repeat(cmd, cursor, row, pos, max_line_size)
    return read_substitute(cmd, cursor, row, pos, max_line_size)


def decode_row(cursor: BlockCursor, row: bytearray, num_edits: int,
               max_line_size: int = MAX_LINE_SIZE) -> None:
    """Apply num_edits edits to the seed row in place.

    The row cursor starts at 0 for every record, so offsets of the first
    edit skip over unchanged leading bytes of the seed row.

    Raises:
        LineOverflow: An edit would grow the row past max_line_size.
        ReadPastBlockEnd: The record runs past the declared block length.
        UnexpectedEndOfStream: The input ended inside the record.
    """
    pos = 0
    for _ in range(num_edits):
        pos = read_edit(cursor, row, pos, max_line_size)
