# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from pclforge.core.block_reader import BlockCursor, read_block, read_row
from pclforge.core.byte_source import ByteSource
from pclforge.core.error import ReadPastBlockEnd, UnexpectedEndOfStream
from pcl_stream import BLANK_RECORD, block, record, repeat, substitute


def cursor_for(data, budget=None):
    return BlockCursor(ByteSource.from_bytes(data),
                       len(data) if budget is None else budget)


def decode(data, seed=b""):
    row = bytearray(seed)
    rows = []
    cursor = cursor_for(data)
    count = read_block(cursor, row, rows)
    return count, rows, row, cursor


class TestBlockCursor:
    def test_counts_down(self):
        cursor = cursor_for(b"\x01\x02\x03")
        assert cursor.next_byte() == 1
        assert cursor.remaining == 2

    def test_zero_budget(self):
        cursor = cursor_for(b"\x01", budget=0)
        with pytest.raises(ReadPastBlockEnd):
            cursor.next_byte()

    def test_drain(self):
        source = ByteSource.from_bytes(b"\x01\x02\x03\x04")
        cursor = BlockCursor(source, 3)
        cursor.next_byte()
        assert cursor.drain() == 2
        assert cursor.remaining == 0
        assert source.read() == 4

    def test_drain_past_end_of_stream(self):
        cursor = cursor_for(b"\x01", budget=4)
        with pytest.raises(UnexpectedEndOfStream):
            cursor.drain()


class TestReadRow:
    def test_blank_row_sentinel_clears_seed(self):
        row = bytearray(b"\x01\x02\x03")
        read_row(cursor_for(BLANK_RECORD), row)
        assert row == bytearray()

    def test_edit_count(self):
        row = bytearray()
        read_row(cursor_for(record(substitute(b"\x01"), substitute(b"\x02"))), row)
        assert row == bytearray(b"\x01\x02")


class TestReadBlock:
    def test_row_count_is_big_endian(self):
        data = b"\x01\x00" + b"\x00" * 256
        count, rows, _, cursor = decode(data)
        assert count == 256
        assert len(rows) == 256
        assert cursor.remaining == 0

    def test_seed_row_carried_over(self):
        count, rows, _, _ = decode(block(record()), seed=b"\x11\x22\x33")
        assert count == 1
        assert rows == [b"\x11\x22\x33"]

    def test_records_edit_previous_row(self):
        data = block(
            record(substitute(b"\xaa")),
            record(),
            record(substitute(b"\xbb", offset=1)),
            record(repeat(0x00, 2)),
        )
        _, rows, row, _ = decode(data)
        assert rows == [b"\xaa", b"\xaa", b"\xaa\xbb", b"\x00\x00"]
        assert row == bytearray(b"\x00\x00")

    def test_blank_record_in_block(self):
        data = block(record(repeat(0xFF, 4)), BLANK_RECORD, record())
        _, rows, _, _ = decode(data)
        assert rows == [b"\xff" * 4, b"", b""]

    def test_rows_are_snapshots(self):
        _, rows, row, _ = decode(block(record(substitute(b"\x01"))))
        row[0] = 0x99
        assert rows == [b"\x01"]

    def test_empty_block(self):
        count, rows, _, _ = decode(b"\x00\x00")
        assert count == 0
        assert rows == []

    def test_budget_exceeded(self):
        # 00 01 | 01 | 01 aa bb needs six bytes
        data = block(record(substitute(b"\xaa\xbb")))
        assert len(data) == 6
        with pytest.raises(ReadPastBlockEnd):
            read_block(cursor_for(data, budget=5), bytearray(), [])
