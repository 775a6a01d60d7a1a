# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Builders for small hand-made PCL raster streams used by the tests."""

ESC = b"\x1b"
FORM_FEED = b"\x0c"
BLANK_RECORD = b"\xff"


def substitute(literals, offset=0):
    """Substitute edit without overflow fields (offset < 15, 1-7 literals)."""
    assert 0 <= offset < 15 and 1 <= len(literals) <= 7
    return bytes([(offset << 3) | (len(literals) - 1)]) + bytes(literals)


def repeat(value, count, offset=0):
    """Repeat edit without overflow fields (offset < 3, run of 2-32)."""
    assert 0 <= offset < 3 and 2 <= count <= 32
    return bytes([0x80 | (offset << 5) | (count - 2), value])


def record(*edits):
    return bytes([len(edits)]) + b"".join(edits)


def block(*records):
    return bytes([len(records) >> 8, len(records) & 0xFF]) + b"".join(records)


def raster_data(payload, fmt=1030, length=None):
    """``<ESC>*b<fmt>m<len>W<payload>``"""
    if length is None:
        length = len(payload)
    return ESC + b"*b%dm%dW" % (fmt, length) + payload


def two_row_block():
    """Rows [F0] and [FF FF FF]."""
    return block(
        record(substitute(b"\xf0")),
        record(repeat(0xFF, 3)),
    )
