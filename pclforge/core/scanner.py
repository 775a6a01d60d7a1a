# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

"""
PCL Page Scanner

Walks a print stream byte by byte looking for raster escape sequences of
the form ``<ESC>*b<number><letter>...``. Parameter letters are handled as
in PCL parameterized commands: a lowercase letter ends one parameter and
keeps the sequence open for the next, an uppercase letter ends the whole
sequence. The letters that matter here are:

    m / M   set the raster compression format (only 1030 is understood)
    w / W   raster data follows; the number is its length in bytes

Everything else in the stream (PJL, text, other escapes) is skipped. A
form feed outside an escape sequence ends the page.
"""

import logging
from collections.abc import Iterator

from .block_reader import BlockCursor, read_block
from .byte_source import ByteSource
from .error import PCLError, UnsupportedCompression
from .page import Page
from .params import MAX_LINE_SIZE, RASTER_FORMAT_1030

logger = logging.getLogger(__name__)

ESC = 0x1B
FORM_FEED = 0x0C

_ASTERISK = ord('*')
_RASTER_GROUP = (ord('b'), ord('B'))
_DIGIT_0 = ord('0')
_DIGIT_9 = ord('9')
_FORMAT_CHARS = (ord('m'), ord('M'))
_DATA_CHARS = (ord('w'), ord('W'))


class PageScanner:
    """Assembles pages of decoded rows from a PCL byte stream.

    The scanner owns the seed row and the page being assembled; both are
    reset at the start of every page, as is the raster parameter state.
    Not safe for concurrent use.
    """

    def __init__(self, source: ByteSource, max_line_size: int = MAX_LINE_SIZE) -> None:
        self.source = source
        self.max_line_size = max_line_size
        self.pages_scanned = 0
        self.finished = False
        self._reset()

    def _reset(self) -> None:
        self.in_raster = False
        self.number = 0
        self.format = 0
        self.row = bytearray()
        self.rows: list[bytes] = []

    def __iter__(self) -> Iterator[Page]:
        while True:
            page = self.next_page()
            if page is None:
                return
            yield page

    def next_page(self) -> Page | None:
        """Scan up to the next page break or end of stream.

        Returns:
            The assembled page, or None once a page without rows is found.
            An empty page ends the scan for good.

        Raises:
            PCLError: On any malformed raster data. The error's ``offset``
                is the stream position where decoding stopped.
        """
        if self.finished:
            return None
        self._reset()
        try:
            self._scan()
        except PCLError as err:
            if err.offset is None:
                err.offset = self.source.offset
            raise

        if not self.rows:
            self.finished = True
            return None
        self.pages_scanned += 1
        page = Page(self.rows, number=self.pages_scanned)
        self.rows = []
        return page

    def _scan(self) -> None:
        read = self.source.read
        while True:
            ch = read()
            if ch is None:
                logger.debug("end of stream at offset %d", self.source.offset)
                return
            if ch == FORM_FEED:
                logger.debug("page break at offset %d, %d rows",
                             self.source.offset, len(self.rows))
                return
            if ch == ESC:
                self._escape()
            elif self.in_raster:
                self._raster_parameter(ch)

    def _escape(self) -> None:
        ch1 = self.source.read_required()
        ch2 = self.source.read_required()
        if ch1 == _ASTERISK and ch2 in _RASTER_GROUP:
            self.in_raster = True
            self.number = 0
        else:
            self.in_raster = False

    def _raster_parameter(self, ch: int) -> None:
        if _DIGIT_0 <= ch <= _DIGIT_9:
            self.number = self.number * 10 + (ch - _DIGIT_0)
            return

        if ch in _FORMAT_CHARS:
            self.format = self.number
            logger.debug("raster format %d", self.format)
        elif ch in _DATA_CHARS:
            self._raster_data(self.number)

        if 0x60 <= ch <= 0x7E:
            # lowercase: parameter character, more may follow
            self.number = 0
        elif 0x40 <= ch <= 0x5E:
            # uppercase: terminating character
            self.in_raster = False

    def _raster_data(self, length: int) -> None:
        if self.format != RASTER_FORMAT_1030:
            raise UnsupportedCompression(self.format)

        cursor = BlockCursor(self.source, length)
        count = read_block(cursor, self.row, self.rows, self.max_line_size)
        logger.debug("raster block of %d bytes, %d rows", length, count)

        if cursor.remaining > 0:
            logger.warning("%d unread bytes in block", cursor.remaining)
            cursor.drain()


def scan_next_page(source: ByteSource, max_line_size: int = MAX_LINE_SIZE) -> Page | None:
    """Scan one page from source with a fresh scanner."""
    return PageScanner(source, max_line_size).next_page()
