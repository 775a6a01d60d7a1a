# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import io

import pytest

from pclforge import cli_runner
from pclforge.core.params import init_system_params
from pcl_stream import FORM_FEED, raster_data, two_row_block

TWO_PAGES = raster_data(two_row_block()) + FORM_FEED + raster_data(two_row_block())


class RecordingDevice:
    """Device double that fails on a chosen page and records finalize calls."""

    def __init__(self, error=None, fail_on=None):
        self.error = error
        self.fail_on = fail_on
        self.pages = []
        self.finalized = 0

    def showpage(self, page, params):
        if page.number == self.fail_on:
            raise self.error
        self.pages.append(page.number)
        return f"page-{page.number}"

    def finalize(self, params):
        self.finalized += 1
        return None


class FailingStream(io.RawIOBase):
    def readable(self):
        return True

    def readinto(self, b):
        raise OSError("Input/output error")


@pytest.fixture
def use_device(monkeypatch):
    def install(device):
        monkeypatch.setattr(cli_runner, "get_device", lambda name: device)
        return device
    return install


class TestRun:
    def test_writes_and_finalizes(self, use_device):
        device = use_device(RecordingDevice())
        assert cli_runner.run(io.BytesIO(TWO_PAGES), init_system_params(), quiet=True) == 0
        assert device.pages == [1, 2]
        assert device.finalized == 1

    def test_write_error_without_filename(self, use_device, capsys):
        device = use_device(RecordingDevice(OSError("error while writing to output stream"),
                                            fail_on=1))
        assert cli_runner.run(io.BytesIO(TWO_PAGES), init_system_params()) == 1
        err = capsys.readouterr().err
        assert "PCLForge Error: Can't write file: error while writing to output stream" in err
        assert "None" not in err
        assert device.pages == []

    def test_write_error_still_finalizes(self, use_device):
        device = use_device(RecordingDevice(OSError("disk full"), fail_on=2))
        assert cli_runner.run(io.BytesIO(TWO_PAGES), init_system_params(), quiet=True) == 1
        assert device.pages == [1]
        assert device.finalized == 1

    def test_read_error_is_not_a_write_error(self, use_device, capsys):
        device = use_device(RecordingDevice())
        assert cli_runner.run(FailingStream(), init_system_params()) == 1
        err = capsys.readouterr().err
        assert "PCLForge Error: Can't read file: Input/output error" in err
        assert "write" not in err
        assert device.finalized == 1

    def test_decode_error_finalizes(self, use_device):
        device = use_device(RecordingDevice())
        data = TWO_PAGES + FORM_FEED + raster_data(b"\x00", fmt=2)
        assert cli_runner.run(io.BytesIO(data), init_system_params(), quiet=True) == 1
        assert device.pages == [1, 2]
        assert device.finalized == 1
