# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PCLForge execution logic.

Ties the page scanner to the selected output device: pages are pulled
from the scanner one at a time, filtered, and handed to the device.
"""

import logging
import sys

from .core.byte_source import ByteSource
from .core.error import PCLError
from .core.scanner import PageScanner
from .devices.registry import get_device

logger = logging.getLogger(__name__)


def _error(message):
    print(f"PCLForge Error: {message}", file=sys.stderr)


def _describe_os_error(e, action):
    # cairo.IOError and some stream errors carry no filename
    if e.filename is not None:
        return f"Can't {action} file \"{e.filename}\": {e.strerror}"
    return f"Can't {action} file: {e}"


def _report_output(output_file, quiet):
    if output_file and not quiet:
        print(output_file, file=sys.stderr)


def run(stream, params, quiet=False):
    """Decode every page of a print stream and write it with the configured device.

    Args:
        stream: Binary file object positioned at the start of the print job.
        params: Run parameters from init_system_params(), with CLI overrides.
        quiet: Suppress the per-file output listing.

    Returns:
        Exit code (0 for success, 1 for any fatal error).
    """
    try:
        device = get_device(params["Device"])
    except ImportError as e:
        _error(f"Missing required Python module for device '{params['Device']}': {e}")
        return 1

    scanner = PageScanner(
        ByteSource(stream),
        max_line_size=params["MaxLineSize"],
    )
    page_filter = params["PageFilter"]
    exit_code = 0
    pages_written = 0

    try:
        for page in scanner:
            if page_filter is not None and page.number not in page_filter:
                logger.debug("skipping page %d", page.number)
                continue
            logger.debug("writing %r", page)
            try:
                output_file = device.showpage(page, params)
            except OSError as e:
                _error(_describe_os_error(e, "write"))
                exit_code = 1
                break
            _report_output(output_file, quiet)
            pages_written += 1
    except PCLError as e:
        message = f"{e.error_name}: {e}"
        if e.offset is not None:
            message += f" (at byte offset {e.offset})"
        _error(message)
        exit_code = 1
    except OSError as e:
        _error(_describe_os_error(e, "read"))
        exit_code = 1

    # Documents accumulated before an error are still written out, which
    # also clears the device's per-run state
    try:
        _report_output(device.finalize(params), quiet)
    except OSError as e:
        _error(_describe_os_error(e, "write"))
        return 1

    logger.info("%d pages scanned, %d written", scanner.pages_scanned, pages_written)
    return exit_code
