# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Run configuration.

All tunables live in one plain dictionary created here and then
overridden from the command line. Devices and the scanner read their
settings from it by key.
"""

from typing import Any, Dict

# Longest row, in bytes, a page may contain before decoding is abandoned
MAX_LINE_SIZE = 2000

# Delta-row compression with repeat and substitute edits
RASTER_FORMAT_1030 = 1030

DEFAULT_DEVICE = "pbm"
DEFAULT_RESOLUTION = 300


def init_system_params() -> Dict[str, Any]:
    """
    Create the default parameter dictionary for a run.

    Returns:
        Dict[str, Any]: Parameters dictionary containing:
            - MaxLineSize: Row ceiling in bytes
            - Device: Output device name
            - Resolution: Device resolution in DPI, used for metadata and PDF scaling
            - OutputDirectory: Directory receiving output files
            - OutputBaseName: Output filename prefix
            - PageFilter: Set of page numbers to emit, or None for all
            - MultiPageTiff: Collect TIFF pages into a single file
    """
    return {
        "MaxLineSize": MAX_LINE_SIZE,
        "Device": DEFAULT_DEVICE,
        "Resolution": DEFAULT_RESOLUTION,
        "OutputDirectory": ".",
        "OutputBaseName": "page",
        "PageFilter": None,
        "MultiPageTiff": False,
    }
