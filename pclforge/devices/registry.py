# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Output device lookup.

Each device lives in ``devices/<name>/<name>.py`` and provides
``showpage(page, params)`` and ``finalize(params)``. Device modules are
imported on first use so that a missing optional backend only matters
when that device is selected.
"""

import importlib
from types import ModuleType

AVAILABLE_DEVICES = ["pbm", "png", "tiff", "pdf"]

# File extension written by each device
DEVICE_EXTENSIONS = {
    "pbm": "pbm",
    "png": "png",
    "tiff": "tif",
    "pdf": "pdf",
}


def get_device(name: str) -> ModuleType:
    """Import and return the module implementing the named device.

    Raises:
        ValueError: If the device name is unknown.
    """
    if name not in AVAILABLE_DEVICES:
        raise ValueError(f"Unknown output device '{name}'")
    return importlib.import_module(f".{name}.{name}", __package__)
