# PCLForge - A PCL Raster Page Extractor
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Output file naming shared by all devices."""

import os

from ..registry import DEVICE_EXTENSIONS


def page_output_path(params: dict, page_num: int, device: str) -> str:
    """Path for a single-page output file: ``<dir>/<base>-<n>.<ext>``."""
    base_name = params.get("OutputBaseName") or "page"
    output_dir = params.get("OutputDirectory") or "."
    return os.path.join(output_dir, f"{base_name}-{page_num}.{DEVICE_EXTENSIONS[device]}")


def document_output_path(params: dict, device: str) -> str:
    """Path for a whole-document output file: ``<dir>/<base>.<ext>``."""
    base_name = params.get("OutputBaseName") or "page"
    output_dir = params.get("OutputDirectory") or "."
    return os.path.join(output_dir, f"{base_name}.{DEVICE_EXTENSIONS[device]}")
