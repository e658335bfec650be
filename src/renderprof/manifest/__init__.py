# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Discovery and parsing of the host application's package manifest."""

from __future__ import annotations

from .fetcher import find_manifest_url, locate_manifest
from .graph import build_graph, extract_package_entries

__all__ = ["build_graph", "extract_package_entries", "find_manifest_url", "locate_manifest"]
