# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Build the package dependency graph from raw manifest text."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Final

from ..errors import ManifestParseError
from ..models import DependencyGraph, PackageDescriptor

LOGGER = logging.getLogger(__name__)

# The manifest is a script, not JSON; only the javascript package list is.
PACKAGE_LIST_PATTERN: Final[re.Pattern[str]] = re.compile(
    r'"javascript":\s*(\[.*\]),\s*"stylesheets":',
    re.DOTALL,
)


def extract_package_entries(manifest_text: str) -> list[Mapping[str, Any]]:
    """Return the raw package entries embedded in ``manifest_text``.

    Args:
        manifest_text: Manifest body as served by the host.

    Returns:
        list[Mapping[str, Any]]: Entries carrying ``name``, ``url`` and
        optionally ``dependencies``.

    Raises:
        ManifestParseError: If the package list cannot be isolated or decoded.
    """

    match = PACKAGE_LIST_PATTERN.search(manifest_text)
    if match is None:
        raise ManifestParseError("manifest does not contain a javascript package list")
    try:
        entries = json.loads(match.group(1))
    except json.JSONDecodeError as exc:
        raise ManifestParseError(f"manifest package list is not valid JSON: {exc}") from exc
    if not isinstance(entries, list):
        raise ManifestParseError("manifest package list is not an array")
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ManifestParseError(f"manifest entry {index} is not an object")
    return entries


def _descriptor(index: int, entry: Mapping[str, Any]) -> PackageDescriptor:
    name = entry.get("name")
    url = entry.get("url")
    if not isinstance(name, str) or not isinstance(url, str):
        raise ManifestParseError(f"manifest entry {index} lacks a string name or url")
    raw_deps = entry.get("dependencies") or ()
    if not isinstance(raw_deps, (list, tuple)) or not all(isinstance(dep, str) for dep in raw_deps):
        raise ManifestParseError(f"manifest entry {name!r} has malformed dependencies")
    return PackageDescriptor(name=name, url=url, dependencies=tuple(raw_deps))


def build_graph(manifest_text: str, host_origin: str) -> DependencyGraph:
    """Parse ``manifest_text`` into dependency and URL lookups.

    Duplicate package names are not an error: the manifest format does not
    promise uniqueness, and the last entry wins.

    Args:
        manifest_text: Manifest body as served by the host.
        host_origin: Scheme, host and port prefixed onto every package URL.

    Returns:
        DependencyGraph: Read-only maps keyed by package name.

    Raises:
        ManifestParseError: If the package list is missing or malformed.
    """

    descriptors = tuple(_descriptor(index, entry) for index, entry in enumerate(extract_package_entries(manifest_text)))
    dependencies: dict[str, tuple[str, ...]] = {}
    urls: dict[str, str] = {}
    for descriptor in descriptors:
        if descriptor.name in dependencies:
            LOGGER.debug("duplicate manifest entry %s; keeping the last one", descriptor.name)
        dependencies[descriptor.name] = descriptor.dependencies
        urls[descriptor.name] = host_origin + descriptor.url
    return DependencyGraph(
        dependencies=MappingProxyType(dependencies),
        urls=MappingProxyType(urls),
    )


__all__ = ["PACKAGE_LIST_PATTERN", "build_graph", "extract_package_entries"]
