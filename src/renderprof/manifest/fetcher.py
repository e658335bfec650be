# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Locate and download the package manifest referenced by a host homepage.

The manifest filename may embed a content hash and is not published through
any other channel, so the homepage markup is scanned for the first quoted
string that mentions ``/package-manifest``.
"""

from __future__ import annotations

import logging
import re
from typing import Final

from ..errors import ManifestNotFoundError
from ..http import HttpClient

LOGGER = logging.getLogger(__name__)

MANIFEST_URL_PATTERN: Final[re.Pattern[str]] = re.compile(r"""['"]([^"']*/package-manifest[^'"]*)["']""")


def find_manifest_url(homepage: str, host_origin: str) -> str:
    """Return the absolute manifest URL referenced by ``homepage``.

    Args:
        homepage: HTML body served at the host root.
        host_origin: Scheme, host and port prefixed onto relative URLs.

    Returns:
        str: Fully-qualified manifest URL.

    Raises:
        ManifestNotFoundError: If no quoted ``/package-manifest`` URL is present.
    """

    match = MANIFEST_URL_PATTERN.search(homepage)
    if match is None:
        raise ManifestNotFoundError(f"can't find package-manifest in homepage of {host_origin}")
    manifest_url = match.group(1)
    if "://" not in manifest_url:
        manifest_url = host_origin + manifest_url
    return manifest_url


async def locate_manifest(host_origin: str, *, client: HttpClient) -> str:
    """Fetch the homepage of ``host_origin`` and return the manifest text.

    Args:
        host_origin: Scheme, host and port of the host application.
        client: HTTP client used for both requests.

    Returns:
        str: Raw manifest body.

    Raises:
        NetworkError: If either request fails.
        ManifestNotFoundError: If the homepage does not reference a manifest.
    """

    homepage = await client.get(host_origin + "/")
    manifest_url = find_manifest_url(homepage.text, host_origin)
    LOGGER.debug("package manifest for %s is %s", host_origin, manifest_url)
    manifest = await client.get(manifest_url)
    return manifest.text


__all__ = ["MANIFEST_URL_PATTERN", "find_manifest_url", "locate_manifest"]
