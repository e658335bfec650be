# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Determine which manifest package a component source file belongs to.

Two strategies exist. ``QUERYABLE`` asks a development host for its
path-to-packages map; ``HEURISTIC`` guesses from the ``<name>-package/``
directory in the component path. Known production hosts go straight to the
heuristic, and a failed query falls back to it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Final

from .errors import NetworkError, PackageGuessError
from .http import HttpClient

LOGGER = logging.getLogger(__name__)

DEFAULT_PRODUCTION_HOSTS: Final[tuple[str, ...]] = ("khanacademy.org", "appspot.com")
PATH_TO_PACKAGES_PATH: Final[str] = "/_kake/genfiles/js_path_to_pkgs/en/path_to_packages_prod.json"
PACKAGE_DIR_PATTERN: Final[re.Pattern[str]] = re.compile(r"/([^/]*)-package/")


class LocatorStrategy(StrEnum):
    """Strategies available for mapping a component to its package."""

    QUERYABLE = "queryable"
    HEURISTIC = "heuristic"


class _QueryFailed(Exception):
    """Signal that the path-to-packages query produced no usable answer."""


def select_strategy(
    host_origin: str,
    production_hosts: Iterable[str] = DEFAULT_PRODUCTION_HOSTS,
) -> LocatorStrategy:
    """Return the initial strategy for ``host_origin``.

    Args:
        host_origin: Scheme, host and port of the host application.
        production_hosts: Substrings identifying hosts without introspection.

    Returns:
        LocatorStrategy: ``HEURISTIC`` for production hosts, else ``QUERYABLE``.
    """

    if any(pattern in host_origin for pattern in production_hosts):
        return LocatorStrategy.HEURISTIC
    return LocatorStrategy.QUERYABLE


def guess_package(component_path: str) -> str:
    """Guess the package owning ``component_path`` from its directory names.

    A ``foo-package/`` directory is a strong hint, not a guarantee, that the
    component ships in ``foo.js``.

    Raises:
        PackageGuessError: If the path contains no ``-package/`` directory.
    """

    match = PACKAGE_DIR_PATTERN.search(component_path)
    if match is None:
        raise PackageGuessError(f"could not guess package for {component_path}")
    return f"{match.group(1)}.js"


async def _query_package(
    component_path: str,
    host_origin: str,
    *,
    client: HttpClient,
    path_to_packages: str,
) -> str:
    try:
        response = await client.get(host_origin + path_to_packages)
        mapping = response.json()
    except NetworkError as exc:
        raise _QueryFailed(str(exc)) from exc
    except ValueError as exc:
        raise _QueryFailed(f"path-to-packages map is not JSON: {exc}") from exc
    if not isinstance(mapping, Mapping):
        raise _QueryFailed("path-to-packages map is not an object")
    packages = mapping.get(component_path)
    if not isinstance(packages, list) or not packages or not isinstance(packages[0], str):
        raise _QueryFailed(f"no packages listed for {component_path}")
    return packages[0]


async def locate_package(
    component_path: str,
    host_origin: str,
    *,
    client: HttpClient,
    production_hosts: Iterable[str] = DEFAULT_PRODUCTION_HOSTS,
    path_to_packages: str = PATH_TO_PACKAGES_PATH,
) -> str:
    """Return the package name that contains ``component_path``.

    Args:
        component_path: Component source path relative to the host's root.
        host_origin: Scheme, host and port of the host application.
        client: HTTP client used for the path-to-packages query.
        production_hosts: Substrings identifying production hosts.
        path_to_packages: Path of the mapping document on development hosts.

    Returns:
        str: Package name such as ``"content-library.js"``.

    Raises:
        PackageGuessError: If the heuristic strategy is reached and fails.
    """

    strategy = select_strategy(host_origin, production_hosts)
    if strategy is LocatorStrategy.QUERYABLE:
        try:
            return await _query_package(
                component_path,
                host_origin,
                client=client,
                path_to_packages=path_to_packages,
            )
        except _QueryFailed as exc:
            LOGGER.debug("falling back to %s strategy for %s: %s", LocatorStrategy.HEURISTIC, component_path, exc)
    return guess_package(component_path)


__all__ = [
    "DEFAULT_PRODUCTION_HOSTS",
    "LocatorStrategy",
    "PATH_TO_PACKAGES_PATH",
    "guess_package",
    "locate_package",
    "select_strategy",
]
