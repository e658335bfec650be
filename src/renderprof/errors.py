# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while resolving packages and profiling renders."""

from __future__ import annotations

from collections.abc import Iterable


class RenderProfileError(RuntimeError):
    """Base class for failures inside a single profiling pipeline."""


class NetworkError(RenderProfileError):
    """Raised when a host is unreachable or answers with a non-success status."""

    def __init__(
        self,
        url: str,
        *,
        method: str = "GET",
        status: int | None = None,
        reason: str | None = None,
    ) -> None:
        """Create the error for ``url`` with an optional HTTP ``status``.

        Args:
            url: Fully-qualified URL that was requested.
            method: HTTP method of the failed request.
            status: HTTP status code when the server responded.
            reason: Transport-level description when no response arrived.
        """

        if status is not None:
            message = f"{method} {url} failed with HTTP {status}"
        else:
            message = f"{method} {url} failed: {reason or 'unknown error'}"
        super().__init__(message)
        self.url = url
        self.method = method
        self.status = status


class ManifestNotFoundError(RenderProfileError):
    """Raised when the homepage does not reference a package manifest."""


class ManifestParseError(RenderProfileError):
    """Raised when the package list cannot be extracted from the manifest."""


class PackageGuessError(RenderProfileError):
    """Raised when a component path does not name its owning package."""


class FixtureLoadError(RenderProfileError):
    """Raised when a fixture file is unreadable or has no instances."""


class UnresolvedUrlError(RenderProfileError):
    """Raised when resolved packages have no URL in the manifest."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(names)
        super().__init__(f"no manifest URL for package(s): {', '.join(self.names)}")


class ConfigError(RenderProfileError):
    """Raised when configuration input is invalid."""


__all__ = (
    "ConfigError",
    "FixtureLoadError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "NetworkError",
    "PackageGuessError",
    "RenderProfileError",
    "UnresolvedUrlError",
)
