# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Immutable records shared by the manifest, locator, and profiling stages."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeAlias

DependencyMap: TypeAlias = Mapping[str, tuple[str, ...]]
PackageUrlMap: TypeAlias = Mapping[str, str]
ResolvedDependencyOrder: TypeAlias = tuple[str, ...]


@dataclass(slots=True, frozen=True)
class PackageDescriptor:
    """Describe one package entry parsed from the manifest."""

    name: str
    url: str
    dependencies: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class DependencyGraph:
    """Adjacency and URL lookups built from a single manifest snapshot.

    Attributes:
        dependencies: Mapping from package name to its declared dependencies.
        urls: Mapping from package name to the fully-qualified package URL.
    """

    dependencies: DependencyMap
    urls: PackageUrlMap


@dataclass(slots=True, frozen=True)
class RenderRequest:
    """Body submitted to the render service for one component."""

    urls: tuple[str, ...]
    path: str
    props: Any

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-serialisable request body.

        Returns:
            dict[str, Any]: Mapping with ``urls``, ``path`` and ``props`` keys.
        """

        return {"urls": list(self.urls), "path": self.path, "props": self.props}


@dataclass(slots=True, frozen=True)
class Fixture:
    """Example prop sets loaded from a fixture file."""

    path: Path
    instances: tuple[Any, ...]

    def select(self, seed: int) -> Any:
        """Return the instance chosen deterministically by ``seed``.

        Args:
            seed: Arbitrary integer; the same seed always picks the same instance.

        Returns:
            Any: Props stored at ``seed % len(instances)``.
        """

        return self.instances[seed % len(self.instances)]


@dataclass(slots=True, frozen=True)
class ProfileTarget:
    """One component/fixture/seed combination to profile."""

    component_path: str
    fixture_path: Path
    seed: int = 1


@dataclass(slots=True, frozen=True)
class ProfileOutcome:
    """Reported result of one profiling pipeline."""

    target: ProfileTarget
    package: str | None = None
    urls: tuple[str, ...] = field(default_factory=tuple)
    size: int | None = None
    elapsed: float | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the render request succeeded."""

        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the outcome."""

        return {
            "component": self.target.component_path,
            "fixture": str(self.target.fixture_path),
            "seed": self.target.seed,
            "package": self.package,
            "urls": list(self.urls),
            "size": self.size,
            "elapsed_ms": None if self.elapsed is None else round(self.elapsed * 1000, 3),
            "error": self.error,
        }


__all__ = [
    "DependencyGraph",
    "DependencyMap",
    "Fixture",
    "PackageDescriptor",
    "PackageUrlMap",
    "ProfileOutcome",
    "ProfileTarget",
    "RenderRequest",
    "ResolvedDependencyOrder",
]
