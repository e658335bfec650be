# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Transitive dependency ordering for manifest packages."""

from __future__ import annotations

from .models import DependencyMap, ResolvedDependencyOrder


def resolve(root_package: str, dependency_map: DependencyMap) -> ResolvedDependencyOrder:
    """Return ``root_package`` and everything it depends on, dependencies first.

    The traversal is a depth-first post-order walk: a package is marked as seen
    before its dependencies are visited, so shared sub-dependencies and cycles
    are emitted once. Names with no manifest entry are treated as leaves.

    Args:
        root_package: Package whose transitive closure is required.
        dependency_map: Mapping from package name to direct dependencies.

    Returns:
        ResolvedDependencyOrder: Package names where no package precedes one of
        its (acyclic) dependencies; the root comes last.
    """

    ordered: list[str] = []
    seen: set[str] = set()

    def visit(package: str) -> None:
        if package in seen:
            return
        seen.add(package)
        for dependency in dependency_map.get(package, ()):
            visit(dependency)
        ordered.append(package)

    visit(root_package)
    return tuple(ordered)


__all__ = ["resolve"]
