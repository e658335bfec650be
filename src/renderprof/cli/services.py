# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services shared by the profile and resolve commands."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..config import ConfigError, ProfilerConfig, load_config
from ..errors import RenderProfileError
from ..http import AsyncHttpClient, HttpClient
from ..manifest import build_graph, locate_manifest
from ..models import ProfileOutcome, ProfileTarget
from ..orchestrator import RenderProfiler, build_render_request
from ..resolver import resolve
from .options import ConnectionOptions
from .shared import EXIT_FAILURES, CLIError, CLILogger


def build_client(config: ProfilerConfig) -> HttpClient:
    """Return the HTTP client used for a command invocation."""

    return AsyncHttpClient(timeout=config.timeout)


def load_profiler_config(options: ConnectionOptions, *, logger: CLILogger) -> ProfilerConfig:
    """Return the layered configuration for ``options``.

    Raises:
        CLIError: If the configuration cannot be loaded or validated.
    """

    try:
        config = load_config(options.root, config_path=options.config_path, overrides=options.overrides())
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc
    logger.debug(f"host={config.host_origin} render={config.render_origin} timeout={config.timeout}")
    return config


def collect_targets(
    config: ProfilerConfig,
    *,
    component: str | None,
    fixture: Path | None,
    seeds: Sequence[int] | None,
) -> list[ProfileTarget]:
    """Return targets from the command line, or the configured ones.

    Raises:
        CLIError: If arguments are incomplete or nothing is configured.
    """

    if component is None:
        if fixture is not None or seeds:
            raise CLIError("--seed and FIXTURE require a COMPONENT argument")
        targets = config.expand_targets()
        if not targets:
            raise CLIError("nothing to profile: pass COMPONENT FIXTURE or configure targets")
        return targets
    if fixture is None:
        raise CLIError(f"a fixture file is required to profile {component}")
    component_path = component.removeprefix("./")
    return [ProfileTarget(component_path, fixture.resolve(), seed) for seed in (seeds or [1])]


async def _profile_async(config: ProfilerConfig, targets: Sequence[ProfileTarget]) -> list[ProfileOutcome]:
    client = build_client(config)
    try:
        profiler = RenderProfiler(config, client=client)
        graph = await profiler.prepare()
        return await profiler.profile_many(targets, graph)
    finally:
        await client.aclose()


def run_profile(config: ProfilerConfig, targets: Sequence[ProfileTarget], *, logger: CLILogger) -> list[ProfileOutcome]:
    """Fetch the manifest and profile every target concurrently.

    Raises:
        CLIError: If the shared manifest cannot be fetched or parsed.
    """

    logger.debug(f"targets={len(targets)} host={config.host_origin}")
    try:
        return asyncio.run(_profile_async(config, targets))
    except RenderProfileError as exc:
        raise CLIError(f"cannot load package manifest: {exc}", exit_code=EXIT_FAILURES) from exc


@dataclass(slots=True, frozen=True)
class Resolution:
    """Package ownership and load order computed for one component."""

    package: str
    order: tuple[str, ...]
    urls: tuple[str, ...]
    missing: tuple[str, ...] = ()


async def _resolve_async(config: ProfilerConfig, component: str) -> Resolution:
    client = build_client(config)
    try:
        profiler = RenderProfiler(config, client=client)
        manifest_text = await locate_manifest(config.host_origin, client=client)
        graph = build_graph(manifest_text, config.host_origin)
        package = await profiler.locate(component)
    finally:
        await client.aclose()
    order = resolve(package, graph.dependencies)
    request = build_render_request(component, package, graph, None, skip_unresolved=config.skip_unresolved)
    missing = tuple(name for name in order if name not in graph.urls)
    return Resolution(package=package, order=order, urls=request.urls, missing=missing)


def run_resolve(config: ProfilerConfig, component: str, *, logger: CLILogger) -> Resolution:
    """Return the package, dependency order, and URLs for ``component``.

    Raises:
        CLIError: If any resolution step fails.
    """

    logger.debug(f"component={component} host={config.host_origin}")
    try:
        return asyncio.run(_resolve_async(config, component.removeprefix("./")))
    except RenderProfileError as exc:
        raise CLIError(f"{component}: {exc}", exit_code=EXIT_FAILURES) from exc


__all__ = ["Resolution", "build_client", "collect_targets", "load_profiler_config", "run_profile", "run_resolve"]
