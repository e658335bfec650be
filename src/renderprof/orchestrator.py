# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Per-component profiling pipelines and their concurrent execution.

A pipeline loads fixture props, locates the component's package, resolves the
package's transitive URLs from a shared manifest graph, and submits the render
request. Every failure is captured in the returned :class:`ProfileOutcome`, so
one component never aborts another.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .config.models import ProfilerConfig
from .errors import RenderProfileError, UnresolvedUrlError
from .fixtures import load_fixture
from .http import AsyncHttpClient, HttpClient
from .locator import locate_package
from .manifest import build_graph, locate_manifest
from .models import DependencyGraph, ProfileOutcome, ProfileTarget, RenderRequest
from .resolver import resolve

LOGGER = logging.getLogger(__name__)

RENDER_ENDPOINT = "/render"


def build_render_request(
    component_path: str,
    package: str,
    graph: DependencyGraph,
    props: Any,
    *,
    skip_unresolved: bool = False,
) -> RenderRequest:
    """Assemble the render request for ``component_path`` living in ``package``.

    Args:
        component_path: Component path relative to the host's root.
        package: Package that owns the component.
        graph: Dependency and URL lookups for the current manifest.
        props: Fixture instance passed through to the render service.
        skip_unresolved: Drop packages without a URL instead of failing.

    Returns:
        RenderRequest: Request whose URLs list dependencies before dependents.

    Raises:
        UnresolvedUrlError: If a resolved package has no URL and
            ``skip_unresolved`` is false.
    """

    order = resolve(package, graph.dependencies)
    missing = [name for name in order if name not in graph.urls]
    if missing and not skip_unresolved:
        raise UnresolvedUrlError(missing)
    if missing:
        LOGGER.warning("skipping packages without a manifest URL: %s", ", ".join(missing))
    urls = tuple(graph.urls[name] for name in order if name in graph.urls)
    return RenderRequest(urls=urls, path=f"./{component_path}", props=props)


@dataclass(slots=True)
class _PipelineProgress:
    """Package and URLs a pipeline has resolved so far."""

    package: str | None = None
    urls: tuple[str, ...] = ()


class RenderProfiler:
    """Run profiling pipelines against one host and one render service."""

    def __init__(self, config: ProfilerConfig, *, client: HttpClient) -> None:
        """Bind the profiler to ``config`` and the HTTP ``client``.

        Args:
            config: Resolved profiler configuration.
            client: HTTP client shared by every pipeline.
        """

        self._config = config
        self._client = client

    async def prepare(self) -> DependencyGraph:
        """Fetch the manifest once and return its dependency graph.

        Raises:
            NetworkError: If the homepage or manifest cannot be fetched.
            ManifestNotFoundError: If the homepage references no manifest.
            ManifestParseError: If the manifest's package list is malformed.
        """

        manifest_text = await locate_manifest(self._config.host_origin, client=self._client)
        return build_graph(manifest_text, self._config.host_origin)

    async def locate(self, component_path: str) -> str:
        """Return the package that owns ``component_path``."""

        return await locate_package(
            component_path,
            self._config.host_origin,
            client=self._client,
            production_hosts=self._config.production_hosts,
            path_to_packages=self._config.path_to_packages,
        )

    async def _run_pipeline(
        self,
        target: ProfileTarget,
        graph: DependencyGraph,
        progress: _PipelineProgress,
    ) -> ProfileOutcome:
        props = load_fixture(target.fixture_path).select(target.seed)
        progress.package = await self.locate(target.component_path)
        request = build_render_request(
            target.component_path,
            progress.package,
            graph,
            props,
            skip_unresolved=self._config.skip_unresolved,
        )
        progress.urls = request.urls
        started = time.perf_counter()
        response = await self._client.post_json(
            self._config.render_origin + RENDER_ENDPOINT,
            request.to_payload(),
        )
        return ProfileOutcome(
            target=target,
            package=progress.package,
            urls=progress.urls,
            size=len(response.body),
            elapsed=time.perf_counter() - started,
        )

    async def profile(self, target: ProfileTarget, graph: DependencyGraph) -> ProfileOutcome:
        """Profile one target; failures are returned, never raised.

        Only :class:`BaseException` subclasses outside :class:`Exception`,
        such as cancellation or ``KeyboardInterrupt``, propagate.

        Args:
            target: Component, fixture and seed to render.
            graph: Manifest graph shared across pipelines.

        Returns:
            ProfileOutcome: Response size and timing, or the failure description
            together with whatever package and URLs were resolved before it.
        """

        progress = _PipelineProgress()
        timeout = self._config.pipeline_timeout
        try:
            if timeout is None:
                return await self._run_pipeline(target, graph, progress)
            return await asyncio.wait_for(self._run_pipeline(target, graph, progress), timeout)
        except TimeoutError as exc:
            error = f"timed out after {timeout:g}s" if timeout is not None else f"TimeoutError: {exc}"
        except RenderProfileError as exc:
            error = str(exc)
        except Exception as exc:
            LOGGER.debug("pipeline for %s crashed", target.component_path, exc_info=exc)
            error = f"{type(exc).__name__}: {exc}"
        LOGGER.debug("pipeline for %s failed: %s", target.component_path, error)
        return ProfileOutcome(target=target, package=progress.package, urls=progress.urls, error=error)

    async def profile_many(
        self,
        targets: Sequence[ProfileTarget],
        graph: DependencyGraph | None = None,
    ) -> list[ProfileOutcome]:
        """Profile ``targets`` concurrently and return outcomes in target order.

        Args:
            targets: Pipelines to run.
            graph: Pre-built manifest graph; fetched via :meth:`prepare` when omitted.

        Returns:
            list[ProfileOutcome]: One outcome per target.
        """

        if graph is None:
            graph = await self.prepare()
        return list(await asyncio.gather(*(self.profile(target, graph) for target in targets)))


async def profile(
    component_path: str,
    fixture_path: Path,
    instance_seed: int,
    host_origin: str,
    render_origin: str,
    manifest_text: str,
    *,
    client: HttpClient | None = None,
) -> ProfileOutcome:
    """Profile a single component against an already-fetched manifest.

    Args:
        component_path: Component path relative to the host's root.
        fixture_path: Local fixture supplying the props.
        instance_seed: Seed selecting the fixture instance.
        host_origin: Scheme, host and port of the host application.
        render_origin: Scheme, host and port of the render service.
        manifest_text: Raw manifest body from :func:`locate_manifest`.
        client: Optional HTTP client; an httpx-backed one is created otherwise.

    Returns:
        ProfileOutcome: Result of the pipeline.
    """

    config = ProfilerConfig(host_origin=host_origin, render_origin=render_origin)
    target = ProfileTarget(component_path, fixture_path, instance_seed)
    try:
        graph = build_graph(manifest_text, config.host_origin)
    except RenderProfileError as exc:
        return ProfileOutcome(target=target, error=str(exc))
    if client is not None:
        return await RenderProfiler(config, client=client).profile(target, graph)
    async with AsyncHttpClient(timeout=config.timeout) as owned:
        return await RenderProfiler(config, client=owned).profile(target, graph)


__all__ = ["RENDER_ENDPOINT", "RenderProfiler", "build_render_request", "profile"]
