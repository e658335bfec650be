# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command printing a component's package and load-ordered URLs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from ..logging import configure_debug_logging
from ..reporting import OutputFormat
from .options import (
    CONFIG_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    FORMAT_OPTION,
    HOST_OPTION,
    ROOT_OPTION,
    SKIP_UNRESOLVED_OPTION,
    TIMEOUT_OPTION,
    ConnectionOptions,
)
from .services import load_profiler_config, run_resolve
from .shared import CLIError, build_cli_logger


def resolve_command(
    component: Annotated[str, typer.Argument(help="Component path relative to the webapp root.")],
    root: ROOT_OPTION = Path("."),
    config_path: CONFIG_OPTION = None,
    host: HOST_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
    skip_unresolved: SKIP_UNRESOLVED_OPTION = False,
    output_format: FORMAT_OPTION = OutputFormat.TEXT,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Show which package owns COMPONENT and the URLs a render would load."""

    configure_debug_logging(enabled=debug)
    logger = build_cli_logger(emoji=emoji, debug=debug)
    options = ConnectionOptions(
        root=root.resolve(),
        config_path=config_path,
        host=host,
        render_host=None,
        timeout=timeout,
        skip_unresolved=skip_unresolved,
    )
    try:
        config = load_profiler_config(options, logger=logger)
        resolution = run_resolve(config, component, logger=logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    if output_format is OutputFormat.JSON:
        document = {
            "component": component,
            "package": resolution.package,
            "order": list(resolution.order),
            "urls": list(resolution.urls),
            "missing": list(resolution.missing),
        }
        logger.echo(json.dumps(document))
        return
    logger.ok(f"{component}: {resolution.package}")
    if resolution.missing:
        logger.warn(f"skipped packages without a manifest URL: {', '.join(resolution.missing)}")
    for url in resolution.urls:
        logger.echo(url)


__all__ = ["resolve_command"]
