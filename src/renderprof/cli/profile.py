# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command rendering components through the render service."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..logging import configure_debug_logging
from ..reporting import OutputFormat, emit_outcomes
from .options import (
    CONFIG_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    FORMAT_OPTION,
    HOST_OPTION,
    RENDER_HOST_OPTION,
    ROOT_OPTION,
    SEED_OPTION,
    SKIP_UNRESOLVED_OPTION,
    TIMEOUT_OPTION,
    ConnectionOptions,
)
from .services import collect_targets, load_profiler_config, run_profile
from .shared import EXIT_FAILURES, CLIError, build_cli_logger


def profile_command(
    component: Annotated[
        str | None,
        typer.Argument(help="Component path relative to the webapp root."),
    ] = None,
    fixture: Annotated[
        Path | None,
        typer.Argument(help="Fixture file (.json or .py) defining instances."),
    ] = None,
    seed: SEED_OPTION = None,
    root: ROOT_OPTION = Path("."),
    config_path: CONFIG_OPTION = None,
    host: HOST_OPTION = None,
    render_host: RENDER_HOST_OPTION = None,
    timeout: TIMEOUT_OPTION = None,
    skip_unresolved: SKIP_UNRESOLVED_OPTION = False,
    output_format: FORMAT_OPTION = OutputFormat.TEXT,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Render each component/fixture/seed and report the response size.

    Raises:
        typer.Exit: Always raised; status 1 when any pipeline failed.
    """

    configure_debug_logging(enabled=debug)
    logger = build_cli_logger(emoji=emoji, debug=debug)
    options = ConnectionOptions(
        root=root.resolve(),
        config_path=config_path,
        host=host,
        render_host=render_host,
        timeout=timeout,
        skip_unresolved=skip_unresolved,
    )
    try:
        config = load_profiler_config(options, logger=logger)
        targets = collect_targets(config, component=component, fixture=fixture, seeds=seed)
        outcomes = run_profile(config, targets, logger=logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    emit_outcomes(outcomes, output=output_format, use_emoji=emoji)
    raise typer.Exit(code=0 if all(outcome.ok for outcome in outcomes) else EXIT_FAILURES)


__all__ = ["profile_command"]
