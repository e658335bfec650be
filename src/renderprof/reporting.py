# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render profiling outcomes for humans and machines."""

from __future__ import annotations

import json
from collections.abc import Sequence
from enum import StrEnum

import typer

from .logging import fail, ok, section
from .models import ProfileOutcome


class OutputFormat(StrEnum):
    """Supported outcome report formats."""

    TEXT = "text"
    JSON = "json"


def format_outcome(outcome: ProfileOutcome) -> str:
    """Return the one-line ``<component>: <size or error>`` summary."""

    component = outcome.target.component_path
    if not outcome.ok:
        return f"{component}: {outcome.error}"
    details = [f"seed={outcome.target.seed}"]
    if outcome.elapsed is not None:
        details.append(f"elapsed={outcome.elapsed * 1000:.1f}ms")
    if outcome.package:
        details.append(f"package={outcome.package}")
    return f"{component}: {outcome.size} ({' '.join(details)})"


def emit_outcomes(
    outcomes: Sequence[ProfileOutcome],
    *,
    output: OutputFormat = OutputFormat.TEXT,
    use_emoji: bool = True,
    use_color: bool | None = None,
) -> None:
    """Print ``outcomes`` in the requested ``output`` format.

    Args:
        outcomes: Results returned by the profiler.
        output: ``text`` for styled summary lines, ``json`` for JSON lines.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    if output is OutputFormat.JSON:
        for outcome in outcomes:
            typer.echo(json.dumps(outcome.to_dict(), sort_keys=True))
        return

    section("Render profile", use_color=True if use_color is None else use_color)
    for outcome in outcomes:
        line = format_outcome(outcome)
        if outcome.ok:
            ok(line, use_emoji=use_emoji, use_color=use_color)
        else:
            fail(line, use_emoji=use_emoji, use_color=use_color)
    failed = sum(1 for outcome in outcomes if not outcome.ok)
    typer.echo(f"{len(outcomes) - failed} succeeded, {failed} failed")


__all__ = ["OutputFormat", "emit_outcomes", "format_outcome"]
