# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared option declarations and option containers for CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

from ..reporting import OutputFormat

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root holding pyproject.toml/.renderprof.toml."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Explicit TOML configuration file."),
]
HOST_OPTION = Annotated[
    str | None,
    typer.Option("--host", help="Protocol-host-port of the webapp server."),
]
RENDER_HOST_OPTION = Annotated[
    str | None,
    typer.Option("--render-host", help="Protocol-host-port of the render service."),
]
SEED_OPTION = Annotated[
    list[int] | None,
    typer.Option("--seed", "-s", help="Fixture instance seed (repeatable)."),
]
TIMEOUT_OPTION = Annotated[
    float | None,
    typer.Option("--timeout", help="Per-request timeout in seconds."),
]
SKIP_UNRESOLVED_OPTION = Annotated[
    bool,
    typer.Option("--skip-unresolved", help="Drop packages missing from the manifest instead of failing."),
]
FORMAT_OPTION = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", case_sensitive=False, help="Report format."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Emit internal diagnostics on stderr."),
]


@dataclass(slots=True)
class ConnectionOptions:
    """Capture configuration overrides shared by every command."""

    root: Path
    config_path: Path | None
    host: str | None
    render_host: str | None
    timeout: float | None = None
    skip_unresolved: bool = False

    def overrides(self) -> dict[str, Any]:
        """Return configuration overrides supplied on the command line."""

        return {
            "host_origin": self.host,
            "render_origin": self.render_host,
            "timeout": self.timeout,
            "skip_unresolved": True if self.skip_unresolved else None,
        }


__all__ = [
    "CONFIG_OPTION",
    "ConnectionOptions",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "FORMAT_OPTION",
    "HOST_OPTION",
    "RENDER_HOST_OPTION",
    "ROOT_OPTION",
    "SEED_OPTION",
    "SKIP_UNRESOLVED_OPTION",
    "TIMEOUT_OPTION",
]
