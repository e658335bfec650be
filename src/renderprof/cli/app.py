# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from .profile import profile_command
from .resolve import resolve_command

app = typer.Typer(
    name="renderprof",
    help="Profile component renders against a render service.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def _root(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Profile component renders against a render service."""


app.command("profile")(profile_command)
app.command("resolve")(resolve_command)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
