# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Config loading with layered precedence."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from ..errors import ConfigError
from .models import ProfilerConfig
from .sources import ConfigSource, DefaultConfigSource, PyProjectConfigSource, TomlConfigSource, deep_merge

PROJECT_CONFIG_NAME: Final[str] = ".renderprof.toml"
PYPROJECT_NAME: Final[str] = "pyproject.toml"


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence.

    Later sources override earlier ones; CLI overrides passed to :meth:`load`
    win over every file.
    """

    def __init__(self, *, project_root: Path, sources: Sequence[ConfigSource]) -> None:
        """Initialise a loader that merges the supplied configuration sources.

        Args:
            project_root: Directory that anchors relative fixture paths.
            sources: Ordered collection of configuration sources.
        """

        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)
        self._project_root = project_root.resolve()

    @classmethod
    def for_root(cls, project_root: Path, *, config_path: Path | None = None) -> ConfigLoader:
        """Return a loader reading defaults, ``pyproject.toml`` and the project file.

        Args:
            project_root: Directory containing ``pyproject.toml`` and ``.renderprof.toml``.
            config_path: Explicit TOML file replacing ``.renderprof.toml``.

        Raises:
            ConfigError: If ``config_path`` is given but does not exist.
        """

        root = project_root.resolve()
        sources: list[ConfigSource] = [
            DefaultConfigSource(),
            PyProjectConfigSource(root / PYPROJECT_NAME),
        ]
        if config_path is not None:
            if not config_path.is_file():
                raise ConfigError(f"Configuration file {config_path} does not exist")
            sources.append(TomlConfigSource(config_path))
        else:
            sources.append(TomlConfigSource(root / PROJECT_CONFIG_NAME))
        return cls(project_root=root, sources=sources)

    def load(self, overrides: Mapping[str, Any] | None = None) -> ProfilerConfig:
        """Merge every source plus ``overrides`` into a validated config.

        Args:
            overrides: CLI-provided values; ``None`` entries are ignored.

        Returns:
            ProfilerConfig: Validated configuration with absolute fixture paths.

        Raises:
            ConfigError: If any source is malformed or validation fails.
        """

        merged: dict[str, Any] = {}
        for source in self._sources:
            fragment = source.load()
            if not isinstance(fragment, Mapping):
                raise ConfigError(f"{source.describe()} did not produce a table")
            merged = deep_merge(merged, fragment)
        if overrides:
            merged = deep_merge(merged, {key: value for key, value in overrides.items() if value is not None})
        try:
            config = ProfilerConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc
        for target in config.targets:
            if not target.fixture.is_absolute():
                target.fixture = (self._project_root / target.fixture).resolve()
        return config


def load_config(
    project_root: Path,
    *,
    config_path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ProfilerConfig:
    """Return the layered configuration for ``project_root``."""

    return ConfigLoader.for_root(project_root, config_path=config_path).load(overrides)


__all__ = ["ConfigLoader", "PROJECT_CONFIG_NAME", "load_config"]
