# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the render profiler."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..http import DEFAULT_TIMEOUT
from ..locator import DEFAULT_PRODUCTION_HOSTS, PATH_TO_PACKAGES_PATH
from ..models import ProfileTarget

DEFAULT_HOST_ORIGIN: Final[str] = "http://localhost:8080"
DEFAULT_RENDER_ORIGIN: Final[str] = "http://localhost:8060"


def _normalise_origin(value: str) -> str:
    origin = value.strip().rstrip("/")
    if "://" not in origin:
        raise ValueError(f"origin {value!r} must include a scheme such as http://")
    return origin


class ProfileTargetConfig(BaseModel):
    """A component to profile together with its fixture and seeds."""

    model_config = ConfigDict(validate_assignment=True)

    component: str
    fixture: Path
    seeds: list[int] = Field(default_factory=lambda: [1])

    @field_validator("component")
    @classmethod
    def _strip_component(cls, value: str) -> str:
        component = value.strip().removeprefix("./")
        if not component:
            raise ValueError("component path must not be empty")
        return component

    @field_validator("seeds")
    @classmethod
    def _require_seeds(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("at least one seed is required")
        return value

    def expand(self) -> list[ProfileTarget]:
        """Return one :class:`ProfileTarget` per configured seed."""

        return [ProfileTarget(self.component, self.fixture, seed) for seed in self.seeds]


class ProfilerConfig(BaseModel):
    """Primary configuration container used by the profiler."""

    model_config = ConfigDict(validate_assignment=True)

    host_origin: str = DEFAULT_HOST_ORIGIN
    render_origin: str = DEFAULT_RENDER_ORIGIN
    timeout: float | None = Field(default=DEFAULT_TIMEOUT, gt=0)
    pipeline_timeout: float | None = Field(default=None, gt=0)
    production_hosts: list[str] = Field(default_factory=lambda: list(DEFAULT_PRODUCTION_HOSTS))
    path_to_packages: str = PATH_TO_PACKAGES_PATH
    skip_unresolved: bool = False
    targets: list[ProfileTargetConfig] = Field(default_factory=list)

    @field_validator("host_origin", "render_origin")
    @classmethod
    def _check_origin(cls, value: str) -> str:
        return _normalise_origin(value)

    @field_validator("path_to_packages")
    @classmethod
    def _check_mapping_path(cls, value: str) -> str:
        return value if value.startswith("/") else f"/{value}"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible snapshot of the configuration."""

        return self.model_dump(mode="json")

    def expand_targets(self) -> list[ProfileTarget]:
        """Return every configured target expanded per seed."""

        return [target for entry in self.targets for target in entry.expand()]


__all__ = [
    "DEFAULT_HOST_ORIGIN",
    "DEFAULT_RENDER_ORIGIN",
    "ProfileTargetConfig",
    "ProfilerConfig",
]
