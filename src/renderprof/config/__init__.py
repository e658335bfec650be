# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and layered loading for the render profiler."""

from __future__ import annotations

from ..errors import ConfigError
from .loader import ConfigLoader, load_config
from .models import ProfilerConfig, ProfileTargetConfig

__all__ = ["ConfigError", "ConfigLoader", "ProfileTargetConfig", "ProfilerConfig", "load_config"]
