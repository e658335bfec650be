# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from renderprof.console import get_console_manager
from tests.helpers.samples import HOMEPAGE, HOST, MANIFEST_URL, PACKAGES, manifest_text


@pytest.fixture(autouse=True)
def _fresh_consoles() -> None:
    """Drop cached Rich consoles between tests."""

    get_console_manager().clear()


@pytest.fixture
def manifest() -> str:
    return manifest_text(PACKAGES)


@pytest.fixture
def host_routes(manifest: str) -> dict[str, Any]:
    """Routes for a development host whose mapping endpoint is unavailable."""

    return {HOST + "/": HOMEPAGE, MANIFEST_URL: manifest}


@pytest.fixture
def fixture_file(tmp_path: Path) -> Path:
    path = tmp_path / "concept-thumbnail.jsx.fixture.json"
    path.write_text(
        json.dumps({"instances": [{"title": "first"}, {"title": "second"}]}),
        encoding="utf-8",
    )
    return path
