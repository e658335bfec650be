# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for outcome reporting."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from renderprof.models import ProfileOutcome, ProfileTarget
from renderprof.reporting import OutputFormat, emit_outcomes, format_outcome

_TARGET = ProfileTarget("javascript/a-package/a.jsx", Path("/fixtures/a.json"), 4)


def _success() -> ProfileOutcome:
    return ProfileOutcome(
        target=_TARGET,
        package="a.js",
        urls=("http://h/b.js", "http://h/a.js"),
        size=1532,
        elapsed=0.0125,
    )


def _failure() -> ProfileOutcome:
    return ProfileOutcome(target=_TARGET, package="a.js", error="POST http://r/render failed with HTTP 500")


def test_format_success_line() -> None:
    assert format_outcome(_success()) == "javascript/a-package/a.jsx: 1532 (seed=4 elapsed=12.5ms package=a.js)"


def test_format_failure_line() -> None:
    assert format_outcome(_failure()) == "javascript/a-package/a.jsx: POST http://r/render failed with HTTP 500"


def test_text_report_summarises(capsys: pytest.CaptureFixture[str]) -> None:
    emit_outcomes([_success(), _failure()], use_emoji=False, use_color=False)

    out = capsys.readouterr().out
    assert "--- Render profile ---" in out
    assert "javascript/a-package/a.jsx: 1532" in out
    assert "HTTP 500" in out
    assert "1 succeeded, 1 failed" in out
    assert "✅" not in out


def test_json_report_emits_one_line_per_outcome(capsys: pytest.CaptureFixture[str]) -> None:
    emit_outcomes([_success(), _failure()], output=OutputFormat.JSON)

    lines = capsys.readouterr().out.strip().splitlines()
    first, second = (json.loads(line) for line in lines)
    assert first == {
        "component": "javascript/a-package/a.jsx",
        "fixture": str(Path("/fixtures/a.json")),
        "seed": 4,
        "package": "a.js",
        "urls": ["http://h/b.js", "http://h/a.js"],
        "size": 1532,
        "elapsed_ms": 12.5,
        "error": None,
    }
    assert second["size"] is None
    assert second["error"].endswith("HTTP 500")
