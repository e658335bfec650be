# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for fixture loading and instance selection."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from renderprof.errors import FixtureLoadError
from renderprof.fixtures import load_fixture


def test_seed_selects_instance_modulo_count(fixture_file: Path) -> None:
    fixture = load_fixture(fixture_file)

    assert fixture.select(2) == {"title": "first"}
    assert fixture.select(1) == {"title": "second"}
    assert fixture.select(0) == fixture.select(4)


def test_bare_json_array(tmp_path: Path) -> None:
    path = tmp_path / "fixture.json"
    path.write_text(json.dumps([{"a": 1}]), encoding="utf-8")

    assert load_fixture(path).instances == ({"a": 1},)


def test_python_module_instances(tmp_path: Path) -> None:
    path = tmp_path / "button_fixture.py"
    path.write_text('instances = [{"label": "Go"}, {"label": "Stop"}, {"label": "Wait"}]\n', encoding="utf-8")

    fixture = load_fixture(path)

    assert len(fixture.instances) == 3
    assert fixture.select(5) == {"label": "Wait"}


def test_python_module_fixture_mapping(tmp_path: Path) -> None:
    path = tmp_path / "card_fixture.py"
    path.write_text('fixture = {"component": "card", "instances": [{"title": "x"}]}\n', encoding="utf-8")

    assert load_fixture(path).select(7) == {"title": "x"}


def test_empty_instances_raise(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"instances": []}), encoding="utf-8")

    with pytest.raises(FixtureLoadError, match="no instances"):
        load_fixture(path)


@pytest.mark.parametrize(
    ("name", "content", "message"),
    [
        ("missing.json", None, "does not exist"),
        ("broken.json", "{not json", "not valid JSON"),
        ("noinstances.json", '{"props": {}}', "instances sequence"),
        ("fixture.js", "module.exports = {instances: []};", "unsupported fixture type"),
        ("broken_fixture.py", "raise RuntimeError('boom')\n", "failed to import"),
        ("strings.json", '{"instances": "abc"}', "instances sequence"),
    ],
)
def test_unloadable_fixtures_raise(tmp_path: Path, name: str, content: str | None, message: str) -> None:
    path = tmp_path / name
    if content is not None:
        path.write_text(content, encoding="utf-8")

    with pytest.raises(FixtureLoadError, match=message):
        load_fixture(path)


def test_non_utf8_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "latin.json"
    path.write_bytes(b'{"instances": ["\xff\xfe"]}')

    with pytest.raises(FixtureLoadError, match="not UTF-8"):
        load_fixture(path)
