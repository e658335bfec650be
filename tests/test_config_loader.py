# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from renderprof.config import ConfigError, ConfigLoader, load_config
from renderprof.config.sources import TomlConfigSource, deep_merge


def test_load_config_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path)

    assert cfg.host_origin == "http://localhost:8080"
    assert cfg.render_origin == "http://localhost:8060"
    assert cfg.timeout == 30.0
    assert cfg.pipeline_timeout is None
    assert cfg.production_hosts == ["khanacademy.org", "appspot.com"]
    assert cfg.path_to_packages == "/_kake/genfiles/js_path_to_pkgs/en/path_to_packages_prod.json"
    assert cfg.targets == []


def test_pyproject_section_is_applied(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
[project]
name = "webapp"

[tool.renderprof]
host_origin = "http://dev.local:9000/"
skip_unresolved = true
""".strip(),
        encoding="utf-8",
    )

    cfg = load_config(tmp_path)

    assert cfg.host_origin == "http://dev.local:9000"
    assert cfg.skip_unresolved is True


def test_project_file_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.renderprof]\nhost_origin = "http://from-pyproject:1"\ntimeout = 5\n',
        encoding="utf-8",
    )
    (tmp_path / ".renderprof.toml").write_text('host_origin = "http://from-project:2"\n', encoding="utf-8")

    cfg = load_config(tmp_path)

    assert cfg.host_origin == "http://from-project:2"
    assert cfg.timeout == 5


def test_cli_overrides_win_and_none_is_ignored(tmp_path: Path) -> None:
    (tmp_path / ".renderprof.toml").write_text('render_origin = "http://render:1"\ntimeout = 5\n', encoding="utf-8")

    cfg = load_config(tmp_path, overrides={"render_origin": "http://cli:3", "timeout": None})

    assert cfg.render_origin == "http://cli:3"
    assert cfg.timeout == 5


def test_targets_resolve_fixtures_against_root(tmp_path: Path) -> None:
    (tmp_path / ".renderprof.toml").write_text(
        """
[[targets]]
component = "./javascript/a-package/a.jsx"
fixture = "fixtures/a.json"
seeds = [1, 2]
""".strip(),
        encoding="utf-8",
    )

    cfg = load_config(tmp_path)
    targets = cfg.expand_targets()

    assert [target.seed for target in targets] == [1, 2]
    assert {target.component_path for target in targets} == {"javascript/a-package/a.jsx"}
    assert targets[0].fixture_path == (tmp_path / "fixtures" / "a.json").resolve()


def test_explicit_config_path_replaces_project_file(tmp_path: Path) -> None:
    (tmp_path / ".renderprof.toml").write_text('host_origin = "http://ignored:1"\n', encoding="utf-8")
    custom = tmp_path / "ci.toml"
    custom.write_text('host_origin = "http://ci:1"\n', encoding="utf-8")

    cfg = load_config(tmp_path, config_path=custom)

    assert cfg.host_origin == "http://ci:1"


def test_missing_explicit_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        ConfigLoader.for_root(tmp_path, config_path=tmp_path / "nope.toml")


def test_environment_variables_expand(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RENDER_PORT", "8061")
    (tmp_path / ".renderprof.toml").write_text('render_origin = "http://localhost:${RENDER_PORT}"\n', encoding="utf-8")

    cfg = load_config(tmp_path)

    assert cfg.render_origin == "http://localhost:8061"


def test_includes_merge_before_document(tmp_path: Path) -> None:
    (tmp_path / "base.toml").write_text('host_origin = "http://base:1"\ntimeout = 9\n', encoding="utf-8")
    (tmp_path / ".renderprof.toml").write_text('include = "base.toml"\nhost_origin = "http://top:1"\n', encoding="utf-8")

    cfg = load_config(tmp_path)

    assert cfg.host_origin == "http://top:1"
    assert cfg.timeout == 9


def test_circular_include_raises(tmp_path: Path) -> None:
    (tmp_path / "a.toml").write_text('include = "b.toml"\n', encoding="utf-8")
    (tmp_path / "b.toml").write_text('include = "a.toml"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="Circular include"):
        TomlConfigSource(tmp_path / "a.toml").load()


@pytest.mark.parametrize(
    "content",
    [
        'host_origin = "localhost:8080"\n',
        "timeout = -1\n",
        "[[targets]]\ncomponent = \"  \"\nfixture = \"f.json\"\n",
        "not = valid = toml\n",
    ],
)
def test_invalid_configuration_raises(tmp_path: Path, content: str) -> None:
    (tmp_path / ".renderprof.toml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_deep_merge_is_recursive() -> None:
    merged = deep_merge({"a": {"b": 1, "c": 2}, "d": [1]}, {"a": {"c": 3}, "d": [2]})

    assert merged == {"a": {"b": 1, "c": 3}, "d": [2]}
