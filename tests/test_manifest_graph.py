# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for extracting the package graph from manifest text."""

from __future__ import annotations

import pytest

from renderprof.errors import ManifestParseError
from renderprof.manifest import build_graph, extract_package_entries
from tests.helpers.samples import HOST, PACKAGES, manifest_text, url_of


def test_build_graph_maps_dependencies_and_urls(manifest: str) -> None:
    graph = build_graph(manifest, HOST)

    assert graph.dependencies["content-library.js"] == ("react.js", "shared.js")
    assert graph.dependencies["shared.js"] == ()
    assert graph.urls["react.js"] == url_of("react.js")
    assert list(graph.urls) == [entry["name"] for entry in PACKAGES]
    assert "shared.css" not in graph.urls


def test_build_graph_returns_read_only_maps(manifest: str) -> None:
    graph = build_graph(manifest, HOST)

    with pytest.raises(TypeError):
        graph.urls["new.js"] = "x"  # type: ignore[index]


def test_absent_dependencies_become_empty() -> None:
    graph = build_graph(manifest_text([{"name": "solo.js", "url": "/solo.js"}]), HOST)

    assert graph.dependencies["solo.js"] == ()
    assert graph.urls["solo.js"] == HOST + "/solo.js"


def test_null_dependencies_become_empty() -> None:
    graph = build_graph(manifest_text([{"name": "solo.js", "url": "/solo.js", "dependencies": None}]), HOST)

    assert graph.dependencies["solo.js"] == ()


def test_duplicate_names_keep_last_entry() -> None:
    text = manifest_text(
        [
            {"name": "dup.js", "url": "/first.js", "dependencies": ["a.js"]},
            {"name": "dup.js", "url": "/second.js", "dependencies": []},
        ]
    )
    graph = build_graph(text, HOST)

    assert graph.urls["dup.js"] == HOST + "/second.js"
    assert graph.dependencies["dup.js"] == ()
    assert list(graph.urls) == ["dup.js"]


def test_multiline_manifest_is_supported() -> None:
    text = (
        "var manifest = {\n"
        '  "javascript": [\n'
        '    {"name": "a.js", "url": "/a.js", "dependencies": ["b.js"]},\n'
        '    {"name": "b.js", "url": "/b.js", "dependencies": []}\n'
        "  ],\n"
        '  "stylesheets": []\n'
        "};\n"
    )

    entries = extract_package_entries(text)

    assert [entry["name"] for entry in entries] == ["a.js", "b.js"]


@pytest.mark.parametrize(
    "text",
    [
        "no manifest here",
        '{"javascript": [{"name": "a.js"}]}',
        '{"javascript": [not json], "stylesheets": []}',
        '{"javascript": [1, 2], "stylesheets": []}',
    ],
)
def test_unparseable_manifest_raises(text: str) -> None:
    with pytest.raises(ManifestParseError):
        build_graph(text, HOST)


def test_entry_without_url_raises() -> None:
    with pytest.raises(ManifestParseError, match="lacks a string name or url"):
        build_graph(manifest_text([{"name": "a.js", "dependencies": []}]), HOST)


def test_string_dependencies_raise() -> None:
    with pytest.raises(ManifestParseError, match="malformed dependencies"):
        build_graph(manifest_text([{"name": "a.js", "url": "/a.js", "dependencies": "b.js"}]), HOST)
