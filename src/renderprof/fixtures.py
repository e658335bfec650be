# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load example prop sets for a component from a local fixture file."""

from __future__ import annotations

import importlib.util
import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import ModuleType
from typing import Any, Final

from .errors import FixtureLoadError
from .models import Fixture

INSTANCES_KEY: Final[str] = "instances"
FIXTURE_ATTR: Final[str] = "fixture"


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise FixtureLoadError(f"fixture {path} is not UTF-8 text: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise FixtureLoadError(f"fixture {path} is not valid JSON: {exc}") from exc


def _load_module(path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(f"_renderprof_fixture_{abs(hash(path))}", path)
    if spec is None or spec.loader is None:
        raise FixtureLoadError(f"cannot import fixture module {path}")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:  # fixture code is arbitrary user code
        raise FixtureLoadError(f"fixture module {path} failed to import: {exc}") from exc
    return module


def _instances_from_module(module: ModuleType) -> Any:
    if hasattr(module, INSTANCES_KEY):
        return getattr(module, INSTANCES_KEY)
    fixture = getattr(module, FIXTURE_ATTR, None)
    if isinstance(fixture, Mapping):
        return fixture.get(INSTANCES_KEY)
    return getattr(fixture, INSTANCES_KEY, None)


def _instances_from_document(document: Any) -> Any:
    if isinstance(document, Mapping):
        return document.get(INSTANCES_KEY)
    return document


def load_fixture(path: Path) -> Fixture:
    """Return the fixture stored at ``path``.

    ``.json`` files hold either an object with an ``instances`` array or a bare
    array. ``.py`` modules define ``instances`` directly or on a ``fixture``
    object or mapping.

    Args:
        path: Location of the fixture on the local filesystem.

    Returns:
        Fixture: Fixture with at least one instance.

    Raises:
        FixtureLoadError: If the file cannot be read, has an unsupported
            suffix, or defines no instances.
    """

    if not path.is_file():
        raise FixtureLoadError(f"fixture {path} does not exist")
    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            instances = _instances_from_document(_load_json(path))
        elif suffix == ".py":
            instances = _instances_from_module(_load_module(path))
        else:
            raise FixtureLoadError(f"unsupported fixture type {suffix or '<none>'} for {path}")
    except OSError as exc:
        raise FixtureLoadError(f"cannot read fixture {path}: {exc}") from exc

    if isinstance(instances, (str, bytes, Mapping)) or not isinstance(instances, Sequence):
        raise FixtureLoadError(f"fixture {path} does not define an instances sequence")
    if not instances:
        raise FixtureLoadError(f"fixture {path} has no instances")
    return Fixture(path=path, instances=tuple(instances))


__all__ = ["load_fixture"]
