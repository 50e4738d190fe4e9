# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace

import pytest

from formula_spec import Bottle, HeadSoftwareSpec, SoftwareSpec


@pytest.fixture
def spec() -> SoftwareSpec:
    """Return an empty software spec."""
    return SoftwareSpec()


@pytest.fixture
def head_spec() -> HeadSoftwareSpec:
    """Return an empty head spec."""
    return HeadSoftwareSpec()


@pytest.fixture
def bottle() -> Bottle:
    """Return a bottle seeded with default settings."""
    return Bottle()


@pytest.fixture
def owner() -> SimpleNamespace:
    """Return a minimal owner exposing only a name."""
    return SimpleNamespace(name="some_name")


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    """Return a helper writing ``payload`` as JSON under ``tmp_path``."""

    def _write(filename: str, payload: object) -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    return _write
