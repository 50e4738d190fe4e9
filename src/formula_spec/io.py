# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading formula definition documents."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Final, cast

from .errors import FormulaDefinitionError
from .types import JSONValue

SUPPORTED_SUFFIXES: Final[tuple[str, ...]] = (".json", ".toml")


def load_document(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON or TOML formula definition from disk.

    Args:
        path: Filesystem path to the document.

    Returns:
        Mapping[str, JSONValue]: Parsed top-level object.

    Raises:
        FileNotFoundError: If the document does not exist.
        FormulaDefinitionError: If the document cannot be parsed or is not an object.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        with path.open("r", encoding="utf-8") as stream:
            try:
                payload = cast(JSONValue, json.load(stream))
            except json.JSONDecodeError as exc:
                raise FormulaDefinitionError(f"{path}: failed to parse JSON: {exc.msg}") from exc
    elif suffix == ".toml":
        with path.open("rb") as stream:
            try:
                payload = cast(JSONValue, tomllib.load(stream))
            except tomllib.TOMLDecodeError as exc:
                raise FormulaDefinitionError(f"{path}: failed to parse TOML: {exc}") from exc
    else:
        supported = ", ".join(SUPPORTED_SUFFIXES)
        raise FormulaDefinitionError(f"{path}: unsupported document type (expected {supported})")
    if not isinstance(payload, Mapping):
        raise FormulaDefinitionError(f"{path}: expected a top-level object")
    return payload


__all__ = ["SUPPORTED_SUFFIXES", "load_document"]
