# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Settings controlling defaults applied to formula specifications."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import FormulaDefinitionError

DEFAULT_BOTTLE_ROOT_URL: Final[str] = "https://downloads.sf.net/project/machomebrew/Bottles"
DEFAULT_BOTTLE_PREFIX: Final[str] = "/usr/local"
DEFAULT_BOTTLE_CELLAR: Final[str] = "/usr/local/Cellar"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "formula-spec"


class FormulaSpecSettings(BaseModel):
    """Defaults applied to newly created bottles."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    bottle_root_url: str = Field(default=DEFAULT_BOTTLE_ROOT_URL, min_length=1)
    bottle_prefix: str = Field(default=DEFAULT_BOTTLE_PREFIX, min_length=1)
    bottle_cellar: str = Field(default=DEFAULT_BOTTLE_CELLAR, min_length=1)
    bottle_revision: int = Field(default=0, ge=0)


def settings_from_mapping(data: Mapping[str, Any], *, context: str) -> FormulaSpecSettings:
    """Validate ``data`` into settings.

    Args:
        data: Raw settings table; keys may use dashes or underscores.
        context: Human-readable context used in error messages.

    Returns:
        FormulaSpecSettings: Validated settings.

    Raises:
        FormulaDefinitionError: If the table contains unknown keys or invalid values.
    """

    normalised = {str(key).replace("-", "_"): value for key, value in data.items()}
    try:
        return FormulaSpecSettings.model_validate(normalised)
    except ValidationError as exc:
        raise FormulaDefinitionError(f"{context}: invalid settings: {exc}") from exc


def load_settings(path: Path | None) -> FormulaSpecSettings:
    """Load settings from ``path``.

    ``pyproject.toml`` files contribute their ``[tool.formula-spec]`` table;
    any other TOML file is read as the settings table itself. Missing files
    yield the defaults.

    Raises:
        FormulaDefinitionError: If the file is not valid TOML or holds invalid values.
    """

    if path is None or not path.exists():
        return FormulaSpecSettings()
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise FormulaDefinitionError(f"{path}: failed to parse TOML") from exc
    if path.name == "pyproject.toml":
        section = document.get(PYPROJECT_TOOL_KEY, {}).get(PYPROJECT_SECTION_KEY, {})
    else:
        section = document
    if not isinstance(section, Mapping):
        raise FormulaDefinitionError(f"{path}: settings must be a table")
    return settings_from_mapping(section, context=str(path))


__all__ = (
    "DEFAULT_BOTTLE_CELLAR",
    "DEFAULT_BOTTLE_PREFIX",
    "DEFAULT_BOTTLE_ROOT_URL",
    "FormulaSpecSettings",
    "load_settings",
    "settings_from_mapping",
)
