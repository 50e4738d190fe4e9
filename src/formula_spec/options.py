# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Build option models declared by formula specifications."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from .errors import OptionValidationError
from .types import OPTION_FLAG_PREFIX

WITH_PREFIX: Final[str] = "with-"
WITHOUT_PREFIX: Final[str] = "without-"


def normalize_option_name(value: str | Enum) -> str:
    """Return the canonical string form of an option name.

    Enum members contribute their string value, which lets callers declare
    options from symbolic constants as well as from plain strings.

    Args:
        value: Option name supplied by the formula author.

    Returns:
        str: Normalised option name.

    Raises:
        OptionValidationError: If the name is empty or starts with ``--``.
    """

    if isinstance(value, Enum):
        raw = value.value if isinstance(value.value, str) else value.name
    else:
        raw = str(value)
    if not raw:
        raise OptionValidationError("option name is required")
    if raw.startswith(OPTION_FLAG_PREFIX):
        raise OptionValidationError(f"option {raw!r} should not start with dashes")
    return raw


@dataclass(frozen=True, slots=True)
class Option:
    """Named build option with a human-readable description."""

    name: str
    description: str = field(default="", compare=False)

    @property
    def flag(self) -> str:
        """Return the command-line flag that enables the option."""

        return f"{OPTION_FLAG_PREFIX}{self.name}"

    def __str__(self) -> str:
        return self.name


@dataclass(slots=True)
class _Entry:
    option: Option
    explicit: bool


class BuildOptions:
    """Ordered collection of uniquely named build options.

    Each entry remembers whether it was declared explicitly by the formula
    author or derived from a dependency, so that callers can give explicit
    declarations precedence.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def add(self, option: Option, *, explicit: bool = False) -> bool:
        """Insert ``option`` unless an option with the same name exists.

        Args:
            option: Option to insert.
            explicit: Whether the option was declared by the formula author.

        Returns:
            bool: ``True`` when the option was inserted.
        """

        if option.name in self._entries:
            return False
        self._entries[option.name] = _Entry(option=option, explicit=explicit)
        return True

    def replace(self, option: Option, *, explicit: bool = True) -> None:
        """Store ``option`` under its name, keeping the original position."""

        self._entries[option.name] = _Entry(option=option, explicit=explicit)

    def has_option(self, name: str) -> bool:
        """Return ``True`` when an option called ``name`` exists."""

        return name in self._entries

    def is_explicit(self, name: str) -> bool:
        """Return ``True`` when ``name`` was declared explicitly."""

        entry = self._entries.get(name)
        return entry is not None and entry.explicit

    def get(self, name: str) -> Option | None:
        """Return the option called ``name`` or ``None``."""

        entry = self._entries.get(name)
        return entry.option if entry is not None else None

    @property
    def first(self) -> Option | None:
        """Return the earliest inserted option, or ``None`` when empty."""

        for entry in self._entries.values():
            return entry.option
        return None

    @property
    def flags(self) -> tuple[str, ...]:
        """Return the command-line flags of every option in order."""

        return tuple(entry.option.flag for entry in self._entries.values())

    def __contains__(self, item: object) -> bool:
        name = item.name if isinstance(item, Option) else item
        return name in self._entries

    def __iter__(self) -> Iterator[Option]:
        return (entry.option for entry in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        names = ", ".join(self._entries)
        return f"BuildOptions([{names}])"


__all__ = (
    "BuildOptions",
    "Option",
    "WITHOUT_PREFIX",
    "WITH_PREFIX",
    "normalize_option_name",
)
