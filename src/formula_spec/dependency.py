# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Dependency declarations and the ordered collection that stores them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import overload

from .errors import DependencyValidationError


class DependencyTag(str, Enum):
    """Modifier tags with behaviour attached to them."""

    OPTIONAL = "optional"
    RECOMMENDED = "recommended"
    BUILD = "build"
    RUN = "run"


def normalize_tag(value: str | Enum) -> str:
    """Return the canonical string form of a dependency tag.

    Args:
        value: Tag supplied by the formula author.

    Returns:
        str: Tag string without surrounding whitespace.

    Raises:
        DependencyValidationError: If the tag is blank.
    """

    raw = value.value if isinstance(value, Enum) else value
    text = str(raw).strip()
    if not text:
        raise DependencyValidationError("dependency tags must not be blank")
    return text


@dataclass(frozen=True, slots=True)
class Dependency:
    """Reference to another formula plus the modifier tags applied to it."""

    name: str
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise DependencyValidationError("dependency name is required")
        unique = tuple(dict.fromkeys(normalize_tag(tag) for tag in self.tags))
        object.__setattr__(self, "tags", unique)

    @classmethod
    def from_tags(cls, name: str, tags: Iterable[str | Enum]) -> Dependency:
        """Create a dependency for ``name`` carrying ``tags``."""

        return cls(name=name, tags=tuple(normalize_tag(tag) for tag in tags))

    @property
    def option_name(self) -> str:
        """Return the name used for derived options (the last path segment)."""

        return self.name.rsplit("/", 1)[-1]

    @property
    def optional(self) -> bool:
        """Return ``True`` when the dependency is off unless requested."""

        return DependencyTag.OPTIONAL.value in self.tags

    @property
    def recommended(self) -> bool:
        """Return ``True`` when the dependency is on unless declined."""

        return DependencyTag.RECOMMENDED.value in self.tags

    @property
    def build(self) -> bool:
        """Return ``True`` when the dependency is only needed while building."""

        return DependencyTag.BUILD.value in self.tags

    def __str__(self) -> str:
        return self.name


class Dependencies(Sequence[Dependency]):
    """Read-only ordered view over the dependencies declared on a spec."""

    __slots__ = ("_items",)

    def __init__(self, items: list[Dependency] | None = None) -> None:
        self._items: list[Dependency] = items if items is not None else []

    @property
    def first(self) -> Dependency | None:
        """Return the earliest declared dependency, or ``None`` when empty."""

        return self._items[0] if self._items else None

    @property
    def names(self) -> tuple[str, ...]:
        """Return dependency names in declaration order."""

        return tuple(dep.name for dep in self._items)

    def optional(self) -> tuple[Dependency, ...]:
        """Return dependencies tagged ``optional``."""

        return tuple(dep for dep in self._items if dep.optional)

    def recommended(self) -> tuple[Dependency, ...]:
        """Return dependencies tagged ``recommended``."""

        return tuple(dep for dep in self._items if dep.recommended)

    def build(self) -> tuple[Dependency, ...]:
        """Return build-only dependencies."""

        return tuple(dep for dep in self._items if dep.build)

    @overload
    def __getitem__(self, index: int) -> Dependency: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Dependency]: ...

    def __getitem__(self, index: int | slice) -> Dependency | Sequence[Dependency]:
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __iter__(self) -> Iterator[Dependency]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Dependencies({list(self.names)!r})"


__all__ = ("Dependencies", "Dependency", "DependencyTag", "normalize_tag")
