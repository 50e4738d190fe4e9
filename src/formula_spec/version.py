# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Version value objects and detection of versions embedded in download URLs."""

from __future__ import annotations

import re
from typing import ClassVar, Final

from .types import HEAD_VERSION

_ARCHIVE_SUFFIXES: Final[tuple[str, ...]] = (
    ".tar.gz",
    ".tar.bz2",
    ".tar.xz",
    ".tar.lz",
    ".tgz",
    ".tbz",
    ".txz",
    ".tar",
    ".zip",
    ".7z",
    ".gem",
)

# Tried in order against the archive stem.
_STEM_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    # foo-1.2.3, foo-1.2.3b1, foo-1.0rc2
    re.compile(r"-v?(\d+(?:\.\d+)+[a-z]*\d*)$"),
    # foo_1.2, foo_1_2
    re.compile(r"_v?(\d+(?:[._]\d+)+)$"),
    # foo-20130101, foo-7
    re.compile(r"-(\d+)$"),
    # v1.2.3, 1.2.3 (github tag archives)
    re.compile(r"^v?(\d+(?:\.\d+)+)$"),
)


class Version:
    """Immutable version string with a sentinel for development checkouts."""

    __slots__ = ("_value",)

    HEAD: ClassVar[Version]

    def __init__(self, value: str) -> None:
        """Create a version for ``value``.

        Args:
            value: Non-empty version string.

        Raises:
            ValueError: If ``value`` is empty.
        """

        text = str(value).strip()
        if not text:
            raise ValueError("version string must not be empty")
        self._value = text

    @property
    def is_head(self) -> bool:
        """Return ``True`` for the development-tip sentinel."""

        return self._value == HEAD_VERSION

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Version({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Version):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


Version.HEAD = Version(HEAD_VERSION)


def _archive_stem(url: str) -> str:
    path = url.split("?", 1)[0].split("#", 1)[0].rstrip("/")
    basename = path.rsplit("/", 1)[-1]
    lowered = basename.lower()
    for suffix in _ARCHIVE_SUFFIXES:
        if lowered.endswith(suffix):
            return basename[: -len(suffix)]
    return basename


def detect_version(url: str | None) -> Version | None:
    """Return the version embedded in ``url`` when one can be recognised.

    Args:
        url: Download location such as ``https://example.org/foo-1.2.tar.gz``.

    Returns:
        Version | None: Detected version, or ``None`` when no pattern matches.
    """

    if not url:
        return None
    stem = _archive_stem(url)
    for pattern in _STEM_PATTERNS:
        match = pattern.search(stem)
        if match:
            return Version(match.group(1).replace("_", "."))
    return None


__all__ = ("Version", "detect_version")
