# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Precompiled binary ("bottle") descriptors keyed by platform tag."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from .checksum import Checksum, HashType
from .config import FormulaSpecSettings
from .types import PlatformTag
from .version import Version

LOGGER = logging.getLogger(__name__)

TagInput = PlatformTag | Enum
TagSelection = TagInput | Iterable[TagInput]


def normalize_platform_tag(value: TagInput) -> PlatformTag:
    """Return the string key stored for a platform tag.

    Enum members contribute their string value, or their name when the value
    is not a string.
    """

    if isinstance(value, Enum):
        return value.value if isinstance(value.value, str) else value.name
    return str(value)


def _selected_tags(selection: TagSelection) -> tuple[PlatformTag, ...]:
    if isinstance(selection, (str, Enum)):
        return (normalize_platform_tag(selection),)
    return tuple(normalize_platform_tag(tag) for tag in selection)


class Bottle:
    """Per-platform binary package metadata for a formula."""

    def __init__(self, settings: FormulaSpecSettings | None = None) -> None:
        """Create a bottle seeded with defaults from ``settings``.

        Args:
            settings: Optional settings overriding the built-in defaults.
        """

        resolved = settings or FormulaSpecSettings()
        self.root_url: Any = resolved.bottle_root_url
        self.prefix: Any = resolved.bottle_prefix
        self.cellar: Any = resolved.bottle_cellar
        self.revision: Any = resolved.bottle_revision
        self._checksums: dict[HashType, dict[PlatformTag, Checksum]] = {kind: {} for kind in HashType}

    def sha1(self, digests: Mapping[str, TagSelection]) -> None:
        """Record SHA-1 digests; each digest maps to one tag or several tags."""

        self.set_checksums(HashType.SHA1, digests)

    def sha256(self, digests: Mapping[str, TagSelection]) -> None:
        """Record SHA-256 digests; each digest maps to one tag or several tags."""

        self.set_checksums(HashType.SHA256, digests)

    def set_checksums(self, hash_type: HashType, digests: Mapping[str, TagSelection]) -> None:
        """Store one :class:`Checksum` per platform tag, replacing earlier values.

        Args:
            hash_type: Algorithm that produced the digests.
            digests: Mapping from digest string to a tag or an iterable of tags.
        """

        table = self._checksums[hash_type]
        for digest, selection in digests.items():
            for tag in _selected_tags(selection):
                table[tag] = Checksum(hash_type, digest)
                LOGGER.debug("bottle %s checksum set for %s", hash_type.value, tag)

    def checksums(self, hash_type: HashType) -> Mapping[PlatformTag, Checksum]:
        """Return a read-only view of the checksums recorded for ``hash_type``."""

        return MappingProxyType(self._checksums[hash_type])

    def checksum_for(self, tag: TagInput) -> Checksum | None:
        """Return the strongest checksum recorded for ``tag``, if any."""

        key = normalize_platform_tag(tag)
        for hash_type in HashType.strongest_first():
            checksum = self._checksums[hash_type].get(key)
            if checksum is not None:
                return checksum
        return None

    @property
    def tags(self) -> tuple[PlatformTag, ...]:
        """Return every platform tag with at least one checksum, in first-seen order."""

        seen: dict[PlatformTag, None] = {}
        for hash_type in HashType.strongest_first():
            for tag in self._checksums[hash_type]:
                seen.setdefault(tag, None)
        return tuple(seen)

    def filename_for(self, name: str, version: str | Version, tag: TagInput) -> str:
        """Return the archive filename of the bottle built for ``tag``.

        The revision is appended only when it is greater than zero, e.g.
        ``foo-1.0.lion.bottle.1.tar.gz``.
        """

        revision = f".{self.revision}" if isinstance(self.revision, int) and self.revision > 0 else ""
        return f"{name}-{version}.{normalize_platform_tag(tag)}.bottle{revision}.tar.gz"

    def url_for(self, name: str, version: str | Version, tag: TagInput) -> str:
        """Return the download URL of the bottle built for ``tag``."""

        return f"{str(self.root_url).rstrip('/')}/{self.filename_for(name, version, tag)}"


__all__ = ("Bottle", "normalize_platform_tag")
