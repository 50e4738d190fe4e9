# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Checksum value objects attached to downloads and bottles."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final


class HashType(str, Enum):
    """Enumerate digest algorithms understood by formula definitions."""

    SHA1 = "sha1"
    SHA256 = "sha256"

    @property
    def digest_length(self) -> int:
        """Return the number of hex characters produced by the algorithm."""

        return _DIGEST_LENGTHS[self]

    @classmethod
    def strongest_first(cls) -> tuple[HashType, ...]:
        """Return the known algorithms ordered from strongest to weakest."""

        return (cls.SHA256, cls.SHA1)


_DIGEST_LENGTHS: Final[dict[HashType, int]] = {
    HashType.SHA1: 40,
    HashType.SHA256: 64,
}
_HEX_RE: Final[re.Pattern[str]] = re.compile(r"^[0-9a-fA-F]*$")


@dataclass(frozen=True, slots=True)
class Checksum:
    """Digest string paired with the algorithm that produced it."""

    hash_type: HashType
    hexdigest: str

    def __post_init__(self) -> None:
        if not isinstance(self.hash_type, HashType):
            object.__setattr__(self, "hash_type", HashType(str(self.hash_type).lower()))

    @property
    def empty(self) -> bool:
        """Return ``True`` when the digest string is blank."""

        return not self.hexdigest

    @property
    def is_well_formed(self) -> bool:
        """Return ``True`` when the digest is hex of the algorithm's length."""

        return len(self.hexdigest) == self.hash_type.digest_length and bool(_HEX_RE.match(self.hexdigest))

    def __str__(self) -> str:
        return self.hexdigest


__all__ = ("Checksum", "HashType")
