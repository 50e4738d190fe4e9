# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Named downloadable resources attached to a formula specification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .checksum import Checksum, HashType
from .errors import ChecksumMissingError, FormulaDefinitionError
from .version import Version, detect_version

if TYPE_CHECKING:
    from .software_spec import SoftwareSpec

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class Owner(Protocol):
    """Formula owning a spec; only its name is consulted."""

    @property
    def name(self) -> str:
        """Return the owner's name."""


@runtime_checkable
class Download(Protocol):
    """Fetched artefact able to compare itself against a checksum."""

    def verify_checksum(self, checksum: Checksum) -> None:
        """Raise when the downloaded content does not match ``checksum``."""


class Downloadable:
    """Download location, mirrors, checksum and version shared by specs and resources."""

    def __init__(self, url: str | None = None, *, version: str | Version | None = None) -> None:
        self.url = url
        self.mirrors: list[str] = []
        self.checksum: Checksum | None = None
        self._version: Version | None = None if version is None else Version(str(version))

    @property
    def version(self) -> Version | None:
        """Return the declared version, falling back to one detected from the URL."""

        if self._version is not None:
            return self._version
        return detect_version(self.url)

    @version.setter
    def version(self, value: str | Version | None) -> None:
        self._version = None if value is None else Version(str(value))

    @property
    def download_name(self) -> str:
        """Return the name used to identify the download in messages and caches."""

        raise NotImplementedError

    def mirror(self, url: str) -> None:
        """Register an alternate download location."""

        self.mirrors.append(url)

    def sha1(self, digest: str) -> None:
        """Declare the SHA-1 checksum of the download."""

        self.checksum = Checksum(HashType.SHA1, digest)

    def sha256(self, digest: str) -> None:
        """Declare the SHA-256 checksum of the download."""

        self.checksum = Checksum(HashType.SHA256, digest)

    def verify_download_integrity(self, download: Download) -> None:
        """Check ``download`` against the declared checksum.

        Args:
            download: Fetched artefact that performs the comparison.

        Raises:
            ChecksumMissingError: If no checksum has been declared.
        """

        if self.checksum is None or self.checksum.empty:
            raise ChecksumMissingError(f"{self.download_name}: no checksum declared")
        LOGGER.debug("verifying %s against %s", self.download_name, self.checksum.hash_type.value)
        download.verify_checksum(self.checksum)


class Resource(Downloadable):
    """Downloadable artefact identified by name within its spec."""

    def __init__(self, name: str, url: str | None = None, *, version: str | Version | None = None) -> None:
        """Create the resource ``name`` optionally pointing at ``url``.

        Args:
            name: Resource name, unique within the owning spec.
            url: Download location; may be assigned later by a configure block.
            version: Explicit version overriding URL detection.
        """

        super().__init__(url, version=version)
        self.name = name
        self.owner: SoftwareSpec | None = None

    @property
    def download_name(self) -> str:
        """Return ``<formula>--<resource>`` once the owning spec has a name."""

        owner_name = self.owner.name if self.owner is not None else None
        if not owner_name:
            return self.name
        return f"{owner_name}--{self.name}"

    def validate(self) -> None:
        """Ensure the resource carries the fields required to download it.

        Raises:
            FormulaDefinitionError: If no URL was provided.
        """

        if not self.url:
            raise FormulaDefinitionError(f"resource {self.name!r} requires a url")

    def __repr__(self) -> str:
        return f"Resource(name={self.name!r}, url={self.url!r})"


__all__ = ("Download", "Downloadable", "Owner", "Resource")
