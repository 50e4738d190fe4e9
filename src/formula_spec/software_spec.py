# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Software specifications aggregating resources, options and dependencies."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import cast

from .dependency import Dependencies, Dependency
from .errors import DependencyValidationError, DuplicateResourceError, ResourceMissingError
from .options import WITH_PREFIX, WITHOUT_PREFIX, BuildOptions, Option, normalize_option_name
from .resource import Download, Downloadable, Owner, Resource
from .version import Version

LOGGER = logging.getLogger(__name__)

TagInput = str | Enum
DependencyInput = str | Mapping[str, TagInput | Iterable[TagInput]]


class SoftwareSpec(Downloadable):
    """Download and build description for one flavour of a formula (stable, head, ...)."""

    def __init__(self, url: str | None = None, *, version: str | Version | None = None) -> None:
        """Create an empty spec, optionally pointing at ``url``.

        Args:
            url: Primary download location.
            version: Explicit version overriding URL detection.
        """

        super().__init__(url, version=version)
        self.build = BuildOptions()
        self._owner: Owner | None = None
        self._resources: dict[str, Resource] = {}
        self._dependencies: list[Dependency] = []
        self._deps = Dependencies(self._dependencies)

    @property
    def owner(self) -> Owner | None:
        """Return the formula owning this spec."""

        return self._owner

    @owner.setter
    def owner(self, owner: Owner) -> None:
        self._owner = owner
        for resource in self._resources.values():
            resource.owner = self
        LOGGER.debug("spec owned by %s (%d resources)", owner.name, len(self._resources))

    @property
    def name(self) -> str | None:
        """Return the owning formula's name, or ``None`` before ownership is set."""

        return self._owner.name if self._owner is not None else None

    @property
    def download_name(self) -> str:
        return self.name or (self.url or "")

    @property
    def resources(self) -> Mapping[str, Resource]:
        """Return a read-only view of the registered resources."""

        return MappingProxyType(self._resources)

    @property
    def deps(self) -> Dependencies:
        """Return the declared dependencies in declaration order."""

        return self._deps

    def has_resource(self, name: str) -> bool:
        """Return ``True`` when a resource called ``name`` is registered."""

        return name in self._resources

    def resource(self, name: str, configure: Callable[[Resource], object] | None = None) -> Resource:
        """Look up a resource, or define it when ``configure`` is provided.

        Args:
            name: Resource name.
            configure: Callable receiving a fresh :class:`Resource` to populate.

        Returns:
            Resource: The registered resource.

        Raises:
            DuplicateResourceError: If defining a name that already exists.
            ResourceMissingError: If looking up a name that was never defined.
            FormulaDefinitionError: If the configured resource has no url.
        """

        if configure is None:
            try:
                return self._resources[name]
            except KeyError:
                raise ResourceMissingError(name, owner=self.name) from None
        if name in self._resources:
            raise DuplicateResourceError(name)
        resource = Resource(name)
        configure(resource)
        return self._register(resource)

    def add_resource(
        self,
        name: str,
        url: str,
        *,
        version: str | Version | None = None,
        mirrors: Iterable[str] = (),
        sha1: str | None = None,
        sha256: str | None = None,
    ) -> Resource:
        """Define the resource ``name`` from keyword metadata.

        Raises:
            DuplicateResourceError: If ``name`` is already registered.
            FormulaDefinitionError: If ``url`` is empty.
        """

        if name in self._resources:
            raise DuplicateResourceError(name)
        resource = Resource(name, url, version=version)
        for mirror in mirrors:
            resource.mirror(mirror)
        if sha1 is not None:
            resource.sha1(sha1)
        if sha256 is not None:
            resource.sha256(sha256)
        return self._register(resource)

    def _register(self, resource: Resource) -> Resource:
        resource.validate()
        resource.owner = self
        self._resources[resource.name] = resource
        LOGGER.debug("registered resource %s (%s)", resource.name, resource.url)
        return resource

    def option(self, name: str | Enum, description: str = "") -> Option:
        """Declare a build option.

        Explicit declarations replace options previously derived from
        dependencies; a repeated explicit declaration keeps the first one.

        Args:
            name: Option name, without the leading ``--``.
            description: Human-readable help text.

        Returns:
            Option: The option stored under ``name``.

        Raises:
            OptionValidationError: If ``name`` is empty or starts with ``--``.
        """

        option = Option(normalize_option_name(name), description)
        if self.build.add(option, explicit=True):
            return option
        if self.build.is_explicit(option.name):
            return cast(Option, self.build.get(option.name))
        self.build.replace(option, explicit=True)
        return option

    def depends_on(self, spec: DependencyInput, *tags: TagInput) -> list[Dependency]:
        """Declare one or more dependencies.

        ``spec`` is either a formula name (with optional variadic ``tags``)
        or a mapping from formula name to a tag or an iterable of tags.

        Returns:
            list[Dependency]: The dependencies appended by this call.

        Raises:
            DependencyValidationError: If the declaration is malformed.
        """

        if isinstance(spec, Mapping):
            if tags:
                raise DependencyValidationError("tags must be given inside the mapping")
            entries = [(name, _coerce_tags(value)) for name, value in spec.items()]
        else:
            entries = [(spec, tuple(tags))]

        added = [Dependency.from_tags(name, dep_tags) for name, dep_tags in entries]
        for dependency in added:
            self._dependencies.append(dependency)
            self._add_dependency_option(dependency)
        return added

    def _add_dependency_option(self, dependency: Dependency) -> None:
        if dependency.optional:
            option = Option(f"{WITH_PREFIX}{dependency.option_name}", f"Build with {dependency.option_name} support")
        elif dependency.recommended:
            option = Option(
                f"{WITHOUT_PREFIX}{dependency.option_name}",
                f"Build without {dependency.option_name} support",
            )
        else:
            return
        if self.build.add(option, explicit=False):
            LOGGER.debug("derived option %s from dependency %s", option.name, dependency.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, url={self.url!r})"


class HeadSoftwareSpec(SoftwareSpec):
    """Spec tracking the development tip of a project's repository."""

    def __init__(self, url: str | None = None) -> None:
        super().__init__(url)

    @property
    def version(self) -> Version:
        """Return the development-tip sentinel."""

        return Version.HEAD

    def verify_download_integrity(self, download: Download | object) -> None:
        """Accept any download; development checkouts carry no checksum."""

        return None


def _coerce_tags(value: TagInput | Iterable[TagInput] | None) -> tuple[TagInput, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, Enum)):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(value)
    raise DependencyValidationError(f"unsupported dependency tag value {value!r}")


__all__ = ("HeadSoftwareSpec", "SoftwareSpec")
