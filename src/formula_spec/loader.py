# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Build formula definitions from parsed JSON or TOML documents."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from .bottle import Bottle
from .checksum import HashType
from .config import FormulaSpecSettings
from .errors import FormulaDefinitionError, FormulaSpecError
from .io import load_document
from .software_spec import HeadSoftwareSpec, SoftwareSpec
from .types import JSONValue
from .utils import (
    expect_mapping,
    expect_string,
    object_array,
    optional_mapping,
    optional_string,
    string_array,
)

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class FormulaDefinition:
    """A named formula with its stable and head specs and optional bottle."""

    name: str
    stable: SoftwareSpec | None = None
    head: HeadSoftwareSpec | None = None
    bottle: Bottle | None = None
    source: Path | None = field(default=None, compare=False)

    @property
    def specs(self) -> tuple[SoftwareSpec, ...]:
        """Return the declared specs, stable first."""

        return tuple(spec for spec in (self.stable, self.head) if spec is not None)


def load_formula(path: Path, *, settings: FormulaSpecSettings | None = None) -> FormulaDefinition:
    """Read and build the formula defined at ``path``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        FormulaSpecError: If the document is malformed or violates a definition rule.
    """

    document = load_document(path)
    formula = build_formula(document, context=path.name, settings=settings)
    formula.source = path
    return formula


def build_formula(
    data: Mapping[str, JSONValue],
    *,
    context: str,
    settings: FormulaSpecSettings | None = None,
) -> FormulaDefinition:
    """Create a :class:`FormulaDefinition` from a parsed document.

    Formula-level ``resources``, ``options`` and ``dependencies`` apply to
    every declared spec.

    Args:
        data: Parsed document mapping.
        context: Human-readable context used in error messages.
        settings: Defaults used when constructing the bottle.

    Returns:
        FormulaDefinition: Fully populated formula.

    Raises:
        FormulaSpecError: If the document is malformed or violates a definition rule.
    """

    formula = FormulaDefinition(name=expect_string(data.get("name"), key="name", context=context))

    stable_data = optional_mapping(data.get("stable"), key="stable", context=context)
    if stable_data is not None:
        formula.stable = _build_stable(stable_data, context=f"{context}.stable")
    head_data = data.get("head")
    if head_data is not None:
        formula.head = _build_head(head_data, context=f"{context}.head")
    if not formula.specs:
        raise FormulaDefinitionError(f"{context}: expected a 'stable' or 'head' spec")

    resources = object_array(data.get("resources"), key="resources", context=context)
    options = object_array(data.get("options"), key="options", context=context)
    dependencies = object_array(data.get("dependencies"), key="dependencies", context=context)
    for spec in formula.specs:
        _apply_resources(spec, resources, context=f"{context}.resources")
        _apply_options(spec, options, context=f"{context}.options")
        _apply_dependencies(spec, dependencies, context=f"{context}.dependencies")
        spec.owner = formula

    bottle_data = optional_mapping(data.get("bottle"), key="bottle", context=context)
    if bottle_data is not None:
        formula.bottle = _build_bottle(bottle_data, settings=settings, context=f"{context}.bottle")

    LOGGER.debug(
        "built formula %s (%d specs, bottle=%s)",
        formula.name,
        len(formula.specs),
        formula.bottle is not None,
    )
    return formula


def _build_stable(data: Mapping[str, JSONValue], *, context: str) -> SoftwareSpec:
    url = expect_string(data.get("url"), key="url", context=context)
    version = optional_string(data.get("version"), key="version", context=context)
    with _entry_context(context):
        spec = SoftwareSpec(url, version=version or None)
    for mirror in string_array(data.get("mirrors"), key="mirrors", context=context):
        spec.mirror(mirror)
    _apply_checksum(spec, data, context=context)
    return spec


def _build_head(data: JSONValue, *, context: str) -> HeadSoftwareSpec:
    if isinstance(data, str):
        return HeadSoftwareSpec(expect_string(data, key="head", context=context))
    mapping = expect_mapping(data, key="head", context=context)
    return HeadSoftwareSpec(expect_string(mapping.get("url"), key="url", context=context))


def _apply_checksum(spec: SoftwareSpec, data: Mapping[str, JSONValue], *, context: str) -> None:
    sha1 = optional_string(data.get("sha1"), key="sha1", context=context)
    sha256 = optional_string(data.get("sha256"), key="sha256", context=context)
    if sha1 and sha256:
        raise FormulaDefinitionError(f"{context}: declare either 'sha1' or 'sha256', not both")
    if sha1:
        spec.sha1(sha1)
    elif sha256:
        spec.sha256(sha256)


@contextmanager
def _entry_context(context: str) -> Iterator[None]:
    """Prefix definition-rule errors raised by a spec with ``context``."""

    try:
        yield
    except FormulaDefinitionError:
        raise
    except (FormulaSpecError, ValueError) as exc:
        raise FormulaDefinitionError(f"{context}: {exc}") from exc


def _apply_resources(spec: SoftwareSpec, entries: tuple[JSONValue, ...], *, context: str) -> None:
    for index, entry in enumerate(entries):
        entry_context = f"{context}[{index}]"
        mapping = expect_mapping(entry, key=f"resources[{index}]", context=context)
        sha1 = optional_string(mapping.get("sha1"), key="sha1", context=entry_context)
        sha256 = optional_string(mapping.get("sha256"), key="sha256", context=entry_context)
        if sha1 and sha256:
            raise FormulaDefinitionError(f"{entry_context}: declare either 'sha1' or 'sha256', not both")
        name = expect_string(mapping.get("name"), key="name", context=entry_context)
        url = expect_string(mapping.get("url"), key="url", context=entry_context)
        version = optional_string(mapping.get("version"), key="version", context=entry_context)
        mirrors = string_array(mapping.get("mirrors"), key="mirrors", context=entry_context)
        with _entry_context(entry_context):
            spec.add_resource(
                name,
                url,
                version=version or None,
                mirrors=mirrors,
                sha1=sha1 or None,
                sha256=sha256 or None,
            )


def _apply_options(spec: SoftwareSpec, entries: tuple[JSONValue, ...], *, context: str) -> None:
    for index, entry in enumerate(entries):
        entry_context = f"{context}[{index}]"
        if isinstance(entry, str):
            name, description = entry, ""
        else:
            mapping = expect_mapping(entry, key=f"options[{index}]", context=context)
            name = optional_string(mapping.get("name"), key="name", context=entry_context) or ""
            description = optional_string(mapping.get("description"), key="description", context=entry_context) or ""
        with _entry_context(entry_context):
            spec.option(name, description)


def _apply_dependencies(spec: SoftwareSpec, entries: tuple[JSONValue, ...], *, context: str) -> None:
    for index, entry in enumerate(entries):
        entry_context = f"{context}[{index}]"
        if isinstance(entry, str):
            name = entry
            tags: tuple[str, ...] = ()
        else:
            mapping = expect_mapping(entry, key=f"dependencies[{index}]", context=context)
            name = expect_string(mapping.get("name"), key="name", context=entry_context)
            tags_value = mapping.get("tags")
            if isinstance(tags_value, str):
                tags = (tags_value,)
            else:
                tags = string_array(tags_value, key="tags", context=entry_context)
        with _entry_context(entry_context):
            spec.depends_on(name, *tags)


def _build_bottle(
    data: Mapping[str, JSONValue],
    *,
    settings: FormulaSpecSettings | None,
    context: str,
) -> Bottle:
    bottle = Bottle(settings)
    for key in ("root_url", "prefix", "cellar"):
        value = optional_string(data.get(key), key=key, context=context)
        if value is not None:
            setattr(bottle, key, value)
    revision = data.get("revision")
    if revision is not None:
        if isinstance(revision, bool) or not isinstance(revision, int) or revision < 0:
            raise FormulaDefinitionError(f"{context}: expected 'revision' to be a non-negative integer")
        bottle.revision = revision
    for hash_type in HashType:
        digests = optional_mapping(data.get(hash_type.value), key=hash_type.value, context=context)
        if digests is None:
            continue
        table: dict[str, tuple[str, ...]] = {}
        for digest, tags in digests.items():
            if isinstance(tags, str):
                table[digest] = (tags,)
            else:
                table[digest] = string_array(tags, key=f"{hash_type.value}.{digest}", context=context)
        bottle.set_checksums(hash_type, table)
    return bottle


__all__ = ("FormulaDefinition", "build_formula", "load_formula")
