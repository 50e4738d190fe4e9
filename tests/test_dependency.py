# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for dependency declarations."""

from __future__ import annotations

import pytest

from formula_spec import Dependencies, Dependency, DependencyTag, DependencyValidationError


def test_dependency_predicates() -> None:
    dependency = Dependency.from_tags("foo", [DependencyTag.OPTIONAL, "build", "optional"])
    assert dependency.tags == ("optional", "build")
    assert dependency.optional
    assert dependency.build
    assert not dependency.recommended
    assert str(dependency) == "foo"


def test_dependency_requires_name() -> None:
    with pytest.raises(DependencyValidationError):
        Dependency("  ")


def test_dependency_rejects_blank_tags() -> None:
    with pytest.raises(DependencyValidationError):
        Dependency("foo", ("",))


def test_dependencies_view() -> None:
    items = [
        Dependency("foo", ("optional",)),
        Dependency("bar", ("recommended",)),
        Dependency("baz"),
    ]
    dependencies = Dependencies(items)
    assert dependencies.first == items[0]
    assert dependencies.names == ("foo", "bar", "baz")
    assert dependencies.optional() == (items[0],)
    assert dependencies.recommended() == (items[1],)
    assert dependencies[-1].name == "baz"
    assert dependencies[1:] == (items[1], items[2])
    assert Dependencies().first is None
