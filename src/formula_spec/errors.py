# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while declaring formula specifications."""

from __future__ import annotations


class FormulaSpecError(RuntimeError):
    """Base class for errors raised while a formula is being defined."""


class DuplicateResourceError(FormulaSpecError):
    """Raised when a resource name is registered twice on the same spec."""

    def __init__(self, name: str) -> None:
        """Create the error for the resource ``name``.

        Args:
            name: Resource name that was already present.
        """

        super().__init__(f"Resource {name!r} is defined more than once")
        self.name = name


class ResourceMissingError(FormulaSpecError):
    """Raised when looking up a resource that was never registered."""

    def __init__(self, name: str, *, owner: str | None = None) -> None:
        """Create the error for the missing resource ``name``.

        Args:
            name: Resource name that could not be found.
            owner: Optional name of the formula that owns the spec.
        """

        prefix = f"{owner}: " if owner else ""
        super().__init__(f"{prefix}resource {name!r} is not defined")
        self.name = name


class OptionValidationError(FormulaSpecError):
    """Raised when an option name is empty or uses the reserved flag prefix."""


class DependencyValidationError(FormulaSpecError):
    """Raised when a dependency declaration is malformed."""


class ChecksumMissingError(FormulaSpecError):
    """Raised when verifying a download that has no declared checksum."""


class FormulaDefinitionError(FormulaSpecError):
    """Raised when a formula definition document or setting is invalid."""


__all__ = (
    "ChecksumMissingError",
    "DependencyValidationError",
    "DuplicateResourceError",
    "FormulaDefinitionError",
    "FormulaSpecError",
    "OptionValidationError",
    "ResourceMissingError",
)
