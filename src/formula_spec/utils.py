# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for validating values read from formula definition documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import FormulaDefinitionError
from .types import JSONValue


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as a non-empty string or raise a definition error.

    Args:
        value: Raw value extracted from the document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: The validated string.

    Raises:
        FormulaDefinitionError: If ``value`` is not a non-empty string.
    """
    if not isinstance(value, str) or not value:
        raise FormulaDefinitionError(f"{context}: expected '{key}' to be a non-empty string")
    return value


def optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    """Return ``value`` as an optional string with validation.

    Raises:
        FormulaDefinitionError: If ``value`` is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise FormulaDefinitionError(f"{context}: expected '{key}' to be a string if present")
    return value


def string_array(value: JSONValue | None, *, key: str, context: str) -> tuple[str, ...]:
    """Return ``value`` as a tuple of strings with validation.

    Raises:
        FormulaDefinitionError: If ``value`` is not a sequence of strings.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise FormulaDefinitionError(f"{context}: expected '{key}' to be an array of strings")
    result: list[str] = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise FormulaDefinitionError(f"{context}: expected '{key}[{index}]' to be a string")
        result.append(item)
    return tuple(result)


def object_array(value: JSONValue | None, *, key: str, context: str) -> tuple[JSONValue, ...]:
    """Return ``value`` as a tuple of raw entries.

    Raises:
        FormulaDefinitionError: If ``value`` is present but not an array.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise FormulaDefinitionError(f"{context}: expected '{key}' to be an array")
    return tuple(value)


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping or raise an error.

    Raises:
        FormulaDefinitionError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise FormulaDefinitionError(f"{context}: expected '{key}' to be an object")
    return value


def optional_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue] | None:
    """Return ``value`` as a mapping, or ``None`` when absent."""
    if value is None:
        return None
    return expect_mapping(value, key=key, context=context)


__all__ = [
    "expect_mapping",
    "expect_string",
    "object_array",
    "optional_mapping",
    "optional_string",
    "string_array",
]
