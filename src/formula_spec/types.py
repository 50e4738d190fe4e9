# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for formula specifications."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

PlatformTag: TypeAlias = str

HEAD_VERSION: Final[str] = "HEAD"
OPTION_FLAG_PREFIX: Final[str] = "--"

__all__ = [
    "HEAD_VERSION",
    "JSONPrimitive",
    "JSONValue",
    "OPTION_FLAG_PREFIX",
    "PlatformTag",
]
