# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for formula specification models."""

from __future__ import annotations

from typing import Final

from .bottle import Bottle
from .checksum import Checksum, HashType
from .config import FormulaSpecSettings, load_settings
from .dependency import Dependencies, Dependency, DependencyTag
from .errors import (
    ChecksumMissingError,
    DependencyValidationError,
    DuplicateResourceError,
    FormulaDefinitionError,
    FormulaSpecError,
    OptionValidationError,
    ResourceMissingError,
)
from .loader import FormulaDefinition, build_formula, load_formula
from .options import BuildOptions, Option
from .resource import Resource
from .software_spec import HeadSoftwareSpec, SoftwareSpec
from .version import Version, detect_version

__all__: Final[tuple[str, ...]] = (
    "Bottle",
    "BuildOptions",
    "Checksum",
    "ChecksumMissingError",
    "Dependencies",
    "Dependency",
    "DependencyTag",
    "DependencyValidationError",
    "DuplicateResourceError",
    "FormulaDefinition",
    "FormulaDefinitionError",
    "FormulaSpecError",
    "FormulaSpecSettings",
    "HashType",
    "HeadSoftwareSpec",
    "Option",
    "OptionValidationError",
    "Resource",
    "ResourceMissingError",
    "SoftwareSpec",
    "Version",
    "build_formula",
    "detect_version",
    "load_formula",
    "load_settings",
)
