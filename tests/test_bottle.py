# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for bottle checksum storage and attributes."""

from __future__ import annotations

from enum import Enum

import pytest

from formula_spec import Bottle, Checksum, FormulaSpecSettings, HashType
from formula_spec.config import DEFAULT_BOTTLE_ROOT_URL

class _Platform(Enum):
    LION = "lion"
    MOUNTAIN_LION = "mountain_lion"


CHECKSUMS = {
    "snow_leopard_32": "deadbeef" * 5,
    "snow_leopard": "faceb00c" * 5,
    "lion": "baadf00d" * 5,
    "mountain_lion": "8badf00d" * 5,
}


def test_checksum_setters(bottle: Bottle) -> None:
    for tag, digest in CHECKSUMS.items():
        bottle.sha1({digest: tag})

    table = bottle.checksums(HashType.SHA1)
    for tag, digest in CHECKSUMS.items():
        assert table[tag] == Checksum(HashType.SHA1, digest)


def test_one_digest_for_several_tags(bottle: Bottle) -> None:
    digest = "deadbeef" * 5
    bottle.sha1({digest: ["snow_leopard_32", "snow_leopard", "lion", "mountain_lion"]})
    stored = bottle.checksums(HashType.SHA1)
    assert len(stored) == 4
    assert set(stored.values()) == {Checksum(HashType.SHA1, digest)}


def test_checksum_is_overwritten(bottle: Bottle) -> None:
    bottle.sha1({"deadbeef" * 5: "lion"})
    bottle.sha1({"faceb00c" * 5: "lion"})
    assert bottle.checksum_for("lion") == Checksum(HashType.SHA1, "faceb00c" * 5)


def test_checksum_for_prefers_sha256(bottle: Bottle) -> None:
    bottle.sha1({"deadbeef" * 5: "lion"})
    bottle.sha256({"ab" * 32: "lion"})
    assert bottle.checksum_for("lion") == Checksum(HashType.SHA256, "ab" * 32)
    assert bottle.checksum_for("tiger") is None
    assert bottle.tags == ("lion",)


@pytest.mark.parametrize("attribute", ["root_url", "prefix", "cellar", "revision"])
def test_other_setters(bottle: Bottle, attribute: str) -> None:
    double = object()
    setattr(bottle, attribute, double)
    assert getattr(bottle, attribute) is double


def test_defaults_come_from_settings() -> None:
    assert Bottle().root_url == DEFAULT_BOTTLE_ROOT_URL
    bottle = Bottle(FormulaSpecSettings(bottle_prefix="/opt/homebrew", bottle_revision=2))
    assert bottle.prefix == "/opt/homebrew"
    assert bottle.revision == 2


def test_url_for(bottle: Bottle) -> None:
    bottle.root_url = "https://bottles.example.org/"
    assert bottle.url_for("foo", "1.0", "lion") == "https://bottles.example.org/foo-1.0.lion.bottle.tar.gz"
    bottle.revision = 1
    assert bottle.filename_for("foo", "1.0", "lion") == "foo-1.0.lion.bottle.1.tar.gz"


def test_enum_platform_tags(bottle: Bottle) -> None:
    bottle.sha1({"deadbeef" * 5: _Platform.LION})
    bottle.sha1({"faceb00c" * 5: [_Platform.MOUNTAIN_LION, "snow_leopard"]})
    assert bottle.checksums(HashType.SHA1)["lion"] == Checksum(HashType.SHA1, "deadbeef" * 5)
    assert bottle.checksum_for(_Platform.MOUNTAIN_LION) == Checksum(HashType.SHA1, "faceb00c" * 5)
    assert bottle.tags == ("lion", "mountain_lion", "snow_leopard")
    assert bottle.filename_for("foo", "1.0", _Platform.LION) == "foo-1.0.lion.bottle.tar.gz"
