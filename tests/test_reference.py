"""Tests for reference tables."""

from __future__ import annotations

from chipmark.models import Manufacturer
from chipmark.reference import (
    MANUFACTURER_NAMES,
    SHARP_MASK_ROM_ALIASES,
    SHARP_UNRESOLVED_CODES,
    sharp_chip_type,
)


def test_known_alias_maps_to_catalog_part() -> None:
    assert sharp_chip_type("LH5359") == "LH53259"
    assert sharp_chip_type("LH531H") == "LH530800A"
    assert sharp_chip_type("LH5321") == "LH532100"


def test_unresolved_and_unknown_codes_pass_through() -> None:
    assert sharp_chip_type("LH534M") == "LH534M"
    assert sharp_chip_type("QQ0000") == "QQ0000"


def test_unresolved_notes_never_overlap_aliases() -> None:
    assert not set(SHARP_UNRESOLVED_CODES) & set(SHARP_MASK_ROM_ALIASES)


def test_every_manufacturer_has_a_display_name() -> None:
    assert set(MANUFACTURER_NAMES) == set(Manufacturer)
    assert Manufacturer.SMSC.display_name == "Standard Microsystems"
    assert Manufacturer.AT_T.display_name == "AT&T"
