"""Static reference data for manufacturers and vendor chip codes."""

from __future__ import annotations

from typing import Dict

from .models import Manufacturer

MANUFACTURER_NAMES: Dict[Manufacturer, str] = {
    Manufacturer.SHARP: "Sharp",
    Manufacturer.MACRONIX: "Macronix",
    Manufacturer.OKI: "OKI Semiconductor",
    Manufacturer.NEC: "NEC",
    Manufacturer.AT_T: "AT&T",
    Manufacturer.SMSC: "Standard Microsystems",
    Manufacturer.TOSHIBA: "Toshiba",
    Manufacturer.SAMSUNG: "Samsung",
    Manufacturer.FUJITSU: "Fujitsu",
}

# Sharp prints an internal code on its mask ROMs instead of the catalog
# part number.
SHARP_MASK_ROM_ALIASES: Dict[str, str] = {
    "LH5359": "LH53259",  # Sharp Memory Data Book 1992
    "LH5317": "LH53517",  # mask ROM listing scan, source unknown
    "LH531H": "LH530800A",  # Sharp Memory Data Book 1992
    # Guesses based on capacity and pinout
    "LH5308": "LH530800",  # 1Mb JEDEC, compatible with LH530800A
    "LH5314": "LH53514",  # 512Kb JEDEC, compatible with LH53517
    "LH5321": "LH532100",  # 2Mb JEDEC
}

# Codes seen on real parts that have no known catalog number yet. Kept as
# notes for whoever curates this table; lookups never consult it.
SHARP_UNRESOLVED_CODES: Dict[str, str] = {
    "LH532D": "2Mb JEDEC; maybe LH532100 / LH532300 / LH532700 series",
    "LH532M": "2Mb JEDEC; maybe LH532100 / LH532300 / LH532700 series",
    "LH532W": "2Mb JEDEC; maybe LH532100 / LH532300 / LH532700 series",
    "LHMN2E": "2Mb JEDEC; maybe LH532100 / LH532300 / LH532700 series",
    "LH534M": "4Mb JEDEC; maybe LH534100 / LH534300 series / LH534R00",
    "LH5S4M": "4Mb JEDEC; maybe LH534100 / LH534300 series / LH534R00",
    "LHMN4M": "4Mb JEDEC; maybe LH534100 / LH534300 series / LH534R00",
    "LH538M": "8Mb JEDEC; maybe LH538300 / LH538400 series / LH538700 / LH538R00 series",
    "LH538W": "8Mb JEDEC; maybe LH538300 / LH538400 series / LH538700 / LH538R00 series",
    "LH5S8M": "8Mb JEDEC; maybe LH538300 / LH538400 series / LH538700 / LH538R00 series",
    "LHMN8J": "8Mb JEDEC; maybe LH538300 / LH538400 series / LH538700 / LH538R00 series",
    "LHMN8M": "8Mb JEDEC; maybe LH538300 / LH538400 series / LH538700 / LH538R00 series",
    "LH537M": "16Mb; maybe LH5316400 / LH5316500 series / LH5316P00 series",
}


def sharp_chip_type(code: str) -> str:
    """Map a printed Sharp ROM code to its catalog part number when known."""
    return SHARP_MASK_ROM_ALIASES.get(code, code)


__all__ = [
    "MANUFACTURER_NAMES",
    "SHARP_MASK_ROM_ALIASES",
    "SHARP_UNRESOLVED_CODES",
    "sharp_chip_type",
]
