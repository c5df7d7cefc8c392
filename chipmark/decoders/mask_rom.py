"""Decoder for cartridge mask ROM labels.

Grammars are ordered newest and most specific first. Every grammar is
matched against the whole label, with spaces escaped (verbose mode).
"""

from __future__ import annotations

from re import Match
from typing import Callable, List, Optional

from ..calendar import week, year_from_one_digit, year_from_two_digits
from ..matcher import Matcher
from ..models import Manufacturer, MaskRom, Year
from ..reference import sharp_chip_type
from .base import Decoder

_ROM_CODE = r"(?P<rom_code>(?:DMG|CGB)-[A-Za-z0-9]{3,4}-[0-9])"
_DMG_ROM_CODE = r"(?P<rom_code>DMG-[A-Za-z0-9]{3}-[0-9])"
_DATE = r"(?P<year>[0-9]{2})(?P<week>[0-9]{2})"
_ONE_DIGIT_DATE = r"(?P<year>[0-9])(?P<week>[0-9]{2})"


def _rom(
    match: Match[str],
    manufacturer: Optional[Manufacturer],
    chip_type: Optional[str] = None,
    year: Callable[[str], Year] = year_from_two_digits,
) -> MaskRom:
    return MaskRom(
        rom_code=match["rom_code"],
        manufacturer=manufacturer,
        chip_type=chip_type,
        year=year(match["year"]),
        week=week(match["week"]),
    )


def sharp() -> Matcher[MaskRom]:
    """Sharp ROM chip (1990+).

    >>> decode_mask_rom("DMG-WJA-0 S LH534M05 JAPAN E1 9606 D").chip_type
    'LH534M'
    >>> decode_mask_rom("DMG-AP2J-0 S LH534MVD JAPAN E1 9639 D").week
    39
    >>> decode_mask_rom("DMG-HFAJ-0 S LHMN4MTI JAPAN E 9838 E").rom_code
    'DMG-HFAJ-0'
    """
    return Matcher.compile(
        "sharp",
        _ROM_CODE
        + r"""
        \ S\ (?P<chip>LH[A-Za-z0-9]{4})[A-Za-z0-9]{2}
        \ JAPAN\ [A-Z][0-9]?\ """
        + _DATE
        + r"\ [A-Z]",
        lambda m: _rom(m, Manufacturer.SHARP, sharp_chip_type(m["chip"])),
    )


def sharp2() -> Matcher[MaskRom]:
    """Old Sharp ROM chip with no chip type (1989 - 1991).

    >>> decode_mask_rom("DMG-TRA-1 SHARP JAPAN A0 9019 D").year
    Year(value=1990, precision=<YearPrecision.FULL: 'full'>)
    """
    return Matcher.compile(
        "sharp2",
        _DMG_ROM_CODE + r"\ SHARP\ JAPAN\ [A-Z][0-9]?\ " + _DATE + r"\ [A-Z]",
        lambda m: _rom(m, Manufacturer.SHARP),
    )


def sharp3() -> Matcher[MaskRom]:
    """Very old Sharp mask ROM chip (1989 and older).

    >>> decode_mask_rom("DMG-AWA-0 SHARP JAPAN 8909 D A").week
    9
    """
    return Matcher.compile(
        "sharp3",
        _DMG_ROM_CODE + r"\ SHARP\ JAPAN\ " + _DATE + r"\ [A-Z]\ [A-Z]",
        lambda m: _rom(m, Manufacturer.SHARP),
    )


def macronix() -> Matcher[MaskRom]:
    """Macronix MX23C mask ROM chip (1999+).

    >>> decode_mask_rom("M003119-M MX23C1603-12A DMG-VPHP-0 G2 2C882503").chip_type
    'MX23C1603-12A'
    >>> decode_mask_rom("E013104-M MX23C1603-12A CGB-BFPU-0 G2 1D2907A1B1").rom_code
    'CGB-BFPU-0'
    >>> str(decode_mask_rom("T991349-M MX23C8006-12 DMG-VPHJ-0 F 1A4891A2").year)
    '1999'
    >>> decode_mask_rom("M004523-M MX23C3203-11A2 CGB-B82J-0 02 H2 2D224301").week
    45
    """
    return Matcher.compile(
        "macronix",
        r"""
        [A-Z]""" + _DATE + r"""[0-9]{2}-M
        \ (?P<chip>MX23C[0-9]{4}-[0-9]{2}[A-Z]?[0-9]?)
        \ (?:[0-9]\ )?""" + _ROM_CODE + r"""
        \ (?:[0-9]{2}\ )?[A-Z][0-9]?\ [A-Za-z0-9]{8,10}
        """,
        lambda m: _rom(m, Manufacturer.MACRONIX, m["chip"]),
    )


def macronix2() -> Matcher[MaskRom]:
    """Macronix MX23C mask ROM chip (pre-1999).

    >>> decode_mask_rom("C9745-M MX23C4002-20 DMG-APOJ-0 E1 43824C").chip_type
    'MX23C4002-20'
    """
    return Matcher.compile(
        "macronix2",
        r"[A-Z]" + _DATE + r"""-M
        \ (?P<chip>MX23C[0-9]{4}-[0-9]{2}[A-Z]?[0-9]?)
        \ """ + _ROM_CODE + r"""
        \ [A-Z][0-9]?\ [A-Za-z0-9]{6}
        """,
        lambda m: _rom(m, Manufacturer.MACRONIX, m["chip"]),
    )


def oki_msm538011e() -> Matcher[MaskRom]:
    """OKI Semiconductor MSM538011E mask ROM.

    >>> decode_mask_rom("DMG-AM6J-0 F1 M538011E-36 9085401").chip_type
    'MSM538011E'
    """
    return Matcher.compile(
        "oki_msm538011e",
        _ROM_CODE
        + r"\ [A-Z][0-9]\ (?P<chip>M538011E)-[A-Za-z0-9]{2}\ "
        + _ONE_DIGIT_DATE
        + r"[0-9]{3}[A-Za-z0-9]",
        lambda m: _rom(m, Manufacturer.OKI, f"MS{m['chip']}", year_from_one_digit),
    )


def oki_mr531614g() -> Matcher[MaskRom]:
    """OKI Semiconductor MR531614G mask ROM.

    >>> decode_mask_rom("CGB-BPTE-0 G2 R531614G-44 044232E").chip_type
    'MR531614G'
    """
    return Matcher.compile(
        "oki_mr531614g",
        _ROM_CODE
        + r"\ [A-Z][0-9]\ (?P<chip>R531614G)-[A-Za-z0-9]{2}\ "
        + _ONE_DIGIT_DATE
        + r"[0-9]{3}[A-Za-z0-9]",
        lambda m: _rom(m, Manufacturer.OKI, f"M{m['chip']}", year_from_one_digit),
    )


def nec() -> Matcher[MaskRom]:
    """NEC mask ROM.

    >>> decode_mask_rom("NEC JAPAN DMG-SAJ-0 C1 UPD23C1001EGW-J01 9010E9702").chip_type
    'UPD23C1001EGW'
    """
    return Matcher.compile(
        "nec",
        r"NEC\ JAPAN\ "
        + _ROM_CODE
        + r"\ [A-Z][0-9]\ (?P<chip>UPD23C[0-9]{4}[A-Za-z0-9]{3,4})-[A-Z][0-9]{2}\ "
        + _DATE
        + r"[A-Z][0-9]{4}",
        lambda m: _rom(m, Manufacturer.NEC, m["chip"]),
    )


def nec_like() -> Matcher[MaskRom]:
    """Unknown mask ROM with NEC-like labeling.

    >>> decode_mask_rom("DMG-ZLE-0 E1 N-4001EAGW-J14 9329X7007").manufacturer is None
    True
    """
    return Matcher.compile(
        "nec_like",
        _ROM_CODE
        + r"\ [A-Z][0-9]\ (?P<chip>N-[0-9]{4}[A-Za-z0-9]{3,4})-[A-Z][0-9]{2}\ "
        + _DATE
        + r"[A-Z][0-9]{4}",
        lambda m: _rom(m, None, m["chip"]),
    )


def at_t() -> Matcher[MaskRom]:
    """AT&T mask ROM.

    >>> decode_mask_rom("Ⓜ AT&T JAPAN DMG-Q6E-0 C1 23C1001EAGW-K37 9351E9005").manufacturer
    <Manufacturer.AT_T: 'at_t'>
    """
    return Matcher.compile(
        "at_t",
        r"Ⓜ\ AT&T\ JAPAN\ "
        + _ROM_CODE
        + r"\ [A-Z][0-9]\ (?P<chip>23C[0-9]{4}[A-Za-z0-9]{3,4})-[A-Z][0-9]{2}\ "
        + _DATE
        + r"[A-Z][0-9]{4}",
        lambda m: _rom(m, Manufacturer.AT_T, m["chip"]),
    )


def smsc() -> Matcher[MaskRom]:
    """Standard Microsystems mask ROM.

    >>> decode_mask_rom("STANDARD MICRO DMG-BIA-0 C1 23C1001EGW-J61 9140E9017").week
    40
    """
    return Matcher.compile(
        "smsc",
        r"STANDARD\ MICRO\ "
        + _ROM_CODE
        + r"\ [A-Z][0-9]\ (?P<chip>23C[0-9]{4}[A-Za-z0-9]{3,4})-[A-Z][0-9]{2}\ "
        + _DATE
        + r"[A-Z][0-9]{4}",
        lambda m: _rom(m, Manufacturer.SMSC, m["chip"]),
    )


def glop_top() -> Matcher[MaskRom]:
    """Glop top mask ROM, probably manufactured by Sharp.

    >>> decode_mask_rom("LR0G150 DMG-TRA-1 97141").chip_type
    'LR0G150'
    """
    return Matcher.compile(
        "glop_top",
        r"(?P<chip>LR0G150)\ " + _ROM_CODE + r"\ " + _DATE + r"[0-9]",
        lambda m: _rom(m, None, m["chip"]),
    )


def toshiba() -> Matcher[MaskRom]:
    """Toshiba mask ROM.

    >>> decode_mask_rom("TOSHIBA 9136EAI TC531001CF DMG-NCE-0 C1 J541 JAPAN").chip_type
    'TC531001CF'
    """
    return Matcher.compile(
        "toshiba",
        r"TOSHIBA\ "
        + _DATE
        + r"EAI\ (?P<chip>TC53[0-9]{4}[A-Z]{2})\ "
        + _ROM_CODE
        + r"\ [A-Z][0-9]\ [A-Z][0-9]{3}\ JAPAN",
        lambda m: _rom(m, Manufacturer.TOSHIBA, m["chip"]),
    )


def samsung() -> Matcher[MaskRom]:
    """Samsung mask ROM; the lot code carries no readable date.

    >>> decode_mask_rom("SEC KM23C16120DT CGB-BHMJ-0 G2 K3N5C317GD").year is None
    True
    """
    return Matcher.compile(
        "samsung",
        r"SEC\ (?P<chip>KM23C[0-9]{4,5}[A-Z]{1,2})\ "
        + _ROM_CODE
        + r"\ [A-Z][0-9]\ [A-Za-z0-9]{10}",
        lambda m: MaskRom(
            rom_code=m["rom_code"], manufacturer=Manufacturer.SAMSUNG, chip_type=m["chip"]
        ),
    )


def samsung2() -> Matcher[MaskRom]:
    """Old Samsung mask ROM.

    >>> decode_mask_rom("SEC KM23C8000DG DMG-AAUJ-1 F1 KFX331U").rom_code
    'DMG-AAUJ-1'
    """
    return Matcher.compile(
        "samsung2",
        r"SEC\ (?P<chip>KM23C[0-9]{4,5}[A-Z]{1,2})\ "
        + _ROM_CODE
        + r"\ [A-Z][0-9]\ KF[A-Za-z0-9]{4}[A-Z]",
        lambda m: MaskRom(
            rom_code=m["rom_code"], manufacturer=Manufacturer.SAMSUNG, chip_type=m["chip"]
        ),
    )


def fujitsu() -> Matcher[MaskRom]:
    """Fujitsu mask ROM.

    >>> decode_mask_rom("JAPAN DMG-GKX-0 D1 1P0 AK 9328 R09").manufacturer
    <Manufacturer.FUJITSU: 'fujitsu'>
    >>> decode_mask_rom("JAPAN DMG-WJA-0 E1 3NH AK 9401 R17").week
    1
    """
    return Matcher.compile(
        "fujitsu",
        r"JAPAN\ "
        + _ROM_CODE
        + r"\ [A-Z][0-9]\ [0-9][A-Z][A-Za-z0-9]\ [A-Z]{2}\ "
        + _DATE
        + r"\ [A-Z][0-9]{2}",
        lambda m: _rom(m, Manufacturer.FUJITSU),
    )


def _matchers() -> List[Matcher[MaskRom]]:
    return [
        sharp(),
        sharp2(),
        sharp3(),
        macronix(),
        macronix2(),
        oki_msm538011e(),
        oki_mr531614g(),
        nec(),
        nec_like(),
        at_t(),
        smsc(),
        glop_top(),
        toshiba(),
        samsung(),
        samsung2(),
        fujitsu(),
    ]


DECODER: Decoder[MaskRom] = Decoder("mask_rom", _matchers)


def decode_mask_rom(text: str) -> Optional[MaskRom]:
    """Decode a cartridge mask ROM label, returning ``None`` for unknown formats."""
    return DECODER.decode(text)
