"""Decoder for first-generation Game Boy and Super Game Boy CPU labels."""

from __future__ import annotations

from re import Match
from typing import Dict, List, Optional

from ..calendar import full_year_from_two_digits, week
from ..errors import DecodeError
from ..matcher import Matcher
from ..models import Gen1Cpu, Gen1CpuKind
from .base import Decoder

_DMG_REVISIONS: Dict[Optional[str], Gen1CpuKind] = {
    None: Gen1CpuKind.DMG_0,
    "A": Gen1CpuKind.DMG_A,
    "B": Gen1CpuKind.DMG_B,
    "C": Gen1CpuKind.DMG_C,
}

# Revision C never shipped with the short label.
_DEPRECATED_REVISIONS: Dict[Optional[str], Gen1CpuKind] = {
    None: Gen1CpuKind.DMG_0,
    "A": Gen1CpuKind.DMG_A,
    "B": Gen1CpuKind.DMG_B,
}

_BLOBS: Dict[str, Gen1CpuKind] = {
    "B": Gen1CpuKind.DMG_BLOB_B,
    "C": Gen1CpuKind.DMG_BLOB_C,
}


def _kind(table: Dict[Optional[str], Gen1CpuKind], code: Optional[str]) -> Gen1CpuKind:
    try:
        return table[code]
    except KeyError:
        raise DecodeError(
            f"Invalid DMG-CPU part name: {code}", field="kind", fragment=code
        ) from None


def _dated(kind: Gen1CpuKind, match: Match[str]) -> Gen1Cpu:
    return Gen1Cpu(
        kind=kind,
        year=full_year_from_two_digits(match["year"]),
        week=week(match["week"]),
    )


def dmg_cpu() -> Matcher[Gen1Cpu]:
    """
    >>> decode_gen1_cpu("DMG-CPU © 1989 Nintendo JAPAN 8913 D").kind
    <Gen1CpuKind.DMG_0: 'DMG-CPU'>
    >>> decode_gen1_cpu("DMG-CPU A © 1989 Nintendo JAPAN 8937 D").kind
    <Gen1CpuKind.DMG_A: 'DMG-CPU A'>
    >>> decode_gen1_cpu("DMG-CPU B © 1989 Nintendo JAPAN 9207 D").kind
    <Gen1CpuKind.DMG_B: 'DMG-CPU B'>
    >>> decode_gen1_cpu("DMG-CPU C © 1989 Nintendo JAPAN 9835 D").kind
    <Gen1CpuKind.DMG_C: 'DMG-CPU C'>
    """
    return Matcher.compile(
        "dmg_cpu",
        r"""
        DMG-CPU (?:\ (?P<revision>[ABC]))?
        \ ©\ 1989\ Nintendo\ JAPAN
        \ (?P<year>[0-9]{2})(?P<week>[0-9]{2})\ [A-Z]{1,2}
        """,
        lambda m: _dated(_kind(_DMG_REVISIONS, m["revision"]), m),
    )


def dmg_cpu_blob() -> Matcher[Gen1Cpu]:
    """Glob-top CPU carrying a single revision letter and no date.

    >>> decode_gen1_cpu("B")
    Gen1Cpu(kind=<Gen1CpuKind.DMG_BLOB_B: 'DMG-CPU B (blob)'>, year=None, week=None)
    """
    return Matcher.compile(
        "dmg_cpu_blob",
        r"(?P<revision>[BC])",
        lambda m: Gen1Cpu(kind=_BLOBS[m["revision"]]),
    )


def dmg_cpu_lr35902() -> Matcher[Gen1Cpu]:
    """
    >>> decode_gen1_cpu("DMG-CPU LR35902 8907 D")
    Gen1Cpu(kind=<Gen1CpuKind.DMG_0: 'DMG-CPU'>, year=1989, week=7)
    """
    return Matcher.compile(
        "dmg_cpu_lr35902",
        r"DMG-CPU\ LR35902\ (?P<year>[0-9]{2})(?P<week>[0-9]{2})\ [A-Z]",
        lambda m: _dated(Gen1CpuKind.DMG_0, m),
    )


def dmg_cpu_deprecated() -> Matcher[Gen1Cpu]:
    return Matcher.compile(
        "dmg_cpu_deprecated",
        r"""
        DMG-CPU (?:\ (?P<revision>[AB]))?
        \ (?P<year>[0-9]{2})(?P<week>[0-9]{2})\ [A-Z]{1,2}
        """,
        lambda m: _dated(_kind(_DEPRECATED_REVISIONS, m["revision"]), m),
    )


def sgb_cpu() -> Matcher[Gen1Cpu]:
    """
    >>> decode_gen1_cpu("SGB-CPU 01 © 1994 Nintendo Ⓜ 1989 Nintendo JAPAN 9434 7 D").year
    1994
    """
    return Matcher.compile(
        "sgb_cpu",
        r"""
        SGB-CPU\ 01\ ©\ 1994\ Nintendo\ Ⓜ\ 1989\ Nintendo\ JAPAN
        \ (?P<year>[0-9]{2})(?P<week>[0-9]{2})\ [0-9]\ [A-Z]
        """,
        lambda m: _dated(Gen1CpuKind.SGB, m),
    )


def _matchers() -> List[Matcher[Gen1Cpu]]:
    return [
        dmg_cpu(),
        dmg_cpu_blob(),
        dmg_cpu_lr35902(),
        dmg_cpu_deprecated(),
        sgb_cpu(),
    ]


DECODER: Decoder[Gen1Cpu] = Decoder("gen1_cpu", _matchers)


def decode_gen1_cpu(text: str) -> Optional[Gen1Cpu]:
    """Decode a DMG/SGB CPU label, returning ``None`` for unknown formats."""
    return DECODER.decode(text)
