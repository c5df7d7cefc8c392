"""Core data models shared across chipmark decoders."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional, Tuple

# Years the supported consoles and their cartridges were manufactured.
PRODUCTION_WINDOW: Tuple[int, int] = (1989, 2003)


class Manufacturer(Enum):
    """Closed set of chip manufacturers recognised on decoded labels."""

    SHARP = "sharp"
    MACRONIX = "macronix"
    OKI = "oki"
    NEC = "nec"
    AT_T = "at_t"
    SMSC = "smsc"
    TOSHIBA = "toshiba"
    SAMSUNG = "samsung"
    FUJITSU = "fujitsu"

    @property
    def display_name(self) -> str:
        from .reference import MANUFACTURER_NAMES

        return MANUFACTURER_NAMES[self]


class YearPrecision(str, Enum):
    """How much of a manufacture year the label actually encodes."""

    FULL = "full"
    DIGIT = "digit"


@total_ordering
@dataclass(frozen=True)
class Year:
    """Manufacture year decoded from a date code.

    A ``FULL`` year holds the calendar year. A ``DIGIT`` year holds only the
    last digit printed on the part, kept when more than one decade inside
    the production window fits it.

    Years order by their earliest candidate, with a full year ahead of an
    ambiguous digit that could stand for the same year.

    >>> sorted([Year.full(1995), Year.digit(0), Year.full(1990)])[0]
    Year(value=1990, precision=<YearPrecision.FULL: 'full'>)
    """

    value: int
    precision: YearPrecision = YearPrecision.FULL

    @classmethod
    def full(cls, value: int) -> "Year":
        return cls(value, YearPrecision.FULL)

    @classmethod
    def digit(cls, value: int) -> "Year":
        return cls(value, YearPrecision.DIGIT)

    @property
    def is_full(self) -> bool:
        return self.precision is YearPrecision.FULL

    def candidates(self) -> Tuple[int, ...]:
        """Return every production-window year this value may stand for."""
        if self.precision is YearPrecision.FULL:
            return (self.value,)
        first, last = PRODUCTION_WINDOW
        return tuple(
            year
            for year in range(first, last + 1)
            if year % 10 == self.value
        )

    def _sort_key(self) -> Tuple[int, int, int]:
        return (min(self.candidates(), default=self.value), int(not self.is_full), self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        if self.precision is YearPrecision.FULL:
            return str(self.value)
        return "/".join(str(year) for year in self.candidates())


class Gen1CpuKind(Enum):
    """CPU package revisions of the original Game Boy and Super Game Boy."""

    DMG_0 = "DMG-CPU"
    DMG_A = "DMG-CPU A"
    DMG_B = "DMG-CPU B"
    DMG_C = "DMG-CPU C"
    DMG_BLOB_B = "DMG-CPU B (blob)"
    DMG_BLOB_C = "DMG-CPU C (blob)"
    SGB = "SGB-CPU 01"


@dataclass(frozen=True)
class Gen1Cpu:
    """Decoded first-generation CPU package label."""

    kind: Gen1CpuKind
    year: Optional[int] = None
    week: Optional[int] = None


@dataclass(frozen=True)
class MaskRom:
    """Decoded cartridge mask ROM label."""

    rom_code: str
    manufacturer: Optional[Manufacturer] = None
    chip_type: Optional[str] = None
    year: Optional[Year] = None
    week: Optional[int] = None
