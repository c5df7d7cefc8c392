"""Presentation helpers for decoded records."""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

from .models import Gen1Cpu, MaskRom, Year

Record = Union[Gen1Cpu, MaskRom]

ROW_COLUMNS: Tuple[str, ...] = (
    "type",
    "rom_code",
    "label",
    "manufacturer",
    "manufacturer_name",
    "calendar_short",
    "calendar",
    "year",
    "week",
)


def _year_text(year: Union[Year, int]) -> str:
    if isinstance(year, Year) and not year.is_full:
        return "|".join(str(candidate) for candidate in year.candidates())
    return str(year)


def calendar(year: Union[Year, int, None], week: Optional[int]) -> Optional[str]:
    """Long form date, e.g. ``Week 7/1989`` or ``Week 8/1989|1999``."""
    if year is None:
        return None
    if week is None:
        return _year_text(year)
    return f"Week {week}/{_year_text(year)}"


def calendar_short(year: Union[Year, int, None], week: Optional[int]) -> Optional[str]:
    """Compact sortable date, e.g. ``1989/07`` or ``1989|1999/08``."""
    if year is None:
        return None
    if week is None:
        return _year_text(year)
    return f"{_year_text(year)}/{week:02d}"


def to_row(record: Record, label: str = "") -> Dict[str, str]:
    """Flatten a record into CSV-ready string columns (see ``ROW_COLUMNS``)."""
    if isinstance(record, Gen1Cpu):
        chip_type: Optional[str] = record.kind.value
        rom_code = None
        manufacturer = None
    elif isinstance(record, MaskRom):
        chip_type = record.chip_type
        rom_code = record.rom_code
        manufacturer = record.manufacturer
    else:
        raise TypeError(f"Unsupported record type: {type(record).__name__}")

    values = {
        "type": chip_type,
        "rom_code": rom_code,
        "label": label,
        "manufacturer": manufacturer.value if manufacturer else None,
        "manufacturer_name": manufacturer.display_name if manufacturer else None,
        "calendar_short": calendar_short(record.year, record.week),
        "calendar": calendar(record.year, record.week),
        "year": record.year,
        "week": record.week,
    }
    return {column: "" if values[column] is None else str(values[column]) for column in ROW_COLUMNS}


__all__ = ["ROW_COLUMNS", "calendar", "calendar_short", "to_row"]
