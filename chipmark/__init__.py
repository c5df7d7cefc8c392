"""Decode chip package markings into structured records."""

from .decoders import decode_gen1_cpu, decode_mask_rom, get_decoder
from .errors import DecodeError
from .models import Gen1Cpu, Gen1CpuKind, Manufacturer, MaskRom, Year, YearPrecision

__all__ = [
    "DecodeError",
    "Gen1Cpu",
    "Gen1CpuKind",
    "Manufacturer",
    "MaskRom",
    "Year",
    "YearPrecision",
    "decode_gen1_cpu",
    "decode_mask_rom",
    "get_decoder",
]
