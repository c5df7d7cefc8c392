"""Label decoders and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Any, Dict, Iterable, List, Sequence

from .base import Decoder
from .gen1_cpu import DECODER as GEN1_CPU_DECODER, decode_gen1_cpu
from .mask_rom import DECODER as MASK_ROM_DECODER, decode_mask_rom

_ENTRY_POINT_GROUP = "chipmark.decoders"

_BUILTIN_DECODERS: Dict[str, Decoder[Any]] = {
    "gen1_cpu": GEN1_CPU_DECODER,
    "mask_rom": MASK_ROM_DECODER,
}


def available_decoders() -> Dict[str, Decoder[Any]]:
    """Return built-in decoders followed by those registered as plugins."""
    decoders: Dict[str, Decoder[Any]] = dict(_BUILTIN_DECODERS)
    for entry in _iter_entry_points():
        key = entry.name.lower()
        if key in decoders:
            continue
        try:
            loaded = entry.load()
        except Exception as exc:
            raise RuntimeError(f"Failed to load decoder entry point '{entry.name}': {exc}") from exc
        decoders[key] = _coerce_decoder(entry.name, loaded)
    return decoders


def discover_decoders(enabled: Sequence[str] | None = None) -> List[Decoder[Any]]:
    """Return decoders in the order given by ``enabled`` (all when omitted)."""
    decoders = available_decoders()
    if enabled is None:
        return list(decoders.values())

    missing = sorted({name for name in enabled if name.lower() not in decoders})
    if missing:
        raise ValueError(f"Unknown decoders requested: {', '.join(missing)}")

    result: List[Decoder[Any]] = []
    for name in enabled:
        decoder = decoders[name.lower()]
        if decoder not in result:
            result.append(decoder)
    return result


def get_decoder(name: str) -> Decoder[Any]:
    return discover_decoders([name])[0]


def _coerce_decoder(name: str, obj: object) -> Decoder[Any]:
    if isinstance(obj, Decoder):
        return obj
    if callable(obj):
        instance = obj()
        if isinstance(instance, Decoder):
            return instance
    raise TypeError(f"Decoder entry point '{name}' must be a Decoder or a factory returning one")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points(group=_ENTRY_POINT_GROUP)


__all__ = [
    "Decoder",
    "available_decoders",
    "decode_gen1_cpu",
    "decode_mask_rom",
    "discover_decoders",
    "get_decoder",
]
