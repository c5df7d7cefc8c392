"""Tests for decoder discovery."""

from __future__ import annotations

import pytest

import chipmark.decoders as decoders_module
from chipmark.decoders import Decoder, available_decoders, discover_decoders, get_decoder
from chipmark.matcher import Matcher


def test_builtin_decoders_are_available() -> None:
    names = [decoder.name for decoder in discover_decoders()]
    assert names[:2] == ["gen1_cpu", "mask_rom"]


def test_enabled_order_is_respected() -> None:
    names = [decoder.name for decoder in discover_decoders(["mask_rom", "GEN1_CPU", "mask_rom"])]
    assert names == ["mask_rom", "gen1_cpu"]


def test_unknown_decoder_raises() -> None:
    with pytest.raises(ValueError, match="Unknown decoders requested: nope"):
        discover_decoders(["nope"])


def test_get_decoder_decodes() -> None:
    decoder = get_decoder("gen1_cpu")
    assert decoder("B") is not None
    assert decoder.decode("DMG-CPU LR35902 8907 D").year == 1989


class _FakeEntryPoint:
    def __init__(self, name: str, target: object) -> None:
        self.name = name
        self._target = target

    def load(self) -> object:
        return self._target


def test_entry_point_plugins_are_discovered(monkeypatch: pytest.MonkeyPatch) -> None:
    def build():
        return [Matcher.compile("agb_cpu", r"CPU\ AGB", lambda m: "agb")]

    plugin = Decoder("agb_cpu", build)
    monkeypatch.setattr(
        decoders_module,
        "_iter_entry_points",
        lambda: [_FakeEntryPoint("agb_cpu", lambda: plugin)],
    )

    available = available_decoders()
    assert list(available) == ["gen1_cpu", "mask_rom", "agb_cpu"]
    assert get_decoder("agb_cpu").decode("CPU AGB") == "agb"


def test_entry_point_with_wrong_type_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        decoders_module,
        "_iter_entry_points",
        lambda: [_FakeEntryPoint("broken", object())],
    )
    with pytest.raises(TypeError):
        available_decoders()


def test_decoder_repr_reports_compile_state() -> None:
    decoder = Decoder("lazy", lambda: [Matcher.compile("x", r"X", lambda m: m[0])])
    assert repr(decoder) == "Decoder('lazy', pending)"

    decoder.decode("X")

    assert repr(decoder) == "Decoder('lazy', compiled)"
