"""Tests for batch decoding and export."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

import pytest

from chipmark.batch import CSV_COLUMNS, decode_labels, read_labels, write_csv, write_unmatched
from chipmark.decoders import discover_decoders


def test_decode_labels_sorts_outcomes(caplog: pytest.LogCaptureFixture) -> None:
    decoders = discover_decoders(["mask_rom", "gen1_cpu"])
    labels = [
        "DMG-TRA-1 SHARP JAPAN A0 9019 D",
        "DMG-CPU LR35902 8907 D",
        "something else",
        "DMG-CPU C 9835 D",
        "DMG-CPU © 1989 Nintendo JAPAN 8954 D",
    ]

    with caplog.at_level(logging.INFO, logger="chipmark"):
        result = decode_labels(labels, decoders)

    assert [row["decoder"] for row in result.rows] == ["mask_rom", "gen1_cpu"]
    assert result.rows[0]["rom_code"] == "DMG-TRA-1"
    assert result.rows[1]["year"] == "1989"
    assert result.unmatched == ["something else", "DMG-CPU C 9835 D"]
    assert [label for label, _ in result.errors] == ["DMG-CPU © 1989 Nintendo JAPAN 8954 D"]
    assert result.total == 5
    assert "No grammar matches 'something else'" in caplog.text


def test_read_labels_keeps_text_verbatim(tmp_path: Path) -> None:
    path = tmp_path / "labels.txt"
    path.write_text("B\n\n DMG-CPU 9005 D\n", encoding="utf-8")

    assert read_labels(path) == ["B", " DMG-CPU 9005 D"]


def test_write_csv_and_unmatched(tmp_path: Path) -> None:
    result = decode_labels(["B", "??"], discover_decoders(["gen1_cpu"]))
    csv_path = tmp_path / "out.csv"
    unmatched_path = tmp_path / "unmatched.txt"

    write_csv(result.rows, csv_path)
    write_unmatched(result.unmatched, unmatched_path)

    with csv_path.open(encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle)
        assert tuple(reader.fieldnames or ()) == CSV_COLUMNS
        rows = list(reader)
    assert rows[0]["type"] == "DMG-CPU B (blob)"
    assert unmatched_path.read_text(encoding="utf-8") == "??\n"
