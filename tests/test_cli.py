"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from chipmark.cli import _build_parser, main


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "decode", "B"])
    assert args.verbose is True
    assert args.command == "decode"
    assert args.kind == "auto"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["batch", "labels.txt", "--verbose", "--kind", "mask_rom"])
    assert args.verbose is True
    assert args.command == "batch"
    assert args.kind == "mask_rom"
    assert args.path == "labels.txt"


def test_decode_prints_record(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["--config", str(tmp_path), "decode", "STANDARD MICRO DMG-BIA-0 C1 23C1001EGW-J61 9140E9017"])

    out = capsys.readouterr().out
    assert "decoder: mask_rom" in out
    assert "manufacturer: Standard Microsystems" in out
    assert "year: 1991" in out
    assert "week: 40" in out


def test_decode_reports_no_match(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "decode", "--kind", "gen1_cpu", "nothing"])

    assert excinfo.value.code == 1
    assert "no match" in capsys.readouterr().err


def test_decode_reports_invalid_label(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "decode", "DMG-CPU © 1989 Nintendo JAPAN 8954 D"])

    assert excinfo.value.code == 1
    assert "week out of range: '54'" in capsys.readouterr().err


def test_decode_short_label_revision_c_is_no_match(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "decode", "DMG-CPU C 9835 D"])

    assert excinfo.value.code == 1
    assert "no match" in capsys.readouterr().err


def test_unknown_kind_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "decode", "--kind", "agb_cpu", "B"])
    assert excinfo.value.code == 1


def test_batch_writes_csv_and_unmatched(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / ".chipmark.yml").write_text(
        "decoders:\n  enabled: [gen1_cpu, mask_rom]\noutput:\n  unmatched_file: unmatched.txt\n",
        encoding="utf-8",
    )
    labels = tmp_path / "labels.txt"
    labels.write_text("B\nLR0G150 DMG-TRA-1 97141\nmystery\n", encoding="utf-8")
    csv_path = tmp_path / "out.csv"

    main(["--config", str(tmp_path), "batch", str(labels), "--csv", str(csv_path)])

    assert "2 decoded, 1 unmatched, 0 invalid (3 labels)" in capsys.readouterr().out
    assert csv_path.read_text(encoding="utf-8").startswith("decoder,type,rom_code,label")
    assert (tmp_path / "unmatched.txt").read_text(encoding="utf-8") == "mystery\n"


def test_batch_exits_nonzero_on_invalid_labels(tmp_path: Path) -> None:
    labels = tmp_path / "labels.txt"
    labels.write_text("DMG-CPU © 1989 Nintendo JAPAN 8960 D\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path), "batch", "--kind", "gen1_cpu", str(labels)])
    assert excinfo.value.code == 1


def test_decode_verbose_names_the_grammar(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["--config", str(tmp_path), "decode", "-v", "--kind", "gen1_cpu", "DMG-CPU LR35902 8907 D"])

    out = capsys.readouterr().out
    assert "grammar: dmg_cpu_lr35902" in out
    assert "year: 1989" in out


def test_decode_without_verbose_omits_the_grammar(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["--config", str(tmp_path), "decode", "B"])

    assert "grammar:" not in capsys.readouterr().out
