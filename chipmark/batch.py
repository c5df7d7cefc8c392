"""Decode many labels at once and export the results."""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from .decoders import Decoder
from .errors import DecodeError
from .formatting import ROW_COLUMNS, to_row
from .logging import get_logger

logger = get_logger("batch")

CSV_COLUMNS: Tuple[str, ...] = ("decoder",) + ROW_COLUMNS


@dataclass
class BatchResult:
    """Outcome of decoding a list of labels."""

    rows: List[Dict[str, str]] = field(default_factory=list)
    unmatched: List[str] = field(default_factory=list)
    errors: List[Tuple[str, DecodeError]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.rows) + len(self.unmatched) + len(self.errors)


def decode_labels(labels: Iterable[str], decoders: Sequence[Decoder[Any]]) -> BatchResult:
    """Run each label through ``decoders`` in order, keeping the first hit.

    A decode error ends the search for that label; it is reported rather
    than handed to the next decoder.
    """
    result = BatchResult()
    for label in labels:
        for decoder in decoders:
            try:
                record = decoder.decode(label)
            except DecodeError as exc:
                logger.warning("Invalid %s label %r: %s", decoder.name, label, exc)
                result.errors.append((label, exc))
                break
            if record is not None:
                row = {"decoder": decoder.name}
                row.update(to_row(record, label))
                result.rows.append(row)
                break
        else:
            logger.info("No grammar matches %r", label)
            result.unmatched.append(label)
    return result


def read_labels(path: Path) -> List[str]:
    """Return the non-empty lines of a label transcription file."""
    text = path.read_text(encoding="utf-8")
    return [line for line in text.splitlines() if line]


def write_csv(rows: Iterable[Dict[str, str]], path: Path) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(CSV_COLUMNS))
        writer.writeheader()
        for row in rows:
            writer.writerow(row)


def write_unmatched(labels: Iterable[str], path: Path) -> None:
    path.write_text("".join(f"{label}\n" for label in labels), encoding="utf-8")


__all__ = [
    "BatchResult",
    "CSV_COLUMNS",
    "decode_labels",
    "read_labels",
    "write_csv",
    "write_unmatched",
]
