"""CLI entrypoints for chipmark commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import fields
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from .batch import decode_labels, read_labels, write_csv, write_unmatched
from .config import ChipmarkConfig, ConfigError, load_config
from .decoders import Decoder, available_decoders, discover_decoders
from .errors import DecodeError
from .logging import configure_logging, get_logger
from .models import Manufacturer

logger = get_logger("cli")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chipmark",
        description="Decode chip package markings into structured records.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .chipmark.yml or its directory (defaults to current directory).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a single label.",
    )
    _add_verbose_option(decode_parser, suppress_default=True)
    decode_parser.add_argument(
        "--kind",
        default="auto",
        help="Decoder to use (e.g. mask_rom, gen1_cpu); 'auto' tries the configured decoders.",
    )
    decode_parser.add_argument("label", help="Label text exactly as printed on the chip.")

    batch_parser = subparsers.add_parser(
        "batch",
        help="Decode every line of a transcription file.",
    )
    _add_verbose_option(batch_parser, suppress_default=True)
    batch_parser.add_argument(
        "--kind",
        default="auto",
        help="Decoder to use for every line; 'auto' tries the configured decoders.",
    )
    batch_parser.add_argument(
        "--csv",
        dest="csv_path",
        default=None,
        help="Write decoded rows to this CSV file.",
    )
    batch_parser.add_argument("path", help="File with one label per line.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for chipmark commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    verbose = bool(args.verbose or config.logging.verbose)
    configure_logging(verbose=verbose, log_file=config.logging.file)

    try:
        decoders = _select_decoders(args.kind, config)
    except ValueError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "decode":
        _run_decode(parser, args.label, decoders, verbose=verbose)
    elif args.command == "batch":
        _run_batch(parser, Path(args.path), decoders, args.csv_path, config)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _select_decoders(kind: str, config: ChipmarkConfig) -> List[Decoder[Any]]:
    if kind != "auto":
        return discover_decoders([kind])
    if config.decoders.enabled:
        return discover_decoders(config.decoders.enabled)
    return list(available_decoders().values())


def _run_decode(
    parser: argparse.ArgumentParser,
    label: str,
    decoders: List[Decoder[Any]],
    *,
    verbose: bool = False,
) -> None:
    for decoder in decoders:
        try:
            record = decoder.decode(label)
        except DecodeError as exc:
            parser.exit(1, f"chipmark decode failed: {exc}\n")
        if record is None:
            continue
        print(f"decoder: {decoder.name}")
        if verbose:
            print(f"grammar: {decoder.matcher_set.first_match(label)}")
        for item in fields(record):
            value = getattr(record, item.name)
            print(f"{item.name}: {_display(value)}")
        return
    parser.exit(1, "no match\n")


def _run_batch(
    parser: argparse.ArgumentParser,
    path: Path,
    decoders: List[Decoder[Any]],
    csv_path: Optional[str],
    config: ChipmarkConfig,
) -> None:
    try:
        labels = read_labels(path)
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")

    result = decode_labels(labels, decoders)

    if csv_path:
        write_csv(result.rows, Path(csv_path))
        logger.info("Wrote %d rows to %s", len(result.rows), csv_path)
    if config.output.unmatched_file is not None and result.unmatched:
        write_unmatched(result.unmatched, config.output.unmatched_file)
        logger.info(
            "Wrote %d unmatched labels to %s",
            len(result.unmatched),
            config.output.unmatched_file,
        )

    print(
        f"{len(result.rows)} decoded, {len(result.unmatched)} unmatched, "
        f"{len(result.errors)} invalid ({result.total} labels)"
    )
    if result.errors:
        parser.exit(1)


def _display(value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, Manufacturer):
        return value.display_name
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


if __name__ == "__main__":
    main(sys.argv[1:])
