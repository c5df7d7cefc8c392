"""Configuration loading for chipmark (.chipmark.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".chipmark.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class DecoderConfig:
    """Decoders tried, in order, when a label's kind is not given."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class LoggingConfig:
    """Logging settings applied by the CLI."""

    verbose: bool = False
    file: Optional[Path] = None


@dataclass
class OutputConfig:
    """Where batch runs record labels that no grammar understood."""

    unmatched_file: Optional[Path] = None


@dataclass
class ChipmarkConfig:
    """Represents the settings defined in .chipmark.yml."""

    root: Path
    decoders: DecoderConfig = field(default_factory=DecoderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path) -> ChipmarkConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ChipmarkConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    decoders = DecoderConfig()
    decoder_data = _as_dict(data.get("decoders"))
    if decoder_data:
        decoders.enabled = _as_str_list(decoder_data.get("enabled"))

    logging_config = LoggingConfig()
    logging_data = _as_dict(data.get("logging"))
    if logging_data:
        logging_config.verbose = _as_bool(logging_data.get("verbose")) or False
        log_file = _as_str(logging_data.get("file"))
        logging_config.file = root / log_file if log_file else None

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        unmatched = _as_str(output_data.get("unmatched_file"))
        output.unmatched_file = root / unmatched if unmatched else None

    return ChipmarkConfig(root=root, decoders=decoders, logging=logging_config, output=output)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
