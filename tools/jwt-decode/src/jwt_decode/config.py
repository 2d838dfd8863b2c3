"""
Configuration loading and validation for the JWT Decode tool.

The config file is optional.  When the default file does not exist the
built-in defaults apply; an explicitly requested file must exist.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "OUTPUT_FORMATS",
    "PROJECT_ROOT",
    "SIGNATURE_ENCODINGS",
    "ConfigError",
    "OutputConfig",
    "load_config",
    "parse_log_dir",
    "parse_output_config",
]

logger = logging.getLogger(__name__)

# Tool root directory (tools/jwt-decode), two levels up from this file
PROJECT_ROOT = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)

DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config", "config.yaml")

OUTPUT_FORMATS = ("text", "json", "yaml")
SIGNATURE_ENCODINGS = ("base64url", "hex")

_MAX_INDENT = 16


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""


@dataclass
class OutputConfig:
    """How a decoded token is rendered."""

    format: str = "text"
    indent: int = 4
    sort_keys: bool = False
    signature: str = "base64url"


def load_config(config_path: str, required: bool = False) -> dict:
    """Load the YAML configuration file.

    Returns an empty dict when the file is absent (and not *required*)
    or empty.

    Raises:
        ConfigError: If a required file is missing, the YAML is malformed,
            or the top level is not a mapping.
    """
    path = Path(config_path)
    if not path.exists():
        if required:
            raise ConfigError(
                f"Config file not found: {config_path}\n"
                "Copy config/config.yaml.example to config/config.yaml and adjust it."
            )
        logger.debug("No config file at %s, using defaults", config_path)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")

    logger.debug("Config loaded from %s", config_path)
    return cfg


def _section(cfg: dict, name: str) -> dict:
    section = cfg.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    return section


def parse_output_config(cfg: dict) -> OutputConfig:
    """Extract and validate output settings from the config dict."""
    out = _section(cfg, "output")

    fmt = out.get("format", "text")
    if fmt not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, got {fmt!r}"
        )

    indent = out.get("indent", 4)
    # bool is an int subclass; reject it explicitly
    if isinstance(indent, bool) or not isinstance(indent, int) or not 0 <= indent <= _MAX_INDENT:
        raise ConfigError(
            f"output.indent must be an integer between 0 and {_MAX_INDENT}, got {indent!r}"
        )

    sort_keys = out.get("sort_keys", False)
    if not isinstance(sort_keys, bool):
        raise ConfigError(f"output.sort_keys must be true or false, got {sort_keys!r}")

    signature = out.get("signature", "base64url")
    if signature not in SIGNATURE_ENCODINGS:
        raise ConfigError(
            f"output.signature must be one of {', '.join(SIGNATURE_ENCODINGS)}, "
            f"got {signature!r}"
        )

    return OutputConfig(format=fmt, indent=indent, sort_keys=sort_keys, signature=signature)


def parse_log_dir(cfg: dict) -> str | None:
    """Return the log directory from config, resolved against the tool root.

    An empty or missing ``logging.directory`` disables the log file.
    """
    directory = _section(cfg, "logging").get("directory") or ""
    if not isinstance(directory, str):
        raise ConfigError("logging.directory must be a string")
    if not directory:
        return None
    if not os.path.isabs(directory):
        directory = os.path.join(PROJECT_ROOT, directory)
    return directory
