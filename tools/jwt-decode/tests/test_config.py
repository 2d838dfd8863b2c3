from __future__ import annotations

import os
from pathlib import Path

import pytest

from jwt_decode.config import (
    PROJECT_ROOT,
    ConfigError,
    OutputConfig,
    load_config,
    parse_log_dir,
    parse_output_config,
)


def _write(tmp_path: Path, text: str) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------

def test_missing_optional_config_is_empty(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "nope.yaml")) == {}


def test_missing_required_config(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(str(tmp_path / "nope.yaml"), required=True)


def test_empty_config_file(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, ""), required=True) == {}


def test_load_config(tmp_path: Path) -> None:
    path = _write(tmp_path, "output:\n  format: yaml\n  indent: 2\n")

    assert load_config(path) == {"output": {"format": "yaml", "indent": 2}}


def test_malformed_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write(tmp_path, "output: [unclosed\n"))


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="must contain a mapping"):
        load_config(_write(tmp_path, "- text\n- json\n"))


def test_shipped_example_is_valid() -> None:
    example = os.path.join(PROJECT_ROOT, "config", "config.yaml.example")

    cfg = load_config(example, required=True)

    assert parse_output_config(cfg) == OutputConfig()
    assert parse_log_dir(cfg) is None


# ---------------------------------------------------------------------------
# parse_output_config
# ---------------------------------------------------------------------------

def test_output_defaults() -> None:
    assert parse_output_config({}) == OutputConfig(
        format="text", indent=4, sort_keys=False, signature="base64url"
    )


def test_output_values() -> None:
    cfg = {"output": {"format": "json", "indent": 0, "sort_keys": True, "signature": "hex"}}

    assert parse_output_config(cfg) == OutputConfig(
        format="json", indent=0, sort_keys=True, signature="hex"
    )


@pytest.mark.parametrize(
    "output, message",
    [
        ({"format": "xml"}, "output.format"),
        ({"indent": True}, "output.indent"),
        ({"indent": "4"}, "output.indent"),
        ({"indent": 17}, "output.indent"),
        ({"indent": -1}, "output.indent"),
        ({"sort_keys": "yes"}, "output.sort_keys"),
        ({"signature": "base64"}, "output.signature"),
    ],
)
def test_invalid_output_values(output: dict, message: str) -> None:
    with pytest.raises(ConfigError, match=message):
        parse_output_config({"output": output})


def test_output_section_must_be_mapping() -> None:
    with pytest.raises(ConfigError, match="'output' must be a mapping"):
        parse_output_config({"output": "json"})


# ---------------------------------------------------------------------------
# parse_log_dir
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("cfg", [{}, {"logging": None}, {"logging": {"directory": ""}}])
def test_log_dir_disabled(cfg: dict) -> None:
    assert parse_log_dir(cfg) is None


def test_relative_log_dir_resolves_to_tool_root() -> None:
    assert parse_log_dir({"logging": {"directory": "logs"}}) == os.path.join(PROJECT_ROOT, "logs")


def test_absolute_log_dir(tmp_path: Path) -> None:
    assert parse_log_dir({"logging": {"directory": str(tmp_path)}}) == str(tmp_path)


def test_log_dir_must_be_string() -> None:
    with pytest.raises(ConfigError, match="logging.directory"):
        parse_log_dir({"logging": {"directory": 5}})
