from __future__ import annotations

import logging

import pytest

import jwt_decode.cli

SAMPLE_TOKEN = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
    ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ"
    ".SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
)


@pytest.fixture()
def sample_token() -> str:
    return SAMPLE_TOKEN


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _no_default_config(tmp_path, monkeypatch):
    """Keep a local config/config.yaml from leaking into CLI tests."""
    monkeypatch.setattr(
        jwt_decode.cli, "DEFAULT_CONFIG_PATH", str(tmp_path / "absent.yaml")
    )
