"""
Output formatting for decoded tokens (text, JSON, YAML).
"""

from __future__ import annotations

import json

import yaml
from jwt.utils import base64url_encode

from .config import OutputConfig
from .decoder import Token

__all__ = ["encode_signature", "render", "token_to_dict"]


def encode_signature(signature: bytes, encoding: str = "base64url") -> str:
    """Encode raw signature bytes for display (base64url is unpadded)."""
    if encoding == "hex":
        return signature.hex()
    if encoding == "base64url":
        return base64url_encode(signature).decode("ascii")
    raise ValueError(f"Unknown signature encoding: {encoding!r}")


def token_to_dict(token: Token, encoding: str = "base64url") -> dict:
    return {
        "header": token.header,
        "payload": token.payload,
        "signature": encode_signature(token.signature, encoding),
    }


def _dump_json(data, output: OutputConfig) -> str:
    return json.dumps(data, indent=output.indent, sort_keys=output.sort_keys, ensure_ascii=False)


def _render_text(token: Token, output: OutputConfig) -> str:
    sections = [
        f"Header:\n{_dump_json(token.header, output)}",
        f"Payload:\n{_dump_json(token.payload, output)}",
        f"Signature ({output.signature}):\n"
        f"{encode_signature(token.signature, output.signature)}",
    ]
    return "\n\n".join(sections)


def render(token: Token, output: OutputConfig) -> str:
    """Render *token* in the configured format, without a trailing newline."""
    if output.format == "text":
        return _render_text(token, output)

    doc = token_to_dict(token, output.signature)
    if output.format == "json":
        return _dump_json(doc, output)
    if output.format == "yaml":
        return yaml.safe_dump(
            doc,
            sort_keys=output.sort_keys,
            default_flow_style=False,
            allow_unicode=True,
        ).rstrip("\n")
    raise ValueError(f"Unknown output format: {output.format!r}")
