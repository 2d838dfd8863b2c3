"""
Core JWT decoding logic.

Decodes a JWT token without signature verification and returns the
header, payload, and raw signature bytes as structured data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import MissingPartError, UnknownPartError
from .segments import decode_raw, decode_structured, split_segments

__all__ = ["Token", "parse_token"]


@dataclass(frozen=True)
class Token:
    """Holds the three decoded parts of a JWT token."""

    header: Any
    payload: Any
    signature: bytes


def _require(part: str | None, label: str) -> str:
    if part is None:
        raise MissingPartError(label)
    return part


def parse_token(token: str) -> Token:
    """
    Decode a JWT token string into its three components.

    Segments are processed strictly in order (header, payload, signature)
    and the first failure is raised.  Extra segments are only reported
    once all three required segments have decoded, so a malformed header
    wins over a trailing fourth segment.

    Signature verification is **not** performed; this is for inspection only.

    Raises:
        TokenError: The specific subclass describes what was wrong.
    """
    segments = split_segments(token)

    header = decode_structured(_require(segments.first, "header"), "header")
    payload = decode_structured(_require(segments.second, "payload"), "payload")
    signature = decode_raw(_require(segments.third, "signature"), "signature")

    if segments.has_more(3):
        raise UnknownPartError(len(segments))

    return Token(header=header, payload=payload, signature=signature)
