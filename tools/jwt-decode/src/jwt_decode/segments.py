"""
Segment splitting and base64url decoding for JWT tokens.

A token is ``<header>.<payload>.<signature>``.  Header and payload are
base64url-encoded JSON; the signature is opaque bytes.
"""

from __future__ import annotations

import base64
import binascii
import json
import re
from dataclasses import dataclass
from typing import Any

from .errors import DecodeError, EncodingError, JSONSyntaxError

__all__ = [
    "Segments",
    "decode_base64url",
    "decode_raw",
    "decode_structured",
    "split_segments",
]

# Anything outside the URL-safe alphabet (padding is stripped beforehand)
_INVALID_CHAR_RE = re.compile(r"[^A-Za-z0-9_-]")


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Segments:
    """Dot-separated parts of a token, empty parts included."""

    parts: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.parts)

    def at(self, index: int) -> str | None:
        """Return the segment at *index*, or None if the token is too short."""
        if 0 <= index < len(self.parts):
            return self.parts[index]
        return None

    @property
    def first(self) -> str | None:
        return self.at(0)

    @property
    def second(self) -> str | None:
        return self.at(1)

    @property
    def third(self) -> str | None:
        return self.at(2)

    def has_more(self, count: int = 3) -> bool:
        """True if there is at least one segment after the first *count*."""
        return len(self.parts) > count


def split_segments(token: str) -> Segments:
    return Segments(tuple(token.split(".")))


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def decode_base64url(segment: str, label: str = "segment") -> bytes:
    """
    Decode a base64url segment, padded or unpadded.

    Only ``A-Z a-z 0-9 - _`` are accepted, followed by the exact amount
    of ``=`` padding the data length requires (or none at all).

    Raises:
        DecodeError: On a bad character, wrong padding, impossible length
            or non-zero trailing bits in the last symbol.
    """
    data = segment.rstrip("=")
    padding = len(segment) - len(data)

    bad = _INVALID_CHAR_RE.search(data)
    if bad:
        raise DecodeError(
            label, f"invalid character {bad.group()!r} at offset {bad.start()}"
        )

    required = -len(data) % 4
    if padding and padding != required:
        raise DecodeError(label, "incorrect padding")
    if len(data) % 4 == 1:
        raise DecodeError(
            label, f"invalid length {len(data)} (cannot be 1 more than a multiple of 4)"
        )

    try:
        decoded = base64.urlsafe_b64decode(data + "=" * required)
    except binascii.Error as exc:
        raise DecodeError(label, str(exc)) from exc

    # Unused low bits of the last symbol must be zero
    if base64.urlsafe_b64encode(decoded).rstrip(b"=") != data.encode("ascii"):
        raise DecodeError(label, "invalid last symbol")
    return decoded


def _reject_constant(name: str) -> Any:
    # json accepts NaN/Infinity by default, which is not valid JSON
    raise ValueError(f"invalid JSON constant {name!r}")


def decode_structured(segment: str, label: str = "segment") -> Any:
    """
    Decode a base64url segment holding UTF-8 JSON.

    Returns whatever JSON value the segment contains (object, array,
    string, number, boolean or None).

    Raises:
        DecodeError: If the segment is not valid base64url.
        EncodingError: If the decoded bytes are not valid UTF-8.
        JSONSyntaxError: If the text is not valid JSON, nests too deeply,
            or escapes an unpaired surrogate.
    """
    raw = decode_base64url(segment, label)

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(label, str(exc)) from exc

    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise JSONSyntaxError(label, str(exc)) from exc

    # json lets lone surrogate escapes such as \ud800 through
    try:
        json.dumps(value, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise JSONSyntaxError(label, f"lone surrogate in string escape: {exc}") from exc
    except RecursionError as exc:
        raise JSONSyntaxError(label, str(exc)) from exc
    return value


def decode_raw(segment: str, label: str = "signature") -> bytes:
    """Decode a base64url segment without interpreting the bytes."""
    return decode_base64url(segment, label)
