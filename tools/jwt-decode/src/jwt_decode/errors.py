"""
Error taxonomy for JWT parsing.

Every failure is a permanent rejection of malformed input, so there is no
retry logic anywhere.  Callers catch ``TokenError`` to handle all of them.
"""

from __future__ import annotations

__all__ = [
    "DecodeError",
    "EncodingError",
    "JSONSyntaxError",
    "MissingPartError",
    "TokenError",
    "UnknownPartError",
]


class TokenError(Exception):
    """Base class for all JWT parsing errors."""

    kind = "token"

    def __init__(self, message: str, segment: str | None = None) -> None:
        super().__init__(message)
        self.segment = segment


class MissingPartError(TokenError):
    """Raised when the token has fewer than three segments."""

    kind = "missing_part"

    def __init__(self, segment: str) -> None:
        super().__init__(
            "Missing part: expected 3 segments (header.payload.signature), "
            f"token has no {segment}",
            segment,
        )


class UnknownPartError(TokenError):
    """Raised when segments follow the signature."""

    kind = "unknown_part"

    def __init__(self, count: int) -> None:
        super().__init__(f"Unknown part: token has {count} segments, expected 3")
        self.count = count


class DecodeError(TokenError):
    """Raised when a segment is not valid base64url."""

    kind = "decode"

    def __init__(self, segment: str, detail: str) -> None:
        super().__init__(f"Invalid base64url in {segment}: {detail}", segment)


class EncodingError(TokenError):
    """Raised when a header or payload segment is not valid UTF-8."""

    kind = "encoding"

    def __init__(self, segment: str, detail: str) -> None:
        super().__init__(f"UTF-8 error in {segment}: {detail}", segment)


class JSONSyntaxError(TokenError):
    """Raised when a header or payload segment is not valid JSON."""

    kind = "syntax"

    def __init__(self, segment: str, detail: str) -> None:
        super().__init__(f"JSON syntax error in {segment}: {detail}", segment)
