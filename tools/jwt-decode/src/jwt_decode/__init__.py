"""JWT Decode: inspect JWT tokens without signature verification."""

__version__ = "1.0.0"

from .decoder import Token, parse_token
from .errors import (
    DecodeError,
    EncodingError,
    JSONSyntaxError,
    MissingPartError,
    TokenError,
    UnknownPartError,
)

__all__ = [
    "DecodeError",
    "EncodingError",
    "JSONSyntaxError",
    "MissingPartError",
    "Token",
    "TokenError",
    "UnknownPartError",
    "parse_token",
]
