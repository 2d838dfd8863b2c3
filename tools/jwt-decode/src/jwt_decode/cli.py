"""
CLI entry point for the JWT Decode tool.

The token can be given with ``-t/--token``, as a positional argument,
piped via ``--stdin``, or typed at an interactive prompt.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from . import __version__
from .config import (
    DEFAULT_CONFIG_PATH,
    OUTPUT_FORMATS,
    SIGNATURE_ENCODINGS,
    ConfigError,
    OutputConfig,
    load_config,
    parse_log_dir,
    parse_output_config,
)
from .decoder import parse_token
from .errors import TokenError
from .logging_setup import setup_logging
from .render import render

__all__ = ["main"]

logger = logging.getLogger(__name__)


def _fail(message: str, code: int = 1) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(code)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jwt-decode",
        description="Decode and inspect a JWT token without signature verification.",
        epilog="Examples:\n"
               "  %(prog)s                          # interactive prompt\n"
               "  %(prog)s <token>                   # pass token as argument\n"
               "  %(prog)s -t <token> -f json        # JSON output\n"
               "  echo '<token>' | %(prog)s --stdin  # read from stdin\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "token",
        nargs="?",
        default=None,
        help="JWT token string (optional, prompts interactively if omitted)",
    )
    parser.add_argument(
        "--token", "-t",
        dest="token_option",
        default=None,
        metavar="TOKEN",
        help="JWT token string (takes precedence over the positional argument)",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        default=False,
        help="Read token from stdin (for piping)",
    )
    parser.add_argument(
        "--format", "-f",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: text, or output.format from config)",
    )
    parser.add_argument(
        "--signature-encoding",
        choices=SIGNATURE_ENCODINGS,
        default=None,
        help="How to display the signature bytes (default: base64url)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (default: 4)",
    )
    parser.add_argument(
        "--sort-keys",
        action="store_true",
        default=None,
        help="Sort JSON/YAML object keys",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Path to YAML config file (default: config/config.yaml, if present)",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        metavar="DIR",
        help="Also write a debug log file into DIR",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (debug) logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _apply_overrides(output: OutputConfig, args: argparse.Namespace) -> OutputConfig:
    """Command-line flags win over config values."""
    if args.format:
        output.format = args.format
    if args.signature_encoding:
        output.signature = args.signature_encoding
    if args.indent is not None:
        if not 0 <= args.indent <= 16:
            _fail("--indent must be between 0 and 16.")
        output.indent = args.indent
    if args.sort_keys:
        output.sort_keys = True
    return output


def _read_token(args: argparse.Namespace) -> str:
    if args.token_option is not None:
        token = args.token_option
    elif args.token is not None:
        token = args.token
    elif args.stdin:
        token = sys.stdin.read()
    else:
        # Interactive mode
        print("JWT Token Decoder")
        print("=================")
        try:
            token = input("Please enter your JWT token: ")
        except (EOFError, KeyboardInterrupt):
            print()
            sys.exit(130)

    token = token.strip()
    if not token:
        _fail("No token received.")
    return token


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    setup_logging(verbose=args.verbose)

    # --- Config ------------------------------------------------------------
    try:
        cfg = load_config(args.config or DEFAULT_CONFIG_PATH, required=args.config is not None)
        output = parse_output_config(cfg)
        log_dir = args.log_dir or parse_log_dir(cfg)
    except ConfigError as exc:
        _fail(f"Configuration error: {exc}")

    if log_dir:
        log_path = setup_logging(verbose=args.verbose, log_dir=log_dir)
        logger.debug("Writing log file to %s", log_path)

    output = _apply_overrides(output, args)
    logger.debug(
        "Output format=%s signature=%s indent=%d sort_keys=%s",
        output.format, output.signature, output.indent, output.sort_keys,
    )

    # --- Decode ------------------------------------------------------------
    token = _read_token(args)
    logger.debug("Decoding token of %d characters", len(token))

    try:
        result = parse_token(token)
    except TokenError as exc:
        logger.debug("Token rejected (%s)", exc.kind)
        _fail(str(exc))

    print(render(result, output))
