"""Command-line interface for tinyland-bases.

Provides subcommands:
  encode - Encode raw bytes from stdin as text
  decode - Decode text from stdin back to raw bytes
  list   - List the available codecs

Configuration (flags override the environment):
  TINYLAND_BASES_CODEC      - Codec used when --codec is not given (default: base64)
  TINYLAND_BASES_LOG_LEVEL  - Log level when --log-level is not given (default: WARNING)

Exit codes:
    0 - Success
    1 - Input could not be decoded
    3 - Invalid arguments
"""

import argparse
import logging
import os
import sys

from tinyland_bases.errors import DecodeError, UnknownCodecError
from tinyland_bases.log import configure_logging
from tinyland_bases.registry import CODECS, Codec, get_codec

log = logging.getLogger(__name__)

CODEC_ENV = "TINYLAND_BASES_CODEC"
LOG_LEVEL_ENV = "TINYLAND_BASES_LOG_LEVEL"
DEFAULT_CODEC = "base64"
DEFAULT_LOG_LEVEL = "WARNING"


def _resolve_codec(args) -> Codec:
    """Resolve the codec from --codec, falling back to TINYLAND_BASES_CODEC.

    Exits with code 3 when the name is unknown.
    """
    name = getattr(args, "codec", None) or os.environ.get(CODEC_ENV) or DEFAULT_CODEC
    try:
        return get_codec(name)
    except UnknownCodecError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(3)


def _setup_logging(args) -> None:
    level = getattr(args, "log_level", None) or os.environ.get(
        LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL
    )
    try:
        configure_logging(level)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(3)


def _wrap(text: str, width: int) -> str:
    if width <= 0:
        return text
    return "\n".join(text[i : i + width] for i in range(0, len(text), width))


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


def cmd_encode(args) -> int:
    """Handle the 'encode' subcommand -- reads stdin bytes, writes text."""
    codec = _resolve_codec(args)
    raw = sys.stdin.buffer.read()
    encoded = codec.encode(raw)
    log.debug("Encoded %d octets as %d %s characters", len(raw), len(encoded), codec.name)
    sys.stdout.write(_wrap(encoded, args.wrap))
    return 0


def cmd_decode(args) -> int:
    """Handle the 'decode' subcommand -- reads stdin text, writes bytes."""
    codec = _resolve_codec(args)
    encoded = sys.stdin.read()
    if not encoded:
        return 0
    try:
        decoded = codec.decode(encoded, strict=True)
    except DecodeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    log.debug("Decoded %d %s characters to %d octets", len(encoded), codec.name, len(decoded))
    sys.stdout.buffer.write(decoded)
    return 0


def cmd_list(args) -> int:
    """Handle the 'list' subcommand."""
    for name in CODECS:
        print(name)
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


def _add_codec_arg(parser: argparse.ArgumentParser) -> None:
    """Add the common --codec argument to a subparser."""
    parser.add_argument(
        "-c",
        "--codec",
        default=None,
        help=f"Codec name or alias, e.g. base58 or 64 (default: ${CODEC_ENV} or {DEFAULT_CODEC})",
    )


def _non_negative(value: str) -> int:
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if width < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return width


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="tinyland-bases",
        description="Base16/32/45/58/64 encoder and decoder",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__import__('tinyland_bases').__version__}",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # -- encode --
    p_enc = sub.add_parser("encode", help="Encode raw bytes from stdin")
    _add_codec_arg(p_enc)
    p_enc.add_argument(
        "-w",
        "--wrap",
        type=_non_negative,
        default=0,
        help="Insert a newline every N output characters (default: 0, no wrapping)",
    )
    p_enc.set_defaults(func=cmd_encode)

    # -- decode --
    p_dec = sub.add_parser("decode", help="Decode text from stdin to raw bytes")
    _add_codec_arg(p_dec)
    p_dec.set_defaults(func=cmd_decode)

    # -- list --
    p_list = sub.add_parser("list", help="List available codecs")
    p_list.set_defaults(func=cmd_list)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args)
    return args.func(args)
