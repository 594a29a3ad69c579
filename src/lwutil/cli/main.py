"""Main CLI entry point for lwutil."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..codec import raw
from ..codec.varint import decode_varint, encode_varint
from ..exceptions import InvalidArgumentError, LwutilError
from ..types import check_uint
from ..utils.hexascii import u8_to_hex, u16_to_hex, u32_to_hex

logger = logging.getLogger(__name__)

_HEX_FORMATTERS = {8: u8_to_hex, 16: u16_to_hex, 32: u32_to_hex}

_STORE_FUNCTIONS = {
    (16, "le"): raw.store_u16_le,
    (16, "be"): raw.store_u16_be,
    (32, "le"): raw.store_u32_le,
    (32, "be"): raw.store_u32_be,
}


def _parse_int(text: str) -> int:
    """Parse an integer literal (decimal, 0x, 0o or 0b)."""
    try:
        return int(text, 0)
    except ValueError as e:
        raise InvalidArgumentError(f"Not an integer: {text!r}") from e


def _parse_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise InvalidArgumentError(f"Not a hex byte string: {text!r}") from e


def _format_bytes(data: bytes) -> str:
    return " ".join(f"{byte:02x}" for byte in data)


def run(args: argparse.Namespace) -> str | None:
    """Execute the command selected by args and return its output line.

    Returns:
        Text to print, or None if no command was selected

    Raises:
        LwutilError: If the input cannot be encoded or decoded
    """
    if args.encode_varint is not None:
        value = _parse_int(args.encode_varint)
        return _format_bytes(encode_varint(value))

    if args.decode_varint is not None:
        value, count = decode_varint(_parse_hex(args.decode_varint))
        return f"{value} ({count} byte{'s' if count != 1 else ''})"

    if args.hex is not None:
        width = args.width or 32
        return _HEX_FORMATTERS[width](_parse_int(args.hex))

    if args.store is not None:
        width = args.width or 32
        if width not in (16, 32):
            raise InvalidArgumentError(f"--store supports widths 16 and 32, got {width}")
        value = check_uint(_parse_int(args.store), width)
        buffer = bytearray(width // 8)
        _STORE_FUNCTIONS[(width, args.order)](value, buffer)
        return _format_bytes(bytes(buffer))

    return None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the lwutil command."""
    parser = argparse.ArgumentParser(
        prog="lwutil",
        description="lwutil: Lightweight byte-level utility codecs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lwutil --encode-varint 150                 Encode a varint (96 01)
  lwutil --decode-varint "9e a7 05"          Decode a varint (86942)
  lwutil --hex 0x5678 --width 32             Format as hex ASCII (00005678)
  lwutil --store 0x12345678 --order le       Fixed-width bytes (78 56 34 12)
        """,
    )

    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "--encode-varint",
        metavar="VALUE",
        help="Encode an unsigned 32-bit value as a varint",
    )
    commands.add_argument(
        "--decode-varint",
        metavar="HEX",
        help="Decode a varint given as hex bytes",
    )
    commands.add_argument(
        "--hex",
        metavar="VALUE",
        help="Format a value as fixed-width hex ASCII",
    )
    commands.add_argument(
        "--store",
        metavar="VALUE",
        help="Show the fixed-width byte layout of a value",
    )

    parser.add_argument(
        "--width",
        type=int,
        choices=(8, 16, 32),
        help="Integer width in bits for --hex and --store (default: 32)",
    )
    parser.add_argument(
        "--order",
        choices=("le", "be"),
        default="be",
        help="Byte order for --store (default: be)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"lwutil {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the lwutil CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s[%(levelname)s]: %(message)s",
        )

    try:
        output = run(args)
    except LwutilError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    if output is None:
        parser.print_help()
        return 0

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
