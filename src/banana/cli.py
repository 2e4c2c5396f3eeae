"""
Command-line interface for base banana.

Usage:
    banana encode 1000                 # duga
    banana decode duga                 # 1000
    banana check duga                  # yes (exit 0) / no (exit 1)
    banana -a abc:qwe:123 encode 27    # aq2aq1
    banana random -l 8

Defaults for the global options come from the environment, see
banana.config.
"""
from __future__ import annotations

import argparse
import sys

from . import __version__, config
from .core.alphabet import parse_alphabets
from .core.codec import MAX_VALUE, decode, encode, is_valid, random
from .errors import BananaError
from .log import get_logger, setup_logging

logger = get_logger("cli")


def unsigned64(text: str) -> int:
    """argparse type for a value that fits in an unsigned 64-bit integer."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if not 0 <= value <= MAX_VALUE:
        raise argparse.ArgumentTypeError(f"must be 0-{MAX_VALUE}, got {value}")
    return value


def cmd_encode(args: argparse.Namespace) -> int:
    """Convert number to word."""
    print(encode(args.num, args.shiftalpha, args.alphaend, args.minlength, args.alphabets))
    return 0


def cmd_decode(args: argparse.Namespace) -> int:
    """Convert word to number."""
    print(decode(args.word, args.shiftalpha, args.alphaend, args.alphabets))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Check if word is banana."""
    valid = is_valid(args.word, args.shiftalpha, args.alphaend, args.alphabets)
    if not args.quiet:
        print("yes" if valid else "no")
    return 0 if valid else 1


def cmd_random(args: argparse.Namespace) -> int:
    """Generate random banana."""
    print(random(args.shiftalpha, args.alphaend, args.minlength, args.alphabets))
    return 0


def create_parser(settings: dict | None = None) -> argparse.ArgumentParser:
    """Create the argument parser, with defaults from the environment."""
    if settings is None:
        settings = config.load()

    parser = argparse.ArgumentParser(
        prog="banana",
        description="Convert numbers to and from pronounceable base banana words",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-a", "--alphabets",
        type=parse_alphabets,
        default=settings["alphabets"],
        help="Set alphabets in colon-separated list",
    )
    parser.add_argument(
        "-s", "--shiftalpha",
        type=int,
        default=settings["shift"],
        help="Set shift for alphabets",
    )
    parser.add_argument(
        "-e", "--alphaend",
        type=int,
        default=settings["end"],
        help="Set ending alphabet",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    encode_parser = subparsers.add_parser("encode", help="Convert number to word")
    encode_parser.add_argument("num", type=unsigned64, help="Number to encode")
    encode_parser.add_argument(
        "-l", "--minlength",
        type=int,
        default=settings["min_length"],
        help="Set minimum length",
    )
    encode_parser.set_defaults(func=cmd_encode)

    decode_parser = subparsers.add_parser("decode", help="Convert word to number")
    decode_parser.add_argument("word", help="Word to decode")
    decode_parser.set_defaults(func=cmd_decode)

    check_parser = subparsers.add_parser("check", help="Check if word is banana")
    check_parser.add_argument("word", help="Word to check")
    check_parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only set the exit status",
    )
    check_parser.set_defaults(func=cmd_check)

    random_parser = subparsers.add_parser("random", help="Generate random banana")
    random_parser.add_argument(
        "-l", "--minlength",
        type=int,
        default=settings["min_length"],
        help="Set minimum length",
    )
    random_parser.set_defaults(func=cmd_random)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        settings = config.load()
        parser = create_parser(settings)
        args = parser.parse_args(argv)
        setup_logging("DEBUG" if args.verbose else settings["log_level"])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    logger.debug("Running %s", args.command)

    try:
        return args.func(args)
    except BananaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
