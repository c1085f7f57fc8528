"""
Command-line interface for lightid.

Usage:
    lightid [--alphabet A] [--min-length N] <command> [args...]

Commands:
    take [--start N | --after ID] [-n COUNT]   Print the next COUNT identifiers
    nth <n>                                    Identifier at ordinal n
    index <id>                                 Ordinal of an identifier
    length <n>                                 Display length of ordinal n
    switch <id> --target B [--reverse]         Convert an identifier between alphabets

Environment:
    LIGHT_ID_ALPHABET     Default alphabet (default: 0-9, a-z, A-Z)
    LIGHT_ID_MIN_LENGTH   Default minimum length (default: 0)
"""
from __future__ import annotations

import argparse
import itertools
import logging
import sys

from lightid.core.numeral import encoded_length
from lightid.engine.generator import GeneratorConfig, SequenceGenerator
from lightid.engine.switcher import Direction, IdSwitcher


def _generator(args: argparse.Namespace) -> SequenceGenerator:
    return SequenceGenerator(args.alphabet, args.min_length)


def cmd_take(args: argparse.Namespace) -> int:
    """Print the next identifiers from a starting position."""
    gen = _generator(args)
    if args.after is not None:
        gen.jump_to_text(args.after).advance()
    else:
        gen.jump_to(args.start)
    for value in itertools.islice(gen, args.n):
        print(value)
    return 0


def cmd_nth(args: argparse.Namespace) -> int:
    print(_generator(args).nth(args.n))
    return 0


def cmd_index(args: argparse.Namespace) -> int:
    print(_generator(args).index(args.id))
    return 0


def cmd_length(args: argparse.Namespace) -> int:
    print(encoded_length(args.n, args.alphabet, args.min_length))
    return 0


def cmd_switch(args: argparse.Namespace) -> int:
    """Convert an identifier from --source to --target (or back with --reverse)."""
    switcher = IdSwitcher(args.source or args.alphabet, args.target,
                          args.source_min, args.target_min)
    direction = Direction.REVERSE if args.reverse else Direction.FORWARD
    print(switcher.convert(args.id, direction))
    return 0


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {n}")
    return n


def create_parser(config: GeneratorConfig | None = None) -> argparse.ArgumentParser:
    """Create the argument parser, with defaults taken from config."""
    config = config or GeneratorConfig.from_env()
    parser = argparse.ArgumentParser(
        prog="lightid",
        description="Short sequential identifiers over custom alphabets",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--alphabet", default=config.alphabet,
                        help="Ordered digit symbols (default: $LIGHT_ID_ALPHABET or 0-9a-zA-Z)")
    parser.add_argument("--min-length", type=_non_negative, default=config.min_length,
                        help="Pad identifiers to at least this many symbols")

    sub = parser.add_subparsers(dest="command", required=True)

    p_take = sub.add_parser("take", help="Print the next identifiers")
    start = p_take.add_mutually_exclusive_group()
    start.add_argument("--start", type=_non_negative, default=0,
                       help="Ordinal of the first identifier (default: 0)")
    start.add_argument("--after", help="Continue after this identifier")
    p_take.add_argument("-n", type=_non_negative, default=1,
                        help="How many identifiers to print (default: 1)")
    p_take.set_defaults(func=cmd_take)

    p_nth = sub.add_parser("nth", help="Identifier at an ordinal")
    p_nth.add_argument("n", type=_non_negative)
    p_nth.set_defaults(func=cmd_nth)

    p_index = sub.add_parser("index", help="Ordinal of an identifier")
    p_index.add_argument("id")
    p_index.set_defaults(func=cmd_index)

    p_length = sub.add_parser("length", help="Display length of an ordinal")
    p_length.add_argument("n", type=_non_negative)
    p_length.set_defaults(func=cmd_length)

    p_switch = sub.add_parser("switch", help="Convert an identifier between alphabets")
    p_switch.add_argument("id")
    p_switch.add_argument("--target", required=True, help="Target alphabet")
    p_switch.add_argument("--source", help="Source alphabet (default: --alphabet)")
    p_switch.add_argument("--reverse", action="store_true",
                          help="Convert from target back to source")
    p_switch.add_argument("--source-min", type=_non_negative, default=0,
                          help="Minimum length of reverse conversions")
    p_switch.add_argument("--target-min", type=_non_negative, default=0,
                          help="Minimum length of forward conversions")
    p_switch.set_defaults(func=cmd_switch)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        parser = create_parser()
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")

    try:
        return args.func(args)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
