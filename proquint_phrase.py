#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Convert numbers to proquint phrases and back.

CLI layer only:
- Argument parsing and stdin resolution
- Output and exit codes
- Delegates encoding/decoding to proquint_core
"""

import argparse
import sys

import proquint_core as core

__version__ = "1.0.0"

# Re-export for layering tests and safe shared usage.
encode = core.encode
decode = core.decode
random_phrase = core.random_phrase
to_phrase = core.to_phrase

EXIT_ENTROPY_FAILURE = 1
EXIT_BAD_INPUT = 2


def read_input(arg: str) -> str:
    if arg != "-":
        return arg
    if sys.stdin is None:
        raise OSError("stdin is not available")
    line = sys.stdin.readline()
    if not line:
        return arg
    return line.rstrip("\r\n")


def non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {n}")
    return n


def main():
    parser = argparse.ArgumentParser(
        description="Convert between numbers and proquint phrases (https://arxiv.org/html/0901.4016)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  python proquint_phrase.py 3232235777           -> decimal to phrase
  python proquint_phrase.py 0x7f000001           -> hex to phrase
  python proquint_phrase.py lusab-babad          -> phrase to decimal
  echo 42 | python proquint_phrase.py -          -> read one line from stdin
  python proquint_phrase.py -r 64                -> random 64-bit phrase
""",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="number (decimal or 0x-prefixed hex) or proquint phrase; '-' reads one line from stdin",
    )
    parser.add_argument(
        "-r",
        "--random",
        type=non_negative_int,
        default=0,
        metavar="BITS",
        help="generate a random proquint phrase with at least BITS bits if non-zero",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args()

    # Decimal text of arbitrary length must round-trip.
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)

    try:
        if args.random:
            print(random_phrase(args.random))

        if args.text is None:
            return

        print(to_phrase(read_input(args.text)))

    except RuntimeError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(EXIT_ENTROPY_FAILURE)
    except ValueError as e:
        print(e, file=sys.stderr)
        sys.exit(EXIT_BAD_INPUT)
    except OSError as e:
        print(f"error: cannot read input: {e}", file=sys.stderr)
        sys.exit(EXIT_BAD_INPUT)
    except KeyboardInterrupt:
        print("\ninterrupted", file=sys.stderr)
        sys.exit(0)


if __name__ == "__main__":
    main()
