"""Main CLI entry point for ydt."""

import argparse
import logging
import sys

from ydt import __version__
from ydt.cli.commands import lookup


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="ydt",
        description="Look up a word on Youdao and print its phonetics and translations",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests and fallback decisions to stderr",
    )
    # ydt <word>
    parser.add_argument("word", help="Word to translate (English or Chinese)")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    return lookup.lookup_command(args)


if __name__ == "__main__":
    sys.exit(main())
