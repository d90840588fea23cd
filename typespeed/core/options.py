"""Command line flags and the test mode they select."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from typespeed.core.modes import DEFAULT_WORD_COUNT, QuoteMode, TestMode, TimeLimitMode, WordCountMode

DESCRIPTION = """A program to test your typing speed
  Controls:
    Esc - Exit test
    Tab - Restart test
    Letters - Enter input into the test
    Backspace - Undo input from the test
"""


class ConfigError(Exception):
    """Flags that cannot be combined into one test."""


@dataclass(frozen=True)
class Options:
    number: Optional[int] = None
    time: Optional[int] = None
    quote: bool = False
    custom_quote: Optional[str] = None
    seed: Optional[int] = None
    log_file: Optional[Path] = None


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a number above zero, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typespeed",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-n", "--number", type=_positive_int, metavar="WORDS",
        help="The number of words to type before a test ends",
    )
    parser.add_argument(
        "-t", "--time", type=_positive_int, metavar="SECONDS",
        help="How long the test should run in seconds",
    )
    parser.add_argument(
        "-q", "--quote", action="store_true",
        help="Whether or not the test should run in Quote Mode",
    )
    parser.add_argument(
        "-c", "--custom-quote", metavar="QUOTE",
        help="A custom quote to use",
    )
    parser.add_argument("--seed", type=int, help="Seed for the random word lines")
    parser.add_argument("--log-file", type=Path, metavar="PATH", help="Where to write the log")
    return parser


def parse_options(argv: Optional[Sequence[str]] = None) -> Options:
    args = build_parser().parse_args(argv)
    return Options(
        number=args.number,
        time=args.time,
        # a custom quote only makes sense in quote mode
        quote=args.quote or args.custom_quote is not None,
        custom_quote=args.custom_quote,
        seed=args.seed,
        log_file=args.log_file,
    )


def resolve_mode(options: Options) -> TestMode:
    """Pick the test mode, refusing more than one of number, time and quote."""
    chosen = [options.number is not None, options.time is not None, options.quote]
    if sum(chosen) > 1:
        raise ConfigError("Invalid combination of flags. Please do not pass conflicting flags.")
    if options.time is not None:
        return TimeLimitMode(options.time)
    if options.quote:
        return QuoteMode(custom=options.custom_quote)
    return WordCountMode(options.number if options.number is not None else DEFAULT_WORD_COUNT)
