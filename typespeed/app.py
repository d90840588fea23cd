"""Application entry point and setup for the typespeed typing test."""

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from typespeed.core.options import ConfigError, parse_options, resolve_mode
from typespeed.core.quote import QuoteError
from typespeed.core.session import TypingTest
from typespeed.core.words import WordCorpus
from typespeed.ui.terminal import TerminalSurface

DEFAULT_LOG_FILE = Path.home() / ".typespeed" / "typespeed.log"


def configure_logging(log_file: Optional[Path] = None) -> None:
    """Configure application-wide logging with a standard format.

    curses owns the terminal while a test runs, so records go to a file.
    """
    path = log_file or DEFAULT_LOG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=str(path),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse flags, run one typing test and print its score. Returns the exit code."""
    options = parse_options(argv)
    try:
        mode = resolve_mode(options)
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 2

    configure_logging(options.log_file)
    corpus = WordCorpus.load(seed=options.seed)
    try:
        test = TypingTest(mode, corpus)
        score = test.run(TerminalSurface())
    except QuoteError as e:
        logging.error("Giving up: %s", e)
        print(e, file=sys.stderr)
        return 1

    if score is not None:
        for line in score.summary():
            print(line)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
