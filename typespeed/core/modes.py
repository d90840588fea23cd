"""Termination modes of a typing test."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from typespeed.core.text import TextCursor

DEFAULT_WORD_COUNT = 30


@dataclass(frozen=True)
class WordCountMode:
    """Stop after a number of correctly typed words."""

    target: int = DEFAULT_WORD_COUNT

    def __str__(self) -> str:
        return f"{self.target} words"


@dataclass(frozen=True)
class TimeLimitMode:
    """Stop once a number of seconds has passed since the first keystroke."""

    seconds: int

    def __str__(self) -> str:
        return f"{self.seconds} seconds"


@dataclass
class QuoteMode:
    """Stop when the quote has been typed out.

    ``custom`` is replayed on every reset; without it a new quote is
    fetched each time.
    """

    custom: Optional[str] = None
    cursor: TextCursor = field(default_factory=TextCursor)

    def __str__(self) -> str:
        return "quote"

    def refill(self, fetch: Callable[[], str]) -> None:
        self.cursor.reset(self.custom if self.custom is not None else fetch())


TestMode = Union[WordCountMode, TimeLimitMode, QuoteMode]
