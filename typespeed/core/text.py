"""Whitespace word splitting and a cursor over a finite source text."""

from __future__ import annotations

from typing import Tuple


def take_words(text: str, count: int) -> Tuple[str, str]:
    """Split *text* into its first *count* words and the rest.

    Both halves are rejoined with single spaces, so runs of whitespace in
    the source collapse.
    """
    words = text.split()
    return " ".join(words[:count]), " ".join(words[count:])


class TextCursor:
    """Remaining, not yet consumed part of a quote."""

    def __init__(self, text: str = "") -> None:
        self._remaining = text

    @property
    def remaining(self) -> str:
        return self._remaining

    def take(self, count: int) -> str:
        """Consume up to *count* words and return them space-joined."""
        head, self._remaining = take_words(self._remaining, count)
        return head

    def reset(self, text: str) -> None:
        self._remaining = text
