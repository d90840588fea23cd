from __future__ import annotations

from typing import List

from typespeed.core.render import Style, Surface
from typespeed.core.text import TextCursor
from typespeed.core.words import WordCorpus

LINE_LEN = 10


class Line:
    """Target text for one row of the test plus what the user typed against it."""

    def __init__(self, expected: str = "") -> None:
        self._expected = expected
        self._buffer: List[str] = []

    @classmethod
    def random(cls, corpus: WordCorpus, length: int = LINE_LEN) -> "Line":
        """Line of *length* words drawn from *corpus*."""
        return cls(" ".join(corpus.sample_line(length)))

    @classmethod
    def from_source(cls, cursor: TextCursor, length: int = LINE_LEN) -> "Line":
        """Line made of the next *length* words of a quote.

        The words are consumed from *cursor*. An exhausted cursor gives an
        empty line, which is already done.
        """
        return cls(cursor.take(length))

    @classmethod
    def empty(cls) -> "Line":
        return cls("")

    @property
    def expected(self) -> str:
        return self._expected

    @property
    def buffer(self) -> str:
        return "".join(self._buffer)

    def __repr__(self) -> str:
        return f"Line(expected={self._expected!r}, buffer={self.buffer!r})"

    def index(self) -> int:
        """Cursor column: number of characters typed so far."""
        return len(self._buffer)

    def add_char(self, ch: str) -> None:
        self._buffer.append(ch)

    def backspace(self) -> None:
        if self._buffer:
            self._buffer.pop()

    def done(self) -> bool:
        """True once as many characters were typed as the line expects."""
        return self.index() >= len(self._expected)

    def word_count(self) -> int:
        """Number of correctly typed words.

        The buffer gets one trailing space so the word under the cursor is
        credited as soon as it is complete. A word counts when every
        character typed for it matched, checked at each space of the
        expected text and once more at its end.
        """
        expected = self._expected
        if not expected:
            return 0
        buffer = self._buffer + [" "]
        count = 0
        word_correct = True
        for i, ch in enumerate(buffer):
            if i >= len(expected):
                if word_correct:
                    count += 1
                break
            if expected[i] == " ":
                if word_correct:
                    count += 1
                word_correct = True
            if ch != expected[i]:
                word_correct = False
        return count

    def styled(self) -> List[tuple[str, Style]]:
        """Every character to paint with its style, left to right."""
        buffer = self._buffer
        expected = self._expected
        cells: List[tuple[str, Style]] = []
        for i in range(max(len(buffer), len(expected))):
            if i >= len(buffer):
                cells.append((expected[i], Style.UNCOMPLETED))
            elif i >= len(expected):
                cells.append((buffer[i], Style.ERROR))
            elif buffer[i] == expected[i]:
                cells.append((buffer[i], Style.COMPLETED))
            elif buffer[i] == " ":
                # a wrong space has no glyph, so paint its background
                cells.append((buffer[i], Style.ERROR_BACKGROUND))
            else:
                cells.append((buffer[i], Style.ERROR))
        return cells

    def draw(self, surface: Surface) -> None:
        for ch, style in self.styled():
            surface.put(ch, style)
        surface.next_line()
