from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from typespeed.core.clock import Stopwatch
from typespeed.core.events import Backspace, CharInput, Event, Quit, Reset
from typespeed.core.line import LINE_LEN, Line
from typespeed.core.modes import QuoteMode, TestMode, TimeLimitMode, WordCountMode
from typespeed.core.quote import fetch_random_quote
from typespeed.core.render import Style, Surface
from typespeed.core.words import WordCorpus

logger = logging.getLogger(__name__)

# row of the line being typed: status line, previous line, current line
CURRENT_ROW = 2


def words_per_minute(words: int, elapsed: float) -> float:
    """Correct words per elapsed minute; 0.0 before any time has passed."""
    if elapsed <= 0:
        return 0.0
    return words / (elapsed / 60.0)


@dataclass(frozen=True)
class Score:
    """Outcome of a finished typing test."""

    words: int
    elapsed: float

    @property
    def wpm(self) -> float:
        return words_per_minute(self.words, self.elapsed)

    def summary(self) -> list[str]:
        return [
            f"You typed {self.words} words in {self.elapsed:.2f} seconds",
            f"That's {self.wpm:.2f} wpm",
        ]


class TypingTest:
    """One typing test: a window of three lines, a mode and a stopwatch.

    The window is ``previous`` (finished, shown for context), ``current``
    (receives input) and ``next`` (preview). Typing a space once the current
    line is done rotates the window instead of inserting the space.

    Words are counted per line. Rotated-out lines are folded into a running
    total; the current line's count is added whenever the total is asked for.
    """

    def __init__(
        self,
        mode: TestMode,
        corpus: WordCorpus,
        fetch_quote: Callable[[], str] = fetch_random_quote,
        clock: Callable[[], float] = time.monotonic,
        line_length: int = LINE_LEN,
    ) -> None:
        self._mode = mode
        self._corpus = corpus
        self._fetch_quote = fetch_quote
        self._line_length = line_length
        self._stopwatch = Stopwatch(clock)
        self._word_count = 0
        self.running = True
        self.show_final_score = True

        if isinstance(mode, QuoteMode):
            mode.refill(fetch_quote)
        self._previous = Line.empty()
        self._current = self._new_line()
        self._next = self._new_line()
        logger.info("New typing test, mode: %s", mode)

    @property
    def mode(self) -> TestMode:
        return self._mode

    @property
    def stopwatch(self) -> Stopwatch:
        return self._stopwatch

    @property
    def previous(self) -> Line:
        return self._previous

    @property
    def current(self) -> Line:
        return self._current

    @property
    def next(self) -> Line:
        return self._next

    def word_count(self) -> int:
        """Correct words so far, including the line being typed."""
        return self._word_count + self._current.word_count()

    def elapsed(self) -> float:
        return self._stopwatch.elapsed()

    def score(self) -> Score:
        return Score(words=self.word_count(), elapsed=self.elapsed())

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle(self, event: Event) -> None:
        """Apply one input event. Tick and Resize do not change the test."""
        if isinstance(event, CharInput):
            self.type_char(event.ch)
        elif isinstance(event, Backspace):
            self._current.backspace()
        elif isinstance(event, Reset):
            self.reset()
        elif isinstance(event, Quit):
            self.quit()

    def type_char(self, ch: str) -> None:
        self._stopwatch.start()
        if ch == " " and self._current.done():
            self._rotate()
        else:
            self._current.add_char(ch)

    def quit(self) -> None:
        """Stop early without printing a score."""
        self.running = False
        self.show_final_score = False
        logger.info("Test quit after %.2f seconds", self.elapsed())

    def reset(self) -> None:
        """Start over with fresh lines; a quote mode test reloads its quote."""
        self._previous = Line.empty()
        self._word_count = 0
        self._stopwatch.reset()
        if isinstance(self._mode, QuoteMode):
            self._mode.refill(self._fetch_quote)
        self._current = self._new_line()
        self._next = self._new_line()
        logger.info("Test reset, mode: %s", self._mode)

    def finished(self) -> bool:
        """Whether the mode's end condition has been reached."""
        mode = self._mode
        if isinstance(mode, WordCountMode):
            return self.word_count() >= mode.target
        if isinstance(mode, TimeLimitMode):
            return self._stopwatch.started and self.elapsed() >= mode.seconds
        return self._current.done() and self._next.done()

    def _new_line(self) -> Line:
        if isinstance(self._mode, QuoteMode):
            return Line.from_source(self._mode.cursor, self._line_length)
        return Line.random(self._corpus, self._line_length)

    def _rotate(self) -> None:
        finished = self._current
        self._word_count += finished.word_count()
        self._current = self._next
        self._next = self._new_line()
        self._previous = finished
        logger.debug("Line finished, %d words so far", self._word_count)

    # ------------------------------------------------------------------
    # Drawing and main loop
    # ------------------------------------------------------------------

    def draw_score(self, surface: Surface) -> None:
        """Status line: words completed, time passed, wpm and mode."""
        words = self.word_count()
        elapsed = self.elapsed()
        fields = [
            ("Words", Style.WORDS_LABEL, f"{words}"),
            ("Time", Style.TIME_LABEL, f"{elapsed:6.2f}s"),
            ("wpm", Style.WPM_LABEL, f"{words_per_minute(words, elapsed):6.2f}"),
            ("Mode", Style.MODE_LABEL, f"{self._mode}"),
        ]
        for i, (label, style, value) in enumerate(fields):
            if i:
                surface.write("  ")
            surface.write(label, style)
            surface.write(f": {value}")
        surface.next_line()

    def redraw(self, surface: Surface) -> None:
        surface.clear()
        self.draw_score(surface)
        self._previous.draw(surface)
        self._current.draw(surface)
        self._next.draw(surface)
        surface.move_to(self._current.index(), CURRENT_ROW)
        surface.refresh()

    def run(self, surface: Surface) -> Optional[Score]:
        """Run the test until its mode ends it or the user quits.

        The surface holds the terminal in raw mode only inside this call.
        Returns the score to report, or None when the user quit or never
        started typing.
        """
        with surface:
            self.redraw(surface)
            while self.running:
                self.handle(surface.poll())
                self.redraw(surface)
                if self.finished():
                    break
            surface.clear()
            surface.refresh()

        if not (self.show_final_score and self._stopwatch.started):
            return None
        score = self.score()
        logger.info("Test finished: %d words in %.2f seconds", score.words, score.elapsed)
        return score
