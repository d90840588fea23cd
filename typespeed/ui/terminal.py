"""curses terminal: raw mode, key polling and styled output."""

from __future__ import annotations

import curses
import logging
import os
from typing import Dict, Optional, Union

from typespeed.core.events import Backspace, CharInput, Event, Quit, Reset, Resize, Tick
from typespeed.core.render import Style
from typespeed.ui.colors import LineColors, xterm256

logger = logging.getLogger(__name__)

POLL_TIMEOUT_MS = 50

ESCAPE = "\x1b"
TAB = "\t"
BACKSPACE_CHARS = ("\x7f", "\b")

# style -> (LineColors attribute, color on 8-color terminals, extra attributes)
_PALETTE = {
    Style.COMPLETED: ("COMPLETED", curses.COLOR_WHITE, curses.A_BOLD),
    Style.UNCOMPLETED: ("UNCOMPLETED", curses.COLOR_WHITE, curses.A_DIM),
    Style.ERROR: ("ERROR", curses.COLOR_RED, curses.A_NORMAL),
    Style.WORDS_LABEL: ("WORDS_LABEL", curses.COLOR_RED, curses.A_BOLD),
    Style.TIME_LABEL: ("TIME_LABEL", curses.COLOR_GREEN, curses.A_BOLD),
    Style.WPM_LABEL: ("WPM_LABEL", curses.COLOR_BLUE, curses.A_BOLD),
    Style.MODE_LABEL: ("MODE_LABEL", curses.COLOR_YELLOW, curses.A_BOLD),
}


def translate_key(key: Union[str, int]) -> Optional[Event]:
    """Map a key from ``get_wch`` to an event, None for keys with no meaning."""
    if key == curses.KEY_BACKSPACE or key in BACKSPACE_CHARS:
        return Backspace()
    if not isinstance(key, str):
        return None
    if key == ESCAPE:
        return Quit()
    if key == TAB:
        return Reset()
    if key.isprintable():
        return CharInput(key)
    return None


class TerminalSurface:
    """Drawing surface backed by the curses standard screen.

    Used as a context manager: entering puts the terminal in raw mode,
    leaving always restores it, also when the body raised.
    """

    def __init__(self, poll_timeout_ms: int = POLL_TIMEOUT_MS) -> None:
        self._poll_timeout_ms = poll_timeout_ms
        self._screen = None
        self._attrs: Dict[Style, int] = {}
        self._row = 0
        self._col = 0
        self._height = 0
        self._width = 0

    def __enter__(self) -> "TerminalSurface":
        # curses waits a full second after Esc for an escape sequence by default
        os.environ.setdefault("ESCDELAY", "25")
        self._screen = curses.initscr()
        try:
            curses.noecho()
            curses.raw()
            self._screen.keypad(True)
            self._screen.timeout(self._poll_timeout_ms)
            self._init_colors()
        except curses.error:
            self._restore()
            raise
        self._height, self._width = self._screen.getmaxyx()
        logger.debug("Raw mode on, terminal %dx%d", self._width, self._height)
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._restore()

    def _restore(self) -> None:
        try:
            if self._screen is not None:
                self._screen.keypad(False)
            curses.noraw()
            curses.echo()
        finally:
            curses.endwin()
            self._screen = None
            logger.debug("Raw mode off")

    def _init_colors(self) -> None:
        self._attrs = {Style.PLAIN: curses.A_NORMAL}
        if not curses.has_colors():
            for style, (_, _, attr) in _PALETTE.items():
                self._attrs[style] = attr
            self._attrs[Style.ERROR] = curses.A_UNDERLINE
            self._attrs[Style.ERROR_BACKGROUND] = curses.A_REVERSE
            return

        curses.start_color()
        curses.use_default_colors()
        many_colors = curses.COLORS >= 256
        for pair_id, (style, (name, basic, attr)) in enumerate(_PALETTE.items(), start=1):
            color = xterm256(getattr(LineColors, name)) if many_colors else None
            curses.init_pair(pair_id, basic if color is None else color, -1)
            self._attrs[style] = curses.color_pair(pair_id) | attr
        self._attrs[Style.ERROR_BACKGROUND] = self._attrs[Style.ERROR] | curses.A_REVERSE

    def poll(self) -> Event:
        """Wait up to the poll timeout for one key."""
        try:
            key = self._screen.get_wch()
        except curses.error:
            return Tick()
        if key == curses.KEY_RESIZE:
            height, width = self._screen.getmaxyx()
            logger.debug("Terminal resized to %dx%d", width, height)
            return Resize(width, height)
        return translate_key(key) or Tick()

    def clear(self) -> None:
        self._screen.erase()
        self._height, self._width = self._screen.getmaxyx()
        self._row = 0
        self._col = 0

    def put(self, ch: str, style: Style) -> None:
        # cells outside the window are dropped; curses also refuses the
        # bottom-right cell
        row, col = self._row, self._col
        fits = row < self._height and col < self._width
        if fits and not (row == self._height - 1 and col == self._width - 1):
            self._screen.addstr(row, col, ch, self._attrs.get(style, curses.A_NORMAL))
        self._col += 1

    def write(self, text: str, style: Style = Style.PLAIN) -> None:
        for ch in text:
            self.put(ch, style)

    def next_line(self) -> None:
        self._row += 1
        self._col = 0

    def move_to(self, x: int, y: int) -> None:
        if self._height and self._width:
            self._screen.move(min(y, self._height - 1), min(x, self._width - 1))

    def refresh(self) -> None:
        self._screen.refresh()
