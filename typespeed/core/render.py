"""What the core needs from a drawing surface."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from typespeed.core.events import Event


class Style(Enum):
    PLAIN = "plain"
    # characters of a line
    COMPLETED = "completed"
    UNCOMPLETED = "uncompleted"
    ERROR = "error"
    ERROR_BACKGROUND = "error_background"
    # status line labels
    WORDS_LABEL = "words_label"
    TIME_LABEL = "time_label"
    WPM_LABEL = "wpm_label"
    MODE_LABEL = "mode_label"


class Surface(Protocol):
    """Write-only, row-by-row drawing target that also delivers input."""

    def __enter__(self) -> "Surface": ...

    def __exit__(self, *exc_info: object) -> None: ...

    def clear(self) -> None: ...

    def put(self, ch: str, style: Style) -> None: ...

    def write(self, text: str, style: Style = Style.PLAIN) -> None: ...

    def next_line(self) -> None: ...

    def move_to(self, x: int, y: int) -> None: ...

    def refresh(self) -> None: ...

    def poll(self) -> Event: ...
