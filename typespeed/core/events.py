"""Input events delivered to a typing test by the terminal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CharInput:
    ch: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Tick:
    """No key arrived before the poll timed out."""


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


Event = Union[CharInput, Backspace, Reset, Quit, Tick, Resize]
