from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Union


@dataclass(frozen=True)
class NotStarted:
    pass


@dataclass(frozen=True)
class Running:
    start: float


StopwatchState = Union[NotStarted, Running]


class Stopwatch:
    """Measures time from the first keystroke of a test.

    ``clock`` returns seconds as a float; tests pass a fake one.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._state: StopwatchState = NotStarted()

    @property
    def state(self) -> StopwatchState:
        return self._state

    @property
    def started(self) -> bool:
        return isinstance(self._state, Running)

    def start(self) -> None:
        """Start timing; does nothing if already running."""
        if not self.started:
            self._state = Running(self._clock())

    def reset(self) -> None:
        self._state = NotStarted()

    def elapsed(self) -> float:
        """Seconds since start, 0.0 before the first keystroke."""
        state = self._state
        if isinstance(state, Running):
            return max(0.0, self._clock() - state.start)
        return 0.0
