"""Startup banner with a typewriter effect."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from term_resume.cli.core.ansi_text import typing_units
from term_resume.cli.viewer.base import Screen
from term_resume.config import TYPING_INTERVAL

logger = logging.getLogger(__name__)


class PeriodicTimer:
    """
    Monotonic-clock timer polled by the event loop.

    Nothing runs on another thread; the loop asks due() and calls fire().
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[], None],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval < 0:
            raise ValueError(f"interval must be >= 0, got {interval}")
        self.interval = interval
        self._callback = callback
        self._clock = clock
        self._deadline: Optional[float] = clock() + interval

    @property
    def active(self) -> bool:
        return self._deadline is not None

    def remaining(self) -> Optional[float]:
        """Seconds until the next tick (None once cancelled)."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - self._clock())

    def due(self) -> bool:
        return self._deadline is not None and self._clock() >= self._deadline

    def fire(self) -> None:
        """Run the callback and schedule the next tick."""
        if self._deadline is None:
            return
        self._deadline = self._clock() + self.interval
        self._callback()

    def cancel(self) -> None:
        self._deadline = None


class Banner:
    """
    Types ``text`` onto the screen one unit per timer tick.

    When the last unit is written the banner prints its prompt, cancels
    its own timer and calls ``on_finished``.
    """

    def __init__(
        self,
        screen: Screen,
        text: str,
        prompt: str = "",
        interval: float = TYPING_INTERVAL,
        on_finished: Optional[Callable[[], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.screen = screen
        self.prompt = prompt
        self.on_finished = on_finished
        self._units = typing_units(text)
        self._position = 0
        self._done = False
        self._timer: Optional[PeriodicTimer] = None
        self._interval = interval
        self._clock = clock

    @property
    def timer(self) -> Optional[PeriodicTimer]:
        return self._timer

    @property
    def finished(self) -> bool:
        return self._done

    def start(self) -> None:
        """Clear the screen and begin typing."""
        self.screen.clear()
        self._timer = PeriodicTimer(self._interval, self.tick, self._clock)

    def tick(self) -> None:
        """Write the next unit, finishing when none remain."""
        if self._position < len(self._units):
            self.screen.write(self._units[self._position])
            self._position += 1
        if self._position >= len(self._units):
            self._finish()

    def _finish(self) -> None:
        if self._timer is None:
            return
        self._timer.cancel()
        self._timer = None
        if self.prompt:
            self.screen.write(self.prompt)
        self._done = True
        logger.debug("banner finished")
        if self.on_finished is not None:
            self.on_finished()
