"""Low-level terminal operations: output, geometry and raw mode."""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, TextIO

from term_resume.core.constants import CLEAR_SCREEN, CURSOR_HOME, RESET

logger = logging.getLogger(__name__)


class RawModeError(RuntimeError):
    """Raw mode was acquired twice or released without being held."""


@dataclass(frozen=True)
class TerminalGeometry:
    """Terminal dimensions."""
    rows: int
    columns: int


class Terminal:
    """
    Terminal output abstraction.

    Writes go to ``out`` (stdout by default) and are flushed immediately;
    nothing is buffered between redraws.
    """

    newline = os.linesep

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out if out is not None else sys.stdout

    def size(self) -> TerminalGeometry:
        """Get current terminal dimensions (re-read on every call)."""
        try:
            size = os.get_terminal_size(self._out.fileno())
            return TerminalGeometry(size.lines, size.columns)
        except (OSError, ValueError, AttributeError):
            return TerminalGeometry(24, 80)

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self.write(CLEAR_SCREEN + CURSOR_HOME)

    def reset(self) -> None:
        """Reset all terminal attributes."""
        self.write(RESET)

    def hide_cursor(self) -> None:
        self.write('\x1b[?25l')

    def show_cursor(self) -> None:
        self.write('\x1b[?25h')

    def write(self, text: str) -> None:
        """Write text to terminal."""
        self._out.write(text)
        self._out.flush()

    def write_line(self, text: str = "") -> None:
        """Write text followed by the line terminator."""
        self.write(text + self.newline)

    @contextmanager
    def alternate_screen(self) -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        self.write('\x1b[?1049h')
        try:
            yield
        finally:
            self.write('\x1b[?1049l')

    @contextmanager
    def managed_mode(self) -> Iterator[None]:
        """Alternate screen with hidden cursor; raw input is owned elsewhere."""
        with self.alternate_screen():
            self.hide_cursor()
            try:
                yield
            finally:
                self.show_cursor()
                self.reset()


class RawMode:
    """
    Raw-mode resource for a terminal input descriptor (Unix only).

    Only input processing is made raw; output post-processing stays on so
    the platform line terminator still returns the carriage.
    """

    def __init__(self, fd: int | None = None) -> None:
        self._fd = fd
        self._saved: list[Any] | None = None
        self._held = False

    @property
    def held(self) -> bool:
        return self._held

    def acquire(self) -> None:
        """Switch the descriptor to raw mode, saving its settings."""
        if self._held:
            raise RawModeError("raw mode is already acquired")
        fd = self._fd if self._fd is not None else sys.stdin.fileno()
        try:
            import termios
            import tty
            self._saved = termios.tcgetattr(fd)
            tty.setraw(fd)
            attrs = termios.tcgetattr(fd)
            attrs[1] |= termios.OPOST
            termios.tcsetattr(fd, termios.TCSADRAIN, attrs)
        except ImportError:
            # Windows or no termios - nothing to switch
            self._saved = None
        self._fd = fd
        self._held = True
        logger.debug("raw mode acquired on fd %d", fd)

    def release(self) -> None:
        """Restore the settings saved by acquire()."""
        if not self._held:
            raise RawModeError("raw mode released without being acquired")
        self._held = False
        if self._saved is not None:
            import termios
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
            self._saved = None
        logger.debug("raw mode released on fd %s", self._fd)
