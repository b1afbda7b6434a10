"""Core TUI infrastructure - terminal I/O and input decoding."""

from term_resume.cli.core.terminal import Terminal, TerminalGeometry, RawMode, RawModeError
from term_resume.cli.core.input import KeyDecoder, KeyEvent, RawInputSource

__all__ = [
    "Terminal",
    "TerminalGeometry",
    "RawMode",
    "RawModeError",
    "KeyDecoder",
    "KeyEvent",
    "RawInputSource",
]
