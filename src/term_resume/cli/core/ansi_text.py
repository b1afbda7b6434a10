"""ANSI text utilities - stripping and splitting strings with escape codes."""

from __future__ import annotations

import re

# Pattern to match ANSI escape sequences (including ~ terminator for F-keys, etc.)
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z~]')

# One escape sequence, one line terminator, or one character
_UNIT = re.compile(r'\x1b\[[0-9;?]*[A-Za-z~]|\r\n|.', re.DOTALL)


def strip_ansi(s: str) -> str:
    """Remove all ANSI escape codes."""
    return _ANSI_ESCAPE.sub('', s)


def typing_units(s: str) -> list[str]:
    """
    Split a string into the pieces a typing effect writes one at a time.

    Escape sequences and CRLF pairs are kept whole so a partially typed
    string never leaves half a control code on the screen.
    """
    return _UNIT.findall(s)
