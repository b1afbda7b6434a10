"""Keyboard input handling: key decoding and the raw-mode input source."""

from __future__ import annotations

import codecs
import logging
import os
import re
import select
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from term_resume.cli.core.terminal import RawMode

logger = logging.getLogger(__name__)

Chunk = Union[str, bytes, bytearray]
KeyListener = Callable[["KeyEvent"], None]

# ESC+ introducer ( param [;param2] symbol | [1;][modifier] letter )
_FUNCTION_KEY = re.compile(
    r'^(?:\x1b+)(O|N|\[|\[\[)(?:(\d+)(?:;(\d+))?([~^$])|(?:1;)?(\d+)?([a-zA-Z]))'
)

# Strict prefixes of the sequences above; these wait for the next chunk
_INCOMPLETE = re.compile(r'^\x1b+(?:O|N|\[\[?(?:\d+(?:;\d*)?)?)$')

# Longest prefix held back before giving up on completing it
MAX_PENDING = 16


@dataclass(frozen=True)
class KeyEvent:
    """
    Represents a decoded keypress.

    ``name`` is empty for sequences that decoded cleanly but mean nothing
    to us; consumers ignore those rather than treating them as errors.
    """
    name: str = ""
    is_control: bool = False
    raw: str = field(default="", compare=False)  # Decoded text, for diagnostics

    @property
    def actionable(self) -> bool:
        return bool(self.name)


class KeyDecoder:
    """
    Turn raw input chunks into key events.

    Each call to decode() yields at most one event. Partial UTF-8
    characters and unfinished escape sequences are withheld and joined
    with the following chunk.
    """

    # Reassembled codes (introducer + param + symbol + letter)
    SEQUENCES: dict[str, str] = {
        # xterm ESC [ letter
        '[A': 'up',
        '[B': 'down',
        '[C': 'right',
        '[D': 'left',
        # xterm/gnome ESC O letter
        'OA': 'up',
        'OB': 'down',
        'OC': 'right',
        'OD': 'left',
        # xterm/rxvt ESC [ number ~
        '[5~': 'page-up',
        '[6~': 'page-down',
        # putty
        '[[5~': 'page-up',
        '[[6~': 'page-down',
    }

    SIMPLE_KEYS: dict[str, str] = {
        '\r': 'return',
        '\n': 'line-feed',
        '\x1b': 'escape',
        '\x1b\x1b': 'escape',
    }

    def __init__(self) -> None:
        self._utf8 = codecs.getincrementaldecoder('utf-8')(errors='replace')
        self._pending = ""

    @property
    def pending(self) -> str:
        """Escape-sequence prefix waiting for more input."""
        return self._pending

    def decode(self, chunk: Chunk) -> Optional[KeyEvent]:
        """Decode one chunk. Returns None while input is incomplete."""
        if isinstance(chunk, (bytes, bytearray)):
            text = self._decode_bytes(bytes(chunk))
        else:
            text = chunk

        if not text:
            return None

        if self._pending:
            prefix, self._pending = self._pending, ""
            joined = prefix + text
            if _INCOMPLETE.match(joined) or self._completes(joined):
                text = joined
            else:
                # The new chunk is a key of its own
                logger.debug("discarding escape prefix %r before %r", prefix, text)

        if _INCOMPLETE.match(text) and text not in self.SIMPLE_KEYS:
            if len(text) <= MAX_PENDING:
                self._pending = text
                return None
            logger.debug("dropping overlong escape prefix %r", text)

        return self._parse(text)

    def flush(self) -> Optional[KeyEvent]:
        """Release a pending prefix as an event (input went idle)."""
        if not self._pending:
            return None
        text, self._pending = self._pending, ""
        return self._parse(text)

    def _decode_bytes(self, data: bytes) -> str:
        buffered, _ = self._utf8.getstate()
        if len(data) == 1 and data[0] > 127 and not buffered:
            # Meta sent as the high bit instead of an ESC prefix
            return '\x1b' + chr(data[0] - 128)
        return self._utf8.decode(data)

    def _parse(self, text: str) -> KeyEvent:
        """Parse a complete chunk of text into a key event."""
        if text in self.SIMPLE_KEYS:
            return KeyEvent(self.SIMPLE_KEYS[text], raw=text)

        if len(text) == 1 and ord(text) <= 0x1a:
            # ctrl + letter
            return KeyEvent(chr(ord(text) - 1 + ord('a')), is_control=True, raw=text)

        match = _FUNCTION_KEY.match(text)
        if match:
            code = self._code(match)
            _, _, param2, _, modifier, _ = match.groups()
            bits = int(param2 or modifier or 1) - 1
            name = self.SEQUENCES.get(code, '')
            if not name:
                logger.debug("unmapped key code %r from %r", code, text)
            return KeyEvent(name, is_control=bool(bits & 4), raw=text)

        return KeyEvent(raw=text)

    def _completes(self, text: str) -> bool:
        """Whether ``text`` starts with a sequence from the table."""
        match = _FUNCTION_KEY.match(text)
        return bool(match) and self._code(match) in self.SEQUENCES

    @staticmethod
    def _code(match: re.Match) -> str:
        # Leave out leading ESCs, the modifier and any meaningless "1;"
        introducer, param, _, symbol, _, letter = match.groups()
        return introducer + (param or '') + (symbol or '') + (letter or '')


class RawInputSource:
    """
    Raw-mode keyboard input publishing decoded key events.

    Uses os.read() to bypass Python's I/O buffering. Raw mode is held from
    open() until close(); use the source as a context manager so it is
    released on every exit path.
    """

    def __init__(
        self,
        fd: int | None = None,
        raw_mode: RawMode | None = None,
        decoder: KeyDecoder | None = None,
    ) -> None:
        self._fd = fd
        self._raw_mode = raw_mode if raw_mode is not None else RawMode(fd)
        self._decoder = decoder if decoder is not None else KeyDecoder()
        self._listeners: list[KeyListener] = []
        self.eof = False

    @property
    def active(self) -> bool:
        """Whether raw mode is currently held."""
        return self._raw_mode.held

    def open(self) -> None:
        self._raw_mode.acquire()

    def close(self) -> None:
        self._raw_mode.release()

    def __enter__(self) -> RawInputSource:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.active:
            self.close()

    def subscribe(self, listener: KeyListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: KeyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def feed(self, chunk: Chunk) -> Optional[KeyEvent]:
        """Decode a chunk and publish the resulting event, if any."""
        event = self._decoder.decode(chunk)
        if event is not None:
            self._publish(event)
        return event

    def flush(self) -> Optional[KeyEvent]:
        """Publish any escape prefix still waiting for input."""
        event = self._decoder.flush()
        if event is not None:
            self._publish(event)
        return event

    def poll(self, timeout: float) -> bool:
        """
        Wait up to ``timeout`` seconds for input and feed what arrives.

        Returns True if a chunk was read.
        """
        fd = self._fd if self._fd is not None else sys.stdin.fileno()
        if not self._has_input(fd, timeout):
            return False
        try:
            # Read up to 1024 bytes at once - gets everything available
            data = os.read(fd, 1024)
        except BlockingIOError:
            return False
        if not data:
            self.eof = True
            return False
        self.feed(data)
        return True

    def _publish(self, event: KeyEvent) -> None:
        # Listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(event)

    @staticmethod
    def _has_input(fd: int, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
