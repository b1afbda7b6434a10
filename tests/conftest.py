"""Pytest fixtures and fakes for terminal-free testing."""

import io
import os
from typing import Iterator

import pytest

from term_resume.cli.core.input import KeyEvent, KeyListener
from term_resume.cli.core.terminal import RawModeError, Terminal, TerminalGeometry
from term_resume.cli.viewer.renderer import ViewportRenderer
from term_resume.core.content import ContentBuilder, ContentCollection


class FakeTerminal(Terminal):
    """Terminal writing into a StringIO with a fixed, adjustable geometry."""

    newline = "\n"

    def __init__(self, rows: int = 24, columns: int = 80) -> None:
        self.buffer = io.StringIO()
        super().__init__(self.buffer)
        self.geometry = TerminalGeometry(rows, columns)
        self.resets = 0

    def size(self) -> TerminalGeometry:
        return self.geometry

    def reset(self) -> None:
        self.resets += 1
        super().reset()

    @property
    def output(self) -> str:
        return self.buffer.getvalue()

    def take(self) -> str:
        """Return and forget everything written so far."""
        text = self.buffer.getvalue()
        self.buffer.seek(0)
        self.buffer.truncate()
        return text


class FakeRawMode:
    """Counts acquire/release and enforces the same misuse rules as RawMode."""

    def __init__(self) -> None:
        self.held = False
        self.acquired = 0
        self.released = 0

    def acquire(self) -> None:
        if self.held:
            raise RawModeError("raw mode is already acquired")
        self.held = True
        self.acquired += 1

    def release(self) -> None:
        if not self.held:
            raise RawModeError("raw mode released without being acquired")
        self.held = False
        self.released += 1


class FakeKeySource:
    """Key source that publishes whatever the test emits."""

    def __init__(self) -> None:
        self.listeners: list[KeyListener] = []
        self.closed = 0

    def subscribe(self, listener: KeyListener) -> None:
        self.listeners.append(listener)

    def unsubscribe(self, listener: KeyListener) -> None:
        self.listeners.remove(listener)

    def close(self) -> None:
        self.closed += 1

    def emit(self, name: str, is_control: bool = False) -> None:
        event = KeyEvent(name, is_control)
        for listener in list(self.listeners):
            listener(event)


class CountingRenderer(ViewportRenderer):
    """Renderer that remembers the offset of every redraw."""

    def __init__(self, screen: Terminal) -> None:
        super().__init__(screen)
        self.offsets: list[int] = []

    def render(self, lines, offset, geometry=None) -> None:
        self.offsets.append(offset)
        super().render(lines, offset, geometry)


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal(rows=24, columns=80)


@pytest.fixture
def raw_mode() -> FakeRawMode:
    return FakeRawMode()


@pytest.fixture
def key_source() -> FakeKeySource:
    return FakeKeySource()


@pytest.fixture
def pipe() -> Iterator[tuple[int, int]]:
    """A (read_fd, write_fd) pair standing in for stdin."""
    r, w = os.pipe()
    yield r, w
    for fd in (r, w):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture
def sample_content() -> ContentCollection:
    """Three bands of two lines each, every band closed by a separator."""
    return (
        ContentBuilder()
        .header(name="Test Person", title="Tester", email="t@example.com", web="example.com")
        .band(2020)
        .line("first 2020")
        .line("second 2020")
        .separator()
        .band(2019)
        .line("first 2019")
        .line("second 2019")
        .separator()
        .band(2018)
        .line("first 2018")
        .line("second 2018")
        .separator()
        .build()
    )
