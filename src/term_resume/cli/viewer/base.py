"""Capability protocols shared by the viewer components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from term_resume.cli.core.input import KeyListener
from term_resume.cli.core.terminal import TerminalGeometry
from term_resume.core.content import ContentCollection

if TYPE_CHECKING:
    from term_resume.cli.viewer.renderer import ViewportRenderer


@runtime_checkable
class KeySource(Protocol):
    """Single-owner publisher of key events."""

    def subscribe(self, listener: KeyListener) -> None:
        ...

    def unsubscribe(self, listener: KeyListener) -> None:
        ...

    def close(self) -> None:
        """Release the raw-mode resource."""
        ...


@runtime_checkable
class Screen(Protocol):
    """Output side of the terminal."""

    newline: str

    def size(self) -> TerminalGeometry:
        ...

    def clear(self) -> None:
        ...

    def reset(self) -> None:
        ...

    def write(self, text: str) -> None:
        ...


@dataclass
class ViewerContext:
    """Everything the scroll controller talks to."""
    screen: Screen
    source: KeySource
    renderer: "ViewportRenderer"
    lines: ContentCollection

    def __post_init__(self) -> None:
        if not isinstance(self.screen, Screen):
            raise TypeError(f"{type(self.screen).__name__} does not implement Screen")
        if not isinstance(self.source, KeySource):
            raise TypeError(f"{type(self.source).__name__} does not implement KeySource")
