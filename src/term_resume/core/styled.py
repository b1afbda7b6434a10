"""Styled text spans for terminal output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from term_resume.core.constants import (
    BOLD_OFF,
    BOLD_ON,
    FG_COLORS,
    FG_RESET,
    UNDERLINE_OFF,
    UNDERLINE_ON,
)


@dataclass(frozen=True)
class StyledSegment:
    """
    A span of text wrapped by "on" and "off" control codes.

    Rendering is exactly ``on_code + text + off_code``; nothing else is
    inserted, so a segment round-trips byte for byte.
    """
    text: str
    on_code: str = ""
    off_code: str = ""

    def __str__(self) -> str:
        return f"{self.on_code}{self.text}{self.off_code}"

    def __len__(self) -> int:
        """Visible width (control codes take no columns)."""
        return len(self.text)

    def __add__(self, other: Part) -> StyledLine:
        return StyledLine((self,)) + other

    def __radd__(self, other: str) -> StyledLine:
        return StyledLine((other, self))

    def wrap(self, on_code: str, off_code: str) -> StyledSegment:
        """Return a copy with another pair of codes around the existing ones."""
        return StyledSegment(
            self.text,
            on_code + self.on_code,
            self.off_code + off_code,
        )


Part = Union[StyledSegment, str, "StyledLine"]


@dataclass(frozen=True)
class StyledLine:
    """Ordered concatenation of styled segments and plain strings."""
    parts: tuple[StyledSegment | str, ...] = ()

    def __str__(self) -> str:
        return "".join(str(part) for part in self.parts)

    def __len__(self) -> int:
        return sum(len(part) for part in self.parts)

    def __add__(self, other: Part) -> StyledLine:
        if isinstance(other, StyledLine):
            return StyledLine(self.parts + other.parts)
        return StyledLine(self.parts + (other,))

    def __radd__(self, other: str) -> StyledLine:
        return StyledLine((other,) + self.parts)


def _wrap(text: str | StyledSegment, on_code: str, off_code: str) -> StyledSegment:
    if isinstance(text, StyledSegment):
        return text.wrap(on_code, off_code)
    return StyledSegment(text, on_code, off_code)


def bold(text: str | StyledSegment) -> StyledSegment:
    """Bold text (SGR 1 / 22)."""
    return _wrap(text, BOLD_ON, BOLD_OFF)


def underline(text: str | StyledSegment) -> StyledSegment:
    """Underlined text (SGR 4 / 24)."""
    return _wrap(text, UNDERLINE_ON, UNDERLINE_OFF)


def colored(text: str | StyledSegment, color: str) -> StyledSegment:
    """
    Foreground-colored text, reset with SGR 39.

    Args:
        text: Plain text or an existing segment to wrap
        color: One of the names in ``FG_COLORS``
    """
    try:
        on_code = FG_COLORS[color]
    except KeyError:
        raise ValueError(f"Unknown color: {color!r}") from None
    return _wrap(text, on_code, FG_RESET)


def green(text: str | StyledSegment) -> StyledSegment:
    return colored(text, "green")


def cyan(text: str | StyledSegment) -> StyledSegment:
    return colored(text, "cyan")


def yellow(text: str | StyledSegment) -> StyledSegment:
    return colored(text, "yellow")


def blue(text: str | StyledSegment) -> StyledSegment:
    return colored(text, "blue")


def magenta(text: str | StyledSegment) -> StyledSegment:
    return colored(text, "magenta")
