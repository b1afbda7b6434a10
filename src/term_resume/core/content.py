"""Year-banded content lines and the read-only collection that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence, overload

from term_resume.core.styled import StyledLine, StyledSegment


@dataclass(frozen=True)
class Line:
    """
    One row of content.

    Lines sharing a ``band`` (a year) are grouped under a single label
    when rendered. Separator lines carry no segments; they are expanded
    to a rule in the band's color at render time.
    """
    band: int
    segments: tuple[StyledSegment | str, ...] = ()
    is_separator: bool = False

    @classmethod
    def separator(cls, band: int) -> "Line":
        return cls(band=band, is_separator=True)

    @property
    def text(self) -> str:
        """Segments concatenated with their control codes."""
        return "".join(str(s) for s in self.segments)


@dataclass(frozen=True)
class Header:
    """The four labeled fields shown above the viewport."""
    name: str = ""
    title: str = ""
    email: str = ""
    web: str = ""

    @property
    def fields(self) -> tuple[tuple[str, str], ...]:
        return (
            ("Name", self.name),
            ("Title", self.title),
            ("Email", self.email),
            ("Web", self.web),
        )


@dataclass(frozen=True)
class ContentCollection(Sequence[Line]):
    """
    Ordered, read-only sequence of lines.

    Only the flattened index is addressable; there is no lookup by band.
    """
    lines: tuple[Line, ...] = ()
    header: Header = field(default_factory=Header)

    @overload
    def __getitem__(self, index: int) -> Line: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Line, ...]: ...

    def __getitem__(self, index: int | slice) -> Line | tuple[Line, ...]:
        return self.lines[index]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    @property
    def last_index(self) -> int:
        """Index of the final line (-1 when empty)."""
        return len(self.lines) - 1


class ContentBuilder:
    """
    Fluent API for assembling a ContentCollection.

    Example:
        >>> content = (ContentBuilder()
        ...     .header(name="Ada Lovelace", title="Analyst")
        ...     .band(1843)
        ...     .line(bold("Notes on the Analytical Engine"))
        ...     .separator()
        ...     .build())
    """

    def __init__(self) -> None:
        self._lines: list[Line] = []
        self._header = Header()
        self._band: int | None = None

    def header(
        self,
        name: str = "",
        title: str = "",
        email: str = "",
        web: str = "",
    ) -> "ContentBuilder":
        """Set the header fields."""
        self._header = Header(name=name, title=title, email=email, web=web)
        return self

    def band(self, band: int) -> "ContentBuilder":
        """Start (or continue) the group of lines for ``band``."""
        self._band = band
        return self

    def line(self, *parts: StyledSegment | StyledLine | str) -> "ContentBuilder":
        """Append a line built from segments, composite lines and plain text."""
        segments: list[StyledSegment | str] = []
        for part in parts:
            if isinstance(part, StyledLine):
                segments.extend(part.parts)
            else:
                segments.append(part)
        self._lines.append(Line(band=self._current_band(), segments=tuple(segments)))
        return self

    def blank(self) -> "ContentBuilder":
        """Append an empty line in the current band."""
        return self.line()

    def separator(self) -> "ContentBuilder":
        """Append a rule in the current band's color."""
        self._lines.append(Line.separator(self._current_band()))
        return self

    def build(self) -> ContentCollection:
        """Freeze the lines into a collection."""
        return ContentCollection(lines=tuple(self._lines), header=self._header)

    def _current_band(self) -> int:
        if self._band is None:
            raise ValueError("band() must be called before adding lines")
        return self._band
