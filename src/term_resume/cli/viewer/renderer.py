"""Full-screen rendering of the header and the visible slice of content."""

from __future__ import annotations

from term_resume.cli.core.terminal import TerminalGeometry
from term_resume.cli.viewer.base import Screen
from term_resume.core.constants import (
    BAND_PALETTE,
    GUTTER_BAR,
    GUTTER_WIDTH,
    RULE_CHAR,
)
from term_resume.core.content import ContentCollection, Header, Line
from term_resume.core.styled import StyledLine, bold, colored, underline

# Opening rule, four fields, closing rule
HEADER_LINES = 6


def band_color(band: int) -> str:
    """Palette color for a band, cycling through BAND_PALETTE."""
    return BAND_PALETTE[band % len(BAND_PALETTE)]


def visible_row_count(geometry: TerminalGeometry) -> int:
    """Number of content rows that fit below the header."""
    return max(0, geometry.rows - 1 - HEADER_LINES)


class ViewportRenderer:
    """
    Render a ContentCollection onto the terminal viewport.

    Every call clears the screen and redraws everything; geometry is
    queried fresh each time unless given explicitly.
    """

    def __init__(self, screen: Screen) -> None:
        self.screen = screen
        self.last_geometry: TerminalGeometry | None = None

    def render(
        self,
        lines: ContentCollection,
        offset: int,
        geometry: TerminalGeometry | None = None,
    ) -> None:
        """Clear the screen and draw the header plus rows from ``offset``."""
        geometry = geometry or self.screen.size()
        self.last_geometry = geometry
        self.screen.clear()

        rows = self.header_rows(lines.header, geometry)
        rows.extend(self.content_rows(lines, offset, geometry))

        newline = self.screen.newline
        self.screen.write("".join(row + newline for row in rows))

    def header_rows(self, header: Header, geometry: TerminalGeometry) -> list[str]:
        rule = RULE_CHAR * geometry.columns
        rows = [rule]
        for label, value in header.fields:
            rows.append(str(bold(f"{label}:") + f" {value}"))
        rows.append(rule)
        return rows

    def content_rows(
        self,
        lines: ContentCollection,
        offset: int,
        geometry: TerminalGeometry,
    ) -> list[str]:
        """Rows for the visible slice, with band gutters applied."""
        visible = lines[offset:offset + visible_row_count(geometry)]
        rows: list[str] = []
        last_band: int | None = None

        for line in visible:
            color = band_color(line.band)
            if line.band != last_band:
                gutter = self._label_gutter(line.band, color)
                last_band = line.band
            else:
                gutter = self._plain_gutter(color)
            rows.append(str(gutter) + self._body(line, color, geometry))

        return rows

    @staticmethod
    def _label_gutter(band: int, color: str) -> StyledLine:
        label = underline(bold(colored(str(band), color)))
        bar = bold(colored(GUTTER_BAR, color))
        return " " + label + " " + bar + " "

    @staticmethod
    def _plain_gutter(color: str) -> StyledLine:
        return " " * 6 + bold(colored(GUTTER_BAR, color)) + " "

    @staticmethod
    def _body(line: Line, color: str, geometry: TerminalGeometry) -> str:
        if line.is_separator:
            width = max(0, geometry.columns - GUTTER_WIDTH)
            return str(colored(RULE_CHAR * width, color))
        return line.text
