"""Tests for the viewport renderer.

Fixtures follow the canonical layout: full-width header rules, a
four-field header and the five-color band palette.
"""

import pytest

from term_resume.cli.core.ansi_text import strip_ansi
from term_resume.cli.core.terminal import TerminalGeometry
from term_resume.cli.viewer.renderer import (
    HEADER_LINES,
    ViewportRenderer,
    band_color,
    visible_row_count,
)
from term_resume.core.constants import BAND_PALETTE, FG_COLORS, FG_RESET
from term_resume.core.content import ContentBuilder, ContentCollection
from term_resume.core.styled import bold, cyan

from conftest import FakeTerminal

RULE = "─"


def rendered_rows(terminal: FakeTerminal) -> list[str]:
    """Rows written by the last render, without the clear sequence."""
    output = terminal.take()
    assert output.startswith("\x1b[2J\x1b[H")
    body = output[len("\x1b[2J\x1b[H"):]
    assert body.endswith("\n")
    return body[:-1].split("\n")


def tall_content(count: int) -> ContentCollection:
    builder = ContentBuilder().band(2000)
    for i in range(count):
        builder.line(f"line {i}")
    return builder.build()


class TestScreenProtocol:
    """Clear, header and line termination."""

    def test_clears_and_homes_first(self, terminal, sample_content) -> None:
        ViewportRenderer(terminal).render(sample_content, 0)
        assert terminal.output.startswith("\x1b[2J\x1b[H")

    def test_header_block(self, terminal, sample_content) -> None:
        ViewportRenderer(terminal).render(sample_content, 0)
        rows = rendered_rows(terminal)
        assert rows[0] == RULE * 80
        assert rows[HEADER_LINES - 1] == RULE * 80
        labels = [strip_ansi(row) for row in rows[1:5]]
        assert labels == [
            "Name: Test Person",
            "Title: Tester",
            "Email: t@example.com",
            "Web: example.com",
        ]
        assert rows[1].startswith("\x1b[1mName:\x1b[22m")

    def test_rule_follows_geometry(self, sample_content) -> None:
        terminal = FakeTerminal(rows=24, columns=50)
        ViewportRenderer(terminal).render(sample_content, 0)
        assert rendered_rows(terminal)[0] == RULE * 50

    def test_geometry_is_read_on_every_render(self, sample_content) -> None:
        terminal = FakeTerminal(rows=24, columns=40)
        renderer = ViewportRenderer(terminal)
        renderer.render(sample_content, 0)
        assert rendered_rows(terminal)[0] == RULE * 40
        terminal.geometry = TerminalGeometry(24, 60)
        renderer.render(sample_content, 0)
        assert rendered_rows(terminal)[0] == RULE * 60
        assert renderer.last_geometry == TerminalGeometry(24, 60)

    def test_explicit_geometry_wins(self, terminal, sample_content) -> None:
        ViewportRenderer(terminal).render(sample_content, 0, TerminalGeometry(24, 30))
        assert rendered_rows(terminal)[0] == RULE * 30


class TestViewportSize:
    """At most rows - 1 - HEADER_LINES content rows are drawn."""

    @pytest.mark.parametrize("rows", [8, 12, 24, 50])
    def test_row_budget(self, rows: int) -> None:
        terminal = FakeTerminal(rows=rows, columns=80)
        content = tall_content(100)
        ViewportRenderer(terminal).render(content, 0)
        out = rendered_rows(terminal)
        assert len(out) - HEADER_LINES == rows - 1 - HEADER_LINES

    def test_stops_at_end_of_content(self, terminal) -> None:
        content = tall_content(10)
        ViewportRenderer(terminal).render(content, 7)
        body = rendered_rows(terminal)[HEADER_LINES:]
        assert [strip_ansi(row)[8:] for row in body] == ["line 7", "line 8", "line 9"]

    def test_offset_selects_first_row(self, terminal) -> None:
        content = tall_content(50)
        ViewportRenderer(terminal).render(content, 20)
        body = rendered_rows(terminal)[HEADER_LINES:]
        assert strip_ansi(body[0]).endswith("line 20")
        assert len(body) == 24 - 1 - HEADER_LINES

    def test_tiny_terminal_has_no_content_rows(self, sample_content) -> None:
        terminal = FakeTerminal(rows=5, columns=80)
        ViewportRenderer(terminal).render(sample_content, 0)
        assert len(rendered_rows(terminal)) == HEADER_LINES
        assert visible_row_count(TerminalGeometry(5, 80)) == 0


class TestBandGutter:
    """Only the first row of each band group shows its label."""

    def test_label_iff_band_changes(self, terminal, sample_content) -> None:
        ViewportRenderer(terminal).render(sample_content, 0)
        body = rendered_rows(terminal)[HEADER_LINES:]
        gutters = [strip_ansi(row)[:8] for row in body]
        previous = None
        for line, gutter in zip(sample_content, gutters):
            if line.band != previous:
                assert gutter == f" {line.band} │ "
            else:
                assert gutter == "      │ "
            previous = line.band

    def test_first_visible_row_is_labelled_mid_band(self, terminal, sample_content) -> None:
        ViewportRenderer(terminal).render(sample_content, 1)
        body = rendered_rows(terminal)[HEADER_LINES:]
        assert strip_ansi(body[0]) == " 2020 │ second 2020"

    def test_label_styling(self, terminal) -> None:
        content = ContentBuilder().band(2020).line("x").line("y").build()
        ViewportRenderer(terminal).render(content, 0)
        first, second = rendered_rows(terminal)[HEADER_LINES:]
        color = FG_COLORS[band_color(2020)]
        bar = f"\x1b[1m{color}│{FG_RESET}\x1b[22m"
        label = f"\x1b[4m\x1b[1m{color}2020{FG_RESET}\x1b[22m\x1b[24m"
        assert first == f" {label} {bar} x"
        assert second == f"      {bar} y"

    def test_palette_cycles_by_band(self) -> None:
        assert band_color(2020) == BAND_PALETTE[0] == "green"
        assert band_color(2021) == "cyan"
        assert band_color(2024) == "magenta"
        assert band_color(2025) == "green"
        assert len(BAND_PALETTE) == 5


class TestLineBodies:
    """Separators become rules; other lines are written verbatim."""

    def test_separator_rule(self, sample_content) -> None:
        terminal = FakeTerminal(rows=24, columns=60)
        ViewportRenderer(terminal).render(sample_content, 0)
        body = rendered_rows(terminal)[HEADER_LINES:]
        color = FG_COLORS[band_color(2020)]
        assert body[2].endswith(f"{color}{RULE * 52}{FG_RESET}")
        assert strip_ansi(body[2]) == "      │ " + RULE * 52

    def test_segments_are_written_verbatim(self, terminal) -> None:
        segment = bold(cyan("Acme"))
        content = ContentBuilder().band(2001).line("Engineer at ", segment).build()
        ViewportRenderer(terminal).render(content, 0)
        body = rendered_rows(terminal)[HEADER_LINES:]
        assert body[0].endswith("Engineer at " + str(segment))

    def test_no_truncation(self) -> None:
        terminal = FakeTerminal(rows=24, columns=20)
        content = ContentBuilder().band(1).line("x" * 100).build()
        ViewportRenderer(terminal).render(content, 0)
        body = rendered_rows(terminal)[HEADER_LINES:]
        assert strip_ansi(body[0]).endswith("x" * 100)
