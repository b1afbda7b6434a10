"""Built-in resume content."""

from __future__ import annotations

from term_resume.core.content import ContentBuilder, ContentCollection
from term_resume.core.styled import bold, cyan, green, yellow

BANNER_LINES = (
    "Hello.",
    "",
    "This is a resume you can scroll through in your terminal.",
    "Use the arrow keys to move up and down; press Ctrl+C to leave.",
)

PROMPT = "Press Enter to continue..."


def banner_text(newline: str) -> str:
    """The text typed out before the resume is shown."""
    return newline.join(BANNER_LINES) + newline * 2


def build_resume() -> ContentCollection:
    """Return the built-in resume as a year-banded collection."""
    return (
        ContentBuilder()
        .header(
            name="Sam Carter",
            title="Software Engineer",
            email="sam.carter@example.com",
            web="https://example.com/~sam",
        )
        .band(2023)
        .line(bold("Staff Engineer"), " at ", cyan("Northwind Systems"))
        .line("Led the rewrite of the ingest pipeline around a streaming parser.")
        .line("Cut p99 latency of the query service from 900 ms to 140 ms.")
        .line("Mentored four engineers through their first on-call rotations.")
        .separator()
        .band(2019)
        .line(bold("Senior Engineer"), " at ", cyan("Lumen Analytics"))
        .line("Built the terminal dashboard used by the operations team.")
        .line("Designed the event schema shared by eleven services.")
        .line("Introduced property-based testing for the billing engine.")
        .separator()
        .band(2016)
        .line(bold("Software Engineer"), " at ", cyan("Harbor & Finch"))
        .line("Maintained the customer-facing REST API and its client SDKs.")
        .line("Automated the release process with reproducible builds.")
        .separator()
        .band(2014)
        .line(bold("B.Sc. Computer Science"), ", ", cyan("University of Leeds"))
        .line("Dissertation: ", yellow("incremental parsing of terminal input streams"))
        .separator()
        .band(2012)
        .line(bold("Open source"))
        .line("Contributor to several terminal emulators and ", green("ANSI"), " tooling.")
        .separator()
        .build()
    )
