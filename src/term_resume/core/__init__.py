"""Core data structures for styled, year-banded content."""

from term_resume.core.styled import StyledSegment, StyledLine
from term_resume.core.content import Line, Header, ContentCollection, ContentBuilder

__all__ = [
    "StyledSegment",
    "StyledLine",
    "Line",
    "Header",
    "ContentCollection",
    "ContentBuilder",
]
