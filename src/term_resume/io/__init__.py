"""File I/O for resume content."""

from term_resume.io.reader import load, loads, ContentError

__all__ = ["load", "loads", "ContentError"]
