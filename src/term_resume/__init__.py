"""
term-resume: a resume you scroll through in the terminal

Quick Start:
    >>> from term_resume import build_resume, run_viewer
    >>> run_viewer(build_resume())

Features:
    - Raw-mode key decoding (CSI/SS3 arrows, page keys, ctrl+letter)
    - Year-banded, colored rendering sized to the terminal
    - Typewriter banner before the resume appears
    - Load your own resume from a JSON file
"""

import logging

__version__ = "0.1.0"

# Core types
from term_resume.core.styled import StyledSegment, StyledLine
from term_resume.core.content import Line, Header, ContentCollection, ContentBuilder

# Input and rendering
from term_resume.cli.core.input import KeyDecoder, KeyEvent, RawInputSource
from term_resume.cli.viewer.renderer import ViewportRenderer
from term_resume.cli.viewer.controller import ScrollController, ControllerState
from term_resume.cli.viewer.app import ViewerApp, run_viewer

# Content
from term_resume.content.resume import build_resume
from term_resume.io.reader import load, loads

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "StyledSegment",
    "StyledLine",
    "Line",
    "Header",
    "ContentCollection",
    "ContentBuilder",
    # Input and rendering
    "KeyDecoder",
    "KeyEvent",
    "RawInputSource",
    "ViewportRenderer",
    "ScrollController",
    "ControllerState",
    "ViewerApp",
    "run_viewer",
    # Content
    "build_resume",
    "load",
    "loads",
]
