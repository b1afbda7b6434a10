"""Interactive resume viewer components."""

from term_resume.cli.viewer.base import KeySource, Screen, ViewerContext
from term_resume.cli.viewer.renderer import ViewportRenderer, HEADER_LINES
from term_resume.cli.viewer.controller import ScrollController, ControllerState
from term_resume.cli.viewer.banner import Banner, PeriodicTimer
from term_resume.cli.viewer.app import ViewerApp, run_viewer

__all__ = [
    "KeySource",
    "Screen",
    "ViewerContext",
    "ViewportRenderer",
    "HEADER_LINES",
    "ScrollController",
    "ControllerState",
    "Banner",
    "PeriodicTimer",
    "ViewerApp",
    "run_viewer",
]
