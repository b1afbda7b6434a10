"""Interactive resume viewer: the event loop tying input to the screen."""

from __future__ import annotations

import logging
from typing import Optional

from term_resume.cli.core.input import RawInputSource
from term_resume.cli.core.terminal import Terminal
from term_resume.cli.viewer.banner import Banner
from term_resume.cli.viewer.base import ViewerContext
from term_resume.cli.viewer.controller import ControllerState, ScrollController
from term_resume.cli.viewer.renderer import ViewportRenderer
from term_resume.config import ViewerConfig
from term_resume.content.resume import PROMPT, banner_text
from term_resume.core.content import ContentCollection

logger = logging.getLogger(__name__)


class ViewerApp:
    """
    Interactive resume viewer.

    Single-threaded: each loop iteration waits for input (or the next
    banner tick), dispatches at most one chunk, then fires the banner
    timer if it is due.
    """

    def __init__(
        self,
        content: ContentCollection,
        config: Optional[ViewerConfig] = None,
        terminal: Optional[Terminal] = None,
        source: Optional[RawInputSource] = None,
    ) -> None:
        self.config = config or ViewerConfig()
        self.terminal = terminal or Terminal()
        self.source = source or RawInputSource()
        self.renderer = ViewportRenderer(self.terminal)
        self.context = ViewerContext(
            screen=self.terminal,
            source=self.source,
            renderer=self.renderer,
            lines=content,
        )
        self.controller = ScrollController(self.context, with_prologue=self.config.banner)

        self.banner: Optional[Banner] = None
        if self.config.banner:
            self.banner = Banner(
                self.terminal,
                banner_text(self.terminal.newline),
                prompt=PROMPT,
                interval=self.config.speed,
                on_finished=self.controller.banner_finished,
            )

    def run(self) -> None:
        """Main application loop."""
        with self.terminal.managed_mode(), self.source:
            self.controller.start()
            if self.banner is not None:
                self.banner.start()
            else:
                self.terminal.clear()
                self.terminal.write(PROMPT)

            while not self.controller.terminated:
                if self.source.eof:
                    logger.info("input closed")
                    break
                self.step()

    def step(self) -> None:
        """One iteration: read input, tick the banner, follow resizes."""
        got_input = self.source.poll(self._timeout())
        if not got_input:
            self.source.flush()
        if self.controller.terminated:
            return

        timer = self.banner.timer if self.banner is not None else None
        if timer is not None and timer.due():
            timer.fire()

        if not got_input:
            self._follow_resize()

    def _timeout(self) -> float:
        timer = self.banner.timer if self.banner is not None else None
        if timer is not None:
            remaining = timer.remaining()
            if remaining is not None:
                return remaining
        return self.config.poll_interval

    def _follow_resize(self) -> None:
        if self.controller.state is not ControllerState.VIEWING:
            return
        last = self.renderer.last_geometry
        if last is None:
            return
        current = self.terminal.size()
        if current != last:
            logger.debug("terminal resized to %s", current)
            self.controller.redraw()


def run_viewer(content: ContentCollection, config: Optional[ViewerConfig] = None) -> None:
    """Launch the viewer application."""
    app = ViewerApp(content, config)
    app.run()
