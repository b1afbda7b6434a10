"""Scroll state machine driven by decoded key events."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from term_resume.cli.core.input import KeyEvent
from term_resume.cli.viewer.base import ViewerContext

logger = logging.getLogger(__name__)

START_KEYS = frozenset({'return', 'line-feed'})


class ControllerState(Enum):
    """Phases of a viewing session."""
    PROLOGUE = "prologue"        # Banner is typing
    AWAIT_START = "await_start"  # Waiting for Enter
    VIEWING = "viewing"          # Scrolling through content
    TERMINATED = "terminated"    # Absorbing; raw mode released


class ScrollController:
    """
    Consume key events and drive redraws and teardown.

    Events are handled one at a time to completion. Up at the top is a
    no-op while down at the bottom ends the session.
    """

    def __init__(
        self,
        context: ViewerContext,
        with_prologue: bool = False,
        on_exit: Optional[Callable[[], None]] = None,
    ) -> None:
        self.context = context
        self.with_prologue = with_prologue
        self.on_exit = on_exit
        self._state = ControllerState.AWAIT_START
        self._offset = 0
        self._started = False

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def terminated(self) -> bool:
        return self._state is ControllerState.TERMINATED

    def start(self) -> None:
        """Subscribe to key events and enter the first phase."""
        if self._started:
            raise RuntimeError("controller already started")
        self._started = True
        self.context.source.subscribe(self.handle)
        if self.with_prologue:
            self._transition(ControllerState.PROLOGUE)
        else:
            self._transition(ControllerState.AWAIT_START)

    def banner_finished(self) -> None:
        """Called once the banner timer has completed and cancelled itself."""
        if self._state is ControllerState.PROLOGUE:
            self._transition(ControllerState.AWAIT_START)

    def handle(self, event: KeyEvent) -> None:
        """Apply one key event."""
        if self._state is ControllerState.TERMINATED:
            return

        if event.is_control and event.name == 'c':
            self.terminate()
            return

        if self._state is ControllerState.AWAIT_START:
            if event.name in START_KEYS:
                self._begin_viewing()
        elif self._state is ControllerState.VIEWING:
            if event.name == 'up':
                self._scroll_up()
            elif event.name == 'down':
                self._scroll_down()

    def redraw(self) -> None:
        """Re-render the current view (e.g. after a resize)."""
        if self._state is ControllerState.VIEWING:
            self._render()

    def terminate(self) -> None:
        """Unsubscribe, reset styling and release raw mode, exactly once."""
        if self._state is ControllerState.TERMINATED:
            return
        self._transition(ControllerState.TERMINATED)
        ctx = self.context
        ctx.source.unsubscribe(self.handle)
        ctx.screen.reset()
        ctx.source.close()
        if self.on_exit is not None:
            self.on_exit()

    def _begin_viewing(self) -> None:
        if not self.context.lines:
            logger.info("nothing to view")
            self.terminate()
            return
        self._offset = 0
        self._transition(ControllerState.VIEWING)
        self._render()

    def _scroll_up(self) -> None:
        if self._offset > 0:
            self._offset -= 1
            self._render()

    def _scroll_down(self) -> None:
        if self._offset < self.context.lines.last_index:
            self._offset += 1
            self._render()
        else:
            self.terminate()

    def _render(self) -> None:
        self.context.renderer.render(self.context.lines, self._offset)

    def _transition(self, state: ControllerState) -> None:
        if state is not self._state:
            logger.debug("transition %s -> %s", self._state.value, state.value)
        self._state = state
