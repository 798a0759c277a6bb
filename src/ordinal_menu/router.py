"""Key routing for the ordinal prompt.

KeyRouter maps one key event to one SelectionState mutation through a
dispatch table. Events are handled strictly one at a time in arrival
order; unknown keys are dropped without touching the state.
"""

from __future__ import annotations

import logging

from .keys import KeyEvent, as_event, digit_of, kind_of
from .selection import SelectionState
from .types import Route

logger = logging.getLogger(__name__)


class KeyRouter:
    """Dispatch key events onto a SelectionState.

    Attributes:
        state: Selection being edited.
        interacted: Set once space is pressed or the prompt is answered;
            hides the hint line.
    """

    def __init__(self, state: SelectionState):
        self.state = state
        self.interacted = False
        self._handlers = {
            "submit": self._on_submit,
            "down": self._on_down,
            "up": self._on_up,
            "digit": self._on_digit,
            "space": self._on_space,
            "reset": self._on_reset,
        }

    def dispatch(self, key: KeyEvent | str) -> Route:
        """Apply one event and report what the caller must do next."""
        event = as_event(key)
        handler = self._handlers.get(kind_of(event))
        if handler is None:
            logger.debug("Ignoring key %r", event)
            return Route.IGNORED
        return handler(event)

    def _on_submit(self, event: KeyEvent) -> Route:
        return Route.SUBMIT

    def _on_down(self, event: KeyEvent) -> Route:
        self.state.move_by(+1)
        return Route.RENDER

    def _on_up(self, event: KeyEvent) -> Route:
        self.state.move_by(-1)
        return Route.RENDER

    def _on_digit(self, event: KeyEvent) -> Route:
        if self.state.jump_to(digit_of(event)):
            self.state.toggle(self.state.pointer)
        return Route.RENDER

    def _on_space(self, event: KeyEvent) -> Route:
        self.interacted = True
        self.state.toggle(self.state.pointer)
        return Route.RENDER

    def _on_reset(self, event: KeyEvent) -> Route:
        self.state.reset()
        return Route.RENDER
