"""Interactive ordinal prompt using Rich.Live.

OrdinalPrompt wires a key-event source to the selection state, re-renders
after every event and validates on submit. Its collaborators (screen,
paginator, cursor) are injected, so the same controller drives a real
terminal or a test double.

Example:
    from ordinal_menu import OrdinalPrompt

    prompt = OrdinalPrompt(
        ["tests", "lint", "docs"],
        message="Run in which order?",
        default=["lint"],
    )
    order = prompt.show()  # e.g. ["lint", "tests"]
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator, Mapping, Protocol

import readchar
from rich.console import Console
from rich.live import Live
from rich.text import Text

from .components import ChoiceCatalog
from .errors import MissingChoicesError, PromptAborted, ValidationError
from .keys import KeyEvent
from .paginator import DEFAULT_PAGE_SIZE, Paginator
from .render import PaginatorLike, render_frame
from .router import KeyRouter
from .selection import SelectionState
from .themes import DEFAULT_THEME, Theme
from .types import Route, Status

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Select items in order"

Validator = Callable[[list[Any], Mapping[str, Any]], bool | str]


class Screen(Protocol):
    def render(self, main: str, bottom: str) -> None: ...

    def done(self) -> None: ...


class Cursor(Protocol):
    def hide(self) -> None: ...

    def show(self) -> None: ...


class RichScreen:
    """Screen sink that redraws frames in place with Rich.Live."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)
        self._live: Live | None = None

    def render(self, main: str, bottom: str) -> None:
        content = Text.from_markup(f"{main}\n{bottom}" if bottom else main)
        if self._live is None:
            self._live = Live(content, console=self.console, auto_refresh=False)
            self._live.start(refresh=True)
        else:
            self._live.update(content, refresh=True)

    def done(self) -> None:
        """Stop redrawing, leaving the last frame on screen."""
        if self._live is not None:
            self._live.stop()
            self._live = None


class ConsoleCursor:
    """Terminal cursor visibility through a Rich Console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def hide(self) -> None:
        self.console.show_cursor(False)

    def show(self) -> None:
        self.console.show_cursor(True)


def read_keys() -> Iterator[KeyEvent]:
    """Yield key events from the terminal until interrupted (Ctrl+C)."""
    while True:
        yield KeyEvent.from_key(readchar.readkey())


class OrdinalPrompt:
    """Select an ordered subset of choices with the keyboard.

    Keyboard controls:
        - Up/Down, j/k or Ctrl+P/Ctrl+N: Move the pointer (wraps around)
        - Space: Toggle the pointed choice (re-selecting moves it last)
        - 1-9: Jump to that choice and toggle it
        - r: Clear the selection
        - Enter: Submit

    Args:
        choices: Choices, separators, strings or config mappings.
        message: Question shown in the header.
        default: Values to pre-select, in order.
        page_size: Number of choice lines visible at once.
        validate: Optional ``(values, answers)`` callable returning True,
            False or an error message.
        answers: Prior answers, passed to disabled predicates and validate.
        theme: Visual theme.
        screen: Sink with ``render(main, bottom)`` and ``done()``.
        paginator: Windowing service with ``paginate(text, line, size)``.
        cursor: Object with ``hide()`` and ``show()``.

    Raises:
        MissingChoicesError: If choices is missing or has no real choice.
        ValueError: If page_size is below 1 or a choice entry is malformed.
    """

    def __init__(
        self,
        choices: list[Any] | None,
        *,
        message: str = DEFAULT_MESSAGE,
        default: Iterable[Any] | None = None,
        page_size: int | None = None,
        validate: Validator | None = None,
        answers: Mapping[str, Any] | None = None,
        theme: Theme | None = None,
        screen: Screen | None = None,
        paginator: PaginatorLike | None = None,
        cursor: Cursor | None = None,
    ):
        if not choices:
            raise MissingChoicesError("choices")

        self.catalog = ChoiceCatalog(choices, answers)
        if not self.catalog.has_choices:
            raise MissingChoicesError("choices")
        if page_size is not None and page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {page_size}")

        self.message = message
        self.page_size = page_size or DEFAULT_PAGE_SIZE
        self.validate = validate
        self.theme = theme or DEFAULT_THEME
        self.state = SelectionState(self.catalog, default)
        self.router = KeyRouter(self.state)
        self.screen = screen or RichScreen()
        self.paginator = paginator or Paginator(self.theme)
        self.cursor = cursor or ConsoleCursor(getattr(self.screen, "console", None))

        self.status = Status.ACTIVE
        self.error: str | None = None
        self.result: list[Any] | None = None
        self._cursor_hidden = False

    @property
    def answers(self) -> Mapping[str, Any]:
        return self.catalog.answers

    @property
    def done(self) -> bool:
        return self.status == Status.ANSWERED

    def render(self) -> None:
        """Draw the current frame on the screen sink."""
        self.state.clamp_pointer()
        main, bottom = render_frame(
            self.catalog,
            self.state,
            self.paginator,
            message=self.message,
            status=self.status,
            interacted=self.router.interacted,
            page_size=self.page_size,
            error=self.error,
            theme=self.theme,
        )
        self.screen.render(main, bottom)

    def start(self) -> None:
        """Hide the cursor and draw the first frame."""
        self.cursor.hide()
        self._cursor_hidden = True
        self.render()

    def close(self) -> None:
        """Release the screen and restore the cursor. Safe to call twice."""
        if not self._cursor_hidden:
            return
        if not self.done:
            self.screen.done()
        self.cursor.show()
        self._cursor_hidden = False

    def __enter__(self) -> OrdinalPrompt:
        self.start()
        return self

    def __exit__(self, *exc_info) -> bool:
        self.close()
        return False

    def process(self, event: KeyEvent | str) -> bool:
        """Handle one key event. Returns True once the prompt is answered."""
        if self.done:
            return True

        route = self.router.dispatch(event)
        if route == Route.SUBMIT:
            self.submit()
        elif route == Route.RENDER:
            if self.status == Status.INVALID:
                # A new key press clears the previous error line
                self.status = Status.ACTIVE
                self.error = None
            self.render()
        return self.done

    def submit(self) -> None:
        """Validate the current selection and finish or show the error."""
        values = self.state.effective_selection()
        is_valid, message = self._check(values)
        if is_valid:
            self._on_end(values)
        else:
            self._on_error(message)

    def _check(self, values: list[Any]) -> tuple[bool, str | None]:
        if self.validate is None:
            return True, None
        try:
            outcome = self.validate(list(values), self.answers)
        except ValidationError as e:
            return False, str(e) or self.theme.invalid_message
        if outcome is True:
            return True, None
        if isinstance(outcome, str) and outcome:
            return False, outcome
        return False, self.theme.invalid_message

    def _on_end(self, values: list[Any]) -> None:
        logger.debug("Selection accepted: %r", values)
        self.status = Status.ANSWERED
        self.router.interacted = True
        self.error = None
        self.result = values

        self.render()
        self.screen.done()
        self.close()

    def _on_error(self, message: str | None) -> None:
        logger.debug("Selection rejected: %s", message)
        self.status = Status.INVALID
        self.error = message
        self.render()

    def run(self, events: Iterable[KeyEvent | str]) -> list[Any]:
        """Process events until the selection is submitted and accepted.

        Returns:
            Selected values in the order they were chosen.

        Raises:
            PromptAborted: If events run out or Ctrl+C arrives first.
        """
        self.start()
        try:
            for event in events:
                if self.process(event):
                    return self.result
        except KeyboardInterrupt as e:
            raise PromptAborted("Prompt interrupted") from e
        finally:
            self.close()
        raise PromptAborted("Input ended before the selection was submitted")

    def show(self) -> list[Any]:
        """Display the prompt on the terminal and block until submitted."""
        return self.run(read_keys())


def ordinal_select(choices: list[Any], **kwargs: Any) -> list[Any]:
    """Shortcut for ``OrdinalPrompt(choices, **kwargs).show()``."""
    return OrdinalPrompt(choices, **kwargs).show()
