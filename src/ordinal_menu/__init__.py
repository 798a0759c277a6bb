"""Ordered multi-select prompt for the terminal.

Pick an ordered subset of choices with the keyboard; the result lists the
values in the order they were selected.

Example:
    from ordinal_menu import OrdinalPrompt, Separator

    prompt = OrdinalPrompt(
        ["build", "test", Separator(), {"label": "deploy", "disabled": "needs approval"}],
        message="Pipeline order",
    )
    steps = prompt.show()  # e.g. ["test", "build"]
"""

__version__ = "0.1.0"

from .components import Choice, ChoiceCatalog, Separator
from .errors import (
    ConfigError,
    MissingChoicesError,
    OrdinalMenuError,
    PromptAborted,
    ValidationError,
)
from .keys import KeyEvent
from .menu import ConsoleCursor, OrdinalPrompt, RichScreen, ordinal_select
from .paginator import Paginator
from .router import KeyRouter
from .selection import SelectionState
from .themes import DEFAULT_THEME, Theme
from .types import Route, Status

__all__ = [
    # Main classes
    "OrdinalPrompt",
    "ordinal_select",
    # Components
    "Choice",
    "Separator",
    "ChoiceCatalog",
    "SelectionState",
    "KeyRouter",
    "KeyEvent",
    "Paginator",
    "RichScreen",
    "ConsoleCursor",
    "Route",
    "Status",
    # Theming
    "Theme",
    "DEFAULT_THEME",
    # Errors
    "OrdinalMenuError",
    "MissingChoicesError",
    "ConfigError",
    "ValidationError",
    "PromptAborted",
]
