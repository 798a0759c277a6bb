"""Frame rendering for the ordinal prompt.

Rendering is a pure function of the catalog, the selection state and the
session status. Output is Rich markup; labels are escaped so user text is
never read as markup. Windowing is delegated to a paginator.
"""

from __future__ import annotations

from typing import Any, Protocol

from rich.markup import escape
from rich.text import Text

from .components import ChoiceCatalog, Separator
from .selection import SelectionState
from .themes import DEFAULT_THEME, Theme
from .types import Status


class PaginatorLike(Protocol):
    def paginate(self, content: str, active_line: int, page_size: int | None = None) -> str: ...


def _ordinal_or_box(ordinal: int | None, theme: Theme) -> str:
    if ordinal is None:
        return theme.unchecked_icon
    return f"[{theme.ordinal_color}]{ordinal}[/{theme.ordinal_color}]"


def render_choices(catalog: ChoiceCatalog, state: SelectionState, theme: Theme = DEFAULT_THEME) -> str:
    """Render every catalog entry as one line.

    Selected choices show their selection order, the pointed choice gets
    the cursor glyph, disabled choices show their reason.
    """
    dim = theme.dim_color
    lines = []
    position = 0

    for item in catalog:
        if isinstance(item, Separator):
            separator = item.line or theme.separator_line
            lines.append(f" [{dim}]{escape(separator)}[/{dim}]")
            continue

        reason = catalog.disabled_reason(item, theme.disabled_reason)
        if reason is not None:
            lines.append(f" [{dim}]- {escape(item.label)} ({escape(reason)})[/{dim}]")
            continue

        line = f"{_ordinal_or_box(state.ordinal_of(item.value), theme)} {escape(item.label)}"
        if position == state.pointer:
            sel = theme.selected_color
            lines.append(f"[{sel}]{theme.cursor_icon}{line}[/{sel}]")
        else:
            lines.append(f" {line}")
        position += 1

    return "\n".join(lines)


def render_header(message: str, show_hint: bool, theme: Theme = DEFAULT_THEME) -> str:
    q = theme.question_color
    header = f"[{q}]{theme.question_icon}[/{q}] [bold]{escape(message)}[/bold] "
    if show_hint:
        k = theme.key_color
        header += f"(Press [{k}]<space>[/{k}] to select, [{k}]<r>[/{k}] to reset)"
    return header


def render_frame(
    catalog: ChoiceCatalog,
    state: SelectionState,
    paginator: PaginatorLike,
    *,
    message: str,
    status: Status = Status.ACTIVE,
    interacted: bool = False,
    page_size: int | None = None,
    error: str | None = None,
    theme: Theme = DEFAULT_THEME,
) -> tuple[str, str]:
    """Render the prompt as a (main, bottom) pair of markup strings."""
    main = render_header(message, not interacted, theme)

    if status == Status.ANSWERED:
        answer = ", ".join(str(value) for value in state.effective_selection())
        main += f"[{theme.answer_color}]{escape(answer)}[/{theme.answer_color}]"
    else:
        choices = render_choices(catalog, state, theme)
        active_line = catalog.index_of(catalog.get_choice(state.pointer))
        main += "\n" + paginator.paginate(choices, active_line, page_size)

    bottom = ""
    if status == Status.INVALID and error:
        e = theme.error_color
        bottom = f"[{e}]{escape(theme.error_icon)}[/{e}] {escape(error)}"

    return main, bottom


def plain(markup: Any) -> str:
    """Strip Rich markup, leaving the text a terminal would show."""
    return Text.from_markup(str(markup)).plain
