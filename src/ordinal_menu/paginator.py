"""Page windowing for rendered choice blocks."""

from __future__ import annotations

from .themes import DEFAULT_THEME, Theme

DEFAULT_PAGE_SIZE = 7


class Paginator:
    """Window a multi-line block around the active line.

    The window only scrolls when the active line would leave it, so
    consecutive calls keep a stable view while the pointer moves inside.
    """

    def __init__(self, theme: Theme | None = None):
        self.theme = theme or DEFAULT_THEME
        self.window_offset = 0

    def _update_window(self, active: int, total: int, page_size: int):
        """Update window offset to keep the active line visible."""
        if total <= page_size:
            self.window_offset = 0
            return

        if active < self.window_offset:
            self.window_offset = active
        elif active >= self.window_offset + page_size:
            self.window_offset = active - page_size + 1
        self.window_offset = max(0, min(self.window_offset, total - page_size))

    def paginate(self, content: str, active_line: int, page_size: int | None = None) -> str:
        """Return the visible part of content.

        Args:
            content: Newline-joined lines to window.
            active_line: Index of the line that must stay visible.
            page_size: Number of content lines to show.
        """
        page_size = page_size or DEFAULT_PAGE_SIZE
        lines = content.split("\n")
        total = len(lines)
        active = max(0, min(active_line, total - 1))

        self._update_window(active, total, page_size)
        if total <= page_size:
            return content

        window_end = min(self.window_offset + page_size, total)
        dim = self.theme.dim_color
        visible = []
        if self.window_offset > 0:
            visible.append(
                f"[{dim}]  {self.theme.scroll_up_icon} {self.window_offset} more above[/{dim}]"
            )
        visible.extend(lines[self.window_offset:window_end])
        below = total - window_end
        if below > 0:
            visible.append(f"[{dim}]  {self.theme.scroll_down_icon} {below} more below[/{dim}]")
        return "\n".join(visible)
