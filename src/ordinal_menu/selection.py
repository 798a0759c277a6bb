"""Ordered selection state for ordinal_menu.

SelectionState keeps the chosen values in the order they were toggled on,
plus the pointer into the catalog's selectable choices. Toggling a value
off and back on moves it to the end of the order.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .components import ChoiceCatalog

logger = logging.getLogger(__name__)


def toggle_value(values: list[Any], value: Any) -> list[Any]:
    """Return values with value removed if present, else appended."""
    if value in values:
        return [v for v in values if v != value]
    return [*values, value]


class SelectionState:
    """Ordered record of chosen values and the current pointer.

    Args:
        catalog: Choices the selection refers to.
        default: Values to pre-select, in order. Unknown and disabled
            values are dropped, as are repeats.
    """

    def __init__(self, catalog: ChoiceCatalog, default: Iterable[Any] | None = None):
        self.catalog = catalog
        self.values: list[Any] = []
        self.pointer = 0

        for value in default or []:
            choice = catalog.find(value)
            if choice is None or catalog.is_disabled(choice):
                logger.debug("Dropping default %r: not a selectable choice", value)
                continue
            if value not in self.values:
                self.values.append(value)

    def toggle(self, index: int) -> bool:
        """Toggle the selectable choice at index.

        Returns False, leaving the selection untouched, when index does not
        resolve to an enabled choice.
        """
        choice = self.catalog.get_choice(index)
        if choice is None:
            logger.debug("Ignoring toggle at %d: no selectable choice", index)
            return False
        self.values = toggle_value(self.values, choice.value)
        return True

    def move_by(self, delta: int) -> None:
        """Move the pointer, wrapping at both ends."""
        count = self.catalog.real_length
        if count == 0:
            return
        self.pointer = (self.pointer + delta) % count

    def jump_to(self, position: int) -> bool:
        """Point at the 1-based position if it exists; does not toggle."""
        if not 1 <= position <= self.catalog.real_length:
            logger.debug("Ignoring jump to %d: out of range", position)
            return False
        self.pointer = position - 1
        return True

    def reset(self) -> None:
        self.values = []

    def effective_selection(self) -> list[Any]:
        """Selected values whose choice is still enabled, in selection order."""
        selected = []
        for value in self.values:
            choice = self.catalog.find(value)
            if choice is not None and not self.catalog.is_disabled(choice):
                selected.append(value)
        return selected

    def ordinal_of(self, value: Any) -> int | None:
        """Return the 1-based position of value in the effective selection."""
        selected = self.effective_selection()
        if value in selected:
            return selected.index(value) + 1
        return None

    def clamp_pointer(self) -> None:
        """Pull the pointer back in range after choices became disabled."""
        count = self.catalog.real_length
        if self.pointer >= count:
            self.pointer = max(0, count - 1)
