"""Choice catalog for ordinal_menu.

This module provides the items a prompt selects from:
- Choice: Selectable item with a value, a label and a disabled status
- Separator: Visual divider, never selectable
- ChoiceCatalog: Ordered lookup over choices, aware of prior answers
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

from .themes import DEFAULT_THEME

# False/True, a reason string, or a predicate over prior answers
Disabled = Union[bool, str, Callable[[Mapping[str, Any]], Union[bool, str]]]

SEPARATOR_MARKERS = ("---",)


@dataclass
class Choice:
    """A selectable item.

    Attributes:
        label: Display text for this choice.
        value: Value returned when selected (defaults to label).
        disabled: False, True, a reason string, or a callable taking the
            prior answers and returning one of those.
    """

    label: str
    value: Any = None
    disabled: Disabled = False

    def __post_init__(self):
        if self.value is None:
            self.value = self.label

    def disabled_status(self, answers: Mapping[str, Any]) -> bool | str:
        """Evaluate the disabled field against answers (never cached)."""
        if callable(self.disabled):
            return self.disabled(answers)
        return self.disabled


@dataclass
class Separator:
    """Visual separator between groups of choices.

    Attributes:
        line: Text to display; the theme's separator line when None.
    """

    line: str | None = None

    def __str__(self) -> str:
        return self.line or DEFAULT_THEME.separator_line


Entry = Union[Choice, Separator]


def parse_entry(raw: Any) -> Entry:
    """Build a Choice or Separator from a config entry.

    Accepts ready items, plain strings, ``"---"`` separator markers, and
    mappings with ``value``, ``label`` (or ``name``) and ``disabled`` keys.
    Mappings with ``separator`` or ``type: separator`` become separators.
    """
    if isinstance(raw, (Choice, Separator)):
        return raw
    if isinstance(raw, str):
        if raw in SEPARATOR_MARKERS:
            return Separator()
        return Choice(label=raw)
    if isinstance(raw, Mapping):
        if raw.get("type") == "separator":
            return Separator(raw.get("line"))
        if "separator" in raw:
            return Separator(raw["separator"] or None)
        label = raw.get("label", raw.get("name"))
        value = raw.get("value")
        if label is None:
            if value is None:
                raise ValueError(f"Choice needs a label or value: {raw!r}")
            label = str(value)
        return Choice(label=str(label), value=value, disabled=raw.get("disabled", False))
    # Bare values (ints, enums...) are their own label
    return Choice(label=str(raw), value=raw)


class ChoiceCatalog:
    """Ordered collection of choices and separators.

    Positions used by ``get_choice`` index the *selectable* choices only:
    separators and currently disabled choices are skipped. Disabled status
    is re-evaluated on every call so predicates over prior answers stay live.
    """

    def __init__(self, entries: list[Any], answers: Mapping[str, Any] | None = None):
        self.items: list[Entry] = [parse_entry(entry) for entry in entries]
        self.answers: Mapping[str, Any] = answers if answers is not None else {}

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def is_disabled(self, choice: Entry) -> bool:
        if isinstance(choice, Separator):
            return True
        return bool(choice.disabled_status(self.answers))

    def disabled_reason(
        self, choice: Choice, default: str = DEFAULT_THEME.disabled_reason
    ) -> str | None:
        """Return the reason text for a disabled choice, or None if enabled."""
        status = choice.disabled_status(self.answers)
        if not status:
            return None
        if isinstance(status, str):
            return status
        return default

    def selectable(self) -> list[Choice]:
        return [item for item in self.items if not self.is_disabled(item)]

    @property
    def real_length(self) -> int:
        """Number of selectable choices."""
        return len(self.selectable())

    @property
    def has_choices(self) -> bool:
        return any(isinstance(item, Choice) for item in self.items)

    def get_choice(self, index: int) -> Choice | None:
        """Return the selectable choice at index, or None when out of range."""
        choices = self.selectable()
        if 0 <= index < len(choices):
            return choices[index]
        return None

    def find(self, value: Any) -> Choice | None:
        """Return the first choice (enabled or not) whose value matches."""
        for item in self.items:
            if isinstance(item, Choice) and item.value == value:
                return item
        return None

    def index_of(self, choice: Entry | None) -> int:
        """Return the catalog line of choice, or -1."""
        for i, item in enumerate(self.items):
            if item is choice:
                return i
        return -1
