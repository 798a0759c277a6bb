"""Keyboard input helpers for ordinal_menu.

Raw key strings from ``readchar`` are normalized into ``KeyEvent`` values
(a key name plus a ctrl flag), and small predicates classify those events
so the router reads as a table instead of repeated inline conditionals.
"""

from __future__ import annotations

from dataclasses import dataclass

import readchar

SUBMIT_NAMES = ("enter", "return", "line")
DIGITS = "123456789"


@dataclass(frozen=True)
class KeyEvent:
    """A discrete key press.

    Attributes:
        name: Key name (``up``, ``down``, ``space``, ``enter`` or the
            lowercase character for printable keys).
        ctrl: Whether the control modifier was held.
    """

    name: str
    ctrl: bool = False

    @classmethod
    def from_key(cls, key: str) -> KeyEvent:
        """Build an event from a raw ``readchar`` key string."""
        if key == readchar.key.UP:
            return cls("up")
        if key == readchar.key.DOWN:
            return cls("down")
        if key in (readchar.key.ENTER, "\r", "\n"):
            return cls("enter")
        if key == " ":
            return cls("space")
        if key == readchar.key.CTRL_N:
            return cls("n", ctrl=True)
        if key == readchar.key.CTRL_P:
            return cls("p", ctrl=True)
        if len(key) == 1 and key.isprintable():
            return cls(key.lower())
        return cls(key)


def as_event(key: KeyEvent | str) -> KeyEvent:
    """Accept either a ready event or a raw key string."""
    if isinstance(key, KeyEvent):
        return key
    return KeyEvent.from_key(key)


def is_up(event: KeyEvent) -> bool:
    """Check if event is up arrow, vim 'k' or emacs ctrl-p."""
    if event.ctrl:
        return event.name == "p"
    return event.name in ("up", "k")


def is_down(event: KeyEvent) -> bool:
    """Check if event is down arrow, vim 'j' or emacs ctrl-n."""
    if event.ctrl:
        return event.name == "n"
    return event.name in ("down", "j")


def is_space(event: KeyEvent) -> bool:
    return event.name == "space" and not event.ctrl


def is_reset(event: KeyEvent) -> bool:
    return event.name == "r" and not event.ctrl


def is_submit(event: KeyEvent) -> bool:
    """Check if event is Enter/Return (a completed line)."""
    return event.name in SUBMIT_NAMES


def digit_of(event: KeyEvent) -> int | None:
    """Return the numeric shortcut 1-9 carried by event, if any."""
    if event.ctrl or len(event.name) != 1 or event.name not in DIGITS:
        return None
    return int(event.name)


def kind_of(event: KeyEvent) -> str | None:
    """Classify event as submit, down, up, digit, space or reset."""
    if is_submit(event):
        return "submit"
    if is_down(event):
        return "down"
    if is_up(event):
        return "up"
    if digit_of(event) is not None:
        return "digit"
    if is_space(event):
        return "space"
    if is_reset(event):
        return "reset"
    return None
