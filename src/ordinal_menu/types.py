"""Shared enums for ordinal_menu."""

from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """Lifecycle status of a prompt session."""

    ACTIVE = "active"
    INVALID = "invalid"
    ANSWERED = "answered"


class Route(str, Enum):
    """What the controller must do after routing one key event."""

    IGNORED = "ignored"
    RENDER = "render"
    SUBMIT = "submit"
