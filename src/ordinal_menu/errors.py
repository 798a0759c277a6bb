"""Exceptions raised by ordinal_menu."""

from __future__ import annotations


class OrdinalMenuError(Exception):
    """Base error for ordinal prompt operations."""


class MissingChoicesError(OrdinalMenuError, ValueError):
    """Raised when a prompt is built without any selectable choices."""

    def __init__(self, param: str = "choices"):
        self.param = param
        super().__init__(f"You must provide a `{param}` parameter")


class ConfigError(OrdinalMenuError):
    """Raised when a prompt definition file cannot be used."""


class ValidationError(OrdinalMenuError):
    """Raised by validators to reject a submitted selection with a message."""


class PromptAborted(OrdinalMenuError):
    """Raised when input ends before the selection is submitted."""
