"""Pytest fixtures for ordinal-menu tests."""

import pytest

from ordinal_menu.menu import OrdinalPrompt
from ordinal_menu.render import plain


class FakeScreen:
    """Screen sink that records plain-text frames instead of drawing."""

    def __init__(self):
        self.frames: list[tuple[str, str]] = []
        self.done_calls = 0

    def render(self, main: str, bottom: str) -> None:
        self.frames.append((plain(main), plain(bottom)))

    def done(self) -> None:
        self.done_calls += 1

    @property
    def last(self) -> str:
        return self.frames[-1][0]

    @property
    def last_error(self) -> str:
        return self.frames[-1][1]

    @property
    def output(self) -> str:
        return "\n".join(f"{main}\n{bottom}" for main, bottom in self.frames)


class FakeCursor:
    def __init__(self):
        self.visible = True
        self.hide_calls = 0
        self.show_calls = 0

    def hide(self) -> None:
        self.visible = False
        self.hide_calls += 1

    def show(self) -> None:
        self.visible = True
        self.show_calls += 1


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def cursor():
    return FakeCursor()


@pytest.fixture
def choices():
    """Default catalog used across prompt tests."""
    return ["choice 1", "choice 2", "choice 3"]


@pytest.fixture
def make_prompt(screen, cursor, choices):
    """Factory for prompts wired to the fake screen and cursor."""

    def _make(items=..., **kwargs) -> OrdinalPrompt:
        return OrdinalPrompt(
            choices if items is ... else items,
            screen=screen,
            cursor=cursor,
            **kwargs,
        )

    return _make
