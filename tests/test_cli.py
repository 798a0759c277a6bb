"""Tests for the ordinal-menu command line."""

import json

import pytest
import yaml

from ordinal_menu import cli
from ordinal_menu.menu import OrdinalPrompt


@pytest.fixture
def scripted(monkeypatch, screen, cursor):
    """Make the CLI read a fixed key sequence instead of the terminal."""
    seen = {}

    def _script(keys):
        class ScriptedPrompt(OrdinalPrompt):
            def __init__(self, choices, **kwargs):
                seen.update(kwargs)
                super().__init__(choices, screen=screen, cursor=cursor, **kwargs)

            def show(self):
                return self.run(keys)

        monkeypatch.setattr(cli, "OrdinalPrompt", ScriptedPrompt)
        return seen

    return _script


def test_prints_values_in_selection_order(scripted, capsys):
    scripted(["3", "1", "\r"])
    assert cli.main(["a", "b", "c"]) == 0
    assert capsys.readouterr().out == "c\na\n"


def test_json_output(scripted, capsys):
    scripted(["2", "\r"])
    assert cli.main(["--json", "a", "b"]) == 0
    assert json.loads(capsys.readouterr().out) == ["b"]


def test_defaults_and_message(scripted, capsys):
    seen = scripted(["\r"])
    assert cli.main(["-m", "Order?", "-d", "b", "-d", "a", "a", "b"]) == 0
    assert seen["message"] == "Order?"
    assert capsys.readouterr().out == "b\na\n"


def test_config_file(scripted, tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("ORDINAL_MENU_PAGE_SIZE", raising=False)
    path = tmp_path / "prompt.yaml"
    path.write_text(yaml.dump({"choices": ["x", "y"], "pageSize": 2}))
    seen = scripted(["j", " ", "\r"])

    assert cli.main(["--config", str(path)]) == 0
    assert seen["page_size"] == 2
    assert capsys.readouterr().out == "y\n"


def test_page_size_from_env(scripted, monkeypatch):
    monkeypatch.setenv("ORDINAL_MENU_PAGE_SIZE", "9")
    seen = scripted(["\r"])
    cli.main(["a"])
    assert seen["page_size"] == 9


def test_no_choices_is_an_error(scripted):
    scripted(["\r"])
    assert cli.main([]) == 2


def test_missing_config_is_an_error(scripted, tmp_path):
    scripted(["\r"])
    assert cli.main(["--config", str(tmp_path / "missing.yaml")]) == 2


def test_abort_exits_130(scripted, cursor):
    scripted([" "])
    assert cli.main(["a"]) == 130
    assert cursor.visible is True


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    assert exc.value.code == 0
    assert "ordinal-menu" in capsys.readouterr().out


def test_bad_choice_entry_in_config_is_an_error(scripted, tmp_path):
    path = tmp_path / "prompt.yaml"
    path.write_text(yaml.dump({"choices": ["a", {"disabled": True}]}))
    scripted(["\r"])
    assert cli.main(["--config", str(path)]) == 2


@pytest.mark.parametrize("raw", ["-3", "0", "two"])
def test_page_size_must_be_positive(scripted, raw):
    scripted(["\r"])
    with pytest.raises(SystemExit) as exc:
        cli.main(["--page-size", raw, "a"])
    assert exc.value.code == 2
