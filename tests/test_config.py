"""Tests for prompt definition files."""

import json

import pytest
import yaml

from ordinal_menu import config
from ordinal_menu.components import ChoiceCatalog, Separator
from ordinal_menu.errors import ConfigError


@pytest.fixture(autouse=True)
def no_env_page_size(monkeypatch):
    monkeypatch.delenv(config.PAGE_SIZE_ENV, raising=False)


class TestLoadPromptConfig:
    def test_loads_yaml(self, tmp_path):
        path = tmp_path / "prompt.yaml"
        path.write_text(
            yaml.dump(
                {
                    "message": "Order?",
                    "choices": ["a", {"value": "b", "label": "Bee"}, "---"],
                    "default": ["b"],
                    "pageSize": 4,
                }
            )
        )

        cfg = config.load_prompt_config(path)
        assert cfg == {
            "message": "Order?",
            "choices": ["a", {"value": "b", "label": "Bee"}, "---"],
            "default": ["b"],
            "page_size": 4,
        }

    def test_loads_json(self, tmp_path):
        path = tmp_path / "prompt.json"
        path.write_text(json.dumps({"choices": ["a", "b"], "default": "a"}))

        cfg = config.load_prompt_config(path)
        assert cfg["choices"] == ["a", "b"]
        assert cfg["default"] == ["a"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            config.load_prompt_config(tmp_path / "nope.yaml")

    def test_corrupt_yaml(self, tmp_path):
        path = tmp_path / "prompt.yaml"
        path.write_text("choices: [a, b\n")
        with pytest.raises(ConfigError, match="Cannot parse"):
            config.load_prompt_config(path)

    @pytest.mark.parametrize("data", [["a", "b"], {"message": "x"}, {"choices": []}])
    def test_rejects_bad_shapes(self, tmp_path, data):
        path = tmp_path / "prompt.yaml"
        path.write_text(yaml.dump(data))
        with pytest.raises(ConfigError):
            config.load_prompt_config(path)

    def test_rejects_bad_page_size(self, tmp_path):
        path = tmp_path / "prompt.yaml"
        path.write_text(yaml.dump({"choices": ["a"], "page_size": 0}))
        with pytest.raises(ConfigError, match="page_size"):
            config.load_prompt_config(path)

    def test_unknown_keys_are_dropped(self):
        cfg = config.normalize_config({"choices": ["a"], "when": True})
        assert cfg == {"choices": ["a"]}


class TestEnvPageSize:
    def test_env_fills_missing_page_size(self, monkeypatch):
        monkeypatch.setenv(config.PAGE_SIZE_ENV, "12")
        assert config.normalize_config({"choices": ["a"]})["page_size"] == 12

    def test_file_value_wins_over_env(self, monkeypatch):
        monkeypatch.setenv(config.PAGE_SIZE_ENV, "12")
        assert config.normalize_config({"choices": ["a"], "pageSize": 3})["page_size"] == 3

    @pytest.mark.parametrize("raw", ["", "abc", "0", "-2"])
    def test_invalid_env_is_ignored(self, monkeypatch, raw):
        monkeypatch.setenv(config.PAGE_SIZE_ENV, raw)
        assert config.get_env_page_size() is None


def test_config_entries_build_catalog():
    catalog = ChoiceCatalog(
        ["a", {"value": "b", "label": "Bee", "disabled": "later"}, {"separator": "--"}, 3]
    )
    labels = [str(item) if isinstance(item, Separator) else item.label for item in catalog]
    assert labels == ["a", "Bee", "--", "3"]
    assert catalog.find("b").label == "Bee"
    assert catalog.find(3).value == 3
    assert catalog.real_length == 2


def test_malformed_choice_entry_is_config_error():
    with pytest.raises(ConfigError, match="invalid choice"):
        config.normalize_config({"choices": ["a", {"disabled": True}]})
