"""Prompt definitions loaded from YAML or JSON files.

A definition is a mapping with a required ``choices`` list and optional
``message``, ``default`` and ``page_size`` (``pageSize`` also accepted)
keys. The ORDINAL_MENU_PAGE_SIZE environment variable supplies the page
size when the file leaves it unset.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .components import parse_entry
from .errors import ConfigError

logger = logging.getLogger(__name__)

PAGE_SIZE_ENV = "ORDINAL_MENU_PAGE_SIZE"

# File keys -> OrdinalPrompt keywords
_KEY_ALIASES = {
    "pageSize": "page_size",
    "page-size": "page_size",
}
KNOWN_KEYS = {"choices", "message", "default", "page_size"}


def get_env_page_size() -> int | None:
    """Return a positive page size from the environment, if set and valid."""
    raw = (os.environ.get(PAGE_SIZE_ENV) or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", PAGE_SIZE_ENV, raw)
        return None
    if value < 1:
        logger.warning("Ignoring %s=%r: must be positive", PAGE_SIZE_ENV, raw)
        return None
    return value


def normalize_config(data: Any, source: str = "<config>") -> dict[str, Any]:
    """Validate a raw definition and map its keys to prompt keywords."""
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: expected a mapping at top level")

    cfg: dict[str, Any] = {}
    for key, value in data.items():
        key = _KEY_ALIASES.get(key, key)
        if key not in KNOWN_KEYS:
            logger.warning("%s: ignoring unknown key %r", source, key)
            continue
        cfg[key] = value

    choices = cfg.get("choices")
    if not isinstance(choices, list) or not choices:
        raise ConfigError(f"{source}: `choices` must be a non-empty list")
    for entry in choices:
        try:
            parse_entry(entry)
        except ValueError as e:
            raise ConfigError(f"{source}: invalid choice: {e}") from e

    default = cfg.get("default")
    if default is not None and not isinstance(default, list):
        cfg["default"] = [default]

    page_size = cfg.get("page_size")
    if page_size is not None:
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
            raise ConfigError(f"{source}: `page_size` must be a positive integer")
    else:
        env_size = get_env_page_size()
        if env_size is not None:
            cfg["page_size"] = env_size

    return cfg


def load_prompt_config(path: str | Path) -> dict[str, Any]:
    """Load a prompt definition file.

    YAML is used for ``.yaml``/``.yml`` files, JSON otherwise.

    Raises:
        ConfigError: If the file is missing, unparsable or malformed.
    """
    config_path = Path(path)
    try:
        with open(config_path) as f:
            if config_path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {config_path}") from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot parse {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    return normalize_config(data, str(config_path))
