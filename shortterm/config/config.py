from __future__ import annotations

"""Configuration loading and validation.

This module loads YAML configuration, applies defaults, and validates
ranges, enumerations and key bindings before a run starts.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..ui.keys import DEFAULT_BINDINGS, resolve_bindings


ALLOWED_UI_MODES = {"plain", "screen"}
DEFAULT_DATABASE_PATH = "~/.config/short-term"


class ConfigError(ValueError):
    """Configuration that cannot be used to run a test."""


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file {path} is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        return _load_yaml(Path(path).expanduser())
    return _load_yaml(Path(__file__).with_name("defaults.yml"))


def _as_int(section: Dict[str, Any], key: str, name: str) -> int:
    value = section.get(key)
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Unsupported enum values fall back with a warning; unusable ranges and
    key bindings raise ConfigError.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    for section in ("database", "test", "ui", "analytics"):
        if cfg.get(section) is None:
            cfg[section] = {}
        elif not isinstance(cfg[section], dict):
            raise ConfigError(f"Section '{section}' must be a mapping")

    database = cfg["database"]
    test = cfg["test"]
    ui = cfg["ui"]
    analytics = cfg["analytics"]

    database.setdefault("path", DEFAULT_DATABASE_PATH)

    test.setdefault("trials", 20)
    test.setdefault("numbers", 7)
    test.setdefault("min", 10)
    test.setdefault("max", 99)

    ui.setdefault("mode", "plain")
    ui.setdefault("dry", False)
    ui.setdefault("keys", {k: list(v) for k, v in DEFAULT_BINDINGS.items()})

    analytics.setdefault("smoothing_span", 5)
    analytics.setdefault("history_limit", 10)

    if not str(database["path"]).strip():
        raise ConfigError("database.path must not be empty")

    for key in ("trials", "numbers", "min", "max"):
        test[key] = _as_int(test, key, f"test.{key}")
    if test["trials"] < 0:
        raise ConfigError(f"test.trials must be >= 0, got {test['trials']}")
    if test["numbers"] < 0:
        raise ConfigError(f"test.numbers must be >= 0, got {test['numbers']}")
    if test["max"] <= 0:
        raise ConfigError(f"test.max must be positive, got {test['max']}")
    if test["min"] >= test["max"]:
        raise ConfigError(f"test.min ({test['min']}) must be below test.max ({test['max']})")

    mode = ui.get("mode")
    if mode not in ALLOWED_UI_MODES:
        print(f"WARNING: Unsupported ui.mode '{mode}', using 'plain'.", file=sys.stderr)
        ui["mode"] = "plain"

    ui["dry"] = bool(ui.get("dry"))
    if ui["dry"] and ui["mode"] == "screen":
        print("WARNING: Dry mode is only available in plain mode; ignoring it.", file=sys.stderr)
        ui["dry"] = False

    keys = ui.get("keys") or {}
    if not isinstance(keys, dict):
        raise ConfigError("ui.keys must map actions to key names")
    try:
        ui["bindings"] = resolve_bindings(keys)
    except ValueError as exc:
        raise ConfigError(f"ui.keys: {exc}") from exc

    return cfg
