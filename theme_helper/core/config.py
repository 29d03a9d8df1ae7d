"""
Config utilities for Theme Helper.

Responsibilities:
- Resolve the config path with environment and XDG support
- Provide JSON load/save helpers for the config file
- Turn the raw JSON into a validated ThemeHelperConfig, applying env overrides
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional

from .schemas import ThemeHelperConfig


def default_config_path() -> str:
    """
    Resolve the default config path using:
    1) $XDG_CONFIG_HOME/themehelper/config.json
    2) ~/.config/themehelper/config.json
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return str(Path(xdg) / "themehelper" / "config.json")
    return str(Path.home() / ".config" / "themehelper" / "config.json")


def default_themes_path() -> str:
    """
    Resolve the default themes directory: <repo_root>/themes.
    """
    return str(Path(__file__).resolve().parents[2] / "themes")


def get_config_path() -> str:
    """
    Return the config path honoring THEMEHELPER_CONFIG_PATH override.
    """
    return os.environ.get("THEMEHELPER_CONFIG_PATH", default_config_path())


def load_config(path: Optional[str] = None) -> Optional[dict[str, Any]]:
    """
    Load the JSON config if it exists; return None if missing.

    Raises:
        json.JSONDecodeError if the file exists but contains invalid JSON.
        OSError for I/O errors other than missing file.
    """
    cfg_path = Path(path or get_config_path())
    if not cfg_path.exists():
        return None
    with cfg_path.open("r", encoding="utf-8") as f:
        return json.load(f)


def save_config(data: dict[str, Any], path: Optional[str] = None) -> None:
    """
    Save the JSON config, creating parent directories as needed.

    Writes atomically by using a temporary file and os.replace().
    Raises OSError on I/O failures.
    """
    cfg_path = Path(path or get_config_path())
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = cfg_path.with_suffix(cfg_path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp_path, cfg_path)


def load_settings(path: Optional[str] = None, overrides: Optional[dict[str, Any]] = None) -> ThemeHelperConfig:
    """
    Load and validate the config, layering in order:
    defaults < config file < THEMEHELPER_* environment < explicit overrides.

    Raises:
        pydantic.ValidationError if the merged data is invalid.
    """
    data: dict[str, Any] = dict(load_config(path) or {})

    env_theme = os.environ.get("THEMEHELPER_THEME")
    if env_theme:
        data["theme"] = env_theme
    env_themes_path = os.environ.get("THEMEHELPER_THEMES_PATH")
    if env_themes_path:
        data["themes_path"] = env_themes_path

    if overrides:
        data.update(overrides)

    if not data.get("themes_path"):
        data["themes_path"] = default_themes_path()

    return ThemeHelperConfig.model_validate(data)


__all__ = [
    "default_config_path",
    "default_themes_path",
    "get_config_path",
    "load_config",
    "load_settings",
    "save_config",
]
