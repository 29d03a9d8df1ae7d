"""
Core utilities for Theme Helper.

This package groups non-template helpers used across the app:
- config: paths, JSON load/save, validated settings
- schemas: pydantic models for the config file
- logging: Request ID aware logging filters/formatters and root logger config
- themes: filesystem theme registry
- errors: exception types

Exports are explicit to keep static analyzers (e.g., Pyright) happy.
"""

from .config import (
    default_config_path,
    default_themes_path,
    get_config_path,
    load_config,
    load_settings,
    save_config,
)
from .errors import UnknownLanguage, UnknownTheme
from .logging import (
    COMPONENT_LOGGER_NAME,
    JsonFormatter,
    RequestIdFilter,
    configure_logging,
    get_component_logger,
)
from .schemas import LanguageConfig, ThemeHelperConfig
from .themes import ThemeRegistry

__all__ = [
    # config
    "default_config_path",
    "default_themes_path",
    "get_config_path",
    "load_config",
    "load_settings",
    "save_config",
    # errors
    "UnknownLanguage",
    "UnknownTheme",
    # logging
    "COMPONENT_LOGGER_NAME",
    "configure_logging",
    "get_component_logger",
    "RequestIdFilter",
    "JsonFormatter",
    # schemas
    "LanguageConfig",
    "ThemeHelperConfig",
    # themes
    "ThemeRegistry",
]
