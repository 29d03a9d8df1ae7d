"""
Collection of extra Jinja2 filters for theme templates.

Arguments come straight from templates, so the filters accept loose input
(non-string codes, numeric strings for sizes) rather than enforcing types.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Mapping

from jinja2 import Environment

from theme_helper.core.errors import UnknownLanguage
from theme_helper.i18n.languages import get_predefined_language
from theme_helper.i18n.manager import LanguageManager

# Ordered: the first category containing the extension wins.
EXTENSION_CATEGORIES: Mapping[str, FrozenSet[str]] = MappingProxyType(
    {
        "image": frozenset({"jpg", "jpeg", "gif", "png", "webp"}),
        "presentation": frozenset({"ppt", "pptx", "pps", "ppsx", "odp"}),
        "spreadsheet": frozenset({"xls", "xlsx", "ods"}),
        "video": frozenset({"mp4", "mov", "mpeg", "avi", "m4v", "webm"}),
    }
)
DEFAULT_FILE_ICON = "file"

DATE_STATUS_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "default": "default",
        "ongoing": "ongoing",
        "cancelled": "canceled",
        "past": "past",
    }
)

KILOBYTE = 1024
SIZE_UNITS = ("KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def _format_number(value: float) -> str:
    rounded = round(value, 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0").rstrip(".")


def format_size(value: Any) -> Any:
    """
    Human-readable byte size: "1 byte", "12 bytes", "1.5 KB", "3 MB", ...

    Units step by 1024 and values are rounded to two decimals. Infinite and
    NaN sizes are returned unchanged.
    """
    size = float(value)
    if not math.isfinite(size):
        return value
    if size < KILOBYTE:
        count = _format_number(size)
        return "1 byte" if count == "1" else f"{count} bytes"

    size = size / KILOBYTE
    unit = SIZE_UNITS[0]
    for unit in SIZE_UNITS:
        if round(size, 2) >= KILOBYTE and unit != SIZE_UNITS[-1]:
            size = size / KILOBYTE
        else:
            break
    return f"{_format_number(size)} {unit}"


def to_file_icon(extension: Any) -> str:
    """File icon class for a file extension, case-insensitive."""
    extension = str(extension).lower()
    for file_type, extensions in EXTENSION_CATEGORIES.items():
        if extension in extensions:
            return file_type
    return DEFAULT_FILE_ICON


def to_date_status(status: Any) -> Any:
    """Date variant class for an event status; unknown statuses pass through."""
    if isinstance(status, str) and status in DATE_STATUS_LABELS:
        return DATE_STATUS_LABELS[status]
    return status


class Filters:
    """Language-aware filters bound to a LanguageManager."""

    def __init__(self, language_manager: LanguageManager) -> None:
        self.language_manager = language_manager

    def get_filters(self) -> Dict[str, Callable[..., Any]]:
        return {
            "format_size": format_size,
            "to_language": self.to_language_name,
            "to_native_language": self.to_native_language_name,
            "to_native_language_id": self.to_native_language_id,
            "to_file_icon": to_file_icon,
            "to_date_status": to_date_status,
        }

    def register(self, environment: Environment) -> None:
        environment.filters.update(self.get_filters())

    def to_language_name(self, language_code: Any) -> str:
        """Translated language name given its code."""
        return str(self.language_manager.get_language_name(language_code))

    def to_native_language_name(self, language_code: Any) -> str:
        """
        Native language name given its code.

        Enabled languages take precedence over the static tables, so a site
        can rename a language and have it shown that way everywhere.

        Raises:
            UnknownLanguage if the code is neither enabled nor predefined.
        """
        languages = self.language_manager.get_native_languages()
        language = languages.get(language_code) if isinstance(language_code, str) else None
        if language is not None and language.name:
            return language.name

        entry = get_predefined_language(language_code)
        if entry is not None and entry.native_name:
            return entry.native_name

        raise UnknownLanguage(language_code)

    def to_native_language_id(self, language_code: Any) -> str:
        """
        Short language id given its code, from the static tables only.

        Raises:
            UnknownLanguage if the code is not predefined.
        """
        entry = get_predefined_language(language_code)
        if entry is not None and entry.short_id:
            return entry.short_id

        raise UnknownLanguage(language_code)


__all__ = [
    "DATE_STATUS_LABELS",
    "DEFAULT_FILE_ICON",
    "EXTENSION_CATEGORIES",
    "Filters",
    "format_size",
    "to_date_status",
    "to_file_icon",
]
