"""
Filesystem theme registry.

A theme is a directory under the themes root. It is "registered" when the
directory exists and, if an explicit enabled list is configured, its name is
on that list. Independent of Flask so it can be used from scripts and tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .errors import UnknownTheme


class ThemeRegistry:
    def __init__(self, themes_path: str, enabled: Optional[Iterable[str]] = None) -> None:
        self.themes_path = Path(themes_path)
        self.enabled = frozenset(enabled) if enabled is not None else None

    def _candidate(self, name: str) -> Optional[Path]:
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            return None
        if self.enabled is not None and name not in self.enabled:
            return None
        candidate = self.themes_path / name
        return candidate if candidate.is_dir() else None

    def theme_exists(self, name: str) -> bool:
        return self._candidate(name) is not None

    def get_theme_path(self, name: str) -> str:
        """
        Absolute path of a registered theme.

        Raises:
            UnknownTheme if the theme is missing or not enabled.
        """
        candidate = self._candidate(name)
        if candidate is None:
            raise UnknownTheme(name)
        return str(candidate.resolve())

    def list_themes(self) -> List[str]:
        """Names of all registered themes, sorted. Empty if the root is missing."""
        if not self.themes_path.is_dir():
            return []
        return sorted(entry.name for entry in self.themes_path.iterdir() if self.theme_exists(entry.name))


__all__ = ["ThemeRegistry"]
