"""
Language service backed by the site configuration.

Enabled languages come from ThemeHelperConfig.languages. Two locked
pseudo-languages ("und" and "zxx") are always known so content with no
meaningful language still gets a readable name.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Optional

from theme_helper.core.schemas import LanguageConfig, ThemeHelperConfig

LANGCODE_NOT_SPECIFIED = "und"
LANGCODE_NOT_APPLICABLE = "zxx"

LOCKED_LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType(
    {
        LANGCODE_NOT_SPECIFIED: "Not specified",
        LANGCODE_NOT_APPLICABLE: "Not applicable",
    }
)


class Language(NamedTuple):
    id: str
    name: str
    direction: str = "ltr"
    weight: int = 0


class LanguageManager:
    def __init__(self, languages: Mapping[str, LanguageConfig], default_language: str = "en") -> None:
        self._languages: Dict[str, LanguageConfig] = dict(languages)
        self.default_language = default_language

    @classmethod
    def from_config(cls, config: ThemeHelperConfig) -> "LanguageManager":
        return cls(config.languages, config.default_language)

    def get_languages(self) -> List[Language]:
        """Enabled languages ordered by weight, then code."""
        ordered = sorted(self._languages.items(), key=lambda kv: (kv[1].weight, kv[0]))
        return [Language(code, cfg.name, cfg.direction, cfg.weight) for code, cfg in ordered]

    def get_language(self, code: object) -> Optional[Language]:
        cfg = self._languages.get(code) if isinstance(code, str) else None
        if cfg is None:
            return None
        return Language(code, cfg.name, cfg.direction, cfg.weight)

    def get_language_name(self, code: object) -> str:
        """
        Display name for a language code.

        Enabled languages use their configured name, the locked codes use
        their fixed label, anything else reads "Unknown (<code>)".
        """
        language = self.get_language(code)
        if language is not None:
            return language.name
        if isinstance(code, str) and code in LOCKED_LANGUAGE_NAMES:
            return LOCKED_LANGUAGE_NAMES[code]
        return f"Unknown ({code})"

    def get_native_languages(self) -> Dict[str, Language]:
        """
        Enabled languages keyed by code, each named in its own script.
        Entries with no configured native name keep an empty name.
        """
        return {
            lang.id: lang._replace(name=self._languages[lang.id].native_name)
            for lang in self.get_languages()
        }


__all__ = [
    "LANGCODE_NOT_APPLICABLE",
    "LANGCODE_NOT_SPECIFIED",
    "LOCKED_LANGUAGE_NAMES",
    "Language",
    "LanguageManager",
]
