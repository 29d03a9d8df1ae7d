"""
Language data and the config-backed language service.
"""

from .languages import (
    EU_LANGUAGES,
    PREDEFINED_LANGUAGES,
    STANDARD_LANGUAGES,
    LanguageEntry,
    get_predefined_language,
)
from .manager import Language, LanguageManager

__all__ = [
    "EU_LANGUAGES",
    "PREDEFINED_LANGUAGES",
    "STANDARD_LANGUAGES",
    "Language",
    "LanguageEntry",
    "LanguageManager",
    "get_predefined_language",
]
