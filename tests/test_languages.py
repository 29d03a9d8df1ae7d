import pytest

from theme_helper.core.schemas import LanguageConfig
from theme_helper.i18n.languages import (
    EU_LANGUAGES,
    PREDEFINED_LANGUAGES,
    STANDARD_LANGUAGES,
    get_predefined_language,
)
from theme_helper.i18n.manager import LanguageManager


def test_eu_table_has_24_official_languages():
    assert len(EU_LANGUAGES) == 24
    assert EU_LANGUAGES["fr"] == ("fr", "French", "français", "fr", "ltr")
    assert EU_LANGUAGES["pt-pt"].short_id == "pt"
    assert all(entry.code == code for code, entry in EU_LANGUAGES.items())


def test_eu_table_wins_over_standard_table():
    assert STANDARD_LANGUAGES["fr"].native_name == "Français"
    assert PREDEFINED_LANGUAGES["fr"].native_name == "français"
    assert PREDEFINED_LANGUAGES["pt-pt"].english_name == "Portuguese"
    assert set(PREDEFINED_LANGUAGES) == set(EU_LANGUAGES) | set(STANDARD_LANGUAGES)


def test_standard_table_direction_and_short_id():
    assert STANDARD_LANGUAGES["ar"].direction == "rtl"
    assert STANDARD_LANGUAGES["ar"].short_id == "ar"
    assert STANDARD_LANGUAGES["en-x-simple"].short_id == "en"
    assert STANDARD_LANGUAGES["ja"].direction == "ltr"


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        EU_LANGUAGES["xx"] = EU_LANGUAGES["fr"]  # type: ignore[index]


def test_get_predefined_language_rejects_non_strings():
    assert get_predefined_language(None) is None
    assert get_predefined_language(["fr"]) is None
    assert get_predefined_language("fr").native_name == "français"


def test_language_manager_orders_by_weight():
    manager = LanguageManager(
        {
            "fr": LanguageConfig(name="French", weight=2),
            "en": LanguageConfig(name="English", weight=0),
            "de": LanguageConfig(name="German", weight=2),
        }
    )
    assert [lang.id for lang in manager.get_languages()] == ["en", "de", "fr"]


def test_language_manager_native_languages():
    manager = LanguageManager(
        {
            "en": LanguageConfig(name="English", native_name="English"),
            "ar": LanguageConfig(name="Arabic", native_name="العربية", direction="rtl"),
        }
    )
    native = manager.get_native_languages()
    assert native["ar"].name == "العربية"
    assert native["ar"].direction == "rtl"
    assert manager.get_language_name("ar") == "Arabic"
    assert manager.get_language_name("zxx") == "Not applicable"
