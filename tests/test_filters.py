import pytest
from jinja2 import Environment

from theme_helper.core.errors import UnknownLanguage
from theme_helper.core.schemas import LanguageConfig
from theme_helper.i18n.languages import EU_LANGUAGES
from theme_helper.i18n.manager import LanguageManager
from theme_helper.templating.filters import Filters, format_size, to_date_status, to_file_icon


@pytest.fixture
def filters():
    languages = {
        "en": LanguageConfig(name="English", native_name="English"),
        "fr": LanguageConfig(name="French", native_name="Français (site)"),
        "xx-custom": LanguageConfig(name="Custom", native_name="Kustom"),
        "de": LanguageConfig(name="German"),
    }
    return Filters(LanguageManager(languages, "en"))


@pytest.mark.parametrize(
    "extension,expected",
    [
        ("jpg", "image"),
        ("JPG", "image"),
        ("WebP", "image"),
        ("pptx", "presentation"),
        ("ODP", "presentation"),
        ("xlsx", "spreadsheet"),
        ("ods", "spreadsheet"),
        ("mp4", "video"),
        ("M4V", "video"),
        ("PDF", "file"),
        ("docx", "file"),
        ("", "file"),
    ],
)
def test_to_file_icon(extension, expected):
    assert to_file_icon(extension) == expected


def test_to_date_status():
    assert to_date_status("cancelled") == "canceled"
    assert to_date_status("default") == "default"
    assert to_date_status("ongoing") == "ongoing"
    assert to_date_status("past") == "past"
    assert to_date_status("unknown") == "unknown"
    assert to_date_status("Cancelled") == "Cancelled"


@pytest.mark.parametrize(
    "size,expected",
    [
        (0, "0 bytes"),
        (1, "1 byte"),
        (512, "512 bytes"),
        ("1023", "1023 bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1024 * 1024, "1 MB"),
        (int(2.25 * 1024 * 1024 * 1024), "2.25 GB"),
        (1024 ** 8, "1 YB"),
        (1024 ** 9, "1024 YB"),
    ],
)
def test_format_size(size, expected):
    assert format_size(size) == expected


@pytest.mark.parametrize("size", ["inf", "-inf", "nan", float("inf")])
def test_format_size_non_finite_passes_through(size):
    assert format_size(size) is size


def test_to_language_name(filters):
    assert filters.to_language_name("fr") == "French"
    assert filters.to_language_name("und") == "Not specified"
    assert filters.to_language_name("zz") == "Unknown (zz)"
    assert filters.to_language_name(None) == "Unknown (None)"


def test_native_name_enabled_language_wins(filters):
    # Enabled language overrides the static table
    assert filters.to_native_language_name("fr") == "Français (site)"
    # Enabled language only known to the site
    assert filters.to_native_language_name("xx-custom") == "Kustom"


def test_native_name_falls_back_to_static_tables(filters):
    # Enabled but without native name
    assert filters.to_native_language_name("de") == "Deutsch"
    # Not enabled: EU table
    assert filters.to_native_language_name("bg") == "български"
    assert filters.to_native_language_name("pt-pt") == "português"
    # Not enabled: standard table
    assert filters.to_native_language_name("ja") == "日本語"


@pytest.mark.parametrize("code", list(EU_LANGUAGES))
def test_eu_languages_literal_values(code):
    bare = Filters(LanguageManager({}, "en"))
    entry = EU_LANGUAGES[code]
    assert bare.to_native_language_name(code) == entry.native_name
    assert bare.to_native_language_id(code) == entry.short_id


def test_french_examples():
    bare = Filters(LanguageManager({}, "en"))
    assert bare.to_native_language_name("fr") == "français"
    assert bare.to_native_language_id("fr") == "fr"
    assert bare.to_native_language_id("pt-pt") == "pt"


def test_native_language_id_ignores_enabled_languages(filters):
    with pytest.raises(UnknownLanguage):
        filters.to_native_language_id("xx-custom")
    assert filters.to_native_language_id("zh-hans") == "zh"
    assert filters.to_native_language_id("ar") == "ar"


@pytest.mark.parametrize("code", ["zz", "", None, 42, "FR"])
def test_unknown_language_raises(filters, code):
    with pytest.raises(UnknownLanguage) as exc:
        filters.to_native_language_name(code)
    assert str(code) in str(exc.value)
    with pytest.raises(UnknownLanguage):
        filters.to_native_language_id(code)


def test_filters_are_idempotent(filters):
    for _ in range(3):
        assert filters.to_native_language_name("fr") == "Français (site)"
        assert filters.to_native_language_id("sv") == "sv"
        assert to_file_icon("MOV") == "video"
        assert to_date_status("cancelled") == "canceled"
        assert format_size(2048) == "2 KB"


def test_filters_registered_on_environment(filters):
    env = Environment()
    filters.register(env)
    tmpl = env.from_string(
        "{{ 'JPG'|to_file_icon }}|{{ 'cancelled'|to_date_status }}|{{ 1536|format_size }}|"
        "{{ 'fr'|to_language }}|{{ 'bg'|to_native_language }}|{{ 'pt-pt'|to_native_language_id }}"
    )
    assert tmpl.render() == "image|canceled|1.5 KB|French|български|pt"


def test_unknown_language_surfaces_from_template(filters):
    env = Environment()
    filters.register(env)
    with pytest.raises(UnknownLanguage):
        env.from_string("{{ 'zz'|to_native_language }}").render()
