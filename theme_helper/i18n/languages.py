"""
Static language tables.

EU_LANGUAGES lists the 24 official languages of the European Union with the
short id used by the component library. STANDARD_LANGUAGES is the general
purpose list of languages known to the site, by W3C language tag. Both are
immutable and built once at import.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, NamedTuple, Optional


class LanguageEntry(NamedTuple):
    code: str
    english_name: str
    native_name: str
    short_id: str
    direction: str = "ltr"


def _primary_subtag(code: str) -> str:
    return code.split("-", 1)[0]


def _build(rows: Dict[str, tuple]) -> Mapping[str, LanguageEntry]:
    table: Dict[str, LanguageEntry] = {}
    for code, row in rows.items():
        english, native = row[0], row[1]
        short_id = row[2] if len(row) > 2 and row[2] not in ("ltr", "rtl") else _primary_subtag(code)
        direction = "rtl" if "rtl" in row[2:] else "ltr"
        table[code] = LanguageEntry(code, english, native, short_id, direction)
    return MappingProxyType(table)


EU_LANGUAGES: Mapping[str, LanguageEntry] = _build(
    {
        "bg": ("Bulgarian", "български", "bg"),
        "cs": ("Czech", "čeština", "cs"),
        "da": ("Danish", "dansk", "da"),
        "de": ("German", "Deutsch", "de"),
        "et": ("Estonian", "eesti", "et"),
        "el": ("Greek", "ελληνικά", "el"),
        "en": ("English", "English", "en"),
        "es": ("Spanish", "español", "es"),
        "fr": ("French", "français", "fr"),
        "ga": ("Irish", "Gaeilge", "ga"),
        "hr": ("Croatian", "hrvatski", "hr"),
        "it": ("Italian", "italiano", "it"),
        "lt": ("Lithuanian", "lietuvių", "lt"),
        "lv": ("Latvian", "latviešu", "lv"),
        "hu": ("Hungarian", "magyar", "hu"),
        "mt": ("Maltese", "Malti", "mt"),
        "nl": ("Dutch", "Nederlands", "nl"),
        "pl": ("Polish", "polski", "pl"),
        "pt-pt": ("Portuguese", "português", "pt"),
        "ro": ("Romanian", "română", "ro"),
        "sk": ("Slovak", "slovenčina", "sk"),
        "sl": ("Slovenian", "slovenščina", "sl"),
        "fi": ("Finnish", "suomi", "fi"),
        "sv": ("Swedish", "svenska", "sv"),
    }
)

# Short ids default to the primary subtag of the code; "rtl" marks direction.
STANDARD_LANGUAGES: Mapping[str, LanguageEntry] = _build(
    {
        "af": ("Afrikaans", "Afrikaans"),
        "am": ("Amharic", "አማርኛ"),
        "ar": ("Arabic", "العربية", "rtl"),
        "ast": ("Asturian", "Asturianu"),
        "az": ("Azerbaijani", "Azərbaycanca"),
        "be": ("Belarusian", "Беларуская"),
        "bg": ("Bulgarian", "Български"),
        "bn": ("Bengali", "বাংলা"),
        "bo": ("Tibetan", "བོད་སྐད་"),
        "bs": ("Bosnian", "Bosanski"),
        "ca": ("Catalan", "Català"),
        "cs": ("Czech", "Čeština"),
        "cy": ("Welsh", "Cymraeg"),
        "da": ("Danish", "Dansk"),
        "de": ("German", "Deutsch"),
        "dz": ("Dzongkha", "རྫོང་ཁ"),
        "el": ("Greek", "Ελληνικά"),
        "en": ("English", "English"),
        "en-x-simple": ("Simple English", "Simple English"),
        "eo": ("Esperanto", "Esperanto"),
        "es": ("Spanish", "Español"),
        "et": ("Estonian", "Eesti"),
        "eu": ("Basque", "Euskera"),
        "fa": ("Persian, Farsi", "فارسی", "rtl"),
        "fi": ("Finnish", "Suomi"),
        "fil": ("Filipino", "Filipino"),
        "fo": ("Faeroese", "Føroyskt"),
        "fr": ("French", "Français"),
        "fy": ("Frisian, Western", "Frysk"),
        "ga": ("Irish", "Gaeilge"),
        "gd": ("Scots Gaelic", "Gàidhlig"),
        "gl": ("Galician", "Galego"),
        "gsw-berne": ("Swiss German", "Schwyzerdütsch"),
        "gu": ("Gujarati", "ગુજરાતી"),
        "he": ("Hebrew", "עברית", "rtl"),
        "hi": ("Hindi", "हिन्दी"),
        "hr": ("Croatian", "Hrvatski"),
        "ht": ("Haitian Creole", "Kreyòl ayisyen"),
        "hu": ("Hungarian", "Magyar"),
        "hy": ("Armenian", "Հայերեն"),
        "id": ("Indonesian", "Bahasa Indonesia"),
        "is": ("Icelandic", "Íslenska"),
        "it": ("Italian", "Italiano"),
        "ja": ("Japanese", "日本語"),
        "jv": ("Javanese", "Basa Java"),
        "ka": ("Georgian", "ქართული ენა"),
        "kk": ("Kazakh", "Қазақ"),
        "km": ("Khmer", "ភាសាខ្មែរ"),
        "kn": ("Kannada", "ಕನ್ನಡ"),
        "ko": ("Korean", "한국어"),
        "ku": ("Kurdish", "Kurdî"),
        "ky": ("Kyrgyz", "Кыргызча"),
        "lo": ("Lao", "ພາສາລາວ"),
        "lt": ("Lithuanian", "Lietuvių"),
        "lv": ("Latvian", "Latviešu"),
        "mg": ("Malagasy", "Malagasy"),
        "mk": ("Macedonian", "Македонски"),
        "ml": ("Malayalam", "മലയാളം"),
        "mn": ("Mongolian", "монгол"),
        "mr": ("Marathi", "मराठी"),
        "ms": ("Bahasa Malaysia", "بهاس ملايو"),
        "my": ("Burmese", "ဗမာစကား"),
        "ne": ("Nepali", "नेपाली"),
        "nl": ("Dutch", "Nederlands"),
        "nb": ("Norwegian Bokmål", "Norsk, bokmål"),
        "nn": ("Norwegian Nynorsk", "Norsk, nynorsk"),
        "oc": ("Occitan", "Occitan"),
        "pa": ("Punjabi", "ਪੰਜਾਬੀ"),
        "pl": ("Polish", "Polski"),
        "pt-pt": ("Portuguese, Portugal", "Português, Portugal"),
        "pt-br": ("Portuguese, Brazil", "Português, Brasil"),
        "ro": ("Romanian", "Română"),
        "ru": ("Russian", "Русский"),
        "sco": ("Scots", "Scots"),
        "se": ("Northern Sami", "Sámi"),
        "si": ("Sinhala", "සිංහල"),
        "sk": ("Slovak", "Slovenčina"),
        "sl": ("Slovenian", "Slovenščina"),
        "sq": ("Albanian", "Shqip"),
        "sr": ("Serbian", "Српски"),
        "sv": ("Swedish", "Svenska"),
        "sw": ("Swahili", "Kiswahili"),
        "ta": ("Tamil", "தமிழ்"),
        "ta-lk": ("Tamil, Sri Lanka", "தமிழ், இலங்கை"),
        "te": ("Telugu", "తెలుగు"),
        "th": ("Thai", "ภาษาไทย"),
        "tr": ("Turkish", "Türkçe"),
        "tyv": ("Tuvan", "Тыва дыл"),
        "ug": ("Uyghur", "Уйғур"),
        "uk": ("Ukrainian", "Українська"),
        "ur": ("Urdu", "اردو", "rtl"),
        "vi": ("Vietnamese", "Tiếng Việt"),
        "xx-lolspeak": ("Lolspeak", "Lolspeak"),
        "zh-hans": ("Chinese, Simplified", "简体中文"),
        "zh-hant": ("Chinese, Traditional", "繁體中文"),
    }
)

# EU entries win on key collision.
PREDEFINED_LANGUAGES: Mapping[str, LanguageEntry] = MappingProxyType({**STANDARD_LANGUAGES, **EU_LANGUAGES})


def get_predefined_language(code: object) -> Optional[LanguageEntry]:
    if not isinstance(code, str):
        return None
    return PREDEFINED_LANGUAGES.get(code)


__all__ = [
    "EU_LANGUAGES",
    "LanguageEntry",
    "PREDEFINED_LANGUAGES",
    "STANDARD_LANGUAGES",
    "get_predefined_language",
]
