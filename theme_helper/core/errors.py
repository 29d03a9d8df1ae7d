"""
Exception types raised by Theme Helper.

Template lookups use jinja2.TemplateNotFound directly; only the failures that
have no Jinja counterpart live here.
"""

from __future__ import annotations


class UnknownLanguage(ValueError):
    """Raised when a language code is neither enabled nor in the static tables."""

    def __init__(self, code: object) -> None:
        self.code = code
        super().__init__(f"The language code {code} does not exist.")


class UnknownTheme(LookupError):
    """Raised when asking for the path of a theme that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Theme '{name}' is not registered.")


__all__ = ["UnknownLanguage", "UnknownTheme"]
