from __future__ import annotations

"""
Pydantic schemas for the Theme Helper configuration file.

The config file is plain JSON; these models validate it and fill in the
defaults used when no config has been saved yet.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LanguageConfig(BaseModel):
    """An enabled language as configured for the site."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=100, description="Language name shown to editors")
    native_name: str = Field(default="", max_length=100, description="Language name in its own script")
    direction: Literal["ltr", "rtl"] = Field(default="ltr")
    weight: int = Field(default=0, description="Sort order among enabled languages")


def _default_languages() -> Dict[str, LanguageConfig]:
    return {"en": LanguageConfig(name="English", native_name="English")}


class ThemeHelperConfig(BaseModel):
    """Top-level configuration for theme resolution and language filters."""

    model_config = ConfigDict(frozen=True)

    theme: str = Field(default="oe_theme", min_length=1, description="Theme owning the component library")
    themes_path: Optional[str] = Field(
        default=None,
        description="Directory holding one sub-directory per theme",
    )
    enabled_themes: Optional[List[str]] = Field(
        default=None,
        description="Themes considered enabled; None means every theme found under themes_path",
    )
    component_directory: str = Field(
        default="dist/ec",
        description="Component library directory, relative to the theme path",
    )
    system: str = Field(default="ec", min_length=1, max_length=20, description="Component system prefix")
    namespaces: List[str] = Field(default_factory=lambda: ["ecl-twig"], min_length=1)
    default_language: str = Field(default="en", min_length=1)
    languages: Dict[str, LanguageConfig] = Field(default_factory=_default_languages)

    @field_validator("namespaces")
    @classmethod
    def _strip_namespace_markers(cls, v: List[str]) -> List[str]:
        cleaned = [ns.strip().lstrip("@").rstrip("/") for ns in v]
        if any(not ns for ns in cleaned):
            raise ValueError("namespaces cannot be empty")
        return cleaned

    @field_validator("component_directory")
    @classmethod
    def _relative_directory(cls, v: str) -> str:
        v = v.strip().strip("/")
        if ".." in v.split("/"):
            raise ValueError("component_directory must stay inside the theme")
        return v

    @model_validator(mode="after")
    def _default_language_enabled(self) -> "ThemeHelperConfig":
        if self.languages and self.default_language not in self.languages:
            raise ValueError(f"default_language '{self.default_language}' is not an enabled language")
        return self


__all__ = ["LanguageConfig", "ThemeHelperConfig"]
