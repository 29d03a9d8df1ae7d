"""
Theme Helper package

This module provides an application factory with minimal wiring:
- Configures logging via theme_helper.core.logging
- Loads and validates settings (config file + THEMEHELPER_* environment)
- Installs the component library loader in front of the regular template loaders
- Registers the extra template filters
- Registers the health and component preview blueprints
"""

from __future__ import annotations

import importlib
import os
import uuid
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional

from flask import Flask, current_app, g
from jinja2 import BaseLoader, ChoiceLoader, FileSystemLoader, select_autoescape

from theme_helper.core.config import default_themes_path, load_settings
from theme_helper.core.logging import configure_logging
from theme_helper.core.schemas import ThemeHelperConfig
from theme_helper.core.themes import ThemeRegistry
from theme_helper.i18n.manager import LanguageManager
from theme_helper.templating.filters import Filters
from theme_helper.templating.loader import ComponentLibraryLoader, ResolverContext
from theme_helper.templating.messenger import Messenger

EXTENSION_KEY = "theme_helper"


@dataclass(frozen=True)
class ThemeHelperState:
    """Everything the factory wired up, stored on app.extensions."""

    settings: ThemeHelperConfig
    registry: ThemeRegistry
    context: ResolverContext
    component_loader: ComponentLibraryLoader
    language_manager: LanguageManager
    filters: Filters


def _default_secret_key() -> str:
    return os.environ.get("THEMEHELPER_SECRET_KEY", "themehelper_dev_secret_key")


def _set_request_id() -> None:
    """
    Assign a request ID for logging if not set elsewhere.
    """
    g.request_id = getattr(g, "request_id", uuid.uuid4().hex)


def get_state(app: Optional[Flask] = None) -> ThemeHelperState:
    return (app or current_app).extensions[EXTENSION_KEY]


def _install_templating(app: Flask, settings: ThemeHelperConfig, messenger: Optional[Messenger]) -> ThemeHelperState:
    registry = ThemeRegistry(settings.themes_path or default_themes_path(), settings.enabled_themes)
    context = ResolverContext.from_config(settings, registry)
    component_loader = ComponentLibraryLoader(context, messenger=messenger)

    loaders: list[BaseLoader] = [component_loader]
    if context.theme_path:
        loaders.append(FileSystemLoader(os.path.join(context.theme_path, "templates")))
    else:
        app.logger.warning("Theme '%s' is not available; missing components will not fall back", settings.theme)
    if app.jinja_env.loader is not None:
        loaders.append(app.jinja_env.loader)

    app.jinja_env.loader = ChoiceLoader(loaders)
    # Placeholders are never up to date; without auto_reload Jinja's cache
    # would serve them forever and skip the missing-component lookup.
    app.jinja_env.auto_reload = True
    # Component names carry no extension, so escape by default
    app.jinja_env.autoescape = select_autoescape(default_for_string=True, default=True)

    language_manager = LanguageManager.from_config(settings)
    filters = Filters(language_manager)
    filters.register(app.jinja_env)

    return ThemeHelperState(
        settings=settings,
        registry=registry,
        context=context,
        component_loader=component_loader,
        language_manager=language_manager,
        filters=filters,
    )


def create_app(
    config_overrides: Optional[dict] = None,
    settings_overrides: Optional[dict[str, Any]] = None,
    settings: Optional[ThemeHelperConfig] = None,
    blueprints: Optional[Sequence[tuple[str, str]]] = None,
    messenger: Optional[Messenger] = None,
) -> Flask:
    """
    Application factory.

    Parameters:
    - config_overrides: values to inject into app.config after defaults
    - settings_overrides: values layered over the config file before validation
    - settings: a ready ThemeHelperConfig; skips loading the config file
    - blueprints: optional list of (import_path, attribute) tuples to register
      If None, the health and component preview blueprints are registered.
    - messenger: user-notice collaborator for missing components (defaults to flash)

    Returns:
    - Flask app instance
    """
    configure_logging()

    if settings is None:
        settings = load_settings(overrides=settings_overrides)

    app = Flask("theme_helper")
    app.secret_key = _default_secret_key()
    # Keeps Flask's debug toggle from switching auto_reload back off
    app.config["TEMPLATES_AUTO_RELOAD"] = True

    app.extensions[EXTENSION_KEY] = _install_templating(app, settings, messenger)
    app.logger.info("Theme Helper app created (theme=%s)", settings.theme)

    app.url_map.strict_slashes = False

    @app.before_request
    def _before_request():
        _set_request_id()

    default_blueprints = [
        ("theme_helper.web.health", "health_bp"),
        ("theme_helper.web.components", "components_bp"),
    ]
    for import_path, attr in blueprints or default_blueprints:
        mod = importlib.import_module(import_path)
        app.register_blueprint(getattr(mod, attr))
        app.logger.debug("Registered blueprint: %s.%s", import_path, attr)

    if config_overrides:
        app.config.update(config_overrides)

    return app


__all__ = ["EXTENSION_KEY", "ThemeHelperState", "create_app", "get_state"]
