from __future__ import annotations

"""
Health endpoints for Theme Helper.

This blueprint exposes `/healthz`, reporting:
- Overall status ("ok" or "degraded")
- Whether the configured theme is registered and the missing-component fallback is active
- Whether the theme ships the missing-component placeholder
- Component namespaces and enabled languages
"""

import os
from typing import Any, Dict

from flask import Blueprint

from theme_helper import get_state

health_bp = Blueprint("health", __name__)


@health_bp.get("/healthz")
def healthz():
    state = get_state()
    context = state.context

    status: Dict[str, Any] = {
        "status": "ok",
        "theme": state.settings.theme,
        "theme_ok": context.theme_path is not None,
        "fallback_enabled": state.component_loader.resolver.fallback_enabled,
        "namespaces": list(context.namespaces),
        "languages": [lang.id for lang in state.language_manager.get_languages()],
    }

    if context.theme_path is None:
        status["status"] = "degraded"
        status["reason"] = "theme_unavailable"
        return status, 200

    placeholder = context.missing_component_path
    status["placeholder_ok"] = bool(placeholder and os.path.isfile(placeholder))
    if not status["placeholder_ok"]:
        status["status"] = "degraded"
        status["reason"] = "placeholder_missing"

    status["components"] = len(state.component_loader.list_templates())
    return status, 200
