from __future__ import annotations

"""
Component preview blueprint.

Routes:
- GET /components                 → List available components (JSON)
- GET /components/<path:name>     → Render "@<ns>/<name>" with the query string as context

Notes:
- `ns` selects the namespace; defaults to the first configured one.
- Notices raised while rendering (e.g. "Missing component: ...") are shown above the output,
  or returned under "messages" when JSON is requested.
"""

from typing import Any, Dict, List, Tuple

from flask import Blueprint, current_app, get_flashed_messages, jsonify, render_template, request
from jinja2 import TemplateNotFound
from markupsafe import Markup, escape

from theme_helper import get_state

components_bp = Blueprint("components", __name__)


def _wants_json() -> bool:
    # Prefer HTML by default; only return JSON on explicit request
    fmt = (request.args.get("format") or "").lower()
    if fmt == "json":
        return True
    accept = (request.headers.get("Accept") or "").lower()
    return ("application/json" in accept) and ("text/html" not in accept)


def _render_messages(messages: List[Tuple[str, str]]) -> Markup:
    return Markup("").join(
        Markup('<div class="messages messages--{0}" role="alert">{1}</div>').format(category, message)
        for category, message in messages
    )


@components_bp.get("/components")
def list_components():
    state = get_state()
    return jsonify({"components": state.component_loader.list_templates()})


@components_bp.get("/components/<path:name>")
def preview_component(name: str):
    state = get_state()
    namespace = request.args.get("ns") or state.context.namespaces[0]
    template_name = f"@{namespace}/{name}"
    variables: Dict[str, Any] = {k: v for k, v in request.args.items() if k not in ("ns", "format")}

    try:
        html = render_template(template_name, **variables)
    except TemplateNotFound:
        current_app.logger.info("GET /components/%s not found (ns=%s)", name, namespace)
        if _wants_json():
            return jsonify({"error": "not_found", "template": template_name}), 404
        return f"Component not found: {escape(template_name)}", 404

    messages = get_flashed_messages(with_categories=True)
    current_app.logger.info("GET /components/%s ok messages=%d", name, len(messages))

    if _wants_json():
        return jsonify(
            {
                "template": template_name,
                "html": html,
                "messages": [{"type": category, "message": message} for category, message in messages],
            }
        )
    return _render_messages(messages) + Markup(html)
