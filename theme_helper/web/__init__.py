"""
Web module for Theme Helper.

Exposes blueprints for:
- Health endpoint: health_bp
- Component preview: components_bp
"""

from .components import components_bp
from .health import health_bp

__all__ = ["components_bp", "health_bp"]
