"""
Templating layer for Theme Helper.

- loader: component library resolution with missing-component fallback
- filters: language, file icon, date status and size filters
- messenger: user-facing notices via Flask flash
"""

from .filters import Filters, format_size, to_date_status, to_file_icon
from .loader import (
    ComponentLibraryLoader,
    ComponentLibraryResolver,
    FallbackResolver,
    ResolverContext,
)
from .messenger import Messenger

__all__ = [
    "ComponentLibraryLoader",
    "ComponentLibraryResolver",
    "FallbackResolver",
    "Filters",
    "Messenger",
    "ResolverContext",
    "format_size",
    "to_date_status",
    "to_file_icon",
]
