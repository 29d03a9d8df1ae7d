from __future__ import annotations

"""
Component library template loading.

Component templates are addressed as "@<namespace>/<component>" and live in
the active theme's component library directory, one directory per component:

    <theme>/<directory>/<prefix><component>/<prefix><component><suffix>

Three pieces, composed rather than inherited:
- ComponentLibraryResolver: the naming convention, raises TemplateNotFound
- FallbackResolver: wraps any resolve callable and swaps a missing component
  for the theme's placeholder, with a log entry and a user notice
- ComponentLibraryLoader: the jinja2 loader that reads the resolved file
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from jinja2 import BaseLoader, Environment, TemplateNotFound

from theme_helper.core.logging import get_component_logger
from theme_helper.core.schemas import ThemeHelperConfig
from theme_helper.core.themes import ThemeRegistry

from .messenger import Messenger

TEMPLATE_SUFFIX = ".html.twig"
MISSING_COMPONENT_TEMPLATE = "templates/missing-component.html.twig"

ResolveFn = Callable[[str], Optional[str]]


def component_prefix(system: str) -> str:
    return f"{system}-component-"


@dataclass(frozen=True)
class ResolverContext:
    """
    Resolution settings captured once at construction.

    theme_path is None when the theme was not registered at that time; the
    fallback stays disabled for the lifetime of the context.
    """

    theme_path: Optional[str]
    directory: str
    namespaces: Tuple[str, ...]
    component_prefix: str
    template_suffix: str = TEMPLATE_SUFFIX

    @classmethod
    def from_registry(
        cls,
        registry: ThemeRegistry,
        theme: str,
        directory: str,
        system: str,
        namespaces: Sequence[str],
    ) -> "ResolverContext":
        theme_path = registry.get_theme_path(theme) if registry.theme_exists(theme) else None
        return cls(
            theme_path=theme_path,
            directory=directory,
            namespaces=tuple(namespaces),
            component_prefix=component_prefix(system),
        )

    @classmethod
    def from_config(cls, config: ThemeHelperConfig, registry: ThemeRegistry) -> "ResolverContext":
        return cls.from_registry(registry, config.theme, config.component_directory, config.system, config.namespaces)

    @property
    def library_path(self) -> Optional[str]:
        if not self.theme_path:
            return None
        return os.path.join(self.theme_path, self.directory)

    @property
    def missing_component_path(self) -> Optional[str]:
        if not self.theme_path:
            return None
        return f"{self.theme_path}/{MISSING_COMPONENT_TEMPLATE}"


class ComponentLibraryResolver:
    def __init__(self, namespaces: Sequence[str], path: Optional[str], prefix: str, suffix: str = TEMPLATE_SUFFIX) -> None:
        self.namespaces = tuple(namespaces)
        self.path = Path(path) if path else None
        self.prefix = prefix
        self.suffix = suffix

    @classmethod
    def from_context(cls, context: ResolverContext) -> "ComponentLibraryResolver":
        return cls(context.namespaces, context.library_path, context.component_prefix, context.template_suffix)

    def split_name(self, name: object) -> Optional[Tuple[str, str]]:
        """Return (namespace, component) for names this library owns, else None."""
        if not isinstance(name, str) or not name.startswith("@"):
            return None
        namespace, sep, component = name[1:].partition("/")
        if not sep or namespace not in self.namespaces:
            return None
        return namespace, component

    def find_template(self, name: str) -> Optional[str]:
        """
        Resolve a component name to a file path.

        Returns None for names outside the configured namespaces.

        Raises:
            TemplateNotFound if the name is in a configured namespace but no
            file matches, or the name tries to leave the library directory.
        """
        parts = self.split_name(name)
        if parts is None:
            return None
        component = parts[1]

        segments = [s for s in component.split("/") if s]
        if not segments or "\\" in component or any(s in (".", "..") for s in segments):
            raise TemplateNotFound(name, f"Invalid component name: {name}")
        if self.path is None or not self.path.is_dir():
            raise TemplateNotFound(name, f"No component library available for: {name}")

        if component.endswith(self.suffix):
            candidate = self.path.joinpath(*segments)
        elif len(segments) == 1:
            base = segments[0]
            if not base.startswith(self.prefix):
                base = f"{self.prefix}{base}"
            candidate = self.path / base / f"{base}{self.suffix}"
        else:
            raise TemplateNotFound(name, f"Invalid component name: {name}")

        if not candidate.is_file():
            raise TemplateNotFound(name, f"Unable to find component {name} (looked into: {candidate})")
        return str(candidate)

    def list_components(self) -> List[str]:
        """Component names available in the library, under the first namespace."""
        if self.path is None or not self.path.is_dir() or not self.namespaces:
            return []
        names = []
        for entry in sorted(self.path.iterdir()):
            if entry.is_dir() and entry.name.startswith(self.prefix):
                if (entry / f"{entry.name}{self.suffix}").is_file():
                    names.append(f"@{self.namespaces[0]}/{entry.name[len(self.prefix):]}")
        return names


class FallbackResolver:
    """
    Wrap a resolve callable with the missing-component policy.

    On TemplateNotFound and with a theme available: log once on the component
    channel, notify the user once, and return the theme placeholder path.
    Without a theme: return None.
    """

    def __init__(
        self,
        find: ResolveFn,
        context: ResolverContext,
        logger: Optional[logging.Logger] = None,
        messenger: Optional[Messenger] = None,
    ) -> None:
        self._find = find
        self.context = context
        self.logger = logger or get_component_logger()
        self.messenger = messenger or Messenger()

    @property
    def fallback_enabled(self) -> bool:
        return bool(self.context.theme_path)

    def find_template(self, name: str) -> Optional[str]:
        try:
            return self._find(name)
        except TemplateNotFound:
            if not self.fallback_enabled:
                return None
            self.messenger.notify(f"Missing component: {name}", is_error=True)
            self.logger.error("Missing component: %s", name)
            return self.context.missing_component_path


class ComponentLibraryLoader(BaseLoader):
    """
    Jinja2 loader for component templates.

    Names this loader cannot serve raise TemplateNotFound so a ChoiceLoader
    moves on to the next loader.
    """

    def __init__(
        self,
        context: ResolverContext,
        logger: Optional[logging.Logger] = None,
        messenger: Optional[Messenger] = None,
        find: Optional[ResolveFn] = None,
    ) -> None:
        self.context = context
        self.library = ComponentLibraryResolver.from_context(context)
        self.resolver = FallbackResolver(find or self.library.find_template, context, logger, messenger)

    def find_template(self, name: str) -> Optional[str]:
        return self.resolver.find_template(name)

    def get_source(self, environment: Environment, template: str) -> Tuple[str, str, Callable[[], bool]]:
        path = self.find_template(template)
        if path is None:
            raise TemplateNotFound(template)

        filename = Path(path)
        try:
            mtime = filename.stat().st_mtime
            source = filename.read_text(encoding="utf-8")
        except OSError:
            raise TemplateNotFound(template, f"Unable to read {filename}") from None

        if path == self.context.missing_component_path:
            # Never up to date: the environment needs auto_reload on so the
            # lookup (and its notice) reruns on each render and a newly
            # added component replaces the placeholder.
            return source, str(filename), lambda: False

        def uptodate() -> bool:
            try:
                return filename.stat().st_mtime == mtime
            except OSError:
                return False

        return source, str(filename), uptodate

    def list_templates(self) -> List[str]:
        return self.library.list_components()


__all__ = [
    "MISSING_COMPONENT_TEMPLATE",
    "TEMPLATE_SUFFIX",
    "ComponentLibraryLoader",
    "ComponentLibraryResolver",
    "FallbackResolver",
    "ResolverContext",
    "component_prefix",
]
