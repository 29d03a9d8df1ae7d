# Ensure the repository root is on sys.path so `theme_helper` can be imported in tests.

import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_syspath() -> None:
    # This file lives at: <repo_root>/tests/conftest.py
    # We want to add <repo_root> to sys.path (if not already present).
    here = Path(__file__).resolve()
    repo_root = here.parent.parent
    repo_str = str(repo_root)
    if repo_str not in sys.path:
        sys.path.insert(0, repo_str)


_ensure_repo_root_on_syspath()


PLACEHOLDER_SOURCE = '<div class="missing-component">Missing component</div>'


def write_component(library: Path, name: str, source: str, prefix: str = "ec-component-") -> Path:
    comp_dir = library / f"{prefix}{name}"
    comp_dir.mkdir(parents=True, exist_ok=True)
    path = comp_dir / f"{prefix}{name}.html.twig"
    path.write_text(source, encoding="utf-8")
    return path


@pytest.fixture
def themes_path(tmp_path):
    """
    A themes root with one theme, "oe_theme":
      oe_theme/templates/missing-component.html.twig
      oe_theme/templates/page.html.twig
      oe_theme/dist/ec/ec-component-button/ec-component-button.html.twig
    """
    root = tmp_path / "themes"
    theme = root / "oe_theme"
    (theme / "templates").mkdir(parents=True)
    (theme / "templates" / "missing-component.html.twig").write_text(PLACEHOLDER_SOURCE, encoding="utf-8")
    (theme / "templates" / "page.html.twig").write_text(
        "<p>{{ size|format_size }} {{ ext|to_file_icon }}</p>", encoding="utf-8"
    )
    write_component(theme / "dist" / "ec", "button", '<button class="ecl-button">{{ label }}</button>')
    return root


@pytest.fixture
def theme_path(themes_path):
    return themes_path / "oe_theme"


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch):
    # Never read a developer's real config file during tests
    monkeypatch.setenv("THEMEHELPER_CONFIG_PATH", str(tmp_path / "no-config.json"))
    monkeypatch.delenv("THEMEHELPER_THEME", raising=False)
    monkeypatch.delenv("THEMEHELPER_THEMES_PATH", raising=False)


class RecordingMessenger:
    def __init__(self):
        self.calls = []

    def notify(self, message, is_error=True):
        self.calls.append((message, is_error))


class RecordingLogger:
    def __init__(self):
        self.errors = []

    def error(self, msg, *args):
        self.errors.append(msg % args if args else msg)


@pytest.fixture
def messenger():
    return RecordingMessenger()


@pytest.fixture
def recording_logger():
    return RecordingLogger()
