#!/usr/bin/env python3
"""
Component validator for Theme Helper.

Renders every component of the configured theme's component library with a
minimal Flask app, so syntax/runtime errors and missing sub-components (which
would silently fall back to the placeholder) show up without running the server.

Usage:
  python scripts/validate_components.py
  python scripts/validate_components.py --include '@ecl-twig/button' --include '@ecl-twig/link*'
  python scripts/validate_components.py --exclude '@ecl-twig/page*'
  python scripts/validate_components.py --fail-fast --verbose

Exit code:
  0  if all components render without errors or missing-component notices
  1  otherwise
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from fnmatch import fnmatch
from pathlib import Path
from typing import List, Tuple


def _project_root() -> Path:
    # This script lives at: <repo>/scripts/validate_components.py
    return Path(__file__).resolve().parents[1]


def _ensure_sys_path():
    """
    Ensure the project root (the directory containing 'theme_helper') is on
    sys.path so `import theme_helper` works regardless of where the script
    is run from.
    """
    project_root = _project_root()
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


class RecordingMessenger:
    """Collects notices instead of flashing them."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def notify(self, message: str, is_error: bool = True) -> None:
        self.messages.append(message)


def _build_app(messenger: RecordingMessenger):
    from theme_helper import create_app

    return create_app(messenger=messenger, blueprints=[("theme_helper.web.health", "health_bp")])


def _list_components(app, include_patterns: List[str], exclude_patterns: List[str]) -> List[str]:
    from theme_helper import get_state

    names = []
    for name in get_state(app).component_loader.list_templates():
        if include_patterns and not any(fnmatch(name, pat) for pat in include_patterns):
            continue
        if any(fnmatch(name, pat) for pat in exclude_patterns):
            continue
        names.append(name)
    return names


def _render_component(app, messenger: RecordingMessenger, name: str, verbose: bool = False) -> Tuple[bool, str]:
    """
    Try to render a component with an empty context. Returns (ok, message).
    """
    messenger.messages.clear()
    with app.test_request_context("/"):
        try:
            app.jinja_env.get_template(name).render({})
        except Exception as e:
            return False, f"render failed: {e.__class__.__name__}: {e}"
    if messenger.messages:
        return False, "; ".join(messenger.messages)
    return True, "rendered" if verbose else ""


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Validate component templates by rendering them in a minimal Flask context.",
    )
    parser.add_argument(
        "--include",
        action="append",
        default=[],
        help="Glob of component names to include (e.g., '@ecl-twig/button*'). Can be repeated.",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Glob of component names to exclude. Can be repeated.",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop on first error.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print per-component status messages.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    _ensure_sys_path()

    messenger = RecordingMessenger()
    try:
        app = _build_app(messenger)
    except Exception as e:
        print(f"[fatal] Failed to create app: {e}", file=sys.stderr)
        return 1

    names = _list_components(app, include_patterns=args.include, exclude_patterns=args.exclude)

    if not names:
        print("No components found matching filters.")
        return 0

    total = 0
    failures: List[Tuple[str, str]] = []

    for name in names:
        ok, msg = _render_component(app, messenger, name, verbose=args.verbose)
        total += 1
        if ok:
            if args.verbose:
                print(f"[ok]   {name} {('- ' + msg) if msg else ''}")
        else:
            failures.append((name, msg))
            print(f"[fail] {name} - {msg}", file=sys.stderr)
            if args.fail_fast:
                break

    print()
    print("Summary:")
    print(f"  Total:    {total}")
    print(f"  Passed:   {total - len(failures)}")
    print(f"  Failed:   {len(failures)}")

    if failures:
        print()
        print("Failures:")
        for name, msg in failures:
            print(f"  - {name}: {msg}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
