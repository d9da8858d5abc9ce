"""Command line entry point: dump a page's focus order or scaffold tests."""
import argparse
from pathlib import Path

from playwright.sync_api import sync_playwright

from a11y_helpers.config import load_settings
from a11y_helpers.logger import get_logger, setup_logging
from a11y_helpers.navigation import trace_focus_order

logger = get_logger(__name__)

FILES = {
    # ----------------------- pytest.ini -----------------------
    "pytest.ini": r'''[pytest]
addopts = -q
testpaths = tests
log_cli = true
log_cli_level = INFO
markers =
    e2e: keyboard-navigation tests driving a real browser
''',

    # ----------------------- tests/conftest.py -----------------------
    "tests/conftest.py": r'''import os

import pytest


@pytest.fixture(scope="session")
def site_url():
    return os.environ.get("SITE_URL", "http://127.0.0.1:5000")
''',

    # ----------------------- tests/e2e/test_keyboard_navigation.py -----------------------
    "tests/e2e/test_keyboard_navigation.py": r'''import pytest
from playwright.sync_api import Page

from a11y_helpers import assert_element_focused, log_focused_element, tab_to_element


@pytest.mark.e2e
def test_main_links_reachable_by_keyboard(site_url, page: Page):
    page.goto(site_url, wait_until="domcontentloaded")

    # Adapt role/name pairs to your page, in tab order.
    tab_to_element(page, "link", "Skip to main content")
    log_focused_element(page)

    page.keyboard.press("Tab")
    assert_element_focused(page, "link", "Home")
''',
}


def write_scaffold(root: Path, force: bool = False):
    """Write FILES under ``root``; returns (created, skipped) relative paths."""
    created, skipped = [], []
    for rel, content in FILES.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.exists() and not force:
            skipped.append(rel)
            continue
        path.write_text(content, encoding="utf-8")
        created.append(rel)
    return created, skipped


def cmd_init(args) -> int:
    created, skipped = write_scaffold(Path(args.directory), force=args.force)

    print("Created:", *created, sep="\n  - " if created else "\n  ")
    if skipped:
        print("\nSkipped (use --force to overwrite):", *skipped, sep="\n  - ")

    print("""
Dependencies (once):
  pip install -U pytest playwright pytest-playwright a11y-keyboard-helpers
  python -m playwright install --with-deps chromium

Run:
  pytest -m e2e
""")
    return 0


def cmd_trace(args) -> int:
    with sync_playwright() as p:
        browser = getattr(p, args.browser).launch(headless=not args.headed)
        try:
            page = browser.new_page()
            page.goto(args.url, wait_until="domcontentloaded")
            order = trace_focus_order(page, args.tabs)
        finally:
            browser.close()
    logger.info("Traced %d Tab stops on %s", len(order), args.url)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="a11y-helpers",
        description="Keyboard-navigation accessibility helpers for Playwright",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    trace = sub.add_parser("trace", help="Press Tab repeatedly and log each focused element")
    trace.add_argument("url")
    trace.add_argument("--tabs", type=int, default=load_settings().max_tabs, help="Number of Tab presses")
    trace.add_argument("--browser", choices=["chromium", "firefox", "webkit"], default="chromium")
    trace.add_argument("--headed", action="store_true", help="Show the browser window")
    trace.set_defaults(func=cmd_trace)

    init = sub.add_parser("init", help="Create keyboard-navigation test scaffolding")
    init.add_argument("--force", action="store_true", help="Overwrite existing files")
    init.add_argument("--directory", default=".", help="Target directory")
    init.set_defaults(func=cmd_init)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(load_settings().log_level)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
