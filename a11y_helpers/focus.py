"""Inspect the focused element and compute its accessible role and name."""
from typing import Dict, List, Optional

from playwright.sync_api import Locator, Page

from a11y_helpers.config import load_settings
from a11y_helpers.logger import get_logger

logger = get_logger(__name__)

FocusInfo = Dict[str, str]

NO_ROLE = "No role"
NO_NAME = "No name"

ROLE_BY_TAG = {
    "a": "link",
    "article": "article",
    "aside": "complementary",
    "body": "document",
    "button": "button",
    "details": "group",
    "dialog": "dialog",
    "footer": "contentinfo",
    "form": "form",
    "h1": "heading",
    "h2": "heading",
    "h3": "heading",
    "h4": "heading",
    "h5": "heading",
    "h6": "heading",
    "header": "banner",
    "img": "img",
    "input": "textbox",
    "li": "listitem",
    "main": "main",
    "nav": "navigation",
    "ol": "list",
    "option": "option",
    "section": "region",
    "select": "combobox",
    "summary": "button",
    "table": "table",
    "textarea": "textbox",
    "ul": "list",
}

ROLE_BY_INPUT_TYPE = {
    "button": "button",
    "checkbox": "checkbox",
    "email": "textbox",
    "image": "button",
    "number": "spinbutton",
    "password": "textbox",
    "radio": "radio",
    "range": "slider",
    "reset": "button",
    "search": "searchbox",
    "submit": "button",
    "tel": "textbox",
    "text": "textbox",
    "url": "textbox",
}

# (el, tables) => {tag, role, name}; shared by every evaluation below.
_DESCRIBE_JS = r"""
(el, tables) => {
    const tag = el.tagName.toLowerCase();

    let role = (el.getAttribute('role') || '').trim().split(/\s+/)[0];
    if (!role && tag === 'input') {
        const type = (el.getAttribute('type') || 'text').toLowerCase();
        role = tables.inputRoles[type] || '';
    }
    if (!role) role = tables.tagRoles[tag] || tables.noRole;

    const text = (node) => (node && node.textContent ? node.textContent.trim() : '');
    let name = '';
    const labelledBy = (el.getAttribute('aria-labelledby') || '').trim();
    if (labelledBy) {
        name = labelledBy.split(/\s+/)
            .map((id) => text(el.ownerDocument.getElementById(id)))
            .filter(Boolean)
            .join(' ');
    }
    name = name ||
        (el.getAttribute('aria-label') || '').trim() ||
        text(el) ||
        (el.getAttribute('title') || '').trim() ||
        (el.getAttribute('placeholder') || '').trim() ||
        tables.noName;

    return {tag, role, name};
}
"""

_ACTIVE_ELEMENT_JS = (
    "(tables) => {\n"
    "    let el = document.activeElement;\n"
    "    while (el && el.shadowRoot && el.shadowRoot.activeElement) {\n"
    "        el = el.shadowRoot.activeElement;\n"
    "    }\n"
    "    if (!el) return null;\n"
    f"    return ({_DESCRIBE_JS})(el, tables);\n"
    "}"
)

_ELEMENTS_JS = f"(elements, tables) => elements.map((el) => ({_DESCRIBE_JS})(el, tables))"


def _tables() -> dict:
    return {
        "tagRoles": ROLE_BY_TAG,
        "inputRoles": ROLE_BY_INPUT_TYPE,
        "noRole": NO_ROLE,
        "noName": NO_NAME,
    }


def get_focused_element_info(page: Page) -> Optional[FocusInfo]:
    """
    Describe the element that currently holds focus.

    Focus inside open shadow roots is followed down to the innermost element.

    Returns:
        {"tag", "role", "name"} with untruncated name, or None when the
        document has no active element.
    """
    return page.evaluate(_ACTIVE_ELEMENT_JS, _tables())


def describe_elements(locator: Locator) -> List[FocusInfo]:
    """Apply the focused-element derivation to every element ``locator`` matches."""
    return locator.evaluate_all(_ELEMENTS_JS, _tables())


def truncate_text(text: str, max_length: int = 100) -> str:
    if len(text) > max_length:
        return text[: max(max_length - 3, 0)] + "..."
    return text


def truncated(info: Optional[FocusInfo], max_length: Optional[int] = None) -> Optional[FocusInfo]:
    if info is None:
        return None
    if max_length is None:
        max_length = load_settings().name_max_length
    return {**info, "name": truncate_text(info["name"], max_length)}


def _describe(short: Optional[FocusInfo]) -> str:
    if short is None:
        return "<nothing focused>"
    return f'tag="{short["tag"]}", role="{short["role"]}", name="{short["name"]}"'


def format_focus_info(info: Optional[FocusInfo]) -> str:
    return _describe(truncated(info))


def log_focused_element(page: Page) -> Optional[FocusInfo]:
    """Log the focused element's tag, role and truncated name; returns the same info."""
    info = truncated(get_focused_element_info(page))
    logger.info("Focused element: %s", _describe(info))
    return info
