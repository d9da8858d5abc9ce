"""Focus assertions and Tab-key navigation on top of Playwright's sync API."""
from typing import List, Optional, Pattern, Union

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from a11y_helpers.config import load_settings
from a11y_helpers.errors import ElementNotFoundError, FocusAssertionError, TabNavigationError
from a11y_helpers.focus import (
    FocusInfo,
    describe_elements,
    format_focus_info,
    get_focused_element_info,
    log_focused_element,
    truncated,
)
from a11y_helpers.logger import get_logger

logger = get_logger(__name__)

Name = Union[str, Pattern[str]]


def _name_repr(name: Name) -> str:
    if isinstance(name, str):
        return name
    return f"/{name.pattern}/"


def _locate(page: Page, role: str, name: Name, exact: Optional[bool]) -> Locator:
    if isinstance(name, str) and exact is not None:
        return page.get_by_role(role, name=name, exact=exact)
    return page.get_by_role(role, name=name)


def _wait_attached(locator: Locator, role: str, name: Name, timeout: int) -> None:
    try:
        locator.first.wait_for(state="attached", timeout=timeout)
    except PlaywrightTimeoutError as e:
        raise ElementNotFoundError(
            f'Element with role "{role}" and name "{_name_repr(name)}" not found on page.',
            details={"role": role, "name": _name_repr(name), "timeout_ms": timeout},
        ) from e


def _check_focus(page: Page, locator: Locator, role: str, name: Name) -> FocusInfo:
    focused = get_focused_element_info(page)
    candidates = describe_elements(locator)
    if focused is not None:
        for candidate in candidates:
            if candidate["role"] == focused["role"] and candidate["name"] == focused["name"]:
                return focused

    raise FocusAssertionError(
        f'Expected element with role "{role}" and name "{_name_repr(name)}" to be focused\n'
        f"Actually focused element: {format_focus_info(focused)}",
        details={
            "role": role,
            "name": _name_repr(name),
            "focused": truncated(focused),
            "candidates": len(candidates),
        },
    )


def assert_element_focused(
    page: Page,
    role: str,
    name: Name,
    *,
    exact: Optional[bool] = None,
    timeout: Optional[int] = None,
) -> FocusInfo:
    """
    Assert that the element with the given role and accessible name has focus.

    The element is found with ``page.get_by_role``, so ``name`` follows
    Playwright's matching: a string is a case-insensitive substring unless
    ``exact=True``, a compiled pattern is searched against the name.

    Focus is matched on the derived role and name, not element identity.
    Controls named only by a ``<label for>`` or an input ``value`` all derive
    "No name", so any one of them being focused satisfies the others.

    Args:
        page: Playwright Page
        role: ARIA role of the expected element
        name: accessible name (str or re.Pattern)
        exact: forwarded to get_by_role for string names
        timeout: ms to wait for the element to attach

    Returns:
        role/name info of the focused element

    Raises:
        ElementNotFoundError: no matching element attached within ``timeout``
        FocusAssertionError: a different element is focused
    """
    if timeout is None:
        timeout = load_settings().attach_timeout_ms
    locator = _locate(page, role, name, exact)
    _wait_attached(locator, role, name, timeout)
    return _check_focus(page, locator, role, name)


def tab_to_element(
    page: Page,
    role: str,
    name: Name,
    max_tabs: Optional[int] = None,
    log_intermediate: bool = False,
    *,
    exact: Optional[bool] = None,
    delay_ms: Optional[int] = None,
    timeout: Optional[int] = None,
) -> int:
    """
    Press Tab until the element with the given role and name is focused.

    No key is pressed when the element already has focus.

    Args:
        page: Playwright Page
        role: ARIA role of the target element
        name: accessible name (str or re.Pattern)
        max_tabs: maximum number of Tab presses
        log_intermediate: log every element focused on the way
        exact: forwarded to get_by_role for string names
        delay_ms: pause after each key press
        timeout: ms to wait for the target to attach

    Returns:
        number of Tab presses it took

    Raises:
        ElementNotFoundError: the target never attached
        TabNavigationError: the target was not reached within ``max_tabs``
    """
    settings = load_settings()
    if max_tabs is None:
        max_tabs = settings.max_tabs
    if max_tabs < 0:
        raise ValueError(f"max_tabs must not be negative, got {max_tabs}")
    if delay_ms is None:
        delay_ms = settings.tab_delay_ms
    if timeout is None:
        timeout = settings.attach_timeout_ms

    locator = _locate(page, role, name, exact)
    _wait_attached(locator, role, name, timeout)

    try:
        _check_focus(page, locator, role, name)
        return 0
    except FocusAssertionError:
        pass

    for presses in range(1, max_tabs + 1):
        page.keyboard.press("Tab")
        page.wait_for_timeout(delay_ms)
        if log_intermediate:
            log_focused_element(page)
        try:
            _check_focus(page, locator, role, name)
        except FocusAssertionError:
            continue
        logger.debug('Reached %s "%s" after %d Tab presses', role, _name_repr(name), presses)
        return presses

    last = truncated(get_focused_element_info(page), settings.name_max_length)
    raise TabNavigationError(
        f'Failed to reach element with role "{role}" and name "{_name_repr(name)}" '
        f"after {max_tabs} Tab presses. Focused element: {format_focus_info(last)}",
        details={"role": role, "name": _name_repr(name), "max_tabs": max_tabs, "focused": last},
    )


def trace_focus_order(page: Page, tabs: int, delay_ms: Optional[int] = None) -> List[Optional[FocusInfo]]:
    """Press Tab ``tabs`` times, logging and collecting each focused element."""
    if delay_ms is None:
        delay_ms = load_settings().tab_delay_ms
    order = []
    for _ in range(tabs):
        page.keyboard.press("Tab")
        page.wait_for_timeout(delay_ms)
        order.append(log_focused_element(page))
    return order
