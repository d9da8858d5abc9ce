from a11y_helpers.errors import (
    A11yHelperError,
    ElementNotFoundError,
    FocusAssertionError,
    TabNavigationError,
)
from a11y_helpers.focus import (
    NO_NAME,
    NO_ROLE,
    describe_elements,
    format_focus_info,
    get_focused_element_info,
    log_focused_element,
    truncate_text,
)
from a11y_helpers.navigation import assert_element_focused, tab_to_element, trace_focus_order

__all__ = [
    "A11yHelperError",
    "ElementNotFoundError",
    "FocusAssertionError",
    "TabNavigationError",
    "NO_NAME",
    "NO_ROLE",
    "assert_element_focused",
    "describe_elements",
    "format_focus_info",
    "get_focused_element_info",
    "log_focused_element",
    "tab_to_element",
    "trace_focus_order",
    "truncate_text",
]
