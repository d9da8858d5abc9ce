"""Exceptions raised by the keyboard-navigation helpers."""
from typing import Any, Dict, Optional


class A11yHelperError(AssertionError):
    """Base class; subclasses AssertionError so pytest reports a plain failure."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        result = {"error": self.__class__.__name__, "message": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ElementNotFoundError(A11yHelperError):
    """No element with the requested role and name attached in time."""


class FocusAssertionError(A11yHelperError):
    """The target element exists but something else holds focus."""


class TabNavigationError(A11yHelperError):
    """Tab key budget exhausted before the target received focus."""
