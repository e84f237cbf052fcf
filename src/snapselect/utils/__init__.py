# Utils package for snapselect

from snapselect.utils.exceptions import (
    ElementDetachedError,
    ElementInteractionError,
    ElementTimeoutError,
    InvalidElementTypeError,
    NoSuchElementError,
    SelectError,
    SelectErrorKind,
    SnapSelectError,
    UnsupportedOperationError,
    wrap_playwright_error,
)
from snapselect.utils.text import collapse_whitespace

__all__ = [
    "ElementDetachedError",
    "ElementInteractionError",
    "ElementTimeoutError",
    # Exceptions
    "InvalidElementTypeError",
    "NoSuchElementError",
    "SelectError",
    "SelectErrorKind",
    "SnapSelectError",
    "UnsupportedOperationError",
    # Text
    "collapse_whitespace",
    "wrap_playwright_error",
]
