"""Dropdown helper for native <select> elements driven through Playwright.

Subpackages:
- selection: Select helper, option snapshots and matching strategies
- elements: ControllableElement protocol and the Playwright adapter
- utils: exceptions and text helpers
"""
from __future__ import annotations

from snapselect.elements import ControllableElement, LocatorElement, select_for_locator
from snapselect.selection import Select, SelectOption
from snapselect.utils.exceptions import (
    ElementInteractionError,
    InvalidElementTypeError,
    NoSuchElementError,
    SelectErrorKind,
    SnapSelectError,
    UnsupportedOperationError,
)

__version__ = "0.1.0"

__all__ = [
    "ControllableElement",
    "ElementInteractionError",
    "InvalidElementTypeError",
    "LocatorElement",
    "NoSuchElementError",
    "Select",
    "SelectErrorKind",
    "SelectOption",
    "SnapSelectError",
    "UnsupportedOperationError",
    "select_for_locator",
]
