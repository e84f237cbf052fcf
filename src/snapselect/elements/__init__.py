"""
Element adapters consumed by the Select helper.

- ControllableElement: the protocol the helper depends on
- LocatorElement: implementation over a Playwright async Locator
- select_for_locator: wrap a locator and build a validated Select
"""
from __future__ import annotations

from .base import ControllableElement
from .locator import LocatorElement, select_for_locator

__all__ = [
    "ControllableElement",
    "LocatorElement",
    "select_for_locator",
]
