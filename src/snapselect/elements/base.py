"""
Controllable element protocol.

The Select helper only talks to the page through this interface. Every
method is a coroutine because each call crosses into the browser driver.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class ControllableElement(Protocol):
    async def tag_name(self) -> str:
        """Lower-cased tag name of the element."""
        ...

    async def has_attribute(self, name: str) -> bool:
        """Whether the attribute is present, whatever its value."""
        ...

    async def get_attribute(self, name: str) -> str | None:
        """Attribute value, or None when the attribute is absent."""
        ...

    async def find_options(self) -> Sequence[ControllableElement]:
        """Child option elements, in document order."""
        ...

    async def text(self) -> str:
        """Trimmed visible text."""
        ...

    async def is_selected(self) -> bool:
        """Live selection state (options only)."""
        ...

    async def click(self) -> None:
        """User-equivalent interaction; toggles an option's selection."""
        ...
