"""
Option snapshots for native <select> elements.

Each read produces fresh ``SelectOption`` values; nothing is cached between
calls, so a snapshot reflects the control only at the moment it was read.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from ..constants import ATTR_DISABLED, ATTR_VALUE
from ..elements.base import ControllableElement


@dataclass(frozen=True)
class SelectOption:
    """State of one <option> at read time.

    Attributes:
        index: Zero-based position among sibling options
        value: Explicit value attribute, or the text when it is absent
        text: Trimmed visible label
        selected: Selection state when read
        enabled: False when the option carries a disabled attribute
        element: Live handle used for clicks
    """

    index: int
    value: str
    text: str
    selected: bool
    enabled: bool
    element: ControllableElement = field(repr=False, compare=False)


async def read_option(element: ControllableElement, index: int) -> SelectOption:
    """Read one option element into a snapshot."""
    text = await element.text()
    raw_value = await element.get_attribute(ATTR_VALUE)
    return SelectOption(
        index=index,
        value=text if raw_value is None else raw_value,
        text=text,
        selected=await element.is_selected(),
        enabled=not await element.has_attribute(ATTR_DISABLED),
        element=element,
    )


async def read_select_options(element: ControllableElement) -> list[SelectOption]:
    """Read every option of a <select>, in index order.

    Calls are issued one after another; the driver never sees concurrent
    reads against the same control.
    """
    out: list[SelectOption] = []
    for i, child in enumerate(await element.find_options()):
        out.append(await read_option(child, i))
    return out
