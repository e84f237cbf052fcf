"""
Selection package for native <select> controls.

Main exports:
- Select: validated dropdown view over a ControllableElement
- SelectOption: snapshot of one option at read time
- find_first, exact_match, whitespace_insensitive_match: ordered matching

Example usage:
    from snapselect.selection import Select

    sel = await Select.create(element)
    await sel.select_by_value("two")
"""
from __future__ import annotations

from .matching import (
    TEXT_STRATEGIES,
    VALUE_STRATEGIES,
    MatchStrategy,
    exact_match,
    find_first,
    whitespace_insensitive_match,
)
from .options import SelectOption, read_option, read_select_options
from .select import Select

__all__ = [
    "TEXT_STRATEGIES",
    "VALUE_STRATEGIES",
    "MatchStrategy",
    "Select",
    "SelectOption",
    "exact_match",
    "find_first",
    "read_option",
    "read_select_options",
    "whitespace_insensitive_match",
]
