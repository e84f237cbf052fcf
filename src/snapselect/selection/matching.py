"""
matching.py

Estratégias de matching de opções, aplicadas em ordem.

Each strategy compares one candidate string with the target. ``find_first``
tries the strategies one at a time over the whole option list: a later,
looser strategy is only consulted when no option matched an earlier one.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from ..utils.text import collapse_whitespace

T = TypeVar("T")

MatchStrategy = Callable[[str, str], bool]


def exact_match(candidate: str, target: str) -> bool:
    return candidate == target


def whitespace_insensitive_match(candidate: str, target: str) -> bool:
    """Compare after trimming and collapsing whitespace runs. Case-sensitive."""
    return collapse_whitespace(candidate) == collapse_whitespace(target)


VALUE_STRATEGIES: tuple[MatchStrategy, ...] = (exact_match,)
TEXT_STRATEGIES: tuple[MatchStrategy, ...] = (exact_match, whitespace_insensitive_match)


def find_first(
    items: Sequence[T],
    key: Callable[[T], str],
    target: str,
    strategies: Iterable[MatchStrategy],
) -> T | None:
    """Return the first item matched by the first successful strategy.

    Args:
        items: Candidates in priority order (index order for options)
        key: Extracts the string compared against ``target``
        target: Value being looked for
        strategies: Ordered match strategies

    Returns:
        The matching item, or None when no strategy matches anything
    """
    for strategy in strategies:
        for item in items:
            if strategy(key(item), target):
                return item
    return None
