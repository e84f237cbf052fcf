"""
Select helper for native <select> elements.

Treats one ControllableElement as a logical dropdown: select by value, index
or visible text; read the selected option(s); clear a multi-select.

Every accessor re-reads the options from the element. The only state kept
on the instance is fixed at construction (``is_multiple`` and whether
visible-text matching may fall back to whitespace-normalized comparison).

All validation happens before any click reaches the control, so a failed
call never leaves the selection half-changed.

Example usage:
    sel = await Select.create(element)
    await sel.select_by_visible_text("Two")
    first = await sel.get_first_selected_option()
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from ..constants import (
    ATTR_DISABLED,
    ATTR_MULTIPLE,
    MSG_DISABLED_OPTION,
    MSG_DISABLED_SELECT,
    MSG_NOT_A_SELECT,
    MSG_NOTHING_SELECTED,
    MSG_SINGLE_DESELECT,
    SELECT_TAG,
)
from ..elements.base import ControllableElement
from ..settings import SETTINGS
from ..utils.exceptions import (
    InvalidElementTypeError,
    NoSuchElementError,
    UnsupportedOperationError,
)
from .matching import TEXT_STRATEGIES, VALUE_STRATEGIES, MatchStrategy, find_first
from .options import SelectOption, read_select_options

logger = logging.getLogger(__name__)


class Select:
    """Dropdown view over a native <select> element.

    Build instances with ``await Select.create(element)``; the constructor
    does not validate the element.
    """

    def __init__(
        self,
        element: ControllableElement,
        *,
        multiple: bool,
        text_strategies: Sequence[MatchStrategy] = TEXT_STRATEGIES,
    ):
        self._element = element
        self._multiple = multiple
        self._text_strategies = tuple(text_strategies)

    @classmethod
    async def create(
        cls,
        element: ControllableElement,
        *,
        text_fallback: bool | None = None,
    ) -> Select:
        """Validate ``element`` and wrap it.

        Args:
            element: Element expected to be an enabled <select>
            text_fallback: Allow whitespace-normalized visible-text matching
                after the exact pass (default SETTINGS.select.text_fallback)

        Raises:
            InvalidElementTypeError: element is not a <select>
            UnsupportedOperationError: the <select> is disabled
        """
        tag = (await element.tag_name() or "").lower()
        if tag != SELECT_TAG:
            logger.debug("Refusing to wrap <%s> as a select", tag)
            raise InvalidElementTypeError(MSG_NOT_A_SELECT, details={"tag": tag})

        # Presença do atributo, não o valor: disabled="false" continua desabilitado
        if await element.has_attribute(ATTR_DISABLED):
            logger.debug("Refusing to wrap disabled select %r", element)
            raise UnsupportedOperationError(MSG_DISABLED_SELECT)

        multiple = await element.has_attribute(ATTR_MULTIPLE)

        if text_fallback is None:
            text_fallback = SETTINGS.select.text_fallback
        strategies = TEXT_STRATEGIES if text_fallback else TEXT_STRATEGIES[:1]

        logger.debug("Select created over %r (multiple=%s)", element, multiple)
        return cls(element, multiple=multiple, text_strategies=strategies)

    @property
    def element(self) -> ControllableElement:
        return self._element

    @property
    def is_multiple(self) -> bool:
        return self._multiple

    def __repr__(self) -> str:
        return f"Select({self._element!r}, multiple={self._multiple})"

    # ------------------------------------------------------------------
    # Leitura
    # ------------------------------------------------------------------

    async def get_options(self) -> list[SelectOption]:
        """All options, in index order."""
        return await read_select_options(self._element)

    async def get_all_selected_options(self) -> list[SelectOption]:
        """Selected options in ascending index order; empty when none."""
        return [o for o in await self.get_options() if o.selected]

    async def get_first_selected_option(self) -> SelectOption:
        """Lowest-index selected option.

        Raises:
            NoSuchElementError: nothing is selected
        """
        for o in await self.get_options():
            if o.selected:
                return o
        raise NoSuchElementError(MSG_NOTHING_SELECTED)

    # ------------------------------------------------------------------
    # Seleção
    # ------------------------------------------------------------------

    async def select_by_value(self, value: str) -> None:
        """Select the first option whose value equals ``value`` exactly.

        On a multi-select, options already selected stay selected.
        """
        option = await self._find_by_value(value)
        await self._set_selected(option, True)

    async def select_by_index(self, index: int | str) -> None:
        """Select the option at ``index``.

        String indexes such as ``"2"`` are accepted.
        """
        option = await self._find_by_index(index)
        await self._set_selected(option, True)

    async def select_by_visible_text(self, text: str) -> None:
        """Select the first option whose label matches ``text``.

        Exact comparison first; if nothing matches and the fallback is
        enabled, a whitespace-normalized comparison.
        """
        option = await self._find_by_text(text)
        await self._set_selected(option, True)

    # ------------------------------------------------------------------
    # Deseleção (multi-select)
    # ------------------------------------------------------------------

    async def deselect_all(self) -> None:
        """Clear every selected option, disabled ones included."""
        self._require_multiple()
        for o in await self.get_options():
            await self._set_selected(o, False)

    async def deselect_by_value(self, value: str) -> None:
        self._require_multiple()
        await self._set_selected(await self._find_by_value(value), False)

    async def deselect_by_index(self, index: int | str) -> None:
        self._require_multiple()
        await self._set_selected(await self._find_by_index(index), False)

    async def deselect_by_visible_text(self, text: str) -> None:
        self._require_multiple()
        await self._set_selected(await self._find_by_text(text), False)

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------

    def _require_multiple(self) -> None:
        if not self._multiple:
            logger.debug("Deselect refused on single-select %r", self._element)
            raise UnsupportedOperationError(MSG_SINGLE_DESELECT)

    async def _find_by_value(self, value: str) -> SelectOption:
        option = find_first(await self.get_options(), lambda o: o.value, value, VALUE_STRATEGIES)
        if option is None:
            raise NoSuchElementError(f"Cannot locate option with value: {value}", details={"value": value})
        return option

    async def _find_by_index(self, index: int | str) -> SelectOption:
        # bool é subclasse de int; floats e "1.5" não são posições
        if isinstance(index, int) and not isinstance(index, bool):
            pos = index
        elif isinstance(index, str) and index.isascii() and index.isdigit():
            pos = int(index)
        else:
            raise NoSuchElementError(f"Cannot locate option with index: {index!r}", details={"index": index})

        options = await self.get_options()
        if not 0 <= pos < len(options):
            raise NoSuchElementError(
                f"Cannot locate option with index: {index}",
                details={"index": pos, "count": len(options)},
            )
        return options[pos]

    async def _find_by_text(self, text: str) -> SelectOption:
        option = find_first(await self.get_options(), lambda o: o.text, text, self._text_strategies)
        if option is None:
            raise NoSuchElementError(f"Cannot locate option with text: {text}", details={"text": text})
        return option

    async def _set_selected(self, option: SelectOption, selected: bool) -> None:
        if selected and not option.enabled:
            logger.debug("Refusing to select disabled option %d (%r)", option.index, option.text)
            raise UnsupportedOperationError(
                MSG_DISABLED_OPTION, details={"index": option.index, "value": option.value}
            )
        if option.selected == selected:
            return
        await option.element.click()
        logger.debug(
            "Option %d (%r) %s", option.index, option.text, "selected" if selected else "deselected"
        )
