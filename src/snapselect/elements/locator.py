"""
Playwright adapter for the ControllableElement protocol.

Wraps a ``playwright.async_api.Locator``. Playwright refuses to click
``<option>`` elements directly, so ``click()`` on an option reproduces what a
user click does on a native list: toggle in a multi-select, select in a
single-select, then fire ``input``/``change`` on the owning ``<select>``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from playwright.async_api import Error as PlaywrightError

from ..settings import SETTINGS
from ..utils.exceptions import wrap_playwright_error

if TYPE_CHECKING:
    from playwright.async_api import Locator

    from ..selection.select import Select


_TAG_NAME_JS = "el => (el.tagName || '').toLowerCase()"
_HAS_ATTRIBUTE_JS = "(el, name) => el.hasAttribute(name)"
_IS_SELECTED_JS = "el => !!el.selected"

# HTMLOptionElement.text já vem com espaços colapsados, como o rótulo exibido
_VISIBLE_TEXT_JS = """
el => (el.tagName || '').toLowerCase() === 'option'
    ? el.text
    : (el.innerText || el.textContent || '')
"""

# Returns false for non-option elements so the caller falls back to a real click
_CLICK_OPTION_JS = """
el => {
    if ((el.tagName || '').toLowerCase() !== 'option') return false;
    const sel = el.closest('select');
    if (sel && sel.multiple) {
        el.selected = !el.selected;
    } else {
        el.selected = true;
    }
    const target = sel || el;
    target.dispatchEvent(new Event('input', { bubbles: true }));
    target.dispatchEvent(new Event('change', { bubbles: true }));
    return true;
}
"""


class LocatorElement:
    """ControllableElement over a Playwright async Locator.

    Args:
        locator: Playwright locator resolving to exactly one element
        option_selector: CSS selector for child options
            (default SETTINGS.select.option_selector)
        timeout_ms: Timeout for each Playwright call
            (default SETTINGS.timeouts.action_timeout_ms)
    """

    def __init__(
        self,
        locator: Locator,
        *,
        option_selector: str | None = None,
        timeout_ms: int | None = None,
    ):
        self._locator = locator
        self._option_selector = option_selector or SETTINGS.select.option_selector
        self._timeout_ms = timeout_ms if timeout_ms is not None else SETTINGS.timeouts.action_timeout_ms

    @property
    def locator(self) -> Locator:
        return self._locator

    def __repr__(self) -> str:
        return f"LocatorElement({self._locator!r})"

    async def _evaluate(self, operation: str, expression: str, arg: Any = None) -> Any:
        try:
            return await self._locator.evaluate(expression, arg, timeout=self._timeout_ms)
        except PlaywrightError as e:
            raise wrap_playwright_error(e, operation, self._timeout_ms) from e

    async def tag_name(self) -> str:
        return (await self._evaluate("tag_name", _TAG_NAME_JS)) or ""

    async def has_attribute(self, name: str) -> bool:
        return bool(await self._evaluate(f"has_attribute({name})", _HAS_ATTRIBUTE_JS, name))

    async def get_attribute(self, name: str) -> str | None:
        try:
            return await self._locator.get_attribute(name, timeout=self._timeout_ms)
        except PlaywrightError as e:
            raise wrap_playwright_error(e, f"get_attribute({name})", self._timeout_ms) from e

    async def find_options(self) -> list[LocatorElement]:
        options = self._locator.locator(self._option_selector)
        try:
            count = await options.count()
        except PlaywrightError as e:
            raise wrap_playwright_error(e, "find_options", self._timeout_ms) from e
        return [
            LocatorElement(
                options.nth(i),
                option_selector=self._option_selector,
                timeout_ms=self._timeout_ms,
            )
            for i in range(count)
        ]

    async def text(self) -> str:
        txt = await self._evaluate("text", _VISIBLE_TEXT_JS)
        return (txt or "").strip()

    async def is_selected(self) -> bool:
        return bool(await self._evaluate("is_selected", _IS_SELECTED_JS))

    async def click(self) -> None:
        if await self._evaluate("click(option)", _CLICK_OPTION_JS):
            return
        try:
            await self._locator.click(timeout=self._timeout_ms)
        except PlaywrightError as e:
            raise wrap_playwright_error(e, "click", self._timeout_ms) from e


async def select_for_locator(
    locator: Locator,
    *,
    option_selector: str | None = None,
    timeout_ms: int | None = None,
    text_fallback: bool | None = None,
) -> Select:
    """Wrap a Playwright locator and build a validated Select over it.

    Example:
        sel = await select_for_locator(page.locator("[name=selectomatic]"))
        await sel.select_by_value("two")
    """
    from ..selection.select import Select

    element = LocatorElement(locator, option_selector=option_selector, timeout_ms=timeout_ms)
    return await Select.create(element, text_fallback=text_fallback)
