"""In-memory fakes of the ControllableElement protocol.

FakeSelect / FakeOption mimic what a browser does with a native <select>:
clicking an option in a single-select selects it and clears its siblings,
clicking it in a multi-select toggles it. Attributes are stored as a dict so
presence checks behave like ``hasAttribute``.
"""
from __future__ import annotations

import pytest


class FakeElement:
    def __init__(self, tag: str, attrs: dict | None = None, text: str = ""):
        self.tag = tag
        self.attrs = dict(attrs or {})
        self._text = text
        self.clicks = 0
        self.calls: list[str] = []

    async def tag_name(self) -> str:
        self.calls.append("tag_name")
        return self.tag

    async def has_attribute(self, name: str) -> bool:
        self.calls.append(f"has_attribute:{name}")
        return name in self.attrs

    async def get_attribute(self, name: str) -> str | None:
        self.calls.append(f"get_attribute:{name}")
        return self.attrs.get(name)

    async def find_options(self) -> list:
        return []

    async def text(self) -> str:
        return self._text.strip()

    async def is_selected(self) -> bool:
        return False

    async def click(self) -> None:
        self.clicks += 1


class FakeOption(FakeElement):
    def __init__(self, text: str, value: str | None = None, *, disabled: bool = False, selected: bool = False):
        attrs = {}
        if value is not None:
            attrs["value"] = value
        if disabled:
            attrs["disabled"] = ""
        super().__init__("option", attrs, text)
        self.selected = selected
        self.parent: FakeSelect | None = None

    async def is_selected(self) -> bool:
        return self.selected

    async def click(self) -> None:
        self.clicks += 1
        if self.parent is not None and self.parent.multiple:
            self.selected = not self.selected
            return
        if self.parent is not None:
            for o in self.parent.options:
                o.selected = False
        self.selected = True


class FakeSelect(FakeElement):
    def __init__(self, options: list[FakeOption], attrs: dict | None = None, tag: str = "select"):
        super().__init__(tag, attrs)
        self.options = options
        for o in options:
            o.parent = self
        # Browsers select the first option of a single-select when none is marked
        if not self.multiple and options and not any(o.selected for o in options):
            options[0].selected = True

    @property
    def multiple(self) -> bool:
        return "multiple" in self.attrs

    async def find_options(self) -> list[FakeOption]:
        return list(self.options)

    def selected_texts(self) -> list[str]:
        return [o._text.strip() for o in self.options if o.selected]

    def total_clicks(self) -> int:
        return sum(o.clicks for o in self.options)


def build_form_page() -> dict[str, FakeElement]:
    """Controls named after the ones on the classic WebDriver form page."""
    return {
        "checky": FakeElement("input", {"type": "checkbox", "name": "checky"}),
        "selectomatic": FakeSelect([
            FakeOption("One", "one", selected=True),
            FakeOption("Two", "two"),
            FakeOption("Four", "four"),
            FakeOption(
                "Still learning how to count, apparently",
                "still learning how to count, apparently",
            ),
        ], {"name": "selectomatic"}),
        "no-select": FakeSelect([FakeOption("Foo", "foo")], {"name": "no-select", "disabled": "disabled"}),
        "single_disabled": FakeSelect([
            FakeOption("Enabled", "enabled"),
            FakeOption("Disabled", "disabled", disabled=True),
        ], {"name": "single_disabled"}),
        "multi_disabled": FakeSelect([
            FakeOption("Enabled", "enabled"),
            FakeOption("Disabled", "disabled", disabled=True),
        ], {"name": "multi_disabled", "multiple": "multiple"}),
        "multi": FakeSelect([
            FakeOption("Eggs", "eggs", selected=True),
            FakeOption("Ham", "ham"),
            FakeOption("Sausages", "sausages", selected=True),
            FakeOption("Onion gravy", "onion gravy"),
        ], {"name": "multi", "multiple": "multiple"}),
        # Sem atributo value: o valor cai para o texto
        "select_empty_multiple": FakeSelect([
            FakeOption("select_1"),
            FakeOption("select_2"),
            FakeOption("select_3"),
            FakeOption("select_4"),
        ], {"name": "select_empty_multiple", "multiple": ""}),
    }


@pytest.fixture
def form_page() -> dict[str, FakeElement]:
    return build_form_page()


@pytest.fixture
def option():
    """FakeOption class, for ad-hoc option lists."""
    return FakeOption


@pytest.fixture
def make_select():
    def _make(*options: FakeOption, multiple: bool = False, **attrs) -> FakeSelect:
        if multiple:
            attrs["multiple"] = ""
        return FakeSelect(list(options), attrs)
    return _make


@pytest.fixture
def make_element():
    def _make(tag: str, **attrs) -> FakeElement:
        return FakeElement(tag, attrs)
    return _make
