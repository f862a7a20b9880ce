"""
Stand-ins for the Playwright page and locators, plus a small order/course
domain used across the unit tests. No browser is started.
"""

from typing import Any, Dict, List, Optional

from testfactory import (
    CollectionsFactory,
    DataObject,
    Field,
    PageFactory,
    ParentUpdatable,
    action,
    element,
    value,
)
from testfactory.string_factory import random_alphanums


class FakeLocator:
    """Records what a test did to one element."""

    def __init__(
        self,
        tag: str = "input",
        input_type: str = "text",
        selected: Optional[str] = None,
        text: str = "",
        options: Optional[List[str]] = None,
    ):
        self.tag = tag
        self.input_type = input_type
        self.selected = selected
        self.text = text
        self.options = list(options or [])
        self.value: Optional[str] = None
        self.checked = False
        self.calls: List[tuple] = []

    def evaluate(self, script: str) -> Any:
        if "tagName" in script:
            return self.tag
        if "selectedIndex" in script:
            return self.selected
        raise ValueError(f"Unexpected script: {script}")

    def get_attribute(self, name: str) -> Optional[str]:
        return self.input_type if name == "type" else None

    def check(self) -> None:
        self.checked = True
        self.calls.append(("check",))

    def uncheck(self) -> None:
        self.checked = False
        self.calls.append(("uncheck",))

    def select_option(self, label: Optional[str] = None) -> None:
        self.selected = label
        self.calls.append(("select_option", label))

    def clear(self) -> None:
        self.value = ""
        self.calls.append(("clear",))

    def fill(self, text: str) -> None:
        self.value = text
        self.calls.append(("fill", text))

    def click(self) -> None:
        self.calls.append(("click",))

    def inner_text(self) -> str:
        return self.text

    def locator(self, selector: str) -> "FakeOptions":
        return FakeOptions(self.options)

    def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        self.calls.append(("wait_for", state, timeout))


class FakeOptions:
    """The option elements under a select."""

    def __init__(self, texts: List[str]):
        self.texts = texts

    def all_inner_texts(self) -> List[str]:
        return list(self.texts)


class FakePage:
    """Minimal sync Playwright Page."""

    def __init__(self, page_title: str = "", elements: Optional[Dict[str, FakeLocator]] = None):
        self.page_title = page_title
        self.elements: Dict[str, FakeLocator] = dict(elements or {})
        self.visited: List[str] = []
        self.created: List[Any] = []
        self.url = "about:blank"

    def goto(self, url: str) -> None:
        self.visited.append(url)
        self.url = url

    def title(self) -> str:
        return self.page_title

    def locator(self, selector: str) -> FakeLocator:
        return self.elements.setdefault(selector, FakeLocator())


class LiveHandle:
    """Something like an open socket: it can't be serialized."""

    def __reduce_ex__(self, protocol):
        raise TypeError("cannot pickle 'LiveHandle' object")


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------

class OrderPage(PageFactory):
    PAGE_URL = "/orders/new"

    sku = element(lambda b: b.locator("#sku"))
    quantity = element(lambda b: b.locator("#quantity"))
    status = element(lambda b: b.locator("#status"))
    gift_wrap = element(lambda b: b.locator("#gift-wrap"))
    heading = value(lambda b: b.locator("h1").inner_text())
    item_note = action(lambda sku, b: b.locator(f"#note-{sku}"))
    save = action(lambda b: b.locator("#save").click())


# ---------------------------------------------------------------------------
# Data objects
# ---------------------------------------------------------------------------

class LineItem(DataObject):
    sku = Field(required=True)
    quantity = Field(default=1)

    def create(self):
        if self.sku == "FAIL":
            raise RuntimeError("The site rejected the line item")
        self.browser.created.append(("line_item", self.sku))

    def edit(self, **opts):
        self.update_options(opts)


class LineItemCollection(CollectionsFactory):
    CONTAINS = LineItem


class Order(DataObject):
    id = Field(required=True)
    status = Field(default="new")
    gift_wrap = Field()
    notes = Field.sequence()
    shipping = Field.mapping()
    line_items = Field.collection(LineItemCollection)

    def create(self):
        self.on(OrderPage, block=lambda page: page.save())
        self.browser.created.append(("order", self.id))

    def edit(self, **opts):
        def fill(page):
            self.edit_fields(opts, page, "status", "gift_wrap")
            page.save()

        self.on(OrderPage, block=fill)
        self.update_options(opts)


class Assignment(ParentUpdatable, DataObject):
    title = Field(default_factory=lambda: random_alphanums(8))
    course = Field()
    history = Field.sequence()

    def create(self):
        self.browser.created.append(("assignment", self.title))

    def update_from_parent(self, course_name):
        self.course = course_name
        self.history.append(course_name)


class AssignmentCollection(CollectionsFactory):
    CONTAINS = Assignment


class Course(DataObject):
    name = Field(required=True)
    assignments = Field.collection(AssignmentCollection)

    def edit(self, **opts):
        self.update_options(opts)
        if "name" in opts:
            self.notify_collections(self.name)

