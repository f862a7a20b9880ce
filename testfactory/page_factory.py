"""
================================================================================
Page Factory
================================================================================

Superclass for page objects, with a small declarative layer over the
Playwright page.

Provides:
    - PAGE_URL navigation (relative paths are joined to ui.base_url)
    - EXPECTED_ELEMENT / EXPECTED_TITLE checks on instantiation
    - element() / value() / action() declarations
    - Delegation of anything else to the Playwright page

Usage:
    class LoginPage(PageFactory):
        PAGE_URL = "/login"
        EXPECTED_ELEMENT = "username"
        EXPECTED_TITLE = re.compile("Login")

        username = element(lambda b: b.locator("#username"))
        password = element(lambda b: b.locator("#password"))
        header = value(lambda b: b.locator("h3.page_header").inner_text())
        login = action(lambda b: b.locator("#login").click())
        select_style = action(lambda style, b: b.get_by_text(style).click())

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from typing import Any, Callable, Optional, Pattern, Union

import allure
from loguru import logger
from playwright.sync_api import Page

from .common import get_config
from .errors import DuplicateElementError, UnexpectedTitleError


class _Element:
    """Read-only property computed from the page object."""

    def __init__(self, fn: Callable[[Any], Any]):
        self.fn = fn
        self.name: Optional[str] = None
        self.__doc__ = fn.__doc__

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, obj, owner=None):
        if obj is None:
            return self
        return self.fn(obj)


class _Action:
    """Method calling fn(*args, page_object)."""

    def __init__(self, fn: Callable[..., Any]):
        self.fn = fn
        self.name: Optional[str] = None
        self.__doc__ = fn.__doc__

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, obj, owner=None):
        if obj is None:
            return self

        def bound(*args: Any) -> Any:
            return self.fn(*args, obj)

        bound.__name__ = self.name or "action"
        return bound


def element(fn: Callable[[Any], Any]) -> _Element:
    """
    Declare an element of the page. `fn` gets the page object and returns
    whatever represents the element, usually a Locator.

    Example:
        title = element(lambda b: b.locator("#title-id"))
    """
    return _Element(fn)


value = element


def action(fn: Callable[..., Any]) -> _Action:
    """
    Declare an interaction with the page. The page object is passed after
    any arguments the action is called with.

    Example:
        continue_ = action(lambda b: b.get_by_role("button", name="Continue").click())
        select_style = action(lambda style, b: b.get_by_text(style).click())
    """
    return _Action(fn)


class PageFactory:
    """
    Base class for all page objects.

    Class attributes:
        PAGE_URL: Where visit() goes. Relative paths use ui.base_url.
        EXPECTED_ELEMENT: Name of an element that must be visible before the
            page object is usable
        EXPECTED_ELEMENT_TIMEOUT: Seconds to wait for it (ui.expected_element_timeout)
        EXPECTED_TITLE: Exact title string or compiled regex
    """

    PAGE_URL: Optional[str] = None
    EXPECTED_ELEMENT: Optional[str] = None
    EXPECTED_ELEMENT_TIMEOUT: Optional[float] = None
    EXPECTED_TITLE: Optional[Union[str, Pattern[str]]] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for name, attr in vars(cls).items():
            if not isinstance(attr, (_Element, _Action)):
                continue
            for base in cls.__mro__[1:]:
                if name in vars(base):
                    raise DuplicateElementError(
                        f"{name} is being defined twice in {cls.__name__}!"
                    )

    def __init__(self, page: Page, visit: bool = False):
        self.page = page
        if visit:
            self.goto()
        if self.EXPECTED_ELEMENT is not None:
            self.expected_element()
        if self.EXPECTED_TITLE is not None:
            self.has_expected_title()

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name == "page":
            raise AttributeError(name)
        return getattr(self.page, name)

    @property
    def url(self) -> Optional[str]:
        """Full PAGE_URL."""
        if self.PAGE_URL is None:
            return None
        if re.match(r"^[a-z][a-z0-9+.-]*://", self.PAGE_URL, re.IGNORECASE):
            return self.PAGE_URL
        base_url = str(get_config("ui.base_url", "http://localhost:3000")).rstrip("/")
        return f"{base_url}/{self.PAGE_URL.lstrip('/')}"

    def goto(self) -> None:
        """Enter PAGE_URL in the browser's address bar."""
        if self.PAGE_URL is None:
            raise TypeError(f"{type(self).__name__} does not set PAGE_URL")
        with allure.step(f"Navigate to {self.url}"):
            self.page.goto(self.url)
            logger.debug(f"Navigated to: {self.url}")

    def expected_element(self) -> None:
        """Wait until EXPECTED_ELEMENT is visible."""
        timeout = self.EXPECTED_ELEMENT_TIMEOUT
        if timeout is None:
            timeout = get_config("ui.expected_element_timeout", 30)
        getattr(self, self.EXPECTED_ELEMENT).wait_for(state="visible", timeout=float(timeout) * 1000)

    def has_expected_title(self) -> None:
        """
        Raises:
            UnexpectedTitleError: If the page title doesn't match EXPECTED_TITLE
        """
        expected = self.EXPECTED_TITLE
        title = self.page.title()
        if isinstance(expected, re.Pattern):
            matches = expected.search(title) is not None
            shown = expected.pattern
        else:
            matches = expected == title
            shown = expected
        if not matches:
            raise UnexpectedTitleError(f"Expected title '{shown}' instead of '{title}'")
