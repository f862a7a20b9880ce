"""
================================================================================
Foundry
================================================================================

Mixin that instantiates page and data object classes. Step definitions and
data objects both use it; the only requirement is a `browser` attribute
holding the Playwright page.

Usage:
    class Steps(Foundry):
        def __init__(self, page):
            self.browser = page

    steps.visit(LoginPage, lambda page: page.login_button.click())
    order = steps.create(Order, id="A-1")

Author: Automation Team
License: MIT
================================================================================
"""

import time
from typing import Any, Callable, Optional, Type, TypeVar

import allure
from loguru import logger

from .common import get_config
from .errors import WaitTimeoutError


P = TypeVar("P")
D = TypeVar("D")


class Foundry:
    """Creates pages and data objects bound to `self.browser`."""

    browser: Any = None
    current_page: Any = None

    def visit(self, page_class: Type[P], block: Optional[Callable[[P], Any]] = None) -> P:
        """
        Navigate to the page's PAGE_URL, then run the block with the page.

        Args:
            page_class: The page class to instantiate
            block: Optional callable run with the page object
        """
        return self.on(page_class, visit=True, block=block)

    def on(
        self,
        page_class: Type[P],
        visit: bool = False,
        block: Optional[Callable[[P], Any]] = None,
    ) -> P:
        """
        Instantiate the page class, then run the block with it.

        Use when the browser is already on the page you want to work with.
        """
        with allure.step(f"On page: {page_class.__name__}"):
            self.current_page = page_class(self.browser, visit)
            if block is not None:
                block(self.current_page)
        return self.current_page

    on_page = on

    def make(self, data_object_class: Type[D], **opts: Any) -> D:
        """Build a data object for testing. Nothing is sent to the browser."""
        return data_object_class(self.browser, **opts)

    def create(self, data_object_class: Type[D], **opts: Any) -> D:
        """make() followed by the data object's create()."""
        data_object = self.make(data_object_class, **opts)
        with allure.step(f"Create {data_object_class.__name__}"):
            data_object.create()
        return data_object

    def wait_until(
        self,
        condition: Callable[[], Any],
        timeout: Optional[float] = None,
        message: Optional[str] = None,
        interval: Optional[float] = None,
    ) -> Any:
        """
        Poll a callable until it returns something truthy.

        Use for conditions more involved than an element being present
        (for those, set EXPECTED_ELEMENT on the page class).

        Args:
            condition: Zero-argument callable
            timeout: Seconds before giving up (config ui.wait_timeout, default 30)
            message: Text of the WaitTimeoutError
            interval: Seconds between polls (config ui.wait_interval)

        Returns:
            The first truthy value returned by the condition

        Raises:
            WaitTimeoutError: If the timeout is reached

        Example:
            self.wait_until(lambda: page.processing_message == "Done")
        """
        timeout = float(timeout if timeout is not None else get_config("ui.wait_timeout", 30))
        interval = float(interval if interval is not None else get_config("ui.wait_interval", 0.5))

        deadline = time.monotonic() + timeout
        attempt = 0
        while True:
            attempt += 1
            result = condition()
            if result:
                logger.debug(f"Condition met after {attempt} attempt(s)")
                return result
            if time.monotonic() >= deadline:
                error_msg = message or f"Timed out after {timeout}s waiting for condition"
                logger.error(error_msg)
                raise WaitTimeoutError(error_msg)
            time.sleep(interval)
