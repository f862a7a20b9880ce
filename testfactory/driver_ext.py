"""
================================================================================
Driver Extensions
================================================================================

Helpers layered over Playwright locators so data objects can push their
field values onto a page without caring what kind of element is there.

Author: Automation Team
License: MIT
================================================================================
"""

import re
from typing import Any

from loguru import logger
from playwright.sync_api import Locator

from .core_ext import SET, binary_transform
from .errors import NoMatchingOptionError


def _element_kind(locator: Locator) -> str:
    tag = locator.evaluate("el => el.tagName.toLowerCase()")
    if tag == "input":
        input_type = (locator.get_attribute("type") or "text").lower()
        if input_type in ("checkbox", "radio"):
            return input_type
    return tag


def _select(locator: Locator, value: Any) -> None:
    if not isinstance(value, re.Pattern):
        locator.select_option(label=str(value))
        return
    options = locator.locator("option").all_inner_texts()
    for text in options:
        if value.search(text):
            locator.select_option(label=text)
            return
    raise NoMatchingOptionError(
        f"No option matches /{value.pattern}/. Options: {options!r}"
    )


def fit(locator: Locator, value: Any) -> None:
    """
    Put a value into an element. None leaves the element untouched.

    - checkbox / radio: value goes through binary_transform, then check/uncheck
    - select: the option with the matching label is selected; a compiled
      regex selects the first option whose text it matches
    - anything else: cleared and filled with str(value)
    """
    if value is None:
        return

    kind = _element_kind(locator)
    if kind in ("checkbox", "radio"):
        if binary_transform(value) == SET:
            locator.check()
        else:
            locator.uncheck()
    elif kind == "select":
        _select(locator, value)
    else:
        locator.clear()
        locator.fill(str(value))
    logger.debug(f"fit {kind}: {value!r}")


def selected_text(select: Locator) -> str:
    """Text of the currently selected option of a select element."""
    return select.evaluate("el => el.options[el.selectedIndex].text")
