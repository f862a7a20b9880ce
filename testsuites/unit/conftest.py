"""
================================================================================
Unit Test Configuration
================================================================================

Fixtures for the testfactory unit suite. Everything runs against FakePage;
no browser is launched.

================================================================================
"""

from typing import Generator

import pytest

from testfactory.common import GlobalConfig
from testsuites.unit.fakes import FakeLocator, FakePage


@pytest.fixture(autouse=True)
def fresh_config() -> Generator[None, None, None]:
    """Each test loads configuration from scratch."""
    GlobalConfig.reset()
    yield
    GlobalConfig.reset()


@pytest.fixture
def browser() -> FakePage:
    """A fake page with the order form elements in place."""
    return FakePage(
        page_title="Orders | Shop",
        elements={
            "#sku": FakeLocator(),
            "#quantity": FakeLocator(),
            "#status": FakeLocator(tag="select", selected="new"),
            "#gift-wrap": FakeLocator(input_type="checkbox"),
            "h1": FakeLocator(tag="h1", text="New order"),
        },
    )
