import pytest

from testfactory import Foundry, WaitTimeoutError
from testfactory.common import set_config
from testsuites.unit.fakes import LineItem, Order, OrderPage


class Steps(Foundry):
    def __init__(self, browser):
        self.browser = browser


def test_visit_navigates_and_runs_block(browser):
    set_config("ui.base_url", "http://localhost:3000")
    steps = Steps(browser)
    seen = []

    page = steps.visit(OrderPage, lambda p: seen.append(p.heading))

    assert isinstance(page, OrderPage)
    assert steps.current_page is page
    assert browser.visited == ["http://localhost:3000/orders/new"]
    assert seen == ["New order"]


def test_on_does_not_navigate(browser):
    steps = Steps(browser)

    page = steps.on(OrderPage)

    assert browser.visited == []
    assert steps.current_page is page
    assert steps.on_page(OrderPage, block=lambda p: p.save()) is steps.current_page
    assert browser.elements["#save"].calls == [("click",)]


def test_make_builds_without_creating(browser):
    item = Steps(browser).make(LineItem, sku="A")

    assert item.browser is browser
    assert browser.created == []


def test_create_makes_then_creates(browser):
    order = Steps(browser).create(Order, id="A-1")

    assert isinstance(order, Order)
    assert browser.created == [("order", "A-1")]
    assert browser.elements["#save"].calls == [("click",)]


def test_wait_until_returns_first_truthy_value(browser):
    results = iter([None, 0, "ready"])

    assert Steps(browser).wait_until(lambda: next(results), timeout=5, interval=0) == "ready"


def test_wait_until_times_out(browser):
    calls = []

    with pytest.raises(WaitTimeoutError, match="never ready"):
        Steps(browser).wait_until(lambda: calls.append(1), timeout=0, message="never ready", interval=0)
    assert len(calls) == 1


def test_wait_until_reads_timeout_from_config(browser):
    set_config("ui.wait_timeout", "0")
    set_config("ui.wait_interval", "0")

    with pytest.raises(WaitTimeoutError):
        Steps(browser).wait_until(lambda: False)
