import pytest

from testfactory import (
    CollectionsFactory,
    DataObject,
    Field,
    FieldKind,
    FieldKindError,
    MissingRequiredField,
    ParentUpdatable,
    UnimplementedParentUpdateHook,
    UnknownCollectionError,
    UnsupportedCopyValue,
)
from testsuites.unit.fakes import (
    Assignment,
    Course,
    FakeLocator,
    LineItem,
    LineItemCollection,
    Order,
    OrderPage,
)


def test_defaults_and_options_are_merged(browser):
    order = Order(browser, id="A-1", notes=["fragile"])

    assert order.id == "A-1"
    assert order.status == "new"
    assert order.gift_wrap is None
    assert order.notes == ["fragile"]
    assert order.shipping == {}
    assert isinstance(order.line_items, LineItemCollection)
    assert order.line_items.browser is browser
    assert len(order.line_items) == 0


def test_sequence_defaults_are_not_shared(browser):
    first = Order(browser, id="A-1")
    second = Order(browser, id="A-2")
    first.notes.append("rush")

    assert second.notes == []
    assert first.line_items is not second.line_items


def test_missing_required_field_names_class_and_field(browser):
    with pytest.raises(MissingRequiredField) as exc_info:
        Order(browser)

    message = str(exc_info.value)
    assert "Order" in message
    assert "'id'" in message
    assert exc_info.value.field == "id"


def test_requires_rejects_none_and_non_string_names(browser):
    order = Order(browser, id="A-1")

    order.requires("id", "status")
    with pytest.raises(MissingRequiredField):
        order.requires("gift_wrap")
    with pytest.raises(MissingRequiredField):
        order.requires("not_a_field")
    with pytest.raises(TypeError):
        order.requires(42)


def test_update_options_changes_only_given_fields(browser):
    order = Order(browser, id="A-1", status="paid")
    order.update_options({"status": "shipped", "carrier": "DHL"})

    assert order.status == "shipped"
    assert order.id == "A-1"
    assert order.carrier == "DHL"
    assert order.field_kinds()["carrier"] is FieldKind.SCALAR


def test_rejected_option_sets_nothing(browser):
    order = Order(browser, id="A-1")

    with pytest.raises(FieldKindError):
        order.update_options({"status": "paid", "notes": "not a list"})

    assert order.status == "new"
    assert order.notes == []


def test_reserved_names_cannot_be_options_or_fields(browser):
    with pytest.raises(FieldKindError):
        Order(browser, id="A-1", browser="other")

    with pytest.raises(FieldKindError):
        class Broken(DataObject):
            current_page = Field()


def test_plain_containers_cannot_hold_data_objects(browser):
    item = LineItem(browser, sku="A")

    with pytest.raises(UnsupportedCopyValue) as exc_info:
        Order(browser, id="A-1", notes=["x", item])
    assert exc_info.value.field == "notes"
    assert "Collection" in str(exc_info.value)

    with pytest.raises(UnsupportedCopyValue):
        Order(browser, id="A-1", shipping={"items": [item]})

    with pytest.raises(UnsupportedCopyValue):
        Order(browser, id="A-1", extra=[{"nested": item}])


def test_undeclared_collection_is_tracked_for_notification(browser):
    course = Course(browser, name="Algebra")
    extra = course.collection("Assignment")
    extra.add(title="Homework")
    course.update_options({"extra_assignments": extra})

    course.edit(name="Algebra II")

    assert course.assignments == []
    assert extra[0].course == "Algebra II"
    assert course.field_kinds()["extra_assignments"] is FieldKind.NESTED_COLLECTION


def test_tracked_collection_names_are_never_reset(browser):
    course = Course(browser, name="Algebra")
    assert course._collections == ["assignments"]

    course.update_options({"assignments": course.collection("Assignment")})
    assert course._collections == ["assignments", "assignments"]


def test_notify_collections_passes_updates_in_order(browser):
    course = Course(browser, name="Algebra")
    course.assignments.add(title="One")
    course.assignments.add(title="Two")

    course.edit(name="Geometry")

    assert [a.course for a in course.assignments] == ["Geometry", "Geometry"]
    assert [a.history for a in course.assignments] == [["Geometry"], ["Geometry"]]


def test_notify_collections_on_non_updatable_members(browser):
    order = Order(browser, id="A-1")
    order.line_items.add(sku="A")

    with pytest.raises(UnimplementedParentUpdateHook):
        order.notify_collections("anything")


def test_update_from_parent_default_raises(browser):
    with pytest.raises(UnimplementedParentUpdateHook) as exc_info:
        LineItem(browser, sku="A").update_from_parent("x")
    assert "LineItem" in str(exc_info.value)
    assert isinstance(exc_info.value, NotImplementedError)


def test_parent_updatable_class_must_define_hook():
    with pytest.raises(TypeError):
        class Silent(ParentUpdatable, DataObject):
            title = Field()


def test_default_create_is_not_implemented(browser):
    class Draft(DataObject):
        title = Field()

    with pytest.raises(NotImplementedError):
        Draft(browser).create()


def test_collection_lookup(browser):
    order = Order(browser, id="A-1")

    items = order.collection("LineItem")
    assert isinstance(items, LineItemCollection)
    assert items.browser is browser
    assert CollectionsFactory.lookup("AssignmentCollection").CONTAINS is Assignment

    with pytest.raises(UnknownCollectionError):
        order.collection("Invoice")


def test_fill_out_pushes_values_to_elements(browser):
    order = Order(browser, id="A-1", status="paid", gift_wrap="yes")
    page = OrderPage(browser)

    order.fill_out(page, "status", "gift_wrap")

    assert browser.elements["#status"].selected == "paid"
    assert browser.elements["#gift-wrap"].checked is True


def test_ordered_fill_keeps_order_and_skips_none(browser):
    item = LineItem(browser, sku="B-7", quantity=3)
    page = OrderPage(browser)
    calls = []
    browser.elements["#sku"].fill = lambda text: calls.append(("sku", text))
    browser.elements["#quantity"].fill = lambda text: calls.append(("quantity", text))

    item.ordered_fill(page, "sku", "quantity")
    assert calls == [("sku", "B-7"), ("quantity", "3")]

    item.quantity = None
    calls.clear()
    item.ordered_fill(page, "sku", "quantity")
    assert calls == [("sku", "B-7")]


def test_fill_out_item_passes_name_to_action(browser):
    item = LineItem(browser, sku="B-7")
    item.update_options({"item_note": "leave at door"})

    item.fill_out_item(item.sku, OrderPage(browser), "item_note")

    assert browser.elements["#note-B-7"].value == "leave at door"


def test_edit_fields_uses_opts_and_skips_missing(browser):
    order = Order(browser, id="A-1", gift_wrap="yes")
    browser.elements["#gift-wrap"].checked = True

    order.edit(status="shipped")

    assert browser.elements["#status"].selected == "shipped"
    assert browser.elements["#gift-wrap"].checked is True
    assert browser.elements["#save"].calls == [("click",)]
    assert order.status == "shipped"


def test_get_or_select_field(browser):
    order = Order(browser, id="A-1", status=None)
    select = browser.elements["#status"]

    order.get_or_select_field("status", select)
    assert order.status == "new"
    assert select.calls == []

    order.status = "paid"
    order.get_or_select_field("status", select)
    assert select.selected == "paid"


def test_get_or_select_value():
    select = FakeLocator(tag="select", selected="Monday")

    assert DataObject.get_or_select(None, select) == "Monday"
    assert DataObject.get_or_select("Friday", select) == "Friday"
    assert select.selected == "Friday"


def test_data_object_repr(browser):
    text = repr(LineItem(browser, sku="A"))
    assert text.startswith("LineItem(")
    assert "sku='A'" in text
