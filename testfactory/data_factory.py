"""
================================================================================
Data Factory
================================================================================

Superclass for data objects: one test data record (a user, an order, a
course...) that knows how to create, edit and remove itself through page
objects, and keeps its fields in line with what the site holds.

Features:
    - Declared fields with defaults and required-field validation
    - Option merging for construction and edits
    - Deep copy, including nested data objects and collections
    - Parent-to-child update notification through collections
    - Shortcuts for filling out page fields from the object's values

Usage:
    class LineItem(DataObject):
        sku = Field(required=True)
        quantity = Field(default=1)

        def create(self):
            self.on(OrderPage, lambda page: self.fill_out(page, "sku", "quantity"))

    class LineItemCollection(CollectionsFactory):
        CONTAINS = LineItem

    class Order(DataObject):
        id = Field(required=True)
        notes = Field.sequence()
        line_items = Field.collection(LineItemCollection)

        def edit(self, **opts):
            self.on(OrderPage, lambda page: self.edit_fields(opts, page, "status"))
            self.update_options(opts)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import pickle
import random
from typing import Any, Dict, Mapping, Optional, Type, Union

from loguru import logger
from playwright.sync_api import Locator

from .collections_factory import CollectionsFactory
from .driver_ext import fit, selected_text
from .errors import (
    FieldKindError,
    MissingRequiredField,
    UnimplementedParentUpdateHook,
    UnsupportedCopyValue,
)
from .fields import Field, FieldKind, check_kind
from .foundry import Foundry


# Attribute names data objects use for themselves
RESERVED_NAMES = frozenset({"browser", "current_page"})


class ParentUpdatable:
    """
    Capability mixin for data objects that accept updates from a parent.

    A data object listing this mixin must define update_from_parent(). Only
    collections of ParentUpdatable elements can notify their members.

    Example:
        class Assignment(ParentUpdatable, DataObject):
            def update_from_parent(self, course_name):
                self.course = course_name
    """


class DataFactory(Foundry):
    """
    The superclass for all data objects.

    Subclasses declare fields as class attributes (see testfactory.fields).
    The constructor merges keyword options over the declared defaults, sets
    them with set_options() and checks the required fields.
    """

    _fields: Dict[str, Field] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        fields = dict(cls._fields)
        for name, value in vars(cls).items():
            if isinstance(value, Field):
                if name in RESERVED_NAMES:
                    raise FieldKindError(f"'{name}' is reserved and can't be a field of {cls.__name__}")
                fields[name] = value
        cls._fields = fields

        if issubclass(cls, ParentUpdatable) and cls.update_from_parent is DataFactory.update_from_parent:
            raise TypeError(
                f"{cls.__name__} is ParentUpdatable but does not define update_from_parent()"
            )

    def __init__(self, browser: Any, **opts: Any):
        self.browser = browser
        self._collections: list = []
        self._extra_fields: Dict[str, FieldKind] = {}

        options = {name: field.default_for(browser) for name, field in self._fields.items()}
        options.update(opts)
        self.set_options(options)
        self.requires(*[name for name, field in self._fields.items() if field.required])

    def __setattr__(self, name: str, value: Any) -> None:
        # Public attributes are fields, however they are set
        if name.startswith("_") or name in RESERVED_NAMES:
            object.__setattr__(self, name, value)
            return
        kind = self._check_value(name, value)
        object.__setattr__(self, name, value)
        if kind is not None:
            self.__dict__.setdefault("_extra_fields", {})[name] = kind

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.field_kinds())
        return f"{type(self).__name__}({values})"

    # =========================================================================
    # Option Merging
    # =========================================================================

    def field_kinds(self) -> Dict[str, FieldKind]:
        """Kind of every field set on this object, declared ones first."""
        kinds = {name: field.kind for name, field in self._fields.items()}
        kinds.update(self._extra_fields)
        return kinds

    def _check_value(self, key: str, value: Any) -> Optional[FieldKind]:
        """Validate one value. Returns the inferred kind for undeclared keys."""
        field = self._fields.get(key)
        if field is not None:
            field.validate(value)
            return None
        kind = FieldKind.infer(value)
        check_kind(key, kind, value)
        return kind

    def set_options(self, opts: Mapping[str, Any]) -> None:
        """
        Set the object's fields from a mapping.

        Declared fields are validated against their kind. Undeclared keys
        become fields of this instance, with the kind taken from the value.
        Plain attribute assignment goes through the same checks.
        Keys whose value is a collection are appended to the list used by
        notify_collections(). The list is never reset or de-duplicated.

        Nothing is set if any value is rejected.

        Raises:
            FieldKindError: If a value doesn't fit its field's kind
            UnsupportedCopyValue: If a list/dict value holds a data object
        """
        for key, value in opts.items():
            if key in RESERVED_NAMES:
                raise FieldKindError(f"'{key}' is reserved and can't be set as an option")
            self._check_value(key, value)

        for key, value in opts.items():
            setattr(self, key, value)
            if isinstance(value, CollectionsFactory):
                self._collections.append(key)

    update_options = set_options

    def requires(self, *names: str) -> None:
        """
        Make sure the named fields are not None.

        Runs at the end of construction for every field declared with
        required=True. Call it yourself for conditional requirements.

        Example:
            self.requires("site", "assignment", "document_id")

        Raises:
            MissingRequiredField: Naming the class and the first empty field
        """
        for name in names:
            if not isinstance(name, str):
                raise TypeError(
                    f"requires() takes field names, got {name!r} in {type(self).__name__}"
                )
            value = getattr(self, name, None)
            if value is None or isinstance(value, Field):
                raise MissingRequiredField(type(self).__name__, name)

    def collection(self, name: Union[str, Type[CollectionsFactory]]) -> CollectionsFactory:
        """
        A new, empty collection bound to this object's browser.

        Args:
            name: Collection class, or the first part of its name
                ("LineItem" finds LineItemCollection)
        """
        if isinstance(name, str):
            collection_class = CollectionsFactory.lookup(f"{name}Collection")
        else:
            collection_class = name
        return collection_class(self.browser)

    # =========================================================================
    # Deep Copy
    # =========================================================================

    def copy(self) -> "DataFactory":
        """
        Deep copy of the data object and everything nested in it.

        Per field kind:
            NESTED_COLLECTION: the collection's own copy()
            SEQUENCE, MAPPING: pickled and unpickled, sharing nothing
            NESTED_OBJECT:     copied recursively
            SCALAR:            the same value

        The copy is built through the constructor, so required fields are
        checked again.

        Raises:
            UnsupportedCopyValue: If a list/dict field can't be pickled
        """
        opts = {}
        for name, kind in self.field_kinds().items():
            opts[name] = self._copy_value(name, kind, getattr(self, name))
        logger.debug(f"Copying {type(self).__name__} ({len(opts)} fields)")
        return type(self)(self.browser, **opts)

    data_object_copy = copy

    @staticmethod
    def _copy_value(name: str, kind: FieldKind, value: Any) -> Any:
        if value is None:
            return None
        if kind is FieldKind.NESTED_COLLECTION or kind is FieldKind.NESTED_OBJECT:
            return value.copy()
        if kind is FieldKind.SEQUENCE or kind is FieldKind.MAPPING:
            try:
                return pickle.loads(pickle.dumps(value))
            except (pickle.PicklingError, TypeError, AttributeError) as e:
                raise UnsupportedCopyValue(name, value, reason=str(e)) from e
        return value

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def create(self) -> None:
        """Create the record on the site. Define this in your data object."""
        raise NotImplementedError(f"{type(self).__name__} does not define create()")

    def update_from_parent(self, *updates: Any) -> None:
        """
        Receive updated information from a parent data object.

        Define this in data objects that have a parent which may need to
        send them updates, and mix in ParentUpdatable.
        """
        raise UnimplementedParentUpdateHook(type(self).__name__)

    def notify_collections(self, *updates: Any) -> None:
        """
        Pass updates to the members of every nested collection.

        The members' update_from_parent() decides what to do with them.
        """
        for name in self._collections:
            logger.debug(f"{type(self).__name__} notifying collection '{name}'")
            getattr(self, name).notify_members(*updates)

    # =========================================================================
    # Page Filling
    # =========================================================================

    def fill_out(self, page: Any, *fields: str) -> None:
        """
        Fill out page elements from the fields with the same names.

        The fields are filled in random order. If order matters, use
        ordered_fill(). Elements that take a parameter need fill_out_item().

        Example:
            self.on(PageClass, lambda page: self.fill_out(page, "title", "agree"))
        """
        self._fill(True, None, page, fields)

    def ordered_fill(self, page: Any, *fields: str) -> None:
        """Like fill_out(), in the order given."""
        self._fill(False, None, page, fields)

    def fill_out_item(self, name: Any, page: Any, *fields: str) -> None:
        """
        Like fill_out(), for page actions that take a parameter.

        Example:
            self.fill_out_item("Joe Schmoe", page, "role", "grade")
        """
        self._fill(True, name, page, fields)

    def ordered_item_fill(self, name: Any, page: Any, *fields: str) -> None:
        self._fill(False, name, page, fields)

    def edit_fields(self, opts: Mapping[str, Any], page: Any, *fields: str) -> None:
        """
        ordered_fill() for edit methods: values come from the edit's opts.
        Fields missing from opts are left alone.

        Example:
            def edit(self, **opts):
                self.on(PageClass, lambda page: self.edit_fields(opts, page, "title"))
                self.update_options(opts)
        """
        self.edit_item_fields(opts, None, page, *fields)

    def edit_item_fields(self, opts: Mapping[str, Any], name: Any, page: Any, *fields: str) -> None:
        self._parse_fields(opts, name, page, fields)

    def get_or_select_field(self, field: str, select: Locator) -> None:
        """
        For select lists with unpredictable defaults (a due date that depends
        on today, say).

        If the field is None, store the select list's current text in it.
        Otherwise select the field's value on the page. Single selects only.

        Example:
            self.get_or_select_field("num_resubmissions", page.num_resubmissions)
        """
        value = getattr(self, field, None)
        if value is None:
            self.set_options({field: selected_text(select)})
        else:
            select.select_option(label=str(value))

    @staticmethod
    def get_or_select(value: Optional[Any], select: Locator) -> Any:
        """
        get_or_select_field() for one value, usually a dict entry. Returns
        the value to store.

        Example:
            self.open["day"] = self.get_or_select(self.open["day"], page.open_day)
        """
        if value is None:
            return selected_text(select)
        select.select_option(label=str(value))
        return value

    def _fill(self, shuffle: bool, name: Any, page: Any, fields) -> None:
        fields = list(fields)
        if shuffle:
            random.shuffle(fields)
        self._parse_fields(None, name, page, fields)

    def _parse_fields(self, opts: Optional[Mapping[str, Any]], name: Any, page: Any, fields) -> None:
        for field in fields:
            element = getattr(page, field)
            if name is not None:
                element = element(name)
            value = getattr(self, field) if opts is None else opts.get(field)
            fit(element, value)


DataObject = DataFactory
