"""
================================================================================
Collections Factory
================================================================================

Superclass for collections of data objects: an ordered list of one kind of
data object, which can create new members, deep copy itself and pass
updates from a parent object on to every member.

Usage:
    class LineItemCollection(CollectionsFactory):
        CONTAINS = LineItem

    order.line_items.add(sku="A")      # LineItem(...).create(), then appended
    copied = order.line_items.copy()   # members deep-copied, same order

Author: Automation Team
License: MIT
================================================================================
"""

from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional, Type

import allure
from loguru import logger

from .errors import CollectionTypeError, UnimplementedParentUpdateHook, UnknownCollectionError

if TYPE_CHECKING:
    from .data_factory import DataFactory


class CollectionsFactory(list):
    """
    An ordered collection of data objects of the CONTAINS type.

    Attributes:
        CONTAINS: Data object class of the members (set once per subclass)
        accepts_parent_updates: Whether CONTAINS is ParentUpdatable
        browser: Playwright page handed to new members
    """

    CONTAINS: Optional[Type["DataFactory"]] = None
    accepts_parent_updates: bool = False

    _registry: Dict[str, Type["CollectionsFactory"]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        from .data_factory import DataFactory, ParentUpdatable

        contains = cls.CONTAINS
        if contains is not None:
            if not (isinstance(contains, type) and issubclass(contains, DataFactory)):
                raise TypeError(
                    f"{cls.__name__}.CONTAINS must be a data object class, got {contains!r}"
                )
            cls.accepts_parent_updates = issubclass(contains, ParentUpdatable)

        CollectionsFactory._registry[cls.__name__] = cls

    def __init__(self, browser: Any, members: Iterable["DataFactory"] = ()):
        super().__init__()
        self.browser = browser
        self.extend(members)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"

    @classmethod
    def lookup(cls, name: str) -> Type["CollectionsFactory"]:
        """Collection class by class name."""
        try:
            return cls._registry[name]
        except KeyError:
            raise UnknownCollectionError(f"No collection class named '{name}'") from None

    # =========================================================================
    # Membership
    # =========================================================================

    def _check_member(self, member: Any) -> None:
        from .data_factory import DataFactory

        expected = self.CONTAINS or DataFactory
        if not isinstance(member, expected):
            raise CollectionTypeError(
                f"{type(self).__name__} holds {expected.__name__} objects, "
                f"got {type(member).__name__}"
            )

    def append(self, member: "DataFactory") -> None:
        self._check_member(member)
        super().append(member)

    def insert(self, index: int, member: "DataFactory") -> None:
        self._check_member(member)
        super().insert(index, member)

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            value = list(value)
            for member in value:
                self._check_member(member)
        else:
            self._check_member(value)
        super().__setitem__(index, value)

    def extend(self, members: Iterable["DataFactory"]) -> None:
        for member in members:
            self.append(member)

    def __iadd__(self, members: Iterable["DataFactory"]) -> "CollectionsFactory":
        self.extend(members)
        return self

    def add(self, **opts: Any) -> None:
        """
        Create a new member and append it.

        The member is built from opts, its create() is called, and only then
        is it appended. If create() fails the error propagates and the
        collection is unchanged.
        """
        if self.CONTAINS is None:
            raise TypeError(f"{type(self).__name__} does not set CONTAINS")

        element = self.CONTAINS(self.browser, **opts)
        with allure.step(f"Add {self.CONTAINS.__name__} to {type(self).__name__}"):
            element.create()
        self.append(element)
        logger.debug(f"{type(self).__name__} now holds {len(self)} member(s)")

    # =========================================================================
    # Copy and Notification
    # =========================================================================

    def copy(self) -> "CollectionsFactory":
        """New collection of the same class and browser, members deep-copied in order."""
        new = type(self)(self.browser)
        for member in self:
            new.append(member.copy())
        return new

    def notify_members(self, *updates: Any) -> None:
        """
        Call update_from_parent(*updates) on every member, in order.

        Raises:
            UnimplementedParentUpdateHook: If CONTAINS is not ParentUpdatable
        """
        if self.CONTAINS is not None and not self.accepts_parent_updates:
            raise UnimplementedParentUpdateHook(self.CONTAINS.__name__)

        logger.debug(f"Notifying {len(self)} member(s) of {type(self).__name__}")
        for member in self:
            member.update_from_parent(*updates)


CollectionFactory = CollectionsFactory
