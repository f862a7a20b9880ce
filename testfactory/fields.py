"""
================================================================================
Data Object Field Declarations
================================================================================

Data objects declare their fields as class attributes:

    class Order(DataObject):
        id = Field(required=True)
        status = Field(default="new")
        tags = Field.sequence()
        line_items = Field.collection(LineItemCollection)

Each Field carries a FieldKind. The kind decides how the field is validated
when set and how it is copied by DataFactory.copy().

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional, Type

from .errors import FieldKindError, UnsupportedCopyValue

if TYPE_CHECKING:
    from .collections_factory import CollectionsFactory


class FieldKind(Enum):
    """What a field holds. Decides the copy strategy."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    NESTED_OBJECT = "nested_object"
    NESTED_COLLECTION = "nested_collection"

    @classmethod
    def infer(cls, value: Any) -> "FieldKind":
        """Kind for a value stored under an undeclared field name."""
        from .collections_factory import CollectionsFactory
        from .data_factory import DataFactory

        if isinstance(value, CollectionsFactory):
            return cls.NESTED_COLLECTION
        if isinstance(value, DataFactory):
            return cls.NESTED_OBJECT
        if isinstance(value, (list, tuple, set)):
            return cls.SEQUENCE
        if isinstance(value, dict):
            return cls.MAPPING
        return cls.SCALAR


class Field:
    """
    Declaration of one data object field.

    Attributes:
        kind: FieldKind of the value
        default: Value used when the constructor isn't given one
        default_factory: Zero-argument callable producing the default
            (use for random data and mutable defaults)
        required: Whether the field must be non-None after construction
        collection_class: Collection class for NESTED_COLLECTION fields
        name: Set when the owning class is created
    """

    def __init__(
        self,
        kind: FieldKind = FieldKind.SCALAR,
        default: Any = None,
        default_factory: Optional[Callable[[], Any]] = None,
        required: bool = False,
        collection_class: Optional[Type["CollectionsFactory"]] = None,
    ):
        if default is not None and default_factory is not None:
            raise ValueError("Field can't have both default and default_factory")
        if kind in (FieldKind.SEQUENCE, FieldKind.MAPPING) and isinstance(default, (list, dict, set)):
            raise ValueError("Mutable defaults are shared between instances. Use default_factory.")
        if kind is FieldKind.NESTED_COLLECTION and collection_class is None:
            raise ValueError("Collection fields need the collection class")

        self.kind = kind
        self.default = default
        self.default_factory = default_factory
        self.required = required
        self.collection_class = collection_class
        self.name: Optional[str] = None

    def __set_name__(self, owner, name):
        self.name = name

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, kind={self.kind.name}, required={self.required})"

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def sequence(cls, default_factory: Callable[[], Any] = list, required: bool = False) -> "Field":
        return cls(FieldKind.SEQUENCE, default_factory=default_factory, required=required)

    @classmethod
    def mapping(cls, default_factory: Callable[[], Any] = dict, required: bool = False) -> "Field":
        return cls(FieldKind.MAPPING, default_factory=default_factory, required=required)

    @classmethod
    def nested(cls, default_factory: Optional[Callable[[], Any]] = None, required: bool = False) -> "Field":
        return cls(FieldKind.NESTED_OBJECT, default_factory=default_factory, required=required)

    @classmethod
    def collection(cls, collection_class: Type["CollectionsFactory"], required: bool = False) -> "Field":
        """A nested collection. Defaults to an empty collection of the given class."""
        return cls(FieldKind.NESTED_COLLECTION, collection_class=collection_class, required=required)

    # -------------------------------------------------------------------------
    # Defaults and validation
    # -------------------------------------------------------------------------

    def default_for(self, browser: Any) -> Any:
        """Default value for a new instance bound to the given browser."""
        if self.kind is FieldKind.NESTED_COLLECTION and self.default_factory is None:
            return self.collection_class(browser)
        if self.default_factory is not None:
            return self.default_factory()
        return self.default

    def validate(self, value: Any) -> None:
        """
        Check a value against the declared kind.

        None is accepted for every kind. Plain lists and dicts must hold plain
        data only: data objects and collections belong in Collection fields.

        Raises:
            FieldKindError: If the value doesn't fit the kind
            UnsupportedCopyValue: If a plain container holds a data object
        """
        if value is None:
            return
        check_kind(self.name, self.kind, value, self.collection_class)


def check_kind(name: str, kind: FieldKind, value: Any, collection: Optional[type] = None) -> None:
    from .collections_factory import CollectionsFactory
    from .data_factory import DataFactory

    if kind is FieldKind.SCALAR:
        if isinstance(value, (CollectionsFactory, DataFactory, list, tuple, set, dict)):
            raise FieldKindError(
                f"Field '{name}' is declared as a plain value but got a {type(value).__name__}. "
                f"Declare it with Field.sequence(), Field.mapping(), Field.nested() "
                f"or Field.collection() so copies don't share it."
            )
    elif kind is FieldKind.NESTED_COLLECTION:
        expected = collection or CollectionsFactory
        if not isinstance(value, expected):
            raise FieldKindError(
                f"Field '{name}' holds a {expected.__name__}, got {type(value).__name__}"
            )
    elif kind is FieldKind.NESTED_OBJECT:
        if not isinstance(value, DataFactory):
            raise FieldKindError(
                f"Field '{name}' holds a data object, got {type(value).__name__}"
            )
    elif kind is FieldKind.SEQUENCE:
        if isinstance(value, CollectionsFactory) or not isinstance(value, (list, tuple, set)):
            raise FieldKindError(
                f"Field '{name}' holds a list, got {type(value).__name__}"
            )
        _reject_live_objects(name, value, value)
    elif kind is FieldKind.MAPPING:
        if not isinstance(value, dict):
            raise FieldKindError(
                f"Field '{name}' holds a dict, got {type(value).__name__}"
            )
        _reject_live_objects(name, value, value)


def _reject_live_objects(name: str, root: Any, value: Any) -> None:
    """Walk a plain container and refuse data objects and collections."""
    from .collections_factory import CollectionsFactory
    from .data_factory import DataFactory

    if isinstance(value, (DataFactory, CollectionsFactory)):
        raise UnsupportedCopyValue(
            name, root, reason=f"it contains a {type(value).__name__}"
        )
    if isinstance(value, dict):
        for key, item in value.items():
            _reject_live_objects(name, root, key)
            _reject_live_objects(name, root, item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _reject_live_objects(name, root, item)
