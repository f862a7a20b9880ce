"""
================================================================================
testfactory
================================================================================

Page object and data object conventions for Playwright acceptance tests.

Components:
    - page_factory: declarative page objects over a Playwright page
    - data_factory: data objects with declared fields, edits and deep copy
    - collections_factory: ordered, copyable collections of data objects
    - foundry: visit/on/make/create helpers for step code
    - string_factory / date_factory: random and formatted test data

Author: Automation Team
License: MIT
================================================================================
"""

from .collections_factory import CollectionFactory, CollectionsFactory
from .core_ext import binary_transform
from .data_factory import DataFactory, DataObject, ParentUpdatable
from .errors import (
    CollectionTypeError,
    DuplicateElementError,
    FieldKindError,
    MissingRequiredField,
    NoMatchingOptionError,
    TestFactoryError,
    UnexpectedTitleError,
    UnimplementedParentUpdateHook,
    UnknownCollectionError,
    UnsupportedBinaryValue,
    UnsupportedCopyValue,
    WaitTimeoutError,
)
from .fields import Field, FieldKind
from .foundry import Foundry
from .page_factory import PageFactory, action, element, value

__version__ = "1.0.0"

__all__ = [
    "PageFactory",
    "element",
    "value",
    "action",
    "DataFactory",
    "DataObject",
    "ParentUpdatable",
    "CollectionsFactory",
    "CollectionFactory",
    "Field",
    "FieldKind",
    "Foundry",
    "binary_transform",
    "TestFactoryError",
    "MissingRequiredField",
    "UnsupportedCopyValue",
    "UnimplementedParentUpdateHook",
    "FieldKindError",
    "CollectionTypeError",
    "UnknownCollectionError",
    "DuplicateElementError",
    "UnexpectedTitleError",
    "NoMatchingOptionError",
    "UnsupportedBinaryValue",
    "WaitTimeoutError",
]
