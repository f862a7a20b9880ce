"""
================================================================================
testfactory Errors
================================================================================

Every error raised by testfactory derives from TestFactoryError. They are
authoring and configuration errors: nothing in the library catches or
retries them.

================================================================================
"""

from typing import Any


class TestFactoryError(Exception):
    """Base class for all testfactory errors."""
    __test__ = False


class MissingRequiredField(TestFactoryError):
    """Raised when a required data object field is None."""

    def __init__(self, owner: str, field: str):
        self.owner = owner
        self.field = field
        super().__init__(
            f"You've neglected to define a required variable for your {owner}.\n\n"
            f"Please ensure you always specify a value for '{field}' "
            f"when you create the data object."
        )


class UnsupportedCopyValue(TestFactoryError):
    """Raised when a plain list/dict field cannot be structurally copied."""

    def __init__(self, field: str, value: Any, reason: str = ""):
        self.field = field
        self.value = value
        self.kind = type(value).__name__
        message = (
            f"\nKey: {field!r}\nValue: {value!r}\nClass: {self.kind}\n\n"
            f"The value detailed above can not be copied as plain data.\n"
            f"The most likely cause is that you have put a Data Object\n"
            f"or some other live object inside a list or dict.\n"
            f"If possible, put the Data Object into a Collection."
        )
        if reason:
            message += f"\n\nReason: {reason}"
        super().__init__(message)


class UnimplementedParentUpdateHook(TestFactoryError, NotImplementedError):
    """Raised when a parent update reaches a data object that can't take it."""

    def __init__(self, owner: str):
        self.owner = owner
        super().__init__(
            f"update_from_parent must be implemented in {owner} "
            f"if you plan to pass updates from a parent object "
            f"to the members of its collections."
        )


class FieldKindError(TestFactoryError, TypeError):
    """Raised when a value does not fit the kind its field was declared with."""


class CollectionTypeError(TestFactoryError, TypeError):
    """Raised when a collection is given a member of the wrong type."""


class UnknownCollectionError(TestFactoryError, LookupError):
    """Raised when a collection class can't be found by name."""


class DuplicateElementError(TestFactoryError):
    """Raised when a page class defines an element twice."""


class NoMatchingOptionError(TestFactoryError, LookupError):
    """Raised when no option of a select list matches the given pattern."""


class UnexpectedTitleError(TestFactoryError, AssertionError):
    """Raised when a page's title doesn't match its expected title."""


class UnsupportedBinaryValue(TestFactoryError, ValueError):
    """Raised when a checkbox/radio value can't be mapped to set/clear."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"The value of your data object's checkbox/radio ({value!r}) "
            f"is not supported.\nPlease make sure the value conforms to "
            f"one of the following patterns:\n\n"
            f" - 'set' or 'clear'\n"
            f" - 'yes', 'no', 'on', or 'off' (case insensitive)\n"
            f" - True or False"
        )


class WaitTimeoutError(TestFactoryError, TimeoutError):
    """Raised when a wait operation times out."""
