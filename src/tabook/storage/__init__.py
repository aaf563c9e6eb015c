"""JSON adapters for persisting the address book."""

from tabook.storage.adapted import (
    JsonAdaptedPerson,
    JsonAdaptedTag,
    JsonSerializableAddressBook,
)

__all__ = [
    "JsonAdaptedPerson",
    "JsonAdaptedTag",
    "JsonSerializableAddressBook",
]
