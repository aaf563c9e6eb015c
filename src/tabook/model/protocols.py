"""Protocol definition for the model component.

Higher layers (commands, storage, UI) depend on ``Model`` rather than on
ModelManager, so they can be exercised against fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterable, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from ..core.config import Config
    from .address_book import AddressBook
    from .person import Person
    from .tag import Tag


PersonPredicate = Callable[["Person"], bool]


def PREDICATE_SHOW_ALL_PERSONS(person: "Person") -> bool:
    """Predicate that always evaluates to true."""
    return True


@runtime_checkable
class Model(Protocol):
    """The API of the model component."""

    # User prefs

    def set_user_prefs(self, user_prefs: "Config") -> None:
        """Replace user prefs data with ``user_prefs``."""
        ...

    def get_user_prefs(self) -> "Config":
        ...

    def get_address_book_file_path(self) -> Path:
        ...

    def set_address_book_file_path(self, path: Path) -> None:
        ...

    # Address book

    def set_address_book(self, address_book: "AddressBook") -> None:
        """Replace address book data with ``address_book``."""
        ...

    def get_address_book(self) -> "AddressBook":
        ...

    # Persons

    def has_person(self, person: "Person") -> bool:
        """Check whether a person with the same identity exists."""
        ...

    def delete_person(self, target: "Person") -> None:
        """Delete ``target``, which must exist."""
        ...

    def add_person(self, person: "Person") -> None:
        """Add ``person``, which must not already exist."""
        ...

    def set_person(self, target: "Person", edited_person: "Person") -> None:
        """Replace ``target`` with ``edited_person``."""
        ...

    def person_list(self) -> Sequence["Person"]:
        """All persons, unfiltered."""
        ...

    def filtered_person_list(self) -> Sequence["Person"]:
        """Persons passing the current filter."""
        ...

    def persistent_update_filtered_list(self, predicates: Iterable[PersonPredicate]) -> None:
        """Filter by the conjunction of ``predicates``."""
        ...

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        """Filter by a single predicate."""
        ...

    # Tutorial tags

    def delete_tutorial_tag(self, target: "Tag") -> None:
        ...

    def add_tutorial_tag(self, tutorial_tag: "Tag") -> None:
        ...

    def has_tutorial_tag(self, tutorial_tag: "Tag") -> bool:
        ...

    def tutorial_tag_list(self) -> Sequence["Tag"]:
        """Registered tutorial tags in registration order."""
        ...

    def tutorial_tag_list_string(self) -> str:
        """Registered tutorial tags rendered for display."""
        ...
