"""In-memory model: address book, user prefs and the filtered person view."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from loguru import logger

from ..core.config import Config
from ..utils.checks import require_non_null
from .address_book import AddressBook
from .person import Person
from .protocols import PREDICATE_SHOW_ALL_PERSONS, PersonPredicate
from .tag import Tag


class ModelManager:
    """Concrete Model implementation.

    Owns the address book, so it is also the tutorial tag source that a
    TutorialRegistryAccessor binds to.

    Example:
        model = ModelManager(AddressBook(), Config())
        accessor = TutorialRegistryAccessor(model)
        model.add_tutorial_tag(create_tutorial_tag("T05"))
        accessor.current_tutorial_tags()  # (Tag(name='T05', ...),)
    """

    def __init__(
        self,
        address_book: AddressBook | None = None,
        user_prefs: Config | None = None,
    ):
        """Initialize with an optional address book and user prefs.

        Args:
            address_book: Initial data; copied, not shared.
            user_prefs: Initial prefs; defaults to Config().
        """
        self._address_book = AddressBook(address_book)
        self._user_prefs = user_prefs or Config()
        self._predicate: PersonPredicate = PREDICATE_SHOW_ALL_PERSONS
        logger.debug(
            f"ModelManager initialized: {len(self._address_book.persons)} persons, "
            f"{len(self._address_book.tutorial_tags)} tutorial tags"
        )

    # =========================================================================
    # User prefs
    # =========================================================================

    def set_user_prefs(self, user_prefs: Config) -> None:
        self._user_prefs = require_non_null(user_prefs, "user_prefs")

    def get_user_prefs(self) -> Config:
        return self._user_prefs

    def get_address_book_file_path(self) -> Path:
        return self._user_prefs.address_book_path

    def set_address_book_file_path(self, path: Path) -> None:
        require_non_null(path, "path")
        self._user_prefs.address_book_path = Path(path)

    # =========================================================================
    # Address book
    # =========================================================================

    def set_address_book(self, address_book: AddressBook) -> None:
        self._address_book.reset_data(address_book)

    def get_address_book(self) -> AddressBook:
        return self._address_book

    def has_person(self, person: Person) -> bool:
        return self._address_book.has_person(person)

    def delete_person(self, target: Person) -> None:
        self._address_book.remove_person(target)
        logger.debug(f"Person deleted: {target.name!r}")

    def add_person(self, person: Person) -> None:
        self._address_book.add_person(person)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        logger.debug(f"Person added: {person.name!r}")

    def set_person(self, target: Person, edited_person: Person) -> None:
        self._address_book.set_person(target, edited_person)
        logger.debug(f"Person updated: {target.name!r} -> {edited_person.name!r}")

    def person_list(self) -> Sequence[Person]:
        return self._address_book.persons

    # =========================================================================
    # Filtered person list
    # =========================================================================

    def filtered_person_list(self) -> Sequence[Person]:
        return tuple(p for p in self._address_book.persons if self._predicate(p))

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._predicate = require_non_null(predicate, "predicate")

    def persistent_update_filtered_list(self, predicates: Iterable[PersonPredicate]) -> None:
        """Filter by all ``predicates`` at once. An empty list shows everybody."""
        predicates = tuple(require_non_null(predicates, "predicates"))
        if not predicates:
            self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
            return
        self.update_filtered_person_list(lambda person: all(p(person) for p in predicates))
        logger.debug(f"Filter updated with {len(predicates)} predicates")

    # =========================================================================
    # Tutorial tags
    # =========================================================================

    def delete_tutorial_tag(self, target: Tag) -> None:
        self._address_book.remove_tutorial_tag(target)

    def add_tutorial_tag(self, tutorial_tag: Tag) -> None:
        self._address_book.add_tutorial_tag(tutorial_tag)

    def has_tutorial_tag(self, tutorial_tag: Tag) -> bool:
        return self._address_book.has_tutorial_tag(tutorial_tag)

    def tutorial_tag_list(self) -> Sequence[Tag]:
        return self._address_book.tutorial_tags

    def tutorial_tag_list_string(self) -> str:
        return " ".join(str(tag) for tag in self._address_book.tutorial_tags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self._user_prefs == other._user_prefs
            and self.filtered_person_list() == other.filtered_person_list()
        )
