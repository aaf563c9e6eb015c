"""Address book: unique persons plus the tutorial tag registry."""

from __future__ import annotations

from typing import Iterable

from loguru import logger

from ..core.exceptions import (
    DuplicatePersonError,
    DuplicateTagError,
    PersonNotFoundError,
    TagNotFoundError,
)
from ..utils.checks import check_argument, require_non_null
from .person import Person
from .tag import Tag


class AddressBook:
    """Ordered, duplicate-free collections of persons and tutorial tags.

    Persons are unique by ``Person.is_same_person``. Tutorial tags are unique
    by name and keep insertion order, which the tag matcher relies on.
    """

    def __init__(self, source: "AddressBook | None" = None) -> None:
        self._persons: list[Person] = []
        self._tutorial_tags: list[Tag] = []
        if source is not None:
            self.reset_data(source)

    def reset_data(self, source: "AddressBook") -> None:
        """Replace all contents with a copy of ``source``."""
        require_non_null(source, "source")
        self.set_persons(source.persons)
        self.set_tutorial_tags(source.tutorial_tags)

    # -------------------------------------------------------------------------
    # Persons
    # -------------------------------------------------------------------------

    @property
    def persons(self) -> tuple[Person, ...]:
        return tuple(self._persons)

    def has_person(self, person: Person) -> bool:
        require_non_null(person, "person")
        return any(p.is_same_person(person) for p in self._persons)

    def add_person(self, person: Person) -> None:
        """Append a person.

        Raises:
            DuplicatePersonError: If an equivalent person exists.
        """
        if self.has_person(person):
            raise DuplicatePersonError(person.name)
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited`` in place.

        Raises:
            PersonNotFoundError: If target is not in the list.
            DuplicatePersonError: If edited clashes with another person.
        """
        require_non_null(target, "target")
        require_non_null(edited, "edited")

        index = self._index_of(target)
        if not target.is_same_person(edited) and self.has_person(edited):
            raise DuplicatePersonError(edited.name)
        self._persons[index] = edited

    def remove_person(self, person: Person) -> None:
        """Remove a person.

        Raises:
            PersonNotFoundError: If the person is not in the list.
        """
        require_non_null(person, "person")
        del self._persons[self._index_of(person)]

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace the person list. Raises DuplicatePersonError on clashes."""
        new_persons: list[Person] = []
        for person in persons:
            if any(p.is_same_person(person) for p in new_persons):
                raise DuplicatePersonError(person.name)
            new_persons.append(person)
        self._persons = new_persons

    def _index_of(self, person: Person) -> int:
        for i, p in enumerate(self._persons):
            if p == person:
                return i
        raise PersonNotFoundError(person.name)

    # -------------------------------------------------------------------------
    # Tutorial tags
    # -------------------------------------------------------------------------

    @property
    def tutorial_tags(self) -> tuple[Tag, ...]:
        return tuple(self._tutorial_tags)

    def has_tutorial_tag(self, tag: Tag) -> bool:
        require_non_null(tag, "tag")
        return tag in self._tutorial_tags

    def add_tutorial_tag(self, tag: Tag) -> None:
        """Register a tutorial group.

        Raises:
            ValueError: If tag is not a tutorial tag.
            DuplicateTagError: If a tutorial tag with the same name exists.
        """
        require_non_null(tag, "tag")
        check_argument(tag.is_tutorial(), f"Not a tutorial tag: {tag.name}")
        if self.has_tutorial_tag(tag):
            raise DuplicateTagError(tag.name)
        self._tutorial_tags.append(tag)
        logger.debug(f"Tutorial tag registered: {tag.name!r}")

    def remove_tutorial_tag(self, tag: Tag) -> None:
        """Unregister a tutorial group.

        Raises:
            TagNotFoundError: If the tag is not registered.
        """
        require_non_null(tag, "tag")
        try:
            self._tutorial_tags.remove(tag)
        except ValueError:
            raise TagNotFoundError(tag.name) from None
        logger.debug(f"Tutorial tag removed: {tag.name!r}")

    def set_tutorial_tags(self, tags: Iterable[Tag]) -> None:
        """Replace the tutorial tag list. Raises DuplicateTagError on clashes."""
        new_tags: list[Tag] = []
        for tag in tags:
            check_argument(tag.is_tutorial(), f"Not a tutorial tag: {tag.name}")
            if tag in new_tags:
                raise DuplicateTagError(tag.name)
            new_tags.append(tag)
        self._tutorial_tags = new_tags

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons and self._tutorial_tags == other._tutorial_tags

    def __repr__(self) -> str:
        return (
            f"AddressBook(persons={len(self._persons)}, "
            f"tutorial_tags={[t.name for t in self._tutorial_tags]})"
        )
