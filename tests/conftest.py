"""Pytest configuration and fixtures."""

import pytest

from tabook.core.config import Config
from tabook.matching import StaticTutorialTags, TagMatcher, TutorialRegistryAccessor
from tabook.model import AddressBook, ModelManager, Person, TagStatus, create_tag, create_tutorial_tag
from tabook.model.tag import set_tag_name_validator


@pytest.fixture(autouse=True)
def _reset_tag_name_validator():
    """Keep a swapped-in tag name rule from leaking between tests."""
    yield
    set_tag_name_validator(None)


@pytest.fixture
def config(tmp_path) -> Config:
    """Provide a config pointing at a temporary data file."""
    return Config(address_book_path=tmp_path / "addressbook.json")


@pytest.fixture
def alice() -> Person:
    return Person(
        "Alice Pauline",
        "94351253",
        "alice@example.com",
        frozenset({create_tag("T05", TagStatus.ASSIGNED), create_tag("hw1", TagStatus.COMPLETE_GOOD)}),
    )


@pytest.fixture
def benson() -> Person:
    return Person(
        "Benson Meier",
        "98765432",
        "johnd@example.com",
        frozenset({create_tag("T05", TagStatus.AVAILABLE), create_tag("week1", TagStatus.PRESENT)}),
    )


@pytest.fixture
def carl() -> Person:
    return Person(
        "Carl Kurz",
        "95352563",
        "heinz@example.com",
        frozenset({create_tag("T12", TagStatus.AVAILABLE)}),
    )


@pytest.fixture
def address_book(alice, benson, carl) -> AddressBook:
    """Provide an address book with three persons and two tutorial groups."""
    book = AddressBook()
    for tag_name in ("T05", "T12"):
        book.add_tutorial_tag(create_tutorial_tag(tag_name))
    for person in (alice, benson, carl):
        book.add_person(person)
    return book


@pytest.fixture
def model(address_book, config) -> ModelManager:
    return ModelManager(address_book, config)


@pytest.fixture
def matcher(model) -> TagMatcher:
    """Provide a matcher bound to the model's tutorial tags."""
    return TagMatcher(TutorialRegistryAccessor(model))


@pytest.fixture
def make_matcher():
    """Provide a factory for matchers over a fixed list of tutorial groups."""

    def _make(*tutorial_names: str) -> TagMatcher:
        tags = [create_tutorial_tag(name) for name in tutorial_names]
        return TagMatcher(TutorialRegistryAccessor(StaticTutorialTags(tags)))

    return _make
