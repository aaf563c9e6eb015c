"""Model component: tags, persons, the address book and filter predicates."""

from tabook.model.tag import (
    Tag,
    TagStatus,
    TagType,
    create_tag,
    create_tutorial_tag,
    is_valid_tag_name,
    set_tag_name_validator,
    variant_for_status,
)
from tabook.model.person import Person
from tabook.model.address_book import AddressBook
from tabook.model.protocols import PREDICATE_SHOW_ALL_PERSONS, Model
from tabook.model.manager import ModelManager
from tabook.model.predicates import (
    NameContainsKeywordsPredicate,
    TagContainsKeywordsPredicate,
    TutorialGroupPredicate,
)

__all__ = [
    # Tags
    "Tag",
    "TagStatus",
    "TagType",
    "create_tag",
    "create_tutorial_tag",
    "is_valid_tag_name",
    "set_tag_name_validator",
    "variant_for_status",
    # Persons and address book
    "Person",
    "AddressBook",
    # Model
    "Model",
    "ModelManager",
    "PREDICATE_SHOW_ALL_PERSONS",
    # Predicates
    "NameContainsKeywordsPredicate",
    "TagContainsKeywordsPredicate",
    "TutorialGroupPredicate",
]
