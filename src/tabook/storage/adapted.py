"""JSON-friendly versions of the model types.

Each adapter mirrors one model type field-for-field using plain JSON values
(camelCase keys, enum member names) and converts back with ``to_model()``,
which raises IllegalValueError when the stored data breaks a model
constraint. Reading and writing files is left to the caller:

    payload = JsonSerializableAddressBook.from_model(book).to_json()
    book = JsonSerializableAddressBook.from_json(payload).to_model()
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from loguru import logger

from ..core.exceptions import IllegalValueError
from ..model import person as person_fields
from ..model.address_book import AddressBook
from ..model.person import Person
from ..model.tag import Tag, TagStatus, TagType, create_tag, is_valid_tag_name, variant_for_status

MESSAGE_DUPLICATE_PERSON = "Persons list contains duplicate person(s)."
MESSAGE_DUPLICATE_TUTORIAL_TAG = "Tutorial tag list contains duplicate tag(s)."
MESSAGE_NOT_TUTORIAL_TAG = "Tutorial tag list contains a non-tutorial tag."
MESSAGE_TAG_TYPE_MISMATCH = "Tag type {stored} does not match status {status}."
MISSING_FIELD_MESSAGE_FORMAT = "{owner}'s {field} field is missing!"

E = TypeVar("E", bound=Enum)


def _require_object(data: Any, owner: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise IllegalValueError(f"{owner} entry must be a JSON object, got {type(data).__name__}")
    return data


def _require_list(value: Any, field_name: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise IllegalValueError(f"{field_name} must be a JSON array, got {type(value).__name__}")
    return value


def _enum_from_name(enum_cls: type[E], value: Any, field_name: str) -> E | None:
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls[value]
    except (KeyError, TypeError):
        raise IllegalValueError(f"Unknown {field_name}: {value!r}") from None


@dataclass
class JsonAdaptedTag:
    """JSON-friendly version of Tag."""

    tag_name: str | None
    tag_status: TagStatus | None
    tag_type: TagType | None = None

    @classmethod
    def from_model(cls, source: Tag) -> "JsonAdaptedTag":
        return cls(tag_name=source.name, tag_status=source.status, tag_type=source.tag_type)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JsonAdaptedTag":
        """Build from a decoded JSON object.

        Raises:
            IllegalValueError: If data is not an object, or tagStatus or
                tagType is not a known member.
        """
        data = _require_object(data, "Tag")
        return cls(
            tag_name=data.get("tagName"),
            tag_status=_enum_from_name(TagStatus, data.get("tagStatus"), "tagStatus"),
            tag_type=_enum_from_name(TagType, data.get("tagType"), "tagType"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "tagName": self.tag_name,
            "tagStatus": self.tag_status.name if self.tag_status else None,
            "tagType": self.tag_type.name if self.tag_type else None,
        }

    def to_model(self) -> Tag:
        """Convert to a Tag.

        The variant is always re-derived from the status. A stored tagType
        that disagrees with it is treated as corrupt data.

        Raises:
            IllegalValueError: If the name is invalid, the status is missing,
                or the stored type contradicts the status.
        """
        if not isinstance(self.tag_name, str) or not is_valid_tag_name(self.tag_name):
            raise IllegalValueError(Tag.MESSAGE_CONSTRAINTS)
        if self.tag_status is None:
            raise IllegalValueError(
                MISSING_FIELD_MESSAGE_FORMAT.format(owner="Tag", field=TagStatus.__name__)
            )
        derived = variant_for_status(self.tag_status)
        if self.tag_type is not None and self.tag_type is not derived:
            raise IllegalValueError(
                MESSAGE_TAG_TYPE_MISMATCH.format(
                    stored=self.tag_type.name, status=self.tag_status.name
                )
            )
        return create_tag(self.tag_name, self.tag_status)


@dataclass
class JsonAdaptedPerson:
    """JSON-friendly version of Person."""

    name: str | None
    phone: str | None
    email: str | None
    tags: list[JsonAdaptedTag] = field(default_factory=list)

    @classmethod
    def from_model(cls, source: Person) -> "JsonAdaptedPerson":
        return cls(
            name=source.name,
            phone=source.phone,
            email=source.email,
            tags=[JsonAdaptedTag.from_model(t) for t in sorted(source.tags, key=lambda t: t.name)],
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JsonAdaptedPerson":
        data = _require_object(data, "Person")
        return cls(
            name=data.get("name"),
            phone=data.get("phone"),
            email=data.get("email"),
            tags=[JsonAdaptedTag.from_dict(t) for t in _require_list(data.get("tags"), "tags")],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "tags": [t.to_dict() for t in self.tags],
        }

    def to_model(self) -> Person:
        """Convert to a Person.

        Raises:
            IllegalValueError: If any field is missing or invalid.
        """
        tags = [t.to_model() for t in self.tags]

        checks = (
            ("Name", self.name, person_fields.is_valid_name, person_fields.NAME_CONSTRAINTS),
            ("Phone", self.phone, person_fields.is_valid_phone, person_fields.PHONE_CONSTRAINTS),
            ("Email", self.email, person_fields.is_valid_email, person_fields.EMAIL_CONSTRAINTS),
        )
        for field_name, value, is_valid, constraints in checks:
            if value is None:
                raise IllegalValueError(
                    MISSING_FIELD_MESSAGE_FORMAT.format(owner="Person", field=field_name)
                )
            if not isinstance(value, str) or not is_valid(value):
                raise IllegalValueError(constraints)

        return Person(self.name, self.phone, self.email, frozenset(tags))


@dataclass
class JsonSerializableAddressBook:
    """JSON-friendly version of AddressBook."""

    persons: list[JsonAdaptedPerson] = field(default_factory=list)
    tutorial_tags: list[JsonAdaptedTag] = field(default_factory=list)

    @classmethod
    def from_model(cls, source: AddressBook) -> "JsonSerializableAddressBook":
        return cls(
            persons=[JsonAdaptedPerson.from_model(p) for p in source.persons],
            tutorial_tags=[JsonAdaptedTag.from_model(t) for t in source.tutorial_tags],
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JsonSerializableAddressBook":
        data = _require_object(data, "Address book")
        return cls(
            persons=[
                JsonAdaptedPerson.from_dict(p)
                for p in _require_list(data.get("persons"), "persons")
            ],
            tutorial_tags=[
                JsonAdaptedTag.from_dict(t)
                for t in _require_list(data.get("tutorialTags"), "tutorialTags")
            ],
        )

    @classmethod
    def from_json(cls, text: str) -> "JsonSerializableAddressBook":
        """Parse JSON text.

        Raises:
            IllegalValueError: If the text is not a JSON object.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise IllegalValueError(f"Invalid address book JSON: {e}") from e
        if not isinstance(data, dict):
            raise IllegalValueError("Address book JSON must be an object")
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "persons": [p.to_dict() for p in self.persons],
            "tutorialTags": [t.to_dict() for t in self.tutorial_tags],
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def to_model(self) -> AddressBook:
        """Convert to an AddressBook.

        Raises:
            IllegalValueError: On invalid entries or duplicates.
        """
        address_book = AddressBook()

        for adapted in self.tutorial_tags:
            tag = adapted.to_model()
            if not tag.is_tutorial():
                raise IllegalValueError(MESSAGE_NOT_TUTORIAL_TAG)
            if address_book.has_tutorial_tag(tag):
                raise IllegalValueError(MESSAGE_DUPLICATE_TUTORIAL_TAG)
            address_book.add_tutorial_tag(tag)

        for adapted in self.persons:
            person = adapted.to_model()
            if address_book.has_person(person):
                raise IllegalValueError(MESSAGE_DUPLICATE_PERSON)
            address_book.add_person(person)

        logger.debug(
            f"Address book loaded: {len(address_book.persons)} persons, "
            f"{len(address_book.tutorial_tags)} tutorial tags"
        )
        return address_book
