"""Tests for the JSON adapters."""

import json
import re

import pytest

from tabook.core.exceptions import IllegalValueError
from tabook.model import AddressBook, Tag, TagStatus, TagType, create_tag
from tabook.storage import JsonAdaptedPerson, JsonAdaptedTag, JsonSerializableAddressBook
from tabook.storage.adapted import (
    MESSAGE_DUPLICATE_PERSON,
    MESSAGE_DUPLICATE_TUTORIAL_TAG,
    MESSAGE_NOT_TUTORIAL_TAG,
)


class TestJsonAdaptedTag:
    """Tests for JsonAdaptedTag."""

    def test_from_model_to_dict(self):
        adapted = JsonAdaptedTag.from_model(create_tag("T05", TagStatus.ASSIGNED))
        assert adapted.to_dict() == {"tagName": "T05", "tagStatus": "ASSIGNED", "tagType": "TUTORIAL"}

    def test_to_model(self):
        tag = JsonAdaptedTag.from_dict(
            {"tagName": "hw1", "tagStatus": "COMPLETE_GOOD", "tagType": "ASSIGNMENT"}
        ).to_model()

        assert tag.name == "hw1"
        assert tag.status is TagStatus.COMPLETE_GOOD
        assert tag.tag_type is TagType.ASSIGNMENT

    @pytest.mark.parametrize("name", [None, "", "T 05", "#hw"])
    def test_invalid_name(self, name):
        adapted = JsonAdaptedTag(name, TagStatus.PRESENT, TagType.ATTENDANCE)
        with pytest.raises(IllegalValueError, match=Tag.MESSAGE_CONSTRAINTS):
            adapted.to_model()

    def test_missing_status(self):
        with pytest.raises(IllegalValueError, match="missing"):
            JsonAdaptedTag("hw1", None).to_model()

    def test_missing_type_is_derived(self):
        tag = JsonAdaptedTag.from_dict({"tagName": "week1", "tagStatus": "PRESENT"}).to_model()
        assert tag.is_attendance()

    def test_type_status_mismatch(self):
        """A stored type that disagrees with the status is corrupt data."""
        adapted = JsonAdaptedTag("T05", TagStatus.AVAILABLE, TagType.ASSIGNMENT)
        with pytest.raises(IllegalValueError, match="does not match"):
            adapted.to_model()

    @pytest.mark.parametrize("key", ["tagStatus", "tagType"])
    def test_unknown_enum_member(self, key):
        data = {"tagName": "T05", "tagStatus": "AVAILABLE", "tagType": "TUTORIAL", key: "BOGUS"}
        with pytest.raises(IllegalValueError, match=key):
            JsonAdaptedTag.from_dict(data)

    @pytest.mark.parametrize("name", [123, ["T05"], {"n": "T05"}])
    def test_non_string_name(self, name):
        """A tag name of the wrong JSON type is a constraint violation."""
        adapted = JsonAdaptedTag.from_dict({"tagName": name, "tagStatus": "AVAILABLE"})
        with pytest.raises(IllegalValueError, match=Tag.MESSAGE_CONSTRAINTS):
            adapted.to_model()

    @pytest.mark.parametrize("data", [1, "T05", None, ["T05"]])
    def test_non_object_entry(self, data):
        with pytest.raises(IllegalValueError, match="Tag entry must be a JSON object"):
            JsonAdaptedTag.from_dict(data)


class TestJsonAdaptedPerson:
    """Tests for JsonAdaptedPerson."""

    def test_round_trip(self, alice):
        assert JsonAdaptedPerson.from_dict(JsonAdaptedPerson.from_model(alice).to_dict()).to_model() == alice

    @pytest.mark.parametrize(
        "field_name,label",
        [("name", "Name"), ("phone", "Phone"), ("email", "Email")],
    )
    def test_missing_field(self, alice, field_name, label):
        data = JsonAdaptedPerson.from_model(alice).to_dict()
        del data[field_name]
        with pytest.raises(IllegalValueError, match=f"Person's {label} field is missing!"):
            JsonAdaptedPerson.from_dict(data).to_model()

    def test_invalid_phone(self, alice):
        data = JsonAdaptedPerson.from_model(alice).to_dict()
        data["phone"] = "+651234"
        with pytest.raises(IllegalValueError, match="Phone numbers"):
            JsonAdaptedPerson.from_dict(data).to_model()

    @pytest.mark.parametrize(
        "field_name,value,message",
        [("name", 5, "Names should"), ("phone", 94351253, "Phone numbers"), ("email", ["a@b.cd"], "Emails should")],
    )
    def test_non_string_field(self, alice, field_name, value, message):
        """Fields of the wrong JSON type report the field constraint."""
        data = JsonAdaptedPerson.from_model(alice).to_dict()
        data[field_name] = value
        with pytest.raises(IllegalValueError, match=message):
            JsonAdaptedPerson.from_dict(data).to_model()

    def test_tags_not_a_list(self, alice):
        data = JsonAdaptedPerson.from_model(alice).to_dict()
        data["tags"] = "T05"
        with pytest.raises(IllegalValueError, match="tags must be a JSON array"):
            JsonAdaptedPerson.from_dict(data)

    def test_invalid_tag(self, alice):
        data = JsonAdaptedPerson.from_model(alice).to_dict()
        data["tags"].append({"tagName": "#friend", "tagStatus": "PRESENT", "tagType": "ATTENDANCE"})
        with pytest.raises(IllegalValueError):
            JsonAdaptedPerson.from_dict(data).to_model()


class TestJsonSerializableAddressBook:
    """Tests for JsonSerializableAddressBook."""

    def test_round_trip_through_json(self, address_book):
        text = JsonSerializableAddressBook.from_model(address_book).to_json()
        restored = JsonSerializableAddressBook.from_json(text).to_model()

        assert restored == address_book
        assert [t.name for t in restored.tutorial_tags] == ["T05", "T12"]

    def test_json_keys(self, address_book):
        data = json.loads(JsonSerializableAddressBook.from_model(address_book).to_json())
        assert set(data) == {"persons", "tutorialTags"}

    def test_duplicate_persons(self, alice):
        adapted = JsonAdaptedPerson.from_model(alice)
        book = JsonSerializableAddressBook(persons=[adapted, adapted])
        with pytest.raises(IllegalValueError, match=re.escape(MESSAGE_DUPLICATE_PERSON)):
            book.to_model()

    def test_duplicate_tutorial_tags(self):
        adapted = JsonAdaptedTag.from_model(create_tag("T05", TagStatus.AVAILABLE))
        book = JsonSerializableAddressBook(tutorial_tags=[adapted, adapted])
        with pytest.raises(IllegalValueError, match=re.escape(MESSAGE_DUPLICATE_TUTORIAL_TAG)):
            book.to_model()

    def test_non_tutorial_registry_entry(self):
        adapted = JsonAdaptedTag.from_model(create_tag("hw1", TagStatus.COMPLETE_GOOD))
        book = JsonSerializableAddressBook(tutorial_tags=[adapted])
        with pytest.raises(IllegalValueError, match=re.escape(MESSAGE_NOT_TUTORIAL_TAG)):
            book.to_model()

    @pytest.mark.parametrize("text", ["not json", "[]", '"persons"'])
    def test_bad_json(self, text):
        with pytest.raises(IllegalValueError):
            JsonSerializableAddressBook.from_json(text)

    def test_empty_object(self):
        assert JsonSerializableAddressBook.from_json("{}").to_model() == AddressBook()

    @pytest.mark.parametrize(
        "text",
        ['{"persons": [1]}', '{"tutorialTags": ["T05"]}', '{"persons": [{"tags": [null]}]}'],
    )
    def test_non_object_entries(self, text):
        """Entries of the wrong JSON type surface as IllegalValueError."""
        with pytest.raises(IllegalValueError, match="must be a JSON object"):
            JsonSerializableAddressBook.from_json(text)

    @pytest.mark.parametrize("text", ['{"persons": 5}', '{"tutorialTags": {"T05": 1}}'])
    def test_non_array_collections(self, text):
        with pytest.raises(IllegalValueError, match="must be a JSON array"):
            JsonSerializableAddressBook.from_json(text)
