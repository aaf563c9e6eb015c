"""Person value object and field validation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..utils.checks import check_argument, require_non_null
from .tag import Tag

NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, and it should not be blank"
)
PHONE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain, where the domain is made up of "
    "labels separated by periods"
)

_NAME_RE = re.compile(r"[A-Za-z0-9]+( [A-Za-z0-9]+)*")
_PHONE_RE = re.compile(r"[0-9]{3,}")
_EMAIL_RE = re.compile(
    r"[A-Za-z0-9]+([+_.-][A-Za-z0-9]+)*"
    r"@"
    r"[A-Za-z0-9]+(-[A-Za-z0-9]+)*(\.[A-Za-z0-9]+(-[A-Za-z0-9]+)*)*"
    r"\.[A-Za-z0-9]{2,}"
)


def is_valid_name(name: str) -> bool:
    return bool(_NAME_RE.fullmatch(require_non_null(name, "name")))


def is_valid_phone(phone: str) -> bool:
    return bool(_PHONE_RE.fullmatch(require_non_null(phone, "phone")))


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.fullmatch(require_non_null(email, "email")))


@dataclass(frozen=True)
class Person:
    """A contact in the address book.

    Attributes:
        name: Display name; also the identity used for duplicate checks.
        phone: Phone number (digits only).
        email: Email address.
        tags: Assignment, attendance and tutorial tags attached to the person.
    """

    name: str
    phone: str
    email: str
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        require_non_null(self.name, "name")
        require_non_null(self.phone, "phone")
        require_non_null(self.email, "email")
        check_argument(is_valid_name(self.name), NAME_CONSTRAINTS)
        check_argument(is_valid_phone(self.phone), PHONE_CONSTRAINTS)
        check_argument(is_valid_email(self.email), EMAIL_CONSTRAINTS)
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_person(self, other: "Person | None") -> bool:
        """Identity check used by the address book (case-insensitive name)."""
        if other is self:
            return True
        return other is not None and other.name.lower() == self.name.lower()

    def tutorial_tags(self) -> list[Tag]:
        """Tutorial tags attached to this person, sorted by name."""
        return sorted((t for t in self.tags if t.is_tutorial()), key=lambda t: t.name)

    def with_tags(self, tags) -> "Person":
        """Return a copy of this person carrying ``tags``."""
        return Person(self.name, self.phone, self.email, frozenset(tags))
