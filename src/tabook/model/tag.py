"""Tag value objects.

A tag is a named label with a status. The status alone decides which of the
three tag variants (assignment, attendance, tutorial) the tag belongs to:

    tag = create_tag("T05", TagStatus.AVAILABLE)
    tag.tag_type        # TagType.TUTORIAL
    tag.is_tutorial()   # True

Tags are identified by their exact name. Two tags with the same name compare
equal even when their statuses differ.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from loguru import logger

from ..utils.checks import check_argument, require_non_null


class TagType(Enum):
    """Tag variant."""

    ASSIGNMENT = "assignment"
    ATTENDANCE = "attendance"
    TUTORIAL = "tutorial"


class TagStatus(Enum):
    """Tag status. Each status belongs to exactly one TagType."""

    DEFAULT_STATUS = "default"
    COMPLETE_GOOD = "complete_good"
    COMPLETE_BAD = "complete_bad"
    INCOMPLETE_GOOD = "incomplete_good"
    INCOMPLETE_BAD = "incomplete_bad"
    PRESENT = "present"
    ABSENT = "absent"
    ASSIGNED = "assigned"
    AVAILABLE = "available"


_STATUS_VARIANTS: dict[TagStatus, TagType] = {
    TagStatus.DEFAULT_STATUS: TagType.ASSIGNMENT,
    TagStatus.COMPLETE_GOOD: TagType.ASSIGNMENT,
    TagStatus.COMPLETE_BAD: TagType.ASSIGNMENT,
    TagStatus.INCOMPLETE_GOOD: TagType.ASSIGNMENT,
    TagStatus.INCOMPLETE_BAD: TagType.ASSIGNMENT,
    TagStatus.PRESENT: TagType.ATTENDANCE,
    TagStatus.ABSENT: TagType.ATTENDANCE,
    TagStatus.ASSIGNED: TagType.TUTORIAL,
    TagStatus.AVAILABLE: TagType.TUTORIAL,
}

if set(_STATUS_VARIANTS) != set(TagStatus):
    raise RuntimeError("every TagStatus needs a TagType")


def variant_for_status(status: TagStatus) -> TagType:
    """Return the tag variant a status belongs to."""
    require_non_null(status, "status")
    return _STATUS_VARIANTS[status]


# =============================================================================
# Name validation
# =============================================================================

NameValidator = Callable[[str], bool]


def _default_name_validator(name: str) -> bool:
    return bool(name) and name.isascii() and name.isalnum()


_name_validator: NameValidator = _default_name_validator


def set_tag_name_validator(validator: NameValidator | None) -> None:
    """Replace the tag name rule. Pass None to restore the default."""
    global _name_validator
    _name_validator = validator or _default_name_validator
    logger.debug(f"Tag name validator set: {getattr(_name_validator, '__name__', _name_validator)!r}")


def is_valid_tag_name(name: str) -> bool:
    """Check a tag name against the current rule.

    Raises:
        TypeError: If name is None.
    """
    require_non_null(name, "name")
    return _name_validator(name)


# =============================================================================
# Tag
# =============================================================================


class Tag:
    """Immutable tag. Equality and hashing use the exact name only."""

    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"

    __slots__ = ("_name", "_status", "_tag_type")

    def __init__(self, name: str, status: TagStatus):
        require_non_null(name, "name")
        require_non_null(status, "status")
        check_argument(bool(name.strip()), "Tag name cannot be empty")

        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_status", status)
        object.__setattr__(self, "_tag_type", variant_for_status(status))

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def status(self) -> TagStatus:
        return self._status

    @property
    def tag_type(self) -> TagType:
        return self._tag_type

    def is_assignment(self) -> bool:
        return self._tag_type is TagType.ASSIGNMENT

    def is_attendance(self) -> bool:
        return self._tag_type is TagType.ATTENDANCE

    def is_tutorial(self) -> bool:
        return self._tag_type is TagType.TUTORIAL

    def with_status(self, status: TagStatus) -> "Tag":
        """Return a copy of this tag carrying a different status."""
        return Tag(self._name, status)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Tag):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return f"Tag(name={self._name!r}, status={self._status.name}, type={self._tag_type.name})"


def create_tag(name: str, status: TagStatus) -> Tag:
    """Create a tag whose variant is derived from ``status``.

    Args:
        name: Tag name. Must not be None or blank.
        status: Tag status. Must not be None.

    Returns:
        New Tag instance.

    Raises:
        TypeError: If name or status is None.
        ValueError: If name is blank.
    """
    return Tag(name, status)


def create_tutorial_tag(name: str) -> Tag:
    """Create an unassigned tutorial-group tag."""
    return Tag(name, TagStatus.AVAILABLE)
