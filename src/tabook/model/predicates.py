"""Person filter predicates used by find and filter operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ..utils.checks import require_non_null
from ..utils.strings import contains_subword
from .person import Person

if TYPE_CHECKING:
    from ..matching.matcher import TagMatcher


class NameContainsKeywordsPredicate:
    """Matches persons whose name contains any keyword as a subword."""

    def __init__(self, keywords: Sequence[str]):
        self.keywords = tuple(require_non_null(keywords, "keywords"))

    def __call__(self, person: Person) -> bool:
        return any(contains_subword(person.name, keyword) for keyword in self.keywords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NameContainsKeywordsPredicate):
            return NotImplemented
        return self.keywords == other.keywords

    def __repr__(self) -> str:
        return f"NameContainsKeywordsPredicate(keywords={list(self.keywords)!r})"


class TagContainsKeywordsPredicate:
    """Matches persons having a tag that matches any keyword.

    Matching goes through TagMatcher.tag_contains_word, so a keyword that is
    part of a tutorial group name only matches tutorial tags.

    Two predicates are equal when they share keywords and the same matcher.
    """

    def __init__(self, keywords: Sequence[str], matcher: "TagMatcher"):
        self.keywords = tuple(require_non_null(keywords, "keywords"))
        self._matcher = require_non_null(matcher, "matcher")

    def __call__(self, person: Person) -> bool:
        return any(
            self._matcher.tag_contains_word(tag, keyword)
            for keyword in self.keywords
            for tag in person.tags
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagContainsKeywordsPredicate):
            return NotImplemented
        return self.keywords == other.keywords and self._matcher is other._matcher

    def __repr__(self) -> str:
        return f"TagContainsKeywordsPredicate(keywords={list(self.keywords)!r})"


class TutorialGroupPredicate:
    """Matches persons holding the open slot of a registered tutorial group.

    Two predicates are equal when they share the group and the same matcher.
    """

    def __init__(self, tutorial_group: str, matcher: "TagMatcher"):
        self.tutorial_group = require_non_null(tutorial_group, "tutorial_group")
        self._matcher = require_non_null(matcher, "matcher")

    def __call__(self, person: Person) -> bool:
        return any(
            self._matcher.contains_tutorial_group(tag, self.tutorial_group)
            for tag in person.tags
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TutorialGroupPredicate):
            return NotImplemented
        return self.tutorial_group == other.tutorial_group and self._matcher is other._matcher

    def __repr__(self) -> str:
        return f"TutorialGroupPredicate(tutorial_group={self.tutorial_group!r})"
