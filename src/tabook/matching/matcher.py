"""Tag matching against the tutorial group registry.

Whether a search word is matched against tags as a subword or as a whole word
depends on the registry: a word that is part of some registered tutorial
group name ("t0" for "T05") only matches tutorial tags, so searching for a
tutorial group never pulls in unrelated assignment or attendance tags that
happen to share characters.
"""

from __future__ import annotations

from loguru import logger

from ..model.tag import Tag, TagStatus
from ..utils.checks import check_argument, require_non_null
from .registry import TutorialRegistryAccessor


class TagMatcher:
    """Registry-aware tag matching.

    Example:
        accessor = TutorialRegistryAccessor(StaticTutorialTags([create_tutorial_tag("T05")]))
        matcher = TagMatcher(accessor)

        matcher.tag_contains_word(create_tag("T05", TagStatus.ASSIGNED), "t0")   # True
        matcher.tag_contains_word(create_tag("T05", TagStatus.PRESENT), "t0")    # False
        matcher.tag_contains_word(create_tag("HW1", TagStatus.PRESENT), "hw1")   # True
    """

    def __init__(self, registry: TutorialRegistryAccessor):
        """Initialize with a registry accessor.

        Args:
            registry: Accessor for the current tutorial tags. It may be bound
                after the matcher is created, but must be bound before use.
        """
        self._registry = require_non_null(registry, "registry")

    def tag_contains_word(self, tag: Tag, word: str) -> bool:
        """Check whether ``tag`` matches a search word, ignoring case.

        The first registered tutorial group whose name contains the word
        decides the outcome: the tag matches only if it is a tutorial tag
        whose name contains the word. If no tutorial group contains the word,
        the tag name must equal the word.

        Args:
            tag: Tag to test. Must not be None.
            word: Search word. Must not be None or blank.

        Raises:
            TypeError: If tag or word is None.
            ValueError: If word is blank.
            RegistryNotBoundError: If the registry is not bound.
        """
        require_non_null(tag, "tag")
        require_non_null(word, "word")

        tag_name = tag.name.lower()
        prepped_word = word.strip().lower()
        check_argument(bool(prepped_word), "Word parameter cannot be empty")

        for tutorial in self._registry.current_tutorial_tags():
            if prepped_word in tutorial.name.lower():
                matched = prepped_word in tag_name and tag.is_tutorial()
                logger.debug(
                    f"Tag match via tutorial {tutorial.name!r}: "
                    f"tag={tag.name!r}, word={prepped_word!r}, matched={matched}"
                )
                return matched
        return tag_name == prepped_word

    def contains_tutorial_group(self, tag: Tag, tutorial_group: str) -> bool:
        """Check whether ``tag`` is the open slot of a registered tutorial group.

        True only when the group is registered (case-insensitive), the tag
        name equals the group (case-insensitive) and the tag is still
        AVAILABLE.

        Raises:
            TypeError: If tag or tutorial_group is None.
            ValueError: If tutorial_group is empty or contains a space.
            RegistryNotBoundError: If the registry is not bound.
        """
        require_non_null(tag, "tag")
        require_non_null(tutorial_group, "tutorial_group")
        check_argument(bool(tutorial_group), "Tutorial group parameter cannot be empty")
        check_argument(
            not any(c.isspace() for c in tutorial_group),
            "Only use one word for tutorial group parameter",
        )

        group = tutorial_group.lower()
        for tutorial in self._registry.current_tutorial_tags():
            if tutorial.name.lower() == group:
                return tag.name.lower() == group and tag.status is TagStatus.AVAILABLE
        return False
