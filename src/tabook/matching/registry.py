"""Read access to the registry of valid tutorial groups.

The accessor is bound once to whatever owns the tutorial tag list (normally
the ModelManager) and is then handed to matchers explicitly:

    accessor = TutorialRegistryAccessor()
    accessor.bind(model)
    matcher = TagMatcher(accessor)

Binding a second source is ignored: the first binding stays in effect for the
lifetime of the accessor.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from loguru import logger

from ..core.exceptions import RegistryNotBoundError
from ..model.tag import Tag
from ..utils.checks import require_non_null


@runtime_checkable
class TutorialTagSource(Protocol):
    """Anything that owns an ordered list of tutorial tags."""

    def tutorial_tag_list(self) -> Sequence[Tag]:
        """Return the current tutorial tags in registration order."""
        ...


class StaticTutorialTags:
    """Fixed tutorial tag list, mainly for tests and one-off matching."""

    def __init__(self, tags: Sequence[Tag] = ()) -> None:
        self._tags = tuple(tags)

    def tutorial_tag_list(self) -> Sequence[Tag]:
        return self._tags


class TutorialRegistryAccessor:
    """Bind-once view of the current tutorial tags."""

    def __init__(self, source: TutorialTagSource | None = None) -> None:
        self._source: TutorialTagSource | None = None
        if source is not None:
            self.bind(source)

    @property
    def is_bound(self) -> bool:
        return self._source is not None

    def bind(self, source: TutorialTagSource) -> None:
        """Bind the tag source. Later calls are no-ops."""
        require_non_null(source, "source")
        if self._source is not None:
            logger.warning("Tutorial registry already bound; ignoring rebind")
            return
        self._source = source
        logger.info(f"Tutorial registry bound to {type(source).__name__}")

    def current_tutorial_tags(self) -> tuple[Tag, ...]:
        """Return a snapshot of the registered tutorial tags.

        Raises:
            RegistryNotBoundError: If bind() has not been called.
        """
        if self._source is None:
            raise RegistryNotBoundError("Tutorial registry has not been initialized")
        return tuple(self._source.tutorial_tag_list())
