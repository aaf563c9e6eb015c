"""Tutorial-aware tag matching.

Provides:
- TutorialRegistryAccessor: bind-once view of the registered tutorial groups
- TagMatcher: subword / whole-word tag matching driven by the registry
"""

from tabook.matching.matcher import TagMatcher
from tabook.matching.registry import (
    StaticTutorialTags,
    TutorialRegistryAccessor,
    TutorialTagSource,
)

__all__ = [
    "TagMatcher",
    "StaticTutorialTags",
    "TutorialRegistryAccessor",
    "TutorialTagSource",
]
