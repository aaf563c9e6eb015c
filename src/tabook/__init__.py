"""tabook - contact and tutorial-group tag management for teaching assistants."""

from tabook.core import Config, IllegalValueError, RegistryNotBoundError, TabookError
from tabook.matching import TagMatcher, TutorialRegistryAccessor
from tabook.model import (
    AddressBook,
    ModelManager,
    Person,
    Tag,
    TagStatus,
    TagType,
    create_tag,
    create_tutorial_tag,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Config",
    "TabookError",
    "IllegalValueError",
    "RegistryNotBoundError",
    "TagMatcher",
    "TutorialRegistryAccessor",
    "AddressBook",
    "ModelManager",
    "Person",
    "Tag",
    "TagStatus",
    "TagType",
    "create_tag",
    "create_tutorial_tag",
]
