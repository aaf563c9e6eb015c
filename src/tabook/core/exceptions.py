"""Custom exceptions for tabook.

Argument contract violations use the builtin ``TypeError`` (a required value
was ``None``) and ``ValueError`` (a value has the wrong shape). Everything
below is raised for domain and state failures.
"""


class TabookError(Exception):
    """Base exception for all tabook errors."""

    pass


class IllegalValueError(TabookError):
    """Stored data violates a model constraint and cannot be loaded."""

    pass


class RegistryNotBoundError(TabookError, RuntimeError):
    """Tutorial registry was queried before a source was bound."""

    pass


class PersonError(TabookError):
    """Person list operation failed."""

    pass


class DuplicatePersonError(PersonError):
    """Person with the same identity already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Person already exists: {name}")


class PersonNotFoundError(PersonError):
    """Person does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Person not found: {name}")


class TagError(TabookError):
    """Tutorial tag list operation failed."""

    pass


class DuplicateTagError(TagError):
    """Tutorial tag already exists."""

    def __init__(self, tag_name: str):
        self.tag_name = tag_name
        super().__init__(f"Tutorial tag already exists: {tag_name}")


class TagNotFoundError(TagError):
    """Tutorial tag does not exist."""

    def __init__(self, tag_name: str):
        self.tag_name = tag_name
        super().__init__(f"Tutorial tag not found: {tag_name}")


class ConfigError(TabookError):
    """Configuration could not be loaded."""

    pass
