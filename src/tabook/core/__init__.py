"""Core configuration, logging and exceptions for tabook."""

from .config import Config
from .exceptions import (
    ConfigError,
    DuplicatePersonError,
    DuplicateTagError,
    IllegalValueError,
    PersonError,
    PersonNotFoundError,
    RegistryNotBoundError,
    TabookError,
    TagError,
    TagNotFoundError,
)
from .logging import configure_logging

__all__ = [
    "Config",
    "configure_logging",
    "TabookError",
    "ConfigError",
    "IllegalValueError",
    "RegistryNotBoundError",
    "PersonError",
    "DuplicatePersonError",
    "PersonNotFoundError",
    "TagError",
    "DuplicateTagError",
    "TagNotFoundError",
]
