"""Argument contract checks for tabook."""

from typing import TypeVar

T = TypeVar("T")


def require_non_null(value: T | None, name: str = "value") -> T:
    """Return ``value`` unchanged, or raise if it is ``None``.

    Args:
        value: Value that must be present.
        name: Parameter name used in the error message.

    Returns:
        The same value.

    Raises:
        TypeError: If value is None.
    """
    if value is None:
        raise TypeError(f"{name} must not be None")
    return value


def check_argument(condition: bool, message: str = "Invalid argument") -> None:
    """Raise ValueError with ``message`` unless ``condition`` holds."""
    if not condition:
        raise ValueError(message)
