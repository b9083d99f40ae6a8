"""Argument checks shared by the pattern collaborators."""
from typing import Any, Type, TypeVar

from pattern_catalog.domain.base.exceptions import InvalidArgumentError

T = TypeVar("T")


def require_instance(value: Any, expected: Type[T], argument: str) -> T:
    """
    Ensure a collaborator implements the expected interface.

    Args:
        value: The object handed to a constructor or method
        expected: The interface (usually an ABC) it must implement
        argument: Parameter name, used in the error message

    Returns:
        The value unchanged

    Raises:
        InvalidArgumentError: If value is None or not an instance of expected
    """
    if value is None or not isinstance(value, expected):
        raise InvalidArgumentError(argument, expected.__name__, value)
    return value
