# pattern_catalog/domain/base/exceptions.py
from typing import Any, List, Optional


class CatalogError(Exception):
    """Base exception for all pattern catalog errors."""
    pass


class DuplicateNameError(CatalogError):
    """Raised when a pattern example name is registered twice."""
    def __init__(self, name: str):
        super().__init__(f"Pattern example '{name}' is already registered")
        self.name = name


class NotFoundError(CatalogError):
    """Raised when a requested pattern example cannot be found."""
    def __init__(self, name: str):
        super().__init__(f"Pattern example '{name}' not found")
        self.name = name


class InvalidArgumentError(CatalogError):
    """Raised when a collaborator of the wrong kind is passed to a constructor."""
    def __init__(self, argument: str, expected: str, received: Any = None):
        super().__init__(
            f"Invalid argument '{argument}': expected {expected}, "
            f"got {type(received).__name__}"
        )
        self.argument = argument
        self.expected = expected
        self.received = received


class ConfigurationError(CatalogError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
