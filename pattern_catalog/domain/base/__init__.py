"""Base domain layer - exceptions and argument validation."""

from .exceptions import (
    CatalogError,
    ConfigurationError,
    DuplicateNameError,
    InvalidArgumentError,
    NotFoundError,
)
from .validation import require_instance

__all__ = [
    "CatalogError",
    "ConfigurationError",
    "DuplicateNameError",
    "InvalidArgumentError",
    "NotFoundError",
    "require_instance",
]
