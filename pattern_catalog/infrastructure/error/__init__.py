"""Error handling infrastructure package."""

from pattern_catalog.infrastructure.error.context import ExceptionContext
from pattern_catalog.infrastructure.error.exception_handler import (
    ErrorCategory,
    ErrorCode,
    ErrorResponse,
    ExceptionHandler,
    get_exception_handler,
)

__all__: list[str] = [
    "ExceptionContext",
    "ExceptionHandler",
    "ErrorResponse",
    "ErrorCategory",
    "ErrorCode",
    "get_exception_handler",
]
