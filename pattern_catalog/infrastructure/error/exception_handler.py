"""Classification of exceptions into structured error responses."""
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, Field

from pattern_catalog.domain.base.exceptions import (
    ConfigurationError,
    DuplicateNameError,
    InvalidArgumentError,
    NotFoundError,
)
from pattern_catalog.infrastructure.error.context import ExceptionContext
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.patterns.singleton_access import get_singleton


class ErrorCategory(str, Enum):
    """Broad classification of an error."""

    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class ErrorCode(str, Enum):
    """Stable error codes reported to callers."""

    DUPLICATE_NAME = "DUPLICATE_NAME"
    NOT_FOUND = "NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse(BaseModel):
    """Structured description of a handled error."""

    error_code: ErrorCode
    category: ErrorCategory
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return self.model_dump(mode="json")


ErrorMapper = Callable[[Exception], ErrorResponse]


def _duplicate_name(e: Exception) -> ErrorResponse:
    return ErrorResponse(
        error_code=ErrorCode.DUPLICATE_NAME,
        category=ErrorCategory.CONFLICT,
        message=str(e),
        details={"name": getattr(e, "name", None)},
    )


def _not_found(e: Exception) -> ErrorResponse:
    return ErrorResponse(
        error_code=ErrorCode.NOT_FOUND,
        category=ErrorCategory.NOT_FOUND,
        message=str(e),
        details={"name": getattr(e, "name", None)},
    )


def _invalid_argument(e: Exception) -> ErrorResponse:
    return ErrorResponse(
        error_code=ErrorCode.INVALID_ARGUMENT,
        category=ErrorCategory.VALIDATION,
        message=str(e),
        details={
            "argument": getattr(e, "argument", None),
            "expected": getattr(e, "expected", None),
        },
    )


def _configuration(e: Exception) -> ErrorResponse:
    return ErrorResponse(
        error_code=ErrorCode.CONFIGURATION_ERROR,
        category=ErrorCategory.CONFIGURATION,
        message=str(e),
        details={"fields": list(getattr(e, "missing_fields", []))},
    )


class ExceptionHandler:
    """
    Turns exceptions into ErrorResponse objects and logs them.

    Mappers are checked in registration order; the first one whose
    exception type matches wins. Unmatched exceptions become INTERNAL_ERROR.
    """

    def __init__(self):
        self._logger = get_logger(__name__)
        self._mappers: List[Tuple[Type[Exception], ErrorMapper]] = [
            (DuplicateNameError, _duplicate_name),
            (NotFoundError, _not_found),
            (InvalidArgumentError, _invalid_argument),
            (ConfigurationError, _configuration),
        ]

    def register_mapper(self, exception_type: Type[Exception], mapper: ErrorMapper) -> None:
        """Register a mapper, taking precedence over existing ones."""
        self._mappers.insert(0, (exception_type, mapper))

    def classify(self, error: Exception) -> ErrorResponse:
        """Build the ErrorResponse for an exception without logging it."""
        for exception_type, mapper in self._mappers:
            if isinstance(error, exception_type):
                return mapper(error)
        return ErrorResponse(
            error_code=ErrorCode.INTERNAL_ERROR,
            category=ErrorCategory.INTERNAL,
            message=f"{type(error).__name__}: {error}",
            details={"exception_type": type(error).__name__},
        )

    def handle_error(self, error: Exception, context: Optional[ExceptionContext] = None) -> ErrorResponse:
        """
        Classify and log an exception.

        Args:
            error: The exception to handle
            context: Optional context describing where it happened

        Returns:
            ErrorResponse describing the error
        """
        response = self.classify(error)
        log_context = context.to_dict() if context else {}
        if response.error_code == ErrorCode.INTERNAL_ERROR:
            self._logger.error(
                "Unexpected error",
                error_code=response.error_code.value,
                error=response.message,
                exc_info=error,
                **log_context,
            )
        else:
            self._logger.error(
                "Handled error",
                error_code=response.error_code.value,
                error=response.message,
                **log_context,
            )
        return response


def get_exception_handler() -> ExceptionHandler:
    """Get the process-wide exception handler."""
    return get_singleton(ExceptionHandler)
