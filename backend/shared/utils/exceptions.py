"""
Centralized HTTP exceptions for consistent error handling.

Usage:
    from shared.utils.exceptions import NotFoundError, RequestValidationFailed

    raise NotFoundError("Dish", dish_id)
    raise DuplicateEntityError("Staff with this email already exists", email=masked)
    raise RequestValidationFailed({"price": ["Price must be greater than 0"]})
"""

from typing import Any

from fastapi import HTTPException, status

from shared.config.logging import get_logger

logger = get_logger(__name__)


class AppException(HTTPException):
    """
    Base exception with automatic logging.

    All custom exceptions inherit from this class so that every rejected
    request leaves one log line with its context.
    """

    def __init__(
        self,
        status_code: int,
        detail: Any,
        log_level: str = "warning",
        headers: dict[str, str] | None = None,
        log_message: str | None = None,
        **log_context: Any,
    ):
        log_fn = getattr(logger, log_level, logger.warning)
        log_fn(log_message or str(detail), status_code=status_code, **log_context)

        super().__init__(status_code=status_code, detail=detail, headers=headers)


# =============================================================================
# 404 Not Found Errors
# =============================================================================


class NotFoundError(AppException):
    """
    Entity not found error (404).

    Usage:
        raise NotFoundError("Receipt", 12)
    """

    def __init__(self, entity: str, entity_id: int | str | None = None, **log_context: Any):
        if entity_id is not None:
            detail = f"{entity} with ID {entity_id} not found"
        else:
            detail = f"{entity} not found"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            entity=entity,
            entity_id=entity_id,
            **log_context,
        )


# =============================================================================
# 400 Bad Request Errors
# =============================================================================


class ValidationError(AppException):
    """
    Input validation error with a plain message (400).

    Usage:
        raise ValidationError("Invalid payment status")
    """

    def __init__(self, detail: str, **log_context: Any):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            **log_context,
        )


class RequestValidationFailed(AppException):
    """
    Field-level rule violations (400).

    The response body carries every violated rule, grouped by field:
        {"detail": {"message": "Validation failed",
                    "errors": {"fullName": ["Full Name is required"]}}}
    """

    def __init__(self, errors: dict[str, list[str]], **log_context: Any):
        self.errors = errors
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Validation failed", "errors": errors},
            log_message="Validation failed",
            fields=sorted(errors),
            **log_context,
        )


class DuplicateEntityError(ValidationError):
    """
    Write rejected because another record already holds a unique value.

    Usage:
        raise DuplicateEntityError("Staff with this email already exists")
    """


class IdMismatchError(ValidationError):
    """Route id and body id of an update disagree."""

    def __init__(self, route_id: int | None, body_id: int | None, **log_context: Any):
        super().__init__(
            f"Route ID {route_id} does not match body ID {body_id}",
            route_id=route_id,
            body_id=body_id,
            **log_context,
        )


# =============================================================================
# 500 Internal Server Errors
# =============================================================================


class InternalError(AppException):
    """
    Internal server error (500).

    Usage:
        raise InternalError("Failed to build table summary", table_id=3)
    """

    def __init__(self, detail: str = "Internal server error", **log_context: Any):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            log_level="error",
            **log_context,
        )


class DatabaseError(InternalError):
    """Commit failed and was rolled back."""

    def __init__(self, operation: str, **log_context: Any):
        detail = f"Database error during {operation}. Please try again."
        super().__init__(detail, operation=operation, **log_context)
