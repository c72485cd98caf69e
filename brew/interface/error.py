"""Interface layer errors.

Domain errors are translated to HTTP responses here, in one table, so that
every route reports the same status code for the same failure.
"""

from fastapi import HTTPException, status

from brew.domain.error import (
    AlreadySettledError,
    BusinessRuleViolationError,
    DeprecatedOperationError,
    DomainError,
    DuplicateSwipeError,
    InsufficientFundsError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    DuplicateSwipeError: status.HTTP_409_CONFLICT,
    InvalidStateError: status.HTTP_409_CONFLICT,
    AlreadySettledError: status.HTTP_409_CONFLICT,
    BusinessRuleViolationError: status.HTTP_409_CONFLICT,
    InsufficientFundsError: status.HTTP_402_PAYMENT_REQUIRED,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    DeprecatedOperationError: status.HTTP_410_GONE,
}


def to_http_exception(error: DomainError) -> HTTPException:
    """Build the HTTP error for a domain error.

    The detail body is ``{"error": code, "message": ..., **details}``.
    """
    status_code = next(
        (
            code
            for error_type, code in STATUS_BY_ERROR.items()
            if isinstance(error, error_type)
        ),
        status.HTTP_400_BAD_REQUEST,
    )
    return HTTPException(
        status_code=status_code,
        detail={"error": error.code, "message": error.message, **error.details},
    )

