"""Domain layer errors.

Every error carries a stable ``code`` so the interface layer can return it
to clients, plus any structured fields in ``details``.
"""

from typing import Any


class DomainError(Exception):
    """Base domain error."""

    code: str = "domain_error"

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(DomainError):
    """Domain validation error."""

    code = "validation_error"


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    code = "business_rule_violation"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when the actor is not a party to the entity, or may not act on it."""

    code = "not_authorized"

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class DuplicateSwipeError(DomainError):
    """Raised when the swiper already judged the swiped user."""

    code = "duplicate_swipe"

    def __init__(self, swiper_id: str, swiped_id: str):
        super().__init__(f"User {swiper_id} has already swiped on {swiped_id}")


class InvalidStateError(DomainError):
    """Raised when an operation is illegal from the entity's current status."""

    code = "invalid_state"

    def __init__(self, resource: str, resource_id: str, status: str, operation: str):
        super().__init__(
            f"Cannot {operation} {resource} {resource_id} in status '{status}'",
            status=status,
        )


class AlreadySettledError(DomainError):
    """Raised when a coffee date has already been paid."""

    code = "already_settled"

    def __init__(self, date_id: str):
        super().__init__(f"Coffee date {date_id} is already settled")


class InsufficientFundsError(DomainError):
    """Raised when the guest wallet cannot cover the host rate."""

    code = "insufficient_funds"

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient wallet balance: required {required}, available {available}",
            required=required,
            available=available,
        )


class DeprecatedOperationError(DomainError):
    """Raised by superseded operations kept only for old clients."""

    code = "deprecated"

    def __init__(self, operation: str, replacement: str):
        super().__init__(
            f"{operation} is deprecated; use {replacement} instead",
            replacement=replacement,
        )
