"""Error handling module with RFC 7807 Problem Details."""

from dealerdesk.core.errors.exceptions import (
    AppException,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    TenantNotFoundError,
    TenantRequiredError,
    UnauthorizedError,
    ValidationError,
)
from dealerdesk.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    problem_response,
    register_exception_handlers,
)


__all__ = [
    "AppException",
    "BadRequestError",
    "ConflictError",
    "FieldError",
    "ForbiddenError",
    "NotFoundError",
    "ProblemDetail",
    "TenantNotFoundError",
    "TenantRequiredError",
    "UnauthorizedError",
    "ValidationError",
    "problem_response",
    "register_exception_handlers",
]
