"""Domain exceptions for the application.

These exceptions represent business-logic errors and are automatically
converted to RFC 7807 Problem Details responses by the exception handlers.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details, merged into the response body
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    Example:
        raise NotFoundError("Business record not found", resource="business_record")
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ConflictError(AppException):
    """Raised when a request conflicts with the current state of a resource.

    Example:
        raise ConflictError("Lead already converted", error_code="already_converted")
    """

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 409


class ValidationError(AppException):
    """Raised when request data fails validation.

    Example:
        raise ValidationError(
            "Invalid input data",
            errors=[{"field": "status", "message": "Unknown status"}]
        )
    """

    message = "Validation error"
    error_code = "validation_error"
    status_code = 422

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        super().__init__(message=message, details=details, **kwargs)


class UnauthorizedError(AppException):
    """Raised when authentication is required but not provided or invalid."""

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class ForbiddenError(AppException):
    """Raised when the caller may not access a resource."""

    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403


class BadRequestError(AppException):
    """Raised for general client errors."""

    message = "Bad request"
    error_code = "bad_request"
    status_code = 400


class TenantNotFoundError(NotFoundError):
    """Raised when a tenant slug does not match an active tenant.

    The response body carries ``error`` and ``message`` keys so clients
    can show the organization name they tried to reach.
    """

    message = "Tenant not found"
    error_code = "tenant_not_found"

    def __init__(self, slug: str, **kwargs: Any) -> None:
        message = f'The organization "{slug}" was not found or is inactive.'
        super().__init__(
            message=message,
            details={"error": "Tenant not found", "message": message, "slug": slug},
            **kwargs,
        )


class TenantRequiredError(BadRequestError):
    """Raised when a tenant-scoped route is reached without a tenant."""

    message = (
        "This endpoint requires a valid tenant context. "
        "Please access via subdomain or tenant path."
    )
    error_code = "TENANT_REQUIRED"

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        message = message or self.message
        super().__init__(
            message=message,
            details={"code": self.error_code, "message": message},
            **kwargs,
        )
