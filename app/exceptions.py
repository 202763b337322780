"""
Custom Exception Classes for the Hero Slider Admin

This module defines custom exceptions for better error handling and
consistent error responses across the service and the admin client.
"""

import enum
from typing import Any

from fastapi import status


class ErrorCode(str, enum.Enum):
    """Machine-readable error codes returned in every error body."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    AUTH_FAILED = "AUTH_FAILED"
    AUTH_TOKEN_EXPIRED = "AUTH_TOKEN_EXPIRED"
    AUTH_TOKEN_INVALID = "AUTH_TOKEN_INVALID"
    AUTH_PERMISSION_DENIED = "AUTH_PERMISSION_DENIED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RESOURCE_SLIDER_NOT_FOUND = "RESOURCE_SLIDER_NOT_FOUND"
    RESOURCE_LANGUAGE_NOT_FOUND = "RESOURCE_LANGUAGE_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    VALIDATION_MISSING_FIELDS = "VALIDATION_MISSING_FIELDS"
    VALIDATION_LANGUAGE_CONTENT = "VALIDATION_LANGUAGE_CONTENT"
    VALIDATION_DUPLICATE_RESOURCE = "VALIDATION_DUPLICATE_RESOURCE"
    VERSION_CONFLICT = "VERSION_CONFLICT"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"


class CMSException(Exception):
    """Base exception class for all application exceptions"""

    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
        error_code: ErrorCode | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        if error_code is not None:
            self.error_code = error_code
        super().__init__(self.message)


# ============================================================================
# Authentication Exceptions
# ============================================================================


class AuthenticationError(CMSException):
    """Raised when authentication fails"""

    error_code = ErrorCode.AUTH_FAILED

    def __init__(self, message: str = "Authentication failed", error_code: ErrorCode | None = None):
        super().__init__(message=message, status_code=status.HTTP_401_UNAUTHORIZED, error_code=error_code)


class TokenExpiredError(AuthenticationError):
    """Raised when JWT token has expired"""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message=message, error_code=ErrorCode.AUTH_TOKEN_EXPIRED)


class InvalidTokenError(AuthenticationError):
    """Raised when JWT token is invalid"""

    def __init__(self, message: str = "Invalid or malformed token"):
        super().__init__(message=message, error_code=ErrorCode.AUTH_TOKEN_INVALID)


# ============================================================================
# Resource Not Found Exceptions
# ============================================================================


class ResourceNotFoundError(CMSException):
    """Base class for resource not found errors"""

    error_code = ErrorCode.RESOURCE_NOT_FOUND

    def __init__(self, resource_type: str, resource_id: Any | None = None):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class SliderNotFoundError(ResourceNotFoundError):
    """Raised when a hero slider is not found"""

    error_code = ErrorCode.RESOURCE_SLIDER_NOT_FOUND

    def __init__(self, slider_id: Any | None = None):
        super().__init__(resource_type="Hero slider", resource_id=slider_id)


class LanguageNotFoundError(ResourceNotFoundError):
    """Raised when a language is not found"""

    error_code = ErrorCode.RESOURCE_LANGUAGE_NOT_FOUND

    def __init__(self, code: str | None = None):
        super().__init__(resource_type="Language", resource_id=code)


# ============================================================================
# Validation & Business Logic Exceptions
# ============================================================================


class ValidationError(CMSException):
    """Raised when input validation fails"""

    error_code = ErrorCode.VALIDATION_FAILED

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(message=message, status_code=status.HTTP_400_BAD_REQUEST, details=error_details)


class MissingFieldsError(ValidationError):
    """Raised when required slider fields are absent from a create request"""

    error_code = ErrorCode.VALIDATION_MISSING_FIELDS

    def __init__(self, fields: list[str]):
        super().__init__(message="Required fields are missing", details={"fields": fields})


class SliderValidationError(ValidationError):
    """Raised when a slider draft fails the per-language completeness check.

    ``errors`` maps a language code (or ``"general"``) to its messages.
    """

    error_code = ErrorCode.VALIDATION_LANGUAGE_CONTENT

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = {key: list(messages) for key, messages in errors.items() if messages}
        super().__init__(message="Slider content is incomplete", details={"errors": self.errors})


class DuplicateResourceError(CMSException):
    """Raised when attempting to create a duplicate resource"""

    error_code = ErrorCode.VALIDATION_DUPLICATE_RESOURCE

    def __init__(self, resource_type: str, field: str, value: Any):
        super().__init__(
            message=f"{resource_type} with {field} '{value}' already exists",
            status_code=status.HTTP_409_CONFLICT,
            details={"resource_type": resource_type, "field": field, "value": value},
        )


class VersionConflictError(CMSException):
    """Raised when an update carries a stale version number"""

    error_code = ErrorCode.VERSION_CONFLICT

    def __init__(self, slider_id: Any, expected_version: int, current_version: int):
        super().__init__(
            message=f"Hero slider '{slider_id}' was modified concurrently",
            status_code=status.HTTP_409_CONFLICT,
            details={
                "resource_id": slider_id,
                "expected_version": expected_version,
                "current_version": current_version,
            },
        )


# ============================================================================
# Client-side Exceptions
# ============================================================================


class PersistenceError(CMSException):
    """Raised by the admin client when a request to the store fails"""

    error_code = ErrorCode.PERSISTENCE_FAILED

    def __init__(
        self,
        message: str = "Request to the slider store failed",
        status_code: int = status.HTTP_502_BAD_GATEWAY,
        operation: str | None = None,
        remote_error_code: str | None = None,
    ):
        details: dict[str, Any] = {}
        if operation:
            details["operation"] = operation
        if remote_error_code:
            details["remote_error_code"] = remote_error_code
        super().__init__(message=message, status_code=status_code, details=details)
