"""
Application layer exceptions.

Each exception carries the HTTP status it is rendered with by the API
error handlers.
"""

from typing import Any, Dict, List, Optional


class ApplicationException(Exception):
    """Base application exception."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationException(ApplicationException):
    """Exception raised when request input fails schema validation."""

    status_code = 400

    def __init__(self, errors: List[str], details: Optional[Dict[str, Any]] = None):
        super().__init__("Request validation failed", details)
        self.errors = list(errors)


class NotFoundException(ApplicationException):
    """Exception raised when a resource is not found."""

    status_code = 404

    def __init__(self, resource_type: str, identifier: Any, details: Optional[Dict[str, Any]] = None):
        message = f"No {resource_type.lower()}: {identifier}"
        super().__init__(message, details)
        self.resource_type = resource_type
        self.identifier = identifier


class UnauthorizedException(ApplicationException):
    """Exception raised when the caller is not authenticated."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ForbiddenException(ApplicationException):
    """Exception raised when the caller lacks the required privilege."""

    status_code = 403

    def __init__(self, message: str = "Forbidden", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class StoreException(ApplicationException):
    """Exception raised when the data store rejects an operation."""

    status_code = 400


class ConflictException(StoreException):
    """Exception raised when there's a conflict (e.g., duplicate resource)."""

    status_code = 409

    def __init__(self, resource_type: str, message: str = "Resource already exists",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.resource_type = resource_type


class ConstraintViolationException(StoreException):
    """Exception raised when a write violates a store constraint."""

    status_code = 400
