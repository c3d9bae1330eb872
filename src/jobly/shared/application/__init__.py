"""Shared application layer components."""

from .exceptions import (
    ApplicationException,
    ValidationException,
    NotFoundException,
    UnauthorizedException,
    ForbiddenException,
    StoreException,
    ConflictException,
    ConstraintViolationException,
)

__all__ = [
    "ApplicationException",
    "ValidationException",
    "NotFoundException",
    "UnauthorizedException",
    "ForbiddenException",
    "StoreException",
    "ConflictException",
    "ConstraintViolationException",
]
