"""
Core package for the membership service.
Provides the exception hierarchy shared by every layer.
"""

from .exceptions import (
    MembershipException,
    ValidationError,
    NotFoundError,
    MemberNotFoundError,
    DuplicateResourceError,
    DuplicateEmailError,
    BusinessRuleViolationError,
    InvalidStateError,
    DatabaseError,
    RepositoryError,
    exception_to_dict,
    is_client_error,
    is_server_error,
)

__all__ = [
    "MembershipException",
    "ValidationError",
    "NotFoundError",
    "MemberNotFoundError",
    "DuplicateResourceError",
    "DuplicateEmailError",
    "BusinessRuleViolationError",
    "InvalidStateError",
    "DatabaseError",
    "RepositoryError",
    "exception_to_dict",
    "is_client_error",
    "is_server_error",
]
