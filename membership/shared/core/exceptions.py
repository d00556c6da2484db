# 📄 File: membership/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Defines the special error types the membership service uses to say exactly what went wrong
# (bad input, missing member, duplicate email, wrong lifecycle step) instead of generic errors.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy with stable error codes, HTTP status codes and structured details,
# serializable for any transport adapter that needs to translate domain failures.
# 🔗 Dependencies:
# FastAPI HTTPException, fastapi.status constants, typing
# 🔄 Connected Modules / Calls From:
# Value objects, member aggregate, command/query handlers, repository implementations

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class MembershipException(Exception):
    """
    Base exception class for the membership service.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }

    def to_http_exception(self) -> HTTPException:
        """Convert to FastAPI HTTPException."""
        return HTTPException(
            status_code=self.status_code,
            detail=self.to_dict()["error"]
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(MembershipException):
    """
    Exception raised for data validation failures.
    Used when a value object or aggregate input doesn't meet its rules.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=422,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(MembershipException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = str(resource_id)

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class MemberNotFoundError(NotFoundError):
    """Member-specific not found error."""

    def __init__(
        self,
        lookup: str,
        key: Any,
        message: Optional[str] = None
    ):
        super().__init__(
            message=message or f"Member not found by {lookup}: {key}",
            resource_type="member",
            resource_id=key,
            details={"lookup": lookup}
        )


class DuplicateResourceError(MembershipException):
    """
    Exception raised when attempting to create duplicate resources.
    Used for unique constraint violations, duplicate entries, etc.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "DUPLICATE_RESOURCE"
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if field:
            details["field"] = field
        if value:
            details["value"] = value

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code=error_code
        )


class DuplicateEmailError(DuplicateResourceError):
    """
    Raised when an email address is already registered.

    Both the pre-check in the command handler and the storage unique
    constraint surface this same error.
    """

    def __init__(self, email: str, message: Optional[str] = None):
        super().__init__(
            message=message or f"Member with email {email} already exists",
            resource_type="member",
            field="email",
            value=email,
            error_code="DUPLICATE_EMAIL"
        )


# =============================================================================
# BUSINESS LOGIC EXCEPTIONS
# =============================================================================

class BusinessRuleViolationError(MembershipException):
    """
    Exception raised when business rules are violated.
    Used for domain-specific rule enforcement.
    """

    def __init__(
        self,
        message: str = "Business rule violation",
        rule: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 422,
        error_code: str = "BUSINESS_RULE_VIOLATION"
    ):
        if not details:
            details = {}

        if rule:
            details["rule"] = rule
        if context:
            details["context"] = context

        super().__init__(
            message=message,
            status_code=status_code,
            details=details,
            error_code=error_code
        )


class InvalidStateError(BusinessRuleViolationError):
    """
    Raised when a lifecycle operation is invoked from the wrong status.
    The aggregate is left untouched when this is raised.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        current_status: Optional[str] = None,
        required_status: Optional[str] = None
    ):
        details: Dict[str, Any] = {}
        if operation:
            details["operation"] = operation
        if current_status:
            details["current_status"] = current_status
        if required_status:
            details["required_status"] = required_status

        super().__init__(
            message=message,
            rule="member_status_transition",
            details=details,
            status_code=status.HTTP_409_CONFLICT,
            error_code="INVALID_STATE"
        )


# =============================================================================
# DATABASE & INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(MembershipException):
    """
    Exception raised for database operation failures.
    Used for connection issues, session setup failures, etc.
    """

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DATABASE_ERROR"
        )


class RepositoryError(MembershipException):
    """
    Exception raised when a repository operation fails for reasons
    other than a domain rule (e.g. a lost connection mid-write).
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        repository: Optional[str] = None,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if repository:
            details["repository"] = repository
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="REPOSITORY_ERROR"
        )


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """
    Convert any exception to dictionary format.

    Args:
        exception: Exception to convert

    Returns:
        Dictionary representation of the exception
    """
    if isinstance(exception, MembershipException):
        return exception.to_dict()

    return {
        "error": {
            "code": exception.__class__.__name__.upper(),
            "message": str(exception),
            "details": {},
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR
        }
    }


def is_client_error(exception: Exception) -> bool:
    """
    Check if exception represents a client error (4xx status code).

    Args:
        exception: Exception to check

    Returns:
        True if client error, False otherwise
    """
    if isinstance(exception, MembershipException):
        return 400 <= exception.status_code < 500

    if isinstance(exception, HTTPException):
        return 400 <= exception.status_code < 500

    return False


def is_server_error(exception: Exception) -> bool:
    """
    Check if exception represents a server error (5xx status code).

    Args:
        exception: Exception to check

    Returns:
        True if server error, False otherwise
    """
    if isinstance(exception, MembershipException):
        return 500 <= exception.status_code < 600

    if isinstance(exception, HTTPException):
        return 500 <= exception.status_code < 600

    return True  # Default to server error for unknown exceptions
