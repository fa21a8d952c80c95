"""
Custom exceptions for the Academia model.

Domain failures derive from ``UniversitySystemError``. Out-of-range arguments
(age, GPA, credits, budget) raise ``InvalidArgumentError``, which is a
``ValueError`` and sits outside the domain hierarchy, so a handler
for domain failures alone will not catch it.
"""

from typing import Optional, Any, Dict

from .enums import ErrorKind


class UniversitySystemError(Exception):
    """Base exception for all university domain errors."""

    kind = ErrorKind.UNIVERSITY

    def __init__(self, message: str, error_code: Optional[ErrorKind] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.kind
        self.details = details or {}


class EnrollmentError(UniversitySystemError):
    """Raised when enrollment operations fail."""
    kind = ErrorKind.ENROLLMENT


class GradeError(UniversitySystemError):
    """Raised when a grade is rejected."""
    kind = ErrorKind.GRADE


class PaymentError(UniversitySystemError):
    """Raised when payment calculation fails. Reserved; nothing raises it yet."""
    kind = ErrorKind.PAYMENT


class RecordNotFoundError(UniversitySystemError):
    """Raised when a requested record is not in the registry."""
    kind = ErrorKind.NOT_FOUND


class DuplicateRecordError(UniversitySystemError):
    """Raised when registering a record whose identifier is already taken."""
    kind = ErrorKind.DUPLICATE


class InvalidArgumentError(ValueError):
    """Raised when a numeric field is outside its permitted range."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.message = message
        self.error_code = self.kind
        self.field = field
        self.value = value

