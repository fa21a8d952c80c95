"""
Enumerations for the Academia model.
"""

from enum import Enum


class PersonType(Enum):
    """Kinds of persons in the system."""
    PERSON = "person"
    STUDENT = "student"
    PROFESSOR = "professor"


class ErrorKind(Enum):
    """Categories of failure, used to tell causes apart without reading messages."""
    INVALID_ARGUMENT = "invalid_argument"
    UNIVERSITY = "university"
    ENROLLMENT = "enrollment"
    GRADE = "grade"
    PAYMENT = "payment"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
