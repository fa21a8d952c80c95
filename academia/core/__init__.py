"""
Core module containing the object model, interfaces, and exceptions.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Person",
    "Student",
    "Professor",
    "Course",
    "Department",

    # Interfaces
    "UniversityMember",

    # Enums
    "PersonType",
    "ErrorKind",

    # Exceptions
    "UniversitySystemError",
    "EnrollmentError",
    "GradeError",
    "PaymentError",
    "RecordNotFoundError",
    "DuplicateRecordError",
    "InvalidArgumentError",
]
