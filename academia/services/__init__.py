"""
Services layer: grade book, enrollment, registry and the result-returning facade.
"""

from .gradebook import GradeBook
from .enrollment_manager import EnrollmentManager
from .registry import UniversityRegistry
from .university import University, OperationResult

__all__ = [
    "GradeBook",
    "EnrollmentManager",
    "UniversityRegistry",
    "University",
    "OperationResult",
]
