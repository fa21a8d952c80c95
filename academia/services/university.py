"""
University facade that reports failures as results instead of exceptions.

Each operation catches the domain and argument failures it can produce and
returns an ``OperationResult``, so the caller handles every outcome at the
call site.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..core.entities import Course, Department, Person
from ..core.enums import ErrorKind
from ..core.exceptions import EnrollmentError, InvalidArgumentError, UniversitySystemError
from .enrollment_manager import EnrollmentManager
from .gradebook import GradeBook
from .registry import UniversityRegistry


logger = logging.getLogger(__name__)


@dataclass
class OperationResult:
    """Result of a facade operation."""
    success: bool
    message: str
    error_kind: Optional[ErrorKind] = None
    value: Any = None
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, value: Any = None) -> 'OperationResult':
        return cls(success=True, message=message, value=value)

    @classmethod
    def from_error(cls, error: Exception) -> 'OperationResult':
        if isinstance(error, UniversitySystemError):
            return cls(success=False, message=error.message, error_kind=error.error_code, details=error.details)
        if isinstance(error, InvalidArgumentError):
            return cls(
                success=False, message=error.message, error_kind=error.error_code,
                details={'field': error.field, 'value': error.value}
            )
        raise TypeError(f"Unsupported error type: {type(error).__name__}")


class University:
    """Ties the registry, grade book and enrollment manager together."""

    def __init__(self, registry: Optional[UniversityRegistry] = None,
                 gradebook: Optional[GradeBook] = None,
                 enrollment_manager: Optional[EnrollmentManager] = None):
        self._registry = registry if registry is not None else UniversityRegistry()
        self._gradebook = gradebook if gradebook is not None else GradeBook()
        self._enrollment_manager = enrollment_manager if enrollment_manager is not None else EnrollmentManager()

    @property
    def registry(self) -> UniversityRegistry:
        return self._registry

    @property
    def gradebook(self) -> GradeBook:
        return self._gradebook

    @property
    def enrollment_manager(self) -> EnrollmentManager:
        return self._enrollment_manager

    def _run(self, operation, success_message: str) -> OperationResult:
        try:
            value = operation()
        except (UniversitySystemError, InvalidArgumentError) as e:
            logger.info("Operation failed: %s", e)
            return OperationResult.from_error(e)
        return OperationResult.ok(success_message, value)

    def register_person(self, person: Person) -> OperationResult:
        return self._run(lambda: self._registry.add_person(person), f"Registered {person.id}")

    def register_course(self, course: Course) -> OperationResult:
        return self._run(lambda: self._registry.add_course(course), f"Registered course {course.code}")

    def register_department(self, department: Department) -> OperationResult:
        return self._run(lambda: self._registry.add_department(department), f"Registered department {department.name}")

    def assign_professor(self, department_name: str, professor_id: str) -> OperationResult:
        return self._run(
            lambda: self._registry.assign_professor(department_name, professor_id),
            f"Assigned {professor_id} to {department_name}"
        )

    def enroll(self, course_code: str, student_id: str) -> OperationResult:
        """Enroll a registered student in a registered course."""
        def operation():
            if self._registry.find_course(course_code) is None:
                raise EnrollmentError(
                    f"Cannot enroll in unknown course '{course_code}'",
                    details={'course_code': course_code, 'student_id': student_id}
                )
            self._registry.get_student(student_id)
            self._enrollment_manager.enroll_student(course_code, student_id)
            return self._enrollment_manager.get_enrolled_students(course_code)

        return self._run(operation, f"Enrolled {student_id} in {course_code}")

    def drop(self, course_code: str, student_id: str) -> OperationResult:
        return self._run(
            lambda: self._enrollment_manager.drop_student(course_code, student_id),
            f"Dropped {student_id} from {course_code}"
        )

    def record_grade(self, student_id: str, grade: float) -> OperationResult:
        """Record a grade for a registered student."""
        def operation():
            self._registry.get_student(student_id)
            self._gradebook.add_grade(student_id, grade)
            return grade

        return self._run(operation, f"Recorded grade {grade} for {student_id}")

    def update_gpa(self, student_id: str, gpa: float) -> OperationResult:
        return self._run(
            lambda: self._registry.get_student(student_id).set_gpa(gpa),
            f"Updated GPA for {student_id}"
        )

    def average_grade(self) -> float:
        return self._gradebook.calculate_average_grade()

    def get_statistics(self) -> Dict[str, Any]:
        return {
            'registry': self._registry.get_statistics(),
            'grades': self._gradebook.get_statistics(),
            'enrollments': self._enrollment_manager.get_statistics(),
        }
