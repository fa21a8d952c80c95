"""
Enrollment manager keyed by course code.
"""

import logging
import threading
from typing import Any, Dict, List


logger = logging.getLogger(__name__)


class EnrollmentManager:
    """Maps each course code to the student identifiers enrolled in it, in enrollment order.

    Course codes are plain strings, so the manager does not need the Course
    records themselves. Enrolling the same student twice records two entries.
    """

    def __init__(self):
        self._enrollments: Dict[str, List[str]] = {}  # course_code -> [student_ids]
        self._lock = threading.RLock()

    def enroll_student(self, course_code: str, student_id: str) -> None:
        """Append a student to a course, creating the course entry if needed."""
        with self._lock:
            self._enrollments.setdefault(course_code, []).append(student_id)
        logger.debug("Enrolled student %s in %s", student_id, course_code)

    def drop_student(self, course_code: str, student_id: str) -> int:
        """Remove every occurrence of a student from a course.

        An unknown course gets an empty entry. Returns how many entries were
        removed.
        """
        with self._lock:
            students = self._enrollments.setdefault(course_code, [])
            remaining = [s for s in students if s != student_id]
            removed = len(students) - len(remaining)
            self._enrollments[course_code] = remaining

        if removed:
            logger.debug("Dropped student %s from %s (%d entries)", student_id, course_code, removed)
        return removed

    def get_enrolled_students(self, course_code: str) -> List[str]:
        """Get a snapshot of a course's enrollment; empty for unknown courses."""
        with self._lock:
            return list(self._enrollments.get(course_code, []))

    def get_courses(self) -> List[str]:
        with self._lock:
            return list(self._enrollments)

    def has_course(self, course_code: str) -> bool:
        with self._lock:
            return course_code in self._enrollments

    def is_enrolled(self, course_code: str, student_id: str) -> bool:
        with self._lock:
            return student_id in self._enrollments.get(course_code, [])

    def get_statistics(self) -> Dict[str, Any]:
        """Get enrollment statistics."""
        with self._lock:
            return {
                'courses': len(self._enrollments),
                'total_enrollments': sum(len(students) for students in self._enrollments.values()),
                'unique_students': len({s for students in self._enrollments.values() for s in students}),
            }
