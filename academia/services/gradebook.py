"""
Grade book mapping student identifiers to numeric grades.
"""

import logging
import threading
from typing import Any, Dict, Optional

from ..core.exceptions import GradeError


logger = logging.getLogger(__name__)

MIN_GRADE = 0.0
MAX_GRADE = 100.0


class GradeBook:
    """Stores one grade per student and computes aggregate statistics.

    Adding a grade for a student who already has one overwrites it. The
    average of an empty book is 0.0; use ``has_grades()`` or ``len()`` to
    tell an empty book apart from one whose grades average to zero.
    """

    def __init__(self):
        self._grades: Dict[str, float] = {}  # student_id -> grade
        self._lock = threading.RLock()

    def add_grade(self, student_id: str, grade: float) -> None:
        """Insert or overwrite the grade for a student."""
        if isinstance(grade, bool) or not isinstance(grade, (int, float)):
            raise GradeError(
                f"Grade must be a number, got {grade!r}",
                details={'student_id': student_id, 'grade': grade}
            )
        if not MIN_GRADE <= grade <= MAX_GRADE:
            logger.warning("Rejected grade %r for student %s", grade, student_id)
            raise GradeError(
                f"Grade must be between {MIN_GRADE:g} and {MAX_GRADE:g}, got {grade}",
                details={'student_id': student_id, 'grade': grade}
            )

        with self._lock:
            previous = self._grades.get(student_id)
            self._grades[student_id] = float(grade)

        if previous is not None:
            logger.debug("Overwrote grade %s -> %s for student %s", previous, grade, student_id)
        else:
            logger.debug("Recorded grade %s for student %s", grade, student_id)

    def get_grade(self, student_id: str) -> Optional[float]:
        with self._lock:
            return self._grades.get(student_id)

    def get_grades(self) -> Dict[str, float]:
        """Get a snapshot of all grades."""
        with self._lock:
            return self._grades.copy()

    def has_grades(self) -> bool:
        with self._lock:
            return bool(self._grades)

    def calculate_average_grade(self) -> float:
        """Arithmetic mean of all grades, or 0.0 when there are none."""
        with self._lock:
            if not self._grades:
                return 0.0
            return sum(self._grades.values()) / len(self._grades)

    def get_statistics(self) -> Dict[str, Any]:
        """Get grade statistics."""
        with self._lock:
            values = list(self._grades.values())
            return {
                'count': len(values),
                'average': self.calculate_average_grade(),
                'highest': max(values) if values else None,
                'lowest': min(values) if values else None,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._grades)

    def __contains__(self, student_id: object) -> bool:
        with self._lock:
            return student_id in self._grades
