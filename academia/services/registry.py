"""
Central registry owning every record by identifier.
"""

import logging
import threading
from typing import Any, Dict, List, Optional, TypeVar

from ..core.entities import AbstractEntity, Course, Department, Person, Professor, Student
from ..core.exceptions import DuplicateRecordError, RecordNotFoundError


logger = logging.getLogger(__name__)

T = TypeVar('T', bound=AbstractEntity)


class UniversityRegistry:
    """Owns students, professors, courses and departments.

    Courses and departments refer to professors by identifier only. The
    registry refuses a course or department assignment that names an unknown
    professor, so every stored reference resolves.
    """

    def __init__(self):
        self._people: Dict[str, Person] = {}
        self._courses: Dict[str, Course] = {}
        self._departments: Dict[str, Department] = {}
        self._lock = threading.RLock()

    @staticmethod
    def _insert(store: Dict[str, T], entity: T, label: str) -> T:
        if entity.id in store:
            raise DuplicateRecordError(
                f"{label} '{entity.id}' is already registered",
                details={'id': entity.id}
            )
        store[entity.id] = entity
        logger.debug("Registered %s %s", label.lower(), entity.id)
        return entity

    @staticmethod
    def _lookup(store: Dict[str, Any], entity_id: str, label: str) -> Any:
        try:
            return store[entity_id]
        except KeyError:
            raise RecordNotFoundError(
                f"{label} '{entity_id}' not found",
                details={'id': entity_id}
            ) from None

    # People

    def add_person(self, person: Person) -> Person:
        with self._lock:
            return self._insert(self._people, person, person.person_type.value.capitalize())

    def add_student(self, student: Student) -> Student:
        return self.add_person(student)

    def add_professor(self, professor: Professor) -> Professor:
        return self.add_person(professor)

    def get_person(self, person_id: str) -> Person:
        with self._lock:
            return self._lookup(self._people, person_id, "Person")

    def get_student(self, student_id: str) -> Student:
        with self._lock:
            person = self._lookup(self._people, student_id, "Student")
        if not isinstance(person, Student):
            raise RecordNotFoundError(f"Student '{student_id}' not found", details={'id': student_id})
        return person

    def get_professor(self, professor_id: str) -> Professor:
        with self._lock:
            person = self._lookup(self._people, professor_id, "Professor")
        if not isinstance(person, Professor):
            raise RecordNotFoundError(f"Professor '{professor_id}' not found", details={'id': professor_id})
        return person

    def get_students(self) -> List[Student]:
        with self._lock:
            return [p for p in self._people.values() if isinstance(p, Student)]

    def get_professors(self) -> List[Professor]:
        with self._lock:
            return [p for p in self._people.values() if isinstance(p, Professor)]

    def get_people(self) -> List[Person]:
        with self._lock:
            return list(self._people.values())

    # Courses

    def add_course(self, course: Course) -> Course:
        """Register a course whose instructor is already registered."""
        with self._lock:
            self.get_professor(course.instructor_id)
            return self._insert(self._courses, course, "Course")

    def get_course(self, code: str) -> Course:
        with self._lock:
            return self._lookup(self._courses, code, "Course")

    def find_course(self, code: str) -> Optional[Course]:
        with self._lock:
            return self._courses.get(code)

    def get_courses(self) -> List[Course]:
        with self._lock:
            return list(self._courses.values())

    # Departments

    def add_department(self, department: Department) -> Department:
        with self._lock:
            for professor_id in department.get_professors():
                self.get_professor(professor_id)
            return self._insert(self._departments, department, "Department")

    def get_department(self, name: str) -> Department:
        with self._lock:
            return self._lookup(self._departments, name, "Department")

    def get_departments(self) -> List[Department]:
        with self._lock:
            return list(self._departments.values())

    def assign_professor(self, department_name: str, professor_id: str) -> None:
        """Add a registered professor to a registered department."""
        with self._lock:
            department = self.get_department(department_name)
            self.get_professor(professor_id)
            department.add_professor(professor_id)

    def get_statistics(self) -> Dict[str, Any]:
        with self._lock:
            return {
                'students': len(self.get_students()),
                'professors': len(self.get_professors()),
                'courses': len(self._courses),
                'departments': len(self._departments),
            }
