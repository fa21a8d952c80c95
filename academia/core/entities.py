"""
Core entities for the Academia model with a small inheritance hierarchy.

Every record is an ``AbstractEntity`` keyed by a caller-assigned identifier.
Relationships between records (course instructor, department staff) are held
as identifiers and resolved through ``UniversityRegistry``.
"""

import logging
from abc import ABC
from datetime import datetime, timezone
from typing import Any, Dict, List, Union, TYPE_CHECKING

from .enums import PersonType
from .exceptions import InvalidArgumentError
from .interfaces import UniversityMember

if TYPE_CHECKING:
    from ..services.registry import UniversityRegistry


logger = logging.getLogger(__name__)

MIN_AGE = 1
MAX_AGE = 100
MIN_GPA = 0.0
MAX_GPA = 4.0


def _validate_age(age: int) -> int:
    if isinstance(age, bool) or not isinstance(age, int):
        raise InvalidArgumentError(f"Age must be an integer, got {age!r}", field="age", value=age)
    if not MIN_AGE <= age <= MAX_AGE:
        raise InvalidArgumentError(
            f"Age must be between {MIN_AGE} and {MAX_AGE}, got {age}", field="age", value=age
        )
    return age


def _validate_gpa(gpa: float) -> float:
    if isinstance(gpa, bool) or not isinstance(gpa, (int, float)):
        raise InvalidArgumentError(f"GPA must be a number, got {gpa!r}", field="gpa", value=gpa)
    if not MIN_GPA <= gpa <= MAX_GPA:
        raise InvalidArgumentError(
            f"GPA must be between {MIN_GPA} and {MAX_GPA}, got {gpa}", field="gpa", value=gpa
        )
    return float(gpa)


class AbstractEntity(ABC):
    """Base abstract entity with a caller-assigned ID, timestamps, and versioning."""

    def __init__(self, entity_id: str):
        self._id = entity_id
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """Get last update timestamp."""
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    def update(self) -> None:
        """Record a mutation."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, version={self._version})"


class Person(AbstractEntity, UniversityMember):
    """Base class for all persons in the system."""

    person_type = PersonType.PERSON

    def __init__(self, name: str, age: int, person_id: str, contact_info: str):
        self._age = _validate_age(age)
        super().__init__(person_id)
        self._name = name
        self._contact_info = contact_info

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    @property
    def contact_info(self) -> str:
        return self._contact_info

    def set_age(self, age: int) -> None:
        """Set the age, re-validating the 1-100 range."""
        try:
            self._age = _validate_age(age)
        except InvalidArgumentError:
            logger.warning("Rejected age %r for %s", age, self._id)
            raise
        self.update()

    def set_contact_info(self, contact_info: str) -> None:
        self._contact_info = contact_info
        self.update()

    def display_details(self) -> str:
        """Return name, age, ID and contact, one per line."""
        return "\n".join([
            f"Name: {self._name}",
            f"Age: {self._age}",
            f"ID: {self._id}",
            f"Contact: {self._contact_info}",
        ])

    def calculate_payment(self) -> float:
        """No inherent payment; subclasses may override."""
        return 0.0

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'person_type': self.person_type.value,
            'name': self._name,
            'age': self._age,
            'contact_info': self._contact_info,
        })
        return base_dict


class Student(Person):
    """Student entity with academic-specific properties."""

    person_type = PersonType.STUDENT

    def __init__(self, name: str, age: int, person_id: str, contact_info: str,
                 enrollment_date: str, program: str, gpa: float):
        super().__init__(name, age, person_id, contact_info)
        self._gpa = _validate_gpa(gpa)
        self._enrollment_date = enrollment_date
        self._program = program

    @property
    def enrollment_date(self) -> str:
        return self._enrollment_date

    @property
    def program(self) -> str:
        return self._program

    @property
    def gpa(self) -> float:
        return self._gpa

    def set_gpa(self, gpa: float) -> None:
        """Update GPA."""
        try:
            self._gpa = _validate_gpa(gpa)
        except InvalidArgumentError:
            logger.warning("Rejected GPA %r for %s", gpa, self._id)
            raise
        self.update()

    def display_details(self) -> str:
        return "\n".join([
            super().display_details(),
            f"Program: {self._program}",
            f"GPA: {self._gpa:.2f}",
            f"Enrollment Date: {self._enrollment_date}",
        ])

    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'enrollment_date': self._enrollment_date,
            'program': self._program,
            'gpa': self._gpa,
        })
        return base_dict


class Professor(Person):
    """Professor entity with employment-specific properties."""

    person_type = PersonType.PROFESSOR

    def __init__(self, name: str, age: int, person_id: str, contact_info: str,
                 department: str, specialization: str, hire_date: str):
        super().__init__(name, age, person_id, contact_info)
        self._department = department
        self._specialization = specialization
        self._hire_date = hire_date

    @property
    def department(self) -> str:
        return self._department

    @property
    def specialization(self) -> str:
        return self._specialization

    @property
    def hire_date(self) -> str:
        return self._hire_date

    def display_details(self) -> str:
        return "\n".join([
            super().display_details(),
            f"Department: {self._department}",
            f"Specialization: {self._specialization}",
            f"Hire Date: {self._hire_date}",
        ])

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'department': self._department,
            'specialization': self._specialization,
            'hire_date': self._hire_date,
        })
        return base_dict


class Course(AbstractEntity):
    """Course entity; the course code is its identifier."""

    def __init__(self, code: str, title: str, description: str,
                 credits: int, instructor_id: str):
        if isinstance(credits, bool) or not isinstance(credits, int) or credits <= 0:
            raise InvalidArgumentError(
                f"Credits must be a positive integer, got {credits!r}", field="credits", value=credits
            )
        super().__init__(code)
        self._title = title
        self._description = description
        self._credits = credits
        self._instructor_id = instructor_id

    @property
    def code(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def credits(self) -> int:
        return self._credits

    @property
    def instructor_id(self) -> str:
        return self._instructor_id

    def instructor(self, registry: 'UniversityRegistry') -> Professor:
        """Resolve the instructor through the registry that owns it."""
        return registry.get_professor(self._instructor_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'code': self._id,
            'title': self._title,
            'description': self._description,
            'credits': self._credits,
            'instructor_id': self._instructor_id,
        })
        return base_dict


class Department(AbstractEntity):
    """Department entity holding professor identifiers in the order they were added."""

    def __init__(self, name: str, location: str, budget: float):
        self._budget = self._validate_budget(budget)
        super().__init__(name)
        self._location = location
        self._professor_ids: List[str] = []

    @staticmethod
    def _validate_budget(budget: float) -> float:
        if isinstance(budget, bool) or not isinstance(budget, (int, float)) or budget < 0:
            raise InvalidArgumentError(
                f"Budget must be a non-negative number, got {budget!r}", field="budget", value=budget
            )
        return float(budget)

    @property
    def name(self) -> str:
        return self._id

    @property
    def location(self) -> str:
        return self._location

    @property
    def budget(self) -> float:
        return self._budget

    def set_budget(self, budget: float) -> None:
        self._budget = self._validate_budget(budget)
        self.update()

    def add_professor(self, professor: Union[Professor, str]) -> None:
        """Append a professor reference. No duplicate detection."""
        professor_id = professor.id if isinstance(professor, Professor) else professor
        self._professor_ids.append(professor_id)
        logger.debug("Added professor %s to department %s", professor_id, self._id)
        self.update()

    def get_professors(self) -> List[str]:
        """Get a snapshot of the professor identifiers."""
        return self._professor_ids.copy()

    def resolve_professors(self, registry: 'UniversityRegistry') -> List[Professor]:
        return [registry.get_professor(professor_id) for professor_id in self._professor_ids]

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'name': self._id,
            'location': self._location,
            'budget': self._budget,
            'professor_ids': self._professor_ids.copy(),
        })
        return base_dict
