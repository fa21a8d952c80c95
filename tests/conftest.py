"""Shared fixtures for the Academia test suite."""

import pytest

from academia.core.entities import Course, Department, Professor, Student
from academia.services import EnrollmentManager, GradeBook, University, UniversityRegistry


@pytest.fixture
def student() -> Student:
    return Student("John Doe", 20, "S101", "john.doe@university.edu",
                   "2023-09-01", "Computer Science", 3.5)


@pytest.fixture
def professor() -> Professor:
    return Professor("Dr. Alan Smith", 45, "P001", "alan.smith@university.edu",
                     "Computer Science", "Artificial Intelligence", "2010-08-15")


@pytest.fixture
def gradebook() -> GradeBook:
    return GradeBook()


@pytest.fixture
def enrollment_manager() -> EnrollmentManager:
    return EnrollmentManager()


@pytest.fixture
def registry(student: Student, professor: Professor) -> UniversityRegistry:
    registry = UniversityRegistry()
    registry.add_professor(professor)
    registry.add_student(student)
    registry.add_department(Department("Computer Science", "Building A", 500000.0))
    registry.add_course(Course("CS101", "Introduction to Programming", "Basics", 3, professor.id))
    return registry


@pytest.fixture
def university(registry: UniversityRegistry) -> University:
    return University(registry=registry)
