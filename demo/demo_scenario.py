#!/usr/bin/env python3
"""
Demo scenario for the Academia model.

Walks through the registry, the result-returning University facade, and the
statistics each service keeps. Run after installing the package:

    python demo/demo_scenario.py
"""

from typing import List

from academia.core.entities import Course, Department, Person, Professor, Student
from academia.services import University


def run_demo():
    """Run a walkthrough of the Academia model."""
    print("=" * 60)
    print("ACADEMIA UNIVERSITY MODEL - DEMO")
    print("=" * 60)

    university = University()

    print("\n1. Creating sample data...")
    create_sample_data(university)

    print("\n2. Demonstrating enrollment...")
    demonstrate_enrollment(university)

    print("\n3. Demonstrating grading...")
    demonstrate_grading(university)

    print("\n4. Demonstrating validation failures...")
    demonstrate_validation(university)

    print("\n5. Demonstrating polymorphism...")
    demonstrate_polymorphism(university)

    print("\n6. Statistics...")
    show_statistics(university)

    print("\n" + "=" * 60)
    print("DEMO COMPLETED")
    print("=" * 60)


def _report(result):
    marker = "✓" if result.success else "✗"
    kind = f" [{result.error_kind.value}]" if result.error_kind else ""
    print(f"  {marker} {result.message}{kind}")


def create_sample_data(university):
    """Register a department, two professors, two courses and three students."""
    _report(university.register_department(Department("Computer Science", "Building A", 500000.0)))
    _report(university.register_department(Department("Mathematics", "Building B", 320000.0)))

    professors = [
        Professor("Dr. Alan Smith", 45, "P001", "alan.smith@university.edu",
                  "Computer Science", "Artificial Intelligence", "2010-08-15"),
        Professor("Dr. Emily Clark", 50, "P002", "emily.clark@university.edu",
                  "Mathematics", "Number Theory", "2005-01-10"),
    ]
    for professor in professors:
        _report(university.register_person(professor))

    _report(university.assign_professor("Computer Science", "P001"))
    _report(university.assign_professor("Mathematics", "P002"))

    _report(university.register_course(Course(
        "CS101", "Introduction to Programming", "Fundamentals of programming", 3, "P001")))
    _report(university.register_course(Course(
        "MATH201", "Linear Algebra", "Vectors, matrices and linear maps", 4, "P002")))

    students = [
        Student("John Doe", 20, "S101", "john.doe@university.edu", "2023-09-01", "Computer Science", 3.5),
        Student("Jane Roe", 22, "S102", "jane.roe@university.edu", "2022-09-01", "Mathematics", 3.8),
        Student("Sam Lee", 19, "S103", "sam.lee@university.edu", "2024-09-01", "Physics", 2.9),
    ]
    for student in students:
        _report(university.register_person(student))

    course = university.registry.get_course("CS101")
    print(f"  CS101 is taught by {course.instructor(university.registry).name}")


def demonstrate_enrollment(university):
    """Enroll, drop, and try an unknown course."""
    for course_code, student_id in [("CS101", "S101"), ("CS101", "S102"), ("MATH201", "S102"), ("MATH201", "S103")]:
        _report(university.enroll(course_code, student_id))

    _report(university.drop("CS101", "S102"))
    _report(university.enroll("BIO999", "S101"))

    for course_code in ("CS101", "MATH201"):
        enrolled = university.enrollment_manager.get_enrolled_students(course_code)
        print(f"  {course_code}: {enrolled}")


def demonstrate_grading(university):
    """Record grades, overwrite one, and report the average."""
    for student_id, grade in [("S101", 88), ("S102", 92), ("S103", 75)]:
        _report(university.record_grade(student_id, grade))

    _report(university.record_grade("S103", 81))
    print(f"  Average grade: {university.average_grade():.2f}")


def demonstrate_validation(university):
    """Show failures arriving as results with their kind."""
    _report(university.record_grade("S101", 105))
    _report(university.update_gpa("S101", 4.5))
    _report(university.record_grade("S999", 70))
    _report(university.register_person(
        Student("Duplicate", 21, "S101", "dup@university.edu", "2023-09-01", "History", 3.0)))


def demonstrate_polymorphism(university):
    """Print every registered person through the Person interface."""
    people: List[Person] = university.registry.get_people()
    for person in people:
        print(person.display_details())
        print(f"Payment: {person.calculate_payment():.2f}")
        print()


def show_statistics(university):
    """Print the statistics of each service."""
    stats = university.get_statistics()
    for name, values in stats.items():
        print(f"  {name}: {values}")


if __name__ == "__main__":
    run_demo()
