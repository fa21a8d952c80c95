"""
Main entry point for the Academia demonstration.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import DemoConfig, load_config
from .core.entities import Course, Department, Person, Professor, Student
from .core.exceptions import InvalidArgumentError, UniversitySystemError
from .services import EnrollmentManager, GradeBook, UniversityRegistry


logger = logging.getLogger(__name__)


class UniversityDemo:
    """Builds the sample records and walks through the model's operations."""

    def __init__(self, config: Optional[DemoConfig] = None):
        self._config = config or DemoConfig()
        self._registry = UniversityRegistry()
        self._gradebook = GradeBook()
        self._enrollment_manager = EnrollmentManager()
        self._department: Optional[Department] = None
        self._professor: Optional[Professor] = None
        self._course: Optional[Course] = None
        self._student: Optional[Student] = None

    @property
    def registry(self) -> UniversityRegistry:
        return self._registry

    @property
    def gradebook(self) -> GradeBook:
        return self._gradebook

    @property
    def enrollment_manager(self) -> EnrollmentManager:
        return self._enrollment_manager

    def create_sample_data(self) -> None:
        """Construct and register the department, professor, course and student."""
        cfg = self._config

        self._department = self._registry.add_department(Department(
            cfg.department.name, cfg.department.location, cfg.department.budget
        ))
        self._professor = self._registry.add_professor(Professor(**cfg.professor.model_dump()))
        self._registry.assign_professor(self._department.name, self._professor.id)

        self._course = self._registry.add_course(Course(
            cfg.course.code, cfg.course.title, cfg.course.description,
            cfg.course.credits, self._professor.id
        ))
        self._student = self._registry.add_student(Student(**cfg.student.model_dump()))
        logger.info("Sample data created: %s", self._registry.get_statistics())

    def run_demo(self) -> float:
        """Record one grade and one enrollment, print and return the average grade."""
        if self._student is None:
            self.create_sample_data()

        self._gradebook.add_grade(self._student.id, self._config.sample_grade)
        self._enrollment_manager.enroll_student(self._course.code, self._student.id)

        average = self._gradebook.calculate_average_grade()
        print(f"Average Grade: {average}")
        print(f"Enrolled in {self._course.code}: "
              f"{', '.join(self._enrollment_manager.get_enrolled_students(self._course.code))}")
        return average

    def run_polymorphism_demo(self) -> List[Person]:
        """Print details and payment for a Student and a Professor handled as Persons."""
        people: List[Person] = [
            Student("Jane Roe", 22, "S102", "jane.roe@university.edu",
                    "2022-09-01", "Mathematics", 3.8),
            Professor("Dr. Emily Clark", 50, "P002", "emily.clark@university.edu",
                      "Mathematics", "Number Theory", "2005-01-10"),
        ]

        print("\n=== Polymorphism Demo ===")
        for person in people:
            print(person.display_details())
            print(f"Payment: {person.calculate_payment():.2f}")
            print()
        return people


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Academia University Model Demo")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    parser.add_argument("--no-polymorphism", action="store_true",
                        help="Skip the polymorphism demonstration")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        parser.error(f"cannot read config: {e}")
    except InvalidArgumentError as e:
        print(f"Invalid argument: {e.message}", file=sys.stderr)
        return 0

    demo = UniversityDemo(config)

    try:
        demo.create_sample_data()
        demo.run_demo()
        if config.run_polymorphism_demo and not args.no_polymorphism:
            demo.run_polymorphism_demo()
    except UniversitySystemError as e:
        print(f"University system error: {e.message}", file=sys.stderr)
    except InvalidArgumentError as e:
        print(f"Invalid argument: {e.message}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
