"""Unit tests for the person hierarchy, courses and departments."""

import pytest

from academia.core.entities import Course, Department, Person, Professor, Student
from academia.core.enums import ErrorKind, PersonType
from academia.core.exceptions import InvalidArgumentError, UniversitySystemError
from academia.core.interfaces import UniversityMember


class TestPersonAge:
    """Tests for age validation on construction and mutation."""

    @pytest.mark.parametrize("age", [0, -5, 101, 150])
    def test_out_of_range_age_is_rejected(self, age: int) -> None:
        """Test that ages outside 1-100 raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            Person("Someone", age, "X1", "x@university.edu")

        assert exc_info.value.error_code == ErrorKind.INVALID_ARGUMENT
        assert exc_info.value.field == "age"

    @pytest.mark.parametrize("age", [1, 50, 100])
    def test_in_range_age_is_accepted(self, age: int) -> None:
        """Test that boundary and middle ages are accepted and displayed."""
        person = Person("Someone", age, "X1", "x@university.edu")

        assert person.age == age
        assert f"Age: {age}" in person.display_details()

    def test_bool_age_is_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Person("Someone", True, "X1", "x@university.edu")

    def test_set_age_revalidates(self, student: Student) -> None:
        """Test that a rejected set_age keeps the previous age and version."""
        version = student.version

        with pytest.raises(InvalidArgumentError):
            student.set_age(0)

        assert student.age == 20
        assert student.version == version

    def test_set_age_updates_version(self, student: Student) -> None:
        student.set_age(21)

        assert student.age == 21
        assert student.version == 2

    def test_set_contact_info(self, student: Student) -> None:
        """Test that contact changes show in details and bump the version."""
        student.set_contact_info("jdoe@alumni.university.edu")

        assert student.contact_info == "jdoe@alumni.university.edu"
        assert "Contact: jdoe@alumni.university.edu" in student.display_details()
        assert student.version == 2

    def test_invalid_argument_is_not_a_domain_error(self) -> None:
        """Test that argument failures sit outside the domain hierarchy."""
        assert not issubclass(InvalidArgumentError, UniversitySystemError)
        assert issubclass(InvalidArgumentError, ValueError)


class TestStudent:
    """Tests for Student GPA handling and details."""

    @pytest.mark.parametrize("gpa", [-0.1, 4.01, 5.0])
    def test_out_of_range_gpa_rejected_on_construction(self, gpa: float) -> None:
        with pytest.raises(InvalidArgumentError):
            Student("John Doe", 20, "S101", "john@university.edu", "2023-09-01", "CS", gpa)

    @pytest.mark.parametrize("gpa", [0.0, 2.5, 4.0])
    def test_in_range_gpa_accepted(self, gpa: float) -> None:
        student = Student("John Doe", 20, "S101", "john@university.edu", "2023-09-01", "CS", gpa)

        assert student.gpa == gpa

    def test_set_gpa_rejects_out_of_range(self, student: Student) -> None:
        """Test that set_gpa re-validates on every call."""
        with pytest.raises(InvalidArgumentError):
            student.set_gpa(4.5)

        assert student.gpa == 3.5

    def test_set_gpa_accepts_valid_value(self, student: Student) -> None:
        student.set_gpa(3.9)

        assert student.gpa == 3.9

    @pytest.mark.parametrize("gpa", [True, "3.0", None])
    def test_set_gpa_rejects_non_numeric(self, student: Student, gpa) -> None:
        """Test that set_gpa rejects bools and non-numbers and keeps the previous GPA."""
        version = student.version

        with pytest.raises(InvalidArgumentError) as exc_info:
            student.set_gpa(gpa)

        assert exc_info.value.field == "gpa"
        assert student.gpa == 3.5
        assert student.version == version

    def test_set_gpa_accepts_int(self, student: Student) -> None:
        student.set_gpa(3)

        assert student.gpa == 3.0
        assert isinstance(student.gpa, float)

    def test_display_details_appends_student_fields(self, student: Student) -> None:
        """Test that the student override includes base and student fields."""
        details = student.display_details()

        assert details.startswith("Name: John Doe")
        assert "ID: S101" in details
        assert "Program: Computer Science" in details
        assert "GPA: 3.50" in details
        assert "Enrollment Date: 2023-09-01" in details

    def test_to_dict_includes_student_fields(self, student: Student) -> None:
        data = student.to_dict()

        assert data['id'] == "S101"
        assert data['person_type'] == "student"
        assert data['gpa'] == 3.5
        assert data['program'] == "Computer Science"


class TestPolymorphism:
    """Tests for dispatch through the Person interface."""

    def test_student_as_person_uses_student_details(self, student: Student) -> None:
        """Test that a Student handled as a Person shows program and GPA."""
        person: Person = student

        details = person.display_details()

        assert "Program: Computer Science" in details
        assert "GPA: 3.50" in details

    def test_professor_as_person_uses_professor_details(self, professor: Professor) -> None:
        person: Person = professor

        details = person.display_details()

        assert "Specialization: Artificial Intelligence" in details
        assert "Hire Date: 2010-08-15" in details

    def test_payment_defaults_to_zero(self, student: Student, professor: Professor) -> None:
        """Test that no variant customises the payment hook."""
        people = [Person("Someone", 30, "X1", "x@university.edu"), student, professor]

        assert [p.calculate_payment() for p in people] == [0.0, 0.0, 0.0]

    def test_person_types(self, student: Student, professor: Professor) -> None:
        assert student.person_type == PersonType.STUDENT
        assert professor.person_type == PersonType.PROFESSOR
        assert isinstance(student, UniversityMember)


class TestCourse:
    """Tests for Course construction."""

    @pytest.mark.parametrize("credits", [0, -1, -10])
    def test_non_positive_credits_rejected(self, credits: int) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            Course("CS101", "Intro", "Basics", credits, "P001")

        assert exc_info.value.field == "credits"

    def test_positive_credits_accepted(self) -> None:
        course = Course("CS101", "Intro", "Basics", 3, "P001")

        assert course.code == "CS101"
        assert course.id == "CS101"
        assert course.title == "Intro"
        assert course.credits == 3
        assert course.instructor_id == "P001"

    def test_instructor_resolves_through_registry(self, registry) -> None:
        course = registry.get_course("CS101")

        assert course.instructor(registry).name == "Dr. Alan Smith"


class TestDepartment:
    """Tests for Department professor references."""

    def test_add_professor_appends_in_order(self, professor: Professor) -> None:
        department = Department("Computer Science", "Building A", 1000.0)

        department.add_professor(professor)
        department.add_professor("P002")
        department.add_professor("P001")

        assert department.get_professors() == ["P001", "P002", "P001"]

    def test_get_professors_returns_snapshot(self) -> None:
        department = Department("Computer Science", "Building A", 1000.0)
        department.add_professor("P001")

        snapshot = department.get_professors()
        snapshot.append("P999")

        assert department.get_professors() == ["P001"]

    def test_negative_budget_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Department("Computer Science", "Building A", -1.0)

    def test_set_budget(self) -> None:
        department = Department("Computer Science", "Building A", 1000.0)

        department.set_budget(2500)

        assert department.budget == 2500.0
        with pytest.raises(InvalidArgumentError):
            department.set_budget(-5)
