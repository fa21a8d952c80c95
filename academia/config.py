"""
Configuration models for the Academia demo.

The sample records the demo builds are described by pydantic models whose
field constraints mirror the domain rules, so a bad config file is rejected
before any record is constructed.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, ValidationError, model_validator

from .core.exceptions import InvalidArgumentError


class PersonConfig(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=1, le=100)
    person_id: str = Field(..., min_length=1, max_length=20)
    contact_info: str = Field(..., min_length=1, max_length=200)


class StudentConfig(PersonConfig):
    enrollment_date: str = Field(..., min_length=1)
    program: str = Field(..., min_length=1, max_length=100)
    gpa: float = Field(..., ge=0.0, le=4.0)


class ProfessorConfig(PersonConfig):
    department: str = Field(..., min_length=1, max_length=100)
    specialization: str = Field(..., min_length=1, max_length=100)
    hire_date: str = Field(..., min_length=1)


class CourseConfig(BaseModel):
    code: str = Field(..., min_length=1, max_length=20)
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field("", max_length=1000)
    credits: int = Field(..., ge=1)


class DepartmentConfig(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=100)
    budget: float = Field(..., ge=0)


class DemoConfig(BaseModel):
    """Sample data for the demonstration run."""
    department: DepartmentConfig = Field(default_factory=lambda: DepartmentConfig(
        name="Computer Science", location="Building A", budget=500000.0
    ))
    professor: ProfessorConfig = Field(default_factory=lambda: ProfessorConfig(
        name="Dr. Alan Smith", age=45, person_id="P001", contact_info="alan.smith@university.edu",
        department="Computer Science", specialization="Artificial Intelligence", hire_date="2010-08-15"
    ))
    course: CourseConfig = Field(default_factory=lambda: CourseConfig(
        code="CS101", title="Introduction to Programming",
        description="Fundamentals of programming and problem solving", credits=3
    ))
    student: StudentConfig = Field(default_factory=lambda: StudentConfig(
        name="John Doe", age=20, person_id="S101", contact_info="john.doe@university.edu",
        enrollment_date="2023-09-01", program="Computer Science", gpa=3.5
    ))
    sample_grade: float = Field(88.0, ge=0, le=100)
    run_polymorphism_demo: bool = True

    @model_validator(mode="after")
    def _professor_in_department(self) -> "DemoConfig":
        if self.professor.department != self.department.name:
            raise ValueError(
                f"professor department '{self.professor.department}' does not match "
                f"department '{self.department.name}'"
            )
        return self


def load_config(source: Optional[Union[str, Path, Dict[str, Any]]] = None) -> DemoConfig:
    """Build a DemoConfig from a JSON file path, a dict, or the defaults.

    Raises InvalidArgumentError when the data does not validate.
    """
    if source is None:
        return DemoConfig()

    if isinstance(source, dict):
        data = source
    else:
        with open(source, 'r', encoding='utf-8') as f:
            data = json.load(f)

    try:
        return DemoConfig.model_validate(data)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid configuration: {e}") from e
