"""
Academia: An In-Memory University Object Model

A small model of a university built around people (students and professors),
courses, departments, a grade book and an enrollment manager. Records are
owned by a central registry and referenced elsewhere by identifier.
"""

__version__ = "1.0.0"
__author__ = "Academia Development Team"
__description__ = "In-memory university object model"
