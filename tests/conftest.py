"""
Pytest configuration for student-record tests.
"""

import pytest

from student_record.models.student import StudentImpl


@pytest.fixture
def student() -> StudentImpl:
    """A freshly constructed Student with default fields."""
    return StudentImpl()


@pytest.fixture
def ada() -> StudentImpl:
    s = StudentImpl()
    s.set_name("Ada")
    s.set_age(20)
    return s
