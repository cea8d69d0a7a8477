import logging
from typing import Any, Mapping

from pydantic import ValidationError

import student_record.core.logging  # noqa: F401  attaches the package handler
from student_record.core.exceptions import BadRequestException, StudentValidationError
from student_record.models.student import Student, StudentImpl
from student_record.schemas.student import StudentCreate, StudentSnapshot, StudentUpdate

logger = logging.getLogger(__name__)


def parse_student(payload: Mapping[str, Any]) -> StudentCreate:
    """Validate an untrusted mapping into StudentCreate"""
    if not isinstance(payload, Mapping):
        raise BadRequestException(
            f"Student payload must be a mapping, got {type(payload).__name__}"
        )
    try:
        return StudentCreate.model_validate(dict(payload))
    except ValidationError as e:
        error = StudentValidationError.from_validation_error(e)
        logger.warning(f"Rejected student payload: {error.details}")
        raise error from e


def create_student(data: StudentCreate) -> StudentImpl:
    """Build a new Student through its setters"""
    student = StudentImpl()
    student.set_name(data.name)
    student.set_age(data.age)
    logger.info(f"Created {student!r}")
    return student


def update_student(student: Student, data: StudentUpdate) -> Student:
    """Apply the explicitly set fields of `data` to `student` in place"""
    changes = data.model_dump(exclude_unset=True)
    if "name" in changes:
        student.set_name(changes["name"])
    if changes.get("age") is not None:
        student.set_age(changes["age"])
    logger.info(f"Updated student fields: {sorted(changes)}")
    return student


def snapshot_student(student: Student) -> StudentSnapshot:
    """Frozen copy of the student's current name and age"""
    return StudentSnapshot(name=student.get_name(), age=student.get_age())
