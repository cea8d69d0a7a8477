"""
Tests for the error hierarchy.
"""

import pytest
from pydantic import ValidationError

from student_record.core.exceptions import (
    BadRequestException,
    BaseStudentException,
    StudentValidationError,
)
from student_record.schemas.student import StudentCreate


class TestBaseStudentException:

    def test_defaults(self) -> None:
        exc = BaseStudentException("boom")
        assert str(exc) == "boom"
        assert exc.code == "INTERNAL_ERROR"
        assert exc.details is None

    def test_to_dict(self) -> None:
        exc = BadRequestException("nope", details={"age": "bad"})
        assert exc.to_dict() == {
            "success": False,
            "error": {
                "code": "BAD_REQUEST",
                "message": "nope",
                "details": {"age": "bad"},
            },
        }


class TestStudentValidationError:

    def test_is_bad_request(self) -> None:
        exc = StudentValidationError()
        assert isinstance(exc, BadRequestException)
        assert exc.code == "VALIDATION_ERROR"
        assert exc.message == "Input validation failed"

    def test_from_validation_error_maps_fields(self) -> None:
        with pytest.raises(ValidationError) as info:
            StudentCreate.model_validate({"name": 7, "age": "twenty"})

        exc = StudentValidationError.from_validation_error(info.value)

        assert set(exc.details) == {"name", "age"}
        assert "string" in exc.details["name"]
        assert "integer" in exc.details["age"]
