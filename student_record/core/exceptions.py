from typing import Any, Dict, Optional

from pydantic import ValidationError


class BaseStudentException(Exception):
    """
    Parent class for every custom error raised by the package.
    Keeps the error payload in one shape for callers.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details
            }
        }


class BadRequestException(BaseStudentException):
    """Input that cannot be turned into a Student (wrong types, bad shape...)"""
    def __init__(self, message: str = "Bad Request", details: dict = None, code: str = "BAD_REQUEST"):
        super().__init__(
            message=message,
            code=code,
            details=details
        )


class StudentValidationError(BadRequestException):
    """
    Raised when a Student payload fails pydantic validation.
    `details` maps the dotted field location to the pydantic message.
    """
    def __init__(self, message: str = "Input validation failed", details: dict = None):
        super().__init__(
            message=message,
            details=details,
            code="VALIDATION_ERROR"
        )

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "StudentValidationError":
        details = {}
        for error in exc.errors():
            field = ".".join(str(x) for x in error["loc"]) or "__root__"
            details[field] = error["msg"]
        return cls(details=details)
