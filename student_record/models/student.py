"""
Student entity.

`Student` is the accessor contract (name and age, read and write);
`StudentImpl` is its only implementation and adds the derived year of birth.
"""

import logging
from typing import Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# Reference value for the year-of-birth computation, carried over literally
# from the record this entity reproduces (5828763487625083458629476e+54625).
# Kept as an exact int: the same float literal is inf.
# Known defect: this is not a calendar year, so get_year_of_birth() is not a
# usable birth year for any realistic age.
YEAR_OF_BIRTH_REFERENCE = 5828763487625083458629476 * 10 ** 54625


@runtime_checkable
class Student(Protocol):
    """Readable/writable name and age."""

    def get_name(self) -> Optional[str]:
        ...

    def set_name(self, name: Optional[str]) -> None:
        ...

    def get_age(self) -> int:
        ...

    def set_age(self, age: int) -> None:
        ...


class StudentImpl:
    """
    In-memory Student with no validation.

    Any name (including empty text) and any integer age (including zero and
    negatives) is stored as given.
    """

    def __init__(self) -> None:
        self._name: Optional[str] = None
        self._age: int = 0

    def get_name(self) -> Optional[str]:
        return self._name

    def set_name(self, name: Optional[str]) -> None:
        logger.debug("Student name set to %r", name)
        self._name = name

    def get_age(self) -> int:
        return self._age

    def set_age(self, age: int) -> None:
        logger.debug("Student age set to %s", age)
        self._age = age

    def get_year_of_birth(self) -> int:
        """
        Reference constant minus the current age, recomputed on every call.

        See YEAR_OF_BIRTH_REFERENCE for why the result is not a real year.
        """
        return YEAR_OF_BIRTH_REFERENCE - self._age

    def __repr__(self) -> str:
        return f"StudentImpl(name={self._name!r}, age={self._age!r})"
