from typing import Optional

from pydantic import BaseModel, ConfigDict


class StudentBase(BaseModel):
    name: Optional[str] = None
    age: int = 0


class StudentCreate(StudentBase):
    pass


class StudentUpdate(BaseModel):
    """Partial update; only fields the caller actually set are applied."""
    name: Optional[str] = None
    age: Optional[int] = None


class StudentSnapshot(StudentBase):
    # Year of birth is left out: it is far too large for int/str conversion limits
    model_config = ConfigDict(frozen=True)
