from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from datetime import date, datetime

from gradebook.models.enums import StudentStatus


class StudentBase(BaseModel):
    student_id: str = Field(..., min_length=1, max_length=50)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    date_of_birth: Optional[date] = None
    enrollment_date: Optional[date] = None
    program: Optional[str] = None
    status: StudentStatus = StudentStatus.ACTIVE
    contact_number: Optional[str] = None

    @field_validator("student_id", "first_name", "last_name")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class StudentCreate(StudentBase):
    pass


class StudentUpdate(BaseModel):
    student_id: Optional[str] = Field(None, min_length=1, max_length=50)
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    date_of_birth: Optional[date] = None
    enrollment_date: Optional[date] = None
    program: Optional[str] = None
    status: Optional[StudentStatus] = None
    contact_number: Optional[str] = None

    @field_validator("student_id", "first_name", "last_name")
    @classmethod
    def strip_required(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class StudentResponse(BaseModel):
    id: int
    student_id: str
    first_name: str
    last_name: str
    email: str
    date_of_birth: Optional[date] = None
    enrollment_date: Optional[date] = None
    program: Optional[str] = None
    status: StudentStatus
    contact_number: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class StudentBrief(BaseModel):
    """Minimal student info embedded in grade responses."""
    id: int
    student_id: str
    first_name: str
    last_name: str
    email: str

    model_config = ConfigDict(from_attributes=True)
