from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import datetime, time

from gradebook.models.enums import CourseStatus, DayOfWeek


class ScheduleSlot(BaseModel):
    day: DayOfWeek
    start_time: time
    end_time: time

    @model_validator(mode="after")
    def check_order(self) -> "ScheduleSlot":
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self


class CourseBase(BaseModel):
    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    credits: int = Field(3, ge=1, le=12)
    instructor: Optional[str] = None
    semester: str = Field(..., min_length=1, max_length=100)
    schedule: List[ScheduleSlot] = Field(default_factory=list)
    capacity: int = Field(30, ge=0)
    status: CourseStatus = CourseStatus.ACTIVE


class CourseCreate(CourseBase):
    pass


class CourseUpdate(BaseModel):
    code: Optional[str] = Field(None, min_length=1, max_length=50)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    credits: Optional[int] = Field(None, ge=1, le=12)
    instructor: Optional[str] = None
    semester: Optional[str] = Field(None, min_length=1, max_length=100)
    schedule: Optional[List[ScheduleSlot]] = None
    capacity: Optional[int] = Field(None, ge=0)
    status: Optional[CourseStatus] = None


class CourseResponse(BaseModel):
    id: int
    code: str
    name: str
    description: Optional[str] = None
    credits: int
    instructor: Optional[str] = None
    semester: str
    schedule: List[ScheduleSlot] = Field(default_factory=list)
    capacity: int = 0
    status: CourseStatus = CourseStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class CourseBrief(BaseModel):
    """Minimal course info embedded in grade responses."""
    id: int
    code: str
    name: str
    semester: str

    model_config = ConfigDict(from_attributes=True)
