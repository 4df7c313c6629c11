from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, computed_field
from datetime import datetime

from gradebook.schemas.student import StudentBrief
from gradebook.schemas.course import CourseBrief
from gradebook.utils.grading import letter_grade_from_score


class GradeCreate(BaseModel):
    student_id: int
    course_id: int
    score: Optional[float] = Field(None, ge=0, le=100)
    semester: Optional[str] = Field(None, min_length=1, max_length=100)
    submission_date: Optional[datetime] = None
    comments: Optional[str] = None


class GradeUpdate(BaseModel):
    score: Optional[float] = Field(None, ge=0, le=100)
    semester: Optional[str] = Field(None, min_length=1, max_length=100)
    comments: Optional[str] = None


class GradeResponse(BaseModel):
    id: int
    student_id: int
    course_id: int
    score: Optional[float] = None
    semester: str
    submission_date: Optional[datetime] = None
    comments: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    student: Optional[StudentBrief] = None
    course: Optional[CourseBrief] = None

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def letter_grade(self) -> Optional[str]:
        return letter_grade_from_score(self.score)


class TranscriptResponse(BaseModel):
    """A student's grades with the letter-scale GPA shown on their profile."""
    student: StudentBrief
    grades: List[GradeResponse]
    gpa: float
