from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from gradebook.models.base import BaseModel


class Grade(BaseModel):
    """
    A student's result in a course.
    A NULL score means the enrollment exists but has not been graded yet.
    """
    __tablename__ = "grades"

    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True)
    score = Column(Float, nullable=True)
    semester = Column(String(100), nullable=False, index=True)
    submission_date = Column(DateTime, nullable=True)
    comments = Column(Text, nullable=True)

    # Relationships (load explicitly with selectinload; no lazy IO under asyncio)
    student = relationship("Student", lazy="raise")
    course = relationship("Course", lazy="raise")

    def __repr__(self) -> str:
        return f"<Grade student={self.student_id} course={self.course_id} score={self.score}>"
