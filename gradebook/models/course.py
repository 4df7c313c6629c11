from sqlalchemy import Column, Enum, Integer, JSON, String, Text

from gradebook.models.base import BaseModel
from gradebook.models.enums import CourseStatus


class Course(BaseModel):
    """
    Course offering in a semester.
    `credits` weights the course's grades in dashboard GPA.
    """
    __tablename__ = "courses"

    code = Column(String(50), nullable=False, unique=True, index=True)  # e.g., "CS101"
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    credits = Column(Integer, nullable=False, default=3)
    instructor = Column(String(255), nullable=True)
    semester = Column(String(100), nullable=False, index=True)  # e.g., "Fall 2024"
    # [{"day": "Mon", "start_time": "09:00", "end_time": "10:30"}, ...]
    schedule = Column(JSON, nullable=False, default=list)
    capacity = Column(Integer, nullable=False, default=30)
    status = Column(
        Enum(
            CourseStatus,
            name="course_status",
            native_enum=False,
            values_callable=lambda x: [e.value for e in x],
        ),
        default=CourseStatus.ACTIVE,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Course {self.code}>"
