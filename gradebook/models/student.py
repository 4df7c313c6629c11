from sqlalchemy import Column, Date, Enum, String

from gradebook.models.base import BaseModel
from gradebook.models.enums import StudentStatus


class Student(BaseModel):
    """
    Enrolled student.
    `student_id` is the human-facing identifier (e.g. "2024-001"); grades and
    dashboard aggregation key on it, never on the integer primary key.
    """
    __tablename__ = "students"

    student_id = Column(String(50), nullable=False, unique=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    date_of_birth = Column(Date, nullable=True)
    enrollment_date = Column(Date, nullable=True)
    program = Column(String(255), nullable=True, index=True)
    status = Column(
        Enum(
            StudentStatus,
            name="student_status",
            native_enum=False,
            values_callable=lambda x: [e.value for e in x],
        ),
        default=StudentStatus.ACTIVE,
        nullable=False,
        index=True,
    )
    contact_number = Column(String(50), nullable=True)

    def __repr__(self) -> str:
        return f"<Student {self.student_id}>"
