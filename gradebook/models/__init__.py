"""Models Package - Export all models for easy imports"""

from gradebook.models.base import BaseModel
from gradebook.models.enums import StudentStatus, CourseStatus, DayOfWeek, SortOrder
from gradebook.models.student import Student
from gradebook.models.course import Course
from gradebook.models.grade import Grade


__all__ = [
    "BaseModel",
    "StudentStatus",
    "CourseStatus",
    "DayOfWeek",
    "SortOrder",
    "Student",
    "Course",
    "Grade",
]
