"""API Dependencies"""

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from gradebook.database import get_db
from gradebook.models.student import Student
from gradebook.models.course import Course
from gradebook.services.student_service import StudentService
from gradebook.services.course_service import CourseService

__all__ = ["get_db", "get_student_or_404", "get_course_or_404"]


async def get_student_or_404(
    student_id: int,
    db: AsyncSession = Depends(get_db),
) -> Student:
    """Resolve the `student_id` path parameter (internal id) to a Student."""
    student = await StudentService.get_student_by_id(db, student_id)
    if not student:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Student not found"
        )
    return student


async def get_course_or_404(
    course_id: int,
    db: AsyncSession = Depends(get_db),
) -> Course:
    """Resolve the `course_id` path parameter to a Course."""
    course = await CourseService.get_course_by_id(db, course_id)
    if not course:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Course not found"
        )
    return course
