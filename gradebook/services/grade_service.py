from typing import Optional, List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gradebook.core.logging import get_logger
from gradebook.models.grade import Grade
from gradebook.models.student import Student
from gradebook.schemas.grade import GradeCreate, GradeUpdate, GradeResponse, TranscriptResponse
from gradebook.schemas.student import StudentBrief
from gradebook.services.course_service import CourseService
from gradebook.services.student_service import StudentService
from gradebook.utils.grading import transcript_gpa
from gradebook.utils.time import get_utc_now

logger = get_logger(__name__)


def _with_owners(stmt):
    return stmt.options(selectinload(Grade.student), selectinload(Grade.course))


class GradeService:
    @staticmethod
    async def get_grade_by_id(db: AsyncSession, grade_id: int) -> Optional[Grade]:
        stmt = _with_owners(select(Grade)).where(Grade.id == grade_id)
        result = await db.execute(stmt.execution_options(populate_existing=True))
        return result.scalar_one_or_none()

    @staticmethod
    async def list_grades(db: AsyncSession, semester: Optional[str] = None) -> List[Grade]:
        stmt = _with_owners(select(Grade))
        if semester:
            stmt = stmt.where(Grade.semester == semester)
        result = await db.execute(stmt.order_by(Grade.id))
        return list(result.scalars().all())

    @staticmethod
    async def get_grades_by_course(
        db: AsyncSession, course_id: int, semester: Optional[str] = None
    ) -> List[Grade]:
        stmt = _with_owners(select(Grade)).where(Grade.course_id == course_id)
        if semester:
            stmt = stmt.where(Grade.semester == semester)
        result = await db.execute(stmt.order_by(Grade.id))
        return list(result.scalars().all())

    @staticmethod
    async def get_grades_by_student(
        db: AsyncSession, student_pk: int, semester: Optional[str] = None
    ) -> List[Grade]:
        stmt = _with_owners(select(Grade)).where(Grade.student_id == student_pk)
        if semester:
            stmt = stmt.where(Grade.semester == semester)
        result = await db.execute(stmt.order_by(Grade.id))
        return list(result.scalars().all())

    @staticmethod
    async def create_grade(db: AsyncSession, grade_in: GradeCreate) -> Grade:
        """
        Record a grade for a student in a course.

        Raises:
            LookupError: If the student or the course does not exist.
        """
        student = await StudentService.get_student_by_id(db, grade_in.student_id)
        if not student:
            raise LookupError(f"Student {grade_in.student_id} not found")
        course = await CourseService.get_course_by_id(db, grade_in.course_id)
        if not course:
            raise LookupError(f"Course {grade_in.course_id} not found")

        grade = Grade(
            student_id=student.id,
            course_id=course.id,
            score=grade_in.score,
            semester=grade_in.semester or course.semester,
            submission_date=grade_in.submission_date or get_utc_now(),
            comments=grade_in.comments,
        )
        db.add(grade)
        await db.commit()

        logger.info(
            "Grade recorded",
            extra={"grade_id": grade.id, "student_id": student.student_id, "course": course.code},
        )
        # Reload with relationships so the response can embed student/course
        return await GradeService.get_grade_by_id(db, grade.id)

    @staticmethod
    async def update_grade(db: AsyncSession, grade_id: int, grade_in: GradeUpdate) -> Optional[Grade]:
        grade = await GradeService.get_grade_by_id(db, grade_id)
        if not grade:
            return None

        changes = grade_in.model_dump(exclude_unset=True)
        if changes.get("semester", "") is None:
            # semester is required on the row; ignore an explicit null
            changes.pop("semester")
        for field, value in changes.items():
            setattr(grade, field, value)

        await db.commit()
        return await GradeService.get_grade_by_id(db, grade.id)

    @staticmethod
    async def get_transcript(
        db: AsyncSession, student: Student, semester: Optional[str] = None
    ) -> TranscriptResponse:
        grades = [
            GradeResponse.model_validate(g)
            for g in await GradeService.get_grades_by_student(db, student.id, semester=semester)
        ]
        return TranscriptResponse(
            student=StudentBrief.model_validate(student),
            grades=grades,
            gpa=transcript_gpa(g.letter_grade for g in grades),
        )
