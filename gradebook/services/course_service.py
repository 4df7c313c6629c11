from typing import Optional, List, Tuple
from sqlalchemy import select, func, or_, delete
from sqlalchemy.ext.asyncio import AsyncSession

from gradebook.models.course import Course
from gradebook.models.grade import Grade
from gradebook.models.enums import CourseStatus, SortOrder
from gradebook.schemas.course import CourseCreate, CourseUpdate, ScheduleSlot

COURSE_SORT_FIELDS = {
    "code": Course.code,
    "name": Course.name,
    "credits": Course.credits,
    "instructor": Course.instructor,
    "semester": Course.semester,
    "capacity": Course.capacity,
    "status": Course.status,
}

NULLABLE_FIELDS = {"description", "instructor"}


def _schedule_to_json(slots: List[ScheduleSlot]) -> List[dict]:
    return [slot.model_dump(mode="json") for slot in slots]


class CourseService:
    @staticmethod
    async def get_course_by_id(db: AsyncSession, course_id: int) -> Optional[Course]:
        result = await db.execute(select(Course).where(Course.id == course_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_course_by_code(db: AsyncSession, code: str) -> Optional[Course]:
        result = await db.execute(select(Course).where(func.lower(Course.code) == code.lower()))
        return result.scalar_one_or_none()

    @staticmethod
    async def list_courses(
        db: AsyncSession,
        search: Optional[str] = None,
        status: Optional[CourseStatus] = None,
        semester: Optional[str] = None,
        sort_by: str = "code",
        order: SortOrder = SortOrder.ASC,
        page: int = 1,
        limit: int = 20,
    ) -> Tuple[List[Course], int]:
        stmt = select(Course)
        if search:
            pattern = f"%{search.strip().lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(Course.code).like(pattern),
                    func.lower(Course.name).like(pattern),
                    func.lower(func.coalesce(Course.instructor, "")).like(pattern),
                )
            )
        if status:
            stmt = stmt.where(Course.status == status)
        if semester:
            stmt = stmt.where(Course.semester == semester)

        total = (await db.execute(select(func.count()).select_from(stmt.subquery()))).scalar_one()

        column = COURSE_SORT_FIELDS.get(sort_by)
        if column is None:
            raise ValueError(f"Cannot sort courses by '{sort_by}'")
        primary = column.desc() if order == SortOrder.DESC else column.asc()
        stmt = stmt.order_by(primary, Course.id.asc()).offset((page - 1) * limit).limit(limit)

        result = await db.execute(stmt)
        return list(result.scalars().all()), total

    @staticmethod
    async def list_semesters(db: AsyncSession) -> List[str]:
        """Distinct course semesters, newest label first."""
        result = await db.execute(select(Course.semester).distinct())
        return sorted((s for s in result.scalars().all() if s), reverse=True)

    @staticmethod
    async def create_course(db: AsyncSession, course_in: CourseCreate) -> Course:
        if await CourseService.get_course_by_code(db, course_in.code):
            raise ValueError(f"Course code {course_in.code} already exists")

        data = course_in.model_dump()
        data["schedule"] = _schedule_to_json(course_in.schedule)
        course = Course(**data)
        db.add(course)
        await db.commit()
        await db.refresh(course)
        return course

    @staticmethod
    async def update_course(
        db: AsyncSession, course_id: int, course_in: CourseUpdate
    ) -> Optional[Course]:
        course = await CourseService.get_course_by_id(db, course_id)
        if not course:
            return None

        changes = {
            field: value
            for field, value in course_in.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_FIELDS
        }
        if "schedule" in changes:
            changes["schedule"] = _schedule_to_json(course_in.schedule or [])
        new_code = changes.get("code")
        if new_code is not None:
            existing = await CourseService.get_course_by_code(db, new_code)
            if existing and existing.id != course.id:
                raise ValueError(f"Course code {new_code} already exists")

        for field, value in changes.items():
            setattr(course, field, value)

        await db.commit()
        await db.refresh(course)
        return course

    @staticmethod
    async def delete_course(db: AsyncSession, course_id: int) -> bool:
        """Delete a course together with every grade recorded for it."""
        course = await CourseService.get_course_by_id(db, course_id)
        if not course:
            return False

        await db.execute(delete(Grade).where(Grade.course_id == course.id))
        await db.delete(course)
        await db.commit()
        return True
