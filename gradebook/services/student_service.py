from typing import Optional, List, Tuple
from sqlalchemy import select, func, or_, delete
from sqlalchemy.ext.asyncio import AsyncSession

from gradebook.models.student import Student
from gradebook.models.grade import Grade
from gradebook.models.enums import StudentStatus, SortOrder
from gradebook.schemas.student import StudentCreate, StudentUpdate

STUDENT_SORT_FIELDS = {
    "student_id": Student.student_id,
    "first_name": Student.first_name,
    "last_name": Student.last_name,
    "email": Student.email,
    "program": Student.program,
    "status": Student.status,
    "enrollment_date": Student.enrollment_date,
}

NULLABLE_FIELDS = {"date_of_birth", "enrollment_date", "program", "contact_number"}


class StudentService:
    @staticmethod
    async def get_student_by_id(db: AsyncSession, student_pk: int) -> Optional[Student]:
        result = await db.execute(select(Student).where(Student.id == student_pk))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_student_by_student_id(db: AsyncSession, student_id: str) -> Optional[Student]:
        result = await db.execute(select(Student).where(Student.student_id == student_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_student_by_email(db: AsyncSession, email: str) -> Optional[Student]:
        result = await db.execute(select(Student).where(func.lower(Student.email) == email.lower()))
        return result.scalar_one_or_none()

    @staticmethod
    async def list_students(
        db: AsyncSession,
        search: Optional[str] = None,
        status: Optional[StudentStatus] = None,
        program: Optional[str] = None,
        sort_by: str = "student_id",
        order: SortOrder = SortOrder.ASC,
        page: int = 1,
        limit: int = 20,
    ) -> Tuple[List[Student], int]:
        """
        Filter, sort and paginate students.

        `search` is a case-insensitive substring match over the id, names,
        email and program. Returns (page of students, total matches).
        """
        stmt = select(Student)
        if search:
            pattern = f"%{search.strip().lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(Student.student_id).like(pattern),
                    func.lower(Student.first_name).like(pattern),
                    func.lower(Student.last_name).like(pattern),
                    func.lower(Student.email).like(pattern),
                    func.lower(func.coalesce(Student.program, "")).like(pattern),
                )
            )
        if status:
            stmt = stmt.where(Student.status == status)
        if program:
            stmt = stmt.where(Student.program == program)

        total = (await db.execute(select(func.count()).select_from(stmt.subquery()))).scalar_one()

        column = STUDENT_SORT_FIELDS.get(sort_by)
        if column is None:
            raise ValueError(f"Cannot sort students by '{sort_by}'")
        primary = column.desc() if order == SortOrder.DESC else column.asc()
        stmt = stmt.order_by(primary, Student.id.asc()).offset((page - 1) * limit).limit(limit)

        result = await db.execute(stmt)
        return list(result.scalars().all()), total

    @staticmethod
    async def _ensure_unique(
        db: AsyncSession,
        student_id: Optional[str],
        email: Optional[str],
        exclude_pk: Optional[int] = None,
    ) -> None:
        if student_id is not None:
            existing = await StudentService.get_student_by_student_id(db, student_id)
            if existing and existing.id != exclude_pk:
                raise ValueError(f"Student ID {student_id} already exists")
        if email is not None:
            existing = await StudentService.get_student_by_email(db, email)
            if existing and existing.id != exclude_pk:
                raise ValueError("Student email already exists")

    @staticmethod
    async def create_student(db: AsyncSession, student_in: StudentCreate) -> Student:
        await StudentService._ensure_unique(db, student_in.student_id, student_in.email)

        student = Student(**student_in.model_dump())
        db.add(student)
        await db.commit()
        await db.refresh(student)
        return student

    @staticmethod
    async def update_student(
        db: AsyncSession, student_pk: int, student_in: StudentUpdate
    ) -> Optional[Student]:
        student = await StudentService.get_student_by_id(db, student_pk)
        if not student:
            return None

        changes = {
            field: value
            for field, value in student_in.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_FIELDS
        }
        await StudentService._ensure_unique(
            db, changes.get("student_id"), changes.get("email"), exclude_pk=student.id
        )
        for field, value in changes.items():
            setattr(student, field, value)

        await db.commit()
        await db.refresh(student)
        return student

    @staticmethod
    async def delete_student(db: AsyncSession, student_pk: int) -> bool:
        """Delete a student together with all of their grades."""
        student = await StudentService.get_student_by_id(db, student_pk)
        if not student:
            return False

        await db.execute(delete(Grade).where(Grade.student_id == student.id))
        await db.delete(student)
        await db.commit()
        return True
