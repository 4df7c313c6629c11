"""
Dashboard statistics.

``compute_dashboard_stats`` is a pure function over already-fetched student,
course and grade collections. ``StatsService`` is the thin async layer that
loads those collections from the database on every call and hands them over.
"""

from typing import Dict, List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gradebook.core.logging import get_logger
from gradebook.models.course import Course
from gradebook.models.enums import StudentStatus
from gradebook.models.grade import Grade
from gradebook.models.student import Student
from gradebook.schemas.course import CourseResponse
from gradebook.schemas.grade import GradeResponse
from gradebook.schemas.stats import DashboardStats, GpaBucket, ProgramCount
from gradebook.schemas.student import StudentResponse
from gradebook.utils.grading import round_half_up

logger = get_logger(__name__)

# (lower bound, label), highest first; a GPA lands in the first bucket whose
# lower bound it reaches.
GPA_RANGES = (
    (4.0, "4.0"),
    (3.8, "3.8-3.9"),
    (3.6, "3.6-3.7"),
    (3.4, "3.4-3.5"),
    (3.2, "3.2-3.3"),
    (3.0, "3.0-3.1"),
    (2.8, "2.8-2.9"),
    (2.6, "2.6-2.7"),
    (2.4, "2.4-2.5"),
    (2.2, "2.2-2.3"),
    (2.0, "2.0-2.1"),
    (1.8, "1.8-1.9"),
    (1.6, "1.6-1.7"),
    (1.4, "1.4-1.5"),
    (1.2, "1.2-1.3"),
    (1.0, "1.0-1.1"),
    (0.8, "0.8-0.9"),
    (0.6, "0.6-0.7"),
    (0.4, "0.4-0.5"),
    (0.2, "0.2-0.3"),
    (0.0, "0.0-0.1"),
)

GPA_RANGE_LABELS = tuple(label for _, label in GPA_RANGES)


def grade_point_from_score(score: float) -> float:
    """Coarse four-step grade point used for dashboard GPA."""
    if score >= 90:
        return 4.0
    if score >= 80:
        return 3.0
    if score >= 70:
        return 2.0
    if score >= 60:
        return 1.0
    return 0.0


def gpa_range_label(gpa: float) -> str:
    for lower_bound, label in GPA_RANGES:
        if gpa >= lower_bound:
            return label
    # Only reachable for negative input
    return GPA_RANGE_LABELS[-1]


def _student_key(grade: GradeResponse) -> Optional[str]:
    if grade.student is None:
        return None
    return grade.student.student_id or None


def compute_student_gpas(
    courses: Sequence[CourseResponse],
    grades: Sequence[GradeResponse],
) -> Dict[str, float]:
    """
    Credit-weighted GPA per student, keyed by the student's external id.

    A grade counts only when it has a score, its course is known and carries
    credits, and it names a student. Students without such a grade are absent
    from the result.
    """
    course_credits = {course.id: course.credits for course in courses}

    # student_id -> [weighted grade points, credits]
    totals: Dict[str, List[float]] = {}
    for grade in grades:
        if grade.score is None:
            continue
        credits = course_credits.get(grade.course_id)
        if credits is None or credits <= 0:
            continue
        key = _student_key(grade)
        if key is None:
            continue

        entry = totals.setdefault(key, [0.0, 0])
        entry[0] += grade_point_from_score(grade.score) * credits
        entry[1] += credits

    return {key: weighted / credits for key, (weighted, credits) in totals.items()}


def compute_dashboard_stats(
    students: Sequence[StudentResponse],
    courses: Sequence[CourseResponse],
    grades: Sequence[GradeResponse],
) -> DashboardStats:
    """
    Build the dashboard summary from full student, course and grade snapshots.

    Never raises on unresolved references; grades that cannot be tied to a
    course with credits and to a student are simply left out of the GPA
    figures. ``average_gpa`` is the plain mean of the per-student GPAs.
    """
    program_counts: Dict[str, int] = {}
    active = 0
    graduated = 0
    for student in students:
        if student.status == StudentStatus.ACTIVE:
            active += 1
        elif student.status == StudentStatus.GRADUATED:
            graduated += 1
        if student.program:
            program_counts[student.program] = program_counts.get(student.program, 0) + 1

    bucket_counts = dict.fromkeys(GPA_RANGE_LABELS, 0)
    student_gpas = compute_student_gpas(courses, grades)
    for gpa in student_gpas.values():
        bucket_counts[gpa_range_label(gpa)] += 1

    if student_gpas:
        average_gpa = round_half_up(sum(student_gpas.values()) / len(student_gpas))
    else:
        average_gpa = 0.0

    return DashboardStats(
        total_students=len(students),
        active_students=active,
        graduated_students=graduated,
        average_gpa=average_gpa,
        program_distribution=[
            ProgramCount(name=name, value=count) for name, count in program_counts.items()
        ],
        gpa_distribution=[
            GpaBucket(range=label, count=count) for label, count in bucket_counts.items()
        ],
    )


class StatsService:
    @staticmethod
    async def fetch_snapshot(db: AsyncSession):
        """Load every student, course and grade (with its student) in one go."""
        students = (await db.execute(select(Student).order_by(Student.id))).scalars().all()
        courses = (await db.execute(select(Course).order_by(Course.id))).scalars().all()
        grades = (
            await db.execute(
                select(Grade).options(selectinload(Grade.student), selectinload(Grade.course))
                .order_by(Grade.id)
            )
        ).scalars().all()

        return (
            [StudentResponse.model_validate(s) for s in students],
            [CourseResponse.model_validate(c) for c in courses],
            [GradeResponse.model_validate(g) for g in grades],
        )

    @staticmethod
    async def get_dashboard_stats(db: AsyncSession) -> DashboardStats:
        try:
            students, courses, grades = await StatsService.fetch_snapshot(db)
        except Exception:
            logger.exception("Failed to load dashboard data")
            raise

        stats = compute_dashboard_stats(students, courses, grades)
        logger.info(
            "Dashboard stats computed",
            extra={
                "students": stats.total_students,
                "courses": len(courses),
                "grades": len(grades),
                "average_gpa": stats.average_gpa,
            },
        )
        return stats
