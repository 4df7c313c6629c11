from typing import Any, List, Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from gradebook.api import deps
from gradebook.models.course import Course
from gradebook.models.student import Student
from gradebook.services.grade_service import GradeService
from gradebook.schemas.grade import GradeCreate, GradeUpdate, GradeResponse
from gradebook.schemas.responses import SuccessResponse

router = APIRouter()


@router.get("", response_model=SuccessResponse[List[GradeResponse]])
async def list_grades(
    semester: Optional[str] = None,
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    grades = await GradeService.list_grades(db, semester=semester)
    return SuccessResponse(data=[GradeResponse.model_validate(g) for g in grades])


@router.get("/course/{course_id}", response_model=SuccessResponse[List[GradeResponse]])
async def list_course_grades(
    semester: Optional[str] = None,
    course: Course = Depends(deps.get_course_or_404),
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    grades = await GradeService.get_grades_by_course(db, course.id, semester=semester)
    return SuccessResponse(data=[GradeResponse.model_validate(g) for g in grades])


@router.get("/student/{student_id}", response_model=SuccessResponse[List[GradeResponse]])
async def list_student_grades(
    semester: Optional[str] = None,
    student: Student = Depends(deps.get_student_or_404),
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    grades = await GradeService.get_grades_by_student(db, student.id, semester=semester)
    return SuccessResponse(data=[GradeResponse.model_validate(g) for g in grades])


@router.post("", response_model=SuccessResponse[GradeResponse])
async def create_grade(
    grade_in: GradeCreate,
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    """
    Record a grade. Semester defaults to the course's semester.
    """
    try:
        grade = await GradeService.create_grade(db, grade_in)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return SuccessResponse(data=GradeResponse.model_validate(grade), message="Grade recorded successfully")


@router.put("/{grade_id}", response_model=SuccessResponse[GradeResponse])
async def update_grade(
    grade_id: int,
    grade_in: GradeUpdate,
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    grade = await GradeService.update_grade(db, grade_id, grade_in)
    if not grade:
        raise HTTPException(status_code=404, detail="Grade not found")

    return SuccessResponse(data=GradeResponse.model_validate(grade), message="Grade updated successfully")
