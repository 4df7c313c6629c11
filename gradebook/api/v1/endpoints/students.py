from typing import Any, Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from gradebook.api import deps
from gradebook.models.student import Student
from gradebook.models.enums import StudentStatus, SortOrder
from gradebook.services.student_service import StudentService
from gradebook.services.grade_service import GradeService
from gradebook.schemas.student import StudentCreate, StudentUpdate, StudentResponse
from gradebook.schemas.grade import TranscriptResponse
from gradebook.schemas.responses import SuccessResponse, PaginatedResponse, PaginationMeta

router = APIRouter()

StudentSortField = Literal[
    "student_id", "first_name", "last_name", "email", "program", "status", "enrollment_date"
]


@router.get("", response_model=PaginatedResponse[StudentResponse])
async def list_students(
    search: Optional[str] = Query(None, description="Matches id, name, email or program"),
    status: Optional[StudentStatus] = None,
    program: Optional[str] = None,
    sort_by: StudentSortField = "student_id",
    order: SortOrder = SortOrder.ASC,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    """
    List students with search, filters, sorting and pagination.
    """
    students, total = await StudentService.list_students(
        db,
        search=search,
        status=status,
        program=program,
        sort_by=sort_by,
        order=order,
        page=page,
        limit=limit,
    )
    return PaginatedResponse(
        data=[StudentResponse.model_validate(s) for s in students],
        meta=PaginationMeta.build(page=page, page_size=limit, total=total),
    )


@router.post("", response_model=SuccessResponse[StudentResponse])
async def create_student(
    student_in: StudentCreate,
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    try:
        student = await StudentService.create_student(db, student_in)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SuccessResponse(data=StudentResponse.model_validate(student), message="Student created successfully")


@router.get("/{student_id}", response_model=SuccessResponse[StudentResponse])
async def get_student(
    student: Student = Depends(deps.get_student_or_404),
) -> Any:
    return SuccessResponse(data=StudentResponse.model_validate(student))


@router.put("/{student_id}", response_model=SuccessResponse[StudentResponse])
async def update_student(
    student_id: int,
    student_in: StudentUpdate,
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    try:
        student = await StudentService.update_student(db, student_id, student_in)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")

    return SuccessResponse(data=StudentResponse.model_validate(student), message="Student updated successfully")


@router.delete("/{student_id}", response_model=SuccessResponse)
async def delete_student(
    student_id: int,
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    """
    Delete a student and their grades.
    """
    success = await StudentService.delete_student(db, student_id)
    if not success:
        raise HTTPException(status_code=404, detail="Student not found")

    return SuccessResponse(data=None, message="Student deleted successfully")


@router.get("/{student_id}/transcript", response_model=SuccessResponse[TranscriptResponse])
async def get_transcript(
    semester: Optional[str] = Query(None, description="Only grades from this semester"),
    student: Student = Depends(deps.get_student_or_404),
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    """
    A student's grades with letter grades and the letter-scale GPA,
    optionally limited to one semester.
    """
    transcript = await GradeService.get_transcript(db, student, semester=semester)
    return SuccessResponse(data=transcript)
