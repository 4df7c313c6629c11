from typing import Any, List, Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from gradebook.api import deps
from gradebook.models.course import Course
from gradebook.models.enums import CourseStatus, SortOrder
from gradebook.services.course_service import CourseService
from gradebook.schemas.course import CourseCreate, CourseUpdate, CourseResponse
from gradebook.schemas.responses import SuccessResponse, PaginatedResponse, PaginationMeta

router = APIRouter()

CourseSortField = Literal["code", "name", "credits", "instructor", "semester", "capacity", "status"]


@router.get("", response_model=PaginatedResponse[CourseResponse])
async def list_courses(
    search: Optional[str] = Query(None, description="Matches code, name or instructor"),
    status: Optional[CourseStatus] = None,
    semester: Optional[str] = None,
    sort_by: CourseSortField = "code",
    order: SortOrder = SortOrder.ASC,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    courses, total = await CourseService.list_courses(
        db,
        search=search,
        status=status,
        semester=semester,
        sort_by=sort_by,
        order=order,
        page=page,
        limit=limit,
    )
    return PaginatedResponse(
        data=[CourseResponse.model_validate(c) for c in courses],
        meta=PaginationMeta.build(page=page, page_size=limit, total=total),
    )


@router.get("/semesters", response_model=SuccessResponse[List[str]])
async def list_semesters(
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    """
    Distinct semesters that have courses, newest first.
    """
    return SuccessResponse(data=await CourseService.list_semesters(db))


@router.post("", response_model=SuccessResponse[CourseResponse])
async def create_course(
    course_in: CourseCreate,
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    try:
        course = await CourseService.create_course(db, course_in)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SuccessResponse(data=CourseResponse.model_validate(course), message="Course created successfully")


@router.get("/{course_id}", response_model=SuccessResponse[CourseResponse])
async def get_course(
    course: Course = Depends(deps.get_course_or_404),
) -> Any:
    return SuccessResponse(data=CourseResponse.model_validate(course))


@router.put("/{course_id}", response_model=SuccessResponse[CourseResponse])
async def update_course(
    course_id: int,
    course_in: CourseUpdate,
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    try:
        course = await CourseService.update_course(db, course_id, course_in)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")

    return SuccessResponse(data=CourseResponse.model_validate(course), message="Course updated successfully")


@router.delete("/{course_id}", response_model=SuccessResponse)
async def delete_course(
    course_id: int,
    db: AsyncSession = Depends(deps.get_db)
) -> Any:
    """
    Delete a course and every grade recorded for it.
    """
    success = await CourseService.delete_course(db, course_id)
    if not success:
        raise HTTPException(status_code=404, detail="Course not found")

    return SuccessResponse(data=None, message="Course deleted successfully")
