"""API V1 Router"""

from fastapi import APIRouter

from gradebook.api.v1.endpoints import students, courses, grades, dashboard

# Create API v1 router
api_router = APIRouter()

api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
api_router.include_router(students.router, prefix="/students", tags=["Student Management"])
api_router.include_router(courses.router, prefix="/courses", tags=["Course Management"])
api_router.include_router(grades.router, prefix="/grades", tags=["Grades"])
