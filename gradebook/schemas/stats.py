from typing import List
from pydantic import BaseModel, Field


class ProgramCount(BaseModel):
    name: str
    value: int = Field(..., ge=0)


class GpaBucket(BaseModel):
    range: str
    count: int = Field(..., ge=0)


class DashboardStats(BaseModel):
    """Aggregate numbers shown on the dashboard."""
    total_students: int = Field(..., ge=0, examples=[120])
    active_students: int = Field(..., ge=0, examples=[96])
    graduated_students: int = Field(..., ge=0, examples=[14])
    average_gpa: float = Field(..., ge=0, examples=[3.12])
    program_distribution: List[ProgramCount]
    gpa_distribution: List[GpaBucket]
