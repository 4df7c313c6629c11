"""Integration tests: Dashboard statistics endpoint."""

import pytest
from httpx import AsyncClient

from gradebook.services.stats_service import GPA_RANGE_LABELS


def _buckets(stats: dict) -> dict:
    return {b["range"]: b["count"] for b in stats["gpa_distribution"]}


@pytest.mark.asyncio
async def test_dashboard_stats_empty(async_client: AsyncClient, api_base: str):
    resp = await async_client.get(f"{api_base}/dashboard/stats")
    assert resp.status_code == 200
    stats = resp.json()["data"]
    assert stats["total_students"] == 0
    assert stats["active_students"] == 0
    assert stats["graduated_students"] == 0
    assert stats["average_gpa"] == 0
    assert stats["program_distribution"] == []
    assert [b["range"] for b in stats["gpa_distribution"]] == list(GPA_RANGE_LABELS)
    assert sum(_buckets(stats).values()) == 0


@pytest.mark.asyncio
async def test_dashboard_stats_end_to_end(
    async_client: AsyncClient, api_base: str, make_student, make_course, record_grade
):
    ada = await make_student(program="Computer Science")
    ben = await make_student(program="Physics", status="graduated")
    await make_student(program=None, status="suspended")

    cs101 = await make_course(credits=3)
    lab = await make_course(credits=1)

    await record_grade(ada, cs101, 95)   # 4.0 x 3
    await record_grade(ada, lab, 65)     # 1.0 x 1 -> Ada 3.25
    await record_grade(ben, cs101, 82)   # Ben 3.0
    await record_grade(ben, lab, None)   # not graded yet, ignored

    resp = await async_client.get(f"{api_base}/dashboard/stats")
    assert resp.status_code == 200
    stats = resp.json()["data"]

    assert stats["total_students"] == 3
    assert stats["active_students"] == 1
    assert stats["graduated_students"] == 1
    assert stats["average_gpa"] == 3.13  # (3.25 + 3.0) / 2 = 3.125
    assert stats["program_distribution"] == [
        {"name": "Computer Science", "value": 1},
        {"name": "Physics", "value": 1},
    ]
    buckets = _buckets(stats)
    assert buckets["3.2-3.3"] == 1
    assert buckets["3.0-3.1"] == 1
    assert sum(buckets.values()) == 2


@pytest.mark.asyncio
async def test_dashboard_reflects_grade_updates(
    async_client: AsyncClient, api_base: str, make_student, make_course, record_grade
):
    student = await make_student()
    course = await make_course()
    grade = await record_grade(student, course, 50)

    stats = (await async_client.get(f"{api_base}/dashboard/stats")).json()["data"]
    assert _buckets(stats)["0.0-0.1"] == 1

    await async_client.put(f"{api_base}/grades/{grade['id']}", json={"score": 99})

    stats = (await async_client.get(f"{api_base}/dashboard/stats")).json()["data"]
    assert _buckets(stats)["4.0"] == 1
    assert stats["average_gpa"] == 4.0
