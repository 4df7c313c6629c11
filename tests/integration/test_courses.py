"""Integration tests: Courses endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_course_with_schedule(async_client: AsyncClient, api_base: str, make_course):
    course = await make_course(
        schedule=[{"day": "Mon", "start_time": "09:00", "end_time": "10:30"}],
        credits=4,
    )
    assert course["credits"] == 4
    assert course["schedule"] == [{"day": "Mon", "start_time": "09:00:00", "end_time": "10:30:00"}]

    resp = await async_client.get(f"{api_base}/courses/{course['id']}")
    assert resp.status_code == 200
    assert resp.json()["data"]["schedule"][0]["day"] == "Mon"


@pytest.mark.asyncio
async def test_duplicate_course_code(async_client: AsyncClient, api_base: str, make_course):
    course = await make_course()
    resp = await async_client.post(
        f"{api_base}/courses",
        json={"code": course["code"].lower(), "name": "Again", "semester": "Fall 2024"},
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_course_requires_positive_credits(async_client: AsyncClient, api_base: str):
    resp = await async_client.post(
        f"{api_base}/courses",
        json={"code": "ZERO", "name": "No credit", "semester": "Fall 2024", "credits": 0},
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_update_and_delete_course(async_client: AsyncClient, api_base: str, make_course):
    course = await make_course()

    resp = await async_client.put(
        f"{api_base}/courses/{course['id']}",
        json={"status": "completed", "instructor": None},
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["status"] == "completed"
    assert data["instructor"] is None

    resp = await async_client.delete(f"{api_base}/courses/{course['id']}")
    assert resp.status_code == 200
    resp = await async_client.get(f"{api_base}/courses/{course['id']}")
    assert resp.status_code == 404
    resp = await async_client.put(f"{api_base}/courses/{course['id']}", json={"credits": 2})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_list_courses_and_semesters(async_client: AsyncClient, api_base: str, make_course):
    await make_course(name="Algebra", semester="Fall 2024", credits=4)
    await make_course(name="Biology", semester="Spring 2025", credits=2, instructor="Dr. Curie")
    await make_course(name="Chemistry", semester="Fall 2024", credits=3, status="inactive")

    resp = await async_client.get(f"{api_base}/courses", params={"semester": "Fall 2024"})
    assert resp.json()["meta"]["total"] == 2

    resp = await async_client.get(f"{api_base}/courses", params={"search": "curie"})
    assert [c["name"] for c in resp.json()["data"]] == ["Biology"]

    resp = await async_client.get(f"{api_base}/courses", params={"status": "inactive"})
    assert [c["name"] for c in resp.json()["data"]] == ["Chemistry"]

    resp = await async_client.get(
        f"{api_base}/courses", params={"sort_by": "credits", "order": "desc"}
    )
    assert [c["credits"] for c in resp.json()["data"]] == [4, 3, 2]

    resp = await async_client.get(f"{api_base}/courses/semesters")
    assert resp.status_code == 200
    assert resp.json()["data"] == ["Spring 2025", "Fall 2024"]
