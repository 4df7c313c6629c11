"""Integration tests: Grades endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_record_grade_embeds_student_and_course(
    async_client: AsyncClient, api_base: str, make_student, make_course, record_grade
):
    student = await make_student()
    course = await make_course(semester="Spring 2025")

    grade = await record_grade(student, course, 88.5, comments="Solid work")

    assert grade["score"] == 88.5
    assert grade["letter_grade"] == "B+"
    assert grade["semester"] == "Spring 2025"
    assert grade["submission_date"] is not None
    assert grade["comments"] == "Solid work"
    assert grade["student"]["student_id"] == student["student_id"]
    assert grade["course"]["code"] == course["code"]


@pytest.mark.asyncio
async def test_record_ungraded_enrollment(
    async_client: AsyncClient, api_base: str, make_student, make_course, record_grade
):
    student = await make_student()
    course = await make_course()
    grade = await record_grade(student, course, None)
    assert grade["score"] is None
    assert grade["letter_grade"] is None


@pytest.mark.asyncio
async def test_record_grade_unknown_references(
    async_client: AsyncClient, api_base: str, make_student, make_course
):
    student = await make_student()
    course = await make_course()

    resp = await async_client.post(
        f"{api_base}/grades", json={"student_id": 9999, "course_id": course["id"], "score": 70}
    )
    assert resp.status_code == 404
    resp = await async_client.post(
        f"{api_base}/grades", json={"student_id": student["id"], "course_id": 9999, "score": 70}
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_record_grade_score_out_of_range(
    async_client: AsyncClient, api_base: str, make_student, make_course
):
    student = await make_student()
    course = await make_course()
    resp = await async_client.post(
        f"{api_base}/grades",
        json={"student_id": student["id"], "course_id": course["id"], "score": 101},
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_update_grade(
    async_client: AsyncClient, api_base: str, make_student, make_course, record_grade
):
    student = await make_student()
    course = await make_course()
    grade = await record_grade(student, course, 55)

    resp = await async_client.put(
        f"{api_base}/grades/{grade['id']}", json={"score": 93, "comments": "Regraded"}
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["score"] == 93
    assert data["letter_grade"] == "A"
    assert data["comments"] == "Regraded"
    assert data["student"]["id"] == student["id"]

    resp = await async_client.put(f"{api_base}/grades/9999", json={"score": 50})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_grades_by_course_and_student(
    async_client: AsyncClient, api_base: str, make_student, make_course, record_grade
):
    alice = await make_student(first_name="Alice")
    bob = await make_student(first_name="Bob")
    math = await make_course(semester="Fall 2024")
    art = await make_course(semester="Spring 2025")
    await record_grade(alice, math, 90)
    await record_grade(bob, math, 70)
    await record_grade(alice, art, 80)

    resp = await async_client.get(f"{api_base}/grades/course/{math['id']}")
    assert sorted(g["student"]["first_name"] for g in resp.json()["data"]) == ["Alice", "Bob"]

    resp = await async_client.get(f"{api_base}/grades/student/{alice['id']}")
    assert len(resp.json()["data"]) == 2

    resp = await async_client.get(
        f"{api_base}/grades/student/{alice['id']}", params={"semester": "Spring 2025"}
    )
    assert [g["course_id"] for g in resp.json()["data"]] == [art["id"]]

    resp = await async_client.get(f"{api_base}/grades")
    assert len(resp.json()["data"]) == 3

    resp = await async_client.get(f"{api_base}/grades/course/9999")
    assert resp.status_code == 404
    resp = await async_client.get(f"{api_base}/grades/student/9999")
    assert resp.status_code == 404
