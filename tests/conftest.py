"""Shared pytest fixtures for unit and integration tests."""

import os
import tempfile
import uuid

import pytest

# Point the app at a throwaway SQLite file before anything imports settings
_TEST_DB_DIR = tempfile.mkdtemp(prefix="gradebook-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["LOG_FORMAT"] = "text"

from httpx import ASGITransport, AsyncClient  # noqa: E402

from gradebook.config import settings  # noqa: E402
from gradebook.database import Base, engine  # noqa: E402
from gradebook.main import app  # noqa: E402
import gradebook.models  # noqa: E402,F401


@pytest.fixture
def api_base() -> str:
    """Base URL for API requests."""
    return f"http://test{settings.API_V1_PREFIX}"


@pytest.fixture
async def clean_db():
    """Fresh schema for every test that touches the database."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def async_client(api_base: str, clean_db):
    """Async HTTP client talking to the app in-process."""
    transport = ASGITransport(app=app)
    client = AsyncClient(transport=transport, base_url=api_base, timeout=30.0)
    yield client
    await client.aclose()


@pytest.fixture
def unique_suffix() -> str:
    """Unique suffix for test data to avoid collisions."""
    return str(uuid.uuid4())[:8]


@pytest.fixture
def make_student(async_client: AsyncClient, api_base: str, unique_suffix: str):
    """Factory creating a student through the API; returns the response data."""
    counter = {"n": 0}

    async def _make(**overrides):
        counter["n"] += 1
        payload = {
            "student_id": f"S{unique_suffix}-{counter['n']:03d}",
            "first_name": "Ada",
            "last_name": f"Lovelace{counter['n']}",
            "email": f"student{counter['n']}.{unique_suffix}@school.example.com",
            "program": "Computer Science",
            "status": "active",
        }
        payload.update(overrides)
        resp = await async_client.post(f"{api_base}/students", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()["data"]

    return _make


@pytest.fixture
def make_course(async_client: AsyncClient, api_base: str, unique_suffix: str):
    """Factory creating a course through the API; returns the response data."""
    counter = {"n": 0}

    async def _make(**overrides):
        counter["n"] += 1
        payload = {
            "code": f"C{unique_suffix}-{counter['n']}",
            "name": f"Course {counter['n']}",
            "credits": 3,
            "instructor": "Dr. Hopper",
            "semester": "Fall 2024",
            "capacity": 30,
        }
        payload.update(overrides)
        resp = await async_client.post(f"{api_base}/courses", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()["data"]

    return _make


@pytest.fixture
def record_grade(async_client: AsyncClient, api_base: str):
    """Record a grade through the API; returns the response data."""

    async def _record(student: dict, course: dict, score, **extra):
        payload = {"student_id": student["id"], "course_id": course["id"], "score": score}
        payload.update(extra)
        resp = await async_client.post(f"{api_base}/grades", json=payload)
        assert resp.status_code == 200, resp.text
        return resp.json()["data"]

    return _record
