"""HTTP-level tests: routing, serialization and error mapping."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from quicklearn.api.deps import get_db
from quicklearn.main import app
from quicklearn.services import user_service


@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    await user_service.ensure_user(test_session, 1)

    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield test_session

    app.dependency_overrides[get_db] = _override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def _seed_catalog(client: AsyncClient) -> dict:
    course_category = await client.post("/api/course-categories", json={"name": "Tech"})
    roadmap_category = await client.post("/api/roadmap-categories", json={"name": "Engineering"})
    roadmap = await client.post(
        "/api/roadmaps",
        json={
            "name": "Backend",
            "description": "Server side",
            "roadmap_category_id": roadmap_category.json()["id"],
        },
    )
    assert roadmap.status_code == 201
    return {
        "course_category_id": course_category.json()["id"],
        "roadmap_category_id": roadmap_category.json()["id"],
        "roadmap_id": roadmap.json()["id"],
    }


@pytest.mark.asyncio
async def test_ping(client: AsyncClient) -> None:
    response = await client.get("/ping")
    assert response.status_code == 200
    assert response.json() == {"status": "OK"}


@pytest.mark.asyncio
async def test_course_lifecycle_and_progress(client: AsyncClient) -> None:
    ids = await _seed_catalog(client)

    created = await client.post(
        "/api/courses",
        json={
            "name": "API Design",
            "course_category_id": ids["course_category_id"],
            "roadmap_id": ids["roadmap_id"],
        },
    )
    assert created.status_code == 201
    course = created.json()
    assert course["created_by_user_id"] == 1
    assert [r["id"] for r in course["roadmaps"]] == [ids["roadmap_id"]]

    lesson_ids = []
    for name in ("L1", "L2", "L3"):
        lesson = await client.post(
            "/api/lessons", json={"course_id": course["id"], "name": name, "content": "..."}
        )
        assert lesson.status_code == 201
        lesson_ids.append(lesson.json()["id"])

    for lesson_id in (lesson_ids[0], lesson_ids[2], lesson_ids[2]):
        done = await client.post(f"/api/progress/lessons/{lesson_id}")
        assert done.status_code == 200

    rows = await client.get("/api/progress/rows")
    assert [r["lesson_id"] for r in rows.json()] == [lesson_ids[0], lesson_ids[2]]

    grouped = await client.get("/api/progress")
    assert grouped.json()[0]["course_id"] == course["id"]

    view = await client.get(f"/api/learning-path/courses/{course['id']}")
    assert view.status_code == 200
    body = view.json()
    assert body["percentage"] == 67
    assert [lesson["is_completed"] for lesson in body["lessons"]] == [True, False, True]

    roadmap_view = await client.get(f"/api/learning-path/roadmaps/{ids['roadmap_id']}")
    assert roadmap_view.json()["percentage"] == 67


@pytest.mark.asyncio
async def test_duplicate_course_name_is_400(client: AsyncClient) -> None:
    ids = await _seed_catalog(client)
    payload = {
        "name": "API Design",
        "course_category_id": ids["course_category_id"],
        "roadmap_id": ids["roadmap_id"],
    }
    assert (await client.post("/api/courses", json=payload)).status_code == 201

    response = await client.post("/api/courses", json={**payload, "name": "api design"})
    assert response.status_code == 400
    assert response.json()["error"] == "DuplicateName"


@pytest.mark.asyncio
async def test_invalid_references_are_400(client: AsyncClient) -> None:
    ids = await _seed_catalog(client)

    bad_category = await client.post(
        "/api/courses",
        json={"name": "X", "course_category_id": 999, "roadmap_id": ids["roadmap_id"]},
    )
    assert bad_category.status_code == 400
    assert bad_category.json()["error"] == "InvalidCategory"

    bad_roadmap = await client.post(
        "/api/courses",
        json={"name": "X", "course_category_id": ids["course_category_id"], "roadmap_id": 999},
    )
    assert bad_roadmap.status_code == 400
    assert bad_roadmap.json()["error"] == "InvalidRoadmap"

    unknown_lesson = await client.post("/api/progress/lessons/999")
    assert unknown_lesson.status_code == 400
    assert unknown_lesson.json()["error"] == "UnknownLesson"


@pytest.mark.asyncio
async def test_not_found_is_404(client: AsyncClient) -> None:
    response = await client.patch("/api/courses/404", json={"name": "Nope"})
    assert response.status_code == 404
    assert response.json()["error"] == "CourseNotFound"

    assert (await client.get("/api/learning-path/courses/404")).status_code == 404
    assert (await client.get("/api/roadmaps/404")).status_code == 404
    response = await client.get("/api/lessons/404")
    assert response.status_code == 404
    assert response.json()["error"] == "LessonNotFound"

    response = await client.delete("/api/progress/lessons/404")
    assert response.status_code == 404
    assert response.json() == {
        "detail": "Lesson 404 is not completed",
        "error": "ProgressNotFound",
    }


@pytest.mark.asyncio
async def test_deleting_used_category_is_409(client: AsyncClient) -> None:
    ids = await _seed_catalog(client)

    response = await client.delete(f"/api/roadmap-categories/{ids['roadmap_category_id']}")
    assert response.status_code == 409
    assert response.json()["error"] == "CategoryInUse"

    assert (await client.delete(f"/api/roadmaps/{ids['roadmap_id']}")).status_code == 204
    response = await client.delete(f"/api/roadmap-categories/{ids['roadmap_category_id']}")
    assert response.status_code == 204
