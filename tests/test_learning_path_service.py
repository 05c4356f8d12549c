"""Tests for learning_path_service."""

from datetime import datetime

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from quicklearn.core.exceptions import CourseNotFound, RoadmapNotFound
from quicklearn.models import Course, CourseCategory, Lesson, Roadmap, User
from quicklearn.services import (
    course_service,
    learning_path_service,
    lesson_service,
    progress_service,
    roadmap_service,
)
from quicklearn.services.learning_path_service import calc_percentage


class TestCalcPercentage:
    """Rounding of completion percentages."""

    def test_no_lessons(self):
        assert calc_percentage(0, 0) == 0
        assert calc_percentage(3, 0) == 0

    def test_quarter(self):
        assert calc_percentage(1, 4) == 25

    def test_two_thirds_rounds_up(self):
        assert calc_percentage(2, 3) == 67

    def test_one_third_rounds_down(self):
        assert calc_percentage(1, 3) == 33

    def test_half_rounds_up(self):
        assert calc_percentage(1, 8) == 13
        assert calc_percentage(3, 8) == 38

    def test_bounds(self):
        assert calc_percentage(0, 7) == 0
        assert calc_percentage(7, 7) == 100


async def _make_course(
    db: AsyncSession, user: User, category: CourseCategory, roadmap: Roadmap, name: str
) -> Course:
    return await course_service.create_course(
        db,
        requester_id=user.id,
        name=name,
        course_category_id=category.id,
        roadmap_id=roadmap.id,
    )


async def _make_lessons(db: AsyncSession, user: User, course: Course, *names: str) -> list[Lesson]:
    return [
        await lesson_service.create_lesson(
            db, requester_id=user.id, course_id=course.id, name=name, content=f"{name} content"
        )
        for name in names
    ]


@pytest_asyncio.fixture
async def course(
    test_session: AsyncSession,
    seed_user: User,
    course_category: CourseCategory,
    seed_roadmap: Roadmap,
) -> Course:
    return await _make_course(test_session, seed_user, course_category, seed_roadmap, "Networking")


@pytest.mark.asyncio
async def test_course_progress_two_of_three(
    test_session: AsyncSession, seed_user: User, course: Course
) -> None:
    l1, l2, l3 = await _make_lessons(test_session, seed_user, course, "L1", "L2", "L3")
    done_at = datetime(2026, 4, 1, 8, 0)
    await progress_service.record_completion(test_session, seed_user.id, l1.id, done_at)
    await progress_service.record_completion(test_session, seed_user.id, l3.id)

    view = await learning_path_service.get_course_with_progress(
        test_session, seed_user.id, course.id
    )

    assert view.course.id == course.id
    assert view.total_lessons == 3
    assert view.completed_count == 2
    assert view.percentage == 67
    assert [s.id for s in view.lessons] == [l1.id, l2.id, l3.id]
    assert [s.is_completed for s in view.lessons] == [True, False, True]
    assert view.lessons[0].completed_date == done_at
    assert view.lessons[1].completed_date is None
    assert view.lessons[0].content == "L1 content"


@pytest.mark.asyncio
async def test_course_progress_one_of_four(
    test_session: AsyncSession, seed_user: User, course: Course
) -> None:
    lessons = await _make_lessons(test_session, seed_user, course, "a", "b", "c", "d")
    await progress_service.record_completion(test_session, seed_user.id, lessons[2].id)

    view = await learning_path_service.get_course_with_progress(
        test_session, seed_user.id, course.id
    )
    assert view.percentage == 25


@pytest.mark.asyncio
async def test_empty_course_is_zero_percent(
    test_session: AsyncSession,
    seed_user: User,
    course_category: CourseCategory,
    seed_roadmap: Roadmap,
    course: Course,
) -> None:
    other = await _make_course(test_session, seed_user, course_category, seed_roadmap, "Other")
    (lesson,) = await _make_lessons(test_session, seed_user, other, "Only")
    await progress_service.record_completion(test_session, seed_user.id, lesson.id)

    view = await learning_path_service.get_course_with_progress(
        test_session, seed_user.id, course.id
    )
    assert view.total_lessons == 0
    assert view.completed_count == 0
    assert view.percentage == 0
    assert view.lessons == []


@pytest.mark.asyncio
async def test_merge_uses_lesson_id_not_name(
    test_session: AsyncSession,
    seed_user: User,
    course_category: CourseCategory,
    seed_roadmap: Roadmap,
    course: Course,
) -> None:
    other = await _make_course(test_session, seed_user, course_category, seed_roadmap, "Security")
    (intro_here,) = await _make_lessons(test_session, seed_user, course, "Intro")
    (intro_there,) = await _make_lessons(test_session, seed_user, other, "Intro")
    await progress_service.record_completion(test_session, seed_user.id, intro_there.id)

    view = await learning_path_service.get_course_with_progress(
        test_session, seed_user.id, course.id
    )
    assert view.lessons[0].id == intro_here.id
    assert view.lessons[0].is_completed is False
    assert view.percentage == 0


@pytest.mark.asyncio
async def test_progress_is_per_user(
    test_session: AsyncSession, seed_user: User, course: Course
) -> None:
    (lesson,) = await _make_lessons(test_session, seed_user, course, "Solo")
    other_user = User(username="someone-else")
    test_session.add(other_user)
    await test_session.flush()
    await progress_service.record_completion(test_session, other_user.id, lesson.id)

    mine = await learning_path_service.get_course_with_progress(
        test_session, seed_user.id, course.id
    )
    theirs = await learning_path_service.get_course_with_progress(
        test_session, other_user.id, course.id
    )
    assert mine.percentage == 0
    assert theirs.percentage == 100


@pytest.mark.asyncio
async def test_course_progress_unknown_course(test_session: AsyncSession) -> None:
    with pytest.raises(CourseNotFound):
        await learning_path_service.get_course_with_progress(test_session, 1, 31337)


@pytest.mark.asyncio
async def test_roadmap_progress(
    test_session: AsyncSession,
    seed_user: User,
    course_category: CourseCategory,
    seed_roadmap: Roadmap,
    course: Course,
) -> None:
    second = await _make_course(test_session, seed_user, course_category, seed_roadmap, "Crypto")
    empty = await _make_course(test_session, seed_user, course_category, seed_roadmap, "Empty")
    first_lessons = await _make_lessons(test_session, seed_user, course, "n1", "n2")
    second_lessons = await _make_lessons(test_session, seed_user, second, "c1", "c2", "c3")

    await progress_service.record_completion(test_session, seed_user.id, first_lessons[0].id)
    await progress_service.record_completion(test_session, seed_user.id, first_lessons[1].id)
    await progress_service.record_completion(test_session, seed_user.id, second_lessons[1].id)

    view = await learning_path_service.get_roadmap_with_progress(
        test_session, seed_user.id, seed_roadmap.id
    )

    assert view.roadmap.id == seed_roadmap.id
    assert view.total_lessons == 5
    assert view.completed_count == 3
    assert view.percentage == 60

    by_course = {summary.course_id: summary for summary in view.courses}
    assert by_course[course.id].percentage == 100
    assert by_course[second.id].percentage == 33
    assert by_course[empty.id].total_lessons == 0
    assert by_course[empty.id].percentage == 0


@pytest.mark.asyncio
async def test_roadmap_progress_ignores_unlinked_courses(
    test_session: AsyncSession, seed_user: User, course: Course, seed_roadmap: Roadmap
) -> None:
    (lesson,) = await _make_lessons(test_session, seed_user, course, "Only")
    await progress_service.record_completion(test_session, seed_user.id, lesson.id)
    await roadmap_service.unlink_course(test_session, seed_roadmap.id, course.id)

    view = await learning_path_service.get_roadmap_with_progress(
        test_session, seed_user.id, seed_roadmap.id
    )
    assert view.courses == []
    assert view.percentage == 0

    with pytest.raises(RoadmapNotFound):
        await learning_path_service.get_roadmap_with_progress(test_session, seed_user.id, 555)
