"""Learning path views: catalog data merged with a user's progress.

Catalog rows and progress rows are fetched independently and merged in
memory by exact lesson id. Nothing here is cached; every call recomputes.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from quicklearn.core.logging import get_logger
from quicklearn.schemas.course import CourseResponse
from quicklearn.schemas.learning_path import (
    CourseProgressSummary,
    CourseProgressView,
    LessonStatus,
    RoadmapProgressView,
)
from quicklearn.schemas.roadmap import RoadmapResponse
from quicklearn.services import course_service, lesson_service, progress_service, roadmap_service

logger = get_logger(__name__)


# ============================================================================
# Progress Calculation
# ============================================================================


def calc_percentage(completed: int, total: int) -> int:
    """Completion percentage rounded half up, 0 when there is nothing to complete.

    1 of 4 = 25, 2 of 3 = 67, 1 of 8 = 13.
    """
    if total <= 0:
        return 0
    # Integer form of floor(100 * completed / total + 0.5)
    return (200 * completed + total) // (2 * total)


# ============================================================================
# Views
# ============================================================================


async def get_course_with_progress(
    db: AsyncSession,
    user_id: int,
    course_id: int,
) -> CourseProgressView:
    """Course, its lessons with per-lesson status, and the completion percentage.

    Raises:
        CourseNotFound: unknown course
    """
    course = await course_service.get_course(db, course_id)
    lessons = await lesson_service.list_course_lessons(db, course_id)
    rows = await progress_service.get_progress_for_user(db, user_id)

    lesson_ids = {lesson.id for lesson in lessons}
    completed = {row.lesson_id: row.completed_date for row in rows if row.lesson_id in lesson_ids}

    statuses = [
        LessonStatus(
            id=lesson.id,
            name=lesson.name,
            content=lesson.content,
            is_completed=lesson.id in completed,
            completed_date=completed.get(lesson.id),
        )
        for lesson in lessons
    ]

    return CourseProgressView(
        course=CourseResponse.model_validate(course),
        total_lessons=len(lessons),
        completed_count=len(completed),
        percentage=calc_percentage(len(completed), len(lessons)),
        lessons=statuses,
    )


async def get_roadmap_with_progress(
    db: AsyncSession,
    user_id: int,
    roadmap_id: int,
) -> RoadmapProgressView:
    """Overall and per-course completion of a roadmap for one user.

    Raises:
        RoadmapNotFound: unknown roadmap
    """
    roadmap = await roadmap_service.get_roadmap_details(db, roadmap_id)
    courses = list(roadmap.courses)
    lessons = await lesson_service.list_lessons_for_courses(db, [c.id for c in courses])
    rows = await progress_service.get_progress_for_user(db, user_id)

    completed_ids = {row.lesson_id for row in rows}

    totals: dict[int, int] = {course.id: 0 for course in courses}
    done: dict[int, int] = {course.id: 0 for course in courses}
    for lesson in lessons:
        totals[lesson.course_id] += 1
        if lesson.id in completed_ids:
            done[lesson.course_id] += 1

    summaries = [
        CourseProgressSummary(
            course_id=course.id,
            name=course.name,
            total_lessons=totals[course.id],
            completed_count=done[course.id],
            percentage=calc_percentage(done[course.id], totals[course.id]),
        )
        for course in courses
    ]

    total_lessons = sum(totals.values())
    completed_count = sum(done.values())

    return RoadmapProgressView(
        roadmap=RoadmapResponse.model_validate(roadmap),
        total_lessons=total_lessons,
        completed_count=completed_count,
        percentage=calc_percentage(completed_count, total_lessons),
        courses=summaries,
    )
