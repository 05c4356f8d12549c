"""Lesson service."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quicklearn.core.exceptions import LessonNotFound
from quicklearn.core.logging import get_logger
from quicklearn.models import Lesson
from quicklearn.schemas.lesson import LessonUpdate
from quicklearn.services.course_service import get_course
from quicklearn.services.user_service import require_user

logger = get_logger(__name__)


async def create_lesson(
    db: AsyncSession,
    *,
    requester_id: int,
    course_id: int,
    name: str,
    content: str = "",
) -> Lesson:
    """Create a lesson inside an existing course."""
    await require_user(db, requester_id)
    course = await get_course(db, course_id)

    lesson = Lesson(
        course_id=course.id,
        name=name,
        content=content,
        created_by_user_id=requester_id,
    )
    db.add(lesson)
    await db.flush()

    logger.info("Lesson created", lesson_id=lesson.id, course_id=course.id)
    return lesson


async def get_lesson(db: AsyncSession, lesson_id: int) -> Lesson:
    lesson = await db.get(Lesson, lesson_id)
    if not lesson:
        raise LessonNotFound(f"Lesson {lesson_id} not found")
    return lesson


async def list_course_lessons(db: AsyncSession, course_id: int) -> list[Lesson]:
    """Lessons of a course in creation order. Unknown courses yield []."""
    result = await db.execute(
        select(Lesson).where(Lesson.course_id == course_id).order_by(Lesson.id)
    )
    return list(result.scalars().all())


async def list_lessons_for_courses(db: AsyncSession, course_ids: list[int]) -> list[Lesson]:
    if not course_ids:
        return []
    result = await db.execute(
        select(Lesson).where(Lesson.course_id.in_(course_ids)).order_by(Lesson.id)
    )
    return list(result.scalars().all())


async def update_lesson(db: AsyncSession, lesson_id: int, update_data: LessonUpdate) -> Lesson:
    lesson = await get_lesson(db, lesson_id)

    if update_data.name is not None:
        lesson.name = update_data.name
    if update_data.content is not None:
        lesson.content = update_data.content

    await db.flush()
    logger.info("Lesson updated", lesson_id=lesson_id)
    return lesson


async def delete_lesson(db: AsyncSession, lesson_id: int) -> None:
    """Delete a lesson; its progress rows are removed by the database cascade."""
    lesson = await get_lesson(db, lesson_id)
    await db.delete(lesson)
    await db.flush()
    logger.info("Lesson deleted", lesson_id=lesson_id)
