"""Progress tracker: per-user lesson completion records."""

from datetime import UTC, datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from quicklearn.core.exceptions import UnknownLesson
from quicklearn.core.logging import get_logger
from quicklearn.models import Lesson, UserProgress
from quicklearn.models.base import utcnow
from quicklearn.schemas.progress import CourseProgressGroup, LessonCompletion, ProgressRow
from quicklearn.services.user_service import require_user

logger = get_logger(__name__)


def _as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


async def _find_progress(db: AsyncSession, user_id: int, lesson_id: int) -> UserProgress | None:
    result = await db.execute(
        select(UserProgress).where(
            UserProgress.user_id == user_id,
            UserProgress.lesson_id == lesson_id,
        )
    )
    return result.scalar_one_or_none()


async def record_completion(
    db: AsyncSession,
    user_id: int,
    lesson_id: int,
    completed_date: datetime | None = None,
) -> UserProgress:
    """Mark a lesson completed for a user.

    Idempotent upsert on (user_id, lesson_id): completing a lesson again
    overwrites the stored date instead of adding a row.

    Args:
        db: Database session
        user_id: Learner
        lesson_id: Completed lesson
        completed_date: When it was completed (default: now, UTC)

    Raises:
        UnknownUser: the user does not exist
        UnknownLesson: the lesson does not exist
    """
    await require_user(db, user_id)
    lesson = await db.get(Lesson, lesson_id)
    if not lesson:
        logger.warning("Completion for unknown lesson", user_id=user_id, lesson_id=lesson_id)
        raise UnknownLesson(f"Lesson {lesson_id} does not exist")

    timestamp = _as_naive_utc(completed_date) if completed_date else utcnow()

    progress = await _find_progress(db, user_id, lesson_id)
    if progress:
        progress.completed_date = timestamp
    else:
        progress = UserProgress(user_id=user_id, lesson_id=lesson_id, completed_date=timestamp)
        db.add(progress)
    await db.flush()

    logger.info(
        "Lesson completed",
        user_id=user_id,
        lesson_id=lesson_id,
        course_id=lesson.course_id,
    )
    return progress


async def clear_completion(db: AsyncSession, user_id: int, lesson_id: int) -> bool:
    """Forget a completion. Returns False when there was nothing to remove."""
    result = await db.execute(
        delete(UserProgress).where(
            UserProgress.user_id == user_id,
            UserProgress.lesson_id == lesson_id,
        )
    )
    removed = result.rowcount > 0
    if removed:
        logger.info("Lesson completion cleared", user_id=user_id, lesson_id=lesson_id)
    return removed


async def get_progress_for_user(db: AsyncSession, user_id: int) -> list[ProgressRow]:
    """All completion rows of a user, in insertion order."""
    result = await db.execute(
        select(Lesson.course_id, UserProgress.lesson_id, UserProgress.completed_date)
        .join(Lesson, Lesson.id == UserProgress.lesson_id)
        .where(UserProgress.user_id == user_id)
        .order_by(UserProgress.id)
    )
    return [
        ProgressRow(course_id=course_id, lesson_id=lesson_id, completed_date=completed_date)
        for course_id, lesson_id, completed_date in result.all()
    ]


async def get_grouped_progress(db: AsyncSession, user_id: int) -> list[CourseProgressGroup]:
    """Completion rows grouped by course, courses in order of first completion."""
    groups: dict[int, list[LessonCompletion]] = {}
    for row in await get_progress_for_user(db, user_id):
        groups.setdefault(row.course_id, []).append(
            LessonCompletion(lesson_id=row.lesson_id, completed_date=row.completed_date)
        )
    return [
        CourseProgressGroup(course_id=course_id, lessons=lessons)
        for course_id, lessons in groups.items()
    ]
