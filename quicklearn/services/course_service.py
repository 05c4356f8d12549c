"""Course service: catalog writes with category, roadmap and name checks."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from quicklearn.core.exceptions import CourseNotFound, InvalidCategory, InvalidRoadmap
from quicklearn.core.logging import get_logger
from quicklearn.models import Course, CourseCategory, Roadmap
from quicklearn.schemas.course import CourseUpdate
from quicklearn.services.naming import ensure_name_available
from quicklearn.services.user_service import require_user

logger = get_logger(__name__)


async def _require_category(db: AsyncSession, category_id: int) -> CourseCategory:
    category = await db.get(CourseCategory, category_id)
    if not category:
        logger.warning("Unknown course category", category_id=category_id)
        raise InvalidCategory("Invalid course category")
    return category


async def create_course(
    db: AsyncSession,
    *,
    requester_id: int,
    name: str,
    course_category_id: int,
    roadmap_id: int,
    description: str | None = None,
) -> Course:
    """Create a course and link it to a roadmap.

    All checks run before anything is added to the session, so a rejected
    request leaves no rows behind.

    Raises:
        UnknownUser: requester is not a known user
        InvalidCategory: course category does not exist
        InvalidRoadmap: roadmap does not exist
        DuplicateName: a course with the same name (ignoring case) exists
    """
    await require_user(db, requester_id)
    category = await _require_category(db, course_category_id)

    roadmap = await db.get(Roadmap, roadmap_id)
    if not roadmap:
        logger.warning("Unknown roadmap for new course", roadmap_id=roadmap_id)
        raise InvalidRoadmap("Invalid roadmap")

    await ensure_name_available(db, Course, name, label="Course")

    course = Course(
        name=name,
        description=description,
        course_category_id=category.id,
        created_by_user_id=requester_id,
        roadmaps=[roadmap],
    )
    db.add(course)
    await db.flush()

    logger.info(
        "Course created",
        course_id=course.id,
        roadmap_id=roadmap.id,
        user_id=requester_id,
    )
    return course


async def get_course(db: AsyncSession, course_id: int) -> Course:
    """Get a course by ID.

    Raises:
        CourseNotFound: unknown id
    """
    course = await db.get(Course, course_id)
    if not course:
        raise CourseNotFound(f"Course {course_id} not found")
    return course


async def get_course_details(db: AsyncSession, course_id: int) -> Course:
    """Get a course with category, roadmaps and lessons loaded."""
    result = await db.execute(
        select(Course)
        .where(Course.id == course_id)
        .options(
            selectinload(Course.course_category),
            selectinload(Course.roadmaps),
            selectinload(Course.lessons),
        )
        .execution_options(populate_existing=True)
    )
    course = result.scalar_one_or_none()
    if not course:
        raise CourseNotFound(f"Course {course_id} not found")
    return course


async def list_courses(db: AsyncSession, course_category_id: int | None = None) -> list[Course]:
    stmt = select(Course).order_by(Course.id)
    if course_category_id is not None:
        stmt = stmt.where(Course.course_category_id == course_category_id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def update_course(
    db: AsyncSession,
    course_id: int,
    update_data: CourseUpdate,
) -> Course:
    """Merge the given fields onto a stored course.

    A name collision is only reported against a *different* course, so
    re-saving a course under its current name always succeeds.

    Raises:
        CourseNotFound: unknown id
        DuplicateName: another course already uses the new name
        InvalidCategory: new category does not exist
    """
    course = await get_course(db, course_id)

    if update_data.name is not None:
        await ensure_name_available(
            db, Course, update_data.name, label="Course", exclude_id=course.id
        )
    if update_data.course_category_id is not None:
        await _require_category(db, update_data.course_category_id)

    if update_data.name is not None:
        course.name = update_data.name
    if update_data.description is not None:
        course.description = update_data.description
    if update_data.course_category_id is not None:
        course.course_category_id = update_data.course_category_id

    await db.flush()

    logger.info("Course updated", course_id=course_id)
    return course


async def delete_course(db: AsyncSession, course_id: int) -> None:
    """Delete a course, its lessons and their progress rows.

    Roadmap links and lessons are removed by ON DELETE CASCADE; progress
    rows go with their lessons the same way.
    """
    course = await get_course(db, course_id)
    await db.delete(course)
    await db.flush()
    logger.info("Course deleted", course_id=course_id)
