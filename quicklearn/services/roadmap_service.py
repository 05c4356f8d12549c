"""Roadmap service for CRUD operations and course membership."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from quicklearn.core.exceptions import CourseNotFound, InvalidCategory, RoadmapNotFound
from quicklearn.core.logging import get_logger
from quicklearn.models import Course, Roadmap, RoadmapCategory
from quicklearn.schemas.roadmap import RoadmapUpdate
from quicklearn.services.naming import ensure_name_available
from quicklearn.services.user_service import require_user

logger = get_logger(__name__)


async def _require_category(db: AsyncSession, category_id: int) -> RoadmapCategory:
    category = await db.get(RoadmapCategory, category_id)
    if not category:
        logger.warning("Unknown roadmap category", category_id=category_id)
        raise InvalidCategory("Invalid roadmap category")
    return category


# ============================================================================
# CRUD Operations
# ============================================================================


async def create_roadmap(
    db: AsyncSession,
    *,
    requester_id: int,
    name: str,
    roadmap_category_id: int,
    description: str = "",
) -> Roadmap:
    """Create a new roadmap.

    Args:
        db: Database session
        requester_id: User creating the roadmap
        name: Roadmap name, unique ignoring case
        roadmap_category_id: Existing roadmap category
        description: Free text

    Returns:
        Created roadmap

    Raises:
        UnknownUser: requester is not a known user
        InvalidCategory: category does not exist
        DuplicateName: another roadmap has the same name
    """
    await require_user(db, requester_id)
    category = await _require_category(db, roadmap_category_id)
    await ensure_name_available(db, Roadmap, name, label="Roadmap")

    roadmap = Roadmap(
        name=name,
        description=description,
        roadmap_category_id=category.id,
        created_by_user_id=requester_id,
        achieved=False,
    )
    db.add(roadmap)
    await db.flush()

    logger.info(
        "Roadmap created",
        roadmap_id=roadmap.id,
        category_id=category.id,
        user_id=requester_id,
    )
    return roadmap


async def get_roadmap(db: AsyncSession, roadmap_id: int) -> Roadmap:
    """Get a roadmap by ID.

    Raises:
        RoadmapNotFound: unknown id
    """
    roadmap = await db.get(Roadmap, roadmap_id)
    if not roadmap:
        raise RoadmapNotFound(f"Roadmap {roadmap_id} not found")
    return roadmap


async def get_roadmap_details(db: AsyncSession, roadmap_id: int) -> Roadmap:
    """Get a roadmap with its category and courses loaded."""
    result = await db.execute(
        select(Roadmap)
        .where(Roadmap.id == roadmap_id)
        .options(selectinload(Roadmap.roadmap_category), selectinload(Roadmap.courses))
        .execution_options(populate_existing=True)
    )
    roadmap = result.scalar_one_or_none()
    if not roadmap:
        raise RoadmapNotFound(f"Roadmap {roadmap_id} not found")
    return roadmap


async def list_roadmaps(db: AsyncSession, roadmap_category_id: int | None = None) -> list[Roadmap]:
    """List roadmaps, optionally restricted to one category."""
    stmt = select(Roadmap).order_by(Roadmap.id)
    if roadmap_category_id is not None:
        stmt = stmt.where(Roadmap.roadmap_category_id == roadmap_category_id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def update_roadmap(
    db: AsyncSession,
    roadmap_id: int,
    update_data: RoadmapUpdate,
) -> Roadmap:
    """Update a roadmap (admin edits).

    Renaming a roadmap to its own current name is a no-op, collisions are
    checked against other roadmaps only.
    """
    roadmap = await get_roadmap(db, roadmap_id)

    if update_data.name is not None:
        await ensure_name_available(
            db, Roadmap, update_data.name, label="Roadmap", exclude_id=roadmap.id
        )
    if update_data.roadmap_category_id is not None:
        await _require_category(db, update_data.roadmap_category_id)

    if update_data.name is not None:
        roadmap.name = update_data.name
    if update_data.description is not None:
        roadmap.description = update_data.description
    if update_data.roadmap_category_id is not None:
        roadmap.roadmap_category_id = update_data.roadmap_category_id
    if update_data.achieved is not None:
        roadmap.achieved = update_data.achieved

    await db.flush()

    logger.info("Roadmap updated", roadmap_id=roadmap_id)
    return roadmap


async def delete_roadmap(db: AsyncSession, roadmap_id: int) -> None:
    """Delete a roadmap. Its courses stay in the catalog."""
    roadmap = await get_roadmap(db, roadmap_id)
    await db.delete(roadmap)
    await db.flush()
    logger.info("Roadmap deleted", roadmap_id=roadmap_id)


# ============================================================================
# Course membership
# ============================================================================


async def link_course(db: AsyncSession, roadmap_id: int, course_id: int) -> Roadmap:
    """Add a course to a roadmap. Linking twice is a no-op."""
    roadmap = await get_roadmap_details(db, roadmap_id)
    course = await db.get(Course, course_id)
    if not course:
        raise CourseNotFound(f"Course {course_id} not found")

    if all(linked.id != course.id for linked in roadmap.courses):
        roadmap.courses.append(course)
        await db.flush()
        logger.info("Course linked to roadmap", roadmap_id=roadmap_id, course_id=course_id)
    return roadmap


async def unlink_course(db: AsyncSession, roadmap_id: int, course_id: int) -> Roadmap:
    """Remove a course from a roadmap. Unlinking an absent course is a no-op."""
    roadmap = await get_roadmap_details(db, roadmap_id)

    for linked in list(roadmap.courses):
        if linked.id == course_id:
            roadmap.courses.remove(linked)
            await db.flush()
            logger.info(
                "Course unlinked from roadmap", roadmap_id=roadmap_id, course_id=course_id
            )
    return roadmap
