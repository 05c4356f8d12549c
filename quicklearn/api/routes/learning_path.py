"""Learning path routes: catalog views with the current user's progress."""

from fastapi import APIRouter

from quicklearn.api.deps import CurrentUser, DBSession
from quicklearn.schemas import CourseProgressView, RoadmapProgressView
from quicklearn.services import learning_path_service

router = APIRouter(prefix="/learning-path", tags=["learning-path"])


@router.get("/courses/{course_id}", response_model=CourseProgressView)
async def get_course_progress(
    course_id: int, db: DBSession, user_id: CurrentUser
) -> CourseProgressView:
    """Course lessons with completion status and percentage."""
    return await learning_path_service.get_course_with_progress(db, user_id, course_id)


@router.get("/roadmaps/{roadmap_id}", response_model=RoadmapProgressView)
async def get_roadmap_progress(
    roadmap_id: int, db: DBSession, user_id: CurrentUser
) -> RoadmapProgressView:
    """Roadmap completion overall and per course."""
    return await learning_path_service.get_roadmap_with_progress(db, user_id, roadmap_id)
