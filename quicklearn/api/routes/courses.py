"""Course API routes."""

from fastapi import APIRouter, status

from quicklearn.api.deps import CurrentUser, DBSession
from quicklearn.schemas import (
    CourseCreate,
    CourseDetailResponse,
    CourseResponse,
    CourseUpdate,
    LessonResponse,
)
from quicklearn.services import course_service, lesson_service

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=list[CourseResponse])
async def list_courses(db: DBSession, category_id: int | None = None) -> list:
    return await course_service.list_courses(db, course_category_id=category_id)


@router.post("", response_model=CourseDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_course(data: CourseCreate, db: DBSession, user_id: CurrentUser):
    """Create a course linked to ``roadmap_id``."""
    course = await course_service.create_course(
        db,
        requester_id=user_id,
        name=data.name,
        course_category_id=data.course_category_id,
        roadmap_id=data.roadmap_id,
        description=data.description,
    )
    return await course_service.get_course_details(db, course.id)


@router.get("/{course_id}", response_model=CourseDetailResponse)
async def get_course(course_id: int, db: DBSession):
    """Get a course with its category, roadmaps and lessons."""
    return await course_service.get_course_details(db, course_id)


@router.patch("/{course_id}", response_model=CourseResponse)
async def update_course(course_id: int, data: CourseUpdate, db: DBSession):
    return await course_service.update_course(db, course_id, data)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(course_id: int, db: DBSession) -> None:
    await course_service.delete_course(db, course_id)


@router.get("/{course_id}/lessons", response_model=list[LessonResponse])
async def list_course_lessons(course_id: int, db: DBSession) -> list:
    await course_service.get_course(db, course_id)
    return await lesson_service.list_course_lessons(db, course_id)
