"""Lesson API routes."""

from fastapi import APIRouter, status

from quicklearn.api.deps import CurrentUser, DBSession
from quicklearn.schemas import LessonCreate, LessonResponse, LessonUpdate
from quicklearn.services import lesson_service

router = APIRouter(prefix="/lessons", tags=["lessons"])


@router.post("", response_model=LessonResponse, status_code=status.HTTP_201_CREATED)
async def create_lesson(data: LessonCreate, db: DBSession, user_id: CurrentUser):
    return await lesson_service.create_lesson(
        db,
        requester_id=user_id,
        course_id=data.course_id,
        name=data.name,
        content=data.content,
    )


@router.get("/{lesson_id}", response_model=LessonResponse)
async def get_lesson(lesson_id: int, db: DBSession):
    return await lesson_service.get_lesson(db, lesson_id)


@router.patch("/{lesson_id}", response_model=LessonResponse)
async def update_lesson(lesson_id: int, data: LessonUpdate, db: DBSession):
    return await lesson_service.update_lesson(db, lesson_id, data)


@router.delete("/{lesson_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_lesson(lesson_id: int, db: DBSession) -> None:
    """Delete a lesson together with every user's completion of it."""
    await lesson_service.delete_lesson(db, lesson_id)
