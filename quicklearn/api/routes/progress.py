"""Progress routes for the current user."""

from fastapi import APIRouter, status

from quicklearn.api.deps import CurrentUser, DBSession
from quicklearn.core.exceptions import ProgressNotFound
from quicklearn.schemas import (
    CompletionRequest,
    CourseProgressGroup,
    ProgressResponse,
    ProgressRow,
)
from quicklearn.services import progress_service

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=list[CourseProgressGroup])
async def get_my_progress(db: DBSession, user_id: CurrentUser) -> list[CourseProgressGroup]:
    """Completed lessons of the current user grouped by course."""
    return await progress_service.get_grouped_progress(db, user_id)


@router.get("/rows", response_model=list[ProgressRow])
async def get_my_progress_rows(db: DBSession, user_id: CurrentUser) -> list[ProgressRow]:
    return await progress_service.get_progress_for_user(db, user_id)


@router.post("/lessons/{lesson_id}", response_model=ProgressResponse)
async def complete_lesson(
    lesson_id: int,
    db: DBSession,
    user_id: CurrentUser,
    data: CompletionRequest | None = None,
):
    """Mark a lesson completed. Repeating the call refreshes the date."""
    completed_date = data.completed_date if data else None
    return await progress_service.record_completion(db, user_id, lesson_id, completed_date)


@router.delete("/lessons/{lesson_id}", status_code=status.HTTP_204_NO_CONTENT)
async def uncomplete_lesson(lesson_id: int, db: DBSession, user_id: CurrentUser) -> None:
    removed = await progress_service.clear_completion(db, user_id, lesson_id)
    if not removed:
        raise ProgressNotFound(f"Lesson {lesson_id} is not completed")
