"""Lesson schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class LessonCreate(BaseModel):
    """Create a lesson inside a course."""

    course_id: int
    name: str = Field(min_length=1, max_length=255)
    content: str = ""


class LessonUpdate(BaseModel):
    """Update a lesson."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = None


class LessonResponse(BaseModel):
    """Lesson response."""

    id: int
    course_id: int
    name: str
    content: str
    created_by_user_id: int
    created_at: datetime

    class Config:
        from_attributes = True
