"""Progress tracking schemas."""

from datetime import datetime

from pydantic import BaseModel


class CompletionRequest(BaseModel):
    """Mark a lesson completed; defaults to now when no date is given."""

    completed_date: datetime | None = None


class ProgressResponse(BaseModel):
    """A stored completion record."""

    id: int
    user_id: int
    lesson_id: int
    completed_date: datetime

    class Config:
        from_attributes = True


class ProgressRow(BaseModel):
    """Flat progress row: which course/lesson was completed and when."""

    course_id: int
    lesson_id: int
    completed_date: datetime


class LessonCompletion(BaseModel):
    lesson_id: int
    completed_date: datetime


class CourseProgressGroup(BaseModel):
    """Completed lessons of one course, as the dashboard consumes them."""

    course_id: int
    lessons: list[LessonCompletion]
