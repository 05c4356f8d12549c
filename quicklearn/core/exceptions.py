"""Domain errors raised by the catalog and progress services.

All of them are caller-input errors. Routes let them propagate and the
handler registered in ``quicklearn.main`` renders them as 4xx responses.
"""

from fastapi import status


class QuickLearnError(Exception):
    """Base class for errors surfaced to the HTTP boundary."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidCategory(QuickLearnError):
    default_message = "Invalid category"


class InvalidRoadmap(QuickLearnError):
    default_message = "Invalid roadmap"


class DuplicateName(QuickLearnError):
    default_message = "Name already exists"


class UnknownLesson(QuickLearnError):
    default_message = "Unknown lesson"


class CategoryInUse(QuickLearnError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Category is still in use"


class NotFound(QuickLearnError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class CourseNotFound(NotFound):
    default_message = "Course not found"


class RoadmapNotFound(NotFound):
    default_message = "Roadmap not found"


class LessonNotFound(NotFound):
    default_message = "Lesson not found"


class CategoryNotFound(NotFound):
    default_message = "Category not found"


class UnknownUser(QuickLearnError):
    default_message = "Unknown user"


class ProgressNotFound(NotFound):
    default_message = "Lesson is not completed"
