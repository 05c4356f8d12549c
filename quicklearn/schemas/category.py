"""Category schemas (shared by roadmap and course categories)."""

from datetime import datetime

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    """Create a category."""

    name: str = Field(min_length=1, max_length=255)


class CategoryUpdate(BaseModel):
    """Rename a category."""

    name: str | None = Field(default=None, min_length=1, max_length=255)


class CategoryResponse(BaseModel):
    """Category response."""

    id: int
    name: str
    created_at: datetime

    class Config:
        from_attributes = True
