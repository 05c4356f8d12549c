"""Category models grouping roadmaps and courses."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column

from quicklearn.core.database import Base
from quicklearn.models.base import UniqueNameMixin, utcnow


class RoadmapCategory(UniqueNameMixin, Base):
    __tablename__ = "roadmap_categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)


class CourseCategory(UniqueNameMixin, Base):
    __tablename__ = "course_categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
