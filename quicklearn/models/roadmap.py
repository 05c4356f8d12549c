"""Roadmap model and its course join table."""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quicklearn.core.database import Base
from quicklearn.models.base import UniqueNameMixin, utcnow

roadmap_courses = Table(
    "roadmap_courses",
    Base.metadata,
    Column("roadmap_id", ForeignKey("roadmaps.id", ondelete="CASCADE"), primary_key=True),
    Column("course_id", ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True),
)


class Roadmap(UniqueNameMixin, Base):
    __tablename__ = "roadmaps"

    id: Mapped[int] = mapped_column(primary_key=True)
    description: Mapped[str] = mapped_column(String(5000), default="")
    roadmap_category_id: Mapped[int] = mapped_column(
        ForeignKey("roadmap_categories.id", ondelete="RESTRICT")
    )
    created_by_user_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
    achieved: Mapped[bool] = mapped_column(Boolean, default=False)

    roadmap_category = relationship("RoadmapCategory")
    # Join rows are removed by the database cascade, not loaded for deletion
    courses = relationship(
        "Course",
        secondary=roadmap_courses,
        back_populates="roadmaps",
        order_by="Course.id",
        passive_deletes=True,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)
