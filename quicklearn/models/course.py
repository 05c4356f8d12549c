"""Course model."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quicklearn.core.database import Base
from quicklearn.models.base import UniqueNameMixin, utcnow
from quicklearn.models.roadmap import roadmap_courses


class Course(UniqueNameMixin, Base):
    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(primary_key=True)
    description: Mapped[str | None] = mapped_column(Text)
    course_category_id: Mapped[int] = mapped_column(
        ForeignKey("course_categories.id", ondelete="RESTRICT")
    )
    created_by_user_id: Mapped[int] = mapped_column(ForeignKey("users.id"))

    course_category = relationship("CourseCategory")
    roadmaps = relationship(
        "Roadmap",
        secondary=roadmap_courses,
        back_populates="courses",
        order_by="Roadmap.id",
        passive_deletes=True,
    )
    lessons = relationship(
        "Lesson",
        back_populates="course",
        order_by="Lesson.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)
