"""Shared fixtures: an in-memory SQLite database per test."""

from collections.abc import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from quicklearn import models  # noqa: F401  registers tables
from quicklearn.core.database import Base, make_engine
from quicklearn.models import CourseCategory, Roadmap, RoadmapCategory, User


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = make_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seed_user(test_session: AsyncSession) -> User:
    """Create the admin/learner used by most tests (id 1)."""
    user = User(id=1, username="admin", email="admin@example.com")
    test_session.add(user)
    await test_session.flush()
    return user


@pytest_asyncio.fixture
async def course_category(test_session: AsyncSession) -> CourseCategory:
    category = CourseCategory(id=1, name="Tech")
    test_session.add(category)
    await test_session.flush()
    return category


@pytest_asyncio.fixture
async def roadmap_category(test_session: AsyncSession) -> RoadmapCategory:
    category = RoadmapCategory(id=1, name="Engineering")
    test_session.add(category)
    await test_session.flush()
    return category


@pytest_asyncio.fixture
async def seed_roadmap(
    test_session: AsyncSession, seed_user: User, roadmap_category: RoadmapCategory
) -> Roadmap:
    roadmap = Roadmap(
        id=10,
        name="Backend",
        description="Server-side development",
        roadmap_category_id=roadmap_category.id,
        created_by_user_id=seed_user.id,
    )
    test_session.add(roadmap)
    await test_session.flush()
    return roadmap
