from datetime import datetime, timedelta
from typing import Any
import uuid

import pytest
import pytest_asyncio

from jobboard.config import Settings
from jobboard.database import create_engine_from_settings, create_session_factory, init_db
from jobboard.models import Category, Company, Job
from jobboard.services.repository import SQLAlchemyRepository

BASE_TIME = datetime(2026, 1, 15, 12, 0, 0)


@pytest_asyncio.fixture
async def engine(settings):
    """Engine built the way the app builds it, on a fresh SQLite file with all tables created."""
    engine = create_engine_from_settings(settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def repository(session_factory):
    return SQLAlchemyRepository(session_factory)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'jobs.db'}",
        jobs_per_page=2,
        companies_per_page=2,
        featured_jobs_limit=2,
        related_jobs_limit=2,
        create_tables=False,
    )


@pytest.fixture
def seed(session_factory):
    """Insert ORM objects and commit them."""

    async def _seed(*objects: Any):
        async with session_factory() as session:
            session.add_all(objects)
            await session.commit()
        return objects

    return _seed


@pytest.fixture
def make_company():
    def _make(slug: str, **overrides: Any) -> Company:
        fields = {
            "id": f"company-{slug}",
            "name": slug.replace("-", " ").title(),
            "slug": slug,
            "is_verified": False,
        }
        fields.update(overrides)
        return Company(**fields)

    return _make


@pytest.fixture
def make_job():
    def _make(company: Company, title: str = "Python Developer", days_ago: int = 0, **overrides: Any) -> Job:
        fields = {
            "id": str(uuid.uuid4()),
            "company_id": company.id,
            "title": title,
            "description": "",
            "job_type": "full-time",
            "tags": [],
            "apply_url": "https://example.com/apply",
            "is_featured": False,
            "is_active": True,
            "posted_at": BASE_TIME - timedelta(days=days_ago),
        }
        fields.update(overrides)
        return Job(**fields)

    return _make


@pytest.fixture
def make_category():
    def _make(slug: str, name: str = None) -> Category:
        return Category(id=f"category-{slug}", slug=slug, name=name or slug.title())

    return _make
