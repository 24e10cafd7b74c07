"""
Job Board Repository - data access over the relational store

The rest of the application only talks to ``JobBoardRepository``. The
SQLAlchemy implementation opens a fresh session per operation, so
independent reads for one page can be awaited together with
``asyncio.gather`` without sharing a session.

Error handling:
    - Missing single entities come back as ``None`` (or an empty list).
    - Any SQLAlchemy failure is logged and re-raised as ``StoreError``
      carrying the underlying message.

Usage:
    engine = create_engine_from_settings(settings)
    repository = SQLAlchemyRepository(create_session_factory(engine))
    jobs = await repository.list_jobs(JobFilters(search="python"), limit=10)
"""

import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import joinedload

from jobboard.exceptions import StoreError
from jobboard.middleware.metrics import track_store_query
from jobboard.models import Category, Company, Job, JobAlert
from jobboard.schemas.job_alert import JobAlertCreate, JobAlertUpdate
from jobboard.services.filters import JobFilters, build_job_predicates, compile_predicates

logger = logging.getLogger(__name__)


class JobBoardRepository(ABC):
    """Read/write operations the pages need from the store."""

    @abstractmethod
    async def list_jobs(self, filters: Optional[JobFilters] = None, limit: int = 20, offset: int = 0) -> List[Job]:
        """Active jobs matching ``filters`` with their company, featured then newest first."""

    @abstractmethod
    async def count_jobs(self, filters: Optional[JobFilters] = None) -> int:
        """Number of active jobs matching ``filters``."""

    @abstractmethod
    async def get_job_by_id(self, job_id: str) -> Optional[Job]:
        pass

    @abstractmethod
    async def list_companies(self, limit: int = 50, offset: int = 0) -> List[Company]:
        pass

    @abstractmethod
    async def count_companies(self) -> int:
        pass

    @abstractmethod
    async def list_verified_companies(self, limit: int = 50) -> List[Company]:
        pass

    @abstractmethod
    async def get_company_by_id(self, company_id: str) -> Optional[Company]:
        pass

    @abstractmethod
    async def get_company_by_slug(self, slug: str) -> Optional[Company]:
        pass

    @abstractmethod
    async def list_categories(self) -> List[Category]:
        pass

    @abstractmethod
    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        pass

    @abstractmethod
    async def create_job_alert(self, data: JobAlertCreate) -> JobAlert:
        pass

    @abstractmethod
    async def list_job_alerts_by_email(self, email: str) -> List[JobAlert]:
        """Active alerts for ``email``, newest first."""

    @abstractmethod
    async def update_job_alert(self, alert_id: str, data: JobAlertUpdate) -> Optional[JobAlert]:
        pass

    @abstractmethod
    async def delete_job_alert(self, alert_id: str) -> bool:
        pass

    # Convenience operations composed from the ones above

    async def list_featured_jobs(self, limit: int = 6) -> List[Job]:
        return await self.list_jobs(JobFilters(featured_only=True), limit=limit)

    async def list_related_jobs(self, job: Job, limit: int = 3) -> List[Job]:
        """
        Jobs in the same category as ``job``, excluding ``job`` itself.

        One extra row is fetched so that dropping the current job still
        leaves ``limit`` results when enough exist.
        """
        candidates = await self.list_jobs(JobFilters(category=job.category), limit=limit + 1)
        return [candidate for candidate in candidates if candidate.id != job.id][:limit]

    async def list_jobs_by_company_slug(self, slug: str, limit: int = 20) -> List[Job]:
        company = await self.get_company_by_slug(slug)
        if not company:
            return []
        return await self.list_jobs(JobFilters(company_id=company.id), limit=limit)

    async def deactivate_job_alert(self, alert_id: str) -> Optional[JobAlert]:
        return await self.update_job_alert(alert_id, JobAlertUpdate(is_active=False))


class SQLAlchemyRepository(JobBoardRepository):
    """
    ``JobBoardRepository`` backed by SQLAlchemy's asyncio ORM.

    Attributes:
        session_factory: Factory producing one AsyncSession per operation
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _session(self, operation: str, action: str) -> AsyncIterator[AsyncSession]:
        async with track_store_query(operation):
            try:
                async with self.session_factory() as session:
                    yield session
            except SQLAlchemyError as e:
                logger.error(f"Store error in {operation}: {e}")
                raise StoreError(action, str(e)) from e

    # ==================== Jobs ====================

    async def list_jobs(self, filters: Optional[JobFilters] = None, limit: int = 20, offset: int = 0) -> List[Job]:
        clauses = compile_predicates(build_job_predicates(filters), Job)
        query = (
            select(Job)
            .options(joinedload(Job.company, innerjoin=True))
            .where(*clauses)
            .order_by(Job.is_featured.desc(), Job.posted_at.desc(), Job.id)
            .offset(offset)
            .limit(limit)
        )

        async with self._session("list_jobs", "fetch jobs") as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def count_jobs(self, filters: Optional[JobFilters] = None) -> int:
        clauses = compile_predicates(build_job_predicates(filters), Job)
        query = select(func.count(Job.id)).where(*clauses)

        async with self._session("count_jobs", "count jobs") as session:
            result = await session.execute(query)
            return result.scalar() or 0

    async def get_job_by_id(self, job_id: str) -> Optional[Job]:
        query = (
            select(Job)
            .options(joinedload(Job.company, innerjoin=True))
            .where(Job.id == job_id, Job.is_active.is_(True))
        )

        async with self._session("get_job_by_id", "fetch job") as session:
            result = await session.execute(query)
            return result.scalar_one_or_none()

    # ==================== Companies ====================

    async def list_companies(self, limit: int = 50, offset: int = 0) -> List[Company]:
        query = select(Company).order_by(Company.name, Company.id).offset(offset).limit(limit)

        async with self._session("list_companies", "fetch companies") as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def list_verified_companies(self, limit: int = 50) -> List[Company]:
        query = select(Company).where(Company.is_verified.is_(True)).order_by(Company.name).limit(limit)

        async with self._session("list_verified_companies", "fetch verified companies") as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def count_companies(self) -> int:
        async with self._session("count_companies", "count companies") as session:
            result = await session.execute(select(func.count(Company.id)))
            return result.scalar() or 0

    async def get_company_by_id(self, company_id: str) -> Optional[Company]:
        async with self._session("get_company_by_id", "fetch company") as session:
            result = await session.execute(select(Company).where(Company.id == company_id))
            return result.scalar_one_or_none()

    async def get_company_by_slug(self, slug: str) -> Optional[Company]:
        async with self._session("get_company_by_slug", "fetch company") as session:
            result = await session.execute(select(Company).where(Company.slug == slug))
            return result.scalar_one_or_none()

    # ==================== Categories ====================

    async def list_categories(self) -> List[Category]:
        async with self._session("list_categories", "fetch categories") as session:
            result = await session.execute(select(Category).order_by(Category.name))
            return list(result.scalars().all())

    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        async with self._session("get_category_by_slug", "fetch category") as session:
            result = await session.execute(select(Category).where(Category.slug == slug))
            return result.scalar_one_or_none()

    # ==================== Job Alerts ====================

    async def create_job_alert(self, data: JobAlertCreate) -> JobAlert:
        alert = JobAlert(
            email=data.email,
            filters=data.filters.model_dump(mode="json", exclude_none=True),
            frequency=data.frequency.value,
            is_active=data.is_active,
        )

        async with self._session("create_job_alert", "create job alert") as session:
            session.add(alert)
            await session.commit()
            await session.refresh(alert)
            logger.info(f"Created job alert {alert.id} ({alert.frequency})")
            return alert

    async def list_job_alerts_by_email(self, email: str) -> List[JobAlert]:
        query = (
            select(JobAlert)
            .where(JobAlert.email == email.strip().lower(), JobAlert.is_active.is_(True))
            .order_by(JobAlert.created_at.desc())
        )

        async with self._session("list_job_alerts_by_email", "fetch job alerts") as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def update_job_alert(self, alert_id: str, data: JobAlertUpdate) -> Optional[JobAlert]:
        updates = data.model_dump(mode="json", exclude_unset=True)
        if "filters" in updates and updates["filters"] is not None:
            updates["filters"] = data.filters.model_dump(mode="json", exclude_none=True)

        async with self._session("update_job_alert", "update job alert") as session:
            result = await session.execute(select(JobAlert).where(JobAlert.id == alert_id))
            alert = result.scalar_one_or_none()
            if not alert:
                return None

            for field, value in updates.items():
                if value is not None:
                    setattr(alert, field, value)

            await session.commit()
            await session.refresh(alert)
            return alert

    async def delete_job_alert(self, alert_id: str) -> bool:
        async with self._session("delete_job_alert", "delete job alert") as session:
            result = await session.execute(select(JobAlert).where(JobAlert.id == alert_id))
            alert = result.scalar_one_or_none()
            if not alert:
                return False

            await session.delete(alert)
            await session.commit()
            logger.info(f"Deleted job alert {alert_id}")
            return True
