"""
Job Model - SQLAlchemy ORM model for job postings

Every job belongs to exactly one company. Inactive jobs stay in the
table but never appear in listings, counts or detail lookups.

Listing order:
    featured first → newest posted_at first → id (stable window)
"""

from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Column, String, Integer, Text, Boolean, DateTime, JSON, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from jobboard.database import Base
import uuid


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    FREELANCE = "freelance"
    INTERNSHIP = "internship"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Job(Base):
    """
    Job posting entity.

    Attributes:
        id: UUID primary key
        company_id: Owning company (required)
        title: Job title (max 500 chars)
        description: Markdown-subset description text
        salary_min/max: Salary range in whole currency units (nullable)
        location: Free-text location (nullable)
        job_type: One of JobType values
        category: Category slug (nullable, not enforced)
        tags: JSON list of tag strings
        apply_url: External application URL
        is_featured: Promoted placement flag (indexed)
        is_active: Listing visibility flag (indexed)
        posted_at: Posting timestamp, drives recency ordering
        expires_at: Optional expiry timestamp
    """

    __tablename__ = "jobs"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    company_id = Column(String, ForeignKey("companies.id"), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False, default="")
    salary_min = Column(Integer, nullable=True)
    salary_max = Column(Integer, nullable=True)
    location = Column(String(500), nullable=True)
    job_type = Column(String(20), nullable=False, default=JobType.FULL_TIME.value)
    category = Column(String(255), nullable=True, index=True)
    tags = Column(JSON, nullable=False, default=list)
    apply_url = Column(String(2000), nullable=False)
    is_featured = Column(Boolean, nullable=False, default=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    posted_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    company = relationship("Company", back_populates="jobs")
