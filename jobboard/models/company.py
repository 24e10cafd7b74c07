"""
Company Model - SQLAlchemy ORM model for hiring companies

A company owns zero or more job postings. Companies are addressed
publicly by their URL-safe slug.
"""

from sqlalchemy import Column, String, Text, Boolean, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from jobboard.database import Base
import uuid


class Company(Base):
    """
    Hiring company.

    Attributes:
        id: UUID primary key
        name: Display name
        slug: URL-safe unique identifier used by company pages
        logo_url: Logo image URL (nullable)
        website: Company website (nullable)
        description: About text (nullable)
        is_verified: Whether the company identity has been verified
    """

    __tablename__ = "companies"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False, index=True)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    logo_url = Column(String(2000), nullable=True)
    website = Column(String(2000), nullable=True)
    description = Column(Text, nullable=True)
    is_verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    jobs = relationship("Job", back_populates="company")
