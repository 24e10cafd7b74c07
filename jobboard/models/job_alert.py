"""
Job Alert Model - email subscriptions to filtered job listings

Alerts are independent of jobs and companies. Matching and delivery
happen outside this service; here they are only created, listed,
updated and deleted.
"""

from enum import Enum

from sqlalchemy import Column, String, Boolean, DateTime, JSON
from sqlalchemy.sql import func
from jobboard.database import Base
import uuid


class AlertFrequency(str, Enum):
    INSTANT = "instant"
    DAILY = "daily"
    WEEKLY = "weekly"


class JobAlert(Base):
    """
    Attributes:
        email: Subscriber email (indexed)
        filters: JSON object with optional keywords, job_types,
            categories, locations and salary_min
        frequency: Delivery frequency (AlertFrequency value)
        is_active: Whether deliveries are enabled
        last_sent_at: Last delivery timestamp (nullable)
    """

    __tablename__ = "job_alerts"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(320), nullable=False, index=True)
    filters = Column(JSON, nullable=False, default=dict)
    frequency = Column(String(20), nullable=False, default=AlertFrequency.DAILY.value)
    is_active = Column(Boolean, nullable=False, default=True)
    last_sent_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
