from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional

from jobboard.models.job import JobType
from jobboard.models.job_alert import AlertFrequency

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class JobAlertFilters(BaseModel):
    keywords: Optional[str] = None
    job_types: Optional[list[JobType]] = None
    categories: Optional[list[str]] = None
    locations: Optional[list[str]] = None
    salary_min: Optional[int] = Field(None, ge=0)


class JobAlertCreate(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=320)
    filters: JobAlertFilters = Field(default_factory=JobAlertFilters)
    frequency: AlertFrequency = AlertFrequency.DAILY
    is_active: bool = True

    @field_validator("email", mode="before")
    @classmethod
    def _normalize_email(cls, v):
        # Stored and looked up in this form
        if isinstance(v, str):
            return v.strip().lower()
        return v


class JobAlertUpdate(BaseModel):
    filters: Optional[JobAlertFilters] = None
    frequency: Optional[AlertFrequency] = None
    is_active: Optional[bool] = None


class JobAlertResponse(BaseModel):
    id: str
    email: str
    filters: JobAlertFilters
    frequency: AlertFrequency
    is_active: bool
    last_sent_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
