from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from jobboard.models.job import JobType
from jobboard.schemas.company import CompanyResponse


class JobBase(BaseModel):
    title: str
    description: str = ""
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    location: Optional[str] = None
    job_type: JobType = JobType.FULL_TIME
    category: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    apply_url: str
    is_featured: bool = False
    is_active: bool = True
    posted_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None


class JobCreate(JobBase):
    company_id: str


class JobResponse(JobBase):
    id: str
    company_id: str
    company: CompanyResponse

    class Config:
        from_attributes = True
