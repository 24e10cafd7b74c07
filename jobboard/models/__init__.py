from jobboard.models.company import Company
from jobboard.models.category import Category
from jobboard.models.job import Job, JobType
from jobboard.models.job_alert import JobAlert, AlertFrequency

__all__ = [
    "Company",
    "Category",
    "Job",
    "JobType",
    "JobAlert",
    "AlertFrequency",
]
