from jobboard.schemas.company import CompanyCreate, CompanyResponse, CompanyWithJobCount
from jobboard.schemas.category import CategoryCreate, CategoryResponse
from jobboard.schemas.job import JobCreate, JobResponse
from jobboard.schemas.job_alert import JobAlertFilters, JobAlertCreate, JobAlertUpdate, JobAlertResponse
from jobboard.schemas.pages import (
    PaginationResponse,
    PageMeta,
    JobListResponse,
    HomePageResponse,
    JobDetailResponse,
    CompanyDirectoryResponse,
    CompanyDetailResponse,
)

__all__ = [
    "CompanyCreate",
    "CompanyResponse",
    "CompanyWithJobCount",
    "CategoryCreate",
    "CategoryResponse",
    "JobCreate",
    "JobResponse",
    "JobAlertFilters",
    "JobAlertCreate",
    "JobAlertUpdate",
    "JobAlertResponse",
    "PaginationResponse",
    "PageMeta",
    "JobListResponse",
    "HomePageResponse",
    "JobDetailResponse",
    "CompanyDirectoryResponse",
    "CompanyDetailResponse",
]
