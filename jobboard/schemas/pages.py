"""Response models for page-level endpoints."""

from pydantic import BaseModel
from typing import Any, Optional, Union

from jobboard.schemas.category import CategoryResponse
from jobboard.schemas.company import CompanyResponse, CompanyWithJobCount
from jobboard.schemas.job import JobResponse


class PaginationResponse(BaseModel):
    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    previous_page: Optional[int] = None
    next_page: Optional[int] = None
    pages: list[Union[int, str]]
    is_paginated: bool


class PageMeta(BaseModel):
    title: str
    description: str


class JobListResponse(BaseModel):
    jobs: list[JobResponse]
    total: int
    has_filters: bool
    heading: str
    empty_message: Optional[str] = None
    pagination: PaginationResponse


class HomePageResponse(BaseModel):
    featured_jobs: list[JobResponse]
    categories: list[CategoryResponse]
    listing: JobListResponse


class JobDetailResponse(BaseModel):
    job: JobResponse
    description_blocks: list[dict[str, Any]]
    salary_display: Optional[str] = None
    job_type_label: str
    posted_date: str
    share_links: dict[str, str]
    meta: PageMeta
    related_jobs: list[JobResponse]


class CompanyDirectoryResponse(BaseModel):
    companies: list[CompanyWithJobCount]
    total_companies: int
    total_jobs: int
    pagination: PaginationResponse


class CompanyDetailResponse(BaseModel):
    company: CompanyResponse
    jobs: list[JobResponse]
    job_count: int
    meta: PageMeta
