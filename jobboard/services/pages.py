"""
Page Assembly - everything one page render needs, in one call

Each builder issues its independent reads concurrently. If any read
fails the whole page fails; there is no partial result.

    job listing     → list_jobs ∥ count_jobs → pagination
    home            → featured ∥ categories ∥ job listing
    job detail      → job → related jobs
    company list    → companies ∥ company count ∥ job count → per-company job counts
    company detail  → company → jobs ∥ job count
"""

import asyncio
from typing import Any, Optional

from jobboard.config import Settings
from jobboard.schemas import (
    CategoryResponse,
    CompanyDetailResponse,
    CompanyDirectoryResponse,
    CompanyResponse,
    CompanyWithJobCount,
    HomePageResponse,
    JobDetailResponse,
    JobListResponse,
    JobResponse,
    PageMeta,
    PaginationResponse,
)
from jobboard.services.filters import JobFilters
from jobboard.services.formatting import (
    company_meta_description,
    format_job_type,
    format_posted_date,
    format_salary_range,
    job_meta_description,
    job_page_title,
    share_links,
)
from jobboard.services.markdown import render_description
from jobboard.services.pagination import Pagination, normalize_page, page_offset, paginate
from jobboard.services.repository import JobBoardRepository

NO_MATCHES_MESSAGE = "No jobs match your filters. Try adjusting your search criteria."
NO_JOBS_MESSAGE = "No jobs available at the moment. Check back soon!"


def _pagination_response(pagination: Pagination) -> PaginationResponse:
    return PaginationResponse(
        current_page=pagination.current_page,
        page_size=pagination.page_size,
        total_items=pagination.total_items,
        total_pages=pagination.total_pages,
        previous_page=pagination.previous_page,
        next_page=pagination.next_page,
        pages=pagination.pages,
        is_paginated=pagination.is_paginated,
    )


class JobBoardPages:
    """
    Builds page payloads from repository reads.

    Attributes:
        repository: Data access used for every read
        settings: Page sizes and site name
    """

    def __init__(self, repository: JobBoardRepository, settings: Settings):
        self.repository = repository
        self.settings = settings

    async def job_listing(self, filters: JobFilters, page: Any = 1) -> JobListResponse:
        page_number = normalize_page(page)
        page_size = self.settings.jobs_per_page

        jobs, total = await asyncio.gather(
            self.repository.list_jobs(filters, limit=page_size, offset=page_offset(page_number, page_size)),
            self.repository.count_jobs(filters),
        )

        has_filters = filters.has_filters()
        return JobListResponse(
            jobs=[JobResponse.model_validate(job) for job in jobs],
            total=total,
            has_filters=has_filters,
            heading="Search Results" if has_filters else "Latest Jobs",
            empty_message=None if jobs else (NO_MATCHES_MESSAGE if has_filters else NO_JOBS_MESSAGE),
            pagination=_pagination_response(paginate(total, page_size, page_number)),
        )

    async def home(self, filters: JobFilters, page: Any = 1) -> HomePageResponse:
        async def featured():
            # The featured strip is hidden while the visitor is filtering
            if filters.has_filters():
                return []
            return await self.repository.list_featured_jobs(self.settings.featured_jobs_limit)

        featured_jobs, categories, listing = await asyncio.gather(
            featured(),
            self.repository.list_categories(),
            self.job_listing(filters, page),
        )

        return HomePageResponse(
            featured_jobs=[JobResponse.model_validate(job) for job in featured_jobs],
            categories=[CategoryResponse.model_validate(category) for category in categories],
            listing=listing,
        )

    async def job_detail(self, job_id: str, job_url: str = "") -> Optional[JobDetailResponse]:
        job = await self.repository.get_job_by_id(job_id)
        if not job:
            return None

        related = await self.repository.list_related_jobs(job, limit=self.settings.related_jobs_limit)
        site_name = self.settings.site_name

        return JobDetailResponse(
            job=JobResponse.model_validate(job),
            description_blocks=render_description(job.description),
            salary_display=format_salary_range(job.salary_min, job.salary_max),
            job_type_label=format_job_type(job.job_type),
            posted_date=format_posted_date(job.posted_at),
            share_links=share_links(job.title, job.company.name, job_url),
            meta=PageMeta(
                title=job_page_title(job.title, job.company.name, site_name),
                description=job_meta_description(
                    job.title,
                    job.company.name,
                    job.salary_min,
                    job.salary_max,
                    job.location,
                    site_name,
                ),
            ),
            related_jobs=[JobResponse.model_validate(r) for r in related],
        )

    async def company_directory(self, page: Any = 1) -> CompanyDirectoryResponse:
        page_number = normalize_page(page)
        page_size = self.settings.companies_per_page

        companies, total_companies, total_jobs = await asyncio.gather(
            self.repository.list_companies(limit=page_size, offset=page_offset(page_number, page_size)),
            self.repository.count_companies(),
            self.repository.count_jobs(),
        )

        job_counts = await asyncio.gather(
            *[self.repository.count_jobs(JobFilters(company_id=company.id)) for company in companies]
        )

        return CompanyDirectoryResponse(
            companies=[
                CompanyWithJobCount(
                    **CompanyResponse.model_validate(company).model_dump(),
                    job_count=job_count,
                )
                for company, job_count in zip(companies, job_counts)
            ],
            total_companies=total_companies,
            total_jobs=total_jobs,
            pagination=_pagination_response(paginate(total_companies, page_size, page_number)),
        )

    async def company_detail(self, slug: str) -> Optional[CompanyDetailResponse]:
        company = await self.repository.get_company_by_slug(slug)
        if not company:
            return None

        filters = JobFilters(company_id=company.id)
        jobs, job_count = await asyncio.gather(
            self.repository.list_jobs(filters, limit=self.settings.company_jobs_limit),
            self.repository.count_jobs(filters),
        )

        return CompanyDetailResponse(
            company=CompanyResponse.model_validate(company),
            jobs=[JobResponse.model_validate(job) for job in jobs],
            job_count=job_count,
            meta=PageMeta(
                title=f"{company.name} - {self.settings.site_name}",
                description=company_meta_description(company.name, company.description),
            ),
        )
