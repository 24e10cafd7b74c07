from fastapi import APIRouter, Depends, HTTPException, Query, Request
from typing import Optional

from jobboard.api.deps import get_pages, get_repository
from jobboard.schemas import HomePageResponse, JobDetailResponse, JobListResponse, JobResponse
from jobboard.services.filters import JobFilters
from jobboard.services.pages import JobBoardPages
from jobboard.services.repository import JobBoardRepository

router = APIRouter()


def get_job_filters(
    search: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    job_type: Optional[str] = Query(None, alias="jobType"),
    location: Optional[str] = Query(None),
    salary_min: Optional[str] = Query(None, alias="salaryMin"),
    salary_max: Optional[str] = Query(None, alias="salaryMax"),
) -> JobFilters:
    # Raw strings on purpose: malformed values are dropped, not rejected
    return JobFilters.from_query_params(
        search=search,
        category=category,
        job_type=job_type,
        location=location,
        salary_min=salary_min,
        salary_max=salary_max,
    )


@router.get("/home", response_model=HomePageResponse)
async def home_page(
    page: Optional[str] = Query(None),
    filters: JobFilters = Depends(get_job_filters),
    pages: JobBoardPages = Depends(get_pages),
):
    return await pages.home(filters, page)


@router.get("/jobs", response_model=JobListResponse)
async def list_jobs(
    page: Optional[str] = Query(None),
    filters: JobFilters = Depends(get_job_filters),
    pages: JobBoardPages = Depends(get_pages),
):
    return await pages.job_listing(filters, page)


@router.get("/jobs/featured", response_model=list[JobResponse])
async def list_featured_jobs(
    limit: int = Query(6, ge=1, le=50),
    repository: JobBoardRepository = Depends(get_repository),
):
    jobs = await repository.list_featured_jobs(limit)
    return [JobResponse.model_validate(job) for job in jobs]


@router.get("/jobs/{job_id}", response_model=JobDetailResponse)
async def get_job(
    job_id: str,
    request: Request,
    pages: JobBoardPages = Depends(get_pages),
):
    detail = await pages.job_detail(job_id, job_url=str(request.url))
    if not detail:
        raise HTTPException(status_code=404, detail="Job not found")
    return detail
