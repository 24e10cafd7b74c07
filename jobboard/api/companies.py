from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from jobboard.api.deps import get_pages
from jobboard.schemas import CompanyDetailResponse, CompanyDirectoryResponse
from jobboard.services.pages import JobBoardPages

router = APIRouter()


@router.get("", response_model=CompanyDirectoryResponse)
async def list_companies(
    page: Optional[str] = Query(None),
    pages: JobBoardPages = Depends(get_pages),
):
    return await pages.company_directory(page)


@router.get("/{slug}", response_model=CompanyDetailResponse)
async def get_company(
    slug: str,
    pages: JobBoardPages = Depends(get_pages),
):
    detail = await pages.company_detail(slug)
    if not detail:
        raise HTTPException(status_code=404, detail="Company not found")
    return detail
