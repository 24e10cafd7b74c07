from fastapi import APIRouter, Depends

from jobboard.api.deps import get_repository
from jobboard.schemas import CategoryResponse
from jobboard.services.repository import JobBoardRepository

router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
async def list_categories(repository: JobBoardRepository = Depends(get_repository)):
    categories = await repository.list_categories()
    return [CategoryResponse.model_validate(category) for category in categories]
