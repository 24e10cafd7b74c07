from fastapi import APIRouter
from jobboard.api import alerts, categories, companies, jobs

api_router = APIRouter(prefix="/api")
api_router.include_router(jobs.router, tags=["jobs"])
api_router.include_router(companies.router, prefix="/companies", tags=["companies"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(alerts.router, prefix="/alerts", tags=["alerts"])
