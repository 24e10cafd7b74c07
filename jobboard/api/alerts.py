from fastapi import APIRouter, Depends, HTTPException, Query, Response

from jobboard.api.deps import get_repository
from jobboard.schemas import JobAlertCreate, JobAlertResponse, JobAlertUpdate
from jobboard.services.repository import JobBoardRepository

router = APIRouter()


@router.post("", response_model=JobAlertResponse, status_code=201)
async def create_alert(
    alert: JobAlertCreate,
    repository: JobBoardRepository = Depends(get_repository),
):
    created = await repository.create_job_alert(alert)
    return JobAlertResponse.model_validate(created)


@router.get("", response_model=list[JobAlertResponse])
async def list_alerts(
    email: str = Query(..., min_length=3),
    repository: JobBoardRepository = Depends(get_repository),
):
    alerts = await repository.list_job_alerts_by_email(email)
    return [JobAlertResponse.model_validate(alert) for alert in alerts]


@router.patch("/{alert_id}", response_model=JobAlertResponse)
async def update_alert(
    alert_id: str,
    update: JobAlertUpdate,
    repository: JobBoardRepository = Depends(get_repository),
):
    alert = await repository.update_job_alert(alert_id, update)
    if not alert:
        raise HTTPException(status_code=404, detail="Job alert not found")
    return JobAlertResponse.model_validate(alert)


@router.post("/{alert_id}/deactivate", response_model=JobAlertResponse)
async def deactivate_alert(
    alert_id: str,
    repository: JobBoardRepository = Depends(get_repository),
):
    alert = await repository.deactivate_job_alert(alert_id)
    if not alert:
        raise HTTPException(status_code=404, detail="Job alert not found")
    return JobAlertResponse.model_validate(alert)


@router.delete("/{alert_id}", status_code=204)
async def delete_alert(
    alert_id: str,
    repository: JobBoardRepository = Depends(get_repository),
):
    if not await repository.delete_job_alert(alert_id):
        raise HTTPException(status_code=404, detail="Job alert not found")
    return Response(status_code=204)
