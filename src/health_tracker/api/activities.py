"""Daily activity endpoints."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from health_tracker.api.deps import current_user_id, require_api_token
from health_tracker.api.models import LogDayRequest
from health_tracker.domain.activity import DailyIntake

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(
    prefix="/activities",
    tags=["activities"],
    dependencies=[Depends(require_api_token)],
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def log_day(
    body: LogDayRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Analyze and store a day's entry against the latest program."""
    container: AppContainer = request.app.state.container
    intake = DailyIntake(
        calories=body.actual_calories,
        protein=body.actual_protein,
        carbs=body.actual_carbs,
        fat=body.actual_fat,
        water_intake=body.water_intake,
        sleep_hours=body.sleep_hours,
    )
    log = container.activity_service.log_day(user_id, body.date, intake)
    return asdict(log)


@router.get("")
async def list_logs(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return analyzed nutrition logs, newest first."""
    container: AppContainer = request.app.state.container
    logs = container.activity_service.list_logs(user_id)
    return {"logs": [asdict(log) for log in logs]}


@router.get("/{day}")
async def get_day(
    day: date, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the stored activity and log for a day."""
    container: AppContainer = request.app.state.container
    record = container.activity_service.get_day(user_id, day)
    if record.activity is None and record.log is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {
        "activity": asdict(record.activity) if record.activity else None,
        "log": asdict(record.log) if record.log else None,
    }
