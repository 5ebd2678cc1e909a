"""Appointment endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from health_tracker.api.deps import current_user_id, require_api_token
from health_tracker.api.models import AppointmentRequest

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(
    prefix="/appointments",
    tags=["appointments"],
    dependencies=[Depends(require_api_token)],
)


@router.get("")
async def list_appointments(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return appointments in calendar order."""
    container: AppContainer = request.app.state.container
    appointments = container.appointment_service.list_appointments(user_id)
    return {"appointments": [asdict(item) for item in appointments]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_appointment(
    body: AppointmentRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Book an appointment."""
    container: AppContainer = request.app.state.container
    appointment = container.appointment_service.create(
        user_id, body.date, body.time, body.description
    )
    return asdict(appointment)


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_appointment(
    appointment_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> Response:
    """Cancel an appointment owned by the user."""
    container: AppContainer = request.app.state.container
    if not container.appointment_service.delete(user_id, appointment_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
