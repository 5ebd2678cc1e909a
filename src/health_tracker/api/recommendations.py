"""Recommendation and dashboard endpoints."""

from __future__ import annotations

from dataclasses import asdict
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from health_tracker.api.deps import current_user_id, require_api_token

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(tags=["recommendations"], dependencies=[Depends(require_api_token)])


@router.get("/recommendations")
async def list_recommendations(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return stored recommendation cards."""
    container: AppContainer = request.app.state.container
    cards = container.recommendation_service.list_recommendations(user_id)
    return {"recommendations": [asdict(card) for card in cards]}


@router.post("/recommendations/refresh")
async def refresh_recommendations(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Regenerate recommendation cards from the latest data."""
    container: AppContainer = request.app.state.container
    cards = container.recommendation_service.refresh(user_id)
    return {"recommendations": [asdict(card) for card in cards]}


@router.get("/dashboard")
async def dashboard(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return dashboard counts and highlights."""
    container: AppContainer = request.app.state.container
    today = datetime.now(tz=UTC).date()
    return asdict(container.dashboard_service.get_summary(user_id, today))
