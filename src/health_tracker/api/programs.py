"""Fitness program endpoints."""

from __future__ import annotations

from dataclasses import asdict
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from health_tracker.api.deps import current_user_id, require_api_token
from health_tracker.api.models import GenerateProgramRequest, SaveProgramRequest
from health_tracker.domain.metrics import NutritionTargets, UserMetrics, parse_goal
from health_tracker.domain.programs import Exercise, FitnessProgram

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(
    prefix="/programs", tags=["programs"], dependencies=[Depends(require_api_token)]
)


@router.post("/generate")
async def generate_program(
    body: GenerateProgramRequest,
    request: Request,
    _user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return an unsaved program preview with display metrics."""
    container: AppContainer = request.app.state.container
    metrics = UserMetrics(
        height=body.height,
        weight=body.weight,
        age=body.age,
        goal=parse_goal(body.goal),
    )
    program = container.program_service.generate(metrics)
    body_metrics = container.program_service.body_metrics(metrics)
    return {**asdict(program), "metrics": asdict(body_metrics)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def save_program(
    body: SaveProgramRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Persist a previewed program."""
    container: AppContainer = request.app.state.container
    program = FitnessProgram(
        goal=body.goal,
        exercises=[
            Exercise(
                name=item.name,
                sets=item.sets,
                reps=item.reps,
                description=item.description,
            )
            for item in body.exercises
        ],
        nutrition=NutritionTargets(
            calories=body.nutrition.calories,
            protein=body.nutrition.protein,
            carbs=body.nutrition.carbs,
            fat=body.nutrition.fat,
            recommendations=list(body.nutrition.recommendations),
        ),
        created_at=body.created_at or datetime.now(tz=UTC),
    )
    saved = container.program_service.save_program(user_id, program)
    return asdict(saved)


@router.get("")
async def list_programs(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return saved programs, newest first."""
    container: AppContainer = request.app.state.container
    programs = container.program_service.list_programs(user_id)
    return {"programs": [asdict(program) for program in programs]}


@router.delete("/{program_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_program(
    program_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> Response:
    """Delete a saved program."""
    container: AppContainer = request.app.state.container
    if not container.program_service.delete_program(user_id, program_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
