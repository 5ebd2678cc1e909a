"""Program generation and persistence services."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from health_tracker.domain.metrics import BodyMetrics, UserMetrics
from health_tracker.domain.programs import FitnessProgram
from health_tracker.services.calculator import calculate_body_metrics, calculate_targets
from health_tracker.services.templates import select_template

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ProgramGenerator:
    """Build unsaved programs from body metrics."""

    clock: Callable[[], datetime] = field(default=_utc_now)

    def generate(self, metrics: UserMetrics) -> FitnessProgram:
        """Return a program with computed targets and the goal's template."""
        targets = calculate_targets(metrics)
        template = select_template(metrics.goal)
        return FitnessProgram(
            goal=metrics.goal,
            exercises=template.exercises,
            nutrition=replace(targets, recommendations=template.recommendations),
            created_at=self.clock(),
        )


class ProgramRepository(Protocol):
    """Persistence interface for fitness programs."""

    def create_program(self, user_id: UUID, program: FitnessProgram) -> FitnessProgram:
        """Persist a program and return it with its identity."""

    def list_programs(self, user_id: UUID) -> list[FitnessProgram]:
        """Return a user's programs, newest first."""

    def get_latest_program(self, user_id: UUID) -> FitnessProgram | None:
        """Return the user's most recent program, if any."""

    def delete_program(self, user_id: UUID, program_id: UUID) -> bool:
        """Delete a user's program and report whether a row was removed."""


@dataclass
class ProgramService:
    """Application service for generating and saving programs."""

    repository: ProgramRepository
    generator: ProgramGenerator = field(default_factory=ProgramGenerator)

    def generate(self, metrics: UserMetrics) -> FitnessProgram:
        """Generate a program preview without saving it."""
        return self.generator.generate(metrics)

    def body_metrics(self, metrics: UserMetrics) -> BodyMetrics:
        """Return display metrics for the preview."""
        return calculate_body_metrics(metrics)

    def save_program(self, user_id: UUID, program: FitnessProgram) -> FitnessProgram:
        """Persist a previewed or reconstructed program."""
        saved = self.repository.create_program(user_id, program)
        _logger.info(
            "Saved fitness program: user_id=%s program_id=%s goal=%s",
            user_id,
            saved.id,
            saved.goal,
        )
        return saved

    def list_programs(self, user_id: UUID) -> list[FitnessProgram]:
        """Return saved programs, newest first."""
        return self.repository.list_programs(user_id)

    def get_latest(self, user_id: UUID) -> FitnessProgram | None:
        """Return the program whose targets drive daily analysis."""
        return self.repository.get_latest_program(user_id)

    def delete_program(self, user_id: UUID, program_id: UUID) -> bool:
        """Delete a program owned by the user."""
        deleted = self.repository.delete_program(user_id, program_id)
        if deleted:
            _logger.info(
                "Deleted fitness program: user_id=%s program_id=%s",
                user_id,
                program_id,
            )
        return deleted
