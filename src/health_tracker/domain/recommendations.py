"""Recommendation card models."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class RecommendationCategory(StrEnum):
    """Category shown on a recommendation card."""

    NUTRITION = "nutrition"
    EXERCISE = "exercise"
    WELLNESS = "wellness"
    GENERAL = "general"


@dataclass(frozen=True)
class RecommendationCard:
    """Unsaved recommendation produced by the rule set."""

    category: RecommendationCategory
    title: str
    content: str
    image_url: str | None = None


@dataclass(frozen=True)
class Recommendation:
    """Persisted recommendation for a user."""

    id: UUID
    user_id: UUID
    category: RecommendationCategory
    title: str
    content: str
    image_url: str | None
    created_at: datetime | None
