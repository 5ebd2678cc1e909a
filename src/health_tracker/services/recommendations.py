"""Rule-based recommendation cards."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from health_tracker.domain.activity import DailyActivity
from health_tracker.domain.metrics import Goal
from health_tracker.domain.programs import FitnessProgram
from health_tracker.domain.recommendations import (
    Recommendation,
    RecommendationCard,
    RecommendationCategory,
)
from health_tracker.services.activities import ActivityRepository
from health_tracker.services.programs import ProgramRepository

_logger = logging.getLogger(__name__)

LOW_WATER_LITERS = 2
LOW_SLEEP_HOURS = 7
HIGH_SLEEP_HOURS = 9
HIGH_CALORIES = 2500

_IMAGE_BASE = "https://images.pexels.com/photos"

GENERAL_CARDS = [
    RecommendationCard(
        category=RecommendationCategory.GENERAL,
        title="Keep a Regular Sleep Schedule",
        content=(
            "Going to bed and getting up at the same time every day improves "
            "sleep quality and regulates your metabolism."
        ),
        image_url=f"{_IMAGE_BASE}/3771069/pexels-photo-3771069.jpeg",
    ),
    RecommendationCard(
        category=RecommendationCategory.NUTRITION,
        title="Healthy Eating Tips",
        content=(
            "Try to eat at least 5 portions of fruit and vegetables a day. "
            "Produce of different colors provides different vitamins and minerals."
        ),
        image_url=f"{_IMAGE_BASE}/1640774/pexels-photo-1640774.jpeg",
    ),
    RecommendationCard(
        category=RecommendationCategory.EXERCISE,
        title="Daily Movement",
        content=(
            "Do at least 30 minutes of moderate physical activity every day, "
            "such as walking, cycling or swimming."
        ),
        image_url=f"{_IMAGE_BASE}/2294361/pexels-photo-2294361.jpeg",
    ),
]

LOW_WATER_CARD = RecommendationCard(
    category=RecommendationCategory.WELLNESS,
    title="Drink More Water",
    content=(
        "Your daily water intake looks low. Adults should drink at least 2 liters "
        "a day. Keep a water bottle with you to drink more."
    ),
    image_url=f"{_IMAGE_BASE}/327090/pexels-photo-327090.jpeg",
)
LOW_SLEEP_CARD = RecommendationCard(
    category=RecommendationCategory.WELLNESS,
    title="Sleep Longer",
    content=(
        "You are sleeping less than recommended. The ideal sleep duration for "
        "adults is 7-9 hours. Enough sleep strengthens your immune system."
    ),
    image_url=f"{_IMAGE_BASE}/3771115/pexels-photo-3771115.jpeg",
)
HIGH_SLEEP_CARD = RecommendationCard(
    category=RecommendationCategory.WELLNESS,
    title="Check Your Sleep Quality",
    content=(
        "Long sleep can be a sign of poor sleep quality. Make sure your bedroom "
        "is dark, quiet and cool."
    ),
    image_url=f"{_IMAGE_BASE}/1028741/pexels-photo-1028741.jpeg",
)
HIGH_CALORIES_CARD = RecommendationCard(
    category=RecommendationCategory.NUTRITION,
    title="Balance Your Calorie Intake",
    content=(
        "Your calorie intake looks high. Prioritize whole grains, vegetables and "
        "protein sources for a more balanced diet."
    ),
    image_url=f"{_IMAGE_BASE}/1640777/pexels-photo-1640777.jpeg",
)
GOAL_CARDS: dict[Goal, RecommendationCard] = {
    Goal.LOSE: RecommendationCard(
        category=RecommendationCategory.EXERCISE,
        title="Cardiovascular Exercise",
        content=(
            "For weight loss, aim for at least 150 minutes of moderate cardio a "
            "week. Walking, running or cycling are ideal."
        ),
        image_url=f"{_IMAGE_BASE}/2294361/pexels-photo-2294361.jpeg",
    ),
    Goal.GAIN: RecommendationCard(
        category=RecommendationCategory.EXERCISE,
        title="Strength Training",
        content=(
            "To build muscle, lift weights 3-4 days a week, train every muscle "
            "group at least twice a week and eat enough protein."
        ),
        image_url=f"{_IMAGE_BASE}/1552242/pexels-photo-1552242.jpeg",
    ),
}


def build_cards(
    activity: DailyActivity | None, program: FitnessProgram | None
) -> list[RecommendationCard]:
    """Return cards for the latest activity and program."""
    cards = list(GENERAL_CARDS)
    if activity is not None:
        if activity.water_intake < LOW_WATER_LITERS:
            cards.append(LOW_WATER_CARD)
        if activity.sleep_hours < LOW_SLEEP_HOURS:
            cards.append(LOW_SLEEP_CARD)
        elif activity.sleep_hours > HIGH_SLEEP_HOURS:
            cards.append(HIGH_SLEEP_CARD)
        if activity.calorie_intake > HIGH_CALORIES:
            cards.append(HIGH_CALORIES_CARD)
    if program is not None:
        goal_card = GOAL_CARDS.get(program.goal)
        if goal_card is not None:
            cards.append(goal_card)
    return cards


class RecommendationRepository(Protocol):
    """Persistence interface for recommendation cards."""

    def replace_recommendations(
        self, user_id: UUID, cards: list[RecommendationCard]
    ) -> list[Recommendation]:
        """Delete the user's cards and store the new ones."""

    def list_recommendations(self, user_id: UUID) -> list[Recommendation]:
        """Return stored cards."""


@dataclass
class RecommendationService:
    """Service that regenerates and lists recommendation cards."""

    repository: RecommendationRepository
    activity_repository: ActivityRepository
    program_repository: ProgramRepository

    def refresh(self, user_id: UUID) -> list[Recommendation]:
        """Rebuild the user's cards from their latest data."""
        cards = build_cards(
            self.activity_repository.get_latest_activity(user_id),
            self.program_repository.get_latest_program(user_id),
        )
        saved = self.repository.replace_recommendations(user_id, cards)
        _logger.info(
            "Refreshed recommendations: user_id=%s count=%s", user_id, len(saved)
        )
        return saved

    def list_recommendations(self, user_id: UUID) -> list[Recommendation]:
        """Return stored cards."""
        return self.repository.list_recommendations(user_id)
