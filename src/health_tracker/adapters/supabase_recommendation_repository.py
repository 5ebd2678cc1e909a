"""Supabase repository for recommendation cards."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from health_tracker.domain.recommendations import (
    Recommendation,
    RecommendationCard,
    RecommendationCategory,
)
from health_tracker.services.recommendations import RecommendationRepository

_COLUMNS = "id, user_id, category, title, content, image_url, created_at"


@dataclass
class SupabaseRecommendationRepository(RecommendationRepository):
    """Supabase implementation for recommendation persistence."""

    client: Client

    def replace_recommendations(
        self, user_id: UUID, cards: list[RecommendationCard]
    ) -> list[Recommendation]:
        """Delete existing cards for the user and insert new ones."""
        self.client.table("recommendations").delete().eq(
            "user_id", str(user_id)
        ).execute()
        if not cards:
            return []
        response = (
            self.client.table("recommendations")
            .insert(
                [
                    {
                        "user_id": str(user_id),
                        "category": card.category.value,
                        "title": card.title,
                        "content": card.content,
                        "image_url": card.image_url,
                    }
                    for card in cards
                ]
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to store recommendations")
        return [_parse_row(row) for row in response.data]

    def list_recommendations(self, user_id: UUID) -> list[Recommendation]:
        """Return stored cards, newest first."""
        response = (
            self.client.table("recommendations")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> Recommendation:
    created_at_raw = row.get("created_at")
    return Recommendation(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        category=RecommendationCategory(str(row.get("category") or "general")),
        title=str(row.get("title") or ""),
        content=str(row.get("content") or ""),
        image_url=row.get("image_url"),
        created_at=(
            datetime.fromisoformat(created_at_raw)
            if isinstance(created_at_raw, str) and created_at_raw
            else None
        ),
    )
