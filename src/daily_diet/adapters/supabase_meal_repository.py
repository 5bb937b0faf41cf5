"""Supabase-backed meal repository."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from supabase import Client

from daily_diet.domain.meals import MealMetrics, MealRecord
from daily_diet.services.meals import MealRepository

_MEAL_COLUMNS = "id, name, description, in_diet, session_id"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal persistence."""

    client: Client

    def list_meals(self, session_id: UUID) -> list[MealRecord]:
        """Return all meals for a session."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("session_id", str(session_id))
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def get_meal(self, session_id: UUID, meal_id: UUID) -> list[MealRecord]:
        """Return the meals matching both session and id."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("session_id", str(session_id))
            .eq("id", str(meal_id))
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def get_metrics(self, session_id: UUID) -> MealMetrics:
        """Return meal counts from the ``meal_metrics`` SQL function."""
        response = self.client.rpc(
            "meal_metrics", {"p_session_id": str(session_id)}
        ).execute()
        data = response.data
        row = data[0] if isinstance(data, list) and data else data
        if not isinstance(row, dict):
            return MealMetrics(total_meals=0, total_in_diet=0, total_off_diet=0)
        return MealMetrics(
            total_meals=int(row.get("total_meals") or 0),
            total_in_diet=int(row.get("total_in_diet") or 0),
            total_off_diet=int(row.get("total_off_diet") or 0),
        )

    def create_meal(  # noqa: PLR0913
        self,
        meal_id: UUID,
        session_id: UUID,
        name: str,
        description: str,
        in_diet: bool,
    ) -> MealRecord:
        """Insert a meal row and return it."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "id": str(meal_id),
                    "name": name,
                    "description": description,
                    "in_diet": in_diet,
                    "session_id": str(session_id),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal in Supabase")
        return _parse_meal(response.data[0])

    def update_meal(  # noqa: PLR0913
        self,
        session_id: UUID,
        meal_id: UUID,
        name: str,
        description: str,
        in_diet: bool,
    ) -> int:
        """Replace name, description and diet flag in one statement."""
        response = (
            self.client.table("meals")
            .update({"name": name, "description": description, "in_diet": in_diet})
            .eq("session_id", str(session_id))
            .eq("id", str(meal_id))
            .execute()
        )
        return len(response.data or [])

    def delete_meal(self, session_id: UUID, meal_id: UUID) -> int:
        """Delete a meal owned by the session."""
        response = (
            self.client.table("meals")
            .delete()
            .eq("session_id", str(session_id))
            .eq("id", str(meal_id))
            .execute()
        )
        return len(response.data or [])


def _parse_meal(row: dict[str, Any]) -> MealRecord:
    return MealRecord(
        id=UUID(str(row["id"])),
        name=row["name"],
        description=row["description"],
        in_diet=row["in_diet"],
        session_id=UUID(str(row["session_id"])),
    )
