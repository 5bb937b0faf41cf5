"""Meal entry service scoped to a session."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID, uuid4

from daily_diet.domain.meals import MealMetrics, MealRecord

logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals.

    Every method filters by ``session_id``; rows owned by another session are
    never observed or modified.
    """

    def list_meals(self, session_id: UUID) -> list[MealRecord]:
        """Return all meals for a session."""

    def get_meal(self, session_id: UUID, meal_id: UUID) -> list[MealRecord]:
        """Return the meals matching both session and id."""

    def get_metrics(self, session_id: UUID) -> MealMetrics:
        """Return meal counts for a session in a single aggregate read."""

    def create_meal(  # noqa: PLR0913
        self,
        meal_id: UUID,
        session_id: UUID,
        name: str,
        description: str,
        in_diet: bool,
    ) -> MealRecord:
        """Insert a meal row and return it."""

    def update_meal(  # noqa: PLR0913
        self,
        session_id: UUID,
        meal_id: UUID,
        name: str,
        description: str,
        in_diet: bool,
    ) -> int:
        """Replace the mutable fields of a meal and return the rows touched."""

    def delete_meal(self, session_id: UUID, meal_id: UUID) -> int:
        """Delete a meal and return the rows removed."""


@dataclass
class MealService:
    """Application service for meal entries."""

    repository: MealRepository
    id_factory: Callable[[], UUID] = uuid4

    def list_meals(self, session_id: UUID) -> list[MealRecord]:
        """Return every meal logged by the session."""
        return self.repository.list_meals(session_id)

    def get_meal(self, session_id: UUID, meal_id: UUID) -> list[MealRecord]:
        """Return the meal as a sequence; empty when not found."""
        return self.repository.get_meal(session_id, meal_id)

    def get_metrics(self, session_id: UUID) -> MealMetrics:
        """Return total, in-diet and off-diet counts for the session."""
        return self.repository.get_metrics(session_id)

    def create_meal(
        self, session_id: UUID, name: str, description: str, in_diet: bool
    ) -> MealRecord:
        """Create a meal owned by the session."""
        meal = self.repository.create_meal(
            meal_id=self.id_factory(),
            session_id=session_id,
            name=name,
            description=description,
            in_diet=in_diet,
        )
        logger.info("Meal created", extra={"meal_id": str(meal.id)})
        return meal

    def update_meal(  # noqa: PLR0913
        self,
        session_id: UUID,
        meal_id: UUID,
        name: str,
        description: str,
        in_diet: bool,
    ) -> bool:
        """Replace name, description and diet flag. Return False if not owned."""
        touched = self.repository.update_meal(
            session_id=session_id,
            meal_id=meal_id,
            name=name,
            description=description,
            in_diet=in_diet,
        )
        if not touched:
            logger.info("Meal update matched no rows", extra={"meal_id": str(meal_id)})
        return touched > 0

    def delete_meal(self, session_id: UUID, meal_id: UUID) -> bool:
        """Delete a meal owned by the session. Return False if not owned."""
        removed = self.repository.delete_meal(session_id, meal_id)
        if not removed:
            logger.info("Meal delete matched no rows", extra={"meal_id": str(meal_id)})
        return removed > 0
