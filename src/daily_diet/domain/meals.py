"""Domain models for meal entries."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class MealRecord:
    """Represents a meal stored in the database."""

    id: UUID
    name: str
    description: str
    in_diet: bool
    session_id: UUID


@dataclass(frozen=True)
class MealMetrics:
    """Meal counts for a single session."""

    total_meals: int
    total_in_diet: int
    total_off_diet: int
