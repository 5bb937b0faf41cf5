"""Meal endpoints scoped to the caller's session."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from daily_diet.api.models import MealPayload  # noqa: TC001
from daily_diet.api.sessions import ensure_session, require_session

if TYPE_CHECKING:
    from daily_diet.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])


@router.get("")
def list_meals(
    request: Request, session_id: UUID = Depends(require_session)
) -> dict[str, object]:
    """Return every meal logged by the session."""
    container: AppContainer = request.app.state.container
    return {"meals": container.meal_service.list_meals(session_id)}


@router.get("/metrics")
def meal_metrics(
    request: Request, session_id: UUID = Depends(require_session)
) -> dict[str, object]:
    """Return total, in-diet and off-diet counts."""
    container: AppContainer = request.app.state.container
    return {"metrics": container.meal_service.get_metrics(session_id)}


@router.get("/{meal_id}")
def get_meal(
    meal_id: UUID, request: Request, session_id: UUID = Depends(require_session)
) -> dict[str, object]:
    """Return the meal as a list, empty when the session does not own it."""
    container: AppContainer = request.app.state.container
    return {"meals": container.meal_service.get_meal(session_id, meal_id)}


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(
    payload: MealPayload,
    request: Request,
    session_id: UUID = Depends(ensure_session),
) -> None:
    """Create a meal, starting a session when the caller has none."""
    container: AppContainer = request.app.state.container
    container.meal_service.create_meal(
        session_id,
        name=payload.name,
        description=payload.description,
        in_diet=payload.in_diet,
    )


@router.put(
    "/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def update_meal(
    meal_id: UUID,
    payload: MealPayload,
    request: Request,
    session_id: UUID = Depends(require_session),
) -> None:
    """Replace the name, description and diet flag of a meal."""
    container: AppContainer = request.app.state.container
    updated = container.meal_service.update_meal(
        session_id,
        meal_id,
        name=payload.name,
        description=payload.description,
        in_diet=payload.in_diet,
    )
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.delete(
    "/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def delete_meal(
    meal_id: UUID, request: Request, session_id: UUID = Depends(require_session)
) -> None:
    """Delete a meal owned by the session."""
    container: AppContainer = request.app.state.container
    if not container.meal_service.delete_meal(session_id, meal_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
