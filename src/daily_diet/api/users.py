"""User endpoints scoped to the caller's session."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, Response, status

from daily_diet.api.models import UserPayload  # noqa: TC001
from daily_diet.api.sessions import ensure_session, require_session

if TYPE_CHECKING:
    from daily_diet.containers import AppContainer

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
def list_users(
    request: Request, session_id: UUID = Depends(require_session)
) -> dict[str, object]:
    """Return the users registered by the session."""
    container: AppContainer = request.app.state.container
    return {"users": container.user_service.list_users(session_id)}


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_user(
    payload: UserPayload,
    request: Request,
    session_id: UUID = Depends(ensure_session),
) -> None:
    """Register a display name, starting a session when the caller has none."""
    container: AppContainer = request.app.state.container
    container.user_service.create_user(session_id, payload.name)
