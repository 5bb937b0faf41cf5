"""Request dependencies that resolve the session cookie."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import HTTPException, Request, Response, status

if TYPE_CHECKING:
    from daily_diet.containers import AppContainer


def require_session(request: Request) -> UUID:
    """Return the caller's session token or reject the request."""
    container: AppContainer = request.app.state.container
    token = container.session_manager.resolve(
        request.cookies.get(container.settings.session_cookie_name)
    )
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized."
        )
    return token


def ensure_session(request: Request, response: Response) -> UUID:
    """Return the caller's session token, issuing a cookie for new visitors."""
    container: AppContainer = request.app.state.container
    settings = container.settings
    resolution = container.session_manager.ensure_session(
        request.cookies.get(settings.session_cookie_name)
    )
    if resolution.is_new:
        response.set_cookie(
            key=settings.session_cookie_name,
            value=str(resolution.token),
            max_age=settings.session_cookie_max_age,
            path="/",
            secure=settings.session_cookie_secure,
            httponly=True,
            samesite="lax",
        )
    return resolution.token
