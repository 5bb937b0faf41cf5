"""User-related business logic."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID, uuid4

from daily_diet.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def list_users(self, session_id: UUID) -> list[UserRecord]:
        """Return the users registered by a session."""

    def create_user(self, user_id: UUID, session_id: UUID, name: str) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for session display names."""

    repository: UserRepository
    id_factory: Callable[[], UUID] = uuid4

    def list_users(self, session_id: UUID) -> list[UserRecord]:
        """Return the users registered by the session."""
        return self.repository.list_users(session_id)

    def create_user(self, session_id: UUID, name: str) -> UserRecord:
        """Register a display name for the session."""
        return self.repository.create_user(
            user_id=self.id_factory(), session_id=session_id, name=name
        )
