"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from daily_diet.domain.models import UserRecord
from daily_diet.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def list_users(self, session_id: UUID) -> list[UserRecord]:
        """Return the users registered by a session."""
        response = (
            self.client.table("users")
            .select("id, name, session_id")
            .eq("session_id", str(session_id))
            .execute()
        )
        return [
            UserRecord(
                id=UUID(row["id"]),
                name=row["name"],
                session_id=UUID(row["session_id"]),
            )
            for row in response.data or []
        ]

    def create_user(self, user_id: UUID, session_id: UUID, name: str) -> UserRecord:
        """Create a new user row and return it."""
        response = (
            self.client.table("users")
            .insert({"id": str(user_id), "name": name, "session_id": str(session_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        row = response.data[0]
        return UserRecord(
            id=UUID(row["id"]), name=row["name"], session_id=UUID(row["session_id"])
        )
