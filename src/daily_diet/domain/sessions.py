"""Domain models for anonymous sessions."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class SessionResolution:
    """Session token resolved for a request.

    ``is_new`` is set when the token was issued for this request and still has
    to be handed back to the client.
    """

    token: UUID
    is_new: bool
