"""Anonymous session token handling."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID, uuid4

from daily_diet.domain.sessions import SessionResolution

logger = logging.getLogger(__name__)


@dataclass
class SessionManager:
    """Issues and validates client-held session tokens.

    There is no server-side session table. A token is a bare capability: any
    caller presenting it can read and write the data owned by that session.
    """

    token_factory: Callable[[], UUID] = uuid4

    def resolve(self, presented: str | None) -> UUID | None:
        """Return the presented token if it is well-formed."""
        if not presented:
            return None
        try:
            return UUID(presented.strip())
        except ValueError:
            return None

    def ensure_session(self, presented: str | None) -> SessionResolution:
        """Return the presented token, or issue a new one."""
        token = self.resolve(presented)
        if token is not None:
            return SessionResolution(token=token, is_new=False)
        if presented:
            logger.info("Replacing malformed session token")
        issued = self.token_factory()
        logger.info("Issued session token")
        return SessionResolution(token=issued, is_new=True)
