"""Token data structures shared by the token service and the API layer."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    activity_id
        The user's activity id
    issued_at
        Token issuance timestamp (``iat`` claim)
    exp
        Token expiration timestamp (``exp`` claim)
    """

    user_id: UUID
    activity_id: str
    issued_at: datetime
    exp: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp
