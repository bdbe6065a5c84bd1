"""AccessToken value object."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class AccessToken:
    """Signed bearer token asserting a user's identity.

    Attributes
    ----------
    value
        Encoded token string handed to the client
    user_id
        Subject of the token
    activity_id
        Activity id of the subject at issuance time
    issued_at
        Issuance timestamp (UTC)
    expires_at
        Expiration timestamp (UTC)
    """

    value: str
    user_id: UUID
    activity_id: str
    issued_at: datetime
    expires_at: datetime

    @property
    def expires_in(self) -> int:
        """Lifetime in whole seconds."""
        return int((self.expires_at - self.issued_at).total_seconds())

    def __repr__(self) -> str:
        return (
            f"AccessToken(user_id={self.user_id}, "
            f"expires_at={self.expires_at.isoformat()})"
        )
