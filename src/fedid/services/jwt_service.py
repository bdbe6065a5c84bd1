"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from fedid.domain.user.aggregates.user import User
from fedid.domain.user.services.token_issuer import TokenIssuer
from fedid.domain.user.value_objects.access_token import AccessToken
from fedid.exceptions import InvalidTokenError, TokenIssuanceError
from fedid.schemas import TokenPayload

logger = logging.getLogger(__name__)


class JWTService(TokenIssuer):
    """Service for JWT token creation and verification.

    Tokens are HS256-signed and carry ``sub`` (user id), ``activity_id``,
    ``iat`` and ``exp``. They are stateless: nothing is stored server-side.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.issue(user)
    >>> payload = service.verify_token(token.value)
    >>> print(payload.user_id)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until a token expires (default 24)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    def issue(self, user: User) -> AccessToken:
        """Create a signed access token for a user.

        Raises
        ------
        TokenIssuanceError
            If signing fails
        """
        return self._create_token(
            user_id=user.id,
            activity_id=user.activity_id.value,
            expires_delta=self._access_expire,
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "iat", "exp"]},
            )

            return TokenPayload(
                user_id=UUID(payload["sub"]),
                activity_id=payload["activity_id"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

    def _create_token(
        self,
        user_id: UUID,
        activity_id: str,
        expires_delta: timedelta,
    ) -> AccessToken:
        """Create a JWT token with the given parameters.

        ``iat`` and ``exp`` are encoded as whole seconds, so the returned
        timestamps are truncated to match the encoded claims.
        """
        now = datetime.now(tz=timezone.utc).replace(microsecond=0)
        expire = now + expires_delta

        payload = {
            "sub": str(user_id),
            "activity_id": activity_id,
            "iat": now,
            "exp": expire,
        }

        try:
            value = jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            logger.error("Failed to sign token for user %s: %s", user_id, e)
            raise TokenIssuanceError() from e

        return AccessToken(
            value=value,
            user_id=user_id,
            activity_id=activity_id,
            issued_at=now,
            expires_at=expire,
        )
