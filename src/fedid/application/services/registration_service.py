"""Registration protocol.

Derives the new user's activity id, hashes the password, creates the user and
its credential in one storage call and issues a token.
"""

import asyncio
import logging

from fedid.application.services.auth_result import AuthResult
from fedid.domain.credential import (
    HashedPassword,
    PasswordHasher,
    UserRegistrationRepository,
)
from fedid.domain.user import (
    ActivityId,
    DisplayName,
    Email,
    InvalidActivityIdError,
    RegistrationConflictError,
    TokenIssuer,
)

logger = logging.getLogger(__name__)


class RegistrationService:
    """Registers new local users."""

    def __init__(
        self,
        registration_repository: UserRegistrationRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        instance_host: str,
    ):
        self._registration_repo = registration_repository
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer
        self._instance_host = instance_host

    def derive_activity_id(self, login_id: str) -> ActivityId:
        """Build ``https://{instance_host}/users/{login_id}``."""
        if not login_id or "/" in login_id:
            raise InvalidActivityIdError(login_id)
        return ActivityId.for_local_user(self._instance_host, login_id)

    async def register(
        self,
        login_id: str,
        display_name: str,
        password: str,
        email: str,
    ) -> AuthResult:
        """Register a new user and log them in.

        Parameters
        ----------
        login_id
            Local username, becomes the last segment of the activity id
        display_name
            Non-empty display name
        password
            Plaintext password (at least 8 characters)
        email
            Contact address stored with the credential

        Returns
        -------
        AuthResult with a fresh token and the new user

        Raises
        ------
        InvalidActivityIdError, EmptyDisplayNameError, InvalidEmailError
            If an input value is invalid
        WeakPasswordError
            If the password is too short
        RegistrationConflictError
            If the activity id or email is already registered
        RepositoryError
            If storage fails
        TokenIssuanceError
            If the token cannot be signed
        """
        activity_id = self.derive_activity_id(login_id)
        name = DisplayName(display_name)
        mail = Email(email)

        password_hash = await asyncio.to_thread(
            HashedPassword.from_plaintext,
            password,
            self._password_hasher,
        )

        try:
            user = await self._registration_repo.register_user_with_credentials(
                activity_id=activity_id,
                display_name=name,
                password_hash=password_hash,
                email=mail,
            )
        except RegistrationConflictError as e:
            logger.warning(
                "Registration conflict for %s: %s",
                activity_id.value,
                e.details or e.message,
            )
            raise

        token = self._token_issuer.issue(user)
        logger.info("New user registered: %s", user.activity_id)
        return AuthResult(token=token, user=user)
