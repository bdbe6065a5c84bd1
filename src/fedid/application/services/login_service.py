"""Login protocol.

Resolves the login identifier, fetches the credential, verifies the password,
loads the user and issues a token. Every way of failing to authenticate
surfaces as the same AuthenticationFailedError.
"""

import asyncio
import logging

from fedid.application.services.auth_result import AuthResult
from fedid.domain.credential import (
    CredentialRepository,
    HashFormatError,
    PasswordHasher,
)
from fedid.domain.shared.exceptions import RepositoryError
from fedid.domain.user import (
    ActivityId,
    InvalidActivityIdError,
    TokenIssuer,
    UserRepository,
)
from fedid.exceptions import AuthenticationFailedError

logger = logging.getLogger(__name__)


def resolve_activity_id(login_id: str, instance_host: str) -> ActivityId:
    """Turn a raw login identifier into an activity id.

    Full ``https://`` URIs are taken as-is, anything else is treated as the
    username of a local account.

    Raises
    ------
    InvalidActivityIdError
        If no valid activity id can be formed
    """
    if login_id.startswith("https://"):
        return ActivityId(login_id)
    if not login_id or "/" in login_id:
        raise InvalidActivityIdError(login_id)
    return ActivityId.for_local_user(instance_host, login_id)


class LoginService:
    """Authenticates returning users."""

    # Every failed login performs one Argon2 computation
    _MISS_PLAINTEXT = "unknown-login-placeholder"

    def __init__(
        self,
        credential_repository: CredentialRepository,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        instance_host: str,
    ):
        self._credential_repo = credential_repository
        self._user_repo = user_repository
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer
        self._instance_host = instance_host

    async def login(self, login_id: str, password: str) -> AuthResult:
        """Authenticate with a login identifier and password.

        Parameters
        ----------
        login_id
            Local username or full activity id
        password
            Plaintext password

        Returns
        -------
        AuthResult with a fresh token and the authenticated user

        Raises
        ------
        AuthenticationFailedError
            If the identifier is unknown or the password is wrong
        RepositoryError
            If storage fails or holds inconsistent data
        TokenIssuanceError
            If the token cannot be signed
        """
        try:
            activity_id = resolve_activity_id(login_id, self._instance_host)
        except InvalidActivityIdError as e:
            await self._spend_hash_time()
            self._reject(login_id, "unusable login identifier")
            raise AuthenticationFailedError() from e

        credential = await self._credential_repo.find_by_activity_id(activity_id)
        if credential is None:
            await self._spend_hash_time()
            self._reject(activity_id.value, "unknown activity id")
            raise AuthenticationFailedError()

        try:
            verified = await asyncio.to_thread(
                self._password_hasher.verify,
                password,
                credential.password_hash,
            )
        except HashFormatError as e:
            logger.error(
                "Stored password hash for %s is corrupt",
                activity_id.value,
            )
            raise RepositoryError(
                "Stored password hash is corrupt",
                details={"activity_id": activity_id.value},
            ) from e

        if not verified:
            self._reject(activity_id.value, "password mismatch")
            raise AuthenticationFailedError()

        user = await self._user_repo.find_by_id(credential.user_id)
        if user is None:
            logger.error(
                "Credential %s references missing user %s",
                credential.id,
                credential.user_id,
            )
            raise RepositoryError(
                "Credential exists without its user",
                details={"user_id": str(credential.user_id)},
            )

        token = self._token_issuer.issue(user)
        logger.info("User logged in: %s", user.activity_id)
        return AuthResult(token=token, user=user)

    async def _spend_hash_time(self) -> None:
        await asyncio.to_thread(self._password_hasher.hash, self._MISS_PLAINTEXT)

    @staticmethod
    def _reject(login_id: str, reason: str) -> None:
        logger.warning("Login failed for %s: %s", login_id, reason)
