"""Unit tests for LoginService."""

from unittest.mock import AsyncMock, Mock

import pytest

from fedid.application.services import LoginService, resolve_activity_id
from fedid.domain.credential import (
    Credential,
    CredentialRepository,
    HashedPassword,
    HashFormatError,
    PasswordHasher,
)
from fedid.domain.shared.exceptions import RepositoryError
from fedid.domain.user import (
    AccessToken,
    ActivityId,
    InvalidActivityIdError,
    TokenIssuer,
    User,
    UserRepository,
)
from fedid.exceptions import AuthenticationFailedError, TokenIssuanceError

HOST = "example.com"
ALICE_ID = "https://example.com/users/alice"
STORED_HASH = "$argon2id$v=19$m=8,t=1,p=1$c29tZXNhbHRzb21lc2FsdA$aGFzaGhhc2hoYXNo"


class TestResolveActivityId:
    """Tests for login identifier resolution."""

    def test_username_is_derived_on_local_host(self):
        assert resolve_activity_id("alice", HOST) == ActivityId(ALICE_ID)

    def test_full_activity_id_is_used_verbatim(self):
        value = "https://other.social/users/bob"

        assert resolve_activity_id(value, HOST).value == value

    @pytest.mark.parametrize("value", ["", "users/alice", "http://example.com/u/a"])
    def test_unusable_identifiers_raise(self, value):
        with pytest.raises(InvalidActivityIdError):
            resolve_activity_id(value, HOST)


class TestLoginService:
    """Tests for the login protocol."""

    def setup_method(self):
        """Set up test fixtures."""
        self.credential_repo = AsyncMock(spec=CredentialRepository)
        self.user_repo = AsyncMock(spec=UserRepository)
        self.password_hasher = Mock(spec=PasswordHasher)
        self.token_issuer = Mock(spec=TokenIssuer)

        self.user = User.create(ALICE_ID, "Alice")
        self.credential = Credential(
            user_id=self.user.id,
            activity_id=ALICE_ID,
            password_hash=HashedPassword.from_stored_hash(STORED_HASH),
            email="a@x.com",
        )
        self.token = Mock(spec=AccessToken)

        self.service = LoginService(
            credential_repository=self.credential_repo,
            user_repository=self.user_repo,
            password_hasher=self.password_hasher,
            token_issuer=self.token_issuer,
            instance_host=HOST,
        )

    async def test_login_success_returns_token_and_user(self):
        # Arrange
        self.credential_repo.find_by_activity_id.return_value = self.credential
        self.password_hasher.verify.return_value = True
        self.user_repo.find_by_id.return_value = self.user
        self.token_issuer.issue.return_value = self.token

        # Act
        result = await self.service.login("alice", "longenough1")

        # Assert
        assert result.user == self.user
        assert result.token is self.token
        self.credential_repo.find_by_activity_id.assert_awaited_once_with(
            ActivityId(ALICE_ID),
        )
        self.password_hasher.verify.assert_called_once_with(
            "longenough1",
            self.credential.password_hash,
        )
        self.user_repo.find_by_id.assert_awaited_once_with(self.user.id)
        self.token_issuer.issue.assert_called_once_with(self.user)

    async def test_login_accepts_full_activity_id(self):
        self.credential_repo.find_by_activity_id.return_value = self.credential
        self.password_hasher.verify.return_value = True
        self.user_repo.find_by_id.return_value = self.user
        self.token_issuer.issue.return_value = self.token

        result = await self.service.login(ALICE_ID, "longenough1")

        assert result.user == self.user

    async def test_unknown_user_raises_authentication_failed(self):
        self.credential_repo.find_by_activity_id.return_value = None

        with pytest.raises(AuthenticationFailedError):
            await self.service.login("nobody", "longenough1")

        self.password_hasher.verify.assert_not_called()
        self.password_hasher.hash.assert_called_once()
        self.token_issuer.issue.assert_not_called()

    async def test_wrong_password_raises_authentication_failed(self):
        self.credential_repo.find_by_activity_id.return_value = self.credential
        self.password_hasher.verify.return_value = False

        with pytest.raises(AuthenticationFailedError):
            await self.service.login("alice", "wrong")

        self.user_repo.find_by_id.assert_not_called()
        self.password_hasher.hash.assert_not_called()
        self.token_issuer.issue.assert_not_called()

    async def test_unknown_user_and_wrong_password_are_indistinguishable(self):
        self.credential_repo.find_by_activity_id.return_value = None
        with pytest.raises(AuthenticationFailedError) as unknown:
            await self.service.login("nobody", "longenough1")

        self.credential_repo.find_by_activity_id.return_value = self.credential
        self.password_hasher.verify.return_value = False
        with pytest.raises(AuthenticationFailedError) as mismatch:
            await self.service.login("alice", "wrong")

        assert type(unknown.value) is type(mismatch.value)
        assert unknown.value.message == mismatch.value.message
        assert unknown.value.code == mismatch.value.code
        assert unknown.value.details == mismatch.value.details

    async def test_unusable_identifier_raises_authentication_failed(self):
        with pytest.raises(AuthenticationFailedError):
            await self.service.login("", "longenough1")

        self.credential_repo.find_by_activity_id.assert_not_called()
        self.password_hasher.hash.assert_called_once()

    async def test_credential_without_user_is_a_repository_error(self):
        self.credential_repo.find_by_activity_id.return_value = self.credential
        self.password_hasher.verify.return_value = True
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(RepositoryError):
            await self.service.login("alice", "longenough1")

        self.token_issuer.issue.assert_not_called()

    async def test_corrupt_hash_is_a_repository_error(self):
        self.credential_repo.find_by_activity_id.return_value = self.credential
        self.password_hasher.verify.side_effect = HashFormatError()

        with pytest.raises(RepositoryError):
            await self.service.login("alice", "longenough1")

    async def test_repository_failure_propagates(self):
        self.credential_repo.find_by_activity_id.side_effect = RepositoryError()

        with pytest.raises(RepositoryError):
            await self.service.login("alice", "longenough1")

    async def test_token_issuance_failure_propagates(self):
        self.credential_repo.find_by_activity_id.return_value = self.credential
        self.password_hasher.verify.return_value = True
        self.user_repo.find_by_id.return_value = self.user
        self.token_issuer.issue.side_effect = TokenIssuanceError()

        with pytest.raises(TokenIssuanceError):
            await self.service.login("alice", "longenough1")

    async def test_plaintext_is_never_logged(self, caplog):
        caplog.set_level("DEBUG", logger="fedid")
        self.credential_repo.find_by_activity_id.return_value = self.credential
        self.password_hasher.verify.return_value = False

        with pytest.raises(AuthenticationFailedError):
            await self.service.login("alice", "super-secret-pw")

        assert "super-secret-pw" not in caplog.text
        assert STORED_HASH not in caplog.text
