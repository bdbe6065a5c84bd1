"""Unit tests for RegistrationService."""

from unittest.mock import AsyncMock, Mock

import pytest

from fedid.application.services import RegistrationService
from fedid.domain.credential import (
    HashedPassword,
    PasswordHasher,
    UserRegistrationRepository,
    WeakPasswordError,
)
from fedid.domain.shared.exceptions import RepositoryError
from fedid.domain.user import (
    AccessToken,
    ActivityId,
    DisplayName,
    Email,
    EmptyDisplayNameError,
    InvalidActivityIdError,
    InvalidEmailError,
    RegistrationConflictError,
    TokenIssuer,
    User,
)
from fedid.exceptions import TokenIssuanceError

HOST = "example.com"
ALICE_ID = "https://example.com/users/alice"
STORED_HASH = "$argon2id$v=19$m=8,t=1,p=1$c29tZXNhbHRzb21lc2FsdA$aGFzaGhhc2hoYXNo"


class TestRegistrationService:
    """Tests for the registration protocol."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registration_repo = AsyncMock(spec=UserRegistrationRepository)
        self.password_hasher = Mock(spec=PasswordHasher)
        self.token_issuer = Mock(spec=TokenIssuer)

        self.password_hash = HashedPassword.from_stored_hash(STORED_HASH)
        self.password_hasher.hash.return_value = self.password_hash
        self.user = User.create(ALICE_ID, "Alice")
        self.token = Mock(spec=AccessToken)

        self.service = RegistrationService(
            registration_repository=self.registration_repo,
            password_hasher=self.password_hasher,
            token_issuer=self.token_issuer,
            instance_host=HOST,
        )

    async def test_register_persists_and_issues_token(self):
        # Arrange
        self.registration_repo.register_user_with_credentials.return_value = self.user
        self.token_issuer.issue.return_value = self.token

        # Act
        result = await self.service.register(
            login_id="alice",
            display_name="Alice",
            password="longenough1",
            email="a@x.com",
        )

        # Assert
        assert result.user is self.user
        assert result.token is self.token
        self.password_hasher.hash.assert_called_once_with("longenough1")
        self.registration_repo.register_user_with_credentials.assert_awaited_once_with(
            activity_id=ActivityId(ALICE_ID),
            display_name=DisplayName("Alice"),
            password_hash=self.password_hash,
            email=Email("a@x.com"),
        )
        self.token_issuer.issue.assert_called_once_with(self.user)

    def test_derive_activity_id(self):
        assert self.service.derive_activity_id("alice").value == ALICE_ID

    async def test_weak_password_is_surfaced_before_persisting(self):
        self.password_hasher.hash.side_effect = WeakPasswordError("too short")

        with pytest.raises(WeakPasswordError, match="too short"):
            await self.service.register("alice", "Alice", "short", "a@x.com")

        self.registration_repo.register_user_with_credentials.assert_not_called()
        self.token_issuer.issue.assert_not_called()

    async def test_empty_display_name_fails_before_hashing(self):
        with pytest.raises(EmptyDisplayNameError):
            await self.service.register("alice", "", "longenough1", "a@x.com")

        self.password_hasher.hash.assert_not_called()

    async def test_invalid_email_fails_before_hashing(self):
        with pytest.raises(InvalidEmailError):
            await self.service.register("alice", "Alice", "longenough1", "nope")

        self.password_hasher.hash.assert_not_called()

    @pytest.mark.parametrize("login_id", ["", "a/b"])
    async def test_unusable_login_id_fails_before_hashing(self, login_id):
        with pytest.raises(InvalidActivityIdError):
            await self.service.register(login_id, "Alice", "longenough1", "a@x.com")

        self.password_hasher.hash.assert_not_called()

    async def test_conflict_is_surfaced_without_token(self):
        self.registration_repo.register_user_with_credentials.side_effect = (
            RegistrationConflictError(details={"field": "activity_id"})
        )

        with pytest.raises(RegistrationConflictError):
            await self.service.register("alice", "Alice", "longenough1", "a@x.com")

        self.token_issuer.issue.assert_not_called()

    async def test_repository_failure_propagates(self):
        self.registration_repo.register_user_with_credentials.side_effect = (
            RepositoryError()
        )

        with pytest.raises(RepositoryError):
            await self.service.register("alice", "Alice", "longenough1", "a@x.com")

    async def test_token_issuance_failure_propagates(self):
        self.registration_repo.register_user_with_credentials.return_value = self.user
        self.token_issuer.issue.side_effect = TokenIssuanceError()

        with pytest.raises(TokenIssuanceError):
            await self.service.register("alice", "Alice", "longenough1", "a@x.com")
