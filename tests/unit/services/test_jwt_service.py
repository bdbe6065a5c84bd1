"""Unit tests for JWTService."""

from datetime import timedelta
from unittest.mock import patch
from uuid import uuid4

import jwt
import pytest

from fedid.domain.user import User
from fedid.exceptions import InvalidTokenError, TokenIssuanceError
from fedid.services import JWTService

SECRET = "test-secret-key-12345"


def make_user() -> User:
    return User.create("https://example.com/users/alice", "Alice")


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_empty_secret_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    def test_init_with_custom_expiry(self):
        service = JWTService(secret_key=SECRET, access_token_expire_hours=1)
        token = service.issue(make_user())

        assert token.expires_in == 3600


class TestIssue:
    """Tests for token issuance."""

    def setup_method(self):
        self.service = JWTService(secret_key=SECRET)
        self.user = make_user()

    def test_issue_returns_signed_token_with_claims(self):
        token = self.service.issue(self.user)

        claims = jwt.decode(token.value, SECRET, algorithms=["HS256"])
        assert claims["sub"] == str(self.user.id)
        assert claims["activity_id"] == "https://example.com/users/alice"
        assert claims["exp"] - claims["iat"] == 24 * 3600

    def test_issue_metadata_matches_claims(self):
        token = self.service.issue(self.user)

        claims = jwt.decode(token.value, SECRET, algorithms=["HS256"])
        assert token.user_id == self.user.id
        assert int(token.issued_at.timestamp()) == claims["iat"]
        assert int(token.expires_at.timestamp()) == claims["exp"]
        assert token.expires_in == 86400

    def test_issue_uses_hs256(self):
        token = self.service.issue(self.user)

        assert jwt.get_unverified_header(token.value)["alg"] == "HS256"

    def test_signing_failure_raises_token_issuance_error(self):
        with patch(
            "fedid.services.jwt_service.jwt.encode",
            side_effect=jwt.PyJWTError("boom"),
        ):
            with pytest.raises(TokenIssuanceError):
                self.service.issue(self.user)


class TestVerifyToken:
    """Tests for token verification."""

    def setup_method(self):
        self.service = JWTService(secret_key=SECRET)
        self.user = make_user()

    def test_verify_valid_token(self):
        token = self.service.issue(self.user)

        payload = self.service.verify_token(token.value)

        assert payload.user_id == self.user.id
        assert payload.activity_id == self.user.activity_id.value
        assert payload.exp - payload.issued_at == timedelta(hours=24)
        assert not payload.is_expired()

    def test_verify_expired_token_raises(self):
        service = JWTService(secret_key=SECRET, access_token_expire_hours=-1)
        token = service.issue(self.user)

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token.value)

    def test_verify_wrong_secret_raises(self):
        other = JWTService(secret_key="another-secret")
        token = other.issue(self.user)

        with pytest.raises(InvalidTokenError, match="Invalid token"):
            self.service.verify_token(token.value)

    def test_verify_garbage_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("not.a.jwt")

    def test_verify_malformed_payload_raises(self):
        token = jwt.encode(
            {"sub": "not-a-uuid", "activity_id": "x", "iat": 0, "exp": 2**31},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)

    def test_verify_missing_activity_id_raises(self):
        token = jwt.encode(
            {"sub": str(uuid4()), "iat": 0, "exp": 2**31},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)
