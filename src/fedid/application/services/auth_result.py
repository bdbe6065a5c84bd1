"""Result of a successful login or registration."""

from dataclasses import dataclass

from fedid.domain.user import AccessToken, User


@dataclass(frozen=True)
class AuthResult:
    token: AccessToken
    user: User
