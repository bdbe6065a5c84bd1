"""Production adapters for the hashing and token capabilities."""

from fedid.services.jwt_service import JWTService
from fedid.services.password_service import Argon2PasswordHasher

__all__ = [
    "Argon2PasswordHasher",
    "JWTService",
]
