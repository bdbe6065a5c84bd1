"""Password hashing service using Argon2id.

Provides secure password hashing and verification with strength validation
done before any hashing work.
"""

import logging

import argon2
from argon2.exceptions import (
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from fedid.domain.credential.exceptions import HashFormatError, WeakPasswordError
from fedid.domain.credential.services.password_hasher import PasswordHasher
from fedid.domain.credential.value_objects.hashed_password import HashedPassword

logger = logging.getLogger(__name__)


class Argon2PasswordHasher(PasswordHasher):
    """Service for secure password hashing and verification.

    Uses argon2-cffi (Argon2id, random 16-byte salt per hash). The encoded
    output carries its own parameters, so hashes stay verifiable after the
    cost settings change.

    Examples
    --------
    >>> service = Argon2PasswordHasher()
    >>> hashed = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hashed)
    True
    >>> service.verify("wrong_password", hashed)
    False
    """

    MIN_LENGTH = 8

    def __init__(
        self,
        time_cost: int = argon2.DEFAULT_TIME_COST,
        memory_cost: int = argon2.DEFAULT_MEMORY_COST,
        parallelism: int = argon2.DEFAULT_PARALLELISM,
    ):
        """Initialize the password hashing service.

        Parameters
        ----------
        time_cost
            Number of iterations
        memory_cost
            Memory usage in KiB
        parallelism
            Number of parallel lanes
        """
        self._hasher = argon2.PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            type=argon2.Type.ID,
        )

    def hash(self, plaintext: str) -> HashedPassword:
        """Hash a plaintext password.

        Parameters
        ----------
        plaintext
            The plaintext password to hash

        Returns
        -------
        The encoded Argon2id hash

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(plaintext)
        return HashedPassword(self._hasher.hash(plaintext))

    def verify(self, plaintext: str, hashed: HashedPassword) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        plaintext
            The plaintext password to check
        hashed
            The stored hash to verify against

        Returns
        -------
        True if password matches, False otherwise

        Raises
        ------
        HashFormatError
            If the stored hash cannot be decoded
        """
        try:
            return self._hasher.verify(hashed.value, plaintext)
        except VerifyMismatchError:
            return False
        except (InvalidHashError, VerificationError) as e:
            logger.error("Stored password hash could not be decoded")
            raise HashFormatError() from e

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Current requirements:
        - Minimum 8 characters

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

    def needs_rehash(self, hashed: HashedPassword) -> bool:
        """Check if a password hash was made with different cost parameters.

        After changing the cost settings, existing hashes can be identified
        for rehashing on next login.
        """
        try:
            return self._hasher.check_needs_rehash(hashed.value)
        except InvalidHashError:
            return True
