"""Password hashing capability."""

from abc import ABC, abstractmethod

from fedid.domain.credential.value_objects.hashed_password import HashedPassword


class PasswordHasher(ABC):
    """Hashes and verifies passwords under a fixed policy."""

    @abstractmethod
    def hash(self, plaintext: str) -> HashedPassword:
        """Hash a plaintext password.

        Raises
        ------
        WeakPasswordError
            If the plaintext does not meet the policy
        """

    @abstractmethod
    def verify(self, plaintext: str, hashed: HashedPassword) -> bool:
        """Check a plaintext against a stored hash in constant time.

        Returns False for any well-formed hash that does not match.

        Raises
        ------
        HashFormatError
            If the stored hash cannot be parsed
        """
