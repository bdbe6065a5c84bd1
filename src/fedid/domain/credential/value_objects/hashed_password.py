"""HashedPassword value object.

An opaque, self-describing Argon2 PHC string. It never holds plaintext and
cannot be compared by value: checking a password always goes through a
PasswordHasher.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fedid.domain.credential.exceptions import InvalidCredentialFormatError

if TYPE_CHECKING:
    from fedid.domain.credential.services.password_hasher import PasswordHasher

# $argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash> (unpadded standard base64)
ARGON2_PHC_PATTERN = re.compile(
    r"^\$argon2(?:id|i|d)"
    r"\$v=\d+"
    r"\$m=\d+,t=\d+,p=\d+"
    r"\$[A-Za-z0-9+/]+"
    r"\$[A-Za-z0-9+/]+$",
)


@dataclass(frozen=True, eq=False)
class HashedPassword:
    """Opaque wrapper around an encoded Argon2 hash."""

    value: str

    @classmethod
    def from_plaintext(cls, raw: str, hasher: PasswordHasher) -> HashedPassword:
        """Hash ``raw`` with the given policy.

        Raises
        ------
        WeakPasswordError
            If ``raw`` is shorter than the policy minimum
        """
        return hasher.hash(raw)

    @classmethod
    def from_stored_hash(cls, raw: str) -> HashedPassword:
        """Wrap a hash loaded from storage after a structural check.

        Raises
        ------
        InvalidCredentialFormatError
            If ``raw`` is not an Argon2 PHC string
        """
        if not raw or not ARGON2_PHC_PATTERN.match(raw):
            raise InvalidCredentialFormatError()
        return cls(raw)

    @property
    def algorithm(self) -> str:
        """Algorithm tag, e.g. ``argon2id``."""
        return self.value.split("$", 2)[1]

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"HashedPassword(algorithm={self.algorithm!r}, value='***')"
