from fedid.domain.credential.value_objects.hashed_password import (
    ARGON2_PHC_PATTERN,
    HashedPassword,
)

__all__ = [
    "ARGON2_PHC_PATTERN",
    "HashedPassword",
]
