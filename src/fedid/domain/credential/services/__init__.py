from fedid.domain.credential.services.password_hasher import PasswordHasher

__all__ = ["PasswordHasher"]
