from fedid.domain.credential.entities.credential import Credential

__all__ = ["Credential"]
