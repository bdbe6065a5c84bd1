from fedid.domain.user.services.token_issuer import TokenIssuer

__all__ = ["TokenIssuer"]
