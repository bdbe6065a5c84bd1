"""Token issuing capability."""

from abc import ABC, abstractmethod

from fedid.domain.user.aggregates.user import User
from fedid.domain.user.value_objects.access_token import AccessToken


class TokenIssuer(ABC):
    """Issues signed bearer tokens for authenticated users."""

    @abstractmethod
    def issue(self, user: User) -> AccessToken:
        """Issue a token for ``user``.

        Raises
        ------
        TokenIssuanceError
            If the token cannot be signed
        """
