from abc import ABC, abstractmethod

from ..domain.credentials import AccessToken, Credentials


class TokenProvider(ABC):
    """
    Port (interface) for exchanging client credentials for an access token.
    """

    @abstractmethod
    def get_access_token(self, credentials: Credentials) -> AccessToken:
        """
        Exchange a refresh token for a fresh access token.

        Args:
            credentials: Client id, client secret and refresh token

        Returns:
            AccessToken decoded from the authorization server response

        Raises:
            TransportError: If the request cannot be completed
            ExternalServiceError: If the server answers with an error status
            DecodeError: If the response body is not a token document
        """
        pass
