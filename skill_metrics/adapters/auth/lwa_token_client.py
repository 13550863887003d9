"""
Login with Amazon (LWA) adapter for access token exchange.
This implements the TokenProvider port with the OAuth2 refresh_token grant.
"""

import logging

import httpx
from pydantic import ValidationError

from ...core.ports.token_provider import TokenProvider
from ...core.ports.exceptions import DecodeError, ExternalServiceError, TransportError
from ...core.domain.credentials import AccessToken, Credentials
from ..models import TokenResponseModel


class LwaTokenClient(TokenProvider):
    """
    LWA adapter that implements the TokenProvider port.
    Posts a form-encoded refresh_token grant to the authorization server.
    """

    SERVICE_NAME = "LWA"

    def __init__(self, http_client: httpx.Client, token_url: str):
        """
        Initialize the token client.

        Args:
            http_client: Shared HTTP client for the run
            token_url: Authorization server token endpoint
        """
        self.http_client = http_client
        self.token_url = token_url
        self.logger = logging.getLogger(__name__)

    def get_access_token(self, credentials: Credentials) -> AccessToken:
        self.logger.info(f"Requesting LWA access token from {self.token_url}")

        try:
            response = self.http_client.post(
                self.token_url,
                data=self.build_form(credentials),
                headers={"Content-Type": "application/x-www-form-urlencoded"}
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.error(f"LWA token request failed: {e!r}")
            raise TransportError(self.SERVICE_NAME, e)

        if response.is_error:
            self.logger.error(f"LWA token request returned HTTP {response.status_code}")
            raise ExternalServiceError(self.SERVICE_NAME, response.status_code, response.text)

        try:
            token = TokenResponseModel.model_validate_json(response.content).to_domain()
        except (ValidationError, ValueError) as e:
            self.logger.error(f"Error decoding LWA token response: {e}")
            raise DecodeError(self.SERVICE_NAME, e)

        self.logger.info(f"Received LWA access token expiring in {token.expires_in}s")
        return token

    @staticmethod
    def build_form(credentials: Credentials) -> dict:
        """Form fields for the refresh_token grant, in wire order."""
        return {
            "grant_type": "refresh_token",
            "client_id": credentials.client_id,
            "client_secret": credentials.client_secret,
            "refresh_token": credentials.refresh_token
        }
