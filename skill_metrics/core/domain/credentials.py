from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Credentials:
    """LWA client credentials and the long-lived refresh token."""
    client_id: str
    client_secret: str
    refresh_token: str

    def __post_init__(self):
        for name in ("client_id", "client_secret", "refresh_token"):
            if not getattr(self, name):
                raise ValueError(f"{name} is required")

    def __repr__(self) -> str:
        return f"Credentials(client_id={self.client_id!r}, client_secret='***', refresh_token='***')"


@dataclass(frozen=True)
class AccessToken:
    """
    Result of a refresh_token grant.
    Lives for a single run; expiry is recorded but never acted on.
    """
    access_token: str
    expires_in: int = 0
    token_type: str = "bearer"
    refresh_token: Optional[str] = None

    @property
    def authorization_header(self) -> str:
        return f"Bearer {self.access_token}"

    def masked(self, visible: int = 4) -> str:
        """Return the access token with all but the last few characters hidden."""
        if len(self.access_token) <= visible:
            return "*" * len(self.access_token)
        return "*" * (len(self.access_token) - visible) + self.access_token[-visible:]
