"""
Pydantic models for the LWA and SMAPI wire formats.
These models handle the conversion between JSON bodies and domain objects.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from ...core.domain.credentials import AccessToken
from ...core.domain.metrics import MetricSeries


class TokenResponseModel(BaseModel):
    """Response body of the LWA token endpoint."""
    access_token: str = Field(..., description="Bearer token for SMAPI calls")
    expires_in: int = Field(0, description="Token lifetime in seconds")
    token_type: str = Field("bearer", description="Token type, normally 'bearer'")
    refresh_token: Optional[str] = Field(None, description="Rotated refresh token")

    @field_validator("access_token")
    @classmethod
    def validate_access_token(cls, v):
        """Reject empty tokens."""
        if not v.strip():
            raise ValueError("access_token cannot be empty")
        return v

    def to_domain(self) -> AccessToken:
        """Convert to domain object."""
        return AccessToken(
            access_token=self.access_token,
            expires_in=self.expires_in,
            token_type=self.token_type,
            refresh_token=self.refresh_token
        )


class MetricsResponseModel(BaseModel):
    """Response body of the SMAPI skill metrics endpoint."""
    metric: str = Field(..., description="Metric name echoed by the API")
    timestamps: List[str] = Field(default_factory=list, description="Per-period RFC3339 timestamps")
    values: List[float] = Field(default_factory=list, description="Per-period values, parallel to timestamps")

    def to_domain(self) -> MetricSeries:
        """Convert to domain object."""
        return MetricSeries(
            metric=self.metric,
            timestamps=list(self.timestamps),
            values=list(self.values)
        )

    @classmethod
    def from_domain(cls, series: MetricSeries) -> "MetricsResponseModel":
        """Convert from domain object to model."""
        return cls(
            metric=series.metric,
            timestamps=list(series.timestamps),
            values=list(series.values)
        )
