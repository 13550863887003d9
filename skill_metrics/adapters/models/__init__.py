"""
Models package for infrastructure layer.
Contains Pydantic models for LWA and SMAPI response bodies.
"""

from .models import (
    TokenResponseModel,
    MetricsResponseModel
)

__all__ = [
    "TokenResponseModel",
    "MetricsResponseModel"
]
