"""Roblox platform adapter package."""

from __future__ import annotations

from .client import RobloxAPIError, RobloxClient
from .schema import (
    CreateDeveloperProductResponse,
    CreateExperienceResponse,
    CreatePlaceResponse,
    GetExperienceResponse,
    GetPlaceResponse,
    ListDeveloperProductsResponse,
    UploadImageResponse,
)

__all__ = [
    "CreateDeveloperProductResponse",
    "CreateExperienceResponse",
    "CreatePlaceResponse",
    "GetExperienceResponse",
    "GetPlaceResponse",
    "ListDeveloperProductsResponse",
    "RobloxAPIError",
    "RobloxClient",
    "UploadImageResponse",
]
