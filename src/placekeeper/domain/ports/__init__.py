"""Domain port definitions for adapters and callers."""

from __future__ import annotations

from .clock import Clock, utcnow
from .platform import (
    CreatedDeveloperProduct,
    CreatedExperience,
    CreatedPlace,
    DeveloperProduct,
    ExperienceDetails,
    PlaceDetails,
    PlatformClient,
)
from .resource_manager import ResourceManager

__all__ = [
    "Clock",
    "CreatedDeveloperProduct",
    "CreatedExperience",
    "CreatedPlace",
    "DeveloperProduct",
    "ExperienceDetails",
    "PlaceDetails",
    "PlatformClient",
    "ResourceManager",
    "utcnow",
]
