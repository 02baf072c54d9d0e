"""Resource type registry and shared primitive aliases."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Final

from pydantic import Field, JsonValue, Strict

type AssetId = Annotated[int, Strict(), Field(ge=0, lt=2**64)]
"""Platform-assigned unsigned 64-bit identifier. Booleans and numeric strings are rejected."""

type Document = JsonValue
"""Untyped structured value exchanged with the orchestrator."""

SINGLETON_RESOURCE_ID: Final[str] = "singleton"


class ResourceType(StrEnum):
    """Closed set of resource kinds the reconciler knows how to manage."""

    EXPERIENCE = "experience"
    EXPERIENCE_CONFIGURATION = "experienceConfiguration"
    EXPERIENCE_ACTIVATION = "experienceActivation"
    EXPERIENCE_ICON = "experienceIcon"
    EXPERIENCE_THUMBNAIL = "experienceThumbnail"
    EXPERIENCE_THUMBNAIL_ORDER = "experienceThumbnailOrder"
    EXPERIENCE_DEVELOPER_PRODUCT = "experienceDeveloperProduct"
    EXPERIENCE_DEVELOPER_PRODUCT_ICON = "experienceDeveloperProductIcon"
    PLACE = "place"
    PLACE_FILE = "placeFile"
    PLACE_CONFIGURATION = "placeConfiguration"
