"""Typed shapes of the per-resource inputs and outputs documents.

Documents use camelCase keys; unknown keys are ignored so that the orchestrator
can carry bookkeeping fields alongside the ones a resource type reads.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictBool, StrictStr
from pydantic.alias_generators import to_camel

from placekeeper.domain.configuration import (  # noqa: TC001
    ExperienceConfiguration,
    PlaceConfiguration,
)

from .types import AssetId  # noqa: TC001

type Price = Annotated[int, Strict(), Field(ge=0, lt=2**32)]


class ResourceDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)


class FileInputs(ResourceDocument):
    """Shared shape of resources backed by a local file."""

    file_path: StrictStr = Field(min_length=1)
    file_hash: StrictStr


class ExperienceInputs(ResourceDocument):
    asset_id: AssetId | None = None


class ExperienceOutputs(ResourceDocument):
    asset_id: AssetId
    start_place_id: AssetId


class ExperienceConfigurationInputs(ResourceDocument):
    experience_id: AssetId
    configuration: ExperienceConfiguration


class ExperienceActivationInputs(ResourceDocument):
    experience_id: AssetId
    is_active: StrictBool


class ExperienceIconInputs(FileInputs):
    experience_id: AssetId


class ExperienceIconOutputs(ResourceDocument):
    asset_id: AssetId


class ExperienceThumbnailInputs(FileInputs):
    experience_id: AssetId


class ExperienceThumbnailOutputs(ResourceDocument):
    asset_id: AssetId


class ExperienceThumbnailOrderInputs(ResourceDocument):
    experience_id: AssetId
    asset_ids: list[AssetId]


class ExperienceDeveloperProductInputs(ResourceDocument):
    experience_id: AssetId
    name: StrictStr
    price: Price
    description: StrictStr
    icon_asset_id: AssetId | None = None


class ExperienceDeveloperProductOutputs(ResourceDocument):
    """Identity of a developer product.

    ``asset_id`` is the id later update calls need; ``product_id`` is the id the
    creation call returned. The platform does not expose the former at creation time.
    """

    asset_id: AssetId
    product_id: AssetId
    shop_id: AssetId


class ExperienceDeveloperProductIconInputs(FileInputs):
    experience_id: AssetId


class ExperienceDeveloperProductIconOutputs(ResourceDocument):
    asset_id: AssetId


class PlaceInputs(ResourceDocument):
    experience_id: AssetId
    start_place_id: AssetId
    asset_id: AssetId | None = None
    is_start: StrictBool


class PlaceOutputs(ResourceDocument):
    asset_id: AssetId


class PlaceFileInputs(FileInputs):
    asset_id: AssetId


class PlaceFileOutputs(ResourceDocument):
    version: Annotated[int, Strict(), Field(ge=0)] = 0


class PlaceConfigurationInputs(ResourceDocument):
    asset_id: AssetId
    configuration: PlaceConfiguration
