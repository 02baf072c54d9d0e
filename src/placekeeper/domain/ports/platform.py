"""Outbound port for the experience platform's web APIs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from placekeeper.domain.configuration import ExperienceConfiguration, PlaceConfiguration


@dataclass(slots=True, frozen=True)
class CreatedExperience:
    universe_id: int
    root_place_id: int


@dataclass(slots=True, frozen=True)
class ExperienceDetails:
    root_place_id: int


@dataclass(slots=True, frozen=True)
class CreatedPlace:
    place_id: int


@dataclass(slots=True, frozen=True)
class PlaceDetails:
    current_saved_version: int


@dataclass(slots=True, frozen=True)
class CreatedDeveloperProduct:
    """Result of creating a developer product.

    ``id`` is the creation-time product id; it is not the id update calls accept.
    """

    id: int
    shop_id: int


@dataclass(slots=True, frozen=True)
class DeveloperProduct:
    product_id: int
    developer_product_id: int


@runtime_checkable
class PlatformClient(Protocol):
    """Blocking operations against the platform. Failures raise; nothing is retried here."""

    def create_experience(self) -> CreatedExperience: ...

    def get_experience(self, experience_id: int) -> ExperienceDetails: ...

    def configure_experience(
        self, experience_id: int, configuration: ExperienceConfiguration
    ) -> None: ...

    def set_experience_active(self, experience_id: int, is_active: bool) -> None: ...  # noqa: FBT001

    def upload_icon(self, experience_id: int, file_path: Path) -> int: ...

    def upload_thumbnail(self, experience_id: int, file_path: Path) -> int: ...

    def set_experience_thumbnail_order(
        self, experience_id: int, thumbnail_ids: Sequence[int]
    ) -> None: ...

    def delete_experience_thumbnail(self, experience_id: int, thumbnail_id: int) -> None: ...

    def create_developer_product_icon(self, experience_id: int, file_path: Path) -> int: ...

    def create_developer_product(
        self,
        experience_id: int,
        *,
        name: str,
        price: int,
        description: str,
        icon_asset_id: int | None,
    ) -> CreatedDeveloperProduct: ...

    def find_developer_product_by_id(
        self, experience_id: int, product_id: int
    ) -> DeveloperProduct: ...

    def update_developer_product(
        self,
        experience_id: int,
        developer_product_id: int,
        *,
        name: str,
        price: int,
        description: str,
        icon_asset_id: int | None,
    ) -> None: ...

    def create_place(self, experience_id: int) -> CreatedPlace: ...

    def get_place(self, place_id: int) -> PlaceDetails: ...

    def upload_place(self, place_id: int, file_path: Path) -> None: ...

    def remove_place_from_experience(self, experience_id: int, place_id: int) -> None: ...

    def configure_place(self, place_id: int, configuration: PlaceConfiguration) -> None: ...


__all__ = [
    "CreatedDeveloperProduct",
    "CreatedExperience",
    "CreatedPlace",
    "DeveloperProduct",
    "ExperienceDetails",
    "PlaceDetails",
    "PlatformClient",
]
