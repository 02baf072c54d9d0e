"""Minimal Pydantic models for the Roblox web API responses we read."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RobloxBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ApiError(RobloxBaseModel):
    code: int | None = None
    message: str = ""


class ErrorResponse(RobloxBaseModel):
    errors: list[ApiError] = Field(default_factory=list["ApiError"])


class CreateExperienceResponse(RobloxBaseModel):
    universe_id: int = Field(alias="UniverseId")
    root_place_id: int = Field(alias="RootPlaceId")


class GetExperienceResponse(RobloxBaseModel):
    root_place_id: int = Field(alias="rootPlaceId")


class UploadImageResponse(RobloxBaseModel):
    target_id: int = Field(alias="targetId")


class CreateDeveloperProductResponse(RobloxBaseModel):
    id: int
    shop_id: int = Field(alias="shopId")


class DeveloperProductPayload(RobloxBaseModel):
    product_id: int = Field(alias="ProductId")
    developer_product_id: int = Field(alias="DeveloperProductId")
    name: str | None = Field(default=None, alias="Name")


class ListDeveloperProductsResponse(RobloxBaseModel):
    developer_products: list[DeveloperProductPayload] = Field(
        default_factory=list["DeveloperProductPayload"], alias="DeveloperProducts"
    )
    final_page: bool = Field(default=True, alias="FinalPage")


class CreatePlaceResponse(RobloxBaseModel):
    place_id: int = Field(alias="PlaceId")


class GetPlaceResponse(RobloxBaseModel):
    current_saved_version: int = Field(alias="currentSavedVersion")
