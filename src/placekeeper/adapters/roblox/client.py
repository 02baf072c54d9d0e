"""HTTP client for the Roblox web APIs used to deploy experiences."""

from __future__ import annotations

import asyncio
import mimetypes
from logging import getLogger
from typing import TYPE_CHECKING, TypedDict, Unpack

from placekeeper.adapters.http_resilience import ResilientClient, build_limiter
from placekeeper.domain.ports.platform import (
    CreatedDeveloperProduct,
    CreatedExperience,
    CreatedPlace,
    DeveloperProduct,
    ExperienceDetails,
    PlaceDetails,
    PlatformClient,
)

from .schema import (
    CreateDeveloperProductResponse,
    CreateExperienceResponse,
    CreatePlaceResponse,
    ErrorResponse,
    GetExperienceResponse,
    GetPlaceResponse,
    ListDeveloperProductsResponse,
    RobloxBaseModel,
    UploadImageResponse,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from pathlib import Path

    import httpx
    from aiolimiter import AsyncLimiter
    from httpx._types import QueryParamTypes, RequestContent, RequestFiles

    from placekeeper.config.http_resilience import ResilienceConfig
    from placekeeper.config.roblox import RobloxConfig
    from placekeeper.domain.configuration import ExperienceConfiguration, PlaceConfiguration

log = getLogger(__name__)

type ClientFactory = Callable[[ResilienceConfig, AsyncLimiter | None], ResilientClient]

API_URL = "https://api.roblox.com"
DEVELOP_URL = "https://develop.roblox.com"
PUBLISH_URL = "https://publish.roblox.com"
DATA_URL = "https://data.roblox.com"
WWW_URL = "https://www.roblox.com"

# Baseplate template used for new experiences and places.
TEMPLATE_PLACE_ID = 95206881
DEVELOPER_PRODUCTS_PAGE_SIZE = 50
SECURITY_COOKIE_NAME = ".ROBLOSECURITY"
CSRF_HEADER = "X-CSRF-TOKEN"

PLACE_FILE_CONTENT_TYPES = {
    ".rbxl": "application/octet-stream",
    ".rbxlx": "application/xml",
}


class RobloxAPIError(RuntimeError):
    """Raised when a Roblox endpoint rejects a request or returns an unexpected payload."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class _BodyOptions(TypedDict, total=False):
    content: RequestContent | None
    files: RequestFiles | None
    json: object
    params: QueryParamTypes | None


class RobloxClient:
    """Blocking :class:`PlatformClient` backed by the async resilient HTTP client."""

    def __init__(
        self,
        *,
        config: RobloxConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        # Each call runs on its own event loop and client; the limiter outlives both.
        self._limiter = build_limiter(config.resilience.ratelimit)
        self._client_factory = client_factory or self._default_client_factory
        self._csrf_token: str | None = None

    def _default_client_factory(
        self, resilience: ResilienceConfig, limiter: AsyncLimiter | None
    ) -> ResilientClient:
        return ResilientClient(
            resilience,
            cookies={SECURITY_COOKIE_NAME: self._config.security_cookie},
            limiter=limiter,
        )

    # Experiences

    def create_experience(self) -> CreatedExperience:
        response = self._call(
            "POST",
            f"{API_URL}/universes/create",
            json={"templatePlaceIdToUse": TEMPLATE_PLACE_ID},
        )
        payload = _parse(CreateExperienceResponse, response)
        return CreatedExperience(
            universe_id=payload.universe_id, root_place_id=payload.root_place_id
        )

    def get_experience(self, experience_id: int) -> ExperienceDetails:
        response = self._call("GET", f"{DEVELOP_URL}/v1/universes/{experience_id}")
        payload = _parse(GetExperienceResponse, response)
        return ExperienceDetails(root_place_id=payload.root_place_id)

    def configure_experience(
        self, experience_id: int, configuration: ExperienceConfiguration
    ) -> None:
        self._call(
            "PATCH",
            f"{DEVELOP_URL}/v2/universes/{experience_id}/configuration",
            json=configuration.to_payload(),
        )

    def set_experience_active(self, experience_id: int, is_active: bool) -> None:  # noqa: FBT001
        action = "activate" if is_active else "deactivate"
        self._call("POST", f"{DEVELOP_URL}/v1/universes/{experience_id}/{action}")

    def upload_icon(self, experience_id: int, file_path: Path) -> int:
        response = self._call(
            "POST",
            f"{PUBLISH_URL}/v1/games/{experience_id}/icon",
            files=_image_files(file_path),
        )
        return _parse(UploadImageResponse, response).target_id

    def upload_thumbnail(self, experience_id: int, file_path: Path) -> int:
        response = self._call(
            "POST",
            f"{PUBLISH_URL}/v1/games/{experience_id}/thumbnail/image",
            files=_image_files(file_path),
        )
        return _parse(UploadImageResponse, response).target_id

    def set_experience_thumbnail_order(
        self, experience_id: int, thumbnail_ids: Sequence[int]
    ) -> None:
        self._call(
            "POST",
            f"{DEVELOP_URL}/v1/universes/{experience_id}/thumbnails/order",
            json={"thumbnailIds": list(thumbnail_ids)},
        )

    def delete_experience_thumbnail(self, experience_id: int, thumbnail_id: int) -> None:
        self._call(
            "DELETE",
            f"{DEVELOP_URL}/v1/universes/{experience_id}/thumbnails/{thumbnail_id}",
        )

    # Developer products

    def create_developer_product_icon(self, experience_id: int, file_path: Path) -> int:
        response = self._call(
            "POST",
            f"{PUBLISH_URL}/v1/games/{experience_id}/developer-products/icon",
            files=_image_files(file_path),
        )
        return _parse(UploadImageResponse, response).target_id

    def create_developer_product(
        self,
        experience_id: int,
        *,
        name: str,
        price: int,
        description: str,
        icon_asset_id: int | None,
    ) -> CreatedDeveloperProduct:
        params: dict[str, str | int] = {
            "name": name,
            "description": description,
            "priceInRobux": price,
        }
        if icon_asset_id is not None:
            params["iconImageAssetId"] = icon_asset_id
        response = self._call(
            "POST",
            f"{DEVELOP_URL}/v1/universes/{experience_id}/developerproducts",
            params=params,
        )
        payload = _parse(CreateDeveloperProductResponse, response)
        return CreatedDeveloperProduct(id=payload.id, shop_id=payload.shop_id)

    def find_developer_product_by_id(
        self, experience_id: int, product_id: int
    ) -> DeveloperProduct:
        return asyncio.run(self._find_developer_product_async(experience_id, product_id))

    def update_developer_product(
        self,
        experience_id: int,
        developer_product_id: int,
        *,
        name: str,
        price: int,
        description: str,
        icon_asset_id: int | None,
    ) -> None:
        self._call(
            "POST",
            f"{DEVELOP_URL}/v1/universes/{experience_id}"
            f"/developerproducts/{developer_product_id}/update",
            json={
                "Name": name,
                "Description": description,
                "PriceInRobux": price,
                "IconImageAssetId": icon_asset_id,
            },
        )

    # Places

    def create_place(self, experience_id: int) -> CreatedPlace:
        response = self._call(
            "POST",
            f"{WWW_URL}/ide/places/createV2",
            params={"universeId": experience_id, "templatePlaceIdToUse": TEMPLATE_PLACE_ID},
            json={},
        )
        return CreatedPlace(place_id=_parse(CreatePlaceResponse, response).place_id)

    def get_place(self, place_id: int) -> PlaceDetails:
        response = self._call("GET", f"{DEVELOP_URL}/v2/places/{place_id}")
        payload = _parse(GetPlaceResponse, response)
        return PlaceDetails(current_saved_version=payload.current_saved_version)

    def upload_place(self, place_id: int, file_path: Path) -> None:
        content_type = PLACE_FILE_CONTENT_TYPES.get(file_path.suffix.lower())
        if content_type is None:
            supported = ", ".join(sorted(PLACE_FILE_CONTENT_TYPES))
            raise ValueError(f"Unsupported place file {file_path}; expected one of: {supported}")
        self._call(
            "POST",
            f"{DATA_URL}/Data/Upload.ashx",
            params={"assetId": place_id},
            content=file_path.read_bytes(),
            headers={"Content-Type": content_type},
        )

    def remove_place_from_experience(self, experience_id: int, place_id: int) -> None:
        self._call(
            "POST",
            f"{DEVELOP_URL}/v1/universes/{experience_id}/removeplace",
            json={"placeId": place_id},
        )

    def configure_place(self, place_id: int, configuration: PlaceConfiguration) -> None:
        self._call(
            "PATCH",
            f"{DEVELOP_URL}/v2/places/{place_id}",
            json=configuration.to_payload(),
        )

    # Transport

    def _call(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        **kwargs: Unpack[_BodyOptions],
    ) -> httpx.Response:
        return asyncio.run(self._call_async(method, url, headers=headers, **kwargs))

    async def _call_async(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None,
        **kwargs: Unpack[_BodyOptions],
    ) -> httpx.Response:
        async with self._client_factory(self._resilience, self._limiter) as client:
            return await self._perform_request(client, method, url, headers=headers, **kwargs)

    async def _perform_request(
        self,
        client: ResilientClient,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        **kwargs: Unpack[_BodyOptions],
    ) -> httpx.Response:
        # Mutating endpoints answer 403 with a fresh token until it is echoed back.
        for _attempt in range(2):
            request_headers = dict(headers) if headers else {}
            if self._csrf_token is not None:
                request_headers[CSRF_HEADER] = self._csrf_token
            response = await client.request(method, url, headers=request_headers, **kwargs)
            token = response.headers.get(CSRF_HEADER)
            if response.status_code == 403 and token and token != self._csrf_token:  # noqa: PLR2004
                log.debug("Refreshing CSRF token for %s %s", method, url)
                self._csrf_token = token
                continue
            break
        _raise_for_status(response, method=method, url=url)
        return response

    async def _find_developer_product_async(
        self, experience_id: int, product_id: int
    ) -> DeveloperProduct:
        page_number = 1
        async with self._client_factory(self._resilience, self._limiter) as client:
            while True:
                response = await self._perform_request(
                    client,
                    "GET",
                    f"{DEVELOP_URL}/v1/universes/{experience_id}/developerproducts",
                    params={
                        "pageNumber": page_number,
                        "pageSize": DEVELOPER_PRODUCTS_PAGE_SIZE,
                    },
                )
                page = _parse(ListDeveloperProductsResponse, response)
                for product in page.developer_products:
                    if product.developer_product_id == product_id:
                        return DeveloperProduct(
                            product_id=product.product_id,
                            developer_product_id=product.developer_product_id,
                        )
                if page.final_page or not page.developer_products:
                    break
                page_number += 1

        raise RobloxAPIError(
            f"Developer product {product_id} not found in experience {experience_id}"
        )


def _image_files(file_path: Path) -> dict[str, tuple[str, bytes, str]]:
    content_type = mimetypes.guess_type(file_path.name)[0] or "application/octet-stream"
    return {"request.files": (file_path.name, file_path.read_bytes(), content_type)}


def _parse[M: RobloxBaseModel](model: type[M], response: httpx.Response) -> M:
    try:
        return model.model_validate(response.json())
    except ValueError as exc:
        raise RobloxAPIError(
            f"Unexpected Roblox response payload from {response.request.url}",
            status_code=response.status_code,
        ) from exc


def _raise_for_status(response: httpx.Response, *, method: str, url: str) -> None:
    if response.is_success:
        return

    message = response.reason_phrase or f"HTTP {response.status_code}"
    code: int | None = None
    try:
        error_payload = ErrorResponse.model_validate(response.json())
    except ValueError:
        error_payload = None
    if error_payload is not None and error_payload.errors:
        message = error_payload.errors[0].message or message
        code = error_payload.errors[0].code

    log.error(f"Roblox API error {response.status_code} on {method} {url}: {message}")
    raise RobloxAPIError(message, status_code=response.status_code, code=code)


if TYPE_CHECKING:

    def _conforms_to_port(client: RobloxClient) -> PlatformClient:
        return client
