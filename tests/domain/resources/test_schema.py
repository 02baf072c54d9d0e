from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from placekeeper.domain.configuration import (
    ExperienceConfiguration,
    ExperiencePermissions,
    Genre,
    PlaceConfiguration,
    SocialSlotType,
)
from placekeeper.domain.resources.codec import dump_outputs, parse_inputs, parse_outputs
from placekeeper.domain.resources.errors import InvalidInputsError, InvalidOutputsError
from placekeeper.domain.resources.schema import (
    ExperienceDeveloperProductIconOutputs,
    ExperienceDeveloperProductInputs,
    ExperienceDeveloperProductOutputs,
    ExperienceIconOutputs,
    ExperienceInputs,
    ExperienceOutputs,
    ExperienceThumbnailOutputs,
    PlaceFileOutputs,
    PlaceInputs,
    PlaceOutputs,
    ResourceDocument,
)
from placekeeper.domain.resources.types import SINGLETON_RESOURCE_ID, Document, ResourceType


@pytest.mark.parametrize(
    ("resource_type", "outputs"),
    [
        (ResourceType.EXPERIENCE, ExperienceOutputs(asset_id=1, start_place_id=2)),
        (ResourceType.EXPERIENCE_ICON, ExperienceIconOutputs(asset_id=3)),
        (ResourceType.EXPERIENCE_THUMBNAIL, ExperienceThumbnailOutputs(asset_id=4)),
        (
            ResourceType.EXPERIENCE_DEVELOPER_PRODUCT,
            ExperienceDeveloperProductOutputs(asset_id=5, product_id=6, shop_id=7),
        ),
        (
            ResourceType.EXPERIENCE_DEVELOPER_PRODUCT_ICON,
            ExperienceDeveloperProductIconOutputs(asset_id=8),
        ),
        (ResourceType.PLACE, PlaceOutputs(asset_id=2**64 - 1)),
        (ResourceType.PLACE_FILE, PlaceFileOutputs(version=41)),
    ],
)
def test_outputs_survive_json_serialisation(
    resource_type: ResourceType, outputs: ResourceDocument
) -> None:
    document = json.loads(json.dumps(dump_outputs(outputs)))

    restored = parse_outputs(resource_type, type(outputs), document)

    assert restored == outputs


def test_outputs_use_camel_case_keys() -> None:
    outputs = ExperienceDeveloperProductOutputs(asset_id=5, product_id=6, shop_id=7)

    assert dump_outputs(outputs) == {"assetId": 5, "productId": 6, "shopId": 7}


def test_place_file_outputs_default_version() -> None:
    assert parse_outputs(ResourceType.PLACE_FILE, PlaceFileOutputs, {}).version == 0


def test_inputs_ignore_unknown_keys() -> None:
    inputs = parse_inputs(
        ResourceType.EXPERIENCE, ExperienceInputs, {"assetId": 3, "comment": "kept upstream"}
    )

    assert inputs.asset_id == 3


def test_inputs_accept_snake_case_names() -> None:
    inputs = parse_inputs(
        ResourceType.PLACE,
        PlaceInputs,
        {"experience_id": 1, "start_place_id": 2, "is_start": True},
    )

    assert inputs.start_place_id == 2
    assert inputs.is_start is True


@pytest.mark.parametrize(
    ("resource_type", "model", "document"),
    [
        (ResourceType.EXPERIENCE, ExperienceInputs, {"assetId": True}),
        (ResourceType.EXPERIENCE, ExperienceInputs, {"assetId": "42"}),
        (
            ResourceType.EXPERIENCE_DEVELOPER_PRODUCT,
            ExperienceDeveloperProductInputs,
            {"experienceId": 1, "name": "Gems", "price": "25", "description": ""},
        ),
        (
            ResourceType.PLACE,
            PlaceInputs,
            {"experienceId": 1, "startPlaceId": 2, "isStart": "yes"},
        ),
    ],
)
def test_inputs_reject_coercible_scalars(
    resource_type: ResourceType, model: type[ResourceDocument], document: Document
) -> None:
    with pytest.raises(InvalidInputsError):
        parse_inputs(resource_type, model, document)


def test_configuration_rejects_coercible_scalars() -> None:
    with pytest.raises(ValidationError):
        ExperienceConfiguration.model_validate({"isFriendsOnly": 1})
    with pytest.raises(ValidationError):
        PlaceConfiguration.model_validate({"maxPlayerCount": "30"})


def test_asset_ids_are_limited_to_64_bits() -> None:
    with pytest.raises(InvalidOutputsError) as exc:
        parse_outputs(ResourceType.PLACE, PlaceOutputs, {"assetId": 2**64})

    assert exc.value.document_kind == "outputs"
    assert "assetId" in exc.value.detail


def test_parse_inputs_wraps_validation_errors() -> None:
    with pytest.raises(InvalidInputsError) as exc:
        parse_inputs(ResourceType.PLACE, PlaceInputs, None)

    assert isinstance(exc.value.__cause__, ValidationError)
    assert str(exc.value).startswith("Failed to deserialize inputs for place:")


def test_experience_configuration_payload_omits_unset_fields() -> None:
    configuration = ExperienceConfiguration(
        genre=Genre.SCI_FI,
        permissions=ExperiencePermissions(is_third_party_teleport_allowed=True),
        studio_access_to_apis_allowed=False,
    )

    assert configuration.to_payload() == {
        "genre": "SciFi",
        "permissions": {"isThirdPartyTeleportAllowed": True},
        "studioAccessToApisAllowed": False,
    }


def test_archived_overlay_only_sets_archive_flag() -> None:
    assert ExperienceConfiguration.archived().to_payload() == {"isArchived": True}


def test_place_configuration_rejects_unknown_social_slot_type() -> None:
    with pytest.raises(ValidationError):
        PlaceConfiguration.model_validate({"socialSlotType": "Crowded"})

    configuration = PlaceConfiguration.model_validate(
        {"socialSlotType": "Custom", "customSocialSlotsCount": 4}
    )
    assert configuration.social_slot_type is SocialSlotType.CUSTOM


def test_resource_type_tags_match_wire_names() -> None:
    assert [resource_type.value for resource_type in ResourceType] == [
        "experience",
        "experienceConfiguration",
        "experienceActivation",
        "experienceIcon",
        "experienceThumbnail",
        "experienceThumbnailOrder",
        "experienceDeveloperProduct",
        "experienceDeveloperProductIcon",
        "place",
        "placeFile",
        "placeConfiguration",
    ]
    assert SINGLETON_RESOURCE_ID == "singleton"
