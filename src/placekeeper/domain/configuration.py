"""Experience and place configuration overlays.

Both models are sparse: every field is optional and unset fields are omitted
when serialised, so the platform keeps its current value for them.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictBool, StrictStr
from pydantic.alias_generators import to_camel


type Count = Annotated[int, Strict(), Field(ge=0)]


class ConfigurationModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_payload(self) -> dict[str, object]:
        """Return the camelCase payload with unset fields left out."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Genre(StrEnum):
    ALL = "All"
    ADVENTURE = "Adventure"
    TUTORIAL = "Tutorial"
    FUNNY = "Funny"
    NINJA = "Ninja"
    FPS = "FPS"
    SCARY = "Scary"
    FANTASY = "Fantasy"
    WAR = "War"
    PIRATE = "Pirate"
    RPG = "RPG"
    SCI_FI = "SciFi"
    SPORTS = "Sports"
    TOWN_AND_CITY = "TownAndCity"
    WILD_WEST = "WildWest"


class PlayableDevice(StrEnum):
    COMPUTER = "Computer"
    PHONE = "Phone"
    TABLET = "Tablet"
    CONSOLE = "Console"


class AvatarType(StrEnum):
    MORPH_TO_R6 = "MorphToR6"
    PLAYER_CHOICE = "PlayerChoice"
    MORPH_TO_R15 = "MorphToR15"


class AnimationType(StrEnum):
    STANDARD = "Standard"
    PLAYER_CHOICE = "PlayerChoice"


class CollisionType(StrEnum):
    OUTER_BOX = "OuterBox"
    INNER_BOX = "InnerBox"


class SocialSlotType(StrEnum):
    AUTOMATIC = "Automatic"
    EMPTY = "Empty"
    CUSTOM = "Custom"


class ExperiencePermissions(ConfigurationModel):
    is_third_party_purchase_allowed: StrictBool | None = None
    is_third_party_teleport_allowed: StrictBool | None = None


class ExperienceConfiguration(ConfigurationModel):
    genre: Genre | None = None
    playable_devices: list[PlayableDevice] | None = None
    is_friends_only: StrictBool | None = None
    allow_private_servers: StrictBool | None = None
    private_server_price: Count | None = None
    is_for_sale: StrictBool | None = None
    price: Count | None = None
    studio_access_to_apis_allowed: StrictBool | None = None
    permissions: ExperiencePermissions | None = None
    universe_avatar_type: AvatarType | None = None
    universe_animation_type: AnimationType | None = None
    universe_collision_type: CollisionType | None = None
    is_archived: StrictBool | None = None

    @classmethod
    def archived(cls) -> ExperienceConfiguration:
        """Overlay that archives an experience and touches nothing else."""

        return cls(is_archived=True)


class PlaceConfiguration(ConfigurationModel):
    name: StrictStr | None = None
    description: StrictStr | None = None
    max_player_count: Annotated[int, Strict(), Field(ge=1)] | None = None
    allow_copying: StrictBool | None = None
    social_slot_type: SocialSlotType | None = None
    custom_social_slots_count: Count | None = None
