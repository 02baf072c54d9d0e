"""Per-type create/update/delete rules.

Each handler owns one resource type. Update defaults to re-running create and
delete defaults to a no-op.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, assert_never

from placekeeper.domain.configuration import ExperienceConfiguration

from .codec import parse_inputs, parse_outputs
from .errors import StartPlaceDeletionError
from .schema import (
    ExperienceActivationInputs,
    ExperienceConfigurationInputs,
    ExperienceDeveloperProductIconInputs,
    ExperienceDeveloperProductIconOutputs,
    ExperienceDeveloperProductInputs,
    ExperienceDeveloperProductOutputs,
    ExperienceIconInputs,
    ExperienceIconOutputs,
    ExperienceInputs,
    ExperienceOutputs,
    ExperienceThumbnailInputs,
    ExperienceThumbnailOrderInputs,
    ExperienceThumbnailOutputs,
    PlaceConfigurationInputs,
    PlaceFileInputs,
    PlaceFileOutputs,
    PlaceInputs,
    PlaceOutputs,
)
from .types import ResourceType

if TYPE_CHECKING:
    from datetime import datetime

    from placekeeper.config.project import ProjectConfig
    from placekeeper.domain.ports.clock import Clock
    from placekeeper.domain.ports.platform import PlatformClient

    from .schema import ResourceDocument
    from .types import Document

log = getLogger(__name__)

DEPRECATED_NAME_PREFIX = "zzz_DEPRECATED"


@dataclass(slots=True, frozen=True)
class HandlerContext:
    """Collaborators shared by all handlers of one reconciler."""

    platform: PlatformClient
    project: ProjectConfig
    clock: Clock


@dataclass(slots=True, frozen=True)
class ResourceDocuments:
    """Documents for one operation, parsed on demand against the handler's models."""

    resource_type: ResourceType
    raw_inputs: Document
    raw_outputs: Document = None

    def inputs[M: ResourceDocument](self, model: type[M]) -> M:
        return parse_inputs(self.resource_type, model, self.raw_inputs)

    def outputs[M: ResourceDocument](self, model: type[M]) -> M:
        return parse_outputs(self.resource_type, model, self.raw_outputs)


@dataclass(slots=True)
class ResourceHandler(ABC):
    context: HandlerContext

    @property
    def platform(self) -> PlatformClient:
        return self.context.platform

    @abstractmethod
    def create(self, documents: ResourceDocuments) -> ResourceDocument | None:
        """Bring the resource into existence and return its outputs, if it has any."""
        ...

    def update(self, documents: ResourceDocuments) -> ResourceDocument | Document:
        """Return the new outputs, either as a model or as an already recorded document."""
        return self.create(documents)

    def delete(self, documents: ResourceDocuments) -> None:
        del documents


@dataclass(slots=True)
class ExperienceHandler(ResourceHandler):
    def create(self, documents: ResourceDocuments) -> ExperienceOutputs:
        inputs = documents.inputs(ExperienceInputs)
        if inputs.asset_id is not None:
            details = self.platform.get_experience(inputs.asset_id)
            log.info("Adopting experience %s", inputs.asset_id)
            return ExperienceOutputs(
                asset_id=inputs.asset_id, start_place_id=details.root_place_id
            )

        created = self.platform.create_experience()
        log.info("Created experience %s", created.universe_id)
        return ExperienceOutputs(
            asset_id=created.universe_id, start_place_id=created.root_place_id
        )

    def delete(self, documents: ResourceDocuments) -> None:
        # Experiences cannot be deleted; archiving keeps the id valid.
        outputs = documents.outputs(ExperienceOutputs)
        self.platform.configure_experience(outputs.asset_id, ExperienceConfiguration.archived())
        log.info("Archived experience %s", outputs.asset_id)


@dataclass(slots=True)
class ExperienceConfigurationHandler(ResourceHandler):
    def create(self, documents: ResourceDocuments) -> None:
        inputs = documents.inputs(ExperienceConfigurationInputs)
        self.platform.configure_experience(inputs.experience_id, inputs.configuration)


@dataclass(slots=True)
class ExperienceActivationHandler(ResourceHandler):
    def create(self, documents: ResourceDocuments) -> None:
        inputs = documents.inputs(ExperienceActivationInputs)
        self.platform.set_experience_active(inputs.experience_id, inputs.is_active)


@dataclass(slots=True)
class ExperienceIconHandler(ResourceHandler):
    def create(self, documents: ResourceDocuments) -> ExperienceIconOutputs:
        inputs = documents.inputs(ExperienceIconInputs)
        asset_id = self.platform.upload_icon(
            inputs.experience_id, self.context.project.resolve(inputs.file_path)
        )
        return ExperienceIconOutputs(asset_id=asset_id)

    def delete(self, documents: ResourceDocuments) -> None:
        # TODO: switch to a real delete once the platform exposes an icon delete endpoint.
        log.warning(
            "Experience icons cannot be deleted through the platform API; "
            "the uploaded icon is left in place (inputs: %s)",
            documents.raw_inputs,
        )


@dataclass(slots=True)
class ExperienceThumbnailHandler(ResourceHandler):
    def create(self, documents: ResourceDocuments) -> ExperienceThumbnailOutputs:
        inputs = documents.inputs(ExperienceThumbnailInputs)
        asset_id = self.platform.upload_thumbnail(
            inputs.experience_id, self.context.project.resolve(inputs.file_path)
        )
        return ExperienceThumbnailOutputs(asset_id=asset_id)

    def update(self, documents: ResourceDocuments) -> ExperienceThumbnailOutputs:
        # No in-place thumbnail update exists: replace the image.
        self.delete(documents)
        return self.create(documents)

    def delete(self, documents: ResourceDocuments) -> None:
        inputs = documents.inputs(ExperienceThumbnailInputs)
        outputs = documents.outputs(ExperienceThumbnailOutputs)
        self.platform.delete_experience_thumbnail(inputs.experience_id, outputs.asset_id)


@dataclass(slots=True)
class ExperienceThumbnailOrderHandler(ResourceHandler):
    def create(self, documents: ResourceDocuments) -> None:
        inputs = documents.inputs(ExperienceThumbnailOrderInputs)
        self.platform.set_experience_thumbnail_order(inputs.experience_id, inputs.asset_ids)


@dataclass(slots=True)
class ExperienceDeveloperProductHandler(ResourceHandler):
    def create(self, documents: ResourceDocuments) -> ExperienceDeveloperProductOutputs:
        inputs = documents.inputs(ExperienceDeveloperProductInputs)
        created = self.platform.create_developer_product(
            inputs.experience_id,
            name=inputs.name,
            price=inputs.price,
            description=inputs.description,
            icon_asset_id=inputs.icon_asset_id,
        )
        # Not transactional: if this lookup fails the product already exists.
        product = self.platform.find_developer_product_by_id(inputs.experience_id, created.id)
        log.info("Created developer product %s (%s)", product.product_id, inputs.name)
        return ExperienceDeveloperProductOutputs(
            asset_id=product.product_id,
            product_id=created.id,
            shop_id=created.shop_id,
        )

    def update(self, documents: ResourceDocuments) -> Document:
        inputs = documents.inputs(ExperienceDeveloperProductInputs)
        outputs = documents.outputs(ExperienceDeveloperProductOutputs)
        self.platform.update_developer_product(
            inputs.experience_id,
            outputs.asset_id,
            name=inputs.name,
            price=inputs.price,
            description=inputs.description,
            icon_asset_id=inputs.icon_asset_id,
        )
        # Identity is unchanged; hand back the recorded document as-is.
        return documents.raw_outputs

    def delete(self, documents: ResourceDocuments) -> None:
        # Products cannot be removed; rename them out of the way instead.
        inputs = documents.inputs(ExperienceDeveloperProductInputs)
        outputs = documents.outputs(ExperienceDeveloperProductOutputs)
        self.platform.update_developer_product(
            inputs.experience_id,
            outputs.asset_id,
            name=deprecated_product_name(self.context.clock()),
            price=inputs.price,
            description=deprecated_product_description(inputs.name, inputs.description),
            icon_asset_id=inputs.icon_asset_id,
        )
        log.info("Deprecated developer product %s (%s)", outputs.asset_id, inputs.name)


@dataclass(slots=True)
class ExperienceDeveloperProductIconHandler(ResourceHandler):
    def create(self, documents: ResourceDocuments) -> ExperienceDeveloperProductIconOutputs:
        inputs = documents.inputs(ExperienceDeveloperProductIconInputs)
        asset_id = self.platform.create_developer_product_icon(
            inputs.experience_id, self.context.project.resolve(inputs.file_path)
        )
        return ExperienceDeveloperProductIconOutputs(asset_id=asset_id)


@dataclass(slots=True)
class PlaceHandler(ResourceHandler):
    def create(self, documents: ResourceDocuments) -> PlaceOutputs:
        inputs = documents.inputs(PlaceInputs)
        if inputs.asset_id is not None:
            return PlaceOutputs(asset_id=inputs.asset_id)
        if inputs.is_start:
            return PlaceOutputs(asset_id=inputs.start_place_id)

        created = self.platform.create_place(inputs.experience_id)
        log.info("Created place %s in experience %s", created.place_id, inputs.experience_id)
        return PlaceOutputs(asset_id=created.place_id)

    def delete(self, documents: ResourceDocuments) -> None:
        inputs = documents.inputs(PlaceInputs)
        if inputs.is_start:
            raise StartPlaceDeletionError(inputs.asset_id or inputs.start_place_id)
        outputs = documents.outputs(PlaceOutputs)
        self.platform.remove_place_from_experience(inputs.experience_id, outputs.asset_id)
        log.info("Removed place %s from experience %s", outputs.asset_id, inputs.experience_id)


@dataclass(slots=True)
class PlaceFileHandler(ResourceHandler):
    def create(self, documents: ResourceDocuments) -> PlaceFileOutputs:
        inputs = documents.inputs(PlaceFileInputs)
        self.platform.upload_place(inputs.asset_id, self.context.project.resolve(inputs.file_path))
        details = self.platform.get_place(inputs.asset_id)
        log.info("Published place %s at version %s", inputs.asset_id, details.current_saved_version)
        return PlaceFileOutputs(version=details.current_saved_version)


@dataclass(slots=True)
class PlaceConfigurationHandler(ResourceHandler):
    def create(self, documents: ResourceDocuments) -> None:
        inputs = documents.inputs(PlaceConfigurationInputs)
        self.platform.configure_place(inputs.asset_id, inputs.configuration)


def deprecated_product_name(now: datetime) -> str:
    return f"{DEPRECATED_NAME_PREFIX}({now.strftime('%Y-%m-%d %H:%M:%S.%f')})"


def deprecated_product_description(name: str, description: str) -> str:
    return f"Name: {name}\nDescription:\n{description}"


def handler_for(resource_type: ResourceType, context: HandlerContext) -> ResourceHandler:
    match resource_type:
        case ResourceType.EXPERIENCE:
            return ExperienceHandler(context)
        case ResourceType.EXPERIENCE_CONFIGURATION:
            return ExperienceConfigurationHandler(context)
        case ResourceType.EXPERIENCE_ACTIVATION:
            return ExperienceActivationHandler(context)
        case ResourceType.EXPERIENCE_ICON:
            return ExperienceIconHandler(context)
        case ResourceType.EXPERIENCE_THUMBNAIL:
            return ExperienceThumbnailHandler(context)
        case ResourceType.EXPERIENCE_THUMBNAIL_ORDER:
            return ExperienceThumbnailOrderHandler(context)
        case ResourceType.EXPERIENCE_DEVELOPER_PRODUCT:
            return ExperienceDeveloperProductHandler(context)
        case ResourceType.EXPERIENCE_DEVELOPER_PRODUCT_ICON:
            return ExperienceDeveloperProductIconHandler(context)
        case ResourceType.PLACE:
            return PlaceHandler(context)
        case ResourceType.PLACE_FILE:
            return PlaceFileHandler(context)
        case ResourceType.PLACE_CONFIGURATION:
            return PlaceConfigurationHandler(context)
        case _:
            assert_never(resource_type)
