"""Entry point translating orchestrator requests into platform calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from placekeeper.domain.ports.clock import utcnow

from .codec import dump_outputs
from .errors import UnknownResourceTypeError
from .handlers import HandlerContext, ResourceDocuments, ResourceHandler, handler_for
from .schema import ResourceDocument
from .types import ResourceType

if TYPE_CHECKING:
    from placekeeper.config.project import ProjectConfig
    from placekeeper.domain.ports.clock import Clock
    from placekeeper.domain.ports.platform import PlatformClient

    from .types import Document

log = getLogger(__name__)


def resolve_resource_type(resource_type: str, *, operation: str) -> ResourceType:
    try:
        return ResourceType(resource_type)
    except ValueError:
        raise UnknownResourceTypeError(resource_type, operation) from None


@dataclass(slots=True)
class ResourceReconciler:
    """Stateless create/update/delete dispatcher over a closed set of resource types.

    Malformed documents and guarded business rules raise subclasses of
    :class:`~placekeeper.domain.resources.errors.ResourceError`. Platform failures
    propagate unchanged. An unknown resource type raises
    :class:`~placekeeper.domain.resources.errors.UnknownResourceTypeError`.
    """

    platform: PlatformClient
    project: ProjectConfig
    clock: Clock = field(default=utcnow)

    def create(self, resource_type: str, inputs: Document) -> Document | None:
        kind = resolve_resource_type(resource_type, operation="create")
        log.debug("Creating %s", kind)
        outputs = self._handler(kind).create(ResourceDocuments(kind, inputs))
        return _dump(outputs)

    def update(self, resource_type: str, inputs: Document, outputs: Document) -> Document | None:
        kind = resolve_resource_type(resource_type, operation="update")
        log.debug("Updating %s", kind)
        new_outputs = self._handler(kind).update(ResourceDocuments(kind, inputs, outputs))
        return _dump(new_outputs)

    def delete(self, resource_type: str, inputs: Document, outputs: Document) -> None:
        kind = resolve_resource_type(resource_type, operation="delete")
        log.debug("Deleting %s", kind)
        self._handler(kind).delete(ResourceDocuments(kind, inputs, outputs))

    def _handler(self, resource_type: ResourceType) -> ResourceHandler:
        context = HandlerContext(platform=self.platform, project=self.project, clock=self.clock)
        return handler_for(resource_type, context)


def _dump(outputs: ResourceDocument | Document) -> Document:
    if isinstance(outputs, ResourceDocument):
        return dump_outputs(outputs)
    return outputs
