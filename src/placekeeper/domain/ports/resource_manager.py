"""Inbound port driven by the deployment orchestrator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from placekeeper.domain.resources.types import Document


@runtime_checkable
class ResourceManager(Protocol):
    """Create, update and delete resources described by untyped documents.

    ``update`` and ``delete`` receive the outputs document a previous ``create`` or
    ``update`` returned. Implementations keep no state between calls; the caller
    persists outputs and serialises operations on the same resource.
    """

    def create(self, resource_type: str, inputs: Document) -> Document | None: ...

    def update(
        self, resource_type: str, inputs: Document, outputs: Document
    ) -> Document | None: ...

    def delete(self, resource_type: str, inputs: Document, outputs: Document) -> None: ...


__all__ = ["ResourceManager"]
