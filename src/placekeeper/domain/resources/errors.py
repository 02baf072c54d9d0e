"""Errors raised by the resource reconciler."""

from __future__ import annotations

from typing import Literal

type DocumentKind = Literal["inputs", "outputs"]


class ResourceError(RuntimeError):
    """Base class for recoverable errors reported back to the orchestrator."""


class InvalidDocumentError(ResourceError):
    """Raised when a document does not match the shape its resource type expects."""

    def __init__(self, resource_type: str, document_kind: DocumentKind, detail: str) -> None:
        super().__init__(f"Failed to deserialize {document_kind} for {resource_type}: {detail}")
        self.resource_type = resource_type
        self.document_kind = document_kind
        self.detail = detail


class InvalidInputsError(InvalidDocumentError):
    def __init__(self, resource_type: str, detail: str) -> None:
        super().__init__(resource_type, "inputs", detail)


class InvalidOutputsError(InvalidDocumentError):
    def __init__(self, resource_type: str, detail: str) -> None:
        super().__init__(resource_type, "outputs", detail)


class StartPlaceDeletionError(ResourceError):
    """Raised when asked to delete the start place of an experience."""

    def __init__(self, place_id: int | None = None) -> None:
        super().__init__(
            "Cannot delete the start place of an experience. "
            "Try creating a new experience instead."
        )
        self.place_id = place_id


class UnknownResourceTypeError(LookupError):
    """Raised for a resource type outside the registry.

    Signals a defect upstream of the reconciler. Not a :class:`ResourceError`, so
    handlers of recoverable errors let it propagate.
    """

    def __init__(self, resource_type: str, operation: str) -> None:
        super().__init__(
            f"{operation.capitalize()} not implemented for resource type: {resource_type}"
        )
        self.resource_type = resource_type
        self.operation = operation
