"""Resource reconciliation: per-type rules for creating, updating and deleting platform resources.

Flow for one request:
1) resolve the resource type tag (unknown tags are a defect, not a data error)
2) parse the inputs/outputs documents the handler needs into typed models
3) run the handler's platform calls
4) serialise the resulting outputs back into a document
"""

from __future__ import annotations

from .errors import (
    InvalidDocumentError,
    InvalidInputsError,
    InvalidOutputsError,
    ResourceError,
    StartPlaceDeletionError,
    UnknownResourceTypeError,
)
from .reconciler import ResourceReconciler
from .types import SINGLETON_RESOURCE_ID, AssetId, Document, ResourceType

__all__ = [
    "SINGLETON_RESOURCE_ID",
    "AssetId",
    "Document",
    "InvalidDocumentError",
    "InvalidInputsError",
    "InvalidOutputsError",
    "ResourceError",
    "ResourceReconciler",
    "ResourceType",
    "StartPlaceDeletionError",
    "UnknownResourceTypeError",
]
