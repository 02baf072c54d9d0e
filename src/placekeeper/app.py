"""Application orchestration entry points."""

from __future__ import annotations

from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from placekeeper.adapters.roblox import RobloxClient
from placekeeper.config import get_project_config, get_roblox_config
from placekeeper.domain.ports.clock import utcnow
from placekeeper.domain.resources import ResourceReconciler

if TYPE_CHECKING:
    from pathlib import Path

    from placekeeper.domain.ports.clock import Clock
    from placekeeper.domain.ports.platform import PlatformClient
    from placekeeper.domain.ports.resource_manager import ResourceManager
    from placekeeper.domain.resources import Document


log = getLogger(__name__)


class Operation(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


def build_resource_reconciler(
    *,
    project_dir: str | Path | None = None,
    platform: PlatformClient | None = None,
    clock: Clock | None = None,
) -> ResourceReconciler:
    """Wire a reconciler to the configured project directory and Roblox session."""

    project = get_project_config(project_dir=project_dir)
    effective_platform = platform or RobloxClient(config=get_roblox_config())
    return ResourceReconciler(
        platform=effective_platform,
        project=project,
        clock=clock or utcnow,
    )


def reconcile_resource(
    reconciler: ResourceManager,
    operation: Operation,
    resource_type: str,
    inputs: Document,
    outputs: Document = None,
) -> Document | None:
    """Run one reconciler operation and return the new outputs document, if any."""

    log.info(f"Starting {operation} of {resource_type}")
    match operation:
        case Operation.CREATE:
            result = reconciler.create(resource_type, inputs)
        case Operation.UPDATE:
            result = reconciler.update(resource_type, inputs, outputs)
        case Operation.DELETE:
            reconciler.delete(resource_type, inputs, outputs)
            result = None
    log.info(f"Finished {operation} of {resource_type}: outputs={result}")
    return result
