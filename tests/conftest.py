from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from placekeeper.config.project import ProjectConfig
from placekeeper.domain.resources import ResourceReconciler
from tests.helpers.platform import FakePlatformClient

if TYPE_CHECKING:
    from pathlib import Path

FIXED_NOW = datetime(2024, 3, 9, 17, 45, 12, 345678, tzinfo=UTC)


@pytest.fixture
def fake_platform() -> FakePlatformClient:
    return FakePlatformClient()


@pytest.fixture
def project_config(tmp_path: Path) -> ProjectConfig:
    return ProjectConfig(project_dir=tmp_path)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def reconciler(
    fake_platform: FakePlatformClient,
    project_config: ProjectConfig,
    fixed_now: datetime,
) -> ResourceReconciler:
    return ResourceReconciler(
        platform=fake_platform,
        project=project_config,
        clock=lambda: fixed_now,
    )
