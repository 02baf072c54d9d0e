"""Project directory configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

PROJECT_DIR_ENV_VAR: Final[str] = "PLACEKEEPER_PROJECT_DIR"


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Root directory that relative asset paths in resource inputs are resolved against."""

    project_dir: Path

    def resolve_project_dir(self) -> Path:
        return self.project_dir.expanduser().resolve()

    def resolve(self, file_path: str | Path) -> Path:
        path = Path(file_path).expanduser()
        if path.is_absolute():
            return path
        return self.resolve_project_dir() / path


def get_project_config(*, project_dir: str | Path | None = None) -> ProjectConfig:
    if project_dir is not None:
        return ProjectConfig(project_dir=Path(project_dir))
    env_dir = os.getenv(PROJECT_DIR_ENV_VAR)
    return ProjectConfig(project_dir=Path(env_dir) if env_dir else Path.cwd())
