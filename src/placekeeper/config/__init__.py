"""Application configuration helpers."""

from __future__ import annotations

from .env import require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging, get_log_level
from .project import ProjectConfig, get_project_config
from .roblox import RobloxConfig, default_roblox_resilience, get_roblox_config

__all__ = [
    "ConfigurationError",
    "MissingConfigurationError",
    "ProjectConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "RobloxConfig",
    "configure_logging",
    "default_roblox_resilience",
    "get_log_level",
    "get_project_config",
    "get_roblox_config",
    "require_env_var",
    "require_env_vars",
]
