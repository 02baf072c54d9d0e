"""Roblox platform configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

ROBLOX_SECURITY_ENV_VAR = "ROBLOSECURITY"
ROBLOX_TIMEOUT_SECONDS = 60.0
ROBLOX_USER_AGENT = "placekeeper"


@dataclass(frozen=True, slots=True)
class RobloxConfig:
    """Holds the session cookie and HTTP settings for the Roblox web APIs."""

    security_cookie: str
    resilience: ResilienceConfig

    def __repr__(self) -> str:
        return f"RobloxConfig(security_cookie=<redacted>, resilience={self.resilience!r})"


def default_roblox_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="roblox",
        timeout_seconds=ROBLOX_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        default_headers={"User-Agent": ROBLOX_USER_AGENT},
    )


def get_roblox_config(*, resilience: ResilienceConfig | None = None) -> RobloxConfig:
    values = require_env_vars((ROBLOX_SECURITY_ENV_VAR,))
    return RobloxConfig(
        security_cookie=values[ROBLOX_SECURITY_ENV_VAR].strip(),
        resilience=resilience or default_roblox_resilience(),
    )
