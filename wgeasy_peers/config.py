"""Configuration management."""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError


# Environment variables
ENV_ENDPOINT = "WGEASY_ENDPOINT"
ENV_USERNAME = "WGEASY_USERNAME"
ENV_PASSWORD = "WGEASY_PASSWORD"
ENV_TIMEOUT = "WGEASY_TIMEOUT"

# HTTP defaults
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "wgeasy-peers/1.0"


@dataclass(frozen=True)
class Settings:
    """Resolved connection settings."""
    endpoint: str
    username: str
    password: str
    timeout: float = DEFAULT_TIMEOUT


def value_or_env(value: Optional[str], env_var: str) -> str:
    """Explicit value wins; otherwise fall back to the environment."""
    if value is not None:
        return value
    return os.getenv(env_var, "")


def _timeout_or_env(timeout: Optional[float]) -> float:
    if timeout is not None:
        return float(timeout)

    raw = os.getenv(ENV_TIMEOUT, "")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{ENV_TIMEOUT} must be a number of seconds, got {raw!r}"
        ) from e


def load_settings(
    endpoint: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Settings:
    """Resolve settings from arguments and WGEASY_* environment variables."""
    resolved_endpoint = value_or_env(endpoint, ENV_ENDPOINT)
    resolved_username = value_or_env(username, ENV_USERNAME)
    resolved_password = value_or_env(password, ENV_PASSWORD)

    missing = []
    if not resolved_endpoint:
        missing.append(f"endpoint (or {ENV_ENDPOINT})")
    if not resolved_password:
        missing.append(f"password (or {ENV_PASSWORD})")
    if missing:
        raise ConfigurationError(
            "missing wg-easy configuration: " + ", ".join(missing),
            {"missing": missing},
        )

    return Settings(
        endpoint=resolved_endpoint,
        username=resolved_username,
        password=resolved_password,
        timeout=_timeout_or_env(timeout),
    )
