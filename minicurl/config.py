"""Configuration helpers and .env loading for minicurl."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

from dotenv import load_dotenv

from . import __version__

DEFAULT_ENV_FILES: tuple[Path, ...] = (
    Path(".env"),
    Path("config/.env"),
)

TIMEOUT_ENV = "MINICURL_TIMEOUT"
USER_AGENT = f"minicurl/{__version__}"


class ConfigError(ValueError):
    """Raised when a configuration value cannot be interpreted."""


@dataclass(frozen=True)
class ClientConfig:
    """Settings used to build the HTTP session for one invocation."""

    # ``None`` waits for the server indefinitely.
    timeout: Optional[float] = None
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigError("Timeout must be a positive number of seconds")


@lru_cache(maxsize=1)
def load_environment(*, extra_files: Iterable[Path] | None = None) -> dict[str, str]:
    """Load environment variables from .env files once per process."""

    candidates = list(DEFAULT_ENV_FILES)
    if extra_files:
        candidates = [*candidates, *extra_files]

    for path in candidates:
        try:
            if path.exists():
                load_dotenv(path, override=False)
        except OSError:
            continue

    return dict(os.environ)


def _parse_timeout(raw: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{TIMEOUT_ENV} must be a number, got {raw!r}") from exc


def config_from_env(timeout: Optional[float] = None) -> ClientConfig:
    """Build a :class:`ClientConfig`, preferring explicit values over the environment."""

    if timeout is None:
        raw = os.environ.get(TIMEOUT_ENV)
        if raw:
            timeout = _parse_timeout(raw)
    return ClientConfig(timeout=timeout)


__all__ = [
    "ClientConfig",
    "ConfigError",
    "config_from_env",
    "load_environment",
    "DEFAULT_ENV_FILES",
    "TIMEOUT_ENV",
    "USER_AGENT",
]
