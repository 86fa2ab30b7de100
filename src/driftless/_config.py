"""Library configuration: DriftlessConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from driftless._logging import configure_logging

__all__ = [
    'DriftlessConfig',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class DriftlessConfig:
    """Configuration for driftless.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render log lines as JSON rather than console output.
        clone_payloads: Deep-copy payloads handed to tap/inspect/trip/rise
            callbacks. When False the callbacks receive the original object.
    """

    log_level: str | None = None
    json_logs: bool = True
    clone_payloads: bool = True


# Global configuration (set by init())
_config: DriftlessConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment.

    Unknown values log a warning and fall back to `default`.
    """
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logging.warning("Unknown %s value '%s', defaulting to %s", name, raw, default)
    return default


def _from_env() -> DriftlessConfig:
    return DriftlessConfig(
        log_level=os.environ.get('DRIFTLESS_LOG_LEVEL') or None,
        json_logs=_env_flag('DRIFTLESS_JSON_LOGS', True),
        clone_payloads=_env_flag('DRIFTLESS_CLONE_PAYLOADS', True),
    )


def init(
    *,
    log_level: str | None = None,
    json_logs: bool | None = None,
    clone_payloads: bool | None = None,
) -> DriftlessConfig:
    """Initialize driftless configuration.

    Explicit arguments win over environment variables:

    - DRIFTLESS_LOG_LEVEL: logging level, unset = no logging setup
    - DRIFTLESS_JSON_LOGS: "true"/"false"
    - DRIFTLESS_CLONE_PAYLOADS: "true"/"false"

    Args:
        log_level: Logging level. Configures structlog when set.
        json_logs: Emit JSON log lines.
        clone_payloads: Deep-copy payloads passed to side-effect callbacks.

    Returns:
        The active DriftlessConfig.

    Example:
        ```python
        import driftless

        driftless.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config

    env = _from_env()
    config = DriftlessConfig(
        log_level=log_level if log_level is not None else env.log_level,
        json_logs=json_logs if json_logs is not None else env.json_logs,
        clone_payloads=clone_payloads if clone_payloads is not None else env.clone_payloads,
    )

    if config.log_level is not None:
        configure_logging(config.log_level, json_output=config.json_logs)

    _config = config
    return config


def get_config() -> DriftlessConfig:
    """Get the active configuration.

    Builds one from the environment, without touching logging, if `init()`
    has not been called.
    """
    global _config
    if _config is None:
        _config = _from_env()
    return _config


def _reset_config() -> None:
    """Drop the active configuration. Used by tests."""
    global _config
    _config = None
