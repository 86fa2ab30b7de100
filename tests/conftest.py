"""Shared fixtures for driftless tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from driftless import Err, Nothing, Ok, Some
from driftless._config import _reset_config
from driftless._logging import clear_log_hooks


@pytest.fixture
def fresh_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start from default configuration and no log hooks, and restore both afterwards."""
    for name in ('DRIFTLESS_LOG_LEVEL', 'DRIFTLESS_JSON_LOGS', 'DRIFTLESS_CLONE_PAYLOADS'):
        monkeypatch.delenv(name, raising=False)
    _reset_config()
    clear_log_hooks()
    yield
    _reset_config()
    clear_log_hooks()


@pytest.fixture
def sample_ok() -> Ok[int]:
    return Ok(42)


@pytest.fixture
def sample_err() -> Err[ValueError]:
    return Err(ValueError('boom'))


@pytest.fixture
def sample_some() -> Some[int]:
    return Some(7)


@pytest.fixture
def sample_nothing():
    return Nothing
