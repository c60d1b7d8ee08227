"""
Root conftest.py — shared fixtures for the gateway package tests.

Fixtures:
  mock_env     — factory for an empty host environment plus overrides
  clean_environ — strips every variable the mapper reads from os.environ
"""
from __future__ import annotations

from typing import Callable

import pytest

from moltbot_gateway.config import ENV_FILE_VAR
from moltbot_gateway.env import (
    AI_GATEWAY_API_KEY,
    AI_GATEWAY_BASE_URL,
    PASSTHROUGH_ENV_VARS,
    RENAMED_ENV_VARS,
)


@pytest.fixture
def mock_env() -> Callable[..., dict[str, str | None]]:
    def _make(overrides: dict[str, str | None] | None = None, **kwargs: str | None) -> dict[str, str | None]:
        env: dict[str, str | None] = {}
        env.update(overrides or {})
        env.update(kwargs)
        return env

    return _make


@pytest.fixture
def clean_environ(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    names = (
        *PASSTHROUGH_ENV_VARS,
        *RENAMED_ENV_VARS,
        AI_GATEWAY_API_KEY,
        AI_GATEWAY_BASE_URL,
        "OPENAI_BASE_URL",
        ENV_FILE_VAR,
    )
    for name in names:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
