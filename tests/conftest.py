"""Shared pytest fixtures for taiwan_id tests."""

from __future__ import annotations

import random

import pytest

from taiwan_id.config.settings import TaiwanIdSettings
from taiwan_id.services.ids import IdService


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so generated IDs are reproducible."""
    return random.Random(20240101)


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> TaiwanIdSettings:
    """Default settings, isolated from ``TAIWAN_ID_*`` env vars."""
    monkeypatch.delenv("TAIWAN_ID_VERBOSE", raising=False)
    monkeypatch.delenv("TAIWAN_ID_LOG_JSON", raising=False)
    monkeypatch.delenv("TAIWAN_ID_GENERATOR", raising=False)
    monkeypatch.delenv("TAIWAN_ID_GENERATOR__CATEGORY_DIGITS", raising=False)
    return TaiwanIdSettings()


@pytest.fixture
def service(settings: TaiwanIdSettings, rng: random.Random) -> IdService:
    return IdService(settings, rng=rng)
