"""Shared pytest fixtures for img-cf tests."""

from __future__ import annotations

import pytest

from imgcf.config import reset_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("IMG_CF_REWRITE_URLS", raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def rewrite_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IMG_CF_REWRITE_URLS", "1")
    reset_settings_cache()
