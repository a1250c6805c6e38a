"""Shared test fixtures and configuration."""

import os

import pytest


TEST_ENV = {
    "FINGERPRINT_INDEX_LOG_LEVEL": "debug",
    "FINGERPRINT_INDEX_LOG_JSON": "true",
    "FINGERPRINT_INDEX_VALIDATE_INPUTS": "true",
    "FINGERPRINT_INDEX_METRICS_ENABLED": "true",
    "FINGERPRINT_INDEX_TRACING_ENABLED": "false",
    "FINGERPRINT_INDEX_LOG_PROGRESS_EVERY": "0",
}


# Set environment variables immediately when conftest.py is loaded
for key, value in TEST_ENV.items():
    os.environ[key] = value

from fingerprint_index.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Apply test defaults and drop any cached settings before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return get_settings()


@pytest.fixture
def quiet_settings() -> Settings:
    """Settings with validation and metrics switched off."""
    return Settings(validate_inputs=False, metrics_enabled=False)
