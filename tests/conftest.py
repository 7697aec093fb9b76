"""Shared fixtures for randid tests."""

import pytest

from randid import reset_default_generator
from randid.constants import ENV_CONFIG_PATH, ENV_MAX_LENGTH, ENV_SECURE, ENV_SEED


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test without RANDID_* or LOG_* variables and with a fresh default generator."""
    for name in (ENV_CONFIG_PATH, ENV_SECURE, ENV_SEED, ENV_MAX_LENGTH, "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_default_generator()
    yield
    reset_default_generator()
