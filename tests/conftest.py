"""Shared pytest fixtures for path-nice tests."""

from __future__ import annotations

import pytest

from pathnice.core import get_path_module, lowpath
from pathnice.core.config import CONFIG_ENV_VAR, reset_app_config_cache
from pathnice.core.factory import PathModule
from pathnice.core.io import FakeFileSystem

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def default_app_config(monkeypatch: pytest.MonkeyPatch):
    """Run every test against the built-in default configuration."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_app_config_cache()
    yield
    reset_app_config_cache()


# ============================================================================
# Filesystem Fixtures
# ============================================================================


@pytest.fixture
def fs() -> FakeFileSystem:
    """Provide fresh FakeFileSystem instance."""
    return FakeFileSystem()


@pytest.fixture
def posix_path(fs: FakeFileSystem) -> PathModule:
    """Provide the POSIX path module bound to the fresh fake filesystem."""
    return get_path_module(lowpath.posix, fs)
