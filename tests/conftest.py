"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test runs with a clean environment: no LIGHTWAVE_* variables, HOME
pointed at a temporary directory so ~/.config/lightwave/config.yaml never
leaks in from the developer's machine, and the settings cache cleared.
"""

import logging
from collections.abc import Generator
from logging.handlers import RotatingFileHandler

import pytest

from lightwave.core.config import get_settings


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch) -> Generator[None, None, None]:
    """Isolate tests from the user's environment and config files."""
    for name in ("LIGHTWAVE_URL", "LIGHTWAVE_TIMEOUT", "LIGHTWAVE_CONFIG", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_root_logger() -> Generator[None, None, None]:
    """Drop handlers setup_logging attached so they do not outlive the test."""
    yield

    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)
