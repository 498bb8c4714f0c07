"""
Global pytest configuration and fixtures for test isolation.

Cached runtime settings, the run label and the root
logger are process-wide; every test starts from a clean slate.
"""

import logging
import os

import pytest

from configinject.config.settings import get_runtime_settings
from configinject.observability.logging import StructuredFormatter, clear_run_label

# Application keys and runtime knobs a developer shell might have exported
_ENV_KEYS = ("defaultEmail", "numberRetries")
_ENV_PREFIX = "CONFIGINJECT_"


def reset_all_global_state():
    """Drop cached settings and run label."""
    get_runtime_settings.cache_clear()
    clear_run_label()


@pytest.fixture(autouse=True)
def test_isolation(monkeypatch):
    """Per-test isolation from the environment and from earlier tests."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    for key in list(os.environ):
        if key.upper().startswith(_ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)

    root = logging.getLogger()
    saved_level = root.level

    reset_all_global_state()
    yield
    reset_all_global_state()

    # Drop handlers installed by setup_logging
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, StructuredFormatter):
            root.removeHandler(handler)
    root.setLevel(saved_level)


@pytest.fixture
def valid_values():
    """Configuration for Scenario A."""
    return {"defaultEmail": "a@b.com", "numberRetries": "3"}
