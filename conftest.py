"""
Repository-level pytest configuration.

  - Provide safe defaults for local runs (no secrets embedded)
  - Configure Loguru once for the whole session

Values below are placeholders. Real runs set UI_BASE_URL, UI_BOOKING_ID and
UI_STORAGE_STATE from CI/CD secrets.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from testsuites.ui_testing.framework.log_setup import init_logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """
    Set demo-safe environment defaults if not already provided by the user/CI.
    """
    defaults = {
        "UI_BASE_URL": "http://localhost:3000",
        "UI_BOOKING_ID": "BK-DEMO-0001",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    init_logger()
    yield
