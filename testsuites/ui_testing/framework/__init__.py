"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework.

Components:
    - config_loader: YAML + environment configuration
    - log_setup: Loguru sink configuration
    - step_locator: Addressing policy for workflow step controls
    - browser_session: Explicit waits and clicks with a bounded timeout
    - page_base: Base page object for common operations
    - browser_manager: Browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .config_loader import ConfigLoader, ConfigurationError
from .log_setup import init_logger
from .step_locator import NthChildStepLocator, StepLocator
from .browser_session import (
    BrowserSession,
    UITestError,
    WaitCondition,
    WaitTimeoutError,
)
from .page_base import BasePage
from .browser_manager import BrowserManager

__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "init_logger",
    "NthChildStepLocator",
    "StepLocator",
    "BrowserSession",
    "UITestError",
    "WaitCondition",
    "WaitTimeoutError",
    "BasePage",
    "BrowserManager",
]
