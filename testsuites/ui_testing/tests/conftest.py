"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser management, page objects, and failure capture.

Key Features:
- Function-scoped browser/page lifecycle (skips when no browser can launch)
- Booking In-Transit page object fixture bound to a BrowserSession
- Screenshot capture on failure, attached to Allure

================================================================================
"""

import os
from typing import AsyncGenerator

import pytest
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.browser_session import BrowserSession
from testsuites.ui_testing.framework.config_loader import ConfigLoader
from testsuites.ui_testing.pages.booking_in_transit_page import BookingInTransitPage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Browser manager with a started browser.

    Skips the requesting test when Playwright cannot launch the configured
    browser (e.g. browsers not installed with `playwright install`).
    """
    manager = BrowserManager(storage_state=ConfigLoader().get("ui.storage_state"))
    try:
        await manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Browser '{manager.browser_type}' unavailable: {e}")
    yield manager
    await manager.close()


@pytest.fixture
async def page(browser_manager: BrowserManager) -> AsyncGenerator[Page, None]:
    """New page in an isolated browser context."""
    page = await browser_manager.new_page()
    yield page
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def wait_timeout() -> int:
    """Explicit wait budget (ms) for the page session. Override per module."""
    return ConfigLoader().get("ui.wait_timeout", 30000)


@pytest.fixture
async def in_transit_page(
    request,
    page: Page,
    wait_timeout: int,
) -> AsyncGenerator[BookingInTransitPage, None]:
    """
    Provides BookingInTransitPage bound to the test's page.

    On test failure a full-page screenshot and the current URL are attached
    to the Allure report.
    """
    booking_page = BookingInTransitPage(page, session=BrowserSession(page, timeout=wait_timeout))
    yield booking_page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            await booking_page.capture_failure(request.node.name)
        except PlaywrightError as e:
            logger.warning(f"Failed to capture failure details: {e}")


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item for fixture teardown."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def test_data():
    """
    Provides common test data for UI tests.
    """
    return {
        "booking_id": os.getenv("UI_BOOKING_ID", "BK-DEMO-0001"),
    }
