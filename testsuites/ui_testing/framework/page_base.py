"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to the configured base URL
    - A BrowserSession for explicit waits and clicks
    - The shared "wait visible, wait clickable, click" sequence
    - Screenshot and failure-capture utilities for Allure

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Page

from .browser_session import BrowserSession
from .config_loader import ConfigLoader


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class BookingPage(BasePage):
            URL_PATH = "/bookings"

            async def open_first(self):
                await self.wait_and_click("tr.booking-row", "First booking")
    """

    # Override in subclasses; placeholders are filled by navigate()
    URL_PATH: str = "/"

    def __init__(
        self,
        page: Optional[Page] = None,
        base_url: str = "",
        session: Optional[BrowserSession] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (defaults to `ui.base_url`)
            session: Pre-built session; one is created around `page` if omitted
        """
        if session is None:
            if page is None:
                raise ValueError("Either a page or a session is required")
            session = BrowserSession(page)
        self.session = session
        self.page = page if page is not None else session.page

        config = ConfigLoader()
        if not base_url:
            base_url = config.get("ui.base_url", "http://localhost:3000")
        self.base_url = base_url.rstrip("/")
        self.screenshot_dir = Path(config.get("ui.screenshot_dir", "reports/screenshots"))

    async def navigate(self, wait_for: str = "networkidle", **params: str) -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
            **params: Values for the placeholders in URL_PATH
        """
        await self.navigate_to(self.URL_PATH.format(**params), wait_for=wait_for)

    async def navigate_to(
        self,
        path: str,
        wait_for: str = "networkidle",
    ) -> None:
        """
        Navigate to specific path.

        Args:
            path: URL path to navigate to
            wait_for: Wait condition
        """
        full_url = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path}"):
            await self.page.goto(full_url, wait_until=wait_for)
            logger.debug(f"Navigated to: {full_url}")

    async def wait_for_page_load(
        self,
        state: str = "networkidle",
        timeout: Optional[int] = None,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in milliseconds (defaults to the session timeout)
        """
        if timeout is None:
            timeout = self.session.timeout
        await self.page.wait_for_load_state(state, timeout=timeout)

    # =========================================================================
    # Element Interactions
    # =========================================================================

    async def wait_until_clickable(self, selector: str, description: str = "") -> None:
        """Wait for visibility, then for clickability, of the same element."""
        with allure.step(f"Wait until clickable: {description or selector}"):
            await self.session.wait_visible(selector)
            await self.session.wait_clickable(selector)

    async def wait_and_click(self, selector: str, description: str = "") -> None:
        """
        Wait for the element to be visible and clickable, then click it.

        Args:
            selector: CSS selector of the element
            description: Human-readable name for logs and Allure
        """
        with allure.step(f"Click: {description or selector}"):
            logger.info(f"Clicking: {description or selector}")
            await self.session.wait_visible(selector)
            await self.session.wait_clickable(selector)
            await self.session.click(selector)

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        self.screenshot_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = self.screenshot_dir / f"{name}_{timestamp}.png"

        await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach.file(
                str(filepath),
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves a full-page screenshot and the current URL to Allure.
        """
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )


__all__ = [
    "BasePage",
    "PageBase",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
