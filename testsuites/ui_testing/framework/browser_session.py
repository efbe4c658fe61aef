"""
================================================================================
Browser Session
================================================================================

Explicit-wait primitives over a Playwright page.

Page objects talk to the browser only through this class:
    - wait_visible: element located and visible
    - wait_clickable: element passes Playwright's actionability checks
    - wait_invisible: element hidden or detached
    - click: click the located element
    - step_confirm_selector: confirm control of the Nth workflow step

Every wait is bounded by the session timeout. A Playwright timeout is
re-raised as `WaitTimeoutError`; nothing here retries.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .config_loader import ConfigLoader
from .step_locator import NthChildStepLocator, StepLocator


DEFAULT_WAIT_TIMEOUT_MS = 30000


class UITestError(Exception):
    """Base exception for UI automation failures."""
    pass


class WaitCondition(str, Enum):
    """Predicates a session can wait for."""

    VISIBLE = "visible"
    CLICKABLE = "clickable"
    INVISIBLE = "invisible"
    CLICKED = "clicked"


class WaitTimeoutError(UITestError):
    """
    Raised when a wait predicate does not hold within the session timeout.

    Attributes:
        condition: The predicate that was awaited
        selector: CSS selector of the target element
        timeout_ms: Wait budget that expired
    """

    def __init__(self, condition: WaitCondition, selector: str, timeout_ms: int):
        self.condition = condition
        self.selector = selector
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Timed out after {timeout_ms}ms waiting for '{selector}' "
            f"to be {condition.value}"
        )


class BrowserSession:
    """
    Wait-then-act wrapper around a single Playwright page.

    A session is owned by one test at a time; calls are strictly sequential.

    Usage:
        session = BrowserSession(page, timeout=10000)
        await session.wait_visible("button.submit")
        await session.wait_clickable("button.submit")
        await session.click("button.submit")
    """

    def __init__(
        self,
        page: Page,
        timeout: Optional[int] = None,
        step_locator: Optional[StepLocator] = None,
    ):
        """
        Initialize session.

        Args:
            page: Playwright Page object
            timeout: Wait budget in milliseconds (defaults to `ui.wait_timeout`)
            step_locator: Policy for addressing step confirm controls
        """
        self.page = page
        if timeout is None:
            timeout = ConfigLoader().get("ui.wait_timeout", DEFAULT_WAIT_TIMEOUT_MS)
        self.timeout = int(timeout)
        self.step_locator = step_locator or NthChildStepLocator()

    def locate(self, selector: str) -> Locator:
        """Return a locator for the first element matching `selector`."""
        return self.page.locator(selector).first

    def step_confirm_selector(self, index: int) -> str:
        """Selector of the confirm control of the `index`-th step (1-based)."""
        return self.step_locator.selector_for(index)

    @contextmanager
    def _bounded(
        self,
        condition: WaitCondition,
        selector: str,
        timeout: Optional[int],
    ) -> Iterator[int]:
        budget = self.timeout if timeout is None else int(timeout)
        logger.debug(f"Waiting for '{selector}' to be {condition.value} (timeout={budget}ms)")
        try:
            yield budget
        except PlaywrightTimeoutError as e:
            error = WaitTimeoutError(condition, selector, budget)
            logger.error(str(error))
            raise error from e

    async def wait_visible(self, selector: str, timeout: Optional[int] = None) -> Locator:
        """Wait until the element is attached and visible."""
        locator = self.locate(selector)
        with self._bounded(WaitCondition.VISIBLE, selector, timeout) as budget:
            await locator.wait_for(state="visible", timeout=budget)
        return locator

    async def wait_clickable(self, selector: str, timeout: Optional[int] = None) -> Locator:
        """
        Wait until the element could receive a click.

        A trial click runs the actionability checks (visible, stable, enabled,
        not obscured) and stops short of dispatching the click.
        """
        locator = self.locate(selector)
        with self._bounded(WaitCondition.CLICKABLE, selector, timeout) as budget:
            await locator.click(trial=True, timeout=budget)
        return locator

    async def wait_invisible(self, selector: str, timeout: Optional[int] = None) -> None:
        """Wait until the element is hidden or no longer in the DOM."""
        locator = self.locate(selector)
        with self._bounded(WaitCondition.INVISIBLE, selector, timeout) as budget:
            await locator.wait_for(state="hidden", timeout=budget)

    async def click(self, selector: str, timeout: Optional[int] = None) -> None:
        """Click the element."""
        locator = self.locate(selector)
        with self._bounded(WaitCondition.CLICKED, selector, timeout) as budget:
            await locator.click(timeout=budget)
        logger.debug(f"Clicked: {selector}")


__all__ = [
    "BrowserSession",
    "UITestError",
    "WaitCondition",
    "WaitTimeoutError",
    "DEFAULT_WAIT_TIMEOUT_MS",
]
