"""
================================================================================
Booking In-Transit Page Object (Async / Playwright)
================================================================================

Drives the "In Transit" step of a shipment booking.

Highlights:
  - Tab navigation between the In Transit and Proof of Delivery views
  - Status checks on the pending / in-progress step buttons
  - Confirm cycles over the workflow steps of the current stage

All state (which step is pending, which is confirmed) lives in the page and is
only observed through explicit waits. A timeout on any wait propagates as
`WaitTimeoutError`.

================================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Dict

import allure
from loguru import logger

from testsuites.ui_testing.framework.config_loader import ConfigLoader
from testsuites.ui_testing.framework.page_base import PageBase


class TransitStage(str, Enum):
    """Workflow stage whose steps are being confirmed."""

    POL = "pol"
    IN_TRANSIT = "in_transit"
    POD = "pod"
    UNSELECTED = "unselected"
    AMBIGUOUS = "ambiguous"

    @classmethod
    def from_flags(cls, pol: bool, in_transit: bool, pod: bool) -> "TransitStage":
        """
        Resolve the three stage flags.

        Exactly one true flag selects its stage. No flag gives UNSELECTED,
        more than one gives AMBIGUOUS.
        """
        selected = [
            stage
            for stage, flag in ((cls.POL, pol), (cls.IN_TRANSIT, in_transit), (cls.POD, pod))
            if flag
        ]
        if not selected:
            return cls.UNSELECTED
        if len(selected) > 1:
            return cls.AMBIGUOUS
        return selected[0]

    @property
    def confirm_cycles(self) -> int:
        """Number of steps to confirm for this stage."""
        return CONFIRM_CYCLES[self]


# Steps shown per stage: port of loading, in transit, port of discharge
CONFIRM_CYCLES: Dict[TransitStage, int] = {
    TransitStage.POL: 6,
    TransitStage.IN_TRANSIT: 2,
    TransitStage.POD: 4,
    TransitStage.UNSELECTED: 0,
    TransitStage.AMBIGUOUS: 0,
}


class BookingInTransitPage(PageBase):
    """Booking detail page, In Transit step (async)."""

    URL_PATH = "/bookings/{booking_id}"

    PENDING_STATUS_BUTTON = "button.ant-btn.intransit-step-button.sf-button.rounded.pending"
    IN_PROGRESS_STATUS_BUTTON = "button.ant-btn.intransit-step-button.sf-button.rounded.in_progress"
    IN_TRANSIT_TAB_ICON = (
        "div.ant-col.d-flex.justify-content-end.ant-col-xs-5.ant-col-md-2 > span > svg > path"
    )
    POD_TAB_ICON = (
        "div.ant-col.d-flex.justify-content-end.ant-col-xs-1.ant-col-md-1 > span > svg > path"
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Deployments differ in where the booking detail route lives
        self.URL_PATH = ConfigLoader().get("ui.booking_path", self.URL_PATH)

    @allure.step("Open booking {booking_id}")
    async def open(self, booking_id: str) -> "BookingInTransitPage":
        """Navigate to the booking detail page."""
        await self.navigate(booking_id=booking_id)
        await self.wait_for_page_load()
        return self

    @allure.step("Navigate to In Transit tab")
    async def navigate_to_in_transit(self) -> None:
        await self.wait_and_click(self.IN_TRANSIT_TAB_ICON, "In Transit tab")

    @allure.step("Navigate to POD tab")
    async def navigate_to_pod(self) -> None:
        await self.wait_and_click(self.POD_TAB_ICON, "POD tab")

    @allure.step("Verify In Transit step is in progress")
    async def verify_in_transit_completed(self) -> None:
        """
        Assert by waiting: the in-progress status button must become visible
        and clickable. Nothing is clicked.
        """
        await self.wait_until_clickable(self.IN_PROGRESS_STATUS_BUTTON, "In-progress status")

    @allure.step("Start completing the In Transit process")
    async def navigate_to_complete_in_transit_process(self) -> None:
        """Click the pending status button to move the step out of pending."""
        await self.wait_and_click(self.PENDING_STATUS_BUTTON, "Pending status")

    async def tap_to_confirm_this_step_button(
        self,
        pol: bool,
        in_transit: bool,
        pod: bool,
    ) -> int:
        """
        Confirm every step of the stage selected by the flags.

        Args:
            pol: Confirm the port-of-loading steps (6)
            in_transit: Confirm the in-transit steps (2)
            pod: Confirm the port-of-discharge steps (4)

        Returns:
            Number of confirm cycles performed. Zero when no flag or more
            than one flag is set; that case is not an error.
        """
        return await self.confirm_steps(TransitStage.from_flags(pol, in_transit, pod))

    async def confirm_steps(self, stage: TransitStage) -> int:
        """
        Run the confirm cycle for steps 1..N of `stage`, in order.

        Returns:
            Number of confirm cycles performed
        """
        count = stage.confirm_cycles
        if count == 0:
            logger.warning(f"No steps to confirm for stage '{stage.value}'")
            return 0

        with allure.step(f"Confirm {count} steps ({stage.value})"):
            for index in range(1, count + 1):
                await self._confirm_step(index)
        logger.info(f"Confirmed {count} steps for stage '{stage.value}'")
        return count

    async def _confirm_step(self, index: int) -> None:
        # The button disappearing is the signal that the step was accepted
        selector = self.session.step_confirm_selector(index)
        with allure.step(f"Confirm step {index}"):
            await self.wait_and_click(selector, f"Confirm step {index}")
            await self.session.wait_invisible(selector)


InTransitStepDriver = BookingInTransitPage


__all__ = [
    "BookingInTransitPage",
    "InTransitStepDriver",
    "TransitStage",
    "CONFIRM_CYCLES",
]
