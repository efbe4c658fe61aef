"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .booking_in_transit_page import (
    BookingInTransitPage,
    InTransitStepDriver,
    TransitStage,
)

__all__ = [
    "BookingInTransitPage",
    "InTransitStepDriver",
    "TransitStage",
]
