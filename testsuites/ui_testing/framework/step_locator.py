"""
================================================================================
Step Locator
================================================================================

Numbering policy for workflow steps rendered by an Ant Design `Steps` widget.

The confirm control of each step is addressed by its position in the steps
list. Keeping that policy here lets a page switch to a different scheme
(data-testid, aria labels) without touching the page object.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations


# Confirm button inside the description of the Nth `.ant-steps-item`
STEP_CONFIRM_TEMPLATE = (
    "div:nth-child({index}) > div > div.ant-steps-item-content"
    " > div.ant-steps-item-description > div > button"
)


class StepLocator:
    """Maps a 1-based step index to the selector of that step's confirm control."""

    def selector_for(self, index: int) -> str:
        raise NotImplementedError


class NthChildStepLocator(StepLocator):
    """
    Positional step locator based on `:nth-child()`.

    Usage:
        >>> NthChildStepLocator().selector_for(2)
        'div:nth-child(2) > div > div.ant-steps-item-content > ...'
    """

    def __init__(self, template: str = STEP_CONFIRM_TEMPLATE):
        if "{index}" not in template:
            raise ValueError(f"Step template must contain an '{{index}}' field: {template}")
        self.template = template

    def selector_for(self, index: int) -> str:
        # nth-child is 1-based; bool is rejected even though it is an int
        if isinstance(index, bool) or not isinstance(index, int) or index < 1:
            raise ValueError(f"Step index must be a positive integer, got {index!r}")
        return self.template.format(index=index)

    def __repr__(self) -> str:
        return f"NthChildStepLocator(template={self.template!r})"


__all__ = [
    "StepLocator",
    "NthChildStepLocator",
    "STEP_CONFIRM_TEMPLATE",
]
