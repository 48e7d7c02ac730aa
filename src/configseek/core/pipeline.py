"""Step runners threading a value through an ordered list of steps.

Steps are plain callables of the accumulated value. A step that wants to
short-circuit returns its input unchanged, so later steps see the same
value. The two runners differ only in how they pass a value on: directly,
or after awaiting it.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Sequence

    from configseek.core.ports import Step


def run_steps(value: Any, steps: Sequence[Step]) -> Any:
    """Call each step with the previous step's return value.

    Args:
        value: Initial value handed to the first step.
        steps: Callables run strictly in order.

    Returns:
        Whatever the last step returned (value itself if steps is empty).
    """
    for step in steps:
        value = step(value)
    return value


async def run_steps_async(value: Any, steps: Sequence[Step]) -> Any:
    """Like run_steps, but await any awaitable before the next step.

    The initial value may itself be awaitable.
    """
    if inspect.isawaitable(value):
        value = await value
    for step in steps:
        value = step(value)
        if inspect.isawaitable(value):
            value = await value
    return value
