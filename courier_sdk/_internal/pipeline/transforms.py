"""Sequential request/response transform pipeline."""

import inspect
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any


class TransformOutcome(Enum):
    """What a transform handed back after being called."""

    NOOP = "noop"
    AWAITABLE = "awaitable"
    CONTINUATION = "continuation"


def classify_outcome(outcome: Any) -> TransformOutcome:
    """Tell apart the three shapes a transform may return.

    An awaitable (e.g. the coroutine of an ``async def`` transform) must be
    awaited, a callable is a second phase to call with the same context, and
    anything else (usually None) is a no-op.
    """
    if outcome is None:
        return TransformOutcome.NOOP
    if inspect.isawaitable(outcome):
        return TransformOutcome.AWAITABLE
    if callable(outcome):
        return TransformOutcome.CONTINUATION
    return TransformOutcome.NOOP


async def run_transforms(transforms: Sequence[Callable[[Any], Any]], context: Any) -> None:
    """Run transforms one after another against a shared mutable context.

    Transform n+1 only starts once transform n, including any awaitable or
    continuation it returned, has completed. Exceptions propagate to the caller.

    Args:
        transforms: Transforms in registration order. Iterated as a snapshot
            taken when the stage starts.
        context: The RequestContext or ApiResponse being transformed.
    """
    for transform in list(transforms):
        outcome = transform(context)
        kind = classify_outcome(outcome)

        if kind is TransformOutcome.AWAITABLE:
            await outcome
        elif kind is TransformOutcome.CONTINUATION:
            follow_up = outcome(context)
            if inspect.isawaitable(follow_up):
                await follow_up
