"""Fan a finished result out to passive monitors."""

import copy
import inspect
from collections.abc import Callable, Sequence
from typing import Any

import httpx

from courier_sdk._internal.pipeline.models import ApiResponse, RequestOptions


def _copy_options(options: RequestOptions | None) -> RequestOptions | None:
    # The signal is a shared cancellation token and stays shared.
    if options is None:
        return None
    return options.model_copy(
        update={
            "headers": options.headers.copy(),
            "search_params": httpx.QueryParams(options.search_params.multi_items()),
            "body": copy.deepcopy(options.body),
        }
    )


async def run_monitors(
    monitors: Sequence[Callable[[ApiResponse], Any]],
    result: ApiResponse,
    on_error: Callable[[Exception], None] | None = None,
) -> None:
    """Call every monitor with a private copy of the result.

    A monitor that raises is reported through on_error and skipped; it never
    stops the remaining monitors or changes what the caller receives.
    """
    for monitor in list(monitors):
        view = result.model_copy(
            update={
                "body": copy.deepcopy(result.body),
                "headers": result.headers.copy() if result.headers is not None else None,
                "options": _copy_options(result.options),
            }
        )
        try:
            outcome = monitor(view)
            if inspect.isawaitable(outcome):
                await outcome
        except Exception as e:
            if on_error is not None:
                on_error(e)
