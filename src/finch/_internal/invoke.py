"""Invoke helpers — call sync or async handlers uniformly.

Finch handlers can be ``def`` or ``async def``. Any code that calls a
user-provided handler goes through these helpers so the sync/async
check lives in exactly one place.

Usage::

    from finch._internal.invoke import invoke, invoke_sync

    result = await invoke(handler, ctx, request, params)
    result = invoke_sync(handler, ctx, request, params)
"""

import inspect
from collections.abc import Awaitable
from typing import Any

import anyio


async def _resolve(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


def invoke_sync(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and drive an awaitable result to completion.

    Coroutine handlers run on a fresh event loop via ``anyio.run``, so
    this must not be called from inside a running loop. Use ``invoke``
    there instead.
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = anyio.run(_resolve, result)
    return result
