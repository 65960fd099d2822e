"""Enrichment – run independent lookups together, fail as one."""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable

__all__ = ["gather_or_cancel"]


async def gather_or_cancel(*aws: Awaitable[Any]) -> list[Any]:
    """Await *aws* concurrently and return their results in order.

    The first failure cancels every sibling still running and is re-raised
    as is. Cancelling the caller cancels all of them too.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    if not tasks:
        return []
    try:
        await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    finally:
        pending = [t for t in tasks if not t.done()]
        for t in pending:
            t.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    # retrieve every failure so none is reported as never retrieved
    errors = [t.exception() for t in tasks if not t.cancelled()]
    for exc in errors:
        if exc is not None:
            raise exc
    return [t.result() for t in tasks]
