"""Structured fan-out helpers on top of asyncio.TaskGroup."""

import asyncio
from collections.abc import Coroutine
from typing import Any


def first_leaf(group: BaseExceptionGroup) -> BaseException:
    """Return the first non-group exception inside a (possibly nested) group."""
    leaf: BaseException = group
    while isinstance(leaf, BaseExceptionGroup):
        leaf = leaf.exceptions[0]
    return leaf


async def run_concurrently(*coros: Coroutine[Any, Any, Any]) -> list[Any]:
    """Run coroutines as sibling tasks and return their results in argument order.

    The first failure cancels the remaining siblings and is re-raised as-is
    (not wrapped in an ExceptionGroup), keeping its own __cause__. Cancelling
    the caller cancels every child.
    """
    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(coro) for coro in coros]
    except ExceptionGroup as group:
        leaf = first_leaf(group)
        raise leaf from leaf.__cause__
    return [task.result() for task in tasks]
