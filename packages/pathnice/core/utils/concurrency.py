"""Concurrency helpers."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Iterable
from typing import Any


async def gather_settled(aws: Iterable[Awaitable[Any]]) -> list[Any]:
    """Run ``aws`` concurrently and wait until every one of them has finished.

    Raises the first failure in input order only after all awaitables have
    settled, so no sibling is still running when the caller sees the error.

    Returns:
        Results in input order
    """
    results = await asyncio.gather(*aws, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results
