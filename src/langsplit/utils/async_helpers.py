"""Helpers for driving async document sources from synchronous code.

Examples:
    >>> async def fetch_text():
    ...     return "text"
    >>>
    >>> run_async_in_sync_context(fetch_text())
    'text'
"""

import asyncio
import concurrent.futures
from collections.abc import AsyncIterable, Coroutine
from typing import TypeVar

from loguru import logger

T = TypeVar('T')


def run_async_in_sync_context(coro: Coroutine[None, None, T]) -> T:
    """Run a coroutine to completion from synchronous code.

    Without a running event loop the coroutine runs via ``asyncio.run()``.
    Inside a running loop (Jupyter, an async web handler) it runs on a
    fresh loop in a worker thread, since the current loop cannot be
    re-entered.

    Args:
        coro: Coroutine to execute

    Returns:
        The coroutine's return value
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    logger.debug(
        "Detected running event loop. Consider using async methods directly "
        "for better performance."
    )
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(asyncio.run, coro)
        return future.result()


async def collect_text(fragments: AsyncIterable[str]) -> str:
    """Await every fragment of ``fragments`` and join them."""
    parts = []
    async for fragment in fragments:
        parts.append(fragment)
    return "".join(parts)
