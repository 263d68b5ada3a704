"""
Event loop owned by the Lambda container.

Clients cached for the container lifetime (LangChain chat models and the
httpx pools behind them) stay bound to the loop they first ran on, so every
invocation runs its coroutine on this one loop rather than through
``asyncio.run``, which closes its loop on return.
"""

import asyncio
from typing import Any, Coroutine, TypeVar

T = TypeVar("T")

_loop: asyncio.AbstractEventLoop | None = None


def get_event_loop() -> asyncio.AbstractEventLoop:
    """Container loop, created on first use."""
    global _loop
    if _loop is None or _loop.is_closed():
        _loop = asyncio.new_event_loop()
    return _loop


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run ``coro`` to completion on the container loop."""
    return get_event_loop().run_until_complete(coro)
