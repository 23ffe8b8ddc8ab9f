"""Bridges the synchronous ``analyze_response`` entry point to async discovery."""

import asyncio
from typing import Any, Coroutine, Optional


_discovery_loop: Optional[asyncio.AbstractEventLoop] = None


def discovery_loop() -> asyncio.AbstractEventLoop:
    """Loop reused across sync calls so the discovery client's connections survive."""
    global _discovery_loop
    if _discovery_loop is None or _discovery_loop.is_closed():
        _discovery_loop = asyncio.new_event_loop()
    return _discovery_loop


def inside_event_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def run_blocking(coro: Coroutine) -> Any:
    """Drive ``coro`` to completion from synchronous code.

    Raises RuntimeError (after closing ``coro``) when called while a loop is
    already running in this thread; such callers must await instead.
    """
    if inside_event_loop():
        coro.close()
        raise RuntimeError("Cannot block on discovery inside a running event loop; await it instead.")
    return discovery_loop().run_until_complete(coro)
