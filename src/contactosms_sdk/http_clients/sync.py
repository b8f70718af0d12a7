"""
Blocking access to the asynchronous pipeline

Every network operation in the SDK is a coroutine. ``SyncRunner`` and
``BlockingProxy`` are the one generic way to call them from synchronous code;
they are meant for legacy call sites and refuse to run inside an event loop.
"""

import asyncio
import functools
import inspect
import logging
import threading
from typing import Any, Awaitable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _ensure_no_running_loop(awaitable: Awaitable) -> None:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return
    
    if inspect.iscoroutine(awaitable):
        awaitable.close()
    raise RuntimeError(
        "Blocking SMS API calls cannot be made from a running event loop; "
        "await the asynchronous method instead"
    )


class SyncRunner:
    """
    Runs coroutines to completion on a private event loop.
    
    The loop is kept between calls so that pooled connections created by one
    call can be reused by the next.
    """
    
    def __init__(self):
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._lock = threading.Lock()
    
    def run(self, awaitable: Awaitable[T]) -> T:
        """
        Block until an awaitable completes and return its result.
        
        Args:
            awaitable: Coroutine or future to wait for
            
        Returns:
            Result of the awaitable
            
        Raises:
            RuntimeError: If called while an event loop is running in this thread
        """
        _ensure_no_running_loop(awaitable)
        
        with self._lock:
            if self._loop is None or self._loop.is_closed():
                self._loop = asyncio.new_event_loop()
            return self._loop.run_until_complete(awaitable)
    
    def close(self) -> None:
        """Close the private loop"""
        with self._lock:
            if self._loop is not None and not self._loop.is_closed():
                self._loop.run_until_complete(self._loop.shutdown_asyncgens())
                self._loop.close()
                logger.debug("Sync runner event loop closed")
            self._loop = None


def run_sync(awaitable: Awaitable[T], runner: Optional[SyncRunner] = None) -> T:
    """
    Block on an awaitable.
    
    Args:
        awaitable: Coroutine to run
        runner: Runner whose loop should be used; a throwaway loop otherwise
        
    Returns:
        Result of the awaitable
    """
    if runner is not None:
        return runner.run(awaitable)
    
    _ensure_no_running_loop(awaitable)
    return asyncio.run(_await(awaitable))


async def _await(awaitable: Awaitable[T]) -> T:
    return await awaitable


class BlockingProxy:
    """
    Exposes the coroutine methods of an object as blocking methods.
    
    Non-coroutine attributes are passed through unchanged.
    """
    
    def __init__(self, target: Any, runner: Optional[SyncRunner] = None):
        self._target = target
        self._runner = runner or SyncRunner()
    
    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._target, name)
        if not inspect.iscoroutinefunction(attr):
            return attr
        
        @functools.wraps(attr)
        def blocking(*args, **kwargs):
            return self._runner.run(attr(*args, **kwargs))
        
        return blocking
    
    def __repr__(self) -> str:
        return f"BlockingProxy({self._target!r})"
