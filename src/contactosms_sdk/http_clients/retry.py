"""
Opt-in retries for the request pipeline

``RetryingApiClient`` wraps an ``ApiClient`` and repeats calls whose result
indicates a transient failure. Every attempt goes back through the builder,
so each one carries a fresh timestamp and signature.
"""

import asyncio
import logging
from typing import Any, Iterable, Optional, Union

from ..signing import HttpMethod
from .api_client import ApiClient
from .response import TRANSPORT_ERROR_CODE, ApiResponse

logger = logging.getLogger(__name__)

DEFAULT_RETRY_STATUSES = (429, 500, 502, 503, 504)


class RetryingApiClient:
    """
    Decorator around ``ApiClient`` that retries transient failures.
    
    A result is retried when it is a transport failure (error code -1) or its
    HTTP status is one of ``retry_statuses``. Cancellation is never retried.
    """
    
    def __init__(
        self,
        inner: ApiClient,
        max_attempts: Optional[int] = None,
        retry_delay_ms: Optional[int] = None,
        retry_statuses: Iterable[int] = DEFAULT_RETRY_STATUSES
    ):
        """
        Initialize the retrying client.
        
        Args:
            inner: Client performing the actual calls
            max_attempts: Retries after the first attempt (config.max_retry_attempts when None)
            retry_delay_ms: Delay between attempts (config.retry_delay_ms when None)
            retry_statuses: HTTP status codes that trigger a retry
        """
        self.inner = inner
        self.max_attempts = inner.config.max_retry_attempts if max_attempts is None else max_attempts
        self.retry_delay_ms = inner.config.retry_delay_ms if retry_delay_ms is None else retry_delay_ms
        self.retry_statuses = frozenset(retry_statuses)
        
        if self.max_attempts < 0:
            raise ValueError("max_attempts must be non-negative")
        if self.retry_delay_ms < 0:
            raise ValueError("retry_delay_ms must be non-negative")
    
    @property
    def config(self):
        return self.inner.config
    
    def should_retry(self, result: ApiResponse) -> bool:
        """Whether a result represents a transient failure"""
        if result.is_ok:
            return False
        return result.error_code == TRANSPORT_ERROR_CODE or result.http_code in self.retry_statuses
    
    async def execute(
        self,
        path: str,
        method: Union[HttpMethod, str] = HttpMethod.GET,
        cancel_event: Optional[asyncio.Event] = None,
        **kwargs: Any
    ) -> ApiResponse:
        """
        Execute a request, retrying transient failures.
        
        Accepts the same arguments as ``ApiClient.execute``.
        
        Returns:
            ApiResponse: Result of the last attempt
        """
        attempt = 0
        while True:
            result = await self.inner.execute(path, method, cancel_event=cancel_event, **kwargs)
            
            if attempt >= self.max_attempts or not self.should_retry(result):
                return result
            
            attempt += 1
            logger.warning(
                f"Retrying {path} after {result.http_code} "
                f"(attempt {attempt} of {self.max_attempts})"
            )
            await self._delay(cancel_event)
    
    async def _delay(self, cancel_event: Optional[asyncio.Event]) -> None:
        delay = self.retry_delay_ms / 1000.0
        if cancel_event is None:
            await asyncio.sleep(delay)
            return
        
        # Wake up early on cancellation; the next execute call raises
        try:
            await asyncio.wait_for(cancel_event.wait(), timeout=delay)
        except asyncio.TimeoutError:
            pass
    
    def execute_sync(self, path: str, method: Union[HttpMethod, str] = HttpMethod.GET,
                     **kwargs) -> ApiResponse:
        """Blocking variant of ``execute``"""
        return self.inner.runner.run(self.execute(path, method, **kwargs))
    
    async def aclose(self) -> None:
        await self.inner.aclose()
    
    def close(self) -> None:
        self.inner.close()
    
    async def __aenter__(self) -> 'RetryingApiClient':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
