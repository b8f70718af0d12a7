"""
HTTP transport for the request pipeline

The transport only moves bytes: it sends a prepared request and hands back
status, headers and body, or raises ``TransportError`` for connectivity and
timeout failures. The default implementation wraps a long-lived
``httpx.AsyncClient`` so the connection pool is shared between calls.
"""

import logging
from typing import Optional, Protocol, TYPE_CHECKING, runtime_checkable

import httpx

from ..exceptions import TransportError
from .request_builder import PreparedRequest
from .response import RawResponse, status_phrase

if TYPE_CHECKING:
    from ..config import SmsApiConfig, ProxyConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Protocol for objects able to send prepared requests"""
    
    async def send(self, request: PreparedRequest, timeout: Optional[float] = None) -> RawResponse:
        """Send a request and return the raw response"""
        ...
    
    async def aclose(self) -> None:
        """Release pooled resources"""
        ...


class HttpxTransport:
    """
    Transport backed by ``httpx.AsyncClient``.
    
    An injected client is used as-is and left open on ``aclose``; a client
    created here is owned and closed by the transport.
    """
    
    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        proxy: Optional['ProxyConfig'] = None
    ):
        """
        Initialize the transport.
        
        Args:
            client: Existing client to reuse (its settings win)
            timeout: Default timeout in seconds for an owned client
            verify_ssl: Whether an owned client verifies certificates
            proxy: Optional proxy for an owned client
        """
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            verify=verify_ssl,
            proxy=proxy.url if proxy else None,
        )
    
    @classmethod
    def from_config(cls, config: 'SmsApiConfig') -> 'HttpxTransport':
        """Create a transport with its own client from client configuration"""
        return cls(
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            proxy=config.proxy,
        )
    
    @property
    def client(self) -> httpx.AsyncClient:
        return self._client
    
    async def send(self, request: PreparedRequest, timeout: Optional[float] = None) -> RawResponse:
        """
        Send a prepared request.
        
        Args:
            request: Signed request
            timeout: Per-call timeout in seconds (client default when None)
            
        Returns:
            RawResponse: Status, headers and body bytes
            
        Raises:
            TransportError: On connection, DNS or timeout failures
        """
        effective_timeout = timeout if timeout is not None else self.timeout
        
        try:
            response = await self._client.request(
                request.method.value,
                request.url,
                headers=dict(request.headers),
                content=request.content,
                timeout=effective_timeout,
            )
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request timeout after {effective_timeout} seconds",
                timed_out=True,
                details={'url': request.url}
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                f"Connection error: {e}",
                details={'url': request.url}
            ) from e
        
        return RawResponse(
            status_code=response.status_code,
            reason=response.reason_phrase or status_phrase(response.status_code),
            headers=tuple(response.headers.multi_items()),
            content=response.content,
        )
    
    async def aclose(self) -> None:
        """Close the underlying client if this transport created it"""
        if self._owns_client:
            await self._client.aclose()
            logger.debug("HTTP transport closed")
    
    async def __aenter__(self) -> 'HttpxTransport':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
