"""
Authenticated request pipeline for the ContactoSMS API

``ApiClient`` ties the pipeline together: it builds and signs a request,
sends it over the shared transport and interprets the response into an
``ApiResponse``. Network and payload failures are reported through the
result; only caller mistakes and cancellation surface as exceptions.
"""

import asyncio
import logging
from typing import Any, Mapping, Optional, Union

from ..config import SmsApiConfig
from ..exceptions import RequestCancelledError, TransportError
from ..signing import HmacSigner, HttpMethod
from .request_builder import PreparedRequest, RequestBuilder
from .response import (
    PARSE_ERROR_DESCRIPTION,
    SERVER_ERROR_CODE,
    TRANSPORT_ERROR_CODE,
    ApiResponse,
    RawResponse,
    ResponseInterpreter,
)
from .sync import SyncRunner
from .transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)

TIMEOUT_DESCRIPTION = "Request timeout"


class ApiClient:
    """
    Client for signed calls against the ContactoSMS REST API.
    
    The client holds no per-request state. One instance may be shared by any
    number of concurrent calls; they all reuse the same transport.
    """
    
    def __init__(self, config: SmsApiConfig, transport: Optional[Transport] = None):
        """
        Initialize the client.
        
        Args:
            config: Validated client configuration
            transport: Transport to send requests with (one is created from
                the configuration when omitted and closed with the client)
        """
        self.config = config
        self.signer = HmacSigner(config.credential)
        self.builder = RequestBuilder(config.api_url, self.signer)
        self.interpreter = ResponseInterpreter(config.enable_logging)
        
        self._owns_transport = transport is None
        self.transport = transport or HttpxTransport.from_config(config)
        self.runner = SyncRunner()
    
    async def execute(
        self,
        path: str,
        method: Union[HttpMethod, str] = HttpMethod.GET,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        add_params_to_query: bool = False,
        response_type: Any = None,
        timeout: Optional[float] = None,
        cancel_event: Optional[asyncio.Event] = None
    ) -> ApiResponse:
        """
        Execute a signed API request.
        
        Args:
            path: Endpoint path relative to the API URL
            method: HTTP method
            params: Query parameters (always signed)
            body: JSON body (ApiModel, mapping or list)
            add_params_to_query: Append the parameters to the request URL
            response_type: Type the response payload is converted into
            timeout: Per-call timeout in seconds (configured timeout when None)
            cancel_event: Event that aborts the call when set
            
        Returns:
            ApiResponse: Result of the call
            
        Raises:
            ValidationError: If path or method is invalid
            SigningError: If the body or parameters cannot be encoded
            RequestCancelledError: If cancel_event is set before or during the call
        """
        if cancel_event is not None and cancel_event.is_set():
            raise RequestCancelledError()
        
        request = self.builder.build(
            path,
            method=method,
            params=params,
            body=body,
            add_params_to_query=add_params_to_query,
        )
        
        if self.config.enable_logging:
            logger.debug(
                f"{request.method.value} {request.url} "
                f"(key {self.config.credential.masked_api_key}, body {len(request.body)} chars)"
            )
        
        effective_timeout = timeout if timeout is not None else self.config.timeout
        
        try:
            raw = await self._send(request, effective_timeout, cancel_event)
        except TransportError as e:
            if e.timed_out:
                logger.error(f"Request to {request.path} timed out after {effective_timeout}s")
                return ApiResponse.error(TRANSPORT_ERROR_CODE, TIMEOUT_DESCRIPTION, 408)
            logger.error(f"Transport error for {request.path}: {e}")
            return ApiResponse.error(TRANSPORT_ERROR_CODE, str(e), 503)
        except Exception as e:
            logger.exception(f"Unexpected error executing {request.path}")
            return ApiResponse.error(TRANSPORT_ERROR_CODE, str(e), 500)
        
        try:
            result = self.interpreter.interpret(raw, response_type)
        except Exception:
            logger.exception(f"Could not interpret response from {request.path}")
            result = ApiResponse(
                response=raw.text,
                http_code=raw.status_code,
                http_description=raw.reason,
                error_code=SERVER_ERROR_CODE,
                error_description=PARSE_ERROR_DESCRIPTION,
            )
        
        if self.config.enable_logging:
            logger.debug(f"Response {result.http_code} for {request.path}")
        
        return result
    
    async def _send(
        self,
        request: PreparedRequest,
        timeout: float,
        cancel_event: Optional[asyncio.Event]
    ) -> RawResponse:
        if cancel_event is None:
            return await self.transport.send(request, timeout)
        
        send_task = asyncio.ensure_future(self.transport.send(request, timeout))
        cancel_task = asyncio.ensure_future(cancel_event.wait())
        
        try:
            await asyncio.wait({send_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            send_task.cancel()
            cancel_task.cancel()
            raise
        
        if send_task.done():
            cancel_task.cancel()
            return send_task.result()
        
        send_task.cancel()
        try:
            await send_task
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.debug(f"Ignoring error from cancelled request: {e}")
        
        logger.info(f"Request to {request.path} was cancelled")
        raise RequestCancelledError()
    
    def execute_sync(self, path: str, method: Union[HttpMethod, str] = HttpMethod.GET,
                     **kwargs) -> ApiResponse:
        """
        Blocking variant of ``execute``.
        
        Raises:
            RuntimeError: If called from a running event loop
        """
        return self.runner.run(self.execute(path, method, **kwargs))
    
    async def aclose(self) -> None:
        """Close the transport if this client created it"""
        if self._owns_transport:
            await self.transport.aclose()
    
    def close(self) -> None:
        """Blocking variant of ``aclose``; also releases the private event loop"""
        try:
            self.runner.run(self.aclose())
        finally:
            self.runner.close()
    
    async def __aenter__(self) -> 'ApiClient':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
    
    def __enter__(self) -> 'ApiClient':
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
