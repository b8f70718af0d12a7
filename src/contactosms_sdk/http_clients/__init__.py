"""
HTTP pipeline for the ContactoSMS Python SDK

Request building, transport, response interpretation and the client that
combines them.
"""

from .response import (
    SUCCESS_CODE,
    SERVER_ERROR_CODE,
    TRANSPORT_ERROR_CODE,
    PARSE_ERROR_DESCRIPTION,
    ApiResponse,
    RawResponse,
    ResponseInterpreter,
)
from .request_builder import (
    JSON_CONTENT_TYPE,
    PreparedRequest,
    RequestBuilder,
)
from .transport import (
    Transport,
    HttpxTransport,
)
from .api_client import ApiClient
from .retry import DEFAULT_RETRY_STATUSES, RetryingApiClient
from .sync import SyncRunner, BlockingProxy, run_sync

__all__ = [
    # Results
    'SUCCESS_CODE',
    'SERVER_ERROR_CODE',
    'TRANSPORT_ERROR_CODE',
    'PARSE_ERROR_DESCRIPTION',
    'ApiResponse',
    'RawResponse',
    'ResponseInterpreter',
    # Requests
    'JSON_CONTENT_TYPE',
    'PreparedRequest',
    'RequestBuilder',
    # Transport
    'Transport',
    'HttpxTransport',
    # Clients
    'ApiClient',
    'DEFAULT_RETRY_STATUSES',
    'RetryingApiClient',
    # Blocking access
    'SyncRunner',
    'BlockingProxy',
    'run_sync',
]
