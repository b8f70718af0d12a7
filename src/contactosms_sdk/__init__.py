"""
ContactoSMS Python SDK
Signed REST client for the ContactoSMS messaging API
"""

from .version import __version__
from .exceptions import (
    SmsApiError,
    ValidationError,
    ConfigurationError,
    TransportError,
    RequestCancelledError,
)
from .config import (
    SmsApiConfig,
    ProxyConfig,
    load_config_from_file,
    load_config_from_env,
)
from .signing import (
    # Core signing functionality
    HmacSigner,
    create_signer,
    build_canonical_string,
    canonicalize_query,
    serialize_body,
    # Types
    HttpMethod,
    Credential,
    SignatureResult,
    SigningError,
    SigningErrorCodes,
)
from .http_clients import (
    ApiResponse,
    ApiClient,
    RetryingApiClient,
    PreparedRequest,
    RequestBuilder,
    ResponseInterpreter,
    RawResponse,
    Transport,
    HttpxTransport,
    SyncRunner,
    BlockingProxy,
    run_sync,
)
from .services import (
    MessagesService,
    TagsService,
    ShortlinksService,
)
from .models import (
    MessageDirection,
    MessageStatus,
    MessageSentFrom,
    RepeatInterval,
    ContactStatus,
    ShortlinkStatus,
    MessageResponse,
    RecipientResponse,
    ScheduleMessageResponse,
    MessageGroup,
    InboxMessageResponse,
    ActionMessageResponse,
    ContactResponse,
    TagResponse,
    ShortlinkResponse,
    ErrorResponse,
)
from .client import (
    SmsApi,
    BlockingSmsApi,
    create_client,
)

__all__ = [
    '__version__',
    # Client
    'SmsApi',
    'BlockingSmsApi',
    'create_client',
    # Exceptions
    'SmsApiError',
    'ValidationError',
    'ConfigurationError',
    'TransportError',
    'RequestCancelledError',
    'SigningError',
    'SigningErrorCodes',
    # Configuration
    'SmsApiConfig',
    'ProxyConfig',
    'load_config_from_file',
    'load_config_from_env',
    # Signing
    'HmacSigner',
    'create_signer',
    'build_canonical_string',
    'canonicalize_query',
    'serialize_body',
    'HttpMethod',
    'Credential',
    'SignatureResult',
    # Pipeline
    'ApiResponse',
    'ApiClient',
    'RetryingApiClient',
    'PreparedRequest',
    'RequestBuilder',
    'ResponseInterpreter',
    'RawResponse',
    'Transport',
    'HttpxTransport',
    'SyncRunner',
    'BlockingProxy',
    'run_sync',
    # Services
    'MessagesService',
    'TagsService',
    'ShortlinksService',
    # Models
    'MessageDirection',
    'MessageStatus',
    'MessageSentFrom',
    'RepeatInterval',
    'ContactStatus',
    'ShortlinkStatus',
    'MessageResponse',
    'RecipientResponse',
    'ScheduleMessageResponse',
    'MessageGroup',
    'InboxMessageResponse',
    'ActionMessageResponse',
    'ContactResponse',
    'TagResponse',
    'ShortlinkResponse',
    'ErrorResponse',
]
