"""
High-level client for the ContactoSMS API

``SmsApi`` wires configuration, transport, the request pipeline and the
resource services together. Services are asynchronous; ``blocking()``
returns the same services for synchronous callers.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .config import SmsApiConfig
from .http_clients import ApiClient, BlockingProxy, RetryingApiClient, Transport
from .services import MessagesService, ShortlinksService, TagsService

logger = logging.getLogger(__name__)


class BlockingSmsApi:
    """
    Synchronous view over an ``SmsApi``.
    
    Every coroutine method of the services becomes a blocking call that runs
    on the client's private event loop.
    """
    
    def __init__(self, api: 'SmsApi'):
        runner = api.api_client.runner
        self.messages = BlockingProxy(api.messages, runner)
        self.tags = BlockingProxy(api.tags, runner)
        self.shortlinks = BlockingProxy(api.shortlinks, runner)
        self._api = api
    
    def close(self) -> None:
        self._api.close()
    
    def __enter__(self) -> 'BlockingSmsApi':
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class SmsApi:
    """
    Entry point of the SDK.
    
    One instance should be created per set of credentials and reused; it keeps
    a single connection pool for all calls. Use it either from asynchronous
    code or through ``blocking()``, not both, since pooled connections belong
    to one event loop.
    """
    
    def __init__(
        self,
        config: SmsApiConfig,
        transport: Optional[Transport] = None,
        retry: bool = False
    ):
        """
        Initialize the client.
        
        Args:
            config: Validated client configuration
            transport: Optional transport (an httpx-based one is created otherwise)
            retry: Retry transient failures using the configured attempts and delay
        """
        self.config = config
        self.api_client = ApiClient(config, transport)
        self.client = RetryingApiClient(self.api_client) if retry else self.api_client
        
        self.messages = MessagesService(self.client)
        self.tags = TagsService(self.client)
        self.shortlinks = ShortlinksService(self.client)
        
        logger.info(f"SMS API client initialized for {config.api_url}")
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any], **kwargs) -> 'SmsApi':
        """Create a client from a settings mapping"""
        return cls(SmsApiConfig.from_dict(data), **kwargs)
    
    @classmethod
    def from_file(cls, file_path: Union[str, Path], **kwargs) -> 'SmsApi':
        """Create a client from a JSON settings file"""
        return cls(SmsApiConfig.from_file(file_path), **kwargs)
    
    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **kwargs) -> 'SmsApi':
        """Create a client from ``SMSAPI_*`` environment variables"""
        return cls(SmsApiConfig.from_env(environ), **kwargs)
    
    def blocking(self) -> BlockingSmsApi:
        """Synchronous access to the services"""
        return BlockingSmsApi(self)
    
    async def aclose(self) -> None:
        """Close the transport if this client created it"""
        await self.api_client.aclose()
    
    def close(self) -> None:
        """Blocking variant of ``aclose``"""
        self.api_client.close()
    
    async def __aenter__(self) -> 'SmsApi':
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


def create_client(
    api_key: str,
    secret_key: str,
    api_url: str,
    **config_kwargs
) -> SmsApi:
    """
    Create a client from credentials.
    
    Args:
        api_key: API key
        secret_key: Secret used to sign requests
        api_url: API base URL
        **config_kwargs: Additional ``SmsApiConfig`` fields
        
    Returns:
        SmsApi: Configured client
    """
    config = SmsApiConfig(api_key=api_key, secret_key=secret_key, api_url=api_url, **config_kwargs)
    return SmsApi(config)
