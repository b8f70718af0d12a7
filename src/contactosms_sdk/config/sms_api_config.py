"""
Configuration management for the ContactoSMS Python SDK

Provides the validated client configuration and loaders for dictionaries,
JSON files and environment variables. Loaders accept both the snake_case
names used in Python and the PascalCase names of ``appsettings.json``-style
``SmsApi`` sections.
"""

import json
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import quote, urlparse

from ..exceptions import ConfigurationError
from ..models.base import to_snake_case
from ..signing.types import Credential

SECTION_NAME = "SmsApi"
ENV_PREFIX = "SMSAPI_"

# Alternative spellings accepted by the loaders
_KEY_ALIASES = {
    'timeout_seconds': 'timeout',
    'message_query_timeout_seconds': 'message_query_timeout',
    'api_secret': 'secret_key',
    'secret': 'secret_key',
    'base_url': 'api_url',
    'url': 'api_url',
}


@dataclass(frozen=True)
class ProxyConfig:
    """Outbound proxy settings"""
    address: str
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    
    @property
    def url(self) -> str:
        """Proxy URL with credentials embedded when both are present"""
        if not (self.username and self.password):
            return self.address
        
        parsed = urlparse(self.address)
        netloc = f"{quote(self.username, safe='')}:{quote(self.password, safe='')}@{parsed.netloc}"
        return parsed._replace(netloc=netloc).geturl()


@dataclass
class SmsApiConfig:
    """
    Configuration for a ContactoSMS API client.
    
    Validation runs on construction; an invalid configuration never produces
    a client.
    """
    api_key: str
    secret_key: str = field(repr=False)
    api_url: str
    timeout: float = 30.0
    message_query_timeout: float = 90.0
    enable_logging: bool = False
    verify_ssl: bool = True
    max_retry_attempts: int = 3
    retry_delay_ms: int = 1000
    proxy: Optional[ProxyConfig] = None
    
    def __post_init__(self):
        """Validate configuration"""
        errors = validate_config(self)
        if errors:
            raise ConfigurationError(
                f"Invalid SMS API configuration: {'; '.join(errors)}",
                errors=errors
            )
        
        # Ensure api_url ends with /
        if not self.api_url.endswith('/'):
            self.api_url += '/'
    
    @property
    def credential(self) -> Credential:
        """Immutable credential used to sign requests"""
        return Credential(api_key=self.api_key, secret_key=self.secret_key)
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SmsApiConfig':
        """
        Build configuration from a mapping.
        
        Args:
            data: Flat settings mapping or a mapping holding an ``SmsApi`` section
            
        Returns:
            SmsApiConfig: Validated configuration
            
        Raises:
            ConfigurationError: If settings are missing, malformed or invalid
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("Configuration must be a mapping")
        
        section = data.get(SECTION_NAME, data)
        if not isinstance(section, Mapping):
            raise ConfigurationError(f"{SECTION_NAME} section must be a mapping")
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        
        for raw_key, value in section.items():
            key = to_snake_case(str(raw_key))
            key = _KEY_ALIASES.get(key, key)
            if key not in known:
                continue
            if key == 'proxy':
                value = _parse_proxy(value)
            kwargs[key] = value
        
        missing = [name for name in ('api_key', 'secret_key', 'api_url') if name not in kwargs]
        if missing:
            errors = [f"{name} is required" for name in missing]
            raise ConfigurationError(
                f"Invalid SMS API configuration: {'; '.join(errors)}",
                errors=errors
            )
        
        try:
            return cls(**kwargs)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration format: {e}")
    
    @classmethod
    def from_json(cls, json_string: str) -> 'SmsApiConfig':
        """Load configuration from a JSON string"""
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse configuration JSON: {e}")
        return cls.from_dict(data)
    
    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> 'SmsApiConfig':
        """Load configuration from a JSON file"""
        try:
            with open(Path(file_path), 'r', encoding='utf-8') as f:
                json_string = f.read()
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file: {e}")
        return cls.from_json(json_string)
    
    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        prefix: str = ENV_PREFIX
    ) -> 'SmsApiConfig':
        """
        Load configuration from environment variables.
        
        Recognized variables (with the default prefix): ``SMSAPI_API_KEY``,
        ``SMSAPI_SECRET_KEY``, ``SMSAPI_API_URL``, ``SMSAPI_TIMEOUT``,
        ``SMSAPI_MESSAGE_QUERY_TIMEOUT``, ``SMSAPI_ENABLE_LOGGING``,
        ``SMSAPI_VERIFY_SSL``, ``SMSAPI_MAX_RETRY_ATTEMPTS``,
        ``SMSAPI_RETRY_DELAY_MS``, ``SMSAPI_PROXY_ADDRESS``,
        ``SMSAPI_PROXY_USERNAME``, ``SMSAPI_PROXY_PASSWORD``.
        
        Args:
            environ: Mapping to read from (defaults to ``os.environ``)
            prefix: Variable name prefix
            
        Returns:
            SmsApiConfig: Validated configuration
        """
        environ = os.environ if environ is None else environ
        
        def read(name: str) -> Optional[str]:
            value = environ.get(prefix + name)
            return value if value not in (None, "") else None
        
        data: Dict[str, Any] = {}
        for name in ('api_key', 'secret_key', 'api_url'):
            value = read(name.upper())
            if value is not None:
                data[name] = value
        
        try:
            for name in ('timeout', 'message_query_timeout'):
                value = read(name.upper())
                if value is not None:
                    data[name] = float(value)
            for name in ('max_retry_attempts', 'retry_delay_ms'):
                value = read(name.upper())
                if value is not None:
                    data[name] = int(value)
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric environment value: {e}")
        
        for name in ('enable_logging', 'verify_ssl'):
            value = read(name.upper())
            if value is not None:
                data[name] = value.strip().lower() in ('1', 'true', 'yes', 'on')
        
        address = read('PROXY_ADDRESS')
        if address:
            data['proxy'] = {
                'address': address,
                'username': read('PROXY_USERNAME'),
                'password': read('PROXY_PASSWORD'),
            }
        
        return cls.from_dict(data)


def _parse_proxy(value: Any) -> Optional[ProxyConfig]:
    if value is None or isinstance(value, ProxyConfig):
        return value
    if isinstance(value, str):
        return ProxyConfig(address=value)
    if not isinstance(value, Mapping):
        raise ConfigurationError("Proxy configuration must be a mapping or an address string")
    
    normalized = {to_snake_case(str(k)): v for k, v in value.items()}
    return ProxyConfig(
        address=normalized.get('address') or "",
        username=normalized.get('username'),
        password=normalized.get('password'),
    )


def _is_absolute_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


def validate_config(config: SmsApiConfig) -> List[str]:
    """
    Collect validation errors for a configuration.
    
    Args:
        config: Configuration to check
        
    Returns:
        list: Error messages; empty when the configuration is valid
    """
    errors = []
    
    if not isinstance(config.api_key, str) or not config.api_key.strip():
        errors.append("api_key is required")
    
    if not isinstance(config.secret_key, str) or not config.secret_key.strip():
        errors.append("secret_key is required")
    
    if not isinstance(config.api_url, str) or not config.api_url.strip():
        errors.append("api_url is required")
    elif not _is_absolute_url(config.api_url):
        errors.append("api_url must be a valid absolute URL")
    
    if not isinstance(config.timeout, (int, float)) or config.timeout <= 0:
        errors.append("timeout must be greater than 0")
    
    if not isinstance(config.message_query_timeout, (int, float)) or config.message_query_timeout <= 0:
        errors.append("message_query_timeout must be greater than 0")
    
    if not isinstance(config.max_retry_attempts, int) or config.max_retry_attempts < 0:
        errors.append("max_retry_attempts must be non-negative")
    
    if not isinstance(config.retry_delay_ms, int) or config.retry_delay_ms < 0:
        errors.append("retry_delay_ms must be non-negative")
    
    if config.proxy is not None:
        if not config.proxy.address or not _is_absolute_url(config.proxy.address):
            errors.append("proxy address must be a valid absolute URL")
    
    return errors


def load_config_from_file(file_path: Union[str, Path]) -> SmsApiConfig:
    """Load configuration from a JSON file"""
    return SmsApiConfig.from_file(file_path)


def load_config_from_env(environ: Optional[Mapping[str, str]] = None) -> SmsApiConfig:
    """Load configuration from environment variables"""
    return SmsApiConfig.from_env(environ)
